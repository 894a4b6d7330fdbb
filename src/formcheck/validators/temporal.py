"""Week, month and date checks.

All three share one shape: parse the value (``typeMismatch`` on failure),
compare against a well-formed ``max`` then ``min``, then require the
distance from the step base to be a multiple of an integer ``step``.
A malformed ``min`` or ``max`` is ignored, as a browser would.

The step base is ``min`` when valid, otherwise ``max`` when valid,
otherwise the epoch (1970-W01, 1970-01, 1970-01-01).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from formcheck.config.models import ValidationConfig
from formcheck.domain.calendar import (
    EPOCH_DATE,
    EPOCH_MONTH,
    EPOCH_WEEK,
    days_between,
    months_between,
    parse_date,
    parse_month,
    parse_week,
    weeks_between,
)
from formcheck.domain.fields import FieldDescriptor
from formcheck.domain.types import ErrorKind
from formcheck.domain.verdict import Verdict
from formcheck.validators._sanitize import sanitize, sanitize_attribute

_INTEGER_STEP = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _CalendarRules:
    """How one calendar input type parses, orders and spans its points."""

    noun: str
    example: str
    parse: Callable[[str | None], Any]
    span: Callable[[Any, Any], int]
    sort_key: Callable[[Any], Any]
    epoch: Any


WEEK_RULES = _CalendarRules(
    noun="week date",
    example="\"YYYY-'W'WW\"",
    parse=parse_week,
    span=weeks_between,
    sort_key=lambda w: (w.year, w.week),
    epoch=EPOCH_WEEK,
)

MONTH_RULES = _CalendarRules(
    noun="month",
    example='"YYYY-MM"',
    parse=parse_month,
    span=months_between,
    sort_key=lambda m: (m.year, m.month),
    epoch=EPOCH_MONTH,
)

DATE_RULES = _CalendarRules(
    noun="date",
    example='"YYYY-MM-DD"',
    parse=parse_date,
    span=days_between,
    sort_key=lambda d: d.ordinal,
    epoch=EPOCH_DATE,
)


def _integer_step(raw: str | None) -> int | None:
    """Return a positive integer step, or None when the attribute does not set one."""
    if raw is None or _INTEGER_STEP.fullmatch(raw) is None:
        return None
    step = int(raw)
    return step or None


def _check_calendar(
    field: FieldDescriptor, config: ValidationConfig, rules: _CalendarRules
) -> Verdict:
    kind_name = rules.noun.split()[0]
    value = rules.parse(sanitize(field.value, config))
    if value is None:
        return Verdict.invalid(
            ErrorKind.TYPE_MISMATCH,
            f"This is not a valid {kind_name} string. e.g. {rules.example}",
        )

    maximum = rules.parse(sanitize_attribute(field.max, config))
    minimum = rules.parse(sanitize_attribute(field.min, config))
    base = rules.epoch

    if maximum is not None:
        if rules.sort_key(value) > rules.sort_key(maximum):
            return Verdict.invalid(
                ErrorKind.RANGE_OVERFLOW,
                f"This {rules.noun} is past the maximum {rules.noun} ({maximum}).",
            )
        base = maximum

    if minimum is not None:
        if rules.sort_key(value) < rules.sort_key(minimum):
            return Verdict.invalid(
                ErrorKind.RANGE_UNDERFLOW,
                f"This {rules.noun} is sooner than the minimum {rules.noun} ({minimum}).",
            )
        base = minimum

    step = _integer_step(sanitize_attribute(field.step, config))
    if step is not None and rules.span(base, value) % step != 0:
        return Verdict.invalid(
            ErrorKind.STEP_MISMATCH,
            f"This {rules.noun} is not a valid step ({step}) of the base {rules.noun} ({base}).",
        )
    return Verdict.valid()


def check_week(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    return _check_calendar(field, config, WEEK_RULES)


def check_month(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    return _check_calendar(field, config, MONTH_RULES)


def check_date(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    """Dates compare by day ordinal, so overflow and underflow are chronological."""
    return _check_calendar(field, config, DATE_RULES)
