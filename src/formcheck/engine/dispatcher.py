"""Validity dispatcher.

For one field the checks run in a fixed order and the first failure is
returned:

1. disabled fields are always valid;
2. maxlength (better validation only, positive maxlength);
3. select, textarea and button-like types short-circuit to their own check;
4. pattern, for text-like, email and url fields with a non-empty value;
5. the type-specific check, preceded by the required check when the
   field is required, or the required check alone for text-like types.

Batches are evaluated in input order and never short-circuit across
fields in collecting mode.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from formcheck.config.models import ValidationConfig
from formcheck.domain.errors import UnsupportedInputType
from formcheck.domain.fields import FieldDescriptor, RadioGroups
from formcheck.domain.types import (
    ALWAYS_VALID_TYPES,
    CHECKABLE_TYPES,
    PATTERN_TYPES,
    InputType,
)
from formcheck.domain.verdict import VALID, Verdict
from formcheck.engine.report import ErrorDetail, FormReport, FormSubmission
from formcheck.validators import (
    check_color,
    check_date,
    check_email,
    check_max_length,
    check_month,
    check_number,
    check_pattern,
    check_range,
    check_required,
    check_select,
    check_textarea,
    check_url,
    check_week,
)

logger = logging.getLogger(__name__)

ValueCheck = Callable[[FieldDescriptor, ValidationConfig], Verdict]

# Readonly makes these immutable, so they are only checked when editable.
_VALUE_CHECKS: dict[InputType, ValueCheck] = {
    InputType.COLOR: check_color,
    InputType.EMAIL: check_email,
    InputType.URL: check_url,
    InputType.NUMBER: check_number,
    InputType.WEEK: check_week,
    InputType.MONTH: check_month,
    InputType.DATE: check_date,
}

_TEXT_TYPES: frozenset[InputType] = frozenset(
    {InputType.TEXT, InputType.SEARCH, InputType.TEL, InputType.PASSWORD}
)


def check_field(
    field: FieldDescriptor,
    config: ValidationConfig | None = None,
    *,
    radio_groups: RadioGroups | None = None,
) -> Verdict:
    """Validate one field and return its verdict.

    Args:
        field: The control to check.
        config: Validation options; defaults to ``ValidationConfig()``.
        radio_groups: Checked-state lookup for radio groups.  Without it
            a required radio is valid only if it is checked itself.

    Raises:
        UnsupportedInputType: ``field.type`` is not an InputType.
    """
    config = config or ValidationConfig()
    verdict = _dispatch(field, config, radio_groups)
    if not verdict:
        logger.debug(
            "Field %r (%s) invalid: %s %s", field.name, field.type, verdict.kind, verdict.message
        )
    return verdict


def _dispatch(
    field: FieldDescriptor,
    config: ValidationConfig,
    radio_groups: RadioGroups | None,
) -> Verdict:
    kind = field.type
    if not isinstance(kind, InputType):
        raise UnsupportedInputType(kind)

    if field.disabled:
        return VALID

    if config.use_better_validation and field.max_length is not None and field.max_length > 0:
        verdict = check_max_length(field)
        if not verdict:
            return verdict

    if kind is InputType.SELECT:
        if field.required and not field.readonly:
            return check_select(field)
        return VALID
    if kind is InputType.TEXTAREA:
        return check_textarea(field)
    if kind in ALWAYS_VALID_TYPES:
        return VALID

    if kind in PATTERN_TYPES and field.pattern and field.value != "":
        verdict = check_pattern(field, config)
        if not verdict:
            return verdict

    if kind in CHECKABLE_TYPES:
        if field.required:
            return check_required(field, config, radio_groups)
        return VALID

    if kind is InputType.RANGE:
        # Range stays checkable when readonly.
        return _check_value(field, config, check_range, radio_groups)

    check = _VALUE_CHECKS.get(kind)
    if check is not None:
        if field.readonly:
            return VALID
        return _check_value(field, config, check, radio_groups)

    if kind in _TEXT_TYPES:
        if field.required and not field.readonly:
            return check_required(field, config, radio_groups)
        return VALID

    raise UnsupportedInputType(kind)


def _check_value(
    field: FieldDescriptor,
    config: ValidationConfig,
    check: ValueCheck,
    radio_groups: RadioGroups | None,
) -> Verdict:
    """Run a type check when the field is required or has a value."""
    if not field.required and len(field.value) == 0:
        return VALID
    if field.required:
        verdict = check_required(field, config, radio_groups)
        if not verdict:
            return verdict
    return check(field, config)


def check_batch(
    fields: Iterable[FieldDescriptor],
    config: ValidationConfig | None = None,
    collect_errors: bool = False,
) -> Verdict | list[ErrorDetail]:
    """Validate several fields in input order.

    Radio groups are resolved across the whole batch.

    Returns:
        Without *collect_errors*, the first invalid verdict or VALID.
        With it, one ErrorDetail per invalid field, in input order
        (empty when everything is valid).
    """
    config = config or ValidationConfig()
    batch = list(fields)
    groups = RadioGroups.from_fields(batch)

    if not collect_errors:
        for field in batch:
            verdict = check_field(field, config, radio_groups=groups)
            if not verdict:
                return verdict
        return VALID

    return _collect_errors(batch, config, groups)


def _collect_errors(
    fields: list[FieldDescriptor], config: ValidationConfig, groups: RadioGroups
) -> list[ErrorDetail]:
    errors: list[ErrorDetail] = []
    for field in fields:
        verdict = check_field(field, config, radio_groups=groups)
        if not verdict:
            errors.append(ErrorDetail.from_verdict(field, verdict))
    logger.debug("Checked %d fields, %d invalid", len(fields), len(errors))
    return errors


def check_form(submission: FormSubmission, config: ValidationConfig | None = None) -> FormReport:
    """Validate a form the way a submit would.

    ``novalidate`` on the form or ``formnovalidate`` on the submitter
    skips validation entirely; the report is then valid and marked skipped.
    """
    if submission.skips_validation:
        logger.debug("Form validation skipped (novalidate/formnovalidate)")
        return FormReport(skipped=True)

    fields = list(submission.fields)
    errors = _collect_errors(fields, config or ValidationConfig(), RadioGroups.from_fields(fields))
    return FormReport(is_error=bool(errors), errors=tuple(errors))
