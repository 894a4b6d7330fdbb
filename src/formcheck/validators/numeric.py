"""Number and range checks on exact decimals.

Step alignment is computed with :class:`BigDecimal` so that values such
as ``0.3`` with ``step="0.1"`` are judged on their decimal value rather
than on a binary approximation.

Step rules, in order:

* ``step="any"`` disables step checking.
* A positive declared step requires ``(value - base) % step == 0``.
* An absent, non-positive or unparseable step means step 1.  With a
  minimum this is the *special step*: the value must differ from the
  minimum by a whole number, so ``min="0.5"`` accepts ``1.5`` but not ``1``.

The base is the minimum when one is declared and ``0`` otherwise.  A
minimum of ``"any"`` or ``""`` is unbounded and never reported as a
bound.  With the default step it anchors at ``value - 1``, so any value
aligns; a declared step is counted from ``0``.
"""

from __future__ import annotations

from dataclasses import dataclass

from formcheck.config.models import ValidationConfig
from formcheck.domain.bignum import ONE, ZERO, BigDecimal
from formcheck.domain.errors import InvalidDecimal
from formcheck.domain.fields import FieldDescriptor
from formcheck.domain.types import ErrorKind
from formcheck.domain.verdict import Verdict
from formcheck.validators._sanitize import sanitize, sanitize_attribute

MSG_NUMBER = "This is not a valid number."

_UNBOUNDED = frozenset({"any", ""})

# Decimal exponent range of IEEE 754 doubles, subnormals included.
MAX_ADJUSTED_EXPONENT = 308
MIN_ADJUSTED_EXPONENT = -324


@dataclass(frozen=True)
class _Bound:
    """A resolved min or max attribute."""

    value: BigDecimal | None = None
    unbounded: bool = False

    @property
    def is_real(self) -> bool:
        return self.value is not None


def parse_number(text: str | None) -> BigDecimal | None:
    """Parse a decimal literal, returning ``None`` instead of raising.

    Literals whose magnitude a double cannot hold (``1e400``) are not
    valid floating-point numbers either.
    """
    if text is None:
        return None
    try:
        number = BigDecimal.parse(text)
    except InvalidDecimal:
        return None
    if not MIN_ADJUSTED_EXPONENT <= number.adjusted <= MAX_ADJUSTED_EXPONENT:
        return None
    return number


def _resolve_bound(raw: str | None, config: ValidationConfig) -> _Bound:
    raw = sanitize_attribute(raw, config)
    if raw is None:
        return _Bound()
    if raw.lower() in _UNBOUNDED:
        return _Bound(unbounded=True)
    return _Bound(value=parse_number(raw))


def _resolve_step(
    raw: str | None, config: ValidationConfig
) -> tuple[BigDecimal | None, bool]:
    """Return the effective step and whether it was declared.

    The step is ``None`` when step checking is off.
    """
    raw = sanitize_attribute(raw, config)
    if raw is not None and raw.lower() == "any":
        return None, True
    step = parse_number(raw)
    if step is None or step.compare(ZERO) <= 0:
        return ONE, False
    return step, True


def check_number(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    """Fail ``typeMismatch``, ``stepMismatch``, ``rangeOverflow`` or ``rangeUnderflow``.

    Step is checked before the bounds, so a value that is both off-grid
    and out of range reports ``stepMismatch``.
    """
    value = parse_number(sanitize(field.value, config))
    if value is None:
        return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_NUMBER)

    minimum = _resolve_bound(field.min, config)
    maximum = _resolve_bound(field.max, config)
    step, declared = _resolve_step(field.step, config)

    if step is not None:
        if minimum.is_real:
            base = minimum.value
        elif minimum.unbounded and not declared:
            base = value.subtract(ONE)
        else:
            base = ZERO
        if not value.subtract(base).modulo(step).is_zero:
            return Verdict.invalid(
                ErrorKind.STEP_MISMATCH, f"This number is not a valid step ({step})."
            )

    if maximum.is_real and value.compare(maximum.value) > 0:
        return Verdict.invalid(
            ErrorKind.RANGE_OVERFLOW, f"This number is larger than the maximum ({maximum.value})."
        )
    if minimum.is_real and value.compare(minimum.value) < 0:
        return Verdict.invalid(
            ErrorKind.RANGE_UNDERFLOW, f"This number is smaller than the minimum ({minimum.value})."
        )
    return Verdict.valid()


def check_range(field: FieldDescriptor, config: ValidationConfig) -> Verdict:
    """A range is a number with a different widget.

    Without better validation any parseable number passes, since a
    browser clamps the slider into range itself.
    """
    if parse_number(sanitize(field.value, config)) is None:
        return Verdict.invalid(ErrorKind.TYPE_MISMATCH, MSG_NUMBER)
    if config.use_better_validation:
        return check_number(field, config)
    return Verdict.valid()
