"""Exact decimal arithmetic for step and range checks.

Binary floating point cannot represent most decimal fractions, so
``(value - min) % step`` computed on floats reports spurious step
mismatches (``0.3 % 0.1 != 0``).  BigDecimal keeps every value as a
signed integer coefficient scaled by a power of ten and performs all
arithmetic on Python integers, which are unbounded.

INVARIANT: instances are normalized.  The coefficient carries no
trailing zeros and zero is always ``BigDecimal(1, 0, 0)``, so comparing
fields is the same as comparing values.  Integral values hash like the
equal ``int``.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import IntEnum

from formcheck.domain.errors import DivisionByZero, Indeterminate, InvalidDecimal

_DECIMAL_LITERAL = re.compile(
    r"(?P<sign>-)?(?P<int>[0-9]+)(?:\.(?P<frac>[0-9]+))?(?:[eE](?P<exp>[+-]?[0-9]+))?"
)

# Exponent (of the most significant digit) at or beyond which to_string()
# switches to exponential notation.  Same thresholds as ECMAScript numbers.
TO_EXP_NEG = -7
TO_EXP_POS = 21

# Default precision for the ``/`` operator.
DEFAULT_DECIMAL_PLACES = 20


class RoundingMode(IntEnum):
    """Rounding applied when a result has more digits than requested."""

    ROUND_DOWN = 0
    ROUND_HALF_UP = 1
    ROUND_HALF_EVEN = 2


def _round_quotient(quotient: int, remainder: int, divisor: int, mode: RoundingMode) -> int:
    """Round a non-negative integer quotient given its remainder."""
    if mode is RoundingMode.ROUND_DOWN or remainder == 0:
        return quotient
    twice = 2 * remainder
    if mode is RoundingMode.ROUND_HALF_UP:
        return quotient + 1 if twice >= divisor else quotient
    if twice > divisor or (twice == divisor and quotient % 2 == 1):
        return quotient + 1
    return quotient


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class BigDecimal:
    """Arbitrary-precision signed decimal.

    The value is ``sign * coefficient * 10 ** exponent`` where *exponent*
    is the power of ten of the least significant digit.

    Attributes:
        sign: ``1`` or ``-1``.
        coefficient: Non-negative integer holding the significant digits.
        exponent: Power of ten of the last digit of *coefficient*.
    """

    sign: int = 1
    coefficient: int = 0
    exponent: int = 0

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"sign must be 1 or -1, got {self.sign!r}")
        if self.coefficient < 0:
            raise ValueError("coefficient must be non-negative")

        coefficient, exponent = self.coefficient, self.exponent
        if coefficient == 0:
            object.__setattr__(self, "sign", 1)
            object.__setattr__(self, "exponent", 0)
            return
        while coefficient % 10 == 0:
            coefficient //= 10
            exponent += 1
        object.__setattr__(self, "coefficient", coefficient)
        object.__setattr__(self, "exponent", exponent)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> BigDecimal:
        """Build a BigDecimal from a decimal literal.

        Accepts ``-?digits(.digits)?(e[+-]?digits)?``; the exponent marker is
        case-insensitive.  Anything else raises :class:`InvalidDecimal`.

        Examples:
            >>> str(BigDecimal.parse("0.10"))
            '0.1'
            >>> str(BigDecimal.parse("-1.5e3"))
            '-1500'
        """
        if not isinstance(text, str):
            raise InvalidDecimal(text)
        match = _DECIMAL_LITERAL.fullmatch(text)
        if match is None:
            raise InvalidDecimal(text)

        frac = match.group("frac") or ""
        exp = int(match.group("exp") or 0)
        return cls(
            sign=-1 if match.group("sign") else 1,
            coefficient=int(match.group("int") + frac),
            exponent=exp - len(frac),
        )

    @classmethod
    def from_int(cls, value: int) -> BigDecimal:
        return cls(sign=-1 if value < 0 else 1, coefficient=abs(value), exponent=0)

    @classmethod
    def _from_signed(cls, value: int, exponent: int) -> BigDecimal:
        return cls(sign=-1 if value < 0 else 1, coefficient=abs(value), exponent=exponent)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.coefficient == 0

    @property
    def is_negative(self) -> bool:
        return self.sign < 0 and not self.is_zero

    @property
    def is_integer(self) -> bool:
        """True when the value has no fractional part."""
        return self.exponent >= 0

    @property
    def digits(self) -> tuple[int, ...]:
        """Coefficient digits, most significant first (``(0,)`` for zero)."""
        return tuple(int(ch) for ch in str(self.coefficient))

    @property
    def adjusted(self) -> int:
        """Power of ten of the most significant digit."""
        if self.is_zero:
            return 0
        return self.exponent + len(str(self.coefficient)) - 1

    def _signed(self) -> int:
        return self.sign * self.coefficient

    def _aligned(self, other: BigDecimal) -> tuple[int, int, int]:
        """Return both signed coefficients scaled to a common exponent."""
        exponent = min(self.exponent, other.exponent)
        a = self._signed() * 10 ** (self.exponent - exponent)
        b = other._signed() * 10 ** (other.exponent - exponent)
        return a, b, exponent

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def compare(self, other: BigDecimal) -> int:
        """Return -1, 0 or 1 as *self* is less than, equal to or greater than *other*."""
        if self.is_zero or other.is_zero:
            if self.is_zero and other.is_zero:
                return 0
            return -other.sign if self.is_zero else self.sign
        if self.sign != other.sign:
            return self.sign
        a, b, _ = self._aligned(other)
        return (a > b) - (a < b)

    def compare_magnitude(self, other: BigDecimal) -> int:
        """Compare absolute values."""
        return self.abs().compare(other.abs())

    def negate(self) -> BigDecimal:
        return BigDecimal(-self.sign, self.coefficient, self.exponent)

    def abs(self) -> BigDecimal:
        return BigDecimal(1, self.coefficient, self.exponent)

    def add(self, other: BigDecimal) -> BigDecimal:
        a, b, exponent = self._aligned(other)
        return BigDecimal._from_signed(a + b, exponent)

    def subtract(self, other: BigDecimal) -> BigDecimal:
        return self.add(other.negate())

    def multiply(self, other: BigDecimal) -> BigDecimal:
        return BigDecimal(
            sign=self.sign * other.sign,
            coefficient=self.coefficient * other.coefficient,
            exponent=self.exponent + other.exponent,
        )

    def divide(
        self,
        other: BigDecimal,
        max_decimal_places: int = DEFAULT_DECIMAL_PLACES,
        rounding: RoundingMode = RoundingMode.ROUND_HALF_UP,
    ) -> BigDecimal:
        """Divide, keeping at most *max_decimal_places* fractional digits.

        Raises:
            Indeterminate: Both operands are zero.
            DivisionByZero: Only the divisor is zero.
        """
        if max_decimal_places < 0:
            raise ValueError("max_decimal_places must be >= 0")
        if other.is_zero:
            if self.is_zero:
                raise Indeterminate("0 / 0 is indeterminate")
            raise DivisionByZero(f"{self} / 0")
        if self.is_zero:
            return BigDecimal()

        numerator, denominator = self.coefficient, other.coefficient
        shift = self.exponent - other.exponent + max_decimal_places
        if shift >= 0:
            numerator *= 10**shift
        else:
            denominator *= 10**-shift

        quotient, remainder = divmod(numerator, denominator)
        quotient = _round_quotient(quotient, remainder, denominator, rounding)
        return BigDecimal(self.sign * other.sign, quotient, -max_decimal_places)

    def modulo(self, other: BigDecimal) -> BigDecimal:
        """Truncated remainder: the result takes the sign of the dividend.

        When ``|other| > |self|`` the dividend is returned unchanged;
        otherwise ``self - trunc(self / other) * other``.
        """
        if other.is_zero:
            raise DivisionByZero(f"{self} % 0")
        if other.compare_magnitude(self) > 0:
            return self
        quotient = self.divide(other, 0, RoundingMode.ROUND_DOWN)
        return self.subtract(quotient.multiply(other))

    def round(
        self,
        decimal_places: int = 0,
        rounding: RoundingMode = RoundingMode.ROUND_HALF_UP,
    ) -> BigDecimal:
        """Round to *decimal_places* fractional digits."""
        if decimal_places < 0:
            raise ValueError("decimal_places must be >= 0")
        if self.exponent >= -decimal_places:
            return self
        divisor = 10 ** (-decimal_places - self.exponent)
        quotient, remainder = divmod(self.coefficient, divisor)
        quotient = _round_quotient(quotient, remainder, divisor, rounding)
        return BigDecimal(self.sign, quotient, -decimal_places)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def to_string(self, exp_neg: int = TO_EXP_NEG, exp_pos: int = TO_EXP_POS) -> str:
        """Render in normal notation, or exponential outside the thresholds."""
        if self.is_zero:
            return "0"

        digits = str(self.coefficient)
        e = self.adjusted
        if e <= exp_neg or e >= exp_pos:
            mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
            body = f"{mantissa}e{'' if e < 0 else '+'}{e}"
        elif e < 0:
            body = "0." + "0" * (-e - 1) + digits
        else:
            int_len = e + 1
            if int_len >= len(digits):
                body = digits + "0" * (int_len - len(digits))
            else:
                body = f"{digits[:int_len]}.{digits[int_len:]}"
        return f"-{body}" if self.sign < 0 else body

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigDecimal('{self}')"

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, int) and not isinstance(other, bool):
            other = BigDecimal.from_int(other)
        if not isinstance(other, BigDecimal):
            return NotImplemented
        return (self.sign, self.coefficient, self.exponent) == (
            other.sign,
            other.coefficient,
            other.exponent,
        )

    def __hash__(self) -> int:
        if self.is_integer:
            return hash(self._signed() * 10**self.exponent)
        return hash((self.sign, self.coefficient, self.exponent))

    def __lt__(self, other: object) -> bool:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.compare(coerced) < 0

    def __add__(self, other: object) -> BigDecimal:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.add(coerced)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigDecimal:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.subtract(coerced)

    def __rsub__(self, other: object) -> BigDecimal:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced.subtract(self)

    def __mul__(self, other: object) -> BigDecimal:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.multiply(coerced)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> BigDecimal:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.divide(coerced)

    def __mod__(self, other: object) -> BigDecimal:
        coerced = _coerce(other)
        if coerced is None:
            return NotImplemented
        return self.modulo(coerced)

    def __neg__(self) -> BigDecimal:
        return self.negate()

    def __abs__(self) -> BigDecimal:
        return self.abs()


def _coerce(value: object) -> BigDecimal | None:
    if isinstance(value, BigDecimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return BigDecimal.from_int(value)
    if isinstance(value, str):
        return BigDecimal.parse(value)
    return None


ZERO = BigDecimal()
ONE = BigDecimal(1, 1, 0)
