"""Exception hierarchy for formcheck.

Construction failures (decimal, calendar) are internal: validators catch
them and report a typeMismatch verdict. UnsupportedInputType signals a
contract violation by the caller and is allowed to propagate.
"""

from __future__ import annotations


class FormcheckError(Exception):
    """Base class for all formcheck exceptions."""


class InvalidDecimal(FormcheckError, ValueError):
    """Raised when a string is not a decimal literal."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid decimal literal: {text!r}")
        self.text = text


class DivisionByZero(FormcheckError, ZeroDivisionError):
    """Raised when dividing a non-zero value by zero."""


class Indeterminate(FormcheckError, ArithmeticError):
    """Raised for 0 / 0."""


class InvalidCalendarPoint(FormcheckError, ValueError):
    """Raised when week/month/date components are out of range."""


class UnsupportedInputType(FormcheckError, TypeError):
    """Raised when the dispatcher is handed a type it does not know."""

    def __init__(self, input_type: object) -> None:
        super().__init__(f"Unsupported input type: {input_type!r}")
        self.input_type = input_type
