"""Input categories and validity error kinds.

InputType covers every element/type the dispatcher understands.
ErrorKind mirrors the native ValidityState flags, so values are the
camelCase names a browser would report.
"""

from __future__ import annotations

from enum import StrEnum


class InputType(StrEnum):
    """Declared type of a form control."""

    TEXT = "text"
    SEARCH = "search"
    TEL = "tel"
    PASSWORD = "password"
    EMAIL = "email"
    URL = "url"
    NUMBER = "number"
    RANGE = "range"
    WEEK = "week"
    MONTH = "month"
    DATE = "date"
    COLOR = "color"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    FILE = "file"
    SELECT = "select"
    TEXTAREA = "textarea"
    HIDDEN = "hidden"
    SUBMIT = "submit"
    IMAGE = "image"
    RESET = "reset"
    BUTTON = "button"


class ErrorKind(StrEnum):
    """Closed set of validity failures."""

    VALUE_MISSING = "valueMissing"
    PATTERN_MISMATCH = "patternMismatch"
    TOO_LONG = "tooLong"
    TYPE_MISMATCH = "typeMismatch"
    RANGE_OVERFLOW = "rangeOverflow"
    RANGE_UNDERFLOW = "rangeUnderflow"
    STEP_MISMATCH = "stepMismatch"


# --- Type groups ---

# Controls that never carry a user-editable value.
ALWAYS_VALID_TYPES: frozenset[InputType] = frozenset(
    {
        InputType.HIDDEN,
        InputType.SUBMIT,
        InputType.IMAGE,
        InputType.RESET,
        InputType.BUTTON,
    }
)

# Types the pattern attribute applies to.
PATTERN_TYPES: frozenset[InputType] = frozenset(
    {
        InputType.TEXT,
        InputType.SEARCH,
        InputType.TEL,
        InputType.PASSWORD,
        InputType.EMAIL,
        InputType.URL,
    }
)

# Types where only the checked state or selection matters for "required".
CHECKABLE_TYPES: frozenset[InputType] = frozenset(
    {InputType.CHECKBOX, InputType.RADIO, InputType.FILE}
)
