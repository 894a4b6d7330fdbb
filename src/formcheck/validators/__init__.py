"""Type-specific validators.

Each ``check_*`` function takes a FieldDescriptor (plus the validation
config where sanitization or better validation matters) and returns a
Verdict.  Parse failures become ``typeMismatch`` verdicts; nothing here
raises for malformed input.
"""

from formcheck.validators.formats import check_color, check_email, check_url
from formcheck.validators.numeric import check_number, check_range
from formcheck.validators.temporal import check_date, check_month, check_week
from formcheck.validators.text import (
    check_max_length,
    check_pattern,
    check_required,
    check_select,
    check_textarea,
)

__all__ = [
    "check_color",
    "check_date",
    "check_email",
    "check_max_length",
    "check_month",
    "check_number",
    "check_pattern",
    "check_range",
    "check_required",
    "check_select",
    "check_textarea",
    "check_url",
    "check_week",
]
