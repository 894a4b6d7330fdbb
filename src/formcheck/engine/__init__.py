"""Validity dispatcher: picks and orders the checks for each field.

The engine is synchronous and pure.  Configuration is an explicit
ValidationConfig value captured by the caller at the start of a pass.
"""

from formcheck.engine.dispatcher import check_batch, check_field, check_form
from formcheck.engine.report import ErrorDetail, FormReport, FormSubmission

__all__ = [
    "ErrorDetail",
    "FormReport",
    "FormSubmission",
    "check_batch",
    "check_field",
    "check_form",
]
