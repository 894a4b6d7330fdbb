"""Error detail and whole-form report models."""

from __future__ import annotations

from pydantic import BaseModel

from formcheck.domain.fields import FieldDescriptor
from formcheck.domain.types import ErrorKind, InputType
from formcheck.domain.verdict import Verdict


class ErrorDetail(BaseModel):
    """One invalid field, as reported in collecting mode.

    Attributes:
        name: Field name.
        type: Declared input type.
        value: Raw value that failed.
        message: Display text; the caller's custom message when set,
            otherwise the generated message.
        error: Error kind.
        error_message: Generated message, regardless of any custom message.
    """

    model_config = {"frozen": True}

    name: str
    type: InputType
    value: str
    message: str = ""
    error: ErrorKind
    error_message: str = ""

    @classmethod
    def from_verdict(cls, field: FieldDescriptor, verdict: Verdict) -> ErrorDetail:
        if verdict.kind is None:
            raise ValueError("cannot build an error detail from a valid verdict")
        return cls(
            name=field.name,
            type=field.type,
            value=field.value,
            message=field.custom_message or verdict.message or "",
            error=verdict.kind,
            error_message=verdict.message,
        )


class FormSubmission(BaseModel):
    """All controls of one form plus the submit-time opt-outs.

    Attributes:
        fields: Descriptors in document order.
        novalidate: The form carries the ``novalidate`` attribute.
        formnovalidate: The submitter carries ``formnovalidate``.
    """

    model_config = {"frozen": True}

    fields: tuple[FieldDescriptor, ...] = ()
    novalidate: bool = False
    formnovalidate: bool = False

    @property
    def skips_validation(self) -> bool:
        return self.novalidate or self.formnovalidate


class FormReport(BaseModel):
    """Outcome of submitting a form."""

    model_config = {"frozen": True}

    is_error: bool = False
    skipped: bool = False
    errors: tuple[ErrorDetail, ...] = ()
