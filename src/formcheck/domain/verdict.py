"""Verdict: the pass/fail-with-reason result of validating one field."""

from __future__ import annotations

from pydantic import BaseModel, model_validator

from formcheck.domain.types import ErrorKind


class Verdict(BaseModel):
    """Valid, or Invalid with exactly one error kind and its message.

    Truthiness follows validity so a verdict can stand in for the
    boolean a browser's ``checkValidity()`` returns.
    """

    model_config = {"frozen": True}

    ok: bool = True
    kind: ErrorKind | None = None
    message: str = ""

    @model_validator(mode="after")
    def _kind_matches_ok(self) -> Verdict:
        if self.ok and self.kind is not None:
            raise ValueError("a valid verdict carries no error kind")
        if not self.ok and self.kind is None:
            raise ValueError("an invalid verdict needs an error kind")
        return self

    @classmethod
    def valid(cls) -> Verdict:
        return VALID

    @classmethod
    def invalid(cls, kind: ErrorKind, message: str) -> Verdict:
        return cls(ok=False, kind=kind, message=message)

    def __bool__(self) -> bool:
        return self.ok


VALID = Verdict()
