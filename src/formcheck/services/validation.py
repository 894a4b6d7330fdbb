"""ValidationService: descriptor files and ad-hoc fields to ServiceResult.

Invalid input is an ordinary outcome here, reported as ``ok=False`` with
error code ``INVALID`` and the verdict details in ``data``.  Problems
with the descriptor file itself use the loader's codes
(``FILE_NOT_FOUND``, ``PARSE_ERROR``, ``INVALID_DESCRIPTOR``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from formcheck.config.models import ValidationConfig
from formcheck.domain.fields import FieldDescriptor
from formcheck.domain.verdict import Verdict
from formcheck.engine import FormSubmission, check_batch, check_field, check_form
from formcheck.infrastructure.loader import DescriptorLoadError, load_submission
from formcheck.services.result import ServiceResult

logger = logging.getLogger(__name__)

INVALID = "INVALID"


def _verdict_payload(verdict: Verdict) -> dict[str, Any]:
    return {
        "valid": verdict.ok,
        "error": str(verdict.kind) if verdict.kind else None,
        "message": verdict.message,
    }


class ValidationService:
    """Runs the engine with one captured ValidationConfig."""

    def __init__(self, config: ValidationConfig | None = None) -> None:
        self._config = config or ValidationConfig()

    @property
    def config(self) -> ValidationConfig:
        return self._config

    def _meta(self, **extra: Any) -> dict[str, Any]:
        return {"config": self._config.model_dump(), **extra}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def check_file(self, path: Path, *, all_errors: bool = False) -> ServiceResult:
        """Load a descriptor file and validate every field in it."""
        op = "check_file"
        try:
            submission = load_submission(path)
        except DescriptorLoadError as exc:
            logger.debug("Could not load %s: %s", path, exc.message)
            return ServiceResult.failure(op, exc.code, exc.message, detail=exc.detail)
        return self.check_submission(submission, all_errors=all_errors, op=op, source=str(path))

    def check_submission(
        self,
        submission: FormSubmission,
        *,
        all_errors: bool = False,
        op: str = "check_submission",
        source: str | None = None,
    ) -> ServiceResult:
        """Validate a whole form.

        With *all_errors* every invalid field is listed; otherwise the
        batch collapses to the first failing verdict.
        """
        data: dict[str, Any] = {"source": source, "fields": len(submission.fields)}

        if all_errors:
            report = check_form(submission, self._config)
            data.update(
                valid=not report.is_error,
                skipped=report.skipped,
                errors=[e.model_dump(mode="json") for e in report.errors],
            )
            invalid = len(report.errors)
        elif submission.skips_validation:
            data.update(valid=True, skipped=True)
            invalid = 0
        else:
            verdict = check_batch(submission.fields, self._config)
            assert isinstance(verdict, Verdict)
            data.update(skipped=False, **_verdict_payload(verdict))
            invalid = 0 if verdict.ok else 1

        logger.info(
            "Checked %s: %d fields, %s",
            source or "submission",
            len(submission.fields),
            "valid" if data["valid"] else "invalid",
        )
        meta = self._meta(all_errors=all_errors)
        if data["valid"]:
            return ServiceResult(ok=True, op=op, data=data, meta=meta)

        message = (
            f"{invalid} invalid field(s)" if all_errors else "Form contains an invalid field"
        )
        return ServiceResult.failure(
            op, INVALID, message, detail={"invalid": invalid}, data=data, meta=meta
        )

    def check_field(self, field: FieldDescriptor) -> ServiceResult:
        """Validate one field on its own (radio groups see only this field)."""
        op = "check_field"
        verdict = check_field(field, self._config)
        data: dict[str, Any] = {"name": field.name, "type": str(field.type), "value": field.value}
        data.update(_verdict_payload(verdict))
        if verdict.ok:
            return ServiceResult(ok=True, op=op, data=data, meta=self._meta())
        return ServiceResult.failure(
            op,
            INVALID,
            field.custom_message or verdict.message,
            detail={"error": str(verdict.kind)},
            data=data,
            meta=self._meta(),
        )
