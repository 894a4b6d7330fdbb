"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from formcheck.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="check_field", data={"name": "age"})
        assert result.ok is True
        assert result.op == "check_field"
        assert result.data == {"name": "age"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="FILE_NOT_FOUND", message="No such file")
        result = ServiceResult(ok=False, op="check_file", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "FILE_NOT_FOUND"
        assert result.error.detail == {}

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure(
            "check_file",
            "INVALID",
            "2 invalid field(s)",
            detail={"invalid": 2},
            data={"fields": 3},
            meta={"all_errors": True},
        )
        assert not result.ok
        assert result.error == ServiceError(
            code="INVALID", message="2 invalid field(s)", detail={"invalid": 2}
        )
        assert result.data == {"fields": 3}
        assert result.meta == {"all_errors": True}

    def test_failure_defaults(self) -> None:
        result = ServiceResult.failure("check_file", "PARSE_ERROR", "bad")
        assert result.data == {}
        assert result.meta is None
        assert result.error is not None
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="check_file",
            data={"fields": 2},
            meta={"config": {"sanitize_input": True}},
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "check_file"
        assert parsed["data"]["fields"] == 2
        assert parsed["meta"]["config"]["sanitize_input"] is True

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
