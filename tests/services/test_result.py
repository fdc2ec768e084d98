"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from inputcounter.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="count", data={"length": 5})
        assert result.ok is True
        assert result.op == "count"
        assert result.data == {"length": 5}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="MAXLENGTH_EXCEEDED", message="Field is 11 characters")
        result = ServiceResult(ok=False, op="validate", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "MAXLENGTH_EXCEEDED"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="render", data={"key": "field_1"}, warnings=["w"])
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["op"] == "render"
        assert parsed["data"]["key"] == "field_1"
        assert parsed["warnings"] == ["w"]
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="count")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_with_detail(self) -> None:
        error = ServiceError(code="MAXLENGTH_EXCEEDED", message="too long", detail={"length": 11, "maximum": 5})
        assert error.detail["maximum"] == 5

    def test_default_detail(self) -> None:
        error = ServiceError(code="INVALID_INPUT", message="bad")
        assert error.detail == {}


class TestConstructors:
    def test_success(self) -> None:
        result = ServiceResult.success("count", {"length": 2}, warnings=["w"])
        assert result.ok is True
        assert result.data == {"length": 2}
        assert result.warnings == ["w"]
        assert result.error is None

    def test_success_defaults(self) -> None:
        result = ServiceResult.success("render")
        assert result.data == {}
        assert result.warnings == []

    def test_failure_keeps_data(self) -> None:
        result = ServiceResult.failure(
            "validate",
            "MAXLENGTH_EXCEEDED",
            "too long",
            detail={"length": 11},
            data={"valid": False},
        )
        assert result.ok is False
        assert result.data == {"valid": False}
        assert result.error == ServiceError(code="MAXLENGTH_EXCEEDED", message="too long", detail={"length": 11})
