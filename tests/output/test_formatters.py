"""Tests for the format_result dispatcher and OutputSettings."""

import json

from inputcounter.output.formatters import OutputSettings, format_result
from inputcounter.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg, detail={"length": 11}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("count", length=5), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "count"
        assert data["data"]["length"] == 5

    def test_json_mode_error(self) -> None:
        output = format_result(_err("validate", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_ok("count", length=5), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["ok"] is True


class TestFormatResultQuiet:
    def test_length(self) -> None:
        assert format_result(_ok("count", length=5), settings=OutputSettings(quiet=True)) == "5"

    def test_count(self) -> None:
        assert format_result(_ok("simulate", count=3), settings=OutputSettings(quiet=True)) == "3"

    def test_other_ops(self) -> None:
        assert format_result(_ok("render", html=""), settings=OutputSettings(quiet=True)) == "OK: render"

    def test_error(self) -> None:
        output = format_result(_err("validate", "too long"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: validate")
        assert "too long" in output


class TestFormatResultRich:
    def test_default_settings(self) -> None:
        output = format_result(_ok("count", length=5, visible="hello"))
        assert "OK" in output
        assert "length: 5" in output
        assert "visible" not in output

    def test_verbose_count(self) -> None:
        output = format_result(_ok("count", length=5, visible="hello"), settings=OutputSettings(verbose=True))
        assert "visible: 'hello'" in output

    def test_validate(self) -> None:
        output = format_result(_ok("validate", valid=True, length=3, maximum=5))
        assert "3 of 5" in output

    def test_render_prints_markup_verbatim(self) -> None:
        html = '<span class="char-count">[b]x[/b]</span>'
        output = format_result(_ok("render", html=html, script="", settings=["maxlength"]))
        assert html in output
        assert "settings: maxlength" in output

    def test_simulate(self) -> None:
        result = _ok("simulate", content="abc", count=3, maximum=3, blocked=["d"])
        output = format_result(result, settings=OutputSettings(verbose=True))
        assert "3 of 3" in output
        assert "blocked: 1" in output
        assert "blocked_keys: d" in output

    def test_simulate_unlimited(self) -> None:
        output = format_result(_ok("simulate", content="ab", count=2, maximum=0, blocked=[]))
        assert "count: 2" in output

    def test_generic_op(self) -> None:
        assert "answer: 42" in format_result(_ok("other", answer=42))

    def test_error(self) -> None:
        output = format_result(_err("validate", "too long"))
        assert "ERROR" in output
        assert "too long" in output
        assert "length" not in output

    def test_error_verbose_detail(self) -> None:
        output = format_result(_err("validate", "too long"), settings=OutputSettings(verbose=True))
        assert "length: 11" in output
