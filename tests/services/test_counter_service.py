"""Tests for CounterService — the operations behind the CLI."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from inputcounter.config.settings import CounterSettings
from inputcounter.domain.fields import FieldDescriptor
from inputcounter.plugins.manager import PluginManager
from inputcounter.services.counter import CounterService
from inputcounter.services.render import FIELD_GROUP_POST_TYPE, RenderContext

MakeField = Callable[..., FieldDescriptor]


@pytest.fixture
def service(settings: CounterSettings, plugin_manager: PluginManager) -> CounterService:
    return CounterService(settings, plugin_manager.hook)


class TestCount:
    def test_visible_length(self, service: CounterService) -> None:
        result = service.count("<p>Hello  world</p>\n")
        assert result.ok
        assert result.op == "count"
        assert result.data == {"length": 11, "visible": "Hello world"}

    def test_empty(self, service: CounterService) -> None:
        assert service.count("").data["length"] == 0


class TestValidate:
    def test_valid(self, service: CounterService) -> None:
        result = service.validate("hello", 5)
        assert result.ok
        assert result.data == {"valid": True, "length": 5, "maximum": 5}

    def test_invalid(self, service: CounterService) -> None:
        result = service.validate("<p>Hello  world</p>\n", 5)
        assert not result.ok
        assert result.data["valid"] is False
        assert result.error is not None
        assert result.error.code == "MAXLENGTH_EXCEEDED"
        assert result.error.message == "Field is 11 characters but must be no more than 5"
        assert result.error.detail == {"length": 11, "maximum": 5}

    def test_zero_is_unlimited(self, service: CounterService) -> None:
        assert service.validate("x" * 50, 0).ok


class TestRender:
    def test_text_field(self, service: CounterService, make_field: MakeField) -> None:
        result = service.render(make_field("text", maxlength=10, value="abc"))
        assert result.ok
        assert result.data["key"] == "field_1"
        assert '<span class="count">3</span> of 10' in result.data["html"]
        assert result.data["script"] == ""
        assert result.data["settings"] == []
        assert result.warnings == []

    def test_rich_text_field(self, service: CounterService, make_field: MakeField) -> None:
        result = service.render(make_field("wysiwyg", key="field_rt", maxlength=20))
        assert result.data["script"] == '<script>var inputcounter_data = {"field_rt": 20};</script>'
        assert result.data["settings"] == ["maxlength"]

    def test_warns_when_nothing_rendered(self, service: CounterService, make_field: MakeField) -> None:
        context = RenderContext(post_id=1, post_type=FIELD_GROUP_POST_TYPE)
        result = service.render(make_field("textarea"), context)
        assert result.ok
        assert result.data["html"] == ""
        assert result.warnings == ["No counter rendered for field_1"]


class TestSimulate:
    def test_multiline_gating(self, service: CounterService, make_field: MakeField) -> None:
        result = service.simulate(make_field("textarea", maxlength=3), list("abcde"))
        assert result.ok
        assert result.data == {"content": "abc", "count": 3, "maximum": 3, "blocked": ["d", "e"]}

    def test_navigation_never_blocked(self, service: CounterService, make_field: MakeField) -> None:
        keys = ["a", "b", "left", "backspace", "c", "ctrl+x"]
        result = service.simulate(make_field("textarea", maxlength=2), keys)
        assert result.data["blocked"] == []
        assert result.data["content"] == "ac"

    def test_plain_text_follows_setting(self, service: CounterService, make_field: MakeField) -> None:
        field = make_field("text", maxlength=2)
        assert service.simulate(field, list("abc")).data["blocked"] == []
        assert service.simulate(field, list("abc"), gate_plain_text=True).data["blocked"] == ["c"]

    def test_rich_text_mode_switch(self, service: CounterService, make_field: MakeField) -> None:
        field = make_field("wysiwyg", maxlength=6, value="<p>Hello</p>")
        result = service.simulate(field, ["!", "mode:markup", "?", "mode:visual"])
        assert result.ok
        assert result.data["blocked"] == ["?"]
        assert result.data["count"] == 6
        assert result.data["content"] == "<p>Hello</p>!"

    def test_mode_switch_needs_rich_text(self, service: CounterService, make_field: MakeField) -> None:
        result = service.simulate(make_field("textarea"), ["mode:markup"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    @pytest.mark.parametrize("token", ["hyper+a", "escape", "mode:source"])
    def test_bad_tokens(self, token: str, service: CounterService, make_field: MakeField) -> None:
        result = service.simulate(make_field("wysiwyg"), [token])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
