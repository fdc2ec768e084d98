"""Tests for CounterSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from inputcounter.config.models import DEFAULT_DISPLAY
from inputcounter.config.settings import CounterSettings


class TestCounterSettingsDefaults:
    def test_all_defaults(self, project_root: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = CounterSettings.from_cli(project_root=project_root)
        assert settings.project_root == project_root
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.counter.display == DEFAULT_DISPLAY
        assert settings.counter.gate_plain_text is False
        assert settings.counter.limited_types == ["text", "textarea", "wysiwyg"]
        assert settings.assets.script_deps == ["acf-input"]
        assert settings.template_dir is None

    def test_frozen(self, project_root: Path) -> None:
        settings = CounterSettings.from_cli(project_root=project_root)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, project_root: Path) -> None:
        (project_root / "inputcounter.toml").write_text(
            '[counter]\ndisplay = "%%len%%/%%max%%"\nallowed_classes = ["limited"]\n'
            "[assets]\nversion = \"2.0\"\n"
        )
        settings = CounterSettings.from_cli(project_root=project_root)
        assert settings.counter.display == "%%len%%/%%max%%"
        assert settings.counter.allowed_classes == ["limited"]
        assert settings.counter.load_css is True  # default preserved
        assert settings.assets.version == "2.0"

    def test_empty_toml_uses_defaults(self, project_root: Path) -> None:
        (project_root / "inputcounter.toml").write_text("")
        settings = CounterSettings.from_cli(project_root=project_root)
        assert settings.counter.display == DEFAULT_DISPLAY
        assert settings.config_path == (project_root / "inputcounter.toml").resolve()

    def test_explicit_config_path(self, project_root: Path) -> None:
        custom = project_root / "custom" / "counter.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[counter]\ngate_plain_text = true\n")
        settings = CounterSettings.from_cli(config_path=str(custom), project_root=project_root)
        assert settings.counter.gate_plain_text is True
        assert settings.config_path == custom

    def test_project_root_from_config_location(self, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (project_root / "inputcounter.toml").write_text("")
        child = project_root / "sub"
        child.mkdir()
        monkeypatch.chdir(child)
        settings = CounterSettings.from_cli()
        assert settings.project_root == project_root.resolve()

    def test_invalid_toml(self, project_root: Path) -> None:
        (project_root / "inputcounter.toml").write_text("[counter\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CounterSettings.from_cli(project_root=project_root)

    def test_template_dir_relative_to_root(self, project_root: Path) -> None:
        (project_root / "inputcounter.toml").write_text('[templates]\ndirectory = "overrides"\n')
        settings = CounterSettings.from_cli(project_root=project_root)
        assert settings.template_dir == project_root / "overrides"


class TestCliFlags:
    def test_cli_flags_override(self, project_root: Path) -> None:
        settings = CounterSettings.from_cli(project_root=project_root, json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, project_root: Path) -> None:
        (project_root / "inputcounter.toml").write_text("log_json = true\n")
        settings = CounterSettings.from_cli(project_root=project_root, log_json=False)
        assert settings.log_json is False


class TestEnvVars:
    def test_env_overrides_toml(self, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (project_root / "inputcounter.toml").write_text("[counter]\nload_css = true\n")
        monkeypatch.setenv("INPUTCOUNTER_COUNTER__LOAD_CSS", "false")
        settings = CounterSettings.from_cli(project_root=project_root)
        assert settings.counter.load_css is False

    def test_env_flag(self, project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INPUTCOUNTER_QUIET", "true")
        settings = CounterSettings.from_cli(project_root=project_root)
        assert settings.quiet is True
