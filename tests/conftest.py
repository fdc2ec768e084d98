"""Shared pytest fixtures and test helpers for inputcounter tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from inputcounter.config.settings import CounterSettings
from inputcounter.domain.fields import FieldDescriptor, FieldVariant, FieldWrapper
from inputcounter.enforcement.adapter import MemoryCounter, MemorySurface
from inputcounter.plugins.manager import PluginManager, create_plugin_manager


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with no config file and no env overrides."""
    monkeypatch.delenv("INPUTCOUNTER_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> CounterSettings:
    """Default settings rooted at an empty temp directory."""
    return CounterSettings.from_cli(project_root=project_root)


@pytest.fixture
def plugin_manager(settings: CounterSettings) -> PluginManager:
    """Plugin manager with only the built-in counter plugin registered."""
    return create_plugin_manager(settings, discover=False)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so config discovery finds nothing.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture
def surface() -> MemorySurface:
    return MemorySurface()


@pytest.fixture
def counter() -> MemoryCounter:
    return MemoryCounter()


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def _make_field(
    variant: FieldVariant | str = FieldVariant.TEXT,
    *,
    key: str = "field_1",
    maxlength: int | None = 10,
    value: str = "",
    css_class: str = "",
    wrapper_id: str = "",
) -> FieldDescriptor:
    """Build a FieldDescriptor with sensible defaults."""
    return FieldDescriptor(
        key=key,
        variant=FieldVariant(variant),
        maxlength=maxlength,
        value=value,
        wrapper=FieldWrapper(css_class=css_class, id=wrapper_id),
    )


@pytest.fixture
def make_field() -> Callable[..., FieldDescriptor]:
    """Factory fixture for field descriptors."""
    return _make_field
