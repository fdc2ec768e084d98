"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click, or the host's overrides
  2. Env vars     — ``INPUTCOUNTER_*`` prefix
  3. TOML file    — ``inputcounter.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`inputcounter.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from inputcounter.config.discovery import find_config
from inputcounter.config.models import AssetsConfig, CounterConfig, TemplatesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings read from one ``inputcounter.toml`` file.

    A missing file contributes nothing. A malformed one aborts with a
    :class:`click.ClickException` naming the file.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = self._read(toml_path) if toml_path and toml_path.is_file() else {}

    @staticmethod
    def _read(toml_path: Path) -> dict[str, Any]:
        with toml_path.open("rb") as fh:
            try:
                return tomllib.load(fh)
            except tomllib.TOMLDecodeError as exc:
                import click

                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return dict(self._data)


# Discovered TOML path, visible to settings_customise_sources during __init__.
_tls = threading.local()


class CounterSettings(BaseSettings):
    """Unified settings for the counter core and its CLI.

    Attributes:
        project_root: Directory holding ``inputcounter.toml``, or CWD.
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "INPUTCOUNTER_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    counter: CounterConfig = Field(default_factory=CounterConfig)
    assets: AssetsConfig = Field(default_factory=AssetsConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Init kwargs, then env vars, then TOML; dotenv and secrets are unused."""
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)))

    @property
    def template_dir(self) -> Path | None:
        """User template override directory, resolved against the project root."""
        if not self.templates.directory:
            return None
        path = Path(self.templates.directory)
        return path if path.is_absolute() else self.project_root / path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> CounterSettings:
        """Construct settings from a CLI invocation or host bootstrap.

        Discovers ``inputcounter.toml`` via walk-up (or explicit
        *config_path*), resolves *project_root* from the config file's
        parent directory, and merges flags as highest-priority overrides.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
