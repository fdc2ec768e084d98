"""Shared Jinja2 template loading with a user override directory."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def build_template_environment(group: str, *, override_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are looked up both in ``<override_dir>/<group>/`` and in
    ``<override_dir>`` itself, so a flat override directory works too.
    Autoescaping is on; callers pass host-controlled markup as ``Markup``.
    """

    loaders: list[BaseLoader] = []
    if override_dir is not None:
        loaders.append(FileSystemLoader([str(override_dir / group), str(override_dir)]))

    loaders.append(PackageLoader("inputcounter", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), autoescape=True, keep_trailing_newline=False)
