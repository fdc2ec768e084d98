"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, inputcounter.toml only
contains overrides. An empty file (or none at all) is a valid setup.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_DISPLAY = "chars: %%len%% of %%max%%"

# --- inputcounter.toml sections ---


class CounterConfig(BaseModel):
    """[counter] section.

    ``allowed_classes`` / ``allowed_ids`` restrict counters to fields
    whose wrapper carries one of the listed tokens. Both empty means
    every limited field gets a counter.
    """

    model_config = {"frozen": True}

    display: str = DEFAULT_DISPLAY
    allowed_classes: list[str] = Field(default_factory=list)
    allowed_ids: list[str] = Field(default_factory=list)
    load_css: bool = True
    gate_plain_text: bool = False
    limited_types: list[str] = Field(default_factory=lambda: ["text", "textarea", "wysiwyg"])


class AssetsConfig(BaseModel):
    """[assets] section.

    ``script`` is the host's browser binding and is not shipped here;
    ``stylesheet`` is a path inside the package.
    """

    model_config = {"frozen": True}

    script: str = "inputcounter.js"
    stylesheet: str = "static/inputcounter.css"
    version: str = "1.5.0"
    script_deps: list[str] = Field(default_factory=lambda: ["acf-input"])


class TemplatesConfig(BaseModel):
    """[templates] section."""

    model_config = {"frozen": True}

    directory: str | None = None

