"""Counter rendering, settings-panel contribution, and asset lists.

Everything the host prints around a limited field comes from here:

- the counter element shown beneath the field,
- the per-field maximum for rich-text fields, recorded in the page's
  :class:`~inputcounter.enforcement.config.ClientConfigBuilder`,
- the extra "Character Limit" setting on rich-text field settings,
- the script and stylesheet to enqueue.

Nothing is rendered on the host's field-group editor screen; counters
there would attach to every field definition being edited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal

from markupsafe import Markup
from pydantic import BaseModel

from inputcounter.config.models import CounterConfig
from inputcounter.config.settings import CounterSettings
from inputcounter.domain.fields import FieldDescriptor, FieldVariant
from inputcounter.domain.normalize import content_length
from inputcounter.enforcement.config import ClientConfigBuilder
from inputcounter.infrastructure.templates import build_template_environment

logger = logging.getLogger(__name__)

FIELD_GROUP_POST_TYPE = "acf-field-group"
LEN_PLACEHOLDER = "%%len%%"
MAX_PLACEHOLDER = "%%max%%"


class RenderContext(BaseModel):
    """Where the host is rendering: the current post's type, if any."""

    model_config = {"frozen": True}

    post_id: int | None = None
    post_type: str | None = None

    @property
    def is_field_group_editor(self) -> bool:
        return bool(self.post_id) and self.post_type == FIELD_GROUP_POST_TYPE


class FieldSetting(BaseModel):
    """One setting the core adds to a field type's settings panel."""

    model_config = {"frozen": True}

    label: str
    instructions: str
    type: str
    name: str


class Asset(BaseModel):
    """A script or stylesheet the host should enqueue."""

    model_config = {"frozen": True}

    handle: str
    src: str
    kind: Literal["script", "style"]
    deps: list[str] = []
    version: str | None = None
    # True when src is a path inside this package; otherwise the host serves it.
    bundled: bool = False


@dataclass(frozen=True)
class CounterFilters:
    """Host/plugin overrides in effect for one render."""

    display: str
    allowed_classes: list[str] = field(default_factory=list)
    allowed_ids: list[str] = field(default_factory=list)
    load_css: bool = True

    @classmethod
    def from_config(cls, config: CounterConfig) -> CounterFilters:
        return cls(
            display=config.display,
            allowed_classes=list(config.allowed_classes),
            allowed_ids=list(config.allowed_ids),
            load_css=config.load_css,
        )


@dataclass(frozen=True)
class RenderedCounter:
    """Markup for one field's counter."""

    field_key: str
    html: str
    length: int
    maximum: int


MAXLENGTH_SETTING = FieldSetting(
    label="Character Limit",
    instructions="Leave blank for no limit",
    type="number",
    name="maxlength",
)


def _intersects(allowed: list[str], present: list[str]) -> bool:
    return bool(set(allowed) & set(present))


class CounterRenderer:
    """Renders counters for limited fields.

    Parameters:
        settings: Counter settings (limited types, assets, template dir).
    """

    def __init__(self, settings: CounterSettings) -> None:
        self._settings = settings
        self._env = build_template_environment("counter", override_dir=settings.template_dir)

    # ------------------------------------------------------------------
    # Eligibility
    # ------------------------------------------------------------------

    @staticmethod
    def should_run(context: RenderContext | None) -> bool:
        """False on the host's field-group editor screen."""
        return context is None or not context.is_field_group_editor

    def is_allowed(self, descriptor: FieldDescriptor, filters: CounterFilters) -> bool:
        """Apply the class/id allow-lists to the field's wrapper.

        With no allow-lists every field is allowed. Otherwise the wrapper
        class tokens must match an allowed class, or failing that, the
        wrapper id must match an allowed id.
        """
        if not filters.allowed_classes and not filters.allowed_ids:
            return True
        if _intersects(filters.allowed_classes, descriptor.wrapper.class_tokens):
            return True
        return _intersects(filters.allowed_ids, descriptor.wrapper.id_tokens)

    def is_eligible(
        self,
        descriptor: FieldDescriptor,
        context: RenderContext | None,
        filters: CounterFilters,
    ) -> bool:
        if not self.should_run(context):
            return False
        if descriptor.variant not in self._settings.counter.limited_types:
            return False
        if not descriptor.is_limited:
            return False
        return self.is_allowed(descriptor, filters)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_display(self, display: str, length: int, maximum: int) -> Markup:
        """Fill the display template's placeholders.

        The template is host-controlled markup; only the count and the
        maximum are substituted.
        """
        count = Markup(self._env.get_template("count.html").render(length=length))
        return Markup(display).replace(LEN_PLACEHOLDER, count).replace(MAX_PLACEHOLDER, str(maximum))

    def render_field(
        self,
        descriptor: FieldDescriptor,
        context: RenderContext | None,
        filters: CounterFilters,
        client_config: ClientConfigBuilder | None = None,
    ) -> RenderedCounter | None:
        """Render the counter for *descriptor*, or None if it gets none.

        Rich-text maxima are also recorded in *client_config*, since the
        rich-text surface has no native length attribute to carry them.
        """
        if not self.is_eligible(descriptor, context, filters):
            return None

        length = content_length(descriptor.value)
        maximum = descriptor.limit

        if descriptor.variant is FieldVariant.WYSIWYG and client_config is not None:
            client_config.add(descriptor.key, maximum)

        display = self.render_display(filters.display, length, maximum)
        html = self._env.get_template("counter.html").render(display=display)
        logger.debug("Rendered counter for %s: %d/%d", descriptor.key, length, maximum)
        return RenderedCounter(field_key=descriptor.key, html=html, length=length, maximum=maximum)

    def field_settings(self, descriptor: FieldDescriptor) -> list[FieldSetting]:
        """Extra settings for the field type's settings panel.

        Plain and multi-line fields already have a native maximum-length
        setting; rich-text fields get one here.
        """
        if descriptor.variant is FieldVariant.WYSIWYG:
            return [MAXLENGTH_SETTING]
        return []

    def asset_manifest(self, context: RenderContext | None, filters: CounterFilters) -> list[Asset]:
        """Scripts and styles to enqueue; empty on the field-group editor.

        Only the stylesheet ships with this package. The script path points
        at the host's own browser binding.
        """
        if not self.should_run(context):
            return []
        cfg = self._settings.assets
        assets = [
            Asset(
                handle="inputcounter",
                src=cfg.script,
                kind="script",
                deps=list(cfg.script_deps),
                version=cfg.version,
            )
        ]
        if filters.load_css:
            assets.append(
                Asset(
                    handle="inputcounter",
                    src=cfg.stylesheet,
                    kind="style",
                    version=cfg.version,
                    bundled=True,
                )
            )
        return assets
