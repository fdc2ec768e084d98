"""Built-in counter plugin.

Implements the host field-lifecycle hooks: counters on render, the
rich-text "Character Limit" setting, authoritative validation on
submission, and the asset list. Filter hooks from other plugins are
resolved on every call so late-registered plugins take effect.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pluggy

from inputcounter.services.render import CounterRenderer
from inputcounter.services.validation import validate_value as _validate_value

if TYPE_CHECKING:
    from inputcounter.config.settings import CounterSettings
    from inputcounter.domain.fields import FieldDescriptor
    from inputcounter.enforcement.config import ClientConfigBuilder
    from inputcounter.plugins.manager import PluginManager
    from inputcounter.services.render import Asset, FieldSetting, RenderContext, RenderedCounter

hookimpl = pluggy.HookimplMarker("inputcounter")

logger = logging.getLogger(__name__)


class CounterPlugin:
    """Adds counters to limited fields and validates their length."""

    def __init__(self, settings: CounterSettings, plugin_manager: PluginManager) -> None:
        self._settings = settings
        self._pm = plugin_manager
        self._renderer = CounterRenderer(settings)

    @hookimpl
    def render_field(
        self,
        field: FieldDescriptor,
        context: RenderContext | None,
        client_config: ClientConfigBuilder | None,
    ) -> RenderedCounter | None:
        filters = self._pm.resolve_filters(self._settings.counter)
        return self._renderer.render_field(field, context, filters, client_config)

    @hookimpl
    def render_field_settings(self, field: FieldDescriptor) -> list[FieldSetting]:
        return self._renderer.field_settings(field)

    @hookimpl
    def validate_value(
        self,
        valid: bool | str,
        value: str | None,
        field: FieldDescriptor,
    ) -> bool | str:
        result = _validate_value(valid, value, field)
        if result is not valid:
            logger.info("Field %s failed length validation: %s", field.key, result)
        return result

    @hookimpl
    def enqueue_assets(self, context: RenderContext | None) -> list[Asset]:
        filters = self._pm.resolve_filters(self._settings.counter)
        return self._renderer.asset_manifest(context, filters)
