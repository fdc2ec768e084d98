"""Pluggy hook specifications for the host field lifecycle and counter filters.

Host lifecycle hooks are called by the form-building host; the built-in
:class:`~inputcounter.plugins.builtins.counter.CounterPlugin` implements
them. Filter hooks let other plugins restrict or restyle counters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from inputcounter.domain.fields import FieldDescriptor
    from inputcounter.enforcement.config import ClientConfigBuilder
    from inputcounter.services.render import Asset, FieldSetting, RenderContext, RenderedCounter

hookspec = pluggy.HookspecMarker("inputcounter")


class CounterHookSpec:
    """Hook specifications for the inputcounter plugin system."""

    # --- Host field lifecycle -------------------------------------------

    @hookspec(firstresult=True)
    def render_field(
        self,
        field: FieldDescriptor,
        context: RenderContext | None,
        client_config: ClientConfigBuilder | None,
    ) -> RenderedCounter | None:
        """Called after the host renders a field; returns counter markup."""

    @hookspec
    def render_field_settings(self, field: FieldDescriptor) -> list[FieldSetting]:
        """Called when the host renders a field type's settings panel."""

    @hookspec(firstresult=True)
    def validate_value(
        self,
        valid: bool | str,
        value: str | None,
        field: FieldDescriptor,
    ) -> bool | str | None:
        """Called on submission; a string return is a field-level error."""

    @hookspec(firstresult=True)
    def enqueue_assets(self, context: RenderContext | None) -> list[Asset] | None:
        """Called when the host enqueues input scripts and styles."""

    # --- Filters ---------------------------------------------------------

    @hookspec
    def counter_classes(self) -> list[str] | None:
        """Wrapper classes allowed to carry a counter."""

    @hookspec
    def counter_ids(self) -> list[str] | None:
        """Wrapper ids allowed to carry a counter."""

    @hookspec(firstresult=True)
    def counter_display(self, display: str) -> str | None:
        """Override the display template (keep ``%%len%%`` and ``%%max%%``)."""

    @hookspec(firstresult=True)
    def counter_load_css(self) -> bool | None:
        """Return False to skip the bundled stylesheet."""
