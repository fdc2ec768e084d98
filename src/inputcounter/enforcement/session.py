"""Enforcement sessions — one per rendered, editable field instance.

A session ties a field to its counter display and the surface(s) it is
edited through. It keeps the counter current as the content changes and
blocks content-producing keystrokes once the visible length reaches the
configured maximum.

One class per field variant, all sharing the same interface:

- ``attach()`` / ``detach()``: bind to or release the active surface.
- ``on_value_changed(content)``: recount and update the display.
- ``on_key_down(event)``: gate a keystroke before it lands.

Client-side gating is a convenience, not a security boundary; the
authoritative check is :func:`inputcounter.services.validation.validate`.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import ClassVar, Self

from inputcounter.domain.fields import FieldDescriptor, FieldVariant
from inputcounter.domain.keys import KeyEvent, max_length_reached
from inputcounter.domain.modes import DEFAULT_MODE, EditorMode, is_valid_transition
from inputcounter.domain.normalize import content_length
from inputcounter.enforcement.adapter import CounterDisplay, EditorSurface, Unsubscribe
from inputcounter.enforcement.config import ClientConfig

logger = logging.getLogger(__name__)


class EnforcementSession:
    """Base session for single-surface fields.

    Attributes:
        descriptor: The field this session enforces.
        display: Counter element for the field.
        maxlength: Maximum resolved at setup; 0 means unlimited.
        gating: Whether keystrokes are gated at all.
    """

    variant: ClassVar[FieldVariant]
    default_gating: ClassVar[bool] = True

    def __init__(
        self,
        descriptor: FieldDescriptor,
        display: CounterDisplay,
        surface: EditorSurface,
        *,
        gating: bool | None = None,
    ) -> None:
        self.descriptor = descriptor
        self.display = display
        self._surface = surface
        self.maxlength = self._resolve_maxlength()
        self.gating = self.default_gating if gating is None else gating
        self._unsubscribes: list[Unsubscribe] = []

    def _resolve_maxlength(self) -> int:
        return self.descriptor.limit

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def surface(self) -> EditorSurface:
        """The surface currently receiving input."""
        return self._surface

    @property
    def attached(self) -> bool:
        return bool(self._unsubscribes)

    def attach(self) -> Self:
        """Bind listeners to the active surface and show the initial count."""
        if self.attached:
            return self
        self._bind(self.surface)
        self.on_value_changed()
        logger.debug(
            "Attached %s session for %s (maxlength=%d)",
            self.descriptor.variant,
            self.descriptor.key,
            self.maxlength,
        )
        return self

    def detach(self) -> None:
        """Release every listener this session registered."""
        for unsubscribe in self._unsubscribes:
            unsubscribe()
        self._unsubscribes.clear()

    def __enter__(self) -> Self:
        return self.attach()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.detach()

    def _bind(self, surface: EditorSurface) -> None:
        if self.gating and self.maxlength > 0:
            self._unsubscribes.append(surface.on_key_down(self.on_key_down))
        self._unsubscribes.append(surface.on_input(self._refresh))

    def _refresh(self, *_args: object) -> None:
        self.on_value_changed()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def on_value_changed(self, content: str | None = None) -> int:
        """Recount *content* (default: the active surface) and display it."""
        if content is None:
            content = self.surface.get_content()
        count = content_length(content)
        self.display.set_count(count)
        return count

    def on_key_down(self, event: KeyEvent) -> bool:
        """Cancel *event* if the field is full; return True when blocked."""
        if not self.gating:
            return False
        surface = self.surface
        blocked = max_length_reached(event, surface.get_content(), self.maxlength)
        if blocked:
            surface.cancel_event(event)
            logger.debug("Blocked key %d on %s", event.key_code, self.descriptor.key)
        return blocked


class PlainTextSession(EnforcementSession):
    """Single-line text field. Gating only where the host allows it."""

    variant = FieldVariant.TEXT
    default_gating = False


class MultilineSession(EnforcementSession):
    """Multi-line text field."""

    variant = FieldVariant.TEXTAREA


class RichTextSession(EnforcementSession):
    """Rich-text field with a visual surface and a raw-markup surface.

    The maximum is looked up by field key in the page's
    :class:`ClientConfig`; a missing entry leaves the field unlimited.
    Switching modes re-binds to the newly active surface and forces a
    change notification on it, since the two surfaces do not notify
    each other.
    """

    variant = FieldVariant.WYSIWYG

    def __init__(
        self,
        descriptor: FieldDescriptor,
        display: CounterDisplay,
        surface: EditorSurface,
        *,
        markup_surface: EditorSurface,
        client_config: ClientConfig | None = None,
        mode: EditorMode = DEFAULT_MODE,
        gating: bool | None = None,
    ) -> None:
        self._client_config = client_config or ClientConfig()
        self._surfaces: dict[EditorMode, EditorSurface] = {
            EditorMode.VISUAL: surface,
            EditorMode.MARKUP: markup_surface,
        }
        self.mode = EditorMode(mode)
        super().__init__(descriptor, display, surface, gating=gating)

    def _resolve_maxlength(self) -> int:
        return self._client_config.maxlength_for(self.descriptor.key)

    @property
    def surface(self) -> EditorSurface:
        return self._surfaces[self.mode]

    def _bind(self, surface: EditorSurface) -> None:
        super()._bind(surface)
        if self.mode is EditorMode.VISUAL:
            # The visual editor reports edits through key-up.
            self._unsubscribes.append(surface.on_key_up(self._refresh))

    def switch_mode(self, mode: EditorMode | str) -> int:
        """Move to *mode*, re-bind, notify, and return the refreshed count."""
        target = EditorMode(mode)
        if target is self.mode:
            return self.on_value_changed()
        if not is_valid_transition(self.mode, target):
            msg = f"Cannot switch editor from {self.mode} to {target}"
            raise ValueError(msg)

        was_attached = self.attached
        self.detach()
        self.mode = target
        if was_attached:
            self._bind(self.surface)
        self.surface.trigger_change()
        logger.debug("Switched %s to %s mode", self.descriptor.key, target)
        return self.on_value_changed()


SESSION_TYPES: dict[FieldVariant, type[EnforcementSession]] = {
    FieldVariant.TEXT: PlainTextSession,
    FieldVariant.TEXTAREA: MultilineSession,
    FieldVariant.WYSIWYG: RichTextSession,
}


def open_session(
    descriptor: FieldDescriptor,
    display: CounterDisplay,
    surface: EditorSurface,
    *,
    markup_surface: EditorSurface | None = None,
    client_config: ClientConfig | None = None,
    gate_plain_text: bool = False,
    mode: EditorMode = DEFAULT_MODE,
) -> EnforcementSession:
    """Create the session matching the descriptor's variant.

    The session is not attached; call ``attach()`` or use it as a
    context manager.

    Raises:
        ValueError: A rich-text field was given no markup surface.
    """
    session_cls = SESSION_TYPES[descriptor.variant]
    if session_cls is RichTextSession:
        if markup_surface is None:
            msg = f"Rich-text field {descriptor.key} needs a markup surface"
            raise ValueError(msg)
        return RichTextSession(
            descriptor,
            display,
            surface,
            markup_surface=markup_surface,
            client_config=client_config,
            mode=mode,
        )
    if session_cls is PlainTextSession:
        return PlainTextSession(descriptor, display, surface, gating=gate_plain_text)
    return session_cls(descriptor, display, surface)
