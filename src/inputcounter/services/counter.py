"""CounterService — command-line operations over the counter core.

Each method wraps a core operation in a :class:`ServiceResult` so the
CLI can render it for humans or as JSON.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from inputcounter.domain.fields import FieldDescriptor, FieldVariant
from inputcounter.domain.keys import parse_key
from inputcounter.domain.modes import EditorMode
from inputcounter.domain.normalize import content_length, visible_text
from inputcounter.enforcement.adapter import MemoryCounter, MemorySurface
from inputcounter.enforcement.config import ClientConfigBuilder
from inputcounter.enforcement.session import RichTextSession, open_session
from inputcounter.services.render import RenderContext
from inputcounter.services.result import ServiceResult
from inputcounter.services.validation import validate

if TYPE_CHECKING:
    from collections.abc import Sequence

    import pluggy

    from inputcounter.config.settings import CounterSettings

MODE_SWITCH_TOKEN = "mode:"


class CounterService:
    """CLI-facing operations.

    Parameters:
        settings: Resolved counter settings.
        hook: The plugin manager's hook relay, used for rendering.
    """

    def __init__(self, settings: CounterSettings, hook: pluggy.HookRelay) -> None:
        self._settings = settings
        self._hook = hook

    def count(self, text: str) -> ServiceResult:
        """Visible length and visible text of *text*."""
        return ServiceResult.success("count", {"length": content_length(text), "visible": visible_text(text)})

    def validate(self, text: str, maximum: int) -> ServiceResult:
        """Authoritative validation of *text* against *maximum*."""
        outcome = validate(text, maximum)
        data = {"valid": outcome.valid, "length": content_length(text), "maximum": maximum}
        if outcome.valid:
            return ServiceResult.success("validate", data)
        return ServiceResult.failure(
            "validate",
            "MAXLENGTH_EXCEEDED",
            outcome.message or "",
            detail={"length": outcome.length, "maximum": outcome.maximum},
            data=data,
        )

    def render(self, descriptor: FieldDescriptor, context: RenderContext | None = None) -> ServiceResult:
        """Render a field's counter and the page's client configuration."""
        builder = ClientConfigBuilder()
        rendered = self._hook.render_field(field=descriptor, context=context, client_config=builder)
        client_config = builder.freeze()
        settings_groups = self._hook.render_field_settings(field=descriptor)
        setting_names = [s.name for group in settings_groups for s in group]

        warnings: list[str] = []
        if rendered is None:
            warnings.append(f"No counter rendered for {descriptor.key}")
        return ServiceResult.success(
            "render",
            {
                "key": descriptor.key,
                "html": rendered.html if rendered else "",
                "script": client_config.to_script() if client_config else "",
                "settings": setting_names,
            },
            warnings=warnings,
        )

    def simulate(
        self,
        descriptor: FieldDescriptor,
        keys: Sequence[str],
        *,
        gate_plain_text: bool | None = None,
    ) -> ServiceResult:
        """Type *keys* into an in-memory session for *descriptor*.

        Tokens are single characters, key names (``backspace``, ``left``),
        combinations (``ctrl+x``) or, for rich-text fields, a mode switch
        (``mode:markup`` / ``mode:visual``).
        """
        visual = MemorySurface(descriptor.value)
        markup = MemorySurface(descriptor.value)
        surfaces = {EditorMode.VISUAL: visual, EditorMode.MARKUP: markup}
        counter = MemoryCounter()

        builder = ClientConfigBuilder()
        if descriptor.variant is FieldVariant.WYSIWYG:
            builder.add(descriptor.key, descriptor.limit)

        if gate_plain_text is None:
            gate_plain_text = self._settings.counter.gate_plain_text

        try:
            session = open_session(
                descriptor,
                counter,
                visual,
                markup_surface=markup,
                client_config=builder.freeze(),
                gate_plain_text=gate_plain_text,
            )
            blocked: list[str] = []
            with session:
                for token in keys:
                    if token.startswith(MODE_SWITCH_TOKEN):
                        if not isinstance(session, RichTextSession):
                            msg = f"Mode switching needs a wysiwyg field, got {descriptor.variant}"
                            raise ValueError(msg)
                        target = EditorMode(token.removeprefix(MODE_SWITCH_TOKEN))
                        # The host copies content across surfaces on a mode toggle.
                        surfaces[target].content = surfaces[session.mode].content
                        session.switch_mode(target)
                        continue
                    active = surfaces[session.mode] if isinstance(session, RichTextSession) else visual
                    if not active.press(parse_key(token)):
                        blocked.append(token)
                content = session.surface.get_content()
        except ValueError as exc:
            return ServiceResult.failure("simulate", "INVALID_INPUT", str(exc))

        return ServiceResult.success(
            "simulate",
            {
                "content": content,
                "count": counter.count,
                "maximum": session.maxlength,
                "blocked": blocked,
            },
        )
