"""Editing-surface and counter-display adapters.

The concrete editor (a browser input, a textarea, a third-party rich-text
editor) is an external collaborator. Sessions depend only on the narrow
protocols below. ``MemorySurface`` and ``MemoryCounter`` are in-process
implementations used by the ``simulate`` command and the tests.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from inputcounter.domain.keys import KeyCode, KeyEvent

KeyHandler = Callable[[KeyEvent], None]
InputHandler = Callable[[], None]
Unsubscribe = Callable[[], None]


@runtime_checkable
class EditorSurface(Protocol):
    """One editing surface a session can attach to."""

    def get_content(self) -> str: ...

    def get_element(self) -> Any: ...

    def on_key_down(self, handler: KeyHandler) -> Unsubscribe: ...

    def on_key_up(self, handler: KeyHandler) -> Unsubscribe: ...

    def on_input(self, handler: InputHandler) -> Unsubscribe: ...

    def cancel_event(self, event: KeyEvent) -> None: ...

    def trigger_change(self) -> None: ...


@runtime_checkable
class CounterDisplay(Protocol):
    """The counter element scoped to a field's input wrapper."""

    def set_count(self, count: int) -> None: ...


class _Listeners:
    """Ordered handler list with per-handler unsubscribe."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., None]] = []

    def add(self, handler: Callable[..., None]) -> Unsubscribe:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def fire(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)


class MemorySurface:
    """In-memory editing surface.

    ``press()`` delivers a key-down, applies the keystroke unless a
    listener cancelled it, then delivers key-up and input. Printable keys
    append ``event.key``; backspace removes the last character of the
    raw content, so on markup it can cut into a closing tag. There is no
    caret: delete and navigation keys leave the content unchanged.
    """

    def __init__(self, content: str = "", *, element: Any = None) -> None:
        self.content = content
        self.element = element
        self.change_count = 0
        self._key_down = _Listeners()
        self._key_up = _Listeners()
        self._input = _Listeners()
        self._cancelled: set[int] = set()

    # -- EditorSurface -------------------------------------------------

    def get_content(self) -> str:
        return self.content

    def get_element(self) -> Any:
        return self.element

    def on_key_down(self, handler: KeyHandler) -> Unsubscribe:
        return self._key_down.add(handler)

    def on_key_up(self, handler: KeyHandler) -> Unsubscribe:
        return self._key_up.add(handler)

    def on_input(self, handler: InputHandler) -> Unsubscribe:
        return self._input.add(handler)

    def cancel_event(self, event: KeyEvent) -> None:
        self._cancelled.add(id(event))

    def trigger_change(self) -> None:
        self.change_count += 1
        self._input.fire()

    # -- Driving -------------------------------------------------------

    @property
    def listener_count(self) -> int:
        return len(self._key_down) + len(self._key_up) + len(self._input)

    def focus(self) -> None:
        self._input.fire()

    def set_content(self, content: str) -> None:
        """Replace the content programmatically (paste, host update)."""
        self.content = content
        self._input.fire()

    def press(self, event: KeyEvent) -> bool:
        """Deliver *event*; return True when it was applied."""
        self._key_down.fire(event)
        if id(event) in self._cancelled:
            self._cancelled.discard(id(event))
            return False
        self._apply(event)
        self._key_up.fire(event)
        self._input.fire()
        return True

    def _apply(self, event: KeyEvent) -> None:
        if event.command:
            return
        if event.key_code == KeyCode.BACKSPACE:
            self.content = self.content[:-1]
        elif len(event.key) == 1:
            self.content += event.key


class MemoryCounter:
    """Counter display that records the last count written."""

    def __init__(self) -> None:
        self.count: int | None = None
        self.history: list[int] = []

    def set_count(self, count: int) -> None:
        self.count = count
        self.history.append(count)

    @property
    def text(self) -> str:
        return "" if self.count is None else str(self.count)
