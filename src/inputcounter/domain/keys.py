"""Keystroke gating rules.

Once a field's visible length reaches its maximum, keystrokes that would
insert content are blocked. Navigation, deletion, cut and copy are never
blocked so the user can always move around and shorten the content.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from inputcounter.domain.normalize import content_length


class KeyCode(IntEnum):
    """Key codes referenced by the gating rules."""

    BACKSPACE = 8
    PAGE_UP = 33
    PAGE_DOWN = 34
    END = 35
    HOME = 36
    LEFT = 37
    UP = 38
    RIGHT = 39
    DOWN = 40
    DELETE = 46
    C = 67
    X = 88


ALWAYS_ALLOWED_KEYS: frozenset[int] = frozenset(
    {
        KeyCode.BACKSPACE,
        KeyCode.PAGE_UP,
        KeyCode.PAGE_DOWN,
        KeyCode.END,
        KeyCode.HOME,
        KeyCode.LEFT,
        KeyCode.UP,
        KeyCode.RIGHT,
        KeyCode.DOWN,
        KeyCode.DELETE,
    }
)

UNIDENTIFIED_KEY = 0

# cut, copy
ALWAYS_ALLOWED_COMBOS: frozenset[int] = frozenset({KeyCode.X, KeyCode.C})


@dataclass(frozen=True)
class KeyEvent:
    """A key-down or key-up event from an editing surface.

    ``ctrl`` is the primary modifier (Windows/Linux), ``meta`` the
    secondary one (the command key on macOS).
    """

    key_code: int
    ctrl: bool = False
    meta: bool = False
    key: str = ""

    @property
    def command(self) -> bool:
        return self.ctrl or self.meta

    @classmethod
    def for_char(cls, char: str) -> KeyEvent:
        """Key event for typing a single printable character."""
        if char.isascii() and (char.isalnum() or char == " "):
            code = ord(char.upper())
        else:
            code = UNIDENTIFIED_KEY
        return cls(key_code=code, key=char)


def is_allowed_keystroke(event: KeyEvent) -> bool:
    """Return True for keys that never insert content."""
    if event.key_code in ALWAYS_ALLOWED_KEYS:
        return True
    return event.command and event.key_code in ALWAYS_ALLOWED_COMBOS


def max_length_reached(event: KeyEvent, content: str, maxlength: int | None) -> bool:
    """Should *event* be blocked for a field holding *content*?

    A missing or non-positive *maxlength* disables gating. The check runs
    before the keystroke lands, so it compares the current visible length.
    """
    if not maxlength or maxlength <= 0:
        return False
    if is_allowed_keystroke(event):
        return False
    return content_length(content) >= maxlength


_KEY_NAMES: dict[str, KeyCode] = {
    "backspace": KeyCode.BACKSPACE,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "end": KeyCode.END,
    "home": KeyCode.HOME,
    "left": KeyCode.LEFT,
    "up": KeyCode.UP,
    "right": KeyCode.RIGHT,
    "down": KeyCode.DOWN,
    "delete": KeyCode.DELETE,
}

_MODIFIERS = ("ctrl", "meta", "cmd")


def parse_key(token: str) -> KeyEvent:
    """Parse a key token such as ``"a"``, ``"backspace"`` or ``"ctrl+x"``.

    Examples:
        >>> parse_key("ctrl+x")
        KeyEvent(key_code=88, ctrl=True, meta=False, key='x')
        >>> parse_key("left").key_code
        37
    """
    if len(token) == 1:
        return KeyEvent.for_char(token)

    parts = token.lower().split("+")
    name = parts[-1]
    modifiers = set(parts[:-1])
    unknown = modifiers - set(_MODIFIERS)
    if unknown:
        msg = f"Unknown modifier(s) in key {token!r}: {', '.join(sorted(unknown))}"
        raise ValueError(msg)

    if name in _KEY_NAMES:
        base = KeyEvent(key_code=_KEY_NAMES[name], key=name)
    elif len(name) == 1:
        base = KeyEvent.for_char(name)
    else:
        msg = f"Unknown key {token!r}"
        raise ValueError(msg)

    return KeyEvent(
        key_code=base.key_code,
        ctrl="ctrl" in modifiers,
        meta=bool(modifiers & {"meta", "cmd"}),
        key=base.key,
    )
