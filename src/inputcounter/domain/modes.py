"""Rich-text editing modes.

A rich-text field has two interchangeable editing surfaces. Exactly one
is active at a time; the host's mode toggle moves between them. There is
no terminal state — the session ends when the host tears the UI down.
"""

from __future__ import annotations

from enum import StrEnum


class EditorMode(StrEnum):
    """Active editing surface of a rich-text field."""

    VISUAL = "visual"
    MARKUP = "markup"


DEFAULT_MODE = EditorMode.VISUAL

MODE_TRANSITIONS: dict[str, list[str]] = {
    "visual": ["markup"],
    "markup": ["visual"],
}


def is_valid_transition(
    current: str,
    target: str,
    transitions: dict[str, list[str]] = MODE_TRANSITIONS,
) -> bool:
    """Check whether moving from *current* to *target* is allowed."""
    return target in transitions.get(current, [])
