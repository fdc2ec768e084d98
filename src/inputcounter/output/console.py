"""Rich Console factory and theme for inputcounter output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

COUNTER_THEME = Theme(
    {
        "ic.ok": "bold green",
        "ic.error": "bold red",
        "ic.op": "bold cyan",
        "ic.key": "dim",
        "ic.count": "bold",
        "ic.over": "bold red",
        "ic.markup": "dim",
    }
)


def create_console(*, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        width: Override terminal width.
    """
    return Console(
        file=StringIO(),
        theme=COUNTER_THEME,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
