"""Shared input handling for commands that take text or a file."""

from __future__ import annotations

from pathlib import Path

import click


def read_text_input(text: str | None, file: Path | None) -> str:
    """Return *text*, the contents of *file*, or stdin, in that order."""
    if text is not None and file is not None:
        raise click.UsageError("Pass TEXT or --file, not both.")
    if text is not None:
        return text
    if file is not None:
        return file.read_text(encoding="utf-8")
    return click.get_text_stream("stdin").read()
