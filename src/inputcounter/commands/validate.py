"""Command: authoritative length validation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from inputcounter.commands._base import CounterCommand
from inputcounter.commands._input import read_text_input

if TYPE_CHECKING:
    from inputcounter.commands._context import AppContext


@click.command(
    cls=CounterCommand,
    examples="""\
  inputcounter validate --max 5 "<p>Hello  world</p>"
  inputcounter validate --max 280 --file tweet.html
  inputcounter --json validate --max 1 '&amp;'""",
)
@click.argument("text", required=False)
@click.option(
    "--file",
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the raw value from a file.",
)
@click.option(
    "--max",
    "maximum",
    type=click.IntRange(min=0),
    required=True,
    help="Maximum visible characters (0 = unlimited).",
)
@click.pass_obj
def validate(app: AppContext, text: str | None, file: Path | None, maximum: int) -> None:
    """Validate TEXT against a maximum length. Exits 1 when it is too long."""
    app.emit(app.service.validate(read_text_input(text, file), maximum))
