"""Command: visible character count of a raw value."""

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
  inputcounter count "<p>Hello  world</p>"
  inputcounter count --file body.html
  echo "&amp;" | inputcounter --json count""",
)
@click.argument("text", required=False)
@click.option(
    "--file",
    "file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the raw value from a file.",
)
@click.pass_obj
def count(app: AppContext, text: str | None, file: Path | None) -> None:
    """Count the visible characters in TEXT (markup and line breaks excluded)."""
    app.emit(app.service.count(read_text_input(text, file)))
