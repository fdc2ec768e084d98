"""Command: drive an in-memory enforcement session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inputcounter.commands._base import CounterCommand
from inputcounter.commands._field_options import build_descriptor, field_options

if TYPE_CHECKING:
    from inputcounter.commands._context import AppContext


@click.command(
    cls=CounterCommand,
    examples="""\
  inputcounter simulate --type textarea --max 3 a b c d backspace
  inputcounter simulate --type wysiwyg --max 5 --value "Hell" o x mode:markup y
  inputcounter simulate --type text --max 2 --gate a b c""",
)
@field_options
@click.option("--gate/--no-gate", default=None, help="Gate keystrokes on plain text fields.")
@click.argument("keys", nargs=-1)
@click.pass_obj
def simulate(app: AppContext, gate: bool | None, keys: tuple[str, ...], **field: object) -> None:
    """Type KEYS into a simulated field and report what was blocked.

    KEYS are characters, key names (backspace, delete, left, home, ...),
    combinations (ctrl+x, cmd+c) or mode switches (mode:markup, mode:visual).

    Edits apply to the end of the raw content, markup included: characters
    are appended and backspace removes the last raw character. Delete and
    navigation keys leave the content unchanged.
    """
    descriptor = build_descriptor(**field)  # type: ignore[arg-type]
    app.emit(app.service.simulate(descriptor, list(keys), gate_plain_text=gate))
