"""Command: render a field's counter markup."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inputcounter.commands._base import CounterCommand
from inputcounter.commands._field_options import build_descriptor, field_options
from inputcounter.services.render import FIELD_GROUP_POST_TYPE, RenderContext

if TYPE_CHECKING:
    from inputcounter.commands._context import AppContext


@click.command(
    cls=CounterCommand,
    examples="""\
  inputcounter render --type text --max 20 --value "Hello"
  inputcounter render --type wysiwyg --key field_abc --max 140 --value "<p>Hi</p>"
  inputcounter render --type textarea --max 50 --class "limited wide"
  inputcounter --json render --type wysiwyg --max 10 --field-group-editor""",
)
@field_options
@click.option(
    "--field-group-editor",
    is_flag=True,
    help="Render as if on the host's field-group editor screen.",
)
@click.pass_obj
def render(app: AppContext, field_group_editor: bool, **field: object) -> None:
    """Render the counter element and client configuration for one field."""
    descriptor = build_descriptor(**field)  # type: ignore[arg-type]
    context = RenderContext(post_id=1, post_type=FIELD_GROUP_POST_TYPE) if field_group_editor else None
    app.emit(app.service.render(descriptor, context))
