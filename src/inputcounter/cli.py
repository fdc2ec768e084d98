"""Root CLI group for inputcounter with global flags and command registration."""

from __future__ import annotations

import click

from inputcounter import __version__
from inputcounter.commands import register_commands
from inputcounter.commands._base import CounterGroup
from inputcounter.commands._context import AppContext
from inputcounter.config.settings import CounterSettings


@click.group(
    cls=CounterGroup,
    invoke_without_command=True,
    examples="""\
  inputcounter count "<p>Hello  world</p>"
  inputcounter validate --max 140 --file post.html
  inputcounter --json render --type wysiwyg --key field_abc --max 140""",
)
@click.version_option(version=__version__, prog_name="inputcounter")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """inputcounter — character counters and length limits for form fields."""
    ctx.ensure_object(dict)
    settings = CounterSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
