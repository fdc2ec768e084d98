"""Subcommand modules for inputcounter.

Provides register_commands() which uses deferred imports to keep
``inputcounter --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from inputcounter.commands.count import count
    from inputcounter.commands.render import render
    from inputcounter.commands.simulate import simulate
    from inputcounter.commands.validate import validate

    cli.add_command(count)
    cli.add_command(validate)
    cli.add_command(render)
    cli.add_command(simulate)
