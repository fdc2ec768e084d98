"""Click command classes carrying on-demand usage examples.

``--help`` stays short; ``--examples`` prints the command's examples
block and exits. Both classes share :class:`ExamplesMixin`.
"""

from __future__ import annotations

from typing import Any

import click


class ExamplesMixin:
    """Adds an eager ``--examples`` flag when ``examples`` text is given."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(self._examples_option())

    def _examples_option(self) -> click.Option:
        return click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._print_examples,
            help="Show usage examples and exit.",
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class CounterCommand(ExamplesMixin, click.Command):
    """Command accepting ``examples=``."""


class CounterGroup(ExamplesMixin, click.Group):
    """Group accepting ``examples=``; subcommands default to CounterCommand."""

    command_class = CounterCommand
