"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from inputcounter.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from inputcounter.config.settings import CounterSettings
    from inputcounter.plugins.manager import PluginManager
    from inputcounter.services.counter import CounterService
    from inputcounter.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Plugins are loaded
    on first use so ``--help`` and ``--version`` never scan entry points.
    """

    def __init__(self, settings: CounterSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None

        from inputcounter.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager:
        """The plugin manager (created lazily on first access)."""
        if self._plugins is None:
            from inputcounter.plugins.manager import create_plugin_manager

            self._plugins = create_plugin_manager(self.settings)
        return self._plugins

    @property
    def service(self) -> CounterService:
        from inputcounter.services.counter import CounterService

        return CounterService(self.settings, self.plugins.hook)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
