"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy plugin loading, the account hooks
every command attaches, and centralized result emission.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from banksim.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from banksim.config.settings import BankSettings
    from banksim.domain.hooks import NotificationHook
    from banksim.plugins.manager import PluginManager
    from banksim.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Plugins are discovered
    on first use so ``--help`` and ``--version`` never scan entry points.
    """

    def __init__(self, settings: BankSettings) -> None:
        self.settings = settings
        self._plugin_manager: PluginManager | None = None

        from banksim.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugin_manager(self) -> PluginManager:
        """The plugin manager (entry points loaded lazily on first access)."""
        if self._plugin_manager is None:
            from banksim.plugins.manager import PluginManager

            self._plugin_manager = PluginManager()
            self._plugin_manager.discover_and_load()
        return self._plugin_manager

    def account_hooks(
        self, account_id: str, *, console: NotificationHook
    ) -> list[NotificationHook]:
        """Hooks to attach to a newly opened account, in notification order.

        *console* comes first; the plugin relay follows when plugins are enabled.
        """
        hooks: list[NotificationHook] = [console]
        if self.settings.plugins.enabled:
            from banksim.plugins.manager import PluginHook

            hooks.append(PluginHook(self.plugin_manager, account_id))
        return hooks

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr and exits with code 1, unless
          *exit_on_error* is False.
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
            return
        if settings.json_output and not exit_on_error:
            click.echo(output)
            return
        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)
