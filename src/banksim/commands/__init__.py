"""Subcommand modules for banksim.

Provides register_commands() which uses deferred imports to keep
``banksim --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from banksim.commands.account import account
    from banksim.commands.simulate import simulate

    cli.add_command(simulate)
    cli.add_command(account)
