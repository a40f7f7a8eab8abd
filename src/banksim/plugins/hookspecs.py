"""Pluggy hook specifications for banksim account events."""

from __future__ import annotations

import pluggy

PROJECT_NAME = "banksim"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class BanksimHookSpec:
    """Hook specifications for the banksim plugin system."""

    @hookspec
    def post_transaction(self, account_id: str, message: str) -> None:
        """Called after every committed deposit, withdrawal, or closure."""
