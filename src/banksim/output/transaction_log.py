"""Console-facing notification hooks."""

from __future__ import annotations

import click

LOG_PREFIX = "[Transaction Log]"


class TransactionLogger:
    """Print each account event as ``[Transaction Log] <message>``."""

    def __init__(self, *, err: bool = False) -> None:
        self.err = err

    def __call__(self, message: str) -> None:
        click.echo(f"{LOG_PREFIX} {message}", err=self.err)


class TransactionJournal:
    """Collect account events in memory (used for ``--json`` output)."""

    def __init__(self) -> None:
        self.entries: list[str] = []

    def __call__(self, message: str) -> None:
        self.entries.append(message)
