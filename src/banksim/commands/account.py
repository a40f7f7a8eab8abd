"""Command: run a scripted list of operations against one account."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from banksim.commands._base import BankCommand

if TYPE_CHECKING:
    from banksim.commands._context import AppContext
    from banksim.services.result import ServiceResult

_OP_KINDS = ("deposit", "withdraw")


def _parse_ops(
    _ctx: click.Context, _param: click.Parameter, values: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Split ``kind:amount`` entries; amounts are validated later by the service."""
    ops: list[tuple[str, str]] = []
    for entry in values:
        kind, sep, amount = entry.partition(":")
        kind = kind.strip().lower()
        if not sep or kind not in _OP_KINDS or not amount.strip():
            raise click.BadParameter(
                f"{entry!r} is not KIND:AMOUNT with KIND one of {', '.join(_OP_KINDS)}"
            )
        ops.append((kind, amount))
    return ops


@click.command(
    cls=BankCommand,
    examples="""\
  banksim account --initial 100 --op deposit:50 --op withdraw:20
  banksim account --initial 1000 --op withdraw:600 --unsecured
  banksim --json account --initial 100 --op deposit:50 --close""",
)
@click.option("--id", "account_id", default=None, help="Account id (default from config).")
@click.option("--initial", required=True, help="Initial balance.")
@click.option(
    "--op",
    "ops",
    multiple=True,
    callback=_parse_ops,
    metavar="KIND:AMOUNT",
    help="Operation to apply, in order (deposit:AMOUNT or withdraw:AMOUNT).",
)
@click.option("--close", "close_after", is_flag=True, help="Close the account afterwards.")
@click.option("--unsecured", is_flag=True, help="Skip the per-withdrawal ceiling.")
@click.pass_obj
def account(
    app: AppContext,
    account_id: str | None,
    initial: str,
    ops: list[tuple[str, str]],
    close_after: bool,
    unsecured: bool,
) -> None:
    """Open an account and apply operations in order, stopping at the first refusal."""
    from banksim.output.transaction_log import TransactionJournal, TransactionLogger
    from banksim.services.account import AccountService, summarize

    account_cfg = app.settings.account
    acct_id = account_id or account_cfg.id
    json_mode = app.settings.json_output
    journal = TransactionJournal()
    console_hook = journal if json_mode else TransactionLogger()

    svc = AccountService(currency_symbol=account_cfg.currency_symbol)
    steps: list[ServiceResult] = [
        svc.open(
            acct_id,
            initial,
            hooks=app.account_hooks(acct_id, console=console_hook),
            secured=not unsecured,
        )
    ]
    for kind, amount in ops:
        if not steps[-1].ok:
            break
        steps.append(svc.deposit(amount) if kind == "deposit" else svc.withdraw(amount))
    if close_after and steps[-1].ok:
        steps.append(svc.close())

    summary = summarize("account", steps)
    if json_mode:
        summary = summary.model_copy(update={"meta": {"transaction_log": journal.entries}})
    app.emit(summary)
