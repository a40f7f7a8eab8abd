"""Command: interactive single-account session.

Opens an account, deposits once, withdraws once through the 500 ceiling,
and prints the final balance. The first refused step prints a
kind-specific error line and ends the session; the process still exits 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from banksim.commands._base import BankCommand

if TYPE_CHECKING:
    from banksim.commands._context import AppContext
    from banksim.services.result import ServiceResult


@click.command(
    cls=BankCommand,
    examples="""\
  banksim simulate
  banksim simulate --initial 100 --deposit 50 --withdraw 600
  banksim --no-interact simulate --initial 100 --deposit 50 --withdraw 20 --close
  banksim --json simulate --initial 100 --deposit 50 --withdraw 20""",
)
@click.option("--initial", default=None, help="Initial balance (prompted if omitted).")
@click.option(
    "--deposit", "deposit_amount", default=None, help="Deposit amount (prompted if omitted)."
)
@click.option(
    "--withdraw", "withdraw_amount", default=None, help="Withdrawal amount (prompted if omitted)."
)
@click.option("--close", "close_after", is_flag=True, help="Close the account at the end.")
@click.pass_obj
def simulate(
    app: AppContext,
    initial: str | None,
    deposit_amount: str | None,
    withdraw_amount: str | None,
    close_after: bool,
) -> None:
    """Open an account, deposit once, withdraw once, print the final balance."""
    from banksim.output.transaction_log import TransactionJournal, TransactionLogger
    from banksim.services.account import AccountService, summarize

    account_cfg = app.settings.account
    json_mode = app.settings.json_output
    journal = TransactionJournal()
    console_hook = journal if json_mode else TransactionLogger()

    svc = AccountService(currency_symbol=account_cfg.currency_symbol)
    steps: list[ServiceResult] = []

    def run(result: ServiceResult) -> bool:
        steps.append(result)
        if not json_mode:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        return result.ok

    ok = run(
        svc.open(
            account_cfg.id,
            _ask(app, initial, "Enter initial balance"),
            hooks=app.account_hooks(account_cfg.id, console=console_hook),
            secured=True,
        )
    )
    if ok and not json_mode:
        click.echo(f"Bank Account Created: #{account_cfg.id}")
    if ok:
        ok = run(svc.deposit(_ask(app, deposit_amount, "Enter deposit amount")))
    if ok:
        ok = run(svc.withdraw(_ask(app, withdraw_amount, "Enter withdrawal amount")))
    if ok and close_after:
        ok = run(svc.close())

    summary = summarize("simulate", steps)
    if json_mode:
        summary = summary.model_copy(update={"meta": {"transaction_log": journal.entries}})
        app.emit(summary, exit_on_error=False)
    elif summary.ok:
        _final_balance(summary, account_cfg.currency_symbol)
    else:
        from banksim.output.renderers import error_line

        click.echo(error_line(summary.error))


def _ask(app: AppContext, value: str | None, prompt: str) -> str:
    """Return *value*, prompting for it unless running non-interactively."""
    if value is not None:
        return value
    if app.settings.no_interact:
        # Empty input is rejected by amount parsing like any other bad value.
        return ""
    # Prompts go to stderr in JSON mode so stdout stays parseable.
    return click.prompt(prompt, type=str, err=app.settings.json_output)


def _final_balance(summary: ServiceResult, symbol: str) -> None:
    from banksim.domain.money import format_amount

    click.echo(f"Final Balance: {format_amount(summary.data['balance'], symbol)}")
