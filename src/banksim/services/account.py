"""AccountService — open an account and run transactions against it.

Amounts arrive as Decimal/int or as raw user input. Everything is parsed
here, so the domain only ever sees whole-cent money values.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import structlog

from banksim.domain.account import Account
from banksim.domain.errors import ErrorKind
from banksim.domain.limits import LimitedAccount
from banksim.domain.money import parse_amount
from banksim.services.base import BaseService
from banksim.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from banksim.domain.hooks import NotificationHook

log = structlog.get_logger(__name__)

INVALID_INPUT = "INVALID_INPUT"

AmountInput = Decimal | int | float | str


class AccountService(BaseService):
    """Single-account session: open once, then deposit/withdraw/close.

    Usage::

        svc = AccountService()
        svc.open("123456", "100.00", hooks=[TransactionLogger()])
        svc.deposit("50")
        svc.withdraw("600")   # refused by the 500 ceiling
    """

    def open(
        self,
        account_id: str,
        initial_balance: AmountInput,
        *,
        hooks: Iterable[NotificationHook] = (),
        secured: bool = True,
    ) -> ServiceResult:
        """Open the account, attach *hooks*, and wrap it in the limit decorator if *secured*."""
        op = "open"
        if self._account is not None:
            return _error(
                op,
                ErrorKind.INVALID_OPERATION,
                f"Account #{self._account.id} is already open.",
            )

        parsed = _parse(op, initial_balance)
        if isinstance(parsed, ServiceResult):
            return parsed
        if parsed < 0:
            log.info("account.open.refused", account_id=account_id, initial=str(parsed))
            return _error(
                op,
                ErrorKind.NEGATIVE_AMOUNT,
                "Initial balance cannot be negative.",
                amount=str(parsed),
            )

        account = Account(account_id, parsed, currency_symbol=self._currency_symbol)
        for hook in hooks:
            account.register_hook(hook)
        self._account = LimitedAccount(account) if secured else account

        log.debug("account.open", account_id=account_id, initial=str(parsed), secured=secured)
        return ServiceResult(ok=True, op=op, data={**self._snapshot(), "secured": secured})

    def deposit(self, amount: AmountInput) -> ServiceResult:
        return self._transact("deposit", amount)

    def withdraw(self, amount: AmountInput) -> ServiceResult:
        return self._transact("withdraw", amount)

    def close(self) -> ServiceResult:
        op = "close"
        account = self._require_account(op)
        if isinstance(account, ServiceResult):
            return account
        result = self._lift(op, account.close())
        log.debug("account.close", account_id=account.id, warnings=len(result.warnings))
        return result

    def balance(self) -> ServiceResult:
        op = "balance"
        account = self._require_account(op)
        if isinstance(account, ServiceResult):
            return account
        data = self._snapshot()
        log.debug("account.balance", account_id=data["id"], balance=data["balance"])
        return ServiceResult(ok=True, op=op, data=data)

    def _transact(self, op: str, amount: AmountInput) -> ServiceResult:
        account = self._require_account(op)
        if isinstance(account, ServiceResult):
            return account

        parsed = _parse(op, amount)
        if isinstance(parsed, ServiceResult):
            return parsed

        if op == "deposit":
            outcome = account.deposit(parsed)
        else:
            outcome = account.withdraw(parsed)
        result = self._lift(op, outcome, amount=str(parsed))

        if result.ok:
            log.debug(f"account.{op}", account_id=account.id, amount=str(parsed))
        else:
            log.info(
                f"account.{op}.refused",
                account_id=account.id,
                amount=str(parsed),
                code=result.error.code if result.error else None,
            )
        return result


def summarize(op: str, results: Sequence[ServiceResult]) -> ServiceResult:
    """Fold a sequence of step results into one result.

    The summary fails with the first failing step's error. Its data is the
    last step's account snapshot plus a ``steps`` list.
    """
    if not results:
        raise ValueError("summarize() needs at least one step result")

    failed = next((r for r in results if not r.ok), None)
    last = results[-1]
    data: dict[str, Any] = {k: last.data[k] for k in ("id", "balance", "status") if k in last.data}
    data["steps"] = [_step_entry(r) for r in results]
    return ServiceResult(
        ok=failed is None,
        op=op,
        data=data,
        warnings=[w for r in results for w in r.warnings],
        error=failed.error if failed is not None else None,
    )


def _step_entry(result: ServiceResult) -> dict[str, Any]:
    entry: dict[str, Any] = {"op": result.op, "ok": result.ok}
    if "amount" in result.data:
        entry["amount"] = result.data["amount"]
    if result.error is not None:
        entry["error"] = result.error.code
    return entry


def _parse(op: str, amount: AmountInput) -> Decimal | ServiceResult:
    raw = amount if isinstance(amount, str) else str(amount)
    try:
        return parse_amount(raw)
    except ValueError as exc:
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=INVALID_INPUT, message=str(exc), detail={"input": raw}),
        )


def _error(op: str, kind: ErrorKind, message: str, **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=str(kind), message=message, detail=detail),
    )
