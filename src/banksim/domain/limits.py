"""Withdrawal ceiling as a composition wrapper around any account."""

from __future__ import annotations

from decimal import Decimal

from banksim.domain.account import BankAccount
from banksim.domain.errors import ErrorKind, Outcome
from banksim.domain.hooks import NotificationHook
from banksim.domain.money import Amount, as_money, exact_amount, format_amount
from banksim.domain.types import AccountStatus

WITHDRAWAL_LIMIT = Decimal("500.00")


class LimitedAccount:
    """Refuses single withdrawals above a fixed ceiling.

    Holds nothing but the wrapped account and the ceiling; every read and
    every other operation goes straight to the wrapped account, so hooks
    registered here land on the innermost account.
    """

    def __init__(self, account: BankAccount, limit: Amount = WITHDRAWAL_LIMIT) -> None:
        self._account = account
        self._limit = as_money(limit)

    def __repr__(self) -> str:
        return f"LimitedAccount({self._account!r}, limit={self._limit})"

    @property
    def wrapped(self) -> BankAccount:
        return self._account

    @property
    def limit(self) -> Decimal:
        return self._limit

    @property
    def id(self) -> str:
        return self._account.id

    @property
    def status(self) -> AccountStatus:
        return self._account.status

    @property
    def is_open(self) -> bool:
        return self._account.is_open

    @property
    def currency_symbol(self) -> str:
        return self._account.currency_symbol

    def balance(self) -> Decimal:
        return self._account.balance()

    def deposit(self, amount: Amount) -> Outcome:
        return self._account.deposit(amount)

    def withdraw(self, amount: Amount) -> Outcome:
        exact = exact_amount(amount)
        if exact > self._limit:
            limit = format_amount(self._limit, self.currency_symbol)
            return Outcome.failure(
                ErrorKind.INSUFFICIENT_FUNDS,
                f"Cannot withdraw more than {limit} at once.",
                reason="limit_exceeded",
                limit=str(self._limit),
                amount=str(exact),
            )
        return self._account.withdraw(amount)

    def close(self) -> Outcome:
        return self._account.close()

    def register_hook(self, hook: NotificationHook) -> None:
        self._account.register_hook(hook)

    def notify(self, message: str) -> list[str]:
        return self._account.notify(message)
