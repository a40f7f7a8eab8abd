"""The account entity and the capability protocol shared with decorators.

Validation order for deposit and withdraw is fixed: a closed account is
refused before the amount is looked at. Rules are checked against the exact
amount; only an accepted amount is rounded to cents. A refused operation
never changes the balance and never notifies hooks.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Protocol, runtime_checkable

from banksim.domain.errors import ErrorKind, Outcome
from banksim.domain.hooks import HookRegistry, NotificationHook
from banksim.domain.money import Amount, as_money, exact_amount, format_amount
from banksim.domain.types import AccountStatus, is_valid_transition

logger = logging.getLogger(__name__)

CLOSED_MESSAGE = "Account is closed."


@runtime_checkable
class BankAccount(Protocol):
    """Capability interface implemented by accounts and account decorators."""

    @property
    def id(self) -> str: ...

    @property
    def status(self) -> AccountStatus: ...

    @property
    def is_open(self) -> bool: ...

    @property
    def currency_symbol(self) -> str: ...

    def balance(self) -> Decimal: ...

    def deposit(self, amount: Amount) -> Outcome: ...

    def withdraw(self, amount: Amount) -> Outcome: ...

    def close(self) -> Outcome: ...

    def register_hook(self, hook: NotificationHook) -> None: ...

    def notify(self, message: str) -> list[str]: ...


class Account:
    """A single bank account holding a non-negative balance.

    Args:
        account_id: Immutable account identifier.
        initial_balance: Opening balance; must not be negative.
        currency_symbol: Prefix used in hook messages.

    Raises:
        ValueError: *initial_balance* is negative or not finite.
    """

    def __init__(
        self,
        account_id: str,
        initial_balance: Amount = 0,
        *,
        currency_symbol: str = "$",
    ) -> None:
        balance = exact_amount(initial_balance)
        if balance < 0:
            raise ValueError(f"Initial balance cannot be negative: {balance}")
        self._id = account_id
        self._balance = as_money(balance)
        self._status = AccountStatus.OPEN
        self._currency_symbol = currency_symbol
        self._hooks = HookRegistry()

    def __repr__(self) -> str:
        return f"Account({self._id!r}, balance={self._balance}, status={self._status})"

    @property
    def id(self) -> str:
        return self._id

    @property
    def status(self) -> AccountStatus:
        return self._status

    @property
    def is_open(self) -> bool:
        return self._status == AccountStatus.OPEN

    @property
    def currency_symbol(self) -> str:
        return self._currency_symbol

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    def balance(self) -> Decimal:
        return self._balance

    def register_hook(self, hook: NotificationHook) -> None:
        self._hooks.register(hook)

    def notify(self, message: str) -> list[str]:
        return self._hooks.notify(message)

    def deposit(self, amount: Amount) -> Outcome:
        exact = exact_amount(amount)
        if not self.is_open:
            return self._refuse_closed("deposit")
        if exact < 0:
            return Outcome.failure(
                ErrorKind.NEGATIVE_AMOUNT,
                "Cannot deposit a negative amount.",
                amount=str(exact),
            )
        amt = as_money(exact)
        self._balance = as_money(self._balance + amt)
        logger.debug("Deposit applied to %s: %s -> %s", self._id, amt, self._balance)
        message = f"Deposited: {format_amount(amt, self._currency_symbol)}"
        return Outcome.success(self.notify(message))

    def withdraw(self, amount: Amount) -> Outcome:
        exact = exact_amount(amount)
        if not self.is_open:
            return self._refuse_closed("withdraw")
        if exact > self._balance:
            return Outcome.failure(
                ErrorKind.INSUFFICIENT_FUNDS,
                "Insufficient balance.",
                amount=str(exact),
                balance=str(self._balance),
            )
        amt = as_money(exact)
        self._balance = as_money(self._balance - amt)
        logger.debug("Withdrawal applied to %s: %s -> %s", self._id, amt, self._balance)
        message = f"Withdrew: {format_amount(amt, self._currency_symbol)}"
        return Outcome.success(self.notify(message))

    def close(self) -> Outcome:
        """Close the account. Closing an already-closed account is a no-op."""
        if not is_valid_transition(self._status, AccountStatus.CLOSED):
            return Outcome.success([f"Account #{self._id} is already closed."])
        self._status = AccountStatus.CLOSED
        logger.debug("Account %s closed", self._id)
        return Outcome.success(self.notify("Account closed."))

    def _refuse_closed(self, op: str) -> Outcome:
        return Outcome.failure(ErrorKind.INVALID_OPERATION, CLOSED_MESSAGE, operation=op)
