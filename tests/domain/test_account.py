"""Tests for the Account entity."""

from __future__ import annotations

from decimal import Decimal

import pytest

from banksim.domain.account import CLOSED_MESSAGE, Account, BankAccount
from banksim.domain.errors import ErrorKind
from banksim.domain.types import AccountStatus


class TestOpen:
    def test_defaults(self) -> None:
        acct = Account("1")
        assert acct.balance() == Decimal("0.00")
        assert acct.status == AccountStatus.OPEN
        assert acct.is_open
        assert acct.currency_symbol == "$"

    def test_initial_balance_is_quantized(self) -> None:
        assert Account("1", Decimal("99.999")).balance() == Decimal("100.00")

    def test_negative_initial_balance_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            Account("1", Decimal("-0.01"))

    def test_non_finite_initial_balance_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            Account("1", Decimal("Infinity"))

    def test_satisfies_protocol(self, account: Account) -> None:
        assert isinstance(account, BankAccount)


class TestDeposit:
    def test_adds_to_balance(self, account: Account) -> None:
        outcome = account.deposit(Decimal("50.00"))
        assert outcome.ok
        assert account.balance() == Decimal("150.00")

    def test_zero_is_allowed(self, account: Account) -> None:
        assert account.deposit(0).ok
        assert account.balance() == Decimal("100.00")

    def test_negative_refused(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)

        outcome = account.deposit(Decimal("-10.00"))

        assert not outcome.ok
        assert outcome.error.kind is ErrorKind.NEGATIVE_AMOUNT
        assert account.balance() == Decimal("100.00")
        assert hook.messages == []

    def test_sub_cent_negative_refused(self, account: Account) -> None:
        outcome = account.deposit(Decimal("-0.004"))
        assert outcome.error.kind is ErrorKind.NEGATIVE_AMOUNT
        assert outcome.error.detail == {"amount": "-0.004"}
        assert account.balance() == Decimal("100.00")

    @pytest.mark.parametrize("op", ["deposit", "withdraw"])
    def test_nan_raises_value_error(self, account: Account, op: str) -> None:
        with pytest.raises(ValueError, match="finite"):
            getattr(account, op)(Decimal("NaN"))
        assert account.balance() == Decimal("100.00")

    def test_notifies_with_amount(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)
        account.deposit(50)
        assert hook.messages == ["Deposited: $50.00"]

    def test_uses_currency_symbol(self, make_hook) -> None:
        acct = Account("1", currency_symbol="€")
        hook = make_hook()
        acct.register_hook(hook)
        acct.deposit(5)
        assert hook.messages == ["Deposited: €5.00"]


class TestWithdraw:
    def test_subtracts_from_balance(self, account: Account) -> None:
        assert account.withdraw(Decimal("20.00")).ok
        assert account.balance() == Decimal("80.00")

    def test_whole_balance(self, account: Account) -> None:
        assert account.withdraw(Decimal("100.00")).ok
        assert account.balance() == Decimal("0.00")

    def test_overdraw_refused(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)

        outcome = account.withdraw(Decimal("100.01"))

        assert outcome.error.kind is ErrorKind.INSUFFICIENT_FUNDS
        assert outcome.error.message == "Insufficient balance."
        assert outcome.error.detail == {"amount": "100.01", "balance": "100.00"}
        assert account.balance() == Decimal("100.00")
        assert hook.messages == []

    def test_sub_cent_overdraw_refused(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)

        outcome = account.withdraw(Decimal("100.004"))

        assert outcome.error.kind is ErrorKind.INSUFFICIENT_FUNDS
        assert outcome.error.detail == {"amount": "100.004", "balance": "100.00"}
        assert account.balance() == Decimal("100.00")
        assert hook.messages == []

    def test_notifies_with_amount(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)
        account.withdraw(20)
        assert hook.messages == ["Withdrew: $20.00"]

    def test_negative_amount_is_not_validated(self, account: Account) -> None:
        # No sign check on withdrawals: a negative amount raises the balance.
        assert account.withdraw(Decimal("-5.00")).ok
        assert account.balance() == Decimal("105.00")


class TestClose:
    def test_close_notifies_once(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)

        outcome = account.close()

        assert outcome.ok
        assert outcome.warnings == []
        assert account.status == AccountStatus.CLOSED
        assert not account.is_open
        assert hook.messages == ["Account closed."]

    def test_reclose_is_a_warning_noop(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)
        account.close()

        outcome = account.close()

        assert outcome.ok
        assert outcome.warnings == ["Account #123456 is already closed."]
        assert hook.messages == ["Account closed."]

    @pytest.mark.parametrize("op", ["deposit", "withdraw"])
    def test_closed_refuses_transactions(self, account: Account, op: str) -> None:
        account.close()

        outcome = getattr(account, op)(Decimal("10.00"))

        assert outcome.error.kind is ErrorKind.INVALID_OPERATION
        assert outcome.error.message == CLOSED_MESSAGE
        assert outcome.error.detail == {"operation": op}
        assert account.balance() == Decimal("100.00")

    def test_closed_check_precedes_amount_check(self, account: Account) -> None:
        account.close()
        assert account.deposit(Decimal("-1.00")).error.kind is ErrorKind.INVALID_OPERATION
        assert account.withdraw(Decimal("1000")).error.kind is ErrorKind.INVALID_OPERATION

    def test_closed_balance_still_readable(self, account: Account) -> None:
        account.close()
        assert account.balance() == Decimal("100.00")


class TestHooks:
    def test_order_preserved(self, account: Account, make_hook, call_log) -> None:
        account.register_hook(make_hook("a"))
        account.register_hook(make_hook("b"))

        account.deposit(1)
        account.close()

        assert call_log == [
            ("a", "Deposited: $1.00"),
            ("b", "Deposited: $1.00"),
            ("a", "Account closed."),
            ("b", "Account closed."),
        ]

    def test_failing_hook_keeps_transaction(self, account: Account, make_hook) -> None:
        def broken(message: str) -> None:
            raise OSError("disk full")

        after = make_hook("after")
        account.register_hook(broken)
        account.register_hook(after)

        outcome = account.deposit(Decimal("25.00"))

        assert outcome.ok
        assert outcome.warnings == ["Notification hook broken failed: disk full"]
        assert account.balance() == Decimal("125.00")
        assert after.messages == ["Deposited: $25.00"]

    def test_notify_direct(self, account: Account, make_hook) -> None:
        hook = make_hook()
        account.register_hook(hook)
        assert account.notify("ping") == []
        assert hook.messages == ["ping"]

    def test_no_hooks_is_fine(self, account: Account) -> None:
        assert account.deposit(1).warnings == []
