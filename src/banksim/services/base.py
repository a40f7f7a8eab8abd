"""BaseService — shared plumbing for account services.

A service owns at most one account. Domain outcomes are lifted into
ServiceResult here so every subclass reports the same snapshot shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from banksim.domain.errors import ErrorKind
from banksim.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from banksim.domain.account import BankAccount
    from banksim.domain.errors import Outcome

NO_ACCOUNT_MESSAGE = "No open account."


class BaseService:
    """Base for service classes operating on a single account.

    Usage::

        class StatementService(BaseService):
            def summary(self) -> ServiceResult:
                account = self._require_account("summary")
                if isinstance(account, ServiceResult):
                    return account
                ...
    """

    def __init__(self, account: BankAccount | None = None, *, currency_symbol: str = "$") -> None:
        self._account = account
        self._currency_symbol = currency_symbol

    @property
    def account(self) -> BankAccount | None:
        """The account this service operates on (None until opened)."""
        return self._account

    def _snapshot(self) -> dict[str, Any]:
        if self._account is None:
            return {}
        return {
            "id": self._account.id,
            "balance": str(self._account.balance()),
            "status": str(self._account.status),
        }

    def _require_account(self, op: str) -> BankAccount | ServiceResult:
        """Return the open account, or an ``INVALID_OPERATION`` result if there is none."""
        if self._account is not None:
            return self._account
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=str(ErrorKind.INVALID_OPERATION),
                message=NO_ACCOUNT_MESSAGE,
            ),
        )

    def _lift(self, op: str, outcome: Outcome, **extra: Any) -> ServiceResult:
        """Convert a domain Outcome into a ServiceResult with an account snapshot."""
        data = {**self._snapshot(), **extra}
        if outcome.error is None:
            return ServiceResult(ok=True, op=op, data=data, warnings=outcome.warnings)
        err = outcome.error
        return ServiceResult(
            ok=False,
            op=op,
            data=data,
            warnings=outcome.warnings,
            error=ServiceError(code=str(err.kind), message=err.message, detail=err.detail),
        )
