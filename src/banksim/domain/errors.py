"""Tagged account errors and the operation outcome type.

Rule violations are returned, never raised: every account operation
yields an :class:`Outcome`, and a failed one carries exactly one
:class:`AccountError` whose ``kind`` says which rule was broken.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorKind(StrEnum):
    """The three ways an account operation can be refused."""

    NEGATIVE_AMOUNT = "NEGATIVE_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    INVALID_OPERATION = "INVALID_OPERATION"


class AccountError(BaseModel):
    """A refused account operation."""

    model_config = {"frozen": True}

    kind: ErrorKind
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class Outcome(BaseModel):
    """Result of a single account operation.

    Attributes:
        error: Set when the operation was refused; the balance is untouched.
        warnings: Non-fatal issues, e.g. a notification hook that failed
            after the balance change was already applied.
    """

    model_config = {"frozen": True}

    error: AccountError | None = None
    warnings: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> Outcome:
        return cls(warnings=warnings or [])

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, **detail: Any) -> Outcome:
        return cls(error=AccountError(kind=kind, message=message, detail=detail))
