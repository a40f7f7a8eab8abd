"""Account lifecycle enums."""

from __future__ import annotations

from enum import StrEnum


class AccountStatus(StrEnum):
    """Account lifecycle. Closing is terminal."""

    OPEN = "open"
    CLOSED = "closed"


ACCOUNT_TRANSITIONS: dict[str, list[str]] = {
    "open": ["closed"],
    "closed": [],
}


def is_valid_transition(current: str, target: str) -> bool:
    """Check if moving an account from *current* to *target* is allowed."""
    return target in ACCOUNT_TRANSITIONS.get(current, [])
