"""Shared pytest fixtures for banksim tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from banksim.domain.account import Account
from banksim.domain.limits import LimitedAccount


class RecordingHook:
    """Notification hook that appends ``(name, message)`` to a shared call log."""

    def __init__(self, name: str, calls: list[tuple[str, str]]) -> None:
        self.name = name
        self.calls = calls

    @property
    def messages(self) -> list[str]:
        return [msg for who, msg in self.calls if who == self.name]

    def __call__(self, message: str) -> None:
        self.calls.append((self.name, message))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def account() -> Account:
    """Open, undecorated account holding 100.00."""
    return Account("123456", Decimal("100.00"))


@pytest.fixture
def secured(account: Account) -> LimitedAccount:
    """The ``account`` fixture wrapped in the 500 withdrawal ceiling."""
    return LimitedAccount(account)


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    """Shared, ordered log of hook invocations."""
    return []


@pytest.fixture
def make_hook(call_log: list[tuple[str, str]]) -> Callable[[str], RecordingHook]:
    """Factory for recording hooks that share ``call_log``."""

    def factory(name: str = "recorder") -> RecordingHook:
        return RecordingHook(name, call_log)

    return factory


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo root logger changes made by configure_logging()."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bank = logging.getLogger("banksim")
    bank_level = bank.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bank.setLevel(bank_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run in an empty directory with no banksim config or env overrides in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("BANKSIM_CONFIG", raising=False)
    for flag in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON", "NO_INTERACT"):
        monkeypatch.delenv(f"BANKSIM_{flag}", raising=False)
    yield
