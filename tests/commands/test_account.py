"""Tests for the scripted ``account`` command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from banksim.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


def _lines(output: str) -> list[str]:
    return [" ".join(line.split()) for line in output.splitlines() if line.strip()]


class TestAccountCommand:
    def test_applies_ops_in_order(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["account", "--initial", "100", "--op", "deposit:50", "--op", "withdraw:20"]
        )
        assert result.exit_code == 0
        lines = _lines(result.output)
        assert lines[:2] == [
            "[Transaction Log] Deposited: $50.00",
            "[Transaction Log] Withdrew: $20.00",
        ]
        assert "OK account" in lines
        assert "balance: 130.00" in lines

    def test_custom_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["account", "--id", "A-1", "--initial", "5"])
        assert result.exit_code == 0
        assert "id: A-1" in _lines(result.output)

    def test_refusal_exits_one(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["account", "--initial", "100", "--op", "withdraw:600", "--op", "deposit:1"],
        )
        assert result.exit_code == 1
        assert "ERROR account — Cannot withdraw more than $500.00 at once." in _lines(
            result.output
        )
        assert "Deposited" not in result.output

    def test_unsecured_skips_ceiling(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["account", "--initial", "1000", "--op", "withdraw:600", "--unsecured"]
        )
        assert result.exit_code == 0
        assert "balance: 400.00" in _lines(result.output)

    def test_close(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["account", "--initial", "10", "--close"])
        assert result.exit_code == 0
        assert "[Transaction Log] Account closed." in result.output
        assert "status: closed" in _lines(result.output)

    def test_close_skipped_after_refusal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["account", "--initial", "10", "--op", "deposit:-1", "--close"]
        )
        assert result.exit_code == 1
        assert "Account closed." not in result.output

    @pytest.mark.parametrize("entry", ["deposit", "transfer:5", "withdraw:", ":5"])
    def test_bad_op_format(self, cli_runner: CliRunner, entry: str) -> None:
        result = cli_runner.invoke(cli, ["account", "--initial", "10", "--op", entry])
        assert result.exit_code == 2
        assert "KIND:AMOUNT" in result.output

    def test_op_kind_is_case_insensitive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["account", "--initial", "10", "--op", "Deposit:1"])
        assert result.exit_code == 0
        assert "balance: 11.00" in _lines(result.output)

    def test_initial_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["account"])
        assert result.exit_code == 2

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "account", "--initial", "10"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "OK: account"


class TestAccountJson:
    def test_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "account", "--initial", "100", "--op", "deposit:50", "--close"]
        )
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["data"]["status"] == "closed"
        assert payload["data"]["steps"] == [
            {"op": "open", "ok": True},
            {"op": "deposit", "ok": True, "amount": "50.00"},
            {"op": "close", "ok": True},
        ]
        assert payload["meta"]["transaction_log"] == ["Deposited: $50.00", "Account closed."]

    def test_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "account", "--initial", "100", "--op", "withdraw:101"]
        )
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "INSUFFICIENT_FUNDS"
        assert payload["error"]["detail"] == {"amount": "101.00", "balance": "100.00"}
