"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from banksim.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from banksim.services.result import ServiceError, ServiceResult

# Kind-specific prefixes for the interactive transcript.
_ERROR_LABELS: dict[str, str] = {
    "NEGATIVE_AMOUNT": "[Error] Negative Deposit",
    "INSUFFICIENT_FUNDS": "[Error] Overdraw",
    "INVALID_OPERATION": "[Error] Invalid Account Operation",
}

_ACCOUNT_KEYS = ("id", "amount", "balance", "status", "secured")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


def error_line(error: ServiceError | None) -> str:
    """One-line, kind-specific description of a failed operation."""
    if error is None:
        return "[Unexpected Error] Unknown error"
    label = _ERROR_LABELS.get(error.code)
    if label is None:
        return f"[Unexpected Error] {error.message}"
    return f"{label}: {error.message}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="bank.ok")
    op = Text(f"  {result.op}", style="bank.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="bank.key")
    if key == "id":
        v = Text(str(value), style="bank.id")
    elif key in ("balance", "amount"):
        v = Text(str(value), style="bank.amount")
    elif key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}", markup=False)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="bank.error")
    op = Text(f"  {result.op}", style="bank.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Success renderers ─────────────────────────────────────────────────


def _render_account(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render open/deposit/withdraw/close/balance results."""
    _status_line(console, result)
    for key in _ACCOUNT_KEYS:
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_session(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a multi-step run: snapshot fields plus a table of steps."""
    _status_line(console, result)
    for key in ("id", "balance", "status"):
        if key in result.data:
            _field(console, key, result.data[key])

    steps = result.data.get("steps", [])
    if steps:
        console.print()
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Op", style="bank.op")
        table.add_column("Amount", style="bank.amount", justify="right")
        table.add_column("Result")
        for idx, step in enumerate(steps, start=1):
            outcome = "ok" if step.get("ok") else str(step.get("error", "failed"))
            table.add_row(str(idx), str(step.get("op", "")), str(step.get("amount", "")), outcome)
        console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "open": _render_account,
    "deposit": _render_account,
    "withdraw": _render_account,
    "close": _render_account,
    "balance": _render_account,
    "account": _render_session,
    "simulate": _render_session,
}
