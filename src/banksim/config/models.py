"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, banksim.toml only contains overrides.
BankSettings composes these sections with the CLI flags.
The withdrawal ceiling is deliberately absent: it is a fixed account rule.
"""

from __future__ import annotations

from pydantic import BaseModel


class AccountConfig(BaseModel):
    """[account] section."""

    model_config = {"frozen": True}

    id: str = "123456"
    currency_symbol: str = "$"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True

