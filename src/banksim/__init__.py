"""banksim — single-account bank simulator CLI."""

__version__ = "0.1.0"
