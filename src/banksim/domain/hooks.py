"""Notification hooks attached to an account.

A hook is any callable taking one human-readable message. Hooks run
synchronously, in registration order, after every successful state change.

INVARIANT: A failing hook never undoes or hides a committed transaction.
The failure is logged and reported back as a warning string; the
remaining hooks still run.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationHook(Protocol):
    """Stateless sink for account event messages."""

    def __call__(self, message: str) -> None: ...


def hook_name(hook: NotificationHook) -> str:
    """Readable name for a hook (class name for instances, else ``__name__``)."""
    name = getattr(hook, "__name__", None)
    return name if isinstance(name, str) else type(hook).__name__


class HookRegistry:
    """Append-only, ordered list of notification hooks."""

    def __init__(self) -> None:
        self._hooks: list[NotificationHook] = []

    def __len__(self) -> int:
        return len(self._hooks)

    def __iter__(self) -> Iterator[NotificationHook]:
        return iter(tuple(self._hooks))

    def register(self, hook: NotificationHook) -> None:
        if not callable(hook):
            raise TypeError(f"Notification hook must be callable, got {type(hook).__name__}")
        self._hooks.append(hook)
        logger.debug("Registered notification hook: %s", hook_name(hook))

    def notify(self, message: str) -> list[str]:
        """Call every hook with *message*. Returns one warning per failed hook."""
        warnings: list[str] = []
        for hook in tuple(self._hooks):
            try:
                hook(message)
            except Exception as exc:
                logger.warning("Notification hook %s failed", hook_name(hook), exc_info=True)
                warnings.append(f"Notification hook {hook_name(hook)} failed: {exc}")
        return warnings
