"""Store contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class StoreError(RuntimeError):
    """Raised when a store cannot read or write a value."""


@runtime_checkable
class Store(Protocol):
    """Minimal string key/value persistence."""

    def load(self, key: str) -> str | None:
        """Return the saved text for ``key`` or ``None`` when absent."""

    def save(self, key: str, value: str) -> None:
        """Persist ``value`` under ``key``; raise ``StoreError`` on failure."""
