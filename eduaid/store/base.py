"""Key-value persistence contract shared by all store backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Synchronous, process-local string store (browser localStorage style)."""

    def load(self, key: str) -> str | None: ...

    def save(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...
