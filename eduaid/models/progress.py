"""Checklist completion state keyed by section label and line index."""

from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple

from eduaid.utils.events import Observable

logger = logging.getLogger(__name__)


class ProgressKey(NamedTuple):
    """One checklist line: section label plus its index in the section's lines."""

    label: str
    index: int

    def encode(self) -> str:
        return f"{self.label}-{self.index}"

    @classmethod
    def decode(cls, raw: str) -> "ProgressKey":
        """Parse ``"Topics-3"`` back into a key.

        Raises
        ------
        ValueError
            If ``raw`` has no ``-<index>`` suffix.
        """
        label, sep, index = raw.rpartition("-")
        if not sep or not label or not index.isdigit():
            raise ValueError(f"Invalid progress key: {raw!r}")
        return cls(label, int(index))


class ProgressStore(Observable):
    """Mapping of ProgressKey to a completion flag; absent keys read as False.

    Subscribers are called with the store after every mutation.
    """

    def __init__(self, entries: Mapping[ProgressKey, bool] | None = None) -> None:
        super().__init__()
        self._entries: dict[ProgressKey, bool] = dict(entries or {})

    def get(self, key: ProgressKey) -> bool:
        return self._entries.get(key, False)

    def set(self, key: ProgressKey, value: bool) -> None:
        self._entries[key] = bool(value)
        self._notify()

    def toggle(self, key: ProgressKey) -> bool:
        """Flip ``key`` and return its new value."""
        value = not self.get(key)
        self.set(key, value)
        return value

    def clear(self) -> None:
        self._entries.clear()
        self._notify()

    def replace(self, entries: Mapping[ProgressKey, bool]) -> None:
        """Swap in restored entries, notifying once."""
        self._entries = dict(entries)
        self._notify()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def snapshot(self) -> dict[str, bool]:
        """Serializable ``{"Label-index": bool}`` form."""
        return {key.encode(): value for key, value in self._entries.items()}

    @staticmethod
    def entries_from_snapshot(data: Any) -> dict[ProgressKey, bool]:
        """Decode a snapshot, skipping malformed keys and non-boolean values."""
        if not isinstance(data, dict):
            return {}
        entries: dict[ProgressKey, bool] = {}
        for raw_key, value in data.items():
            if not isinstance(raw_key, str) or not isinstance(value, bool):
                logger.debug("Skipping progress entry %r=%r", raw_key, value)
                continue
            try:
                entries[ProgressKey.decode(raw_key)] = value
            except ValueError:
                logger.debug("Skipping progress entry %r", raw_key)
        return entries

    @classmethod
    def from_snapshot(cls, data: Any) -> "ProgressStore":
        return cls(cls.entries_from_snapshot(data))
