"""Save and restore the last goal, roadmap text and checklist progress."""

from __future__ import annotations

import json
import logging
from typing import NamedTuple

from eduaid.models.progress import ProgressKey, ProgressStore
from eduaid.store.base import KeyValueStore

logger = logging.getLogger(__name__)


class SessionSnapshot(NamedTuple):
    goal: str
    roadmap: str
    progress: dict[ProgressKey, bool]


class SessionPersistence:
    """Shadow session fields into a key-value store.

    Writes are best effort: store errors are logged and dropped. Reads never
    raise; a missing or unparsable field comes back as its default.
    """

    def __init__(self, store: KeyValueStore, key_prefix: str = "eduaid_") -> None:
        self.store = store
        self.goal_key = f"{key_prefix}goal"
        self.roadmap_key = f"{key_prefix}roadmap"
        self.progress_key = f"{key_prefix}progress"

    @property
    def keys(self) -> tuple[str, str, str]:
        return (self.goal_key, self.roadmap_key, self.progress_key)

    def _write(self, key: str, value: str) -> None:
        try:
            if value:
                self.store.save(key, value)
            else:
                self.store.remove(key)
        except OSError as exc:
            logger.warning("Failed to persist %s: %s", key, exc)

    def _read(self, key: str) -> str:
        try:
            value = self.store.load(key)
        except OSError as exc:
            logger.debug("Failed to read %s: %s", key, exc)
            return ""
        return value if isinstance(value, str) else ""

    def save_goal(self, goal: str) -> None:
        self._write(self.goal_key, goal)

    def save_roadmap(self, roadmap: str) -> None:
        self._write(self.roadmap_key, roadmap)

    def save_progress(self, progress: ProgressStore) -> None:
        self._write(self.progress_key, json.dumps(progress.snapshot()) if len(progress) else "")

    def load_progress(self) -> dict[ProgressKey, bool]:
        raw = self._read(self.progress_key)
        if not raw:
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Stored progress is not valid JSON; ignoring it")
            return {}
        return ProgressStore.entries_from_snapshot(data)

    def load(self) -> SessionSnapshot:
        return SessionSnapshot(
            goal=self._read(self.goal_key),
            roadmap=self._read(self.roadmap_key),
            progress=self.load_progress(),
        )

    def reset(self) -> None:
        for key in self.keys:
            try:
                self.store.remove(key)
            except OSError as exc:
                logger.warning("Failed to remove %s: %s", key, exc)
