"""Store backend selection."""

from __future__ import annotations

import logging

from eduaid.config import settings
from eduaid.store.base import KeyValueStore
from eduaid.store.file import JsonFileStore
from eduaid.store.memory import MemoryStore

logger = logging.getLogger(__name__)


def get_store(backend: str | None = None, path: str | None = None) -> KeyValueStore:
    backend = (backend or settings.store_backend).lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        store_path = path or settings.store_path
        logger.info("Using file store at %s", store_path)
        return JsonFileStore(store_path)
    raise RuntimeError(f"Unknown store backend: {backend}")
