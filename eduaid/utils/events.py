"""Minimal observer helper for explicit state objects."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class Observable:
    """Keep a list of callbacks and call them with ``self`` after a change."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a function that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
