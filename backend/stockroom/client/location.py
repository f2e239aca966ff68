from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

HASHCHANGE = "hashchange"
POPSTATE = "popstate"

Listener = Callable[[str], None]


class Location:
    """
    URL fragment plus a linear history, the part of window.location and
    window.history the router depends on.

    set_hash() pushes an entry and fires "hashchange"; back()/forward() move
    through history and fire "popstate"; replace() rewrites the current entry
    silently (history.replaceState).
    """

    def __init__(self, fragment: str = ""):
        self._entries = [self._normalize(fragment)]
        self._index = 0
        self._listeners: list[Listener] = []

    @staticmethod
    def _normalize(fragment: str | None) -> str:
        return (fragment or "").lstrip("#")

    @property
    def fragment(self) -> str:
        return self._entries[self._index]

    @property
    def history(self) -> list[str]:
        return list(self._entries)

    def add_listener(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(event)

    def set_hash(self, fragment: str) -> bool:
        """Push a new entry. Returns False (and fires nothing) if unchanged."""
        fragment = self._normalize(fragment)
        if fragment == self.fragment:
            return False
        del self._entries[self._index + 1:]
        self._entries.append(fragment)
        self._index += 1
        self._emit(HASHCHANGE)
        return True

    def replace(self, fragment: str) -> None:
        self._entries[self._index] = self._normalize(fragment)

    def back(self) -> bool:
        if self._index == 0:
            return False
        self._index -= 1
        self._emit(POPSTATE)
        return True

    def forward(self) -> bool:
        if self._index >= len(self._entries) - 1:
            return False
        self._index += 1
        self._emit(POPSTATE)
        return True
