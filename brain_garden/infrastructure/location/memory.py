"""Адресная строка и история в памяти.

Классы:
    MemoryLocation
        Стек истории с курсором, как history API браузера.
"""

from __future__ import annotations

from brain_garden.interfaces.location import BaseLocationProvider, LocationListener
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


class MemoryLocation(BaseLocationProvider):
    """История навигации в памяти.

    push() отбрасывает записи "вперёд" и добавляет новую; replace()
    перезаписывает текущую; back()/forward() двигают курсор и уведомляют
    слушателей (аналог popstate).

    Example:
        >>> location = MemoryLocation("https://example.com", "/notes")
        >>> location.push("/notes/alpha")
        >>> location.back()
        True
        >>> location.path
        '/notes'
    """

    def __init__(self, origin: str = "http://localhost", path: str = "/notes") -> None:
        self._origin = origin.rstrip("/")
        self._entries: list[str] = [path]
        self._index = 0
        self._listeners: list[LocationListener] = []

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def path(self) -> str:
        return self._entries[self._index]

    @property
    def entries(self) -> tuple[str, ...]:
        """Все записи истории (для тестов и /where)."""
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def push(self, path: str) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(path)
        self._index += 1
        logger.trace("History push", path_value=path, depth=len(self._entries))

    def replace(self, path: str) -> None:
        self._entries[self._index] = path
        logger.trace("History replace", path_value=path, depth=len(self._entries))

    def back(self) -> bool:
        if self._index == 0:
            return False
        self._index -= 1
        self._notify()
        return True

    def forward(self) -> bool:
        if self._index >= len(self._entries) - 1:
            return False
        self._index += 1
        self._notify()
        return True

    def add_listener(self, listener: LocationListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: LocationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        path = self.path
        for listener in list(self._listeners):
            listener(path)
