"""Реестр глобальных слушателей клавиатуры.

Классы:
    KeyboardListeners
        Аналог window.addEventListener("keydown") с явным снятием.
"""

from __future__ import annotations

from typing import Callable

from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)

ESCAPE: str = "Escape"

_KEY_ALIASES: dict[str, str] = {
    "esc": ESCAPE,
    "escape": ESCAPE,
    "\x1b": ESCAPE,
}

KeyCallback = Callable[[str], None]


def normalize_key(key: str) -> str:
    """Каноническое имя клавиши ("esc", "\\x1b" -> "Escape")."""
    return _KEY_ALIASES.get(key.strip().lower(), key)


class KeyboardListeners:
    """Слушатели клавиш с дескрипторами для снятия.

    Example:
        >>> keyboard = KeyboardListeners()
        >>> handle = keyboard.add(ESCAPE, lambda key: print("closed"))
        >>> keyboard.dispatch("esc")
        closed
        True
        >>> keyboard.remove(handle)
        True
    """

    def __init__(self) -> None:
        self._listeners: dict[int, tuple[str, KeyCallback]] = {}
        self._next_handle = 1

    def add(self, key: str, callback: KeyCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._listeners[handle] = (normalize_key(key), callback)
        logger.trace("Key listener added", key=key, handle=handle, total=len(self._listeners))
        return handle

    def remove(self, handle: int) -> bool:
        removed = self._listeners.pop(handle, None) is not None
        logger.trace("Key listener removed", handle=handle, removed=removed, total=len(self._listeners))
        return removed

    def dispatch(self, key: str) -> bool:
        """Вызывает слушателей клавиши.

        Returns:
            True если хотя бы один слушатель был вызван.
        """
        key = normalize_key(key)
        callbacks = [cb for bound, cb in self._listeners.values() if bound == key]
        for callback in callbacks:
            callback(key)
        return bool(callbacks)

    def count(self, key: str | None = None) -> int:
        if key is None:
            return len(self._listeners)
        key = normalize_key(key)
        return sum(1 for bound, _ in self._listeners.values() if bound == key)

    def clear(self) -> None:
        self._listeners.clear()

    def __len__(self) -> int:
        return len(self._listeners)
