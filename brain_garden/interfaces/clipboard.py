"""Интерфейс буфера обмена.

Классы:
    BaseClipboard
        ABC для записи текста в системный буфер обмена.
"""

from abc import ABC, abstractmethod


class BaseClipboard(ABC):
    """Буфер обмена, доступный только на запись."""

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Записывает текст в буфер обмена.

        Raises:
            ClipboardError: Доступ запрещён или буфер недоступен.
        """
        raise NotImplementedError

    @property
    def available(self) -> bool:
        """Есть ли рабочий бэкенд (для doctor)."""
        return True
