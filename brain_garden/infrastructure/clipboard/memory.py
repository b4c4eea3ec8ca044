"""Буфер обмена в памяти."""

from typing import Optional

from brain_garden.exceptions import ClipboardError
from brain_garden.interfaces.clipboard import BaseClipboard


class MemoryClipboard(BaseClipboard):
    """Хранит последний записанный текст.

    Attributes:
        text: Последнее записанное значение.
        writes: Все записи по порядку.
        denied: Если True, write_text() бросает ClipboardError.
    """

    def __init__(self, denied: bool = False) -> None:
        self.text: Optional[str] = None
        self.writes: list[str] = []
        self.denied = denied

    def write_text(self, text: str) -> None:
        if self.denied:
            raise ClipboardError("Clipboard access denied")
        self.text = text
        self.writes.append(text)
