"""Состояние оверлея превью.

Классы:
    TransitionSource
        Источник события, вызвавшего переход.
    OverlayState
        Closed (record is None) или Open(record).
    OverlayTransition
        Описание перехода для наблюдателей.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from brain_garden.domain.note import NoteRecord


class TransitionSource(str, Enum):
    """Кто инициировал переход оверлея.

    Attributes:
        CARD: Клик по карточке заметки.
        CLOSE_CONTROL: Явная кнопка закрытия.
        BACKDROP: Клик вне поверхности оверлея.
        ESCAPE: Клавиша Escape при открытом оверлее.
        DEEP_LINK: Открытие по адресу /notes/{slug} при загрузке.
        HISTORY: Навигация по истории (кнопки назад/вперёд).
    """

    CARD = "card"
    CLOSE_CONTROL = "close_control"
    BACKDROP = "backdrop"
    ESCAPE = "escape"
    DEEP_LINK = "deep_link"
    HISTORY = "history"


@dataclass(frozen=True)
class OverlayState:
    """Состояние оверлея: Closed или Open(record)."""

    record: Optional[NoteRecord] = None

    @property
    def is_open(self) -> bool:
        return self.record is not None

    @property
    def slug(self) -> Optional[str]:
        return self.record.slug if self.record else None

    def __repr__(self) -> str:
        return f"Open({self.record.slug})" if self.record else "Closed"


CLOSED = OverlayState()


@dataclass(frozen=True)
class OverlayTransition:
    """Переход оверлея, рассылаемый наблюдателям.

    Attributes:
        previous: Состояние до перехода.
        current: Состояние после перехода.
        source: Источник события.
    """

    previous: OverlayState
    current: OverlayState
    source: TransitionSource

    @property
    def opened(self) -> bool:
        """Переход закончился открытым оверлеем (включая замену записи)."""
        return self.current.is_open

    @property
    def closed(self) -> bool:
        return self.previous.is_open and not self.current.is_open

    @property
    def replaced(self) -> bool:
        """Open(a) -> Open(b): запись заменена без промежуточного Closed."""
        return self.previous.is_open and self.current.is_open
