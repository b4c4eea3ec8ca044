"""Доменный слой: неизменяемые объекты данных.

Классы:
    NoteRecord
        Заметка из хранилища.
    Topic
        Закрытый набор тем с сентинелом ALL.
    OverlayState, OverlayTransition, TransitionSource
        Состояние и переходы оверлея превью.
    UIEvent
        Событие интерфейса с остановкой всплытия.
    Notification, NotificationKind
        Временные уведомления.
"""

from brain_garden.domain.note import (
    NoteRecord,
    Topic,
    newest_first_key,
    parse_published_date,
)
from brain_garden.domain.overlay import (
    CLOSED,
    OverlayState,
    OverlayTransition,
    TransitionSource,
)
from brain_garden.domain.events import UIEvent
from brain_garden.domain.notification import (
    COPY_FAILED,
    LINK_COPIED,
    Notification,
    NotificationKind,
)

__all__ = [
    "NoteRecord",
    "Topic",
    "newest_first_key",
    "parse_published_date",
    "CLOSED",
    "OverlayState",
    "OverlayTransition",
    "TransitionSource",
    "UIEvent",
    "COPY_FAILED",
    "LINK_COPIED",
    "Notification",
    "NotificationKind",
]
