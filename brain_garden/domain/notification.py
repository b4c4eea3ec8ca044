"""Временное уведомление (toast).

Классы:
    NotificationKind
        Тип уведомления.
    Notification
        Неизменяемое уведомление с идентификатором.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

LINK_COPIED: str = "Link copied"
COPY_FAILED: str = "Copy failed"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Уведомление, которое автоматически скрывается через заданный интервал.

    Attributes:
        id: Порядковый идентификатор внутри NotificationCenter.
        message: Текст ("Link copied", "Copy failed").
        kind: SUCCESS или ERROR.
        detail: Дополнительный текст (например, скопированный URL).
        created_at: Время создания.
    """

    id: int
    message: str
    kind: NotificationKind = NotificationKind.SUCCESS
    detail: str = ""
    created_at: datetime = field(default_factory=datetime.now)
