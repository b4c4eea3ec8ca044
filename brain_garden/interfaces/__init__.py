"""Интерфейсы (контракты) для внешних коллабораторов ядра.

Классы:
    BaseNoteStore
        Источник записей заметок.
    BaseLocationProvider
        Адресная строка и стек истории.
    BaseClipboard
        Буфер обмена (только запись).
    BaseScheduler, TimerHandle
        Отложенные вызовы для автоскрытия уведомлений.
"""

from brain_garden.interfaces.note_store import BaseNoteStore
from brain_garden.interfaces.location import BaseLocationProvider, LocationListener
from brain_garden.interfaces.clipboard import BaseClipboard
from brain_garden.interfaces.scheduler import BaseScheduler, TimerHandle

__all__ = [
    "BaseNoteStore",
    "BaseLocationProvider",
    "LocationListener",
    "BaseClipboard",
    "BaseScheduler",
    "TimerHandle",
]
