"""Ядро каталога заметок и оверлея превью.

Модули:
    catalog: Производное представление (фильтр + сортировка).
    keyboard: Реестр глобальных слушателей клавиш.
    overlay: Машина состояний оверлея.
    location_sync: Синхронизация оверлея с адресом.
    notifications: Временные уведомления.
    share: Копирование ссылки на заметку.
    archive: Контейнер состояния страницы.
"""

from brain_garden.core.archive import NotesArchive
from brain_garden.core.catalog import (
    CatalogQuery,
    compute_query,
    compute_view,
    latest_note,
    topic_counts,
)
from brain_garden.core.keyboard import ESCAPE, KeyboardListeners, normalize_key
from brain_garden.core.location_sync import HistoryMode, LocationSynchronizer
from brain_garden.core.notifications import NotificationCenter
from brain_garden.core.overlay import OverlayObserver, OverlayStateMachine
from brain_garden.core.share import ShareLinkAction

__all__ = [
    "NotesArchive",
    "CatalogQuery",
    "compute_view",
    "compute_query",
    "topic_counts",
    "latest_note",
    "ESCAPE",
    "KeyboardListeners",
    "normalize_key",
    "HistoryMode",
    "LocationSynchronizer",
    "NotificationCenter",
    "OverlayObserver",
    "OverlayStateMachine",
    "ShareLinkAction",
]
