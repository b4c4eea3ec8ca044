"""Синхронизация оверлея с адресной строкой.

Инвариант: Closed <-> {base}, Open(r) <-> {base}/{r.slug}.

Классы:
    HistoryMode
        Политика записи истории при открытии.
    LocationSynchronizer
        Наблюдатель оверлея и слушатель навигации по истории.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional
from urllib.parse import quote, unquote, urlsplit

from brain_garden.core.overlay import OverlayStateMachine
from brain_garden.domain.note import NoteRecord
from brain_garden.domain.overlay import OverlayState, OverlayTransition, TransitionSource
from brain_garden.interfaces.location import BaseLocationProvider
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_PATH: str = "/notes"


class HistoryMode(str, Enum):
    """Политика истории.

    Attributes:
        PUSH: Открытие добавляет запись истории, закрытие заменяет
            текущую запись путём списка.
        REPLACE: И открытие, и закрытие заменяют текущую запись.
    """

    PUSH = "push"
    REPLACE = "replace"


def normalize_base_path(base_path: str) -> str:
    """"notes/" -> "/notes"; пустое значение -> "/notes"."""
    base = "/" + base_path.strip().strip("/")
    return base if base != "/" else DEFAULT_BASE_PATH


class LocationSynchronizer:
    """Отражает переходы оверлея в адрес без перезагрузки страницы.

    Переходы с источником DEEP_LINK или HISTORY никогда не добавляют
    запись истории: адрес уже указывает на нужное состояние, допускается
    только replace() для исправления.

    Attributes:
        overlay: Машина состояний оверлея.
        location: Провайдер адреса.
        base_path: Путь списка ("/notes").
        mode: Политика истории.
    """

    def __init__(
        self,
        overlay: OverlayStateMachine,
        location: BaseLocationProvider,
        base_path: str = DEFAULT_BASE_PATH,
        mode: HistoryMode = HistoryMode.PUSH,
    ) -> None:
        self.overlay = overlay
        self.location = location
        self.base_path = normalize_base_path(base_path)
        self.mode = HistoryMode(mode)
        self._records: dict[str, NoteRecord] = {}

        overlay.subscribe(self)
        location.add_listener(self.on_location_changed)
        logger.debug("Location synchronizer attached", base_path=self.base_path, mode=self.mode.value)

    # === Пути ===

    @property
    def listing_path(self) -> str:
        return self.base_path

    def path_for(self, record: NoteRecord) -> str:
        return f"{self.base_path}/{quote(record.slug, safe='')}"

    def binding_for(self, state: OverlayState) -> str:
        """Путь, соответствующий состоянию оверлея."""
        return self.path_for(state.record) if state.record else self.listing_path

    def slug_from_path(self, path: str) -> Optional[str]:
        """Извлекает slug из "{base}/{slug}" (query и fragment игнорируются).

        Returns:
            Декодированный slug или None для пути списка и чужих путей.
        """
        clean = urlsplit(path).path.rstrip("/")
        prefix = self.base_path + "/"
        if not clean.startswith(prefix):
            return None
        tail = clean[len(prefix):]
        if not tail or "/" in tail:
            return None
        return unquote(tail)

    def is_notes_path(self, path: str) -> bool:
        """Путь списка или "{base}/..."; остальные страницы сайта не наши."""
        clean = urlsplit(path).path.rstrip("/")
        return clean == self.base_path or clean.startswith(self.base_path + "/")

    def current_slug_from_location(self) -> Optional[str]:
        return self.slug_from_path(self.location.path)

    # === Записи ===

    def set_records(self, records: Iterable[NoteRecord]) -> None:
        """Индекс slug -> запись для deep-link'ов и навигации по истории."""
        self._records = {record.slug: record for record in records}

    def find(self, slug: str) -> Optional[NoteRecord]:
        return self._records.get(slug)

    # === Синхронизация ===

    def on_transition(self, transition: OverlayTransition) -> None:
        target = self.binding_for(transition.current)
        current = self.location.path

        if transition.source in (TransitionSource.DEEP_LINK, TransitionSource.HISTORY):
            # Уход на другую страницу сайта закрывает превью без правки адреса
            if current != target and self.is_notes_path(current):
                self.location.replace(target)
            return

        if transition.opened and self.mode is HistoryMode.PUSH:
            self.location.push(target)
        elif current != target:
            self.location.replace(target)

        logger.debug("Location synced", path_value=self.location.path, source=transition.source.value)

    def resolve_deep_link(
        self,
        records: Optional[Iterable[NoteRecord]] = None,
        slug: Optional[str] = None,
    ) -> Optional[NoteRecord]:
        """Открывает оверлей по slug из адреса после загрузки записей.

        Args:
            records: Загруженные записи; None = использовать текущий индекс.
            slug: Slug из адреса на момент монтирования; по умолчанию
                берётся из текущего адреса.

        Returns:
            Открытая запись или None (нет deep-link'а или промах).
        """
        if records is not None:
            self.set_records(records)
        slug = slug if slug is not None else self.current_slug_from_location()
        if slug is None:
            return None

        record = self.find(slug)
        if record is None:
            logger.info("Deep link did not match any note", slug=slug)
            self.overlay.close(TransitionSource.DEEP_LINK)
            if self.location.path != self.listing_path:
                self.location.replace(self.listing_path)
            return None

        self.overlay.open(record, TransitionSource.DEEP_LINK)
        return record

    def on_location_changed(self, path: str) -> None:
        """Навигация по истории (назад/вперёд) -> состояние оверлея."""
        slug = self.slug_from_path(path)
        if slug is None:
            self.overlay.close(TransitionSource.HISTORY)
            return

        record = self.find(slug)
        if record is None:
            logger.info("History entry points to unknown note", slug=slug)
            self.overlay.close(TransitionSource.HISTORY)
            self.location.replace(self.listing_path)
            return

        self.overlay.open(record, TransitionSource.HISTORY)

    def detach(self) -> None:
        self.overlay.unsubscribe(self)
        self.location.remove_listener(self.on_location_changed)
