"""Контейнер состояния страницы заметок.

Связывает хранилище, запрос каталога, оверлей, синхронизацию адреса,
действие "Поделиться" и уведомления. Все зависимости передаются явно.

Классы:
    NotesArchive
        Точки входа UI-событий и производное состояние страницы.
"""

from __future__ import annotations

from typing import Optional

from brain_garden.core.catalog import (
    CatalogQuery,
    TopicLike,
    compute_query,
    latest_note,
    topic_counts,
)
from brain_garden.core.keyboard import KeyboardListeners
from brain_garden.core.location_sync import DEFAULT_BASE_PATH, HistoryMode, LocationSynchronizer
from brain_garden.core.notifications import DEFAULT_DURATION, NotificationCenter
from brain_garden.core.overlay import OverlayStateMachine
from brain_garden.core.share import ShareLinkAction
from brain_garden.domain.events import UIEvent
from brain_garden.domain.note import NoteRecord, Topic
from brain_garden.domain.overlay import OverlayState, TransitionSource
from brain_garden.exceptions import NoteFetchError
from brain_garden.interfaces.clipboard import BaseClipboard
from brain_garden.interfaces.location import BaseLocationProvider
from brain_garden.interfaces.note_store import BaseNoteStore
from brain_garden.interfaces.scheduler import BaseScheduler
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


class NotesArchive:
    """Страница "Brain Garden": каталог + оверлей превью.

    Жизненный цикл: mount() -> (records_loaded | load_failed) -> события
    UI -> unmount(). Загрузка выполняется один раз и не повторяется.

    Attributes:
        store: Источник записей.
        location: Провайдер адреса.
        overlay: Машина состояний оверлея.
        sync: Синхронизатор адреса.
        notifications: Центр уведомлений.
        sharing: Действие "Поделиться".
        keyboard: Реестр слушателей клавиш.

    Example:
        >>> archive = NotesArchive(store, MemoryLocation(), MemoryClipboard(), scheduler)
        >>> archive.mount()
        >>> archive.set_topic("AI")
        >>> archive.click_card("alpha")
        >>> archive.location.path
        '/notes/alpha'
    """

    def __init__(
        self,
        store: BaseNoteStore,
        location: BaseLocationProvider,
        clipboard: BaseClipboard,
        scheduler: BaseScheduler,
        *,
        base_path: str = DEFAULT_BASE_PATH,
        history_mode: HistoryMode = HistoryMode.PUSH,
        notification_duration: float = DEFAULT_DURATION,
        keyboard: Optional[KeyboardListeners] = None,
    ) -> None:
        self.store = store
        self.location = location
        self.keyboard = keyboard if keyboard is not None else KeyboardListeners()
        self.overlay = OverlayStateMachine(self.keyboard)
        self.sync = LocationSynchronizer(self.overlay, location, base_path, history_mode)
        self.notifications = NotificationCenter(scheduler, notification_duration)
        self.sharing = ShareLinkAction(clipboard, self.notifications, location, self.sync.base_path)

        self._records: list[NoteRecord] = []
        self._query = CatalogQuery()
        self._loading = False
        self._mounted = False
        self._load_error: Optional[NoteFetchError] = None
        self._pending_slug: Optional[str] = None

    # === Жизненный цикл ===

    def start_loading(self) -> None:
        """Запоминает slug из адреса и переходит в состояние загрузки."""
        self._pending_slug = self.sync.current_slug_from_location()
        self._loading = True
        self._load_error = None
        logger.debug("Loading notes", slug=self._pending_slug, store=self.store.description)

    def mount(self) -> None:
        """Однократная загрузка записей; повторный вызов ничего не делает."""
        if self._mounted:
            logger.debug("Archive already mounted")
            return
        self._mounted = True

        self.start_loading()
        try:
            records = self.store.fetch_all_notes()
        except NoteFetchError as e:
            self.load_failed(e)
            return
        self.records_loaded(records)

    def records_loaded(self, records: list[NoteRecord]) -> None:
        self._records = list(records)
        self._loading = False
        logger.info("Notes loaded", count=len(self._records))

        self.sync.resolve_deep_link(self._records, self._pending_slug)
        self._pending_slug = None

    def load_failed(self, error: NoteFetchError) -> None:
        """Ошибка загрузки: пустой каталог, без баннера; deep-link -> список."""
        self._records = []
        self._loading = False
        self._load_error = error
        logger.error_with_context(error, "Failed to load notes", store=self.store.description)

        self.sync.resolve_deep_link(self._records, self._pending_slug)
        self._pending_slug = None

    def unmount(self) -> None:
        """Закрывает оверлей и отписывает синхронизатор."""
        self.overlay.close(TransitionSource.CLOSE_CONTROL)
        self.notifications.clear()
        self.sync.detach()
        self._mounted = False

    # === Производное состояние ===

    @property
    def records(self) -> list[NoteRecord]:
        return list(self._records)

    @property
    def query(self) -> CatalogQuery:
        return self._query

    @property
    def view(self) -> list[NoteRecord]:
        return compute_query(self._records, self._query)

    @property
    def counts(self) -> dict[Topic, int]:
        return topic_counts(self._records)

    @property
    def latest(self) -> Optional[NoteRecord]:
        return latest_note(self.view, self._query)

    @property
    def total(self) -> int:
        return len(self._records)

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def load_error(self) -> Optional[NoteFetchError]:
        return self._load_error

    @property
    def state(self) -> OverlayState:
        return self.overlay.state

    @property
    def path(self) -> str:
        return self.location.path

    def find(self, slug: str) -> Optional[NoteRecord]:
        return next((record for record in self._records if record.slug == slug), None)

    # === События каталога ===

    def set_topic(self, topic: TopicLike) -> Topic:
        self._query = self._query.with_topic(topic)
        logger.debug("Topic selected", topic=self._query.topic.value)
        return self._query.topic

    def set_search(self, search_text: Optional[str]) -> None:
        self._query = self._query.with_search(search_text)
        logger.trace("Search changed", search=self._query.search_text)

    # === События оверлея ===

    def click_card(self, record: NoteRecord | str, event: Optional[UIEvent] = None) -> bool:
        """Клик по карточке открывает превью.

        Returns:
            True если оверлей открыт на этой записи.
        """
        event = event or UIEvent("click", "card")
        if event.propagation_stopped:
            return False

        target = self._resolve(record)
        if target is None:
            logger.warning("Card click for unknown note", slug=str(record))
            return False

        self.overlay.open(target, TransitionSource.CARD)
        return True

    def click_close(self) -> None:
        self.overlay.close(TransitionSource.CLOSE_CONTROL)

    def click_backdrop(self, event: Optional[UIEvent] = None) -> None:
        event = event or UIEvent("click", "backdrop")
        if event.propagation_stopped:
            return
        self.overlay.close(TransitionSource.BACKDROP)

    def click_overlay_surface(self, event: Optional[UIEvent] = None) -> UIEvent:
        """Клик внутри панели превью не доходит до фона."""
        event = event or UIEvent("click", "overlay")
        event.stop_propagation()
        self.click_backdrop(event)
        return event

    def press_key(self, key: str) -> bool:
        """Глобальное нажатие клавиши. Returns: был ли вызван слушатель."""
        return self.keyboard.dispatch(key)

    def click_share(
        self,
        record: NoteRecord | str | None = None,
        event: Optional[UIEvent] = None,
        within: str = "card",
    ) -> bool:
        """Кнопка "Поделиться" на карточке или в панели превью.

        Событие всплывает к родителю (карточка или фон), но share()
        останавливает его, поэтому состояние оверлея не меняется.

        Args:
            record: Запись или slug; по умолчанию открытая запись.
            event: Событие клика.
            within: "card" или "overlay".

        Returns:
            True если ссылка скопирована.
        """
        target = self._resolve(record) if record is not None else self.overlay.record
        if target is None:
            logger.warning("Nothing to share", slug=str(record) if record else None)
            return False

        event = event or UIEvent("click", "share")
        copied = self.sharing.share(target, event)

        if within == "overlay":
            self.click_backdrop(event)
        else:
            self.click_card(target, event)
        return copied

    # === История ===

    def navigate(self, path: str) -> None:
        """Внешняя навигация на путь (как переход по ссылке)."""
        self.location.push(path)
        self.sync.on_location_changed(path)

    def navigate_back(self) -> bool:
        return self.location.back()

    def navigate_forward(self) -> bool:
        return self.location.forward()

    def _resolve(self, record: NoteRecord | str) -> Optional[NoteRecord]:
        if isinstance(record, NoteRecord):
            return record
        return self.find(record)
