"""Машина состояний оверлея превью.

Состояния: Closed и Open(record). Начальное состояние Closed, терминального нет.
Все закрытия (кнопка, клик по фону, Escape) проходят через close(),
поэтому у состояния один писатель.

Классы:
    OverlayObserver
        Протокол наблюдателя переходов.
    OverlayStateMachine
        Переходы open/close и слушатель Escape на время открытия.
"""

from __future__ import annotations

from typing import Optional, Protocol

from brain_garden.core.keyboard import ESCAPE, KeyboardListeners
from brain_garden.domain.note import NoteRecord
from brain_garden.domain.overlay import (
    CLOSED,
    OverlayState,
    OverlayTransition,
    TransitionSource,
)
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


class OverlayObserver(Protocol):
    def on_transition(self, transition: OverlayTransition) -> None:
        ...


class OverlayStateMachine:
    """Оверлей с одним открытым превью.

    Attributes:
        keyboard: Реестр слушателей клавиш; слушатель Escape живёт
            только пока оверлей открыт.

    Example:
        >>> overlay = OverlayStateMachine()
        >>> overlay.open(note)
        >>> overlay.state
        Open(alpha)
        >>> overlay.keyboard.dispatch("Escape")
        True
        >>> overlay.state
        Closed
    """

    def __init__(self, keyboard: Optional[KeyboardListeners] = None) -> None:
        self.keyboard = keyboard if keyboard is not None else KeyboardListeners()
        self._state: OverlayState = CLOSED
        self._observers: list[OverlayObserver] = []
        self._escape_handle: Optional[int] = None

    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def record(self) -> Optional[NoteRecord]:
        return self._state.record

    def subscribe(self, observer: OverlayObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: OverlayObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def open(
        self,
        record: NoteRecord,
        source: TransitionSource = TransitionSource.CARD,
    ) -> Optional[OverlayTransition]:
        """Closed -> Open(record) или Open(other) -> Open(record).

        Повторное открытие уже открытой записи ничего не делает.

        Returns:
            Выполненный переход или None.
        """
        if self._state.record is not None and self._state.record.slug == record.slug:
            logger.debug("Overlay already showing note", slug=record.slug)
            return None

        previous = self._state
        self._state = OverlayState(record)

        if self._escape_handle is None:
            self._escape_handle = self.keyboard.add(ESCAPE, self._on_escape)

        transition = OverlayTransition(previous, self._state, source)
        logger.info(
            "Overlay replaced" if transition.replaced else "Overlay opened",
            slug=record.slug,
            source=source.value,
        )
        self._emit(transition)
        return transition

    def close(
        self,
        source: TransitionSource = TransitionSource.CLOSE_CONTROL,
    ) -> Optional[OverlayTransition]:
        """Open(_) -> Closed; без эффекта, если уже закрыт.

        Returns:
            Выполненный переход или None.
        """
        if not self._state.is_open:
            return None

        previous = self._state
        self._state = CLOSED

        if self._escape_handle is not None:
            self.keyboard.remove(self._escape_handle)
            self._escape_handle = None

        transition = OverlayTransition(previous, self._state, source)
        logger.info("Overlay closed", slug=previous.slug, source=source.value)
        self._emit(transition)
        return transition

    def _on_escape(self, key: str) -> None:
        self.close(TransitionSource.ESCAPE)

    def _emit(self, transition: OverlayTransition) -> None:
        # Побочные эффекты наблюдателей не откатывают переход
        for observer in list(self._observers):
            try:
                observer.on_transition(transition)
            except Exception as e:
                logger.error_with_context(
                    e,
                    "Overlay observer failed",
                    observer=type(observer).__name__,
                    source=transition.source.value,
                )
