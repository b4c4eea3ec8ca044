"""Центр временных уведомлений.

Классы:
    NotificationCenter
        Показывает уведомления и скрывает их по таймеру.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional

from brain_garden.domain.notification import Notification, NotificationKind
from brain_garden.interfaces.scheduler import BaseScheduler, TimerHandle
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DURATION: float = 3.0

NotificationListener = Callable[[str, Notification], None]


class NotificationCenter:
    """Уведомления с автоматическим скрытием.

    Каждое уведомление живёт duration секунд, затем удаляется
    отложенным вызовом планировщика. Слушатели получают события
    "shown" и "dismissed".

    Attributes:
        scheduler: Планировщик отложенных вызовов.
        duration: Время показа в секундах.
    """

    def __init__(self, scheduler: BaseScheduler, duration: float = DEFAULT_DURATION) -> None:
        if duration <= 0:
            raise ValueError(f"Notification duration must be positive, got {duration}")

        self.scheduler = scheduler
        self.duration = duration
        self._lock = threading.Lock()
        self._next_id = 1
        self._active: dict[int, Notification] = {}
        self._timers: dict[int, TimerHandle] = {}
        self._history: list[Notification] = []
        self._listeners: list[NotificationListener] = []

    @property
    def active(self) -> list[Notification]:
        """Видимые уведомления в порядке появления."""
        with self._lock:
            return list(self._active.values())

    @property
    def history(self) -> list[Notification]:
        """Все показанные уведомления, включая скрытые."""
        with self._lock:
            return list(self._history)

    def add_listener(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def notify(
        self,
        message: str,
        kind: NotificationKind = NotificationKind.SUCCESS,
        detail: str = "",
    ) -> Notification:
        """Показывает уведомление и планирует его скрытие."""
        with self._lock:
            notification = Notification(self._next_id, message, kind, detail)
            self._next_id += 1
            self._active[notification.id] = notification
            self._history.append(notification)

        # Планируем вне блокировки: ручной планировщик может вызвать сразу
        timer = self.scheduler.call_later(self.duration, lambda: self.dismiss(notification.id))
        with self._lock:
            if notification.id in self._active:
                self._timers[notification.id] = timer

        logger.debug("Notification shown", notification_id=notification.id, kind=kind.value)
        self._fire("shown", notification)
        return notification

    def dismiss(self, notification_id: int) -> Optional[Notification]:
        """Скрывает уведомление; повторный вызов ничего не делает."""
        with self._lock:
            notification = self._active.pop(notification_id, None)
            timer = self._timers.pop(notification_id, None)

        if notification is None:
            return None
        if timer is not None:
            timer.cancel()

        logger.trace("Notification dismissed", notification_id=notification_id)
        self._fire("dismissed", notification)
        return notification

    def clear(self) -> None:
        """Скрывает все видимые уведомления."""
        for notification in self.active:
            self.dismiss(notification.id)

    def _fire(self, event: str, notification: Notification) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, notification)
            except Exception as e:
                logger.error_with_context(e, "Notification listener failed", event=event)
