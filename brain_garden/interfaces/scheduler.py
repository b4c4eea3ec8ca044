"""Интерфейс отложенных вызовов.

Классы:
    TimerHandle
        Протокол дескриптора таймера.
    BaseScheduler
        ABC для планирования call_later (аналог setTimeout).
"""

from abc import ABC, abstractmethod
from typing import Callable, Protocol


class TimerHandle(Protocol):
    """Дескриптор запланированного вызова."""

    def cancel(self) -> None:
        ...


class BaseScheduler(ABC):
    """Планировщик отложенных вызовов."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Планирует callback через delay секунд.

        Returns:
            Дескриптор с методом cancel().
        """
        raise NotImplementedError
