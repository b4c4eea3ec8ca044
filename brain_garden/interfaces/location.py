"""Интерфейс адресной строки и истории навигации.

Классы:
    BaseLocationProvider
        ABC поверх адреса страницы и стека истории (аналог window.location
        + history.pushState/replaceState/back).
"""

from abc import ABC, abstractmethod
from typing import Callable

LocationListener = Callable[[str], None]


class BaseLocationProvider(ABC):
    """Абстрактный провайдер адреса.

    push() и replace() меняют адрес без перезагрузки страницы и без
    уведомления слушателей. Слушатели получают новый путь только при
    навигации по истории (back/forward), как событие popstate.
    """

    @property
    @abstractmethod
    def origin(self) -> str:
        """Origin сайта, например "https://example.com" (без завершающего /)."""
        raise NotImplementedError

    @property
    @abstractmethod
    def path(self) -> str:
        """Текущий путь, например "/notes/alpha"."""
        raise NotImplementedError

    @abstractmethod
    def push(self, path: str) -> None:
        """Добавляет новую запись истории с путём path."""
        raise NotImplementedError

    @abstractmethod
    def replace(self, path: str) -> None:
        """Заменяет текущую запись истории на path."""
        raise NotImplementedError

    @abstractmethod
    def back(self) -> bool:
        """Шаг назад по истории. Returns: False если назад некуда."""
        raise NotImplementedError

    @abstractmethod
    def forward(self) -> bool:
        """Шаг вперёд по истории. Returns: False если вперёд некуда."""
        raise NotImplementedError

    @abstractmethod
    def add_listener(self, listener: LocationListener) -> None:
        """Подписка на навигацию по истории."""
        raise NotImplementedError

    @abstractmethod
    def remove_listener(self, listener: LocationListener) -> None:
        raise NotImplementedError

    @property
    def href(self) -> str:
        """Полный адрес: origin + path."""
        return f"{self.origin}{self.path}"
