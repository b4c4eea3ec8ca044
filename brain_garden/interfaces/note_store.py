"""Интерфейс хранилища заметок.

Классы:
    BaseNoteStore
        ABC для источников записей (Supabase, JSON-экспорт, память).
"""

from abc import ABC, abstractmethod

from brain_garden.domain.note import NoteRecord, newest_first_key


class BaseNoteStore(ABC):
    """Абстрактный источник заметок.

    Адаптер не фильтрует и не сортирует записи для каталога: это работа
    движка представления. Один вызов fetch_all_notes() на визит страницы.
    """

    @abstractmethod
    def fetch_all_notes(self) -> list[NoteRecord]:
        """Загружает все заметки.

        Returns:
            Список записей (может быть пустым).

        Raises:
            NoteFetchError: Хранилище недоступно или вернуло ошибку.
        """
        raise NotImplementedError

    def fetch_featured_notes(self, limit: int = 2) -> list[NoteRecord]:
        """Избранные заметки для превью на главной, новые первыми.

        Реализация по умолчанию фильтрует fetch_all_notes().

        Raises:
            NoteFetchError: Хранилище недоступно или вернуло ошибку.
        """
        featured = [note for note in self.fetch_all_notes() if note.featured]
        featured.sort(key=newest_first_key)
        return featured[:limit]

    @property
    def description(self) -> str:
        """Человекочитаемое описание источника (для doctor и логов)."""
        return self.__class__.__name__
