"""Хранилище заметок в памяти."""

from typing import Iterable, Optional

from brain_garden.domain.note import NoteRecord
from brain_garden.exceptions import NoteFetchError
from brain_garden.interfaces.note_store import BaseNoteStore


class StaticNoteStore(BaseNoteStore):
    """Отдаёт заранее заданный список записей.

    Attributes:
        calls: Сколько раз вызывался fetch_all_notes().
    """

    def __init__(
        self,
        records: Iterable[NoteRecord] = (),
        error: Optional[Exception] = None,
    ) -> None:
        """Args:
        records: Записи для выдачи.
        error: Если задано, fetch_all_notes() завершается NoteFetchError.
        """
        self._records = list(records)
        self._error = error
        self.calls = 0

    @property
    def description(self) -> str:
        return f"memory ({len(self._records)} notes)"

    def fetch_all_notes(self) -> list[NoteRecord]:
        self.calls += 1
        if self._error is not None:
            raise NoteFetchError(str(self._error)) from self._error
        return list(self._records)
