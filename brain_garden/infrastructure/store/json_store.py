"""Хранилище заметок из локального JSON-экспорта.

Классы:
    JsonNoteStore
        Читает массив строк таблицы из JSON-файла.
"""

import json
from pathlib import Path

from brain_garden.domain.note import NoteRecord
from brain_garden.exceptions import NoteFetchError
from brain_garden.infrastructure.store.rows import records_from_rows
from brain_garden.interfaces.note_store import BaseNoteStore
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


class JsonNoteStore(BaseNoteStore):
    """JSON-файл в формате экспорта таблицы: [{"id": ..., "slug": ...}, ...].

    Также принимает объект вида {"notes": [...]}.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    @property
    def description(self) -> str:
        return f"json:{self.path}"

    def fetch_all_notes(self) -> list[NoteRecord]:
        logger.info("Reading notes file", path=str(self.path))
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                payload = json.load(f)
        except OSError as e:
            raise NoteFetchError(f"Cannot read notes file {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise NoteFetchError(f"Notes file {self.path} is not valid JSON: {e}") from e

        if isinstance(payload, dict) and "notes" in payload:
            payload = payload["notes"]

        return records_from_rows(payload, source=str(self.path))
