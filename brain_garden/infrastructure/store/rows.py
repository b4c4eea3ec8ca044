"""Преобразование строк хранилища в NoteRecord."""

from typing import Any, Iterable, Mapping

from brain_garden.domain.note import NoteRecord
from brain_garden.exceptions import InvalidNoteRowError, NoteFetchError
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


def records_from_rows(rows: Any, source: str) -> list[NoteRecord]:
    """Строит записи из списка строк, пропуская битые строки.

    Args:
        rows: Декодированный JSON (ожидается список объектов).
        source: Имя источника для логов.

    Raises:
        NoteFetchError: rows не является списком.
    """
    if not isinstance(rows, list):
        raise NoteFetchError(
            f"Unexpected payload from {source}: expected a list, got {type(rows).__name__}"
        )

    records: list[NoteRecord] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            logger.warning("Skipping non-object row", source=source, index=index)
            continue
        try:
            records.append(NoteRecord.from_row(row))
        except InvalidNoteRowError as e:
            logger.warning("Skipping invalid note row", source=source, index=index, error=str(e))

    logger.debug("Rows converted", source=source, rows=len(rows), records=len(records))
    return records


def rows_from_records(records: Iterable[NoteRecord]) -> list[dict[str, Any]]:
    return [record.to_row() for record in records]
