"""Хранилище заметок в Supabase (PostgREST поверх httpx).

Классы:
    SupabaseNoteStore
        Читает таблицу brain_garden через REST API Supabase.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from brain_garden.domain.note import NoteRecord
from brain_garden.exceptions import NoteFetchError
from brain_garden.infrastructure.store.rows import records_from_rows
from brain_garden.interfaces.note_store import BaseNoteStore
from brain_garden.utils.logger import get_logger

logger = get_logger(__name__)


class SupabaseNoteStore(BaseNoteStore):
    """Адаптер к REST API Supabase.

    Запрос эквивалентен supabase.from(table).select('*')
    .order('published_date', {ascending: false}).

    Attributes:
        url: Базовый URL проекта (https://<ref>.supabase.co).
        table: Имя таблицы с заметками.

    Example:
        >>> store = SupabaseNoteStore(url="https://abc.supabase.co", anon_key="...")
        >>> notes = store.fetch_all_notes()
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        table: str = "brain_garden",
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Создаёт адаптер.

        Args:
            url: Базовый URL проекта Supabase.
            anon_key: Публичный anon-ключ.
            table: Таблица с заметками.
            timeout: Таймаут HTTP-запроса в секундах.
            client: Готовый httpx.Client (для тестов с MockTransport).
        """
        self.url = url.rstrip("/")
        self.table = table
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)
        self._headers = {
            "apikey": anon_key,
            "Authorization": f"Bearer {anon_key}",
            "Accept": "application/json",
        }
        logger.debug("Supabase store initialized", url=self.url, table=table)

    @property
    def endpoint(self) -> str:
        return f"{self.url}/rest/v1/{self.table}"

    @property
    def description(self) -> str:
        return f"supabase:{self.url} (table {self.table})"

    def _get(self, params: dict[str, Any]) -> Any:
        try:
            response = self._client.get(self.endpoint, params=params, headers=self._headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise NoteFetchError(
                f"Supabase returned HTTP {e.response.status_code} for table '{self.table}'"
            ) from e
        except httpx.HTTPError as e:
            raise NoteFetchError(f"Supabase request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise NoteFetchError("Supabase returned invalid JSON") from e

    def fetch_all_notes(self) -> list[NoteRecord]:
        logger.info("Fetching all notes", table=self.table)
        rows = self._get({"select": "*", "order": "published_date.desc.nullslast"})
        logger.trace("Raw rows received", count=len(rows) if isinstance(rows, list) else None)
        return records_from_rows(rows, source=self.table)

    def fetch_featured_notes(self, limit: int = 2) -> list[NoteRecord]:
        logger.info("Fetching featured notes", table=self.table, limit=limit)
        rows = self._get(
            {
                "select": "*",
                "featured": "eq.true",
                "order": "published_date.desc.nullslast",
                "limit": str(limit),
            }
        )
        return records_from_rows(rows, source=self.table)

    def close(self) -> None:
        """Закрывает HTTP-клиент, если он создан адаптером."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SupabaseNoteStore":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
