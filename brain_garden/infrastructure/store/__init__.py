"""Реализации BaseNoteStore.

Классы:
    SupabaseNoteStore
        REST API Supabase (httpx).
    JsonNoteStore
        Локальный JSON-экспорт таблицы.
    StaticNoteStore
        Список записей в памяти.
"""

from brain_garden.infrastructure.store.supabase import SupabaseNoteStore
from brain_garden.infrastructure.store.json_store import JsonNoteStore
from brain_garden.infrastructure.store.memory import StaticNoteStore
from brain_garden.infrastructure.store.rows import records_from_rows, rows_from_records

__all__ = [
    "SupabaseNoteStore",
    "JsonNoteStore",
    "StaticNoteStore",
    "records_from_rows",
    "rows_from_records",
]
