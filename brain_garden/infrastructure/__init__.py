"""Инфраструктура: адаптеры к хранилищам, буферу обмена, истории и таймерам."""

from brain_garden.infrastructure.store import JsonNoteStore, StaticNoteStore, SupabaseNoteStore
from brain_garden.infrastructure.location import MemoryLocation
from brain_garden.infrastructure.clipboard import MemoryClipboard, SystemClipboard
from brain_garden.infrastructure.scheduler import ThreadingScheduler

__all__ = [
    "JsonNoteStore",
    "StaticNoteStore",
    "SupabaseNoteStore",
    "MemoryLocation",
    "MemoryClipboard",
    "SystemClipboard",
    "ThreadingScheduler",
]
