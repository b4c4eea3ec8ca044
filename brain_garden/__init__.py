"""Brain Garden - каталог заметок с превью и deep-link'ами.

Архитектура:
    Domain: Чистые DTO (NoteRecord, Topic, OverlayState, Notification).
    Interfaces: Контракты (BaseNoteStore, BaseLocationProvider, BaseClipboard,
        BaseScheduler).
    Infrastructure: Реализации (SupabaseNoteStore, JsonNoteStore,
        MemoryLocation, SystemClipboard, ThreadingScheduler).
    Core: Представление каталога, оверлей, синхронизация адреса, ссылки.
    CLI: Typer-приложение `garden`.

Пример:
    >>> from brain_garden import NotesArchive
    >>> from brain_garden.infrastructure import (
    ...     JsonNoteStore,
    ...     MemoryClipboard,
    ...     MemoryLocation,
    ...     ThreadingScheduler,
    ... )
    >>>
    >>> archive = NotesArchive(
    ...     JsonNoteStore("notes.json"),
    ...     MemoryLocation("https://example.com", "/notes/alpha"),
    ...     MemoryClipboard(),
    ...     ThreadingScheduler(),
    ... )
    >>> archive.mount()          # deep-link открывает превью alpha
    >>> archive.press_key("Escape")
    >>> archive.location.path
    '/notes'
"""

__version__ = "0.1.0"

from brain_garden.core import (
    CatalogQuery,
    HistoryMode,
    LocationSynchronizer,
    NotesArchive,
    OverlayStateMachine,
    ShareLinkAction,
    compute_view,
    topic_counts,
)
from brain_garden.domain import NoteRecord, OverlayState, Topic, TransitionSource, UIEvent
from brain_garden.exceptions import (
    BrainGardenError,
    ClipboardError,
    InvalidNoteRowError,
    NoteFetchError,
)

__all__ = [
    "__version__",
    "NotesArchive",
    "CatalogQuery",
    "HistoryMode",
    "LocationSynchronizer",
    "OverlayStateMachine",
    "ShareLinkAction",
    "compute_view",
    "topic_counts",
    "NoteRecord",
    "OverlayState",
    "Topic",
    "TransitionSource",
    "UIEvent",
    "BrainGardenError",
    "ClipboardError",
    "InvalidNoteRowError",
    "NoteFetchError",
]
