"""
Конфигурация pytest для тестов Brain Garden.

Определяет фикстуры для:
- Тестовых заметок (сценарии каталога)
- Адреса, буфера обмена и планировщика в памяти
- Собранной страницы каталога (NotesArchive)
"""

from datetime import datetime, timezone
from typing import Callable

import pytest

from brain_garden.config import reset_config
from brain_garden.core.archive import NotesArchive
from brain_garden.domain.note import NoteRecord
from brain_garden.infrastructure import MemoryClipboard, MemoryLocation, StaticNoteStore
from brain_garden.interfaces.scheduler import BaseScheduler

ORIGIN = "https://garden.example"


def make_note(slug: str, title: str, **fields) -> NoteRecord:
    """Заметка с минимальным набором полей."""
    return NoteRecord(id=fields.pop("id", slug), slug=slug, title=title, **fields)


def utc(year: int, month: int = 1, day: int = 1) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


class ManualTimer:
    """Таймер ManualScheduler."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler(BaseScheduler):
    """Планировщик с ручным временем: advance() вызывает истёкшие таймеры."""

    def __init__(self):
        self.now = 0.0
        self.timers: list[ManualTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(self.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for timer in sorted(self.pending, key=lambda t: t.due):
            if timer.due <= self.now:
                timer.fired = True
                timer.callback()


@pytest.fixture(autouse=True)
def reset_global_config():
    """Сбрасывает глобальный конфиг перед каждым тестом."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def alpha() -> NoteRecord:
    return make_note("x", "Alpha", category="AI", published_date=utc(2024), content="<p>one two three</p>")


@pytest.fixture
def beta() -> NoteRecord:
    return make_note("y", "Beta", category="AI", is_pinned=True, published_date=utc(2023))


@pytest.fixture
def records(alpha, beta) -> list[NoteRecord]:
    """Две заметки: новая Alpha и закреплённая старая Beta."""
    return [alpha, beta]


@pytest.fixture
def garden(records) -> list[NoteRecord]:
    """Каталог из нескольких тем, с закреплёнными и недатированными заметками."""
    return records + [
        make_note("systems-thinking", "Systems Thinking", category="Systems", published_date=utc(2024, 3, 1),
                  summary="Feedback loops everywhere"),
        make_note("pairing", "Pairing with Agents", category="Collaboration", published_date=utc(2024, 2, 1),
                  summary="How AI agents change code review"),
        make_note("draft", "Undated Draft", category="Systems"),
        make_note("pinned-draft", "Pinned Draft", category="Collaboration", is_pinned=True),
    ]


@pytest.fixture
def location() -> MemoryLocation:
    return MemoryLocation(ORIGIN, "/notes")


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_archive(location, clipboard, scheduler) -> Callable[..., NotesArchive]:
    """Фабрика страницы каталога с хранилищем в памяти."""

    def factory(notes=(), error=None, **kwargs) -> NotesArchive:
        store = StaticNoteStore(notes, error=error)
        return NotesArchive(
            store,
            kwargs.pop("location", location),
            kwargs.pop("clipboard", clipboard),
            scheduler,
            **kwargs,
        )

    return factory


@pytest.fixture
def note_factory() -> Callable[..., NoteRecord]:
    """make_note() для тестов, которым нужны свои заметки."""
    return make_note
