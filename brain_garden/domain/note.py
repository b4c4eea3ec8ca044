"""Модель заметки и перечисление тем.

Классы:
    Topic
        Закрытый набор тем с сентинелом ALL.
    NoteRecord
        Неизменяемая запись заметки из хранилища.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional

from brain_garden.exceptions import InvalidNoteRowError


class Topic(str, Enum):
    """Тема заметки.

    Attributes:
        ALL: Сентинел "без фильтра".
        AI: Заметки про AI-воркфлоу.
        SYSTEMS: Системное мышление.
        COLLABORATION: Совместная работа.
    """

    ALL = "All"
    AI = "AI"
    SYSTEMS = "Systems"
    COLLABORATION = "Collaboration"

    @classmethod
    def parse(cls, value: Any) -> "Topic":
        """Topic по значению; неизвестное или пустое значение -> ALL.

        Сравнение регистронезависимое: "ai", "AI" и Topic.AI равнозначны.
        """
        if isinstance(value, Topic):
            return value
        if isinstance(value, str):
            needle = value.strip().casefold()
            for topic in cls:
                if topic.value.casefold() == needle or topic.name.casefold() == needle:
                    return topic
        return cls.ALL

    @classmethod
    def selectable(cls) -> tuple["Topic", ...]:
        """Темы в порядке отображения в селекторе (ALL первым)."""
        return tuple(cls)


def parse_published_date(value: Any) -> Optional[datetime]:
    """Разбирает дату публикации в aware datetime (UTC для naive значений).

    Принимает datetime, date и ISO-строки ("2024-01-01",
    "2024-01-01T10:00:00Z"). Нераспознанное значение -> None.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class NoteRecord:
    """Заметка "Brain Garden".

    Создаётся и принадлежит внешнему хранилищу; ядро её никогда не
    изменяет. slug уникален и используется для deep-link'ов.

    Attributes:
        id: Непрозрачный идентификатор.
        slug: URL-safe идентификатор для /notes/{slug}.
        title: Заголовок.
        summary: Краткое описание (опционально).
        category: Тема (свободный текст, опционально).
        content: Тело заметки (HTML/Markdown, для ядра непрозрачно).
        published_date: Дата публикации (aware datetime или None).
        is_pinned: Закреплённая заметка идёт раньше остальных.
        tags: Теги из хранилища.
        featured: Флаг "избранное" для главной страницы.
    """

    id: str
    slug: str
    title: str
    summary: Optional[str] = None
    category: Optional[str] = None
    content: str = ""
    published_date: Optional[datetime] = None
    is_pinned: bool = False
    tags: tuple[str, ...] = field(default_factory=tuple)
    featured: bool = False

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "NoteRecord":
        """Создаёт запись из строки PostgREST/JSON.

        Поддерживает поля исходной таблицы brain_garden: summary
        с фолбэком на short_description, category с фолбэком на первый
        тег, совпадающий с известной темой.

        Raises:
            InvalidNoteRowError: Нет id, slug или title.
        """
        missing = [key for key in ("id", "slug", "title") if not _optional_text(row.get(key))]
        if missing:
            raise InvalidNoteRowError(f"Note row is missing required fields: {', '.join(missing)}")

        raw_tags = row.get("tags") or ()
        if isinstance(raw_tags, str):
            raw_tags = raw_tags.split(",")
        tags = tuple(t for t in (_optional_text(tag) for tag in raw_tags) if t)

        category = _optional_text(row.get("category"))
        if category is not None and Topic.parse(category) is not Topic.ALL:
            # "ai" -> "AI": известные темы приводятся к каноническому виду
            category = Topic.parse(category).value
        elif category is None:
            for tag in tags:
                if Topic.parse(tag) is not Topic.ALL:
                    category = Topic.parse(tag).value
                    break

        return cls(
            id=str(row["id"]).strip(),
            slug=str(row["slug"]).strip(),
            title=str(row["title"]).strip(),
            summary=_optional_text(row.get("summary")) or _optional_text(row.get("short_description")),
            category=category,
            content=str(row.get("content") or ""),
            published_date=parse_published_date(row.get("published_date")),
            is_pinned=bool(row.get("is_pinned") or False),
            tags=tags,
            featured=bool(row.get("featured") or False),
        )

    def to_row(self) -> dict[str, Any]:
        """Сериализация для JSON-экспорта и --json вывода CLI."""
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "summary": self.summary,
            "category": self.category,
            "content": self.content,
            "published_date": self.published_date.isoformat() if self.published_date else None,
            "is_pinned": self.is_pinned,
            "tags": list(self.tags),
            "featured": self.featured,
        }

    def __repr__(self) -> str:
        return f"NoteRecord(slug='{self.slug}', title='{self.title}', pinned={self.is_pinned})"


def newest_first_key(note: NoteRecord) -> tuple[bool, float]:
    """Ключ сортировки "новые первыми"; записи без даты уходят в конец."""
    if note.published_date is None:
        return (True, 0.0)
    return (False, -note.published_date.timestamp())
