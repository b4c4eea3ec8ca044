"""Движок производного представления каталога заметок.

Представление является чистой функцией от (records, topic, search_text), без
скрытого состояния, повторный вызов с теми же аргументами даёт тот же
упорядоченный список.

Классы:
    CatalogQuery
        Выбранная тема и строка поиска.

Функции:
    compute_view
        Фильтрация + стабильная сортировка (закреплённые первыми,
        затем новые первыми, без даты в конце уровня).
    topic_counts
        Счётчики по темам для бейджей (по нефильтрованному списку).
    latest_note
        Карточка с бейджем "Latest".
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence, Union

from brain_garden.domain.note import NoteRecord, Topic, newest_first_key

TopicLike = Union[Topic, str, None]


@dataclass(frozen=True)
class CatalogQuery:
    """Запрос к каталогу.

    Attributes:
        topic: Выбранная тема (ALL = без фильтра).
        search_text: Строка поиска (регистронезависимая подстрока).
    """

    topic: Topic = Topic.ALL
    search_text: str = ""

    def with_topic(self, topic: TopicLike) -> "CatalogQuery":
        return replace(self, topic=Topic.parse(topic))

    def with_search(self, search_text: Optional[str]) -> "CatalogQuery":
        return replace(self, search_text=search_text or "")

    @property
    def normalized_search(self) -> str:
        return normalize_search(self.search_text)

    @property
    def is_unfiltered(self) -> bool:
        return self.topic is Topic.ALL and not self.normalized_search


def normalize_search(search_text: Optional[str]) -> str:
    """Строка поиска для сравнения: без крайних пробелов, casefold."""
    return (search_text or "").strip().casefold()


def matches_topic(record: NoteRecord, topic: TopicLike) -> bool:
    topic = Topic.parse(topic)
    return topic is Topic.ALL or record.category == topic.value


def matches_search(record: NoteRecord, search_text: Optional[str]) -> bool:
    needle = normalize_search(search_text)
    if not needle:
        return True
    return needle in record.title.casefold() or needle in (record.summary or "").casefold()


def view_sort_key(record: NoteRecord) -> tuple[bool, bool, float]:
    """Закреплённые первыми, внутри уровня новые первыми, без даты последними."""
    return (not record.is_pinned, *newest_first_key(record))


def compute_view(
    records: Iterable[NoteRecord],
    topic: TopicLike = Topic.ALL,
    search_text: Optional[str] = "",
) -> list[NoteRecord]:
    """Вычисляет упорядоченное подмножество для отображения.

    Args:
        records: Полный список записей.
        topic: Тема; значения вне перечисления трактуются как ALL.
        search_text: Подстрока для title/summary; пустая = без фильтра.

    Returns:
        Новый список; сортировка стабильная, исходный порядок сохраняется
        для записей с равным ключом.
    """
    topic = Topic.parse(topic)
    selected = [
        record
        for record in records
        if matches_topic(record, topic) and matches_search(record, search_text)
    ]
    return sorted(selected, key=view_sort_key)


def compute_query(records: Iterable[NoteRecord], query: CatalogQuery) -> list[NoteRecord]:
    return compute_view(records, query.topic, query.search_text)


def topic_counts(records: Iterable[NoteRecord]) -> dict[Topic, int]:
    """Количество записей по каждой теме; ALL = всего записей.

    Не зависит от строки поиска.
    """
    records = list(records)
    return {
        topic: sum(1 for record in records if matches_topic(record, topic))
        for topic in Topic.selectable()
    }


def latest_note(view: Sequence[NoteRecord], query: CatalogQuery) -> Optional[NoteRecord]:
    """Первая карточка получает бейдж "Latest", только без фильтров."""
    if view and query.is_unfiltered:
        return view[0]
    return None
