"""Тесты производного представления каталога.

Покрытие:
- compute_view: фильтр по теме и поиску, сортировка, детерминизм
- topic_counts: счётчики по темам
- latest_note: бейдж "Latest"
- CatalogQuery
"""

import pytest

from brain_garden.core.catalog import (
    CatalogQuery,
    compute_query,
    compute_view,
    latest_note,
    matches_search,
    normalize_search,
    topic_counts,
)
from brain_garden.domain.note import NoteRecord, Topic


def slugs(view):
    return [record.slug for record in view]


class TestComputeView:
    """Тесты compute_view()."""

    def test_pinned_first_despite_older_date(self, records):
        """Закреплённая Beta идёт раньше более новой Alpha."""
        view = compute_view(records, "AI", "")
        assert [r.title for r in view] == ["Beta", "Alpha"]

    def test_search_is_case_insensitive(self, records):
        view = compute_view(records, "All", "beta")
        assert [r.title for r in view] == ["Beta"]

    def test_search_matches_summary(self, garden):
        view = compute_view(garden, Topic.ALL, "FEEDBACK")
        assert slugs(view) == ["systems-thinking"]

    def test_search_ignores_surrounding_whitespace(self, records):
        assert slugs(compute_view(records, Topic.ALL, "  alp  ")) == ["x"]

    def test_whitespace_only_search_is_unfiltered(self, garden):
        assert len(compute_view(garden, Topic.ALL, "   ")) == len(garden)

    def test_topic_filter_uses_category(self, garden):
        view = compute_view(garden, Topic.SYSTEMS)
        assert {r.category for r in view} == {"Systems"}
        assert slugs(view) == ["systems-thinking", "draft"]

    def test_topic_and_search_combined(self, garden):
        view = compute_view(garden, "Collaboration", "agents")
        assert slugs(view) == ["pairing"]

    def test_unknown_topic_behaves_as_all(self, garden):
        assert compute_view(garden, "Gardening") == compute_view(garden, Topic.ALL)

    def test_none_topic_and_search(self, garden):
        assert compute_view(garden, None, None) == compute_view(garden)

    def test_empty_records(self):
        assert compute_view([], Topic.AI, "anything") == []

    def test_undated_sorts_last_within_tier(self, garden):
        view = compute_view(garden)
        assert slugs(view) == [
            "y",  # закреплённая, 2023
            "pinned-draft",  # закреплённая, без даты
            "systems-thinking",
            "pairing",
            "x",
            "draft",
        ]

    def test_pinned_always_before_unpinned(self, garden):
        view = compute_view(garden)
        flags = [r.is_pinned for r in view]
        assert flags == sorted(flags, reverse=True)

    def test_every_result_satisfies_filter(self, garden):
        for topic in Topic.selectable():
            for text in ("", "a", "draft", "zzz"):
                for record in compute_view(garden, topic, text):
                    assert topic is Topic.ALL or record.category == topic.value
                    assert matches_search(record, text)

    def test_deterministic(self, garden):
        first = compute_view(garden, Topic.ALL, "a")
        second = compute_view(list(garden), Topic.ALL, "a")
        assert first == second

    def test_stable_for_equal_keys(self, note_factory):
        twins = [note_factory("a", "Same"), note_factory("b", "Same"), note_factory("c", "Same")]
        assert slugs(compute_view(twins)) == ["a", "b", "c"]

    def test_does_not_mutate_input(self, garden):
        original = list(garden)
        compute_view(garden, Topic.AI, "alpha")
        assert garden == original

    def test_record_without_category_only_in_all(self, note_factory):
        loose = [note_factory("loose", "Loose")]
        assert slugs(compute_view(loose, Topic.ALL)) == ["loose"]
        assert compute_view(loose, Topic.AI) == []


class TestTopicCounts:
    """Тесты topic_counts()."""

    def test_counts_per_topic(self, garden):
        counts = topic_counts(garden)
        assert counts == {
            Topic.ALL: 6,
            Topic.AI: 2,
            Topic.SYSTEMS: 2,
            Topic.COLLABORATION: 2,
        }

    def test_empty(self):
        assert topic_counts([]) == {topic: 0 for topic in Topic.selectable()}

    def test_lowercase_category_from_row_counted(self):
        rows = [
            {"id": 1, "slug": "a", "title": "A", "category": "ai"},
            {"id": 2, "slug": "b", "title": "B", "category": "AI"},
        ]
        records = [NoteRecord.from_row(row) for row in rows]

        assert topic_counts(records)[Topic.AI] == 2
        assert slugs(compute_view(records, Topic.AI)) == ["a", "b"]


class TestCatalogQuery:
    """Тесты CatalogQuery."""

    def test_defaults_unfiltered(self):
        query = CatalogQuery()
        assert query.topic is Topic.ALL
        assert query.is_unfiltered

    def test_with_topic_parses(self):
        assert CatalogQuery().with_topic("ai").topic is Topic.AI
        assert CatalogQuery().with_topic("unknown").topic is Topic.ALL

    def test_with_search_none(self):
        assert CatalogQuery(search_text="x").with_search(None).search_text == ""

    def test_whitespace_search_is_unfiltered(self):
        assert CatalogQuery(search_text="   ").is_unfiltered

    def test_compute_query(self, records):
        query = CatalogQuery(Topic.AI, "alpha")
        assert slugs(compute_query(records, query)) == ["x"]

    def test_immutable(self):
        with pytest.raises(AttributeError):
            CatalogQuery().topic = Topic.AI


class TestLatestNote:
    """Тесты бейджа "Latest"."""

    def test_first_card_when_unfiltered(self, garden):
        view = compute_view(garden)
        assert latest_note(view, CatalogQuery()) is view[0]

    def test_none_when_filtered(self, garden):
        query = CatalogQuery(Topic.AI)
        assert latest_note(compute_query(garden, query), query) is None

    def test_none_when_searching(self, garden):
        query = CatalogQuery(search_text="a")
        assert latest_note(compute_query(garden, query), query) is None

    def test_none_for_empty_view(self):
        assert latest_note([], CatalogQuery()) is None


def test_normalize_search():
    assert normalize_search("  ÄBC ") == "äbc"
    assert normalize_search(None) == ""
