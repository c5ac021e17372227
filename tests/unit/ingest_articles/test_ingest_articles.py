"""Tests for ingest_articles.ingest_articles module."""

from ingest_articles.ingest_articles import dedupe_batch, fetch_all, ingest_articles
from ingest_articles.sources.base import SourceAdapter


class StaticAdapter(SourceAdapter):
    def __init__(self, name, items, failing_targets=()):
        super().__init__()
        self.name = name
        self._items = items
        self._failing = set(failing_targets)

    def targets(self):
        return ["main", *self._failing]

    def fetch_target(self, target):
        if target in self._failing:
            raise RuntimeError("upstream 503")
        return list(self._items)


class ExplodingAdapter(SourceAdapter):
    name = "exploding"

    def targets(self):
        return []

    def fetch_target(self, target):
        return []

    def fetch(self):
        raise RuntimeError("adapter crashed")


class TestFetchAll:
    def test_merges_in_adapter_order(self, make_item) -> None:
        a = StaticAdapter("a", [make_item(1), make_item(2)])
        b = StaticAdapter("b", [make_item(3)])

        items, errors = fetch_all([a, b])

        assert [i.source_url for i in items] == [
            "https://example.com/story-1",
            "https://example.com/story-2",
            "https://example.com/story-3",
        ]
        assert errors == []

    def test_adapter_crash_is_contained(self, make_item) -> None:
        items, errors = fetch_all([ExplodingAdapter(), StaticAdapter("ok", [make_item(1)])])

        assert len(items) == 1
        assert errors == ["exploding fetch failed for all: adapter crashed"]

    def test_sub_source_failures_reported(self, make_item) -> None:
        adapter = StaticAdapter("partial", [make_item(1)], failing_targets=["broken-feed"])

        items, errors = fetch_all([adapter])

        assert len(items) == 1
        assert errors == ["partial fetch failed for broken-feed: upstream 503"]

    def test_no_adapters(self) -> None:
        assert fetch_all([]) == ([], [])


class TestDedupeBatch:
    def test_first_occurrence_wins(self, make_item) -> None:
        first = make_item(1, source_name="First")
        repeat = make_item(1, source_name="Second")

        unique, duplicates = dedupe_batch([first, make_item(2), repeat], max_articles=10)

        assert unique == [first, make_item(2)]
        assert duplicates == 1

    def test_drops_items_without_title_or_url(self, make_item) -> None:
        unique, duplicates = dedupe_batch(
            [make_item(1, title=""), make_item(2, source_url=""), make_item(3)],
            max_articles=10,
        )
        assert [i.source_url for i in unique] == ["https://example.com/story-3"]
        assert duplicates == 0

    def test_cap_applied_after_dedup(self, make_item) -> None:
        items = [make_item(1), make_item(1), make_item(2), make_item(3)]
        unique, duplicates = dedupe_batch(items, max_articles=2)
        assert [i.source_url for i in unique] == [
            "https://example.com/story-1",
            "https://example.com/story-2",
        ]
        assert duplicates == 1


class TestIngestArticles:
    def test_counts(self, make_item) -> None:
        a = StaticAdapter("a", [make_item(1), make_item(2)])
        b = StaticAdapter("b", [make_item(2), make_item(3)], failing_targets=["x"])

        result = ingest_articles([a, b], max_articles=200)

        assert result.fetched == 4
        assert result.deduplicated == 1
        assert len(result.items) == 3
        assert len(result.errors) == 1
