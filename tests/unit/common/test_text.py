"""Tests for common.text module."""

from common.text import clean_text, extract_image_from_html, truncate, word_count


class TestCleanText:
    def test_none_returns_none(self) -> None:
        assert clean_text(None) is None

    def test_strips_tags_and_unescapes(self) -> None:
        assert clean_text("<p>Bees &amp; <b>flowers</b></p>") == "Bees & flowers"

    def test_collapses_whitespace(self) -> None:
        assert clean_text("  one\n\n two\tthree ") == "one two three"

    def test_only_markup_returns_none(self) -> None:
        assert clean_text("<br/> <hr>") is None


class TestTruncate:
    def test_none_is_empty_string(self) -> None:
        assert truncate(None, 10) == ""

    def test_cuts_to_limit(self) -> None:
        assert truncate("abcdefghij", 4) == "abcd"

    def test_short_text_unchanged(self) -> None:
        assert truncate("abc", 10) == "abc"


class TestExtractImageFromHtml:
    def test_finds_first_image(self) -> None:
        html = '<p>x</p><img class="a" src="https://img.example.com/1.jpg"><img src="/2.jpg">'
        assert extract_image_from_html(html) == "https://img.example.com/1.jpg"

    def test_no_image(self) -> None:
        assert extract_image_from_html("<p>no pictures</p>") is None

    def test_empty(self) -> None:
        assert extract_image_from_html(None) is None


class TestWordCount:
    def test_counts_words(self) -> None:
        assert word_count("one two  three") == 3

    def test_empty(self) -> None:
        assert word_count("") == 0
        assert word_count(None) == 0
