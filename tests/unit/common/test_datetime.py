"""Tests for common.datetime module."""

from datetime import datetime, timedelta, timezone

from common.datetime import parse_datetime, to_utc


class TestParseDatetime:
    def test_none_returns_current_utc(self) -> None:
        before = datetime.now(timezone.utc)
        result = parse_datetime(None)
        after = datetime.now(timezone.utc)
        assert before <= result <= after
        assert result.tzinfo is not None

    def test_empty_string_returns_current_utc(self) -> None:
        before = datetime.now(timezone.utc)
        result = parse_datetime("")
        assert result >= before

    def test_datetime_passthrough(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert parse_datetime(dt) == dt

    def test_iso_string_parsing(self) -> None:
        result = parse_datetime("2024-01-01T12:00:00+00:00")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_iso_string_with_z_suffix(self) -> None:
        result = parse_datetime("2024-01-01T12:00:00Z")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_rfc822_with_abbreviation(self) -> None:
        result = parse_datetime("Mon, 01 Jan 2024 07:00:00 EST")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_offset_converted_to_utc(self) -> None:
        result = parse_datetime("2024-06-01T14:00:00+02:00")
        assert result == datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert result.utcoffset() == timedelta(0)

    def test_naive_string_assumed_utc(self) -> None:
        result = parse_datetime("2024-01-01 12:00:00")
        assert result.tzinfo is not None
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_garbage_falls_back_to_now(self) -> None:
        before = datetime.now(timezone.utc)
        result = parse_datetime("not a date at all")
        assert result >= before


class TestToUtc:
    def test_naive_gets_utc(self) -> None:
        assert to_utc(datetime(2024, 1, 1)).tzinfo == timezone.utc

    def test_aware_is_converted(self) -> None:
        dt = datetime(2024, 1, 1, 5, tzinfo=timezone(timedelta(hours=-5)))
        assert to_utc(dt).hour == 10
