"""Unit tests for timestamp utilities."""

from datetime import datetime, timedelta, timezone

from landing.utils.timestamps import ensure_utc, format_timestamp, parse_timestamp, utc_now


class TestUtcNow:
    """Tests for utc_now function."""

    def test_utc_now_returns_utc_datetime(self):
        """Test that utc_now returns a timezone-aware datetime in UTC."""
        now = utc_now()

        assert now.tzinfo == timezone.utc

    def test_utc_now_is_recent(self):
        """Test that utc_now returns a recent timestamp."""
        before = datetime.now(timezone.utc)
        now = utc_now()
        after = datetime.now(timezone.utc)

        assert before <= now <= after


class TestEnsureUtc:
    """Tests for ensure_utc function."""

    def test_ensure_utc_with_none(self):
        """Test that None input returns None."""
        assert ensure_utc(None) is None

    def test_ensure_utc_with_naive_datetime(self):
        """Test that naive datetime is treated as UTC."""
        result = ensure_utc(datetime(2025, 11, 4, 12, 0, 0))

        assert result == datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc)

    def test_ensure_utc_converts_other_timezones(self):
        """Test that an aware datetime is converted to UTC."""
        eastern = timezone(timedelta(hours=-5))

        result = ensure_utc(datetime(2025, 11, 4, 7, 0, 0, tzinfo=eastern))

        assert result.tzinfo == timezone.utc
        assert result.hour == 12


class TestFormatAndParse:
    """Tests for storage formatting and parsing."""

    def test_format_timestamp(self):
        """Test the storage format has microseconds and a Z suffix."""
        dt = datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc)

        assert format_timestamp(dt) == "2025-11-04T12:00:00.000000Z"

    def test_format_timestamp_none(self):
        """Test that None formats to None."""
        assert format_timestamp(None) is None

    def test_stored_value_parses_back(self):
        """Test a formatted timestamp parses to the same instant."""
        dt = datetime(2025, 11, 4, 12, 30, 15, 123456, tzinfo=timezone.utc)

        assert parse_timestamp(format_timestamp(dt)) == dt

    def test_parse_offset_timestamp(self):
        """Test ISO strings with offsets are converted to UTC."""
        result = parse_timestamp("2025-11-04T14:00:00+02:00")

        assert result == datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc)

    def test_parse_invalid(self):
        """Test empty and malformed input parse to None."""
        assert parse_timestamp(None) is None
        assert parse_timestamp("   ") is None
        assert parse_timestamp("yesterday") is None
