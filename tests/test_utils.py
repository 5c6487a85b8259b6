"""Tests for time and text utilities."""

from datetime import datetime, timedelta, timezone

from offshore_activity.utils import (
    clean_voyage_number,
    date_key,
    days_to_ms,
    ensure_utc,
    has_voyage_number,
    normalize_vessel_name,
    time_delta_ms,
    within_window,
)


class TestTimeUtils:
    """Tests for time helpers."""

    def test_days_to_ms(self):
        assert days_to_ms(2) == 172_800_000
        assert days_to_ms(0.5) == 43_200_000

    def test_ensure_utc(self):
        assert ensure_utc(None) is None
        assert ensure_utc(datetime(2024, 1, 1)).tzinfo == timezone.utc
        est = timezone(timedelta(hours=-5))
        assert ensure_utc(datetime(2024, 1, 1, 19, tzinfo=est)) == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_time_delta_is_absolute(self):
        a = datetime(2024, 1, 1)
        b = datetime(2024, 1, 2)
        assert time_delta_ms(a, b) == time_delta_ms(b, a) == days_to_ms(1)
        assert time_delta_ms(a, None) is None

    def test_within_window(self):
        a = datetime(2024, 1, 1)
        assert within_window(a, a + timedelta(days=1), days_to_ms(1))
        assert not within_window(a, a + timedelta(days=1, milliseconds=1), days_to_ms(1))
        assert not within_window(None, a, days_to_ms(1))

    def test_date_key(self):
        assert date_key(datetime(2024, 2, 1, 23, 59)) == "2024-02-01"
        assert date_key(None) == "NO_DATE"
        assert date_key(None, missing="-") == "-"


class TestTextUtils:
    """Tests for text helpers."""

    def test_normalize_vessel_name(self):
        assert normalize_vessel_name("  Vessel A ") == "vessel a"
        assert normalize_vessel_name(None) == ""

    def test_voyage_number_presence(self):
        assert has_voyage_number("V-55")
        assert has_voyage_number(0)
        assert not has_voyage_number(None)
        assert not has_voyage_number("  ")
        assert not has_voyage_number("undefined")

    def test_clean_voyage_number(self):
        assert clean_voyage_number(" 12 ") == "12"
        assert clean_voyage_number(12) == "12"
        assert clean_voyage_number("undefined") is None
