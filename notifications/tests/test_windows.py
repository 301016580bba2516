"""Tests for the elapsed-time threshold checks."""

from datetime import date, datetime, timedelta

from notifications.services.attestation.windows import (
    coerce_instant,
    days_elapsed,
    has_passed,
    threshold_crossed,
)

from .fakes import NOW


def test_crossed_once_threshold_days_have_passed():
    assert threshold_crossed(NOW - timedelta(days=10), 7, NOW) is True
    assert threshold_crossed(NOW - timedelta(days=7), 7, NOW) is True


def test_not_crossed_before_threshold():
    assert threshold_crossed(NOW - timedelta(days=6), 7, NOW) is False


def test_partial_days_are_floored():
    start = NOW - timedelta(days=6, hours=23, minutes=59)
    assert days_elapsed(start, NOW) == 6
    assert threshold_crossed(start, 7, NOW) is False


def test_future_start_never_crosses():
    assert days_elapsed(NOW + timedelta(days=2), NOW) == -2
    assert threshold_crossed(NOW + timedelta(days=2), 0, NOW) is False


def test_zero_threshold_crosses_at_start():
    assert threshold_crossed(NOW, 0, NOW) is True


def test_missing_start_fails_safe():
    assert threshold_crossed(None, 0, NOW) is False
    assert days_elapsed(None, NOW) is None


def test_garbage_start_fails_safe():
    assert threshold_crossed("not-a-date", 1, NOW) is False
    assert threshold_crossed("2026-13-45", 1, NOW) is False
    assert threshold_crossed(12345, 1, NOW) is False


def test_missing_threshold_never_crosses():
    assert threshold_crossed(NOW - timedelta(days=100), None, NOW) is False


def test_iso_string_start():
    assert threshold_crossed("2026-03-05T12:00:00+00:00", 10, NOW) is True
    assert threshold_crossed("2026-03-05T12:00:01+00:00", 10, NOW) is False


def test_date_start_is_midnight_in_now_timezone():
    instant = coerce_instant(date(2026, 3, 8), NOW)
    assert instant == datetime(2026, 3, 8, tzinfo=NOW.tzinfo)
    assert days_elapsed(date(2026, 3, 8), NOW) == 7


def test_naive_start_uses_now_timezone():
    assert days_elapsed(datetime(2026, 3, 5, 12, 0), NOW) == 10


def test_has_passed_is_strict():
    assert has_passed(NOW - timedelta(seconds=1), NOW) is True
    assert has_passed(NOW, NOW) is False
    assert has_passed(NOW + timedelta(days=1), NOW) is False
    assert has_passed(None, NOW) is False
