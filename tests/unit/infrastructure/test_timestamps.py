"""Tests for timestamp helpers."""

from datetime import UTC, datetime, timedelta, timezone

from storefront.infrastructure.common.timestamps import as_utc, next_updated_at, utc_now


def test_utc_now_is_aware():
    assert utc_now().tzinfo is not None


def test_as_utc_attaches_utc_to_naive():
    assert as_utc(datetime(2024, 1, 1)) == datetime(2024, 1, 1, tzinfo=UTC)


def test_as_utc_converts_other_offsets():
    plus_two = timezone(timedelta(hours=2))
    assert as_utc(datetime(2024, 1, 1, 2, tzinfo=plus_two)) == datetime(2024, 1, 1, tzinfo=UTC)


def test_next_updated_at_is_strictly_later_even_for_future_previous():
    future = utc_now() + timedelta(hours=1)
    assert next_updated_at(future) == future + timedelta(microseconds=1)


def test_next_updated_at_is_now_for_past_previous():
    past = datetime(2000, 1, 1, tzinfo=UTC)
    assert next_updated_at(past) > past
