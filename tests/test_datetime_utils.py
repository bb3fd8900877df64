from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from storefront.utils.clock import FixedClock
from storefront.utils.datetime_utils import ensure_utc, get_zone, subtract_months, to_iso, to_zone


@pytest.mark.parametrize(
    "start, expected",
    [
        (datetime(2023, 6, 15, 10, 0), datetime(2023, 5, 15, 10, 0)),
        (datetime(2023, 3, 31, 12, 30), datetime(2023, 2, 28, 12, 30)),
        (datetime(2024, 3, 31, 12, 30), datetime(2024, 2, 29, 12, 30)),
        (datetime(2023, 5, 31, 8, 0), datetime(2023, 4, 30, 8, 0)),
        (datetime(2024, 1, 15, 9, 0), datetime(2023, 12, 15, 9, 0)),
        (datetime(2024, 1, 31, 9, 0), datetime(2023, 12, 31, 9, 0)),
    ],
)
def test_subtract_one_month_clamps_day_and_rolls_year(start, expected):
    assert subtract_months(start, 1) == expected


def test_subtract_months_preserves_tzinfo_and_supports_several_months():
    start = datetime(2023, 8, 31, 23, 59, 59, tzinfo=timezone.utc)
    assert subtract_months(start, 6) == datetime(2023, 2, 28, 23, 59, 59, tzinfo=timezone.utc)
    assert subtract_months(start, -1) == datetime(2023, 9, 30, 23, 59, 59, tzinfo=timezone.utc)
    assert subtract_months(start, 12) == datetime(2022, 8, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_get_zone_falls_back_to_utc():
    assert get_zone("UTC") is timezone.utc
    assert get_zone("") is timezone.utc
    assert get_zone("Not/AZone") is timezone.utc
    assert get_zone("America/Sao_Paulo") == ZoneInfo("America/Sao_Paulo")


def test_ensure_utc_treats_naive_as_utc():
    naive = datetime(2023, 6, 15, 10, 0)
    assert ensure_utc(naive) == datetime(2023, 6, 15, 10, 0, tzinfo=timezone.utc)

    offset = datetime(2023, 6, 15, 7, 0, tzinfo=timezone(timedelta(hours=-3)))
    assert ensure_utc(offset).hour == 10
    assert ensure_utc(offset).tzinfo == timezone.utc


def test_to_zone_and_to_iso():
    instant = datetime(2023, 6, 15, 10, 0, tzinfo=timezone.utc)
    local = to_zone(instant, ZoneInfo("America/Sao_Paulo"))
    assert local.hour == 7
    assert local == instant
    assert to_iso(instant) == "2023-06-15T10:00:00Z"
    assert to_iso(local) == "2023-06-15T07:00:00-03:00"
    assert to_iso(None) is None


def test_fixed_clock_moves_only_when_told():
    clock = FixedClock(datetime(2023, 6, 15, 10, 0))
    assert clock.now() == datetime(2023, 6, 15, 10, 0, tzinfo=timezone.utc)
    clock.advance(timedelta(hours=2))
    assert clock.now().hour == 12
    clock.set(datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert clock.now().year == 2024
