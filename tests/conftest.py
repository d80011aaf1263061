"""
Shared pytest fixtures.

FakeSunEvents stands in for astral: day lengths come from a plain function
of the date, sunrise and sunset sit symmetrically around 12:00 UTC, and
every call is recorded.
"""
import math
from datetime import date, datetime, time, timedelta, timezone

import pytest

from solarbar.errors import NoSunEventError
from solarbar.sun import SunEvent


class FakeSunEvents:
    def __init__(self, length_seconds, missing: frozenset = frozenset()):
        self.length_seconds = length_seconds   # date -> int seconds
        self.missing = missing                 # dates with no sunrise/sunset
        self.calls: list[tuple[date, SunEvent]] = []

    def sun_event_time(self, day, position, event):
        self.calls.append((day, event))
        if day in self.missing:
            raise NoSunEventError(day, position, event)
        noon = datetime.combine(day, time(12, 0), tzinfo=timezone.utc)
        half = timedelta(seconds=self.length_seconds(day) / 2)
        return noon - half if event is SunEvent.SUNRISE else noon + half


def mid_latitude_length(day: date) -> int:
    """Roughly Berlin: 12h ± 4h35m, longest around 21 June. Even seconds."""
    doy = day.timetuple().tm_yday
    seconds = 12 * 3600 + 16500 * math.cos(2 * math.pi * (doy - 172) / 365.25)
    return int(seconds) // 2 * 2


@pytest.fixture
def make_sun():
    """Factory: make_sun(length_fn, missing=...) → FakeSunEvents."""
    return FakeSunEvents


@pytest.fixture
def mid_latitude_sun():
    return FakeSunEvents(mid_latitude_length)
