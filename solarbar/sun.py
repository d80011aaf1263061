"""
Sun events — where sunrise and sunset instants come from.

GeoPosition      — immutable (latitude, longitude) in degrees.
SunEventProvider — the one capability the core consumes.
AstralSunEvents  — default provider, backed by astral.
DaySample        — one date's (sunrise, sunset) pair.

Providers return timezone-aware UTC datetimes and raise NoSunEventError
when the event does not happen (polar day / polar night).
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Protocol

from astral import Observer
from astral.sun import sunrise as astral_sunrise
from astral.sun import sunset as astral_sunset

from solarbar.errors import NoSunEventError

logger = logging.getLogger(__name__)


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class GeoPosition:
    latitude: float     # degrees, -90..90
    longitude: float    # degrees, -180..180


class SunEvent(Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"


@dataclass(frozen=True)
class DaySample:
    date: date
    sunrise: datetime
    sunset: datetime

    @property
    def day_length(self) -> timedelta:
        return self.sunset - self.sunrise


# ── Provider interface ────────────────────────────────────────────────────────

class SunEventProvider(Protocol):
    def sun_event_time(
        self, day: date, position: GeoPosition, event: SunEvent
    ) -> datetime:
        """Return the UTC instant of event on day, or raise NoSunEventError."""
        ...


class AstralSunEvents:
    """
    SunEventProvider backed by astral's NOAA solar equations.

    astral pins each event to the calendar day in the tzinfo it is given.
    Events are computed for the position's mean solar day (a whole-hour
    offset from its longitude) so sunrise and sunset fall on the same day
    everywhere, then returned in UTC. Sea level.
    """

    def sun_event_time(
        self, day: date, position: GeoPosition, event: SunEvent
    ) -> datetime:
        observer = Observer(latitude=position.latitude, longitude=position.longitude)
        compute = astral_sunrise if event is SunEvent.SUNRISE else astral_sunset
        try:
            local = compute(observer, day, tzinfo=solar_timezone(position))
        except ValueError as e:
            # astral raises ValueError("Sun never reaches the horizon ...")
            logger.debug("astral: %s on %s: %s", event.value, day, e)
            raise NoSunEventError(day, position, event) from e
        return local.astimezone(timezone.utc)


# ── Helpers ───────────────────────────────────────────────────────────────────

def solar_timezone(position: GeoPosition) -> timezone:
    """Fixed offset nearest the position's mean solar time: 15° of longitude per hour."""
    return timezone(timedelta(hours=round(position.longitude / 15)))


def sunrise_sunset(
    day: date, position: GeoPosition, sun_events: SunEventProvider
) -> DaySample:
    """Fetch both events for one date. NoSunEventError propagates."""
    return DaySample(
        date=day,
        sunrise=sun_events.sun_event_time(day, position, SunEvent.SUNRISE),
        sunset=sun_events.sun_event_time(day, position, SunEvent.SUNSET),
    )


def day_length(
    day: date, position: GeoPosition, sun_events: SunEventProvider
) -> timedelta:
    """Sunset minus sunrise for one date."""
    return sunrise_sunset(day, position, sun_events).day_length
