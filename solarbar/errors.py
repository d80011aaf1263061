"""
Error taxonomy for solarbar.

ConfigurationError — coordinates missing or invalid (fatal at startup).
NoSunEventError    — no sunrise/sunset for a date and position (fatal).

A flat day-length range is not an error: see year.DEGENERATE_PROGRESS.
"""

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solarbar.sun import GeoPosition, SunEvent


class SolarbarError(Exception):
    """Base class for every error solarbar raises on purpose."""


class ConfigurationError(SolarbarError):
    """Latitude/longitude could not be resolved into a usable GeoPosition."""


class NoSunEventError(SolarbarError):
    """The sun does not rise or set on this date at this position."""

    def __init__(self, day: date, position: "GeoPosition", event: "SunEvent") -> None:
        self.day = day
        self.position = position
        self.event = event
        super().__init__(
            f"No {event.value} on {day.isoformat()} at "
            f"{position.latitude}, {position.longitude} (polar day or night?)"
        )
