"""
Year progress — where today sits between the year's shortest and longest day.

Example: the shortest day over the coming year is 10h, the longest 14h,
and today is 11h long. Today is 1h into a 4h range, i.e. 25% progress.

    10h [█████               ] 14h
             ^ 11h
"""

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from solarbar.durations import whole_seconds
from solarbar.sun import GeoPosition, SunEventProvider, day_length

logger = logging.getLogger(__name__)


# 366 days covers a full solar year, leap or not, wherever today falls.
YEAR_WINDOW_DAYS = 366

# Returned when every day in the window has the same length.
DEGENERATE_PROGRESS = 0.5


@dataclass(frozen=True)
class YearStats:
    min_duration: timedelta
    max_duration: timedelta
    progress: float     # (today - min) / (max - min); not clamped

    @property
    def degenerate(self) -> bool:
        """True when min == max and progress is the DEGENERATE_PROGRESS stand-in."""
        return whole_seconds(self.min_duration) == whole_seconds(self.max_duration)

    @property
    def percent(self) -> float:
        return self.progress * 100


def compute_year_progress(
    today: date,
    position: GeoPosition,
    sun_events: SunEventProvider,
) -> YearStats:
    """
    Scan YEAR_WINDOW_DAYS dates starting at today and place today's day length
    between the shortest and longest one found.

    Ties keep the first extreme seen. Today's length is fetched again after the
    scan rather than reused from it. NoSunEventError from the provider aborts
    the whole computation.
    """
    shortest: timedelta | None = None
    longest: timedelta | None = None

    day = today
    for _ in range(YEAR_WINDOW_DAYS):
        length = day_length(day, position, sun_events)
        if shortest is None or length < shortest:
            shortest = length
        if longest is None or length > longest:
            longest = length
        day += timedelta(days=1)

    current = day_length(today, position, sun_events)

    max_delta = whole_seconds(longest) - whole_seconds(shortest)
    current_delta = whole_seconds(current) - whole_seconds(shortest)

    logger.debug(
        "year scan from %s: shortest=%s longest=%s today=%s",
        today, shortest, longest, current,
    )

    if max_delta == 0:
        logger.debug("flat day-length range; progress set to %s", DEGENERATE_PROGRESS)
        progress = DEGENERATE_PROGRESS
    else:
        progress = current_delta / max_delta

    return YearStats(min_duration=shortest, max_duration=longest, progress=progress)
