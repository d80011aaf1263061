"""
Daylight report — everything one invocation shows, computed in one place.

build_report() asks the provider for today and yesterday, runs the year scan,
and renders the bar. The menu, terminal report and JSON output all read from
the resulting DaylightReport and never call the provider themselves.
"""

from dataclasses import dataclass
from datetime import date, timedelta

from solarbar.durations import time_of_day_delta
from solarbar.sun import DaySample, GeoPosition, SunEventProvider, sunrise_sunset
from solarbar.ui.progress import BAR_WIDTH, render_bar
from solarbar.year import YearStats, compute_year_progress


@dataclass(frozen=True)
class DaylightReport:
    position: GeoPosition
    today: DaySample
    yesterday: DaySample
    year: YearStats
    bar: str

    @property
    def day_length(self) -> timedelta:
        return self.today.day_length

    @property
    def day_length_delta(self) -> timedelta:
        """Today's day length minus yesterday's."""
        return self.today.day_length - self.yesterday.day_length

    @property
    def sunrise_delta(self) -> timedelta:
        """How far the sunrise clock time moved since yesterday."""
        return time_of_day_delta(self.today.sunrise, self.yesterday.sunrise)

    @property
    def sunset_delta(self) -> timedelta:
        """How far the sunset clock time moved since yesterday."""
        return time_of_day_delta(self.today.sunset, self.yesterday.sunset)


def build_report(
    today: date,
    position: GeoPosition,
    sun_events: SunEventProvider,
    bar_width: int = BAR_WIDTH,
) -> DaylightReport:
    """Compute a DaylightReport. NoSunEventError from the provider propagates."""
    today_sample = sunrise_sunset(today, position, sun_events)
    yesterday_sample = sunrise_sunset(today - timedelta(days=1), position, sun_events)
    year = compute_year_progress(today, position, sun_events)

    return DaylightReport(
        position=position,
        today=today_sample,
        yesterday=yesterday_sample,
        year=year,
        bar=render_bar(year.progress, bar_width),
    )
