"""
Menu composition — DaylightReport → SwiftBar / xbar plugin text.

Plugin protocol: the first line is the menu-bar title, "---" starts the
dropdown or separates sections, and " | key=value ..." attaches parameters
to a line.

    9h 41m
    ---
    Daytime: 9h 41m (-2m 58s) | color=black
    Sunrise: 07:58 (+1m 20s) | color=black
    Sunset: 17:39 (-1m 38s) | color=black
    ---
    7h 37m [████▌               ] 16h 49m | color=black font="Source Code Pro" size=14 href=...
    Progress: 22.7% | color=black
"""

from dataclasses import dataclass, field

from solarbar.daylight import DaylightReport
from solarbar.durations import format_hours_minutes, format_signed_minutes_seconds


# ── Menu-bar item parameters ──────────────────────────────────────────────────
# Plain values, not solarbar.ui.theme: importing the theme shells out to
# detect dark mode, and dropdown items are drawn on SwiftBar's own background.

MENU_COLOR = "black"
BAR_FONT = "Source Code Pro"    # monospaced so the bar cells line up
BAR_FONT_SIZE = 14

SUN_INFO_URL = "https://www.timeanddate.com/sun/@{lat},{lng}"

SEPARATOR = "---"

_TIME_FORMAT = "%H:%M"


@dataclass(frozen=True)
class MenuItem:
    text: str
    params: dict[str, str | int] = field(default_factory=dict)

    def render(self) -> str:
        if not self.params:
            return self.text
        rendered = " ".join(f"{k}={_quote(v)}" for k, v in self.params.items())
        return f"{self.text} | {rendered}"


# A separator is a bare "---" line; kept as a MenuItem so menus stay one list.
SEP = MenuItem(SEPARATOR)


# ── Items ─────────────────────────────────────────────────────────────────────

def item_daytime_short(report: DaylightReport) -> MenuItem:
    return MenuItem(format_hours_minutes(report.day_length))


def item_daytime_long(report: DaylightReport) -> MenuItem:
    return _content(
        f"Daytime: {format_hours_minutes(report.day_length)} "
        f"({format_signed_minutes_seconds(report.day_length_delta)})"
    )


def item_sunrise(report: DaylightReport) -> MenuItem:
    local = report.today.sunrise.astimezone()
    return _content(
        f"Sunrise: {local.strftime(_TIME_FORMAT)} "
        f"({format_signed_minutes_seconds(report.sunrise_delta)})"
    )


def item_sunset(report: DaylightReport) -> MenuItem:
    local = report.today.sunset.astimezone()
    return _content(
        f"Sunset: {local.strftime(_TIME_FORMAT)} "
        f"({format_signed_minutes_seconds(report.sunset_delta)})"
    )


def item_year_progress_bar(report: DaylightReport) -> MenuItem:
    year = report.year
    return _content(
        f"{format_hours_minutes(year.min_duration)} [{report.bar}] "
        f"{format_hours_minutes(year.max_duration)}",
        font=BAR_FONT,
        size=BAR_FONT_SIZE,
        href=sun_info_url(report),
    )


def item_year_progress_pct(report: DaylightReport) -> MenuItem:
    return _content(f"Progress: {progress_label(report)}")


# ── Menu ──────────────────────────────────────────────────────────────────────

def build_menu(report: DaylightReport) -> list[MenuItem]:
    """Return the full menu in display order, title first."""
    return [
        item_daytime_short(report),
        SEP,
        item_daytime_long(report),
        item_sunrise(report),
        item_sunset(report),
        SEP,
        item_year_progress_bar(report),
        item_year_progress_pct(report),
    ]


def render_menu(items: list[MenuItem]) -> str:
    return "\n".join(item.render() for item in items)


# ── Shared formatting ─────────────────────────────────────────────────────────

def progress_label(report: DaylightReport) -> str:
    """Percentage like "22.7%", or "n/a" when the year's day length never changes."""
    if report.year.degenerate:
        return "n/a"
    return f"{report.year.percent:.1f}%"


def sun_info_url(report: DaylightReport) -> str:
    pos = report.position
    return SUN_INFO_URL.format(lat=pos.latitude, lng=pos.longitude)


def _content(text: str, **params: str | int) -> MenuItem:
    return MenuItem(text, {"color": MENU_COLOR, **params})


def _quote(value: str | int) -> str:
    s = str(value)
    if " " in s:
        return f'"{s}"'
    return s
