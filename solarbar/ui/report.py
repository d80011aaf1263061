"""
Terminal report renderer.

Shows the same numbers as the menu, for running solarbar in a terminal:

  ╭──────────────── ☀ solarbar · 52.52, 13.4 ─────────────────╮
  │  Daytime   9h 41m   -2m 58s                                │
  │  Sunrise   07:58    +1m 20s                                │
  │  Sunset    17:39    -1m 38s                                │
  │                                                            │
  │  7h 37m [████▌               ] 16h 49m   22.7%             │
  ╰────────────────────────────────────────────────────────────╯
"""

from datetime import datetime, timedelta

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from solarbar.daylight import DaylightReport
from solarbar.durations import format_hours_minutes, format_signed_minutes_seconds
from solarbar.menu import progress_label
from solarbar.ui.theme import (
    APP_NAME,
    COLOR_BAR,
    COLOR_BRAND,
    COLOR_DIM,
    COLOR_TEXT,
    delta_color,
)


def build_day_table(report: DaylightReport) -> Table:
    """Three rows: day length, sunrise, sunset — each with its change since yesterday."""
    table = Table.grid(padding=(0, 3))
    table.add_column(style=COLOR_DIM)
    table.add_column(style=f"bold {COLOR_TEXT}")
    table.add_column()

    table.add_row("Daytime", format_hours_minutes(report.day_length),
                  _delta(report.day_length_delta))
    table.add_row("Sunrise", _clock(report.today.sunrise), _delta(report.sunrise_delta))
    table.add_row("Sunset", _clock(report.today.sunset), _delta(report.sunset_delta))
    return table


def build_year_line(report: DaylightReport) -> Text:
    """min [bar] max   pct"""
    year = report.year
    t = Text()
    t.append(format_hours_minutes(year.min_duration), style=COLOR_DIM)
    t.append(" [", style=COLOR_DIM)
    t.append(report.bar, style=COLOR_BAR)
    t.append("] ", style=COLOR_DIM)
    t.append(format_hours_minutes(year.max_duration), style=COLOR_DIM)
    t.append(f"   {progress_label(report)}", style=f"bold {COLOR_BRAND}")
    return t


def build_report_panel(report: DaylightReport) -> Panel:
    pos = report.position
    title = f"[bold {COLOR_BRAND}]☀ {APP_NAME}[/] [{COLOR_DIM}]· {pos.latitude}, {pos.longitude}[/]"
    return Panel(
        Group(build_day_table(report), Text(), build_year_line(report)),
        title=title,
        border_style=COLOR_BRAND,
        padding=(1, 2),
        expand=False,
    )


def print_report(report: DaylightReport, console: Console) -> None:
    console.print(build_report_panel(report))


# ── Helpers ───────────────────────────────────────────────────────────────────

def _clock(instant: datetime) -> str:
    return instant.astimezone().strftime("%H:%M")


def _delta(d: timedelta) -> Text:
    s = format_signed_minutes_seconds(d)
    return Text(s, style=delta_color(s))
