"""
solarbar — entry point.

CLI flags, position resolution, report dispatch. Runs once and exits; point
SwiftBar/xbar at it with a refresh interval in the plugin file name.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from solarbar import __version__
from solarbar.config import load_config, resolve_position
from solarbar.daylight import DaylightReport, build_report
from solarbar.durations import whole_seconds
from solarbar.errors import SolarbarError
from solarbar.menu import build_menu, render_menu
from solarbar.sun import AstralSunEvents, DaySample
from solarbar.ui.progress import BAR_WIDTH


# ── Consoles (shared across the tool) ────────────────────────────────────────

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("solarbar")


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="solarbar", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="solarbar")
# Position
@click.option(
    "--latitude", "--lat",
    type=float,
    envvar="SOLAR_LATITUDE",
    default=None,
    help="Latitude in degrees, -90..90. [env: SOLAR_LATITUDE]",
)
@click.option(
    "--longitude", "--lng",
    type=float,
    envvar="SOLAR_LONGITUDE",
    default=None,
    help="Longitude in degrees, -180..180. [env: SOLAR_LONGITUDE]",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SOLARBAR_CONFIG",
    default=None,
    help="Config file (default ~/.config/solarbar/config.toml). [env: SOLARBAR_CONFIG]",
)
# What to compute
@click.option(
    "--date", "on_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Compute for this date instead of today, e.g. 2024-12-21.",
)
@click.option(
    "--bar-width",
    type=click.IntRange(min=0),
    default=None,
    help=f"Progress bar width in characters (default {BAR_WIDTH}).",
)
# Output modes
@click.option("--terminal", is_flag=True, default=False, help="Pretty report for a terminal instead of plugin text.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output results as JSON.")
@click.option("--debug", is_flag=True, default=False, help="Log debug detail to stderr.")
def cli(
    latitude: Optional[float],
    longitude: Optional[float],
    config_path: Optional[Path],
    on_date: Optional[datetime],
    bar_width: Optional[int],
    terminal: bool,
    as_json: bool,
    debug: bool,
) -> None:
    """Daylight progress for the macOS menu bar.

    Prints today's day length, sunrise and sunset (with the change since
    yesterday) and where today sits between the shortest and longest day
    of the coming year. Output follows the SwiftBar / xbar plugin format.

    \b
    Environment variables:
      SOLAR_LATITUDE    Latitude in degrees.
      SOLAR_LONGITUDE   Longitude in degrees.
      SOLARBAR_CONFIG   Path to a TOML config file.
    """
    _configure_logging(debug)

    if terminal and as_json:
        err_console.print("[red]Error:[/red] --terminal and --json are mutually exclusive.")
        raise SystemExit(1)

    # ── Resolve configuration ─────────────────────────────────────────────────
    config = load_config(config_path)
    width = bar_width
    if width is None:
        width = config["bar_width"] if config["bar_width"] is not None else BAR_WIDTH
    today = on_date.date() if on_date else date.today()

    # ── Compute ───────────────────────────────────────────────────────────────
    try:
        position = resolve_position(latitude, longitude, config)
        report = build_report(today, position, AstralSunEvents(), bar_width=width)
    except SolarbarError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)

    # ── Output ────────────────────────────────────────────────────────────────
    if as_json:
        _output_json(report, today)
        return

    if terminal:
        from solarbar.ui.report import print_report
        print_report(report, console)
        return

    click.echo(render_menu(build_menu(report)))


# ── Logging ───────────────────────────────────────────────────────────────────

def _configure_logging(debug: bool) -> None:
    """Route solarbar's log records to stderr; stdout belongs to the plugin output."""
    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False


# ── JSON output ───────────────────────────────────────────────────────────────

def _output_json(report: DaylightReport, today: date) -> None:
    """Serialize the report to JSON on stdout."""

    def _day(sample: DaySample) -> dict:
        return {
            "date": sample.date.isoformat(),
            "sunrise": sample.sunrise.isoformat(),
            "sunset": sample.sunset.isoformat(),
            "day_length_seconds": whole_seconds(sample.day_length),
        }

    year = report.year
    payload = {
        "schema_version": 1,
        "solarbar_version": __version__,
        "date": today.isoformat(),
        "position": {
            "latitude": report.position.latitude,
            "longitude": report.position.longitude,
        },
        "today": _day(report.today),
        "yesterday": _day(report.yesterday),
        "year": {
            "min_day_length_seconds": whole_seconds(year.min_duration),
            "max_day_length_seconds": whole_seconds(year.max_duration),
            "progress": year.progress,
            "degenerate": year.degenerate,
        },
        "bar": report.bar,
    }

    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
