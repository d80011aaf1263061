"""
Config file loading and position resolution for solarbar.

Reads ~/.config/solarbar/config.toml (or $SOLARBAR_CONFIG) and returns
structured config. load_config() never raises — it always returns a valid
dict with None for anything missing or malformed.

resolve_position() is the one place coordinates are validated. It raises
ConfigurationError; the core never looks at the environment or the file.
"""

import logging
import math
from pathlib import Path

from solarbar.errors import ConfigurationError
from solarbar.sun import GeoPosition

logger = logging.getLogger(__name__)

_CONFIG_PATH = Path.home() / ".config" / "solarbar" / "config.toml"


def default_config() -> dict:
    return {"latitude": None, "longitude": None, "bar_width": None}


def load_config(path: Path | None = None) -> dict:
    """
    Load and return solarbar config from a TOML file.

    Returns {"latitude": float | None, "longitude": float | None,
             "bar_width": int | None} — always valid, never raises.
    Missing file, parse errors, or bad shapes give None for that key
    (or for every key if the file can't be read or parsed).
    """
    config_path = path or _CONFIG_PATH
    empty = default_config()

    if not config_path.is_file():
        return empty

    try:
        raw = config_path.read_bytes()
    except OSError:
        return empty

    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore[no-redef]
        except ModuleNotFoundError:
            return empty

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return empty

    config = default_config()
    for key in ("latitude", "longitude"):
        value = data.get(key)
        # bool is an int subclass; "latitude = true" is not a coordinate
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            config[key] = float(value)

    bar_width = data.get("bar_width")
    if isinstance(bar_width, int) and not isinstance(bar_width, bool) and bar_width >= 0:
        config["bar_width"] = bar_width

    return config


def resolve_position(
    latitude: float | None,
    longitude: float | None,
    config: dict | None = None,
) -> GeoPosition:
    """
    Build the GeoPosition for this run.

    Explicit values (CLI option or environment, already merged by click)
    win over the config file. Raises ConfigurationError when a coordinate
    is missing, not finite, or out of range.
    """
    config = config or default_config()

    lat = latitude if latitude is not None else config.get("latitude")
    lng = longitude if longitude is not None else config.get("longitude")

    if lat is None:
        raise ConfigurationError(
            "No latitude. Pass --latitude, set SOLAR_LATITUDE, "
            f"or add 'latitude' to {_CONFIG_PATH}"
        )
    if lng is None:
        raise ConfigurationError(
            "No longitude. Pass --longitude, set SOLAR_LONGITUDE, "
            f"or add 'longitude' to {_CONFIG_PATH}"
        )

    _check_range("latitude", lat, 90.0)
    _check_range("longitude", lng, 180.0)

    logger.debug("position resolved to %s, %s", lat, lng)
    return GeoPosition(latitude=float(lat), longitude=float(lng))


def _check_range(name: str, value: float, limit: float) -> None:
    if not math.isfinite(value) or not -limit <= value <= limit:
        raise ConfigurationError(
            f"Invalid {name} {value!r}: must be between {-limit:g} and {limit:g}"
        )
