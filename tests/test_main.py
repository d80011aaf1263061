"""
Tests for solarbar/main.py — the click entry point.

The astral provider is swapped for FakeSunEvents so output is stable.
Environment and default config path are isolated per test.
"""

import json
import math
import sys
from datetime import date

import pytest
from click.testing import CliRunner

import solarbar.main as main_mod
from solarbar.main import cli

from conftest import FakeSunEvents, mid_latitude_length


# ── Helpers ──────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """No ambient coordinates, no real config file, fake sun."""
    for var in ("SOLAR_LATITUDE", "SOLAR_LONGITUDE", "SOLARBAR_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr("solarbar.config._CONFIG_PATH", tmp_path / "absent.toml")
    monkeypatch.setattr(main_mod, "AstralSunEvents", lambda: FakeSunEvents(mid_latitude_length))


def _run(*args, env=None):
    return CliRunner().invoke(cli, list(args), env=env)


# ── Plugin output ────────────────────────────────────────────────────────────

class TestPluginOutput:
    def test_menu_shape(self):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10")
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert len(lines) == 8
        assert lines[1] == "---"
        assert lines[2].startswith("Daytime: ")
        assert lines[5] == "---"
        assert lines[7].startswith("Progress: ")

    def test_title_is_day_length(self):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10")
        seconds = mid_latitude_length(date(2024, 3, 10))
        minutes = seconds // 60
        assert result.output.splitlines()[0] == f"{minutes // 60}h {minutes % 60}m"

    def test_coordinates_from_environment(self):
        result = _run(
            "--date", "2024-03-10",
            env={"SOLAR_LATITUDE": "52.52", "SOLAR_LONGITUDE": "13.4"},
        )
        assert result.exit_code == 0, result.output
        assert "@52.52,13.4" in result.output

    def test_option_wins_over_environment(self):
        result = _run(
            "--lat", "40.0", "--date", "2024-03-10",
            env={"SOLAR_LATITUDE": "52.52", "SOLAR_LONGITUDE": "13.4"},
        )
        assert "@40.0,13.4" in result.output

    def test_bar_width_option(self):
        result = _run("--lat", "1", "--lng", "2", "--date", "2024-06-20", "--bar-width", "5")
        assert "[█████]" in result.output

    def test_bar_width_from_config(self, tmp_path):
        cfg = tmp_path / "config.toml"
        cfg.write_text("latitude = 52.52\nlongitude = 13.4\nbar_width = 4\n")
        result = _run("--config", str(cfg), "--date", "2024-06-20")
        assert result.exit_code == 0, result.output
        assert "[████]" in result.output


# ── Errors ───────────────────────────────────────────────────────────────────

class TestErrors:
    def test_missing_latitude_exits_1(self):
        result = _run("--lng", "13.4")
        assert result.exit_code == 1
        assert "No latitude" in result.output

    def test_out_of_range_exits_1(self):
        result = _run("--lat", "95", "--lng", "13.4")
        assert result.exit_code == 1
        assert "Invalid latitude" in result.output

    def test_non_numeric_environment_is_usage_error(self):
        result = _run(env={"SOLAR_LATITUDE": "north", "SOLAR_LONGITUDE": "13.4"})
        assert result.exit_code == 2

    def test_negative_bar_width_rejected(self):
        result = _run("--lat", "1", "--lng", "2", "--bar-width", "-1")
        assert result.exit_code == 2

    def test_no_sun_event_exits_1(self, monkeypatch):
        missing = frozenset({date(2024, 6, 21)})
        monkeypatch.setattr(
            main_mod, "AstralSunEvents",
            lambda: FakeSunEvents(mid_latitude_length, missing=missing),
        )
        result = _run("--lat", "78.2", "--lng", "15.6", "--date", "2024-06-01")
        assert result.exit_code == 1
        assert "No sunrise on 2024-06-21" in result.output

    def test_terminal_and_json_conflict(self):
        result = _run("--lat", "1", "--lng", "2", "--terminal", "--json")
        assert result.exit_code == 1


# ── Other output modes ───────────────────────────────────────────────────────

class TestJsonOutput:
    def test_payload(self):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10", "--json")
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["schema_version"] == 1
        assert data["date"] == "2024-03-10"
        assert data["position"] == {"latitude": 52.52, "longitude": 13.4}
        assert data["today"]["date"] == "2024-03-10"
        assert data["yesterday"]["date"] == "2024-03-09"
        assert data["today"]["day_length_seconds"] == mid_latitude_length(date(2024, 3, 10))
        year = data["year"]
        assert year["min_day_length_seconds"] <= year["max_day_length_seconds"]
        assert 0.0 <= year["progress"] <= 1.0
        assert not math.isnan(year["progress"])
        assert year["degenerate"] is False
        assert len(data["bar"]) == 20

    def test_day_entries(self):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10", "--json")
        today = json.loads(result.output)["today"]
        assert set(today) == {"date", "sunrise", "sunset", "day_length_seconds"}
        assert today["sunrise"] < today["sunset"]
        assert today["sunrise"].endswith("+00:00")


class TestTerminalOutput:
    def test_renders_panel(self):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10", "--terminal")
        assert result.exit_code == 0, result.output
        assert "Daytime" in result.output
        assert "Sunrise" in result.output
        assert "%" in result.output


class TestVersion:
    def test_version_flag(self):
        result = _run("--version")
        assert result.exit_code == 0
        assert "solarbar" in result.output


# ── Palette loading ──────────────────────────────────────────────────────────

class TestPaletteIsTerminalOnly:
    """The palette shells out to `defaults`; only --terminal should load it."""

    @pytest.fixture(autouse=True)
    def unload_ui(self, monkeypatch):
        monkeypatch.delitem(sys.modules, "solarbar.ui.theme", raising=False)
        monkeypatch.delitem(sys.modules, "solarbar.ui.report", raising=False)

    @pytest.mark.parametrize("extra", [[], ["--json"]])
    def test_plugin_and_json_skip_theme(self, extra):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10", *extra)
        assert result.exit_code == 0, result.output
        assert "solarbar.ui.theme" not in sys.modules

    def test_errors_skip_theme(self):
        result = _run("--lng", "13.4")
        assert result.exit_code == 1
        assert "solarbar.ui.theme" not in sys.modules

    def test_terminal_loads_theme(self):
        result = _run("--lat", "52.52", "--lng", "13.4", "--date", "2024-03-10", "--terminal")
        assert result.exit_code == 0, result.output
        assert "solarbar.ui.theme" in sys.modules
