"""
solarbar visual design system.

Terminal colours as named constants. Import from here — never hardcode
markup strings in other modules.

The palette is selected at import time based on macOS appearance, which
shells out to `defaults`. Only the --terminal report imports this module;
plugin and JSON output never pay for it.
"""

import subprocess


# ── Brand ─────────────────────────────────────────────────────────────────────

APP_NAME = "solarbar"


# ── Dark/light detection ──────────────────────────────────────────────────────

def _is_dark_mode() -> bool:
    """
    Detect macOS system appearance.

    Returns True for dark mode, False for light.
    Falls back to True (dark palette) on any error, including when not on macOS.
    """
    try:
        r = subprocess.run(
            ["defaults", "read", "-g", "AppleInterfaceStyle"],
            capture_output=True, text=True, timeout=2, check=False,
        )
        # exit 0 + "Dark" → dark mode
        # exit 1 (key absent) → light mode
        if r.returncode == 0:
            return "Dark" in r.stdout
        if r.returncode == 1:
            return False
    except (OSError, subprocess.SubprocessError):
        pass
    return True


DARK_MODE: bool = _is_dark_mode()


# ── Color palette ─────────────────────────────────────────────────────────────

if DARK_MODE:
    COLOR_BRAND = "#E8B04B"     # Sunrise amber
    COLOR_BAR   = "#F2C94C"     # Daylight yellow
    COLOR_DIM   = "#787878"     # Medium gray
    COLOR_TEXT  = "#F0F0F0"     # Near-white
    COLOR_GAIN  = "#4DBD74"     # Days getting longer
    COLOR_LOSS  = "#5BA3C9"     # Days getting shorter
else:
    # WCAG AA contrast (≥ 4.5:1) on white backgrounds.
    COLOR_BRAND = "#92400E"
    COLOR_BAR   = "#A16207"
    COLOR_DIM   = "#4B5563"
    COLOR_TEXT  = "#0F172A"
    COLOR_GAIN  = "#166534"
    COLOR_LOSS  = "#0369A1"


# ── Deltas ────────────────────────────────────────────────────────────────────

def delta_color(text: str) -> str:
    """Colour for a signed delta string such as "+1m 5s" or "-12s"."""
    if text.startswith("-"):
        return COLOR_LOSS
    if text == "+0s":
        return COLOR_DIM
    return COLOR_GAIN
