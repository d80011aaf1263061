"""
Progress bar renderer.

Stateless — takes (progress, width), returns a plain str of exactly
width characters. Colour and font are the caller's business.

Output (width 20, progress 0.255): █████▏
                                   ^ padded with spaces to 20 chars

Each cell resolves to an eighth of a block. The partial cell uses
half-open buckets centred on the eighths, so 0.0625 of a cell is the
first to earn ▏ and 0.9375 is the first to earn a full █.
"""

import math


BAR_WIDTH = 20

FULL_BLOCK = "█"

# (lower bound in percent of one cell, glyph), highest first.
# Each bucket runs from its lower bound up to, not including, the previous
# row's bound; the top bucket is closed at 100.
PARTIAL_BLOCKS: tuple[tuple[float, str], ...] = (
    (93.75, FULL_BLOCK),
    (81.25, "▉"),   # 7/8
    (68.75, "▊"),   # 3/4
    (56.25, "▋"),   # 5/8
    (43.75, "▌"),   # 1/2
    (31.25, "▍"),   # 3/8
    (18.75, "▎"),   # 1/4
    (6.25,  "▏"),   # 1/8
    (0.0,   ""),
)


def partial_block(fraction: float) -> str:
    """Return the glyph for a partly filled cell, fraction in [0, 1]."""
    pct = fraction * 100
    for lower, glyph in PARTIAL_BLOCKS:
        if pct >= lower:
            return glyph
    return ""


def render_bar(progress: float, width: int = BAR_WIDTH) -> str:
    """
    Return progress as a bar of exactly width characters.

    Args:
        progress: fraction in [0, 1]; values outside are clamped, NaN is 0
        width:    number of character cells, >= 0

    Returns e.g. "██▌       " for (0.25, 10).
    """
    if width < 0:
        raise ValueError(f"width must be >= 0, got {width}")

    if math.isnan(progress):
        progress = 0.0
    progress = max(0.0, min(1.0, progress))

    exact = progress * width
    full = math.floor(exact)

    bar = FULL_BLOCK * full
    if len(bar) < width:
        bar += partial_block(exact - full)

    return bar.ljust(width)
