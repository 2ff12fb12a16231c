"""
Color conversions and nearest-color matching against a static palette.
"""
import json
import math
import re
from functools import lru_cache
from pathlib import Path

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# sqrt(255^2 * 3) ~= 441, so distance / 4.41 maps onto a 0-100 scale
ACCURACY_SCALE = 4.41

HEX_PATTERN = re.compile(r"^#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})$")


def hex_to_rgb(value):
    """
    Parse '#RRGGBB', 'RRGGBB' or the 3-digit shorthand.

    Returns:
        tuple: (r, g, b)

    Raises:
        ValueError: if the value is not a hex color
    """
    match = HEX_PATTERN.match((value or "").strip())
    if not match:
        raise ValueError(f"Not a hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    number = int(digits, 16)
    return (number >> 16) & 255, (number >> 8) & 255, number & 255


def rgb_to_hex(r, g, b, prefix=""):
    for channel in (r, g, b):
        if not 0 <= channel <= 255:
            raise ValueError(f"RGB channel out of range: {channel}")
    return f"{prefix}{int(r):02X}{int(g):02X}{int(b):02X}"


def color_distance(a, b):
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def accuracy_for(distance):
    return max(0.0, 100 - distance / ACCURACY_SCALE)


@lru_cache(maxsize=None)
def load_palette(name="pantone"):
    """Static reference list, in file order. Each entry gains an 'rgb' tuple."""
    with open(DATA_DIR / f"{name}.json", encoding="utf-8") as fh:
        entries = json.load(fh)
    return tuple(dict(entry, rgb=hex_to_rgb(entry["hex"])) for entry in entries)


def nearest_colors(target, palette, alternatives=5):
    """
    Full linear scan for the closest palette entry.

    Ties keep palette order (the sort is stable), so the first listed entry
    wins. Alternatives are the next closest entries after the match.

    Args:
        target (tuple): (r, g, b)
        palette (sequence): entries with an 'rgb' tuple
        alternatives (int): how many runners-up to return

    Returns:
        dict: closest, distance, accuracy, alternatives [(entry, distance), ...]
    """
    if not palette:
        raise ValueError("Palette is empty")
    ranked = sorted(
        ((entry, color_distance(target, entry["rgb"])) for entry in palette),
        key=lambda pair: pair[1],
    )
    closest, distance = ranked[0]
    return {
        "closest": closest,
        "distance": distance,
        "accuracy": accuracy_for(distance),
        "alternatives": ranked[1:1 + alternatives],
    }
