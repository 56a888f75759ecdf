"""
Pure-Python colour-space conversions between hex, RGB and HSL.

All functions are pure; outputs depend only on inputs. Hex parsing raises
InvalidColorFormat, everything else is total.
"""

from __future__ import annotations

import math
import re

from .errors import InvalidColorFormat
from .ir.color import HSL, RGB

_HEX_RGB = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)
_VALID_HEX = re.compile(r"^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")


def _round(value: float) -> int:
    """Round half up (0.5 -> 1), unlike Python's banker's rounding."""
    return math.floor(value + 0.5)


# =============================================================================
# Hex <-> RGB
# =============================================================================


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse ``#RRGGBB`` (``#`` optional) into RGB channels.

    Raises:
        InvalidColorFormat: If the value is not exactly six hex digits.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color)
    match = _HEX_RGB.match(hex_color)
    if not match:
        raise InvalidColorFormat(hex_color)
    r, g, b = (int(chunk, 16) for chunk in match.groups())
    return RGB(r, g, b)


def rgb_to_hex(rgb: RGB | tuple[float, float, float]) -> str:
    """Format RGB as lowercase ``#rrggbb``, clamping and rounding each channel."""
    channels = (_round(max(0.0, min(255.0, channel))) for channel in rgb)
    return "#" + "".join(f"{channel:02x}" for channel in channels)


# =============================================================================
# RGB <-> HSL
# =============================================================================


def rgb_to_hsl(rgb: RGB | tuple[float, float, float]) -> HSL:
    """Convert RGB to HSL. Achromatic colours get hue 0 and saturation 0."""
    r, g, b = (channel / 255 for channel in rgb)

    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low
    total = high + low
    lightness = total / 2

    if diff == 0:
        hue = saturation = 0.0
    else:
        saturation = diff / (2 - total) if lightness > 0.5 else diff / total
        if high == r:
            hue = (g - b) / diff + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / diff + 2
        else:
            hue = (r - g) / diff + 4
        hue /= 6

    return HSL(hue * 360, saturation * 100, lightness * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL | tuple[float, float, float]) -> RGB:
    """Convert HSL to integer RGB channels."""
    h = hsl[0] / 360
    s = hsl[1] / 100
    lightness = hsl[2] / 100

    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(_round(r * 255), _round(g * 255), _round(b * 255))


# =============================================================================
# Compositions
# =============================================================================


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(hex_to_rgb(hex_color))


def hsl_to_hex(hsl: HSL | tuple[float, float, float]) -> str:
    return rgb_to_hex(hsl_to_rgb(hsl))


# =============================================================================
# Validation
# =============================================================================


def is_valid_hex(value: object) -> bool:
    """True for ``#`` followed by exactly 3 or 6 hex digits."""
    return isinstance(value, str) and bool(_VALID_HEX.match(value))


def normalize_hex(hex_color: str) -> str:
    """Normalize to uppercase ``#RRGGBB``.

    Adds a missing ``#`` and expands ``#RGB`` shorthand. Does not validate:
    garbage in gives uppercased garbage out, which hex_to_rgb then rejects.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color)
    if not hex_color.startswith("#"):
        hex_color = "#" + hex_color
    if len(hex_color) == 4:
        hex_color = "#" + "".join(digit * 2 for digit in hex_color[1:])
    return hex_color.upper()


__all__ = [
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "normalize_hex",
]
