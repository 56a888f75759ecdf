"""
Tonal palette generation.

Expands one base colour into an 11-stop scale (50-950) by moving HSL
lightness while holding hue and saturation fixed. Stop 500 is the base
colour itself.

The two halves use different curves:

- lighter stops move ``factor`` of the remaining distance to white:
  ``L + (100 - L) * factor``
- darker stops scale the base lightness down: ``L - L * factor``
"""

from __future__ import annotations

from .color_space import hex_to_hsl, hsl_to_hex, normalize_hex
from .ir.color import HSL, ColorVariations, Stop

LIGHTEN_FACTORS: dict[Stop, float] = {
    Stop.S50: 0.9,
    Stop.S100: 0.8,
    Stop.S200: 0.7,
    Stop.S300: 0.6,
    Stop.S400: 0.5,
}

DARKEN_FACTORS: dict[Stop, float] = {
    Stop.S600: 0.2,
    Stop.S700: 0.4,
    Stop.S800: 0.6,
    Stop.S900: 0.8,
    Stop.S950: 0.9,
}


def interpolate_to_white(hsl: HSL, factor: float) -> str:
    """Move ``factor`` of the way from ``hsl`` towards white; returns hex."""
    lightness = min(100.0, hsl.l + (100 - hsl.l) * factor)
    return hsl_to_hex(hsl._replace(l=lightness))


def interpolate_to_black(hsl: HSL, factor: float) -> str:
    """Darken ``hsl`` by ``factor`` of its own lightness; returns hex."""
    lightness = max(0.0, hsl.l - hsl.l * factor)
    return hsl_to_hex(hsl._replace(l=lightness))


def generate_color_variations(base_color: str) -> ColorVariations:
    """Generate the 11-stop tonal palette for ``base_color``.

    No validation is done here; a malformed colour raises InvalidColorFormat
    from the conversion step.

    Args:
        base_color: Hex colour (``#RRGGBB``, ``RRGGBB`` or ``#RGB``).

    Returns:
        ColorVariations whose stop 500 is ``normalize_hex(base_color)``.
    """
    base = normalize_hex(base_color)
    base_hsl = hex_to_hsl(base)

    stops: dict[Stop, str] = {}
    for stop, factor in LIGHTEN_FACTORS.items():
        stops[stop] = interpolate_to_white(base_hsl, factor)
    stops[Stop.S500] = base
    for stop, factor in DARKEN_FACTORS.items():
        stops[stop] = interpolate_to_black(base_hsl, factor)

    return ColorVariations.from_stops(stops)
