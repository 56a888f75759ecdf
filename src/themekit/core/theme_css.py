"""
Stylesheet rendering for generated themes.

Produces a ``:root`` block with the light variables and a ``.dark`` block
with the dark-mode semantic aliases.
"""

from __future__ import annotations

from collections.abc import Mapping

from .ir.color import ColorPalettes
from .ir.theme import DEFAULT_THEME_DEFAULTS, ThemeTokens
from .theme_builder import generate_css_variables, generate_dark_mode_css

DARK_SELECTOR = ".dark"


def css_variables_to_string(variables: Mapping[str, str]) -> str:
    """One ``  name: value;`` declaration per line."""
    return "\n".join(f"  {name}: {value};" for name, value in variables.items())


def _stylesheet(light: Mapping[str, str], dark: Mapping[str, str]) -> str:
    return (
        "/* Generated theme - do not edit */\n"
        ":root {\n"
        f"{css_variables_to_string(light)}\n"
        "}\n"
        "\n"
        f"{DARK_SELECTOR} {{\n"
        f"{css_variables_to_string(dark)}\n"
        "}\n"
    )


def generate_theme_css(
    palettes: ColorPalettes,
    radius: str = DEFAULT_THEME_DEFAULTS.radius,
) -> str:
    """Render the complete theme stylesheet for a set of palettes."""
    return _stylesheet(generate_css_variables(palettes, radius), generate_dark_mode_css(palettes))


def tokens_to_css(tokens: ThemeTokens) -> str:
    """Render the stylesheet from an already-built token bundle."""
    return _stylesheet(tokens.light_css(), tokens.dark_css())
