"""
Theme token builder.

Turns seed colours into a complete ThemeTokens bundle:

1. validate_theme_colors() - substitute defaults for missing/invalid colours
2. generate_color_palettes() - one tonal palette per role
3. generate_css_variables() / generate_dark_mode_css() - CSS variable maps
4. run_contrast_audit() - critical pairings against the light palettes
5. get_contrast_summary() - pass/fail aggregate

Defaults are passed in explicitly (``defaults=``) so callers and tests can
swap them; DEFAULT_THEME_DEFAULTS is used when omitted.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .color_space import is_valid_hex, normalize_hex
from .contrast import get_contrast_summary, run_contrast_audit
from .ir.color import ColorPalettes, Role, Stop
from .ir.theme import DARK_PREFIX, DEFAULT_THEME_DEFAULTS, ThemeColors, ThemeDefaults, ThemeTokens
from .palette import generate_color_variations

logger = logging.getLogger(__name__)

ThemeColorsInput = ThemeColors | Mapping[str, str | None]

# Semantic alias -> (role, stop), light presentation
LIGHT_SEMANTIC_ALIASES: dict[str, tuple[Role, Stop]] = {
    "--background": (Role.PRIMARY, Stop.S50),
    "--foreground": (Role.PRIMARY, Stop.S950),
    "--card": (Role.PRIMARY, Stop.S50),
    "--card-foreground": (Role.PRIMARY, Stop.S950),
    "--popover": (Role.PRIMARY, Stop.S50),
    "--popover-foreground": (Role.PRIMARY, Stop.S950),
    "--muted": (Role.PRIMARY, Stop.S100),
    "--muted-foreground": (Role.PRIMARY, Stop.S600),
    "--accent": (Role.SECONDARY, Stop.S100),
    "--accent-foreground": (Role.SECONDARY, Stop.S900),
    "--border": (Role.PRIMARY, Stop.S200),
    "--input": (Role.PRIMARY, Stop.S300),
    "--ring": (Role.PRIMARY, Stop.S600),
}

# Same aliases, inverted for dark presentation
DARK_SEMANTIC_ALIASES: dict[str, tuple[Role, Stop]] = {
    "--background": (Role.PRIMARY, Stop.S950),
    "--foreground": (Role.PRIMARY, Stop.S50),
    "--card": (Role.PRIMARY, Stop.S900),
    "--card-foreground": (Role.PRIMARY, Stop.S50),
    "--popover": (Role.PRIMARY, Stop.S900),
    "--popover-foreground": (Role.PRIMARY, Stop.S50),
    "--muted": (Role.PRIMARY, Stop.S800),
    "--muted-foreground": (Role.PRIMARY, Stop.S400),
    "--accent": (Role.SECONDARY, Stop.S800),
    "--accent-foreground": (Role.SECONDARY, Stop.S50),
    "--border": (Role.PRIMARY, Stop.S700),
    "--input": (Role.PRIMARY, Stop.S700),
    "--ring": (Role.PRIMARY, Stop.S400),
}

RADIUS_VARIABLE = "--radius"


def _coerce_colors(colors: ThemeColorsInput) -> ThemeColors:
    if isinstance(colors, ThemeColors):
        return colors
    values = {role.value: colors.get(role.value) for role in Role}
    return ThemeColors(**{k: v if isinstance(v, str) else None for k, v in values.items()})


def validate_theme_colors(
    colors: ThemeColorsInput,
    defaults: ThemeDefaults = DEFAULT_THEME_DEFAULTS,
) -> ThemeColors:
    """Return a fully-populated ThemeColors; never raises.

    Each role keeps its normalized value when it is a valid ``#RGB`` or
    ``#RRGGBB`` hex, otherwise the role's default is used.
    """
    colors = _coerce_colors(colors)
    validated: dict[str, str] = {}
    for role in Role:
        value = getattr(colors, role.value)
        if value and is_valid_hex(value):
            validated[role.value] = normalize_hex(value)
        else:
            if value is not None:
                logger.debug(f"Invalid {role.value} color {value!r}, using default")
            validated[role.value] = normalize_hex(getattr(defaults, role.value))
    return ThemeColors(**validated)


def generate_color_palettes(
    colors: ThemeColorsInput,
    defaults: ThemeDefaults = DEFAULT_THEME_DEFAULTS,
) -> ColorPalettes:
    """Generate one tonal palette per role from (validated) seed colours."""
    validated = validate_theme_colors(colors, defaults)
    return ColorPalettes(
        **{role.value: generate_color_variations(getattr(validated, role.value)) for role in Role}
    )


def _semantic_variables(
    palettes: ColorPalettes, aliases: Mapping[str, tuple[Role, Stop]]
) -> dict[str, str]:
    return {name: palettes[role][stop] for name, (role, stop) in aliases.items()}


def generate_css_variables(
    palettes: ColorPalettes,
    radius: str = DEFAULT_THEME_DEFAULTS.radius,
) -> dict[str, str]:
    """Light-mode CSS variables: every palette cell plus semantic aliases and radius."""
    css_vars: dict[str, str] = {}
    for role, palette in palettes.items():
        for stop, color in palette.items():
            css_vars[f"--{role.value}-{stop.value}"] = color

    css_vars.update(_semantic_variables(palettes, LIGHT_SEMANTIC_ALIASES))
    css_vars[RADIUS_VARIABLE] = radius
    return css_vars


def generate_dark_mode_css(palettes: ColorPalettes) -> dict[str, str]:
    """Dark-mode semantic aliases only; palette cells are shared with light mode."""
    return _semantic_variables(palettes, DARK_SEMANTIC_ALIASES)


def build_theme_tokens(
    colors: ThemeColorsInput,
    defaults: ThemeDefaults = DEFAULT_THEME_DEFAULTS,
) -> ThemeTokens:
    """Build the complete token bundle for a set of seed colours.

    Args:
        colors: Seed colours; missing or invalid roles fall back to ``defaults``.
        defaults: Fallback colours and radius.

    Returns:
        ThemeTokens with palettes, light + ``dark-`` prefixed CSS variables,
        the contrast audit of the light palettes, and its summary.
    """
    palettes = generate_color_palettes(colors, defaults)

    css = generate_css_variables(palettes, radius=defaults.radius)
    for name, value in generate_dark_mode_css(palettes).items():
        css[f"{DARK_PREFIX}{name}"] = value

    contrast = run_contrast_audit(palettes)
    summary = get_contrast_summary(contrast)
    logger.debug(
        f"Built theme primary={palettes.primary[500]} secondary={palettes.secondary[500]} "
        f"pass rate {summary.pass_rate}%"
    )

    return ThemeTokens(colors=palettes, css=css, contrast=contrast, summary=summary)


def get_default_theme(defaults: ThemeDefaults = DEFAULT_THEME_DEFAULTS) -> ThemeTokens:
    """Theme built from the default colours; the fallback/reset state."""
    return build_theme_tokens(defaults.as_colors(), defaults)
