"""Intermediate representation types for themekit."""

from .color import (
    DARKER_STOPS,
    HSL,
    LIGHTER_STOPS,
    RGB,
    ColorPalettes,
    ColorVariations,
    Role,
    Stop,
)
from .config import DEFAULT_MIN_PASS_RATE, ThemeConfig
from .contrast import (
    ColorRef,
    ContrastCheck,
    ContrastLevel,
    ContrastResult,
    ContrastSummary,
    PaletteRef,
    SemanticColor,
)
from .theme import (
    DARK_PREFIX,
    DEFAULT_THEME_DEFAULTS,
    STRICT_HEX_PATTERN,
    PairLevel,
    PairValidation,
    ThemeAcceptance,
    ThemeColors,
    ThemeDefaults,
    ThemeSubmission,
    ThemeTokens,
)

__all__ = [
    # Colour
    "RGB",
    "HSL",
    "Stop",
    "Role",
    "LIGHTER_STOPS",
    "DARKER_STOPS",
    "ColorVariations",
    "ColorPalettes",
    # Contrast
    "ContrastLevel",
    "ContrastResult",
    "ContrastSummary",
    "ContrastCheck",
    "PaletteRef",
    "SemanticColor",
    "ColorRef",
    # Theme
    "DARK_PREFIX",
    "STRICT_HEX_PATTERN",
    "ThemeColors",
    "ThemeDefaults",
    "DEFAULT_THEME_DEFAULTS",
    "ThemeTokens",
    "PairLevel",
    "PairValidation",
    "ThemeSubmission",
    "ThemeAcceptance",
    # Config
    "ThemeConfig",
    "DEFAULT_MIN_PASS_RATE",
]
