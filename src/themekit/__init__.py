"""
themekit - deterministic colour theming from brand seed colours.

Derives tonal palettes, light/dark CSS variable maps and a WCAG contrast
audit from one or two seed colours.

    from themekit import build_theme_tokens

    tokens = build_theme_tokens({"primary": "#3B82F6", "secondary": "#10B981"})
    tokens.css["--background"]
    tokens.summary.pass_rate
"""

from __future__ import annotations

from ._version import __version__
from .core import ir
from .core.acceptance import evaluate_theme
from .core.contrast import check_contrast, get_contrast_summary, run_contrast_audit
from .core.errors import InvalidColorFormat, ThemeConfigError, ThemekitError
from .core.pair_validator import validate_color_pair
from .core.palette import generate_color_variations
from .core.theme_builder import build_theme_tokens, get_default_theme, validate_theme_colors

__all__ = [
    "__version__",
    "ir",
    "ThemekitError",
    "InvalidColorFormat",
    "ThemeConfigError",
    "generate_color_variations",
    "check_contrast",
    "run_contrast_audit",
    "get_contrast_summary",
    "validate_theme_colors",
    "build_theme_tokens",
    "get_default_theme",
    "validate_color_pair",
    "evaluate_theme",
]
