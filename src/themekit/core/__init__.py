"""Core themekit functionality: colour conversion, palettes, contrast audit, theme tokens."""

from . import ir
from .acceptance import evaluate_theme
from .color_space import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
)
from .config_loader import load_theme_config, save_theme_config
from .contrast import (
    CRITICAL_CONTRAST_CHECKS,
    check_contrast,
    check_contrast_large_text,
    get_contrast_summary,
    get_luminance,
    parse_color_key,
    resolve_palette_color,
    run_contrast_audit,
)
from .dom import InMemoryStyleTarget, StyleTarget, apply_theme, clear_theme
from .errors import InvalidColorFormat, ThemeConfigError, ThemekitError
from .palette import generate_color_variations, interpolate_to_black, interpolate_to_white
from .pair_validator import validate_color_pair
from .theme_builder import (
    build_theme_tokens,
    generate_color_palettes,
    generate_css_variables,
    generate_dark_mode_css,
    get_default_theme,
    validate_theme_colors,
)

__all__ = [
    "ir",
    # Errors
    "ThemekitError",
    "InvalidColorFormat",
    "ThemeConfigError",
    # Colour space
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "normalize_hex",
    # Palettes
    "generate_color_variations",
    "interpolate_to_white",
    "interpolate_to_black",
    # Contrast
    "CRITICAL_CONTRAST_CHECKS",
    "get_luminance",
    "check_contrast",
    "check_contrast_large_text",
    "parse_color_key",
    "resolve_palette_color",
    "run_contrast_audit",
    "get_contrast_summary",
    # Theme
    "validate_theme_colors",
    "generate_color_palettes",
    "generate_css_variables",
    "generate_dark_mode_css",
    "build_theme_tokens",
    "get_default_theme",
    "validate_color_pair",
    "evaluate_theme",
    # Rendering
    "StyleTarget",
    "InMemoryStyleTarget",
    "apply_theme",
    "clear_theme",
    # Config
    "load_theme_config",
    "save_theme_config",
]
