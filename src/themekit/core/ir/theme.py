"""
Theme IR types: seed colours, defaults, the token bundle, and the pair /
acceptance verdicts reported back to the API boundary.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .color import ColorPalettes
from .contrast import ContrastResult, ContrastSummary

# Key prefix of the dark-mode entries inside ThemeTokens.css
DARK_PREFIX = "dark-"

# Hex accepted by the persistence boundary: exactly six digits
STRICT_HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"
_HEX_PATTERN = r"^#(?:[0-9A-Fa-f]{3}){1,2}$"


# =============================================================================
# Seed colours
# =============================================================================


class ThemeColors(BaseModel):
    """
    User-facing seed colours.

    Values are not validated here; validate_theme_colors() substitutes
    defaults for anything missing or malformed.
    """

    model_config = ConfigDict(frozen=True)

    primary: str | None = None
    secondary: str | None = None
    destructive: str | None = None
    warning: str | None = None


class ThemeDefaults(BaseModel):
    """Fallback colours (and radius) used when seed colours are absent or invalid."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(default="#3B82F6", pattern=_HEX_PATTERN, description="Blue")
    secondary: str = Field(default="#10B981", pattern=_HEX_PATTERN, description="Green")
    destructive: str = Field(default="#EF4444", pattern=_HEX_PATTERN, description="Red")
    warning: str = Field(default="#F59E0B", pattern=_HEX_PATTERN, description="Amber")
    radius: str = Field(default="0.5rem", description="Value of the --radius token")

    def as_colors(self) -> ThemeColors:
        return ThemeColors(
            primary=self.primary,
            secondary=self.secondary,
            destructive=self.destructive,
            warning=self.warning,
        )


DEFAULT_THEME_DEFAULTS = ThemeDefaults()


# =============================================================================
# Token bundle
# =============================================================================


class ThemeTokens(BaseModel):
    """
    Complete theme: palettes, CSS variables, contrast audit and summary.

    ``css`` holds the light-mode variables (``--primary-500``, ``--background``,
    ...) plus the dark-mode semantic aliases under the ``dark-`` prefix
    (``dark---background``).
    """

    model_config = ConfigDict(frozen=True)

    colors: ColorPalettes
    css: dict[str, str]
    contrast: dict[str, ContrastResult]
    summary: ContrastSummary

    def light_css(self) -> dict[str, str]:
        return {k: v for k, v in self.css.items() if not k.startswith(DARK_PREFIX)}

    def dark_css(self) -> dict[str, str]:
        """Dark-mode aliases with the prefix stripped."""
        return {
            k[len(DARK_PREFIX) :]: v for k, v in self.css.items() if k.startswith(DARK_PREFIX)
        }


# =============================================================================
# Verdicts
# =============================================================================


class PairLevel(StrEnum):
    """Quality band of a colour pair."""

    INVALID = "invalid"
    POOR = "poor"
    GOOD = "good"
    EXCELLENT = "excellent"


class PairValidation(BaseModel):
    """Whether two colours form a usable primary/secondary pair."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    is_valid: bool = Field(alias="isValid")
    contrast: float = Field(ge=0.0, le=100.0, description="Pass-rate proxy score")
    level: PairLevel


class ThemeSubmission(BaseModel):
    """
    Theme colours as received from the API boundary.

    Example:
        ThemeSubmission(primaryColor="#3B82F6", secondaryColor="#10B981")
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    primary_color: str = Field(alias="primaryColor", pattern=STRICT_HEX_PATTERN)
    secondary_color: str = Field(alias="secondaryColor", pattern=STRICT_HEX_PATTERN)
    destructive_color: str | None = Field(
        default=None, alias="destructiveColor", pattern=STRICT_HEX_PATTERN
    )
    warning_color: str | None = Field(default=None, alias="warningColor", pattern=STRICT_HEX_PATTERN)

    def to_theme_colors(self) -> ThemeColors:
        return ThemeColors(
            primary=self.primary_color,
            secondary=self.secondary_color,
            destructive=self.destructive_color,
            warning=self.warning_color,
        )


class ThemeAcceptance(BaseModel):
    """Acceptance-gate verdict for saving a theme."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pass_rate: int = Field(ge=0, le=100, alias="passRate")
    level: PairLevel = Field(description="Pair validator level for primary/secondary")
    passing: int = Field(ge=0)
    failing: int = Field(ge=0)
    total: int = Field(ge=0)
    is_valid: bool = Field(alias="isValid", description="Pair validator verdict")
    accepted: bool
    reasons: list[str] = Field(default_factory=list, description="Rejection reasons")
