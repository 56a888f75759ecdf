"""
Configuration IR for themekit.yaml.

A project keeps its chosen seed colours, the fallback defaults and the
acceptance threshold in one file at the project root.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .theme import ThemeColors, ThemeDefaults

DEFAULT_MIN_PASS_RATE = 70


class ThemeConfig(BaseModel):
    """Root themekit.yaml configuration."""

    model_config = ConfigDict(frozen=True)

    colors: ThemeColors = Field(
        default_factory=ThemeColors,
        description="Seed colours for the theme",
    )
    defaults: ThemeDefaults = Field(
        default_factory=ThemeDefaults,
        description="Fallback colours used when a seed colour is missing or invalid",
    )
    min_pass_rate: int = Field(
        default=DEFAULT_MIN_PASS_RATE,
        ge=0,
        le=100,
        description="Minimum audit pass rate for a theme to be accepted",
    )
