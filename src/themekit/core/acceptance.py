"""
Theme acceptance gate for save/preview flows.

Builds the token bundle, validates the primary/secondary pair, and decides
whether the theme may be persisted. Only reports facts; translating a
rejection into a response is the caller's job.
"""

from __future__ import annotations

import logging

from .ir.config import DEFAULT_MIN_PASS_RATE
from .ir.theme import (
    DEFAULT_THEME_DEFAULTS,
    ThemeAcceptance,
    ThemeDefaults,
    ThemeSubmission,
    ThemeTokens,
)
from .pair_validator import validate_color_pair
from .theme_builder import ThemeColorsInput, build_theme_tokens, validate_theme_colors

logger = logging.getLogger(__name__)


def evaluate_theme(
    colors: ThemeColorsInput | ThemeSubmission,
    *,
    min_pass_rate: int = DEFAULT_MIN_PASS_RATE,
    defaults: ThemeDefaults = DEFAULT_THEME_DEFAULTS,
) -> tuple[ThemeTokens, ThemeAcceptance]:
    """Build tokens for ``colors`` and judge them against the acceptance gate.

    The pair check runs on the validated primary/secondary colours, so a
    missing colour is judged by the default that replaces it.

    Returns:
        ``(tokens, acceptance)``; never raises for bad colours.
    """
    if isinstance(colors, ThemeSubmission):
        colors = colors.to_theme_colors()

    validated = validate_theme_colors(colors, defaults)
    tokens = build_theme_tokens(validated, defaults)
    pair = validate_color_pair(validated.primary, validated.secondary, defaults)
    summary = tokens.summary

    reasons: list[str] = []
    if not pair.is_valid:
        reasons.append(
            f"Insufficient contrast between primary and secondary colors "
            f"({pair.contrast:.0f}% of pair checks pass, level {pair.level})"
        )
    if summary.pass_rate < min_pass_rate:
        reasons.append(
            f"Theme does not meet accessibility requirements "
            f"({summary.failing} of {summary.total} checks fail, "
            f"pass rate {summary.pass_rate}% < {min_pass_rate}%)"
        )

    acceptance = ThemeAcceptance(
        pass_rate=summary.pass_rate,
        level=pair.level,
        passing=summary.passing,
        failing=summary.failing,
        total=summary.total,
        is_valid=pair.is_valid,
        accepted=not reasons,
        reasons=reasons,
    )
    if reasons:
        logger.debug(f"Theme rejected: {'; '.join(reasons)}")
    return tokens, acceptance
