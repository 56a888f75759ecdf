"""
Colour pair validation.

Scores whether two arbitrary colours form a usable primary/secondary pair by
auditing palettes synthesized from them. The destructive and warning slots
are filled from the defaults; checks that only read those slots do not
depend on the pair and are left out of the score.
"""

from __future__ import annotations

import logging

from .color_space import is_valid_hex
from .contrast import CRITICAL_CONTRAST_CHECKS, check_roles, run_contrast_audit
from .ir.color import Role
from .ir.theme import DEFAULT_THEME_DEFAULTS, PairLevel, PairValidation, ThemeColors, ThemeDefaults
from .theme_builder import generate_color_palettes

logger = logging.getLogger(__name__)

VALID_PASS_RATE = 70.0
EXCELLENT_PASS_RATE = 90.0

PAIR_ROLES = frozenset({Role.PRIMARY, Role.SECONDARY})

# Checks that read only from the primary/secondary palettes
PAIR_CONTRAST_CHECKS = tuple(
    check for check in CRITICAL_CONTRAST_CHECKS if check_roles(check) <= PAIR_ROLES
)


def pair_level(pass_rate: float) -> PairLevel:
    if pass_rate >= EXCELLENT_PASS_RATE:
        return PairLevel.EXCELLENT
    if pass_rate >= VALID_PASS_RATE:
        return PairLevel.GOOD
    return PairLevel.POOR


def validate_color_pair(
    color_a: object,
    color_b: object,
    defaults: ThemeDefaults = DEFAULT_THEME_DEFAULTS,
) -> PairValidation:
    """Score ``color_a`` (as primary) and ``color_b`` (as secondary); never raises.

    Returns:
        PairValidation where ``contrast`` is the percentage of pair checks
        that pass, ``is_valid`` is ``contrast >= 70`` and ``level`` is
        excellent (>= 90), good (>= 70), poor, or invalid for malformed input.
    """
    if not is_valid_hex(color_a) or not is_valid_hex(color_b):
        return PairValidation(is_valid=False, contrast=0.0, level=PairLevel.INVALID)

    palettes = generate_color_palettes(
        ThemeColors(
            primary=color_a,  # type: ignore[arg-type]
            secondary=color_b,  # type: ignore[arg-type]
            destructive=defaults.destructive,
            warning=defaults.warning,
        ),
        defaults,
    )
    results = run_contrast_audit(palettes, PAIR_CONTRAST_CHECKS)
    passing = sum(1 for result in results.values() if result.passes)
    pass_rate = 100 * passing / len(results)

    level = pair_level(pass_rate)
    logger.debug(f"Pair {color_a}/{color_b}: {passing}/{len(results)} checks pass ({level})")
    return PairValidation(is_valid=pass_rate >= VALID_PASS_RATE, contrast=pass_rate, level=level)
