"""
WCAG 2.1 contrast auditing.

Computes relative luminance and contrast ratios, classifies pairings into
AA / AAA / fail, and runs the fixed battery of critical UI pairings against
a set of theme palettes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .color_space import hex_to_rgb
from .ir.color import ColorPalettes, Role, Stop
from .ir.contrast import (
    ColorRef,
    ContrastCheck,
    ContrastLevel,
    ContrastResult,
    ContrastSummary,
    PaletteRef,
    SemanticColor,
)

logger = logging.getLogger(__name__)

AA_RATIO = 4.5
AAA_RATIO = 7.0
LARGE_TEXT_RATIO = 3.0


# =============================================================================
# Luminance and ratio
# =============================================================================


def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def get_luminance(hex_color: str) -> float:
    """Relative luminance (0-1) of a hex colour.

    Raises:
        InvalidColorFormat: If the colour cannot be parsed.
    """
    r, g, b = (_linearize(channel / 255) for channel in hex_to_rgb(hex_color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def check_contrast(color_a: str, color_b: str) -> ContrastResult:
    """Check body-text contrast between two colours (argument order is irrelevant)."""
    luminance_a = get_luminance(color_a)
    luminance_b = get_luminance(color_b)
    lighter = max(luminance_a, luminance_b)
    darker = min(luminance_a, luminance_b)
    ratio = (lighter + 0.05) / (darker + 0.05)

    if ratio >= AAA_RATIO:
        level, passes = ContrastLevel.AAA, True
        description = "Excellent contrast - meets AAA (7:1)"
    elif ratio >= AA_RATIO:
        level, passes = ContrastLevel.AA, True
        description = "Good contrast - meets AA (4.5:1)"
    elif ratio >= LARGE_TEXT_RATIO:
        level, passes = ContrastLevel.FAIL, False
        description = "Insufficient contrast - only large text might pass"
    else:
        level, passes = ContrastLevel.FAIL, False
        description = "Contrast too low - not recommended"

    return ContrastResult(
        ratio=round(ratio, 2),
        passes=passes,
        level=level,
        description=description,
    )


def check_contrast_large_text(color_a: str, color_b: str) -> ContrastResult:
    """Check large-text contrast, where 3:1 meets AA and 4.5:1 meets AAA."""
    result = check_contrast(color_a, color_b)

    if result.ratio >= AA_RATIO:
        return result.model_copy(
            update={
                "level": ContrastLevel.AAA,
                "description": "Excellent contrast for large text",
            }
        )
    if result.ratio >= LARGE_TEXT_RATIO:
        return result.model_copy(
            update={
                "passes": True,
                "level": ContrastLevel.AA,
                "description": "Good contrast for large text - meets AA (3:1)",
            }
        )
    return result


# =============================================================================
# Palette references
# =============================================================================


def _ref(role: Role, stop: int) -> PaletteRef:
    return PaletteRef(role, Stop(stop))


SEMANTIC_FALLBACKS: dict[SemanticColor, PaletteRef] = {
    SemanticColor.BACKGROUND: _ref(Role.PRIMARY, 50),
    SemanticColor.FOREGROUND: _ref(Role.PRIMARY, 950),
    SemanticColor.CARD: _ref(Role.PRIMARY, 50),
    SemanticColor.CARD_FOREGROUND: _ref(Role.PRIMARY, 950),
    SemanticColor.MUTED: _ref(Role.PRIMARY, 100),
    SemanticColor.MUTED_FOREGROUND: _ref(Role.PRIMARY, 600),
}


def parse_color_key(key: str) -> ColorRef:
    """Parse ``"primary-500"`` or a semantic name like ``"muted-foreground"``.

    Raises:
        KeyError: If the key is neither a role-stop pair nor a semantic name.
    """
    role_name, _, stop_name = key.partition("-")
    try:
        return PaletteRef(Role(role_name), Stop.coerce(stop_name))
    except (KeyError, ValueError):
        pass
    try:
        return SemanticColor(key)
    except ValueError:
        raise KeyError(f"Unknown palette colour key: {key!r}") from None


def resolve_palette_color(palettes: ColorPalettes, ref: ColorRef) -> str:
    """Look up the hex value a palette reference points at."""
    if isinstance(ref, SemanticColor):
        ref = SEMANTIC_FALLBACKS[ref]
    return palettes[ref.role][ref.stop]


# =============================================================================
# Critical pairings
# =============================================================================


CRITICAL_CONTRAST_CHECKS: tuple[ContrastCheck, ...] = (
    # Primary buttons
    ContrastCheck("Primary Button", _ref(Role.PRIMARY, 500), _ref(Role.PRIMARY, 50)),
    ContrastCheck("Primary Button Hover", _ref(Role.PRIMARY, 600), _ref(Role.PRIMARY, 50)),
    # Secondary buttons
    ContrastCheck("Secondary Button", _ref(Role.PRIMARY, 100), _ref(Role.PRIMARY, 700)),
    ContrastCheck("Secondary Button Hover", _ref(Role.PRIMARY, 200), _ref(Role.PRIMARY, 700)),
    # Text on backgrounds
    ContrastCheck("Body Text", _ref(Role.PRIMARY, 50), _ref(Role.PRIMARY, 950)),
    ContrastCheck("Secondary Text", _ref(Role.PRIMARY, 50), _ref(Role.PRIMARY, 900)),
    ContrastCheck("Muted Text", _ref(Role.PRIMARY, 100), _ref(Role.PRIMARY, 600)),
    # Titles
    ContrastCheck("Main Title", _ref(Role.PRIMARY, 50), _ref(Role.PRIMARY, 800), large=True),
    # Errors
    ContrastCheck("Destructive Button", _ref(Role.DESTRUCTIVE, 500), _ref(Role.DESTRUCTIVE, 50)),
    ContrastCheck("Destructive Alert", _ref(Role.DESTRUCTIVE, 100), _ref(Role.DESTRUCTIVE, 800)),
    # Warnings
    ContrastCheck("Warning Button", _ref(Role.WARNING, 500), _ref(Role.WARNING, 50)),
    ContrastCheck("Warning Alert", _ref(Role.WARNING, 100), _ref(Role.WARNING, 800)),
    # Secondary / success
    ContrastCheck("Success Button", _ref(Role.SECONDARY, 500), _ref(Role.SECONDARY, 50)),
    ContrastCheck("Success Alert", _ref(Role.SECONDARY, 100), _ref(Role.SECONDARY, 800)),
)


def check_roles(check: ContrastCheck) -> set[Role]:
    """Roles whose palettes a check reads from."""
    roles: set[Role] = set()
    for ref in (check.background, check.foreground):
        if isinstance(ref, SemanticColor):
            ref = SEMANTIC_FALLBACKS[ref]
        roles.add(ref.role)
    return roles


def run_contrast_audit(
    palettes: ColorPalettes,
    checks: Iterable[ContrastCheck] = CRITICAL_CONTRAST_CHECKS,
) -> dict[str, ContrastResult]:
    """Run every check against ``palettes``; keyed by check name, in order."""
    results: dict[str, ContrastResult] = {}
    for check in checks:
        background = resolve_palette_color(palettes, check.background)
        foreground = resolve_palette_color(palettes, check.foreground)
        checker = check_contrast_large_text if check.large else check_contrast
        results[check.name] = checker(background, foreground)

    logger.debug(
        f"Contrast audit: {sum(r.passes for r in results.values())}/{len(results)} checks pass"
    )
    return results


def get_contrast_summary(results: Mapping[str, ContrastResult]) -> ContrastSummary:
    """Aggregate audit results into counts and a rounded pass rate."""
    total = len(results)
    passing = sum(1 for result in results.values() if result.passes)
    aa_count = sum(1 for result in results.values() if result.level == ContrastLevel.AA)
    aaa_count = sum(1 for result in results.values() if result.level == ContrastLevel.AAA)
    pass_rate = _round_percent(passing, total)

    return ContrastSummary(
        total=total,
        passing=passing,
        failing=total - passing,
        aa_count=aa_count,
        aaa_count=aaa_count,
        pass_rate=pass_rate,
    )


def _round_percent(part: int, whole: int) -> int:
    if whole == 0:
        return 0
    return int(100 * part / whole + 0.5)
