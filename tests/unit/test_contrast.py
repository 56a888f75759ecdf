"""Unit tests for WCAG contrast computation and the critical-pairing audit."""

from __future__ import annotations

import itertools

import pytest

from themekit.core.contrast import (
    CRITICAL_CONTRAST_CHECKS,
    SEMANTIC_FALLBACKS,
    check_contrast,
    check_contrast_large_text,
    check_roles,
    get_contrast_summary,
    get_luminance,
    parse_color_key,
    resolve_palette_color,
    run_contrast_audit,
)
from themekit.core.errors import InvalidColorFormat
from themekit.core.ir import (
    ContrastCheck,
    ContrastLevel,
    ContrastResult,
    PaletteRef,
    Role,
    SemanticColor,
    Stop,
)
from themekit.core.theme_builder import generate_color_palettes

COLORS = ["#FFFFFF", "#000000", "#3B82F6", "#808080", "#888888", "#F59E0B", "#10B981"]


@pytest.fixture()
def palettes():
    return generate_color_palettes({"primary": "#3B82F6", "secondary": "#10B981"})


def make_result(passes: bool, level: ContrastLevel, ratio: float = 5.0) -> ContrastResult:
    return ContrastResult(ratio=ratio, passes=passes, level=level, description="test")


# =============================================================================
# Luminance and ratio
# =============================================================================


class TestLuminance:
    def test_extremes(self):
        assert get_luminance("#FFFFFF") == pytest.approx(1.0)
        assert get_luminance("#000000") == 0.0

    def test_green_weighs_most(self):
        assert get_luminance("#00FF00") > get_luminance("#FF0000") > get_luminance("#0000FF")

    def test_invalid_color(self):
        with pytest.raises(InvalidColorFormat):
            get_luminance("#XYZXYZ")


class TestCheckContrast:
    def test_black_on_white_is_maximum(self):
        result = check_contrast("#FFFFFF", "#000000")
        assert result.ratio == 21.0
        assert result.level == ContrastLevel.AAA
        assert result.passes is True

    def test_similar_grays_fail(self):
        result = check_contrast("#808080", "#888888")
        assert result.ratio < 1.5
        assert result.level == ContrastLevel.FAIL
        assert result.passes is False
        assert "too low" in result.description

    def test_aa_band(self):
        result = check_contrast("#FFFFFF", "#666666")
        assert 4.5 <= result.ratio < 7
        assert result.level == ContrastLevel.AA
        assert result.passes is True

    def test_large_text_only_band(self):
        result = check_contrast("#FFFFFF", "#949494")
        assert 3 <= result.ratio < 4.5
        assert result.level == ContrastLevel.FAIL
        assert result.passes is False
        assert "large text" in result.description

    def test_identical_colors(self):
        assert check_contrast("#3B82F6", "#3B82F6").ratio == 1.0

    @pytest.mark.parametrize("a,b", itertools.combinations(COLORS, 2))
    def test_commutative_and_bounded(self, a, b):
        forward = check_contrast(a, b)
        assert forward.ratio == check_contrast(b, a).ratio
        assert 1 <= forward.ratio <= 21

    def test_rounded_to_two_decimals(self):
        ratio = check_contrast("#3B82F6", "#FFFFFF").ratio
        assert ratio == round(ratio, 2)


class TestCheckContrastLargeText:
    def test_three_to_one_passes_aa(self):
        result = check_contrast_large_text("#FFFFFF", "#949494")
        assert result.level == ContrastLevel.AA
        assert result.passes is True

    def test_aa_body_ratio_is_aaa_for_large_text(self):
        result = check_contrast_large_text("#FFFFFF", "#666666")
        assert result.level == ContrastLevel.AAA
        assert result.passes is True

    def test_below_three_still_fails(self):
        result = check_contrast_large_text("#808080", "#888888")
        assert result.level == ContrastLevel.FAIL
        assert result.passes is False

    def test_ratio_unchanged(self):
        assert (
            check_contrast_large_text("#FFFFFF", "#949494").ratio
            == check_contrast("#FFFFFF", "#949494").ratio
        )


# =============================================================================
# References
# =============================================================================


class TestPaletteReferences:
    def test_parse_role_stop(self):
        assert parse_color_key("primary-500") == PaletteRef(Role.PRIMARY, Stop.S500)
        assert parse_color_key("warning-50") == PaletteRef(Role.WARNING, Stop.S50)

    def test_parse_semantic(self):
        assert parse_color_key("muted-foreground") == SemanticColor.MUTED_FOREGROUND
        assert parse_color_key("background") == SemanticColor.BACKGROUND

    @pytest.mark.parametrize("key", ["primary-550", "accent-500", "sidebar", ""])
    def test_parse_unknown(self, key):
        with pytest.raises(KeyError):
            parse_color_key(key)

    def test_ref_str(self):
        assert str(PaletteRef(Role.SECONDARY, Stop.S100)) == "secondary-100"

    def test_resolve_cell(self, palettes):
        ref = PaletteRef(Role.SECONDARY, Stop.S500)
        assert resolve_palette_color(palettes, ref) == "#10B981"

    @pytest.mark.parametrize(
        "name,stop",
        [
            ("background", 50),
            ("foreground", 950),
            ("card", 50),
            ("card-foreground", 950),
            ("muted", 100),
            ("muted-foreground", 600),
        ],
    )
    def test_semantic_fallbacks(self, palettes, name, stop):
        assert resolve_palette_color(palettes, SemanticColor(name)) == palettes.primary[stop]

    def test_fallback_table_is_primary_only(self):
        assert {ref.role for ref in SEMANTIC_FALLBACKS.values()} == {Role.PRIMARY}


# =============================================================================
# Audit
# =============================================================================


class TestRunContrastAudit:
    def test_runs_every_check_in_order(self, palettes):
        results = run_contrast_audit(palettes)
        assert list(results) == [check.name for check in CRITICAL_CONTRAST_CHECKS]
        assert len(results) == 14

    def test_known_check_names(self, palettes):
        results = run_contrast_audit(palettes)
        for name in ("Primary Button", "Primary Button Hover", "Secondary Button", "Main Title"):
            assert name in results

    def test_primary_button_pairing(self, palettes):
        results = run_contrast_audit(palettes)
        assert results["Primary Button"] == check_contrast(palettes.primary[500], palettes.primary[50])

    def test_large_check_uses_large_text_rules(self, palettes):
        title = next(check for check in CRITICAL_CONTRAST_CHECKS if check.name == "Main Title")
        assert title.large is True
        results = run_contrast_audit(palettes)
        expected = check_contrast_large_text(
            resolve_palette_color(palettes, title.background),
            resolve_palette_color(palettes, title.foreground),
        )
        assert results["Main Title"] == expected

    def test_custom_checks_with_semantic_refs(self, palettes):
        checks = [ContrastCheck("Card", SemanticColor.CARD, SemanticColor.CARD_FOREGROUND)]
        results = run_contrast_audit(palettes, checks)
        assert list(results) == ["Card"]
        assert results["Card"] == check_contrast(palettes.primary[50], palettes.primary[950])

    def test_check_roles(self):
        roles = {check.name: check_roles(check) for check in CRITICAL_CONTRAST_CHECKS}
        assert roles["Primary Button"] == {Role.PRIMARY}
        assert roles["Warning Alert"] == {Role.WARNING}
        assert roles["Success Button"] == {Role.SECONDARY}


class TestContrastSummary:
    def test_counts(self):
        results = {
            "a": make_result(True, ContrastLevel.AAA, 8.0),
            "b": make_result(True, ContrastLevel.AA),
            "c": make_result(False, ContrastLevel.FAIL, 2.0),
        }
        summary = get_contrast_summary(results)
        assert summary.total == 3
        assert summary.passing == 2
        assert summary.failing == 1
        assert summary.aa_count == 1
        assert summary.aaa_count == 1
        assert summary.pass_rate == 67

    def test_half_rounds_up(self):
        results = {
            "a": make_result(True, ContrastLevel.AA),
            "b": make_result(False, ContrastLevel.FAIL, 2.0),
            "c": make_result(False, ContrastLevel.FAIL, 2.0),
            "d": make_result(False, ContrastLevel.FAIL, 2.0),
            "e": make_result(False, ContrastLevel.FAIL, 2.0),
            "f": make_result(False, ContrastLevel.FAIL, 2.0),
            "g": make_result(False, ContrastLevel.FAIL, 2.0),
            "h": make_result(False, ContrastLevel.FAIL, 2.0),
        }
        # 1/8 = 12.5%
        assert get_contrast_summary(results).pass_rate == 13

    def test_empty(self):
        summary = get_contrast_summary({})
        assert summary.total == 0
        assert summary.pass_rate == 0

    def test_invariants_on_real_audit(self, palettes):
        summary = get_contrast_summary(run_contrast_audit(palettes))
        assert summary.passing + summary.failing == summary.total
        assert 0 <= summary.pass_rate <= 100

    def test_camel_case_dump(self):
        summary = get_contrast_summary({"a": make_result(True, ContrastLevel.AA)})
        data = summary.model_dump(by_alias=True)
        assert data["passRate"] == 100
        assert data["aaCount"] == 1
