"""
Contrast IR types: audit results, summaries, and the typed colour references
used by the critical-pairing battery.
"""

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

from .color import Role, Stop


class ContrastLevel(StrEnum):
    """Conformance level reached by a colour pairing."""

    AA = "AA"
    AAA = "AAA"
    FAIL = "fail"


class SemanticColor(StrEnum):
    """Semantic names the auditor resolves through the primary palette."""

    BACKGROUND = "background"
    FOREGROUND = "foreground"
    CARD = "card"
    CARD_FOREGROUND = "card-foreground"
    MUTED = "muted"
    MUTED_FOREGROUND = "muted-foreground"


class PaletteRef(NamedTuple):
    """A ``role`` + ``stop`` cell of a ColorPalettes."""

    role: Role
    stop: Stop

    def __str__(self) -> str:
        return f"{self.role.value}-{self.stop.value}"


ColorRef = PaletteRef | SemanticColor


class ContrastCheck(NamedTuple):
    """A named UI pairing checked by the contrast audit."""

    name: str
    background: ColorRef
    foreground: ColorRef
    large: bool = False


class ContrastResult(BaseModel):
    """
    Result of a single contrast check.

    Example:
        ContrastResult(ratio=21.0, passes=True, level=ContrastLevel.AAA,
                       description="Excellent contrast - meets AAA (7:1)")
    """

    model_config = ConfigDict(frozen=True)

    ratio: float = Field(ge=1.0, le=21.0, description="Contrast ratio, rounded to 2 decimals")
    passes: bool = Field(description="Whether the pairing meets at least AA")
    level: ContrastLevel = Field(description="AA, AAA or fail")
    description: str = Field(description="Human-readable verdict")


class ContrastSummary(BaseModel):
    """Pass/fail aggregate of a contrast audit."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: int = Field(ge=0)
    passing: int = Field(ge=0)
    failing: int = Field(ge=0)
    aa_count: int = Field(default=0, ge=0, alias="aaCount")
    aaa_count: int = Field(default=0, ge=0, alias="aaaCount")
    pass_rate: int = Field(ge=0, le=100, alias="passRate", description="Rounded percentage")
