"""
Colour IR types: colour-space tuples, palette stops, roles, and palettes.

A ColorVariations is the 11-stop tonal scale generated from one base colour;
a ColorPalettes groups one scale per theme role.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import IntEnum, StrEnum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Colour-space carriers
# =============================================================================


class RGB(NamedTuple):
    """RGB channels, nominally 0-255 (rgb_to_hex clamps out-of-range values)."""

    r: float
    g: float
    b: float


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


# =============================================================================
# Enums
# =============================================================================


class Stop(IntEnum):
    """Named lightness levels of a tonal palette."""

    S50 = 50
    S100 = 100
    S200 = 200
    S300 = 300
    S400 = 400
    S500 = 500
    S600 = 600
    S700 = 700
    S800 = 800
    S900 = 900
    S950 = 950

    @classmethod
    def coerce(cls, value: int | str | Stop) -> Stop:
        """Resolve ``500``, ``"500"`` or ``Stop.S500`` to a Stop.

        Raises:
            KeyError: If the value is not one of the 11 stop names.
        """
        if isinstance(value, Stop):
            return value
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise KeyError(value) from None


class Role(StrEnum):
    """Semantic colour slots a theme defines."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    DESTRUCTIVE = "destructive"
    WARNING = "warning"


LIGHTER_STOPS: tuple[Stop, ...] = (Stop.S50, Stop.S100, Stop.S200, Stop.S300, Stop.S400)
DARKER_STOPS: tuple[Stop, ...] = (Stop.S600, Stop.S700, Stop.S800, Stop.S900, Stop.S950)


def _field_name(stop: Stop) -> str:
    return f"stop_{stop.value}"


# =============================================================================
# Palettes
# =============================================================================


class ColorVariations(BaseModel):
    """
    An 11-stop tonal palette. Values are hex strings.

    Stops can be read by number or by name:

        palette[500] == palette["500"] == palette[Stop.S500] == palette.stop_500

    Serialises with the stop names as keys (``{"50": ..., "950": ...}``)
    when dumped with ``by_alias=True``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stop_50: str = Field(alias="50")
    stop_100: str = Field(alias="100")
    stop_200: str = Field(alias="200")
    stop_300: str = Field(alias="300")
    stop_400: str = Field(alias="400")
    stop_500: str = Field(alias="500", description="The base colour, normalized")
    stop_600: str = Field(alias="600")
    stop_700: str = Field(alias="700")
    stop_800: str = Field(alias="800")
    stop_900: str = Field(alias="900")
    stop_950: str = Field(alias="950")

    @classmethod
    def from_stops(cls, stops: dict[Stop, str]) -> ColorVariations:
        """Build a palette from a complete ``{Stop: hex}`` mapping."""
        return cls(**{_field_name(stop): stops[stop] for stop in Stop})

    def __getitem__(self, stop: int | str | Stop) -> str:
        return getattr(self, _field_name(Stop.coerce(stop)))

    def items(self) -> Iterator[tuple[Stop, str]]:
        """Iterate ``(stop, hex)`` pairs from lightest to darkest."""
        for stop in Stop:
            yield stop, self[stop]

    def as_dict(self) -> dict[str, str]:
        """Plain ``{"50": hex, ...}`` mapping."""
        return {str(stop.value): value for stop, value in self.items()}


class ColorPalettes(BaseModel):
    """One tonal palette per theme role."""

    model_config = ConfigDict(frozen=True)

    primary: ColorVariations
    secondary: ColorVariations
    destructive: ColorVariations
    warning: ColorVariations

    def __getitem__(self, role: str | Role) -> ColorVariations:
        try:
            return getattr(self, Role(role).value)
        except ValueError:
            raise KeyError(role) from None

    def items(self) -> Iterator[tuple[Role, ColorVariations]]:
        """Iterate ``(role, palette)`` pairs in role declaration order."""
        for role in Role:
            yield role, self[role]
