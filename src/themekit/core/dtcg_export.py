"""
W3C Design Token Community Group (DTCG) tokens.json export.

Generates a DTCG-compliant tokens.json file from a ThemeTokens bundle.
See: https://design-tokens.github.io/community-group/format/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .ir.theme import ThemeTokens
from .theme_builder import RADIUS_VARIABLE


def _semantic_group(variables: dict[str, str]) -> dict[str, Any]:
    return {
        name.removeprefix("--"): {"$type": "color", "$value": value}
        for name, value in variables.items()
        if name != RADIUS_VARIABLE and not _is_palette_variable(name)
    }


def _is_palette_variable(name: str) -> bool:
    # --{role}-{stop}; semantic names never end in a number
    return name.rsplit("-", 1)[-1].isdigit()


def generate_dtcg_tokens(tokens: ThemeTokens) -> dict[str, Any]:
    """Generate W3C DTCG format design tokens from a ThemeTokens bundle.

    Groups tokens into: color (per-role scales, light and dark semantic
    aliases) and dimension (radius).

    Args:
        tokens: Built theme tokens.

    Returns:
        DTCG-formatted dict suitable for writing as tokens.json.
    """
    color_group: dict[str, Any] = {}
    for role, palette in tokens.colors.items():
        color_group[role.value] = {
            str(stop.value): {"$type": "color", "$value": value} for stop, value in palette.items()
        }

    light = tokens.light_css()
    color_group["semantic"] = _semantic_group(light)
    color_group["semantic-dark"] = _semantic_group(tokens.dark_css())

    dtcg: dict[str, Any] = {"color": color_group}
    if RADIUS_VARIABLE in light:
        dtcg["dimension"] = {"radius": {"$type": "dimension", "$value": light[RADIUS_VARIABLE]}}
    return dtcg


def export_dtcg_file(tokens: ThemeTokens, output_path: Path) -> Path:
    """Generate DTCG tokens and write to a JSON file.

    Args:
        tokens: Built theme tokens.
        output_path: Path to write tokens.json.

    Returns:
        Path to the written file.
    """
    dtcg = generate_dtcg_tokens(tokens)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(dtcg, indent=2),
        encoding="utf-8",
    )

    return output_path
