"""
Applying a theme to a rendering target.

The core never touches a live page. A renderer implements the narrow
StyleTarget protocol (set/remove a CSS variable, add/remove a mode marker)
and apply_theme() drives it. Callers must treat a target as single-writer.

Usage:
    target = InMemoryStyleTarget()
    apply_theme(tokens, target, dark=True)
    target.properties["--background"]
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .ir.theme import ThemeTokens

DARK_MODE_MARKER = "dark"


@runtime_checkable
class StyleTarget(Protocol):
    """Minimal surface of a styled root element."""

    def set_property(self, name: str, value: str) -> None: ...

    def remove_property(self, name: str) -> None: ...

    def add_mode_marker(self, marker: str) -> None: ...

    def remove_mode_marker(self, marker: str) -> None: ...


class InMemoryStyleTarget:
    """StyleTarget that records properties and markers in memory."""

    def __init__(self) -> None:
        self.properties: dict[str, str] = {}
        self.markers: set[str] = set()

    def set_property(self, name: str, value: str) -> None:
        self.properties[name] = value

    def remove_property(self, name: str) -> None:
        self.properties.pop(name, None)

    def add_mode_marker(self, marker: str) -> None:
        self.markers.add(marker)

    def remove_mode_marker(self, marker: str) -> None:
        self.markers.discard(marker)

    @property
    def is_dark(self) -> bool:
        return DARK_MODE_MARKER in self.markers

    def __repr__(self) -> str:
        return f"InMemoryStyleTarget(properties={len(self.properties)}, markers={sorted(self.markers)})"


def apply_theme(tokens: ThemeTokens, target: StyleTarget, dark: bool = False) -> None:
    """Write a theme onto ``target``.

    Clears the dark marker, writes every light variable, then (dark only)
    sets the marker and overwrites each semantic alias with its dark value.
    """
    target.remove_mode_marker(DARK_MODE_MARKER)

    for name, value in tokens.light_css().items():
        target.set_property(name, value)

    if dark:
        target.add_mode_marker(DARK_MODE_MARKER)
        for name, value in tokens.dark_css().items():
            target.set_property(name, value)


def clear_theme(tokens: ThemeTokens, target: StyleTarget) -> None:
    """Remove every variable ``tokens`` would set, and the dark marker."""
    target.remove_mode_marker(DARK_MODE_MARKER)
    for name in tokens.light_css().keys() | tokens.dark_css().keys():
        target.remove_property(name)
