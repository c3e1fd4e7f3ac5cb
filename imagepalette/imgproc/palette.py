"""Fixed reference palette and nearest-colour lookup."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

HEX_WHITELIST = (
    "#660000", "#990000", "#cc0000", "#cc3333", "#ea4c88", "#993399",
    "#663399", "#333399", "#0066cc", "#0099cc", "#66cccc", "#77cc33",
    "#669900", "#336600", "#666600", "#999900", "#cccc33", "#ffff00",
    "#ffcc33", "#ff9900", "#ff6600", "#cc6633", "#996633", "#663300",
    "#000000", "#999999", "#cccccc", "#ffffff", "#E7D8B1", "#FDADC7",
    "#424153", "#ABBCDA", "#F5DD01",
)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Convert ``#rrggbb`` or ``#rgb`` into an RGB triple."""

    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(char * 2 for char in digits)
    if len(digits) != 6:
        raise ValueError(f"Expected 3 or 6 hex digits, got {value!r}.")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    """A palette colour stored both as declared hex and as RGB."""

    hex: str
    rgb: tuple[int, int, int]

    @classmethod
    def from_hex(cls, value: str) -> "PaletteEntry":
        return cls(hex=value, rgb=hex_to_rgb(value))


DEFAULT_PALETTE: tuple[PaletteEntry, ...] = tuple(PaletteEntry.from_hex(value) for value in HEX_WHITELIST)


class PaletteMatcher:
    """Snaps arbitrary RGB values to the closest palette entry."""

    def __init__(self, entries: Iterable[PaletteEntry] = DEFAULT_PALETTE) -> None:
        self._entries = tuple(entries)
        if not self._entries:
            raise ValueError("Palette must contain at least one colour.")

    @property
    def entries(self) -> tuple[PaletteEntry, ...]:
        return self._entries

    @property
    def hexes(self) -> list[str]:
        return [entry.hex for entry in self._entries]

    def nearest_color(self, r: int, g: int, b: int) -> str:
        """
        Return the hex of the entry closest to ``(r, g, b)`` in RGB space.

        ``min`` keeps the first of several equidistant entries, so ties resolve
        to declaration order.
        """

        query = (r, g, b)
        best = min(self._entries, key=lambda entry: math.dist(query, entry.rgb))
        return best.hex
