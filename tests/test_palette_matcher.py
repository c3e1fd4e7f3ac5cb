"""Tests for the fixed palette and nearest-colour lookup."""

from __future__ import annotations

import pytest

from imagepalette.imgproc.palette import (
    DEFAULT_PALETTE,
    HEX_WHITELIST,
    PaletteEntry,
    PaletteMatcher,
    hex_to_rgb,
)


def test_hex_to_rgb_full_form() -> None:
    assert hex_to_rgb("#ea4c88") == (234, 76, 136)
    assert hex_to_rgb("#E7D8B1") == (231, 216, 177)


def test_hex_to_rgb_shorthand_doubles_digits() -> None:
    assert hex_to_rgb("f03") == (255, 0, 51)
    assert hex_to_rgb("#fff") == (255, 255, 255)


def test_hex_to_rgb_rejects_other_lengths() -> None:
    with pytest.raises(ValueError):
        hex_to_rgb("#12345")


def test_default_palette_preserves_declaration_order() -> None:
    assert len(DEFAULT_PALETTE) == 33
    assert [entry.hex for entry in DEFAULT_PALETTE] == list(HEX_WHITELIST)
    assert DEFAULT_PALETTE[24] == PaletteEntry("#000000", (0, 0, 0))


def test_every_palette_colour_maps_to_itself() -> None:
    matcher = PaletteMatcher()

    for entry in DEFAULT_PALETTE:
        assert matcher.nearest_color(*hex_to_rgb(entry.hex)) == entry.hex


def test_nearest_color_snaps_to_closest_entry() -> None:
    matcher = PaletteMatcher()

    assert matcher.nearest_color(255, 0, 0) == "#cc0000"
    assert matcher.nearest_color(250, 250, 250) == "#ffffff"
    assert matcher.nearest_color(10, 5, 5) == "#000000"


def test_nearest_color_is_deterministic() -> None:
    matcher = PaletteMatcher()

    results = {matcher.nearest_color(123, 45, 67) for _ in range(10)}

    assert len(results) == 1


def test_equidistant_entries_resolve_to_first_declared() -> None:
    matcher = PaletteMatcher(
        [PaletteEntry.from_hex("#000000"), PaletteEntry.from_hex("#020202")],
    )

    assert matcher.nearest_color(1, 1, 1) == "#000000"


def test_empty_palette_is_rejected() -> None:
    with pytest.raises(ValueError):
        PaletteMatcher([])


def test_hexes_lists_declared_values() -> None:
    assert PaletteMatcher().hexes[-1] == "#F5DD01"
