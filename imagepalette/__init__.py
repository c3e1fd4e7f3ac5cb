"""Prominent colour extraction against a fixed reference palette."""

from .errors import ImagePaletteError, ImageSourceError, MissingCapabilityError, UnsupportedFormatError
from .imgproc import DEFAULT_PALETTE, TRANSPARENT, ImageSampler, PaletteEntry, PaletteMatcher, decode, rank
from .palette import ImagePalette, extract_colors

__all__ = [
    "DEFAULT_PALETTE",
    "ImagePalette",
    "ImagePaletteError",
    "ImageSampler",
    "ImageSourceError",
    "MissingCapabilityError",
    "PaletteEntry",
    "PaletteMatcher",
    "TRANSPARENT",
    "UnsupportedFormatError",
    "decode",
    "extract_colors",
    "rank",
]
