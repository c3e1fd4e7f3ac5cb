"""Image sampling, palette matching and ranking."""

from .loader import ImageSource, PillowImage, decode
from .palette import DEFAULT_PALETTE, PaletteEntry, PaletteMatcher, hex_to_rgb
from .ranker import rank
from .sampler import TRANSPARENT, ImageSampler, sample_points

__all__ = [
    "DEFAULT_PALETTE",
    "ImageSampler",
    "ImageSource",
    "PaletteEntry",
    "PaletteMatcher",
    "PillowImage",
    "TRANSPARENT",
    "decode",
    "hex_to_rgb",
    "rank",
    "sample_points",
]
