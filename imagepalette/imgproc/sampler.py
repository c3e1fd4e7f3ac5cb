"""Stride-based pixel sampling and classification."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from imagepalette.imgproc.loader import ImageSource
from imagepalette.imgproc.palette import PaletteMatcher

TRANSPARENT = "transparent"

# Alpha folded onto a 7-bit scale: 0 is opaque, 127 is fully transparent.
ALPHA_TRANSPARENT = 127


def sample_points(width: int, height: int, precision: int) -> Iterator[tuple[int, int]]:
    """Yield every ``precision``-th coordinate, sweeping each column before moving right."""

    if precision < 1:
        raise ValueError("precision must be a positive integer.")
    for x in range(0, width, precision):
        for y in range(0, height, precision):
            yield x, y


def is_transparent(alpha: int) -> bool:
    """Only a fully transparent pixel counts; partial alpha is treated as opaque."""

    return (255 - alpha) >> 1 == ALPHA_TRANSPARENT


class ImageSampler:
    """Classifies sampled pixels as transparent or as their nearest palette colour."""

    def __init__(self, matcher: PaletteMatcher | None = None) -> None:
        self._matcher = matcher or PaletteMatcher()

    @property
    def matcher(self) -> PaletteMatcher:
        return self._matcher

    def classify(self, pixel: tuple[int, int, int, int]) -> str:
        r, g, b, alpha = pixel
        if is_transparent(alpha):
            return TRANSPARENT
        return self._matcher.nearest_color(r, g, b)

    def sample(self, image: ImageSource, precision: int) -> Counter[str]:
        counts: Counter[str] = Counter()
        for x, y in sample_points(image.width, image.height, precision):
            counts[self.classify(image.pixel_at(x, y))] += 1
        return counts
