"""Prominent colour extraction for a single image or a batch of images."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Union

from PIL import Image

from imagepalette.config.settings import Settings, get_settings
from imagepalette.imgproc.loader import ImageSource, PillowImage, SourceLike, decode
from imagepalette.imgproc.palette import PaletteMatcher
from imagepalette.imgproc.ranker import rank
from imagepalette.imgproc.sampler import ImageSampler

logger = logging.getLogger(__name__)

PaletteSource = Union[SourceLike, Image.Image, ImageSource]


def _require_positive(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}.")
    return value


class ImagePalette:
    """
    Gets the prominent colours of an image.

    Every ``precision``-th pixel in both directions is snapped to the closest
    colour of a fixed whitelist; the most frequent matches are reported by
    :meth:`get_colors`. The image is decoded and sampled on construction, so a
    source that cannot be read fails here with a typed error.
    """

    def __init__(
        self,
        source: PaletteSource,
        precision: int | None = None,
        num_colors_on_palette: int | None = None,
        *,
        matcher: PaletteMatcher | None = None,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.source = source
        self.precision = _require_positive(
            "precision",
            settings.precision if precision is None else precision,
        )
        self.num_colors_on_palette = _require_positive(
            "num_colors_on_palette",
            settings.num_colors_on_palette if num_colors_on_palette is None else num_colors_on_palette,
        )

        image = self._open(source, settings)
        self.width = image.width
        self.height = image.height

        self._counts = ImageSampler(matcher).sample(image, self.precision)
        logger.debug(
            "Sampled %d pixels from %s (%dx%d, precision=%d)",
            sum(self._counts.values()),
            source,
            self.width,
            self.height,
            self.precision,
        )

    @staticmethod
    def _open(source: PaletteSource, settings: Settings) -> ImageSource:
        if isinstance(source, Image.Image):
            return PillowImage(source)
        if isinstance(source, str) or hasattr(source, "__fspath__"):
            return decode(source, timeout=settings.request_timeout)  # type: ignore[arg-type]
        return source  # type: ignore[return-value]

    @property
    def classifications(self) -> Counter[str]:
        """Copy of the per-classification sample counts, transparency included."""

        return Counter(self._counts)

    def get_colors(self) -> list[str]:
        """Return the most frequent palette colours, most frequent first."""

        return rank(self._counts, self.num_colors_on_palette)


def extract_colors(
    sources: Iterable[PaletteSource],
    precision: int | None = None,
    num_colors_on_palette: int | None = None,
) -> list[list[str]]:
    """Extract palettes for several images in input order, reusing one palette matcher."""

    matcher = PaletteMatcher()
    results: list[list[str]] = []
    for source in sources:
        palette = ImagePalette(source, precision, num_colors_on_palette, matcher=matcher)
        results.append(palette.get_colors())
    logger.info("Extracted palettes for %d images", len(results))
    return results
