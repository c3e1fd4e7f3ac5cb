"""Print the prominent colours of one or more images."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from imagepalette.config.settings import get_settings
from imagepalette.errors import ImagePaletteError
from imagepalette.imgproc.palette import PaletteMatcher
from imagepalette.monitoring.logging import configure_logging
from imagepalette.palette import ImagePalette

logger = logging.getLogger(__name__)


def _format_result(source: str, colors: Sequence[str]) -> str:
    return f"{source}: {' '.join(colors)}".rstrip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="image-palette", description=__doc__)
    parser.add_argument("sources", nargs="+", metavar="SOURCE", help="image path or http(s) URL")
    parser.add_argument("--precision", type=int, default=None, help="sample every Nth pixel")
    parser.add_argument("--colors", type=int, default=None, help="number of colours to report")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as exc:
        print(f"image-palette: error: invalid configuration: {exc}", file=sys.stderr)
        return 1
    configure_logging()

    matcher = PaletteMatcher()
    exit_code = 0
    for source in args.sources:
        try:
            palette = ImagePalette(source, args.precision, args.colors, matcher=matcher, settings=settings)
        except (ImagePaletteError, OSError, ValueError) as exc:
            logger.error("Failed to extract palette from %s: %s", source, exc)
            print(f"{source}: error: {exc}", file=sys.stderr)
            exit_code = 1
            continue
        print(_format_result(source, palette.get_colors()))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
