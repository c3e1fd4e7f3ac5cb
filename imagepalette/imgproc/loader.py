"""Decoding of image files and URLs into pixel-addressable handles."""

from __future__ import annotations

import logging
import os
from io import BytesIO
from pathlib import PurePosixPath
from typing import Protocol, Union
from urllib.parse import urlparse

import httpx
from PIL import Image, features

from imagepalette.config.settings import get_settings
from imagepalette.errors import ImageSourceError, MissingCapabilityError, UnsupportedFormatError

logger = logging.getLogger(__name__)

Pixel = tuple[int, int, int, int]
SourceLike = Union[str, "os.PathLike[str]"]

# Extension -> Pillow codec that must be compiled in (None for pure-Python decoders).
SUPPORTED_FORMATS: dict[str, str | None] = {
    "png": "zlib",
    "jpg": "jpg",
    "jpeg": "jpg",
    "gif": None,
    "bmp": None,
}


class ImageSource(Protocol):
    """Minimal pixel access needed by the sampler."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def pixel_at(self, x: int, y: int) -> Pixel: ...


class PillowImage:
    """RGBA view over a decoded Pillow image."""

    def __init__(self, image: Image.Image) -> None:
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        self._image = image
        self._pixels = image.load()

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def image(self) -> Image.Image:
        return self._image

    def pixel_at(self, x: int, y: int) -> Pixel:
        return self._pixels[x, y]


def is_url(source: SourceLike) -> bool:
    return isinstance(source, str) and urlparse(source).scheme in {"http", "https"}


def source_extension(source: SourceLike) -> str:
    """Return the lowercase extension of a path or URL, without the dot."""

    path = urlparse(source).path if is_url(source) else os.fspath(source)
    return PurePosixPath(path.replace("\\", "/")).suffix.lstrip(".").lower()


def require_codec(extension: str) -> None:
    """Fail fast when Pillow was built without the decoder for ``extension``."""

    codec = SUPPORTED_FORMATS.get(extension)
    if codec is not None and not features.check_codec(codec):
        raise MissingCapabilityError(
            f"Pillow was built without {codec} support; cannot decode .{extension} images.",
        )


def _fetch(url: str, timeout: float) -> bytes:
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise ImageSourceError(
            f"Image download failed with status {exc.response.status_code}: {url}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise ImageSourceError(f"Image download failed: {url} ({exc})") from exc
    return response.content


def decode(source: SourceLike, *, timeout: float | None = None) -> PillowImage:
    """
    Decode a local path or an ``http(s)`` URL into a :class:`PillowImage`.

    The format is chosen from the extension before any I/O happens, so an
    unsupported source never reaches the network or the filesystem.
    """

    extension = source_extension(source)
    if extension not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(f"The file type .{extension} is not supported.")
    require_codec(extension)

    if is_url(source):
        if timeout is None:
            timeout = get_settings().request_timeout
        payload: SourceLike | BytesIO = BytesIO(_fetch(source, timeout))
    else:
        payload = source

    try:
        with Image.open(payload) as img:
            img.load()
            handle = PillowImage(img.copy() if img.mode == "RGBA" else img)
    except FileNotFoundError:
        raise
    except (OSError, Image.DecompressionBombError) as exc:
        raise UnsupportedFormatError(f"Cannot decode {source} as .{extension} image.") from exc

    logger.debug("Decoded %s (%dx%d)", source, handle.width, handle.height)
    return handle


def dimensions(handle: ImageSource) -> tuple[int, int]:
    return handle.width, handle.height


def pixel_at(handle: ImageSource, x: int, y: int) -> Pixel:
    return handle.pixel_at(x, y)
