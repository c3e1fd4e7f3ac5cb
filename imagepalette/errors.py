"""Exceptions raised while building an image palette."""

from __future__ import annotations


class ImagePaletteError(RuntimeError):
    """Base class for palette extraction failures."""


class UnsupportedFormatError(ImagePaletteError):
    """Raised when the image source cannot be decoded as a supported raster format."""


class MissingCapabilityError(ImagePaletteError):
    """Raised when the installed imaging library lacks a required codec."""


class ImageSourceError(ImagePaletteError):
    """Raised when a remote image cannot be downloaded."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
