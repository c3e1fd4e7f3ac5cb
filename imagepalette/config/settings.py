"""Palette extraction defaults loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, TypeVar

T = TypeVar("T")


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults used when a caller does not pass explicit values."""

    precision: int = 10
    num_colors_on_palette: int = 5
    request_timeout: float = 30.0
    log_level: str = "INFO"


def _env_number(name: str, default: str, cast: Callable[[str], T]) -> T:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}.") from exc


def _build_settings() -> Settings:
    _load_env_file()

    return Settings(
        precision=_env_number("IMAGE_PALETTE_PRECISION", "10", int),
        num_colors_on_palette=_env_number("IMAGE_PALETTE_NUM_COLORS", "5", int),
        request_timeout=_env_number("IMAGE_PALETTE_REQUEST_TIMEOUT", "30", float),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
