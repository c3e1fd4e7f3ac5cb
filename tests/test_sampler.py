"""Tests for stride-based sampling and transparency detection."""

from __future__ import annotations

from collections import Counter

import pytest
import pytest_mock

from imagepalette.imgproc.sampler import TRANSPARENT, ImageSampler, is_transparent, sample_points


class GridImage:
    """In-memory pixel grid that records which coordinates were read."""

    def __init__(self, width: int, height: int, fill: tuple[int, int, int, int] = (0, 0, 0, 255)) -> None:
        self.width = width
        self.height = height
        self._pixels = {(x, y): fill for x in range(width) for y in range(height)}
        self.visited: list[tuple[int, int]] = []

    def paint(self, x: int, y: int, pixel: tuple[int, int, int, int]) -> None:
        self._pixels[(x, y)] = pixel

    def pixel_at(self, x: int, y: int) -> tuple[int, int, int, int]:
        self.visited.append((x, y))
        return self._pixels[(x, y)]


def test_sample_points_sweeps_columns_first() -> None:
    assert list(sample_points(20, 20, 10)) == [(0, 0), (0, 10), (10, 0), (10, 10)]


def test_sample_points_rejects_non_positive_precision() -> None:
    with pytest.raises(ValueError):
        list(sample_points(10, 10, 0))


@pytest.mark.parametrize(
    ("alpha", "expected"),
    [(0, True), (1, True), (2, False), (128, False), (255, False)],
)
def test_only_fully_transparent_alpha_counts(alpha: int, expected: bool) -> None:
    assert is_transparent(alpha) is expected


def test_precision_larger_than_image_samples_origin_only() -> None:
    image = GridImage(7, 4)

    counts = ImageSampler().sample(image, 10)

    assert image.visited == [(0, 0)]
    assert counts == Counter({"#000000": 1})


@pytest.mark.parametrize(("width", "height"), [(0, 10), (10, 0), (0, 0)])
def test_empty_image_yields_empty_multiset(width: int, height: int) -> None:
    assert ImageSampler().sample(GridImage(width, height), 3) == Counter()


def test_transparent_pixels_are_counted_separately() -> None:
    image = GridImage(4, 4, fill=(255, 255, 255, 255))
    image.paint(0, 0, (255, 0, 0, 0))
    image.paint(2, 2, (0, 0, 0, 128))

    counts = ImageSampler().sample(image, 2)

    assert counts[TRANSPARENT] == 1
    assert counts["#000000"] == 1
    assert counts["#ffffff"] == 2
    assert sum(counts.values()) == 4


def test_transparent_pixels_skip_colour_matching(mocker: pytest_mock.MockerFixture) -> None:
    sampler = ImageSampler()
    spy = mocker.spy(sampler.matcher, "nearest_color")

    sampler.sample(GridImage(3, 3, fill=(10, 20, 30, 0)), 1)

    spy.assert_not_called()
