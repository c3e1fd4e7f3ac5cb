"""Ranking of classified samples into prominent colours."""

from __future__ import annotations

from typing import Mapping

from imagepalette.imgproc.sampler import TRANSPARENT


def rank(counts: Mapping[str, int], k: int) -> list[str]:
    """
    Return up to ``k`` palette hexes, most frequent first.

    Transparency is never reported. Equal counts keep the order in which the
    colours were first classified, since ``sorted`` is stable over the
    mapping's insertion order.
    """

    if k < 1:
        raise ValueError("k must be a positive integer.")
    candidates = [(hex_value, count) for hex_value, count in counts.items() if hex_value != TRANSPARENT]
    ordered = sorted(candidates, key=lambda item: item[1], reverse=True)
    return [hex_value for hex_value, _ in ordered[:k]]
