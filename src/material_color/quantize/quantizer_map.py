from __future__ import annotations

from typing import Iterable

from ..utils.color_utils import alpha_from_argb


def quantize(pixels: Iterable[int]) -> dict[int, int]:
    """Population of every distinct opaque pixel, in first-seen order."""
    count_by_color: dict[int, int] = {}
    for pixel in pixels:
        if alpha_from_argb(pixel) < 255:
            continue
        count_by_color[pixel] = count_by_color.get(pixel, 0) + 1
    return count_by_color


__all__ = ["quantize"]
