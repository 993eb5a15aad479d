"""
Image quantizer after Celebi (2011): Wu's boxes seed a weighted k-means.

Wu is fast but coarse; k-means refines it. Seeded this way k-means is
deterministic apart from the initial point assignment.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from . import quantizer_wsmeans
from .quantizer_wu import QuantizerWu


def quantize(
    pixels: Sequence[int],
    max_colors: int,
    rng: Optional[np.random.Generator] = None,
) -> dict[int, int]:
    """ARGB -> population of at most `max_colors` colours representing `pixels`."""
    wu_result = QuantizerWu().quantize(pixels, max_colors)
    return quantizer_wsmeans.quantize(pixels, wu_result, max_colors, rng=rng)


__all__ = ["quantize"]
