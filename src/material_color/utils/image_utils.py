"""Pick a theme seed colour from raw image pixels."""

from __future__ import annotations

import logging

import numpy as np

from ..quantize import quantizer_celebi
from ..score import score

log = logging.getLogger(__name__)

MAX_COLORS = 128


def source_color_from_image_bytes(image_bytes, rng=None) -> int:
    """
    Best theme colour for an image given as flat RGBA bytes (r, g, b, a, ...).

    Translucent pixels are ignored. Trailing bytes that do not form a whole
    pixel are dropped.
    """
    data = np.frombuffer(bytes(image_bytes), dtype=np.uint8)
    quads = data[: len(data) - len(data) % 4].reshape(-1, 4).astype(np.uint32)
    opaque = quads[quads[:, 3] >= 255]
    pixels = (
        (opaque[:, 3] << 24) | (opaque[:, 0] << 16) | (opaque[:, 1] << 8) | opaque[:, 2]
    ).tolist()

    result = quantizer_celebi.quantize(pixels, MAX_COLORS, rng=rng)
    ranked = score(result)
    log.debug("image: %d opaque pixels, %d clusters, seed %08x", len(pixels), len(result), ranked[0])
    return ranked[0]


__all__ = ["source_color_from_image_bytes"]
