"""
Contrast ratio math on tones.

Ratios follow WCAG: (lighter Y + 5) / (darker Y + 5), from 1 to 21. `lighter`
and `darker` return -1 when the requested ratio cannot be reached; the
`*_unsafe` variants return the extreme tone (100 or 0) instead.
"""

from __future__ import annotations

from .utils.color_utils import lstar_from_y, y_from_lstar
from .utils.math_utils import clamp_double

RATIO_MIN = 1.0
RATIO_MAX = 21.0
RATIO_30 = 3.0
RATIO_45 = 4.5
RATIO_70 = 7.0

# Tone returned by lighter/darker may miss the requested ratio by this much.
_CONTRAST_RATIO_EPSILON = 0.04
# Tones are pushed this far past the exact answer to survive 8-bit rounding.
_LUMINANCE_GAMUT_MAP_TOLERANCE = 0.4


def ratio_of_tones(tone_a: float, tone_b: float) -> float:
    tone_a = clamp_double(0.0, 100.0, tone_a)
    tone_b = clamp_double(0.0, 100.0, tone_b)
    return ratio_of_ys(y_from_lstar(tone_a), y_from_lstar(tone_b))


def ratio_of_ys(y1: float, y2: float) -> float:
    lighter_y = y1 if y1 > y2 else y2
    darker_y = y1 if lighter_y == y2 else y2
    return (lighter_y + 5.0) / (darker_y + 5.0)


def lighter(tone: float, ratio: float) -> float:
    """Tone >= `tone` with contrast `ratio`, or -1 if none exists."""
    if tone < 0.0 or tone > 100.0:
        return -1.0
    dark_y = y_from_lstar(tone)
    light_y = ratio * (dark_y + 5.0) - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > _CONTRAST_RATIO_EPSILON:
        return -1.0
    value = lstar_from_y(light_y) + _LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0 or value > 100:
        return -1.0
    return value


def darker(tone: float, ratio: float) -> float:
    """Tone <= `tone` with contrast `ratio`, or -1 if none exists."""
    if tone < 0.0 or tone > 100.0:
        return -1.0
    light_y = y_from_lstar(tone)
    dark_y = (light_y + 5.0) / ratio - 5.0
    real_contrast = ratio_of_ys(light_y, dark_y)
    delta = abs(real_contrast - ratio)
    if real_contrast < ratio and delta > _CONTRAST_RATIO_EPSILON:
        return -1.0
    value = lstar_from_y(dark_y) - _LUMINANCE_GAMUT_MAP_TOLERANCE
    if value < 0 or value > 100:
        return -1.0
    return value


def lighter_unsafe(tone: float, ratio: float) -> float:
    safe = lighter(tone, ratio)
    return 100.0 if safe < 0 else safe


def darker_unsafe(tone: float, ratio: float) -> float:
    safe = darker(tone, ratio)
    return 0.0 if safe < 0 else safe


__all__ = [
    "ratio_of_tones",
    "ratio_of_ys",
    "lighter",
    "darker",
    "lighter_unsafe",
    "darker_unsafe",
]
