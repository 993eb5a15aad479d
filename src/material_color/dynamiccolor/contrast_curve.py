from __future__ import annotations

from dataclasses import dataclass

from ..utils.math_utils import lerp


@dataclass(frozen=True)
class ContrastCurve:
    """
    Desired contrast ratio as a function of the scheme's contrast level.

    low, normal, medium and high are the ratios at contrast levels -1.0, 0.0,
    0.5 and 1.0; levels in between are interpolated linearly.
    """

    low: float
    normal: float
    medium: float
    high: float

    def get(self, contrast_level: float) -> float:
        if contrast_level <= -1.0:
            return self.low
        if contrast_level < 0.0:
            return lerp(self.low, self.normal, (contrast_level - -1.0) / 1.0)
        if contrast_level < 0.5:
            return lerp(self.normal, self.medium, (contrast_level - 0.0) / 0.5)
        if contrast_level < 1.0:
            return lerp(self.medium, self.high, (contrast_level - 0.5) / 0.5)
        return self.high


__all__ = ["ContrastCurve"]
