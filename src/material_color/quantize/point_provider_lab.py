"""Colour <-> L*a*b* point conversions used by the k-means quantizer."""

from __future__ import annotations

from typing import Sequence

from ..utils.color_utils import argb_from_lab, lab_from_argb


class LabPointProvider:
    """Points are [L*, a*, b*]; distance is squared Euclidean."""

    def from_int(self, argb: int) -> list[float]:
        return lab_from_argb(argb)

    def to_int(self, point: Sequence[float]) -> int:
        return argb_from_lab(point[0], point[1], point[2])

    def distance(self, one: Sequence[float], two: Sequence[float]) -> float:
        d_l = one[0] - two[0]
        d_a = one[1] - two[1]
        d_b = one[2] - two[2]
        return d_l * d_l + d_a * d_a + d_b * d_b


__all__ = ["LabPointProvider"]
