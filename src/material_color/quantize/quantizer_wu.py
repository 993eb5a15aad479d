# quantizer_wu.py – Xiaolin Wu's greedy colour cube cutting
#   - 5-bit per channel histogram (33³ with a zero border)
#   - summed-volume moments so any box's statistics cost eight lookups
#   - repeatedly split the box with the largest variance along the axis that
#     maximizes between-part variance

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal

import numpy as np

from ..utils.color_utils import blue_from_argb, green_from_argb, red_from_argb
from ..utils.math_utils import round_half_up
from . import quantizer_map

log = logging.getLogger(__name__)

# --- constants ---------------------------------------------------------------
INDEX_BITS = 5
SIDE_LENGTH = 33  # 2**INDEX_BITS + 1
TOTAL_SIZE = 35937  # SIDE_LENGTH**3

Direction = Literal["red", "green", "blue"]


def get_index(r: int, g: int, b: int) -> int:
    """Flat index of histogram cell (r, g, b)."""
    return (r << (INDEX_BITS * 2)) + (r << (INDEX_BITS + 1)) + r + (g << INDEX_BITS) + g + b


@dataclass
class Box:
    r0: int = 0
    r1: int = 0
    g0: int = 0
    g1: int = 0
    b0: int = 0
    b1: int = 0
    vol: int = 0


class QuantizerWu:
    """
    Fast box-splitting quantizer. Quality is modest on its own; the boxes make
    good starting centroids for k-means (see quantizer_celebi).
    """

    def __init__(self) -> None:
        shape = (SIDE_LENGTH, SIDE_LENGTH, SIDE_LENGTH)
        self.weights = np.zeros(shape, dtype=np.float64)
        self.moments_r = np.zeros(shape, dtype=np.float64)
        self.moments_g = np.zeros(shape, dtype=np.float64)
        self.moments_b = np.zeros(shape, dtype=np.float64)
        self.moments = np.zeros(shape, dtype=np.float64)
        self.cubes: list[Box] = []

    def quantize(self, pixels: Iterable[int], max_colors: int) -> list[int]:
        """Up to `max_colors` representative colours, as ARGB."""
        self._construct_histogram(pixels)
        self._compute_moments()
        result_count = self._create_boxes(max_colors)
        colors = self._create_result(result_count)
        log.debug("wu: %d boxes requested, %d colours", max_colors, len(colors))
        return colors

    # ---- histogram ----

    def _construct_histogram(self, pixels: Iterable[int]) -> None:
        for arr in (self.weights, self.moments_r, self.moments_g, self.moments_b, self.moments):
            arr.fill(0.0)
        bits_to_remove = 8 - INDEX_BITS
        for pixel, count in quantizer_map.quantize(pixels).items():
            red = red_from_argb(pixel)
            green = green_from_argb(pixel)
            blue = blue_from_argb(pixel)
            cell = (
                (red >> bits_to_remove) + 1,
                (green >> bits_to_remove) + 1,
                (blue >> bits_to_remove) + 1,
            )
            self.weights[cell] += count
            self.moments_r[cell] += count * red
            self.moments_g[cell] += count * green
            self.moments_b[cell] += count * blue
            self.moments[cell] += count * (red * red + green * green + blue * blue)

    def _compute_moments(self) -> None:
        # cumulative over r, g and b; the zero border stays zero
        for arr in (self.weights, self.moments_r, self.moments_g, self.moments_b, self.moments):
            np.cumsum(arr, axis=2, out=arr)
            np.cumsum(arr, axis=1, out=arr)
            np.cumsum(arr, axis=0, out=arr)

    # ---- box splitting ----

    def _create_boxes(self, max_colors: int) -> int:
        self.cubes = [Box() for _ in range(max_colors)]
        volume_variance = [0.0] * max_colors
        first = self.cubes[0]
        first.r1 = first.g1 = first.b1 = SIDE_LENGTH - 1

        generated_color_count = max_colors
        next_box = 0
        i = 1
        while i < max_colors:
            if self._cut(self.cubes[next_box], self.cubes[i]):
                volume_variance[next_box] = (
                    self._variance(self.cubes[next_box]) if self.cubes[next_box].vol > 1 else 0.0
                )
                volume_variance[i] = self._variance(self.cubes[i]) if self.cubes[i].vol > 1 else 0.0
            else:
                volume_variance[next_box] = 0.0
                i -= 1

            next_box = 0
            temp = volume_variance[0]
            for j in range(1, i + 1):
                if volume_variance[j] > temp:
                    temp = volume_variance[j]
                    next_box = j
            if temp <= 0.0:
                generated_color_count = i + 1
                break
            i += 1
        return generated_color_count

    def _create_result(self, color_count: int) -> list[int]:
        colors = []
        for cube in self.cubes[:color_count]:
            weight = self._volume(cube, self.weights)
            if weight > 0:
                r = round_half_up(self._volume(cube, self.moments_r) / weight)
                g = round_half_up(self._volume(cube, self.moments_g) / weight)
                b = round_half_up(self._volume(cube, self.moments_b) / weight)
                colors.append((255 << 24) | ((r & 255) << 16) | ((g & 255) << 8) | (b & 255))
        return colors

    def _variance(self, cube: Box) -> float:
        dr = self._volume(cube, self.moments_r)
        dg = self._volume(cube, self.moments_g)
        db = self._volume(cube, self.moments_b)
        xx = self._volume(cube, self.moments)
        hypotenuse = dr * dr + dg * dg + db * db
        volume = self._volume(cube, self.weights)
        return xx - hypotenuse / volume

    def _cut(self, one: Box, two: Box) -> bool:
        whole_r = self._volume(one, self.moments_r)
        whole_g = self._volume(one, self.moments_g)
        whole_b = self._volume(one, self.moments_b)
        whole_w = self._volume(one, self.weights)
        wholes = (whole_r, whole_g, whole_b, whole_w)

        cut_r, max_r = self._maximize(one, "red", one.r0 + 1, one.r1, *wholes)
        cut_g, max_g = self._maximize(one, "green", one.g0 + 1, one.g1, *wholes)
        cut_b, max_b = self._maximize(one, "blue", one.b0 + 1, one.b1, *wholes)

        if max_r >= max_g and max_r >= max_b:
            if cut_r < 0:
                return False
            direction = "red"
        elif max_g >= max_r and max_g >= max_b:
            direction = "green"
        else:
            direction = "blue"

        two.r1 = one.r1
        two.g1 = one.g1
        two.b1 = one.b1
        if direction == "red":
            one.r1 = cut_r
            two.r0, two.g0, two.b0 = one.r1, one.g0, one.b0
        elif direction == "green":
            one.g1 = cut_g
            two.r0, two.g0, two.b0 = one.r0, one.g1, one.b0
        else:
            one.b1 = cut_b
            two.r0, two.g0, two.b0 = one.r0, one.g0, one.b1

        one.vol = (one.r1 - one.r0) * (one.g1 - one.g0) * (one.b1 - one.b0)
        two.vol = (two.r1 - two.r0) * (two.g1 - two.g0) * (two.b1 - two.b0)
        return True

    def _maximize(
        self,
        cube: Box,
        direction: Direction,
        first: int,
        last: int,
        whole_r: float,
        whole_g: float,
        whole_b: float,
        whole_w: float,
    ) -> tuple[int, float]:
        """(cut position, score); position -1 when no split has both halves populated."""
        bottom_r = self._bottom(cube, direction, self.moments_r)
        bottom_g = self._bottom(cube, direction, self.moments_g)
        bottom_b = self._bottom(cube, direction, self.moments_b)
        bottom_w = self._bottom(cube, direction, self.weights)

        best = 0.0
        cut = -1
        for i in range(first, last):
            half_r = bottom_r + self._top(cube, direction, i, self.moments_r)
            half_g = bottom_g + self._top(cube, direction, i, self.moments_g)
            half_b = bottom_b + self._top(cube, direction, i, self.moments_b)
            half_w = bottom_w + self._top(cube, direction, i, self.weights)
            if half_w == 0:
                continue
            temp = (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

            half_r = whole_r - half_r
            half_g = whole_g - half_g
            half_b = whole_b - half_b
            half_w = whole_w - half_w
            if half_w == 0:
                continue
            temp += (half_r * half_r + half_g * half_g + half_b * half_b) / half_w

            if temp > best:
                best = temp
                cut = i
        return cut, best

    # ---- moment lookups ----

    @staticmethod
    def _volume(cube: Box, m: np.ndarray) -> float:
        return float(
            m[cube.r1, cube.g1, cube.b1]
            - m[cube.r1, cube.g1, cube.b0]
            - m[cube.r1, cube.g0, cube.b1]
            + m[cube.r1, cube.g0, cube.b0]
            - m[cube.r0, cube.g1, cube.b1]
            + m[cube.r0, cube.g1, cube.b0]
            + m[cube.r0, cube.g0, cube.b1]
            - m[cube.r0, cube.g0, cube.b0]
        )

    @staticmethod
    def _bottom(cube: Box, direction: Direction, m: np.ndarray) -> float:
        if direction == "red":
            return float(
                -m[cube.r0, cube.g1, cube.b1]
                + m[cube.r0, cube.g1, cube.b0]
                + m[cube.r0, cube.g0, cube.b1]
                - m[cube.r0, cube.g0, cube.b0]
            )
        if direction == "green":
            return float(
                -m[cube.r1, cube.g0, cube.b1]
                + m[cube.r1, cube.g0, cube.b0]
                + m[cube.r0, cube.g0, cube.b1]
                - m[cube.r0, cube.g0, cube.b0]
            )
        if direction == "blue":
            return float(
                -m[cube.r1, cube.g1, cube.b0]
                + m[cube.r1, cube.g0, cube.b0]
                + m[cube.r0, cube.g1, cube.b0]
                - m[cube.r0, cube.g0, cube.b0]
            )
        raise ValueError(f"unexpected direction {direction}")

    @staticmethod
    def _top(cube: Box, direction: Direction, position: int, m: np.ndarray) -> float:
        if direction == "red":
            return float(
                m[position, cube.g1, cube.b1]
                - m[position, cube.g1, cube.b0]
                - m[position, cube.g0, cube.b1]
                + m[position, cube.g0, cube.b0]
            )
        if direction == "green":
            return float(
                m[cube.r1, position, cube.b1]
                - m[cube.r1, position, cube.b0]
                - m[cube.r0, position, cube.b1]
                + m[cube.r0, position, cube.b0]
            )
        if direction == "blue":
            return float(
                m[cube.r1, cube.g1, position]
                - m[cube.r1, cube.g0, position]
                - m[cube.r0, cube.g1, position]
                + m[cube.r0, cube.g0, position]
            )
        raise ValueError(f"unexpected direction {direction}")


__all__ = ["QuantizerWu", "Box", "get_index", "INDEX_BITS", "SIDE_LENGTH", "TOTAL_SIZE"]
