"""Scalar helpers shared by the colour science code."""

from __future__ import annotations

import math
from typing import Sequence

Vector3 = Sequence[float]
Matrix3 = Sequence[Sequence[float]]


def signum(num: float) -> int:
    if num < 0:
        return -1
    if num == 0:
        return 0
    return 1


def lerp(start: float, stop: float, amount: float) -> float:
    return (1.0 - amount) * start + amount * stop


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward +inf (not banker's rounding)."""
    return math.floor(x + 0.5)


def clamp_int(lo: int, hi: int, value: int) -> int:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def clamp_double(lo: float, hi: float, value: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def sanitize_degrees_int(degrees: int) -> int:
    return degrees % 360


def sanitize_degrees_double(degrees: float) -> float:
    # modulo takes the sign of the divisor
    return degrees % 360.0


def rotation_direction(start: float, end: float) -> float:
    """+1.0 when the shortest way from `start` to `end` is increasing hue, else -1.0."""
    increasing = sanitize_degrees_double(end - start)
    return 1.0 if increasing <= 180.0 else -1.0


def difference_degrees(a: float, b: float) -> float:
    """Distance of two points on a circle, in degrees."""
    return 180.0 - abs(abs(a - b) - 180.0)


def matrix_multiply(row: Vector3, matrix: Matrix3) -> list[float]:
    return [
        row[0] * m[0] + row[1] * m[1] + row[2] * m[2]
        for m in matrix
    ]


__all__ = [
    "signum",
    "lerp",
    "round_half_up",
    "clamp_int",
    "clamp_double",
    "sanitize_degrees_int",
    "sanitize_degrees_double",
    "rotation_direction",
    "difference_degrees",
    "matrix_multiply",
]
