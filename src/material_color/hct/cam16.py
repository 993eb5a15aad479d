# cam16.py – CAM16 colour appearance model and its CAM16-UCS coordinates
#   - forward: ARGB/XYZ -> (hue, chroma, J, Q, M, s, J*, a*, b*)
#   - inverse: Cam16 -> XYZ -> ARGB under a given ViewingConditions

from __future__ import annotations

import math
from dataclasses import dataclass

from ..utils.color_utils import argb_from_xyz, linearized
from ..utils.math_utils import signum
from .viewing_conditions import ViewingConditions

# --- constants ---------------------------------------------------------------
_XYZ_TO_CAM16RGB = (
    (0.401288, 0.650173, -0.051461),
    (-0.250268, 1.204414, 0.045854),
    (-0.002079, 0.048952, 0.953127),
)

_CAM16RGB_TO_XYZ = (
    (1.86206786, -1.01125463, 0.14918677),
    (0.38752654, 0.62144744, -0.00897398),
    (-0.0158415, -0.03412294, 1.04996444),
)


@dataclass(frozen=True)
class Cam16:
    """
    One colour's appearance under one set of viewing conditions.

    hue is in degrees, `j` lightness, `q` brightness, `m` colourfulness,
    `s` saturation; `jstar`, `astar`, `bstar` are CAM16-UCS coordinates.
    Use the classmethods to construct instances.
    """

    hue: float
    chroma: float
    j: float
    q: float
    m: float
    s: float
    jstar: float
    astar: float
    bstar: float

    def distance(self, other: "Cam16") -> float:
        """Perceptual distance in CAM16-UCS (ΔE')."""
        d_j = self.jstar - other.jstar
        d_a = self.astar - other.astar
        d_b = self.bstar - other.bstar
        d_e_prime = math.sqrt(d_j * d_j + d_a * d_a + d_b * d_b)
        return 1.41 * d_e_prime**0.63

    # ---- construction ----

    @classmethod
    def from_int(cls, argb: int) -> "Cam16":
        return cls.from_int_in_viewing_conditions(argb, ViewingConditions.DEFAULT)

    @classmethod
    def from_int_in_viewing_conditions(
        cls, argb: int, vc: ViewingConditions
    ) -> "Cam16":
        red_l = linearized((argb >> 16) & 255)
        green_l = linearized((argb >> 8) & 255)
        blue_l = linearized(argb & 255)
        x = 0.41233895 * red_l + 0.35762064 * green_l + 0.18051042 * blue_l
        y = 0.2126 * red_l + 0.7152 * green_l + 0.0722 * blue_l
        z = 0.01932141 * red_l + 0.11916382 * green_l + 0.95034478 * blue_l
        return cls.from_xyz_in_viewing_conditions(x, y, z, vc)

    @classmethod
    def from_xyz_in_viewing_conditions(
        cls, x: float, y: float, z: float, vc: ViewingConditions
    ) -> "Cam16":
        r_c, g_c, b_c = (m[0] * x + m[1] * y + m[2] * z for m in _XYZ_TO_CAM16RGB)

        r_d = vc.rgb_d[0] * r_c
        g_d = vc.rgb_d[1] * g_c
        b_d = vc.rgb_d[2] * b_c

        r_a = _adapt(r_d, vc.fl)
        g_a = _adapt(g_d, vc.fl)
        b_a = _adapt(b_d, vc.fl)

        a = (11.0 * r_a + -12.0 * g_a + b_a) / 11.0
        b = (r_a + g_a - 2.0 * b_a) / 9.0
        u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
        p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

        atan_degrees = math.atan2(b, a) * 180.0 / math.pi
        if atan_degrees < 0:
            hue = atan_degrees + 360.0
        elif atan_degrees >= 360:
            hue = atan_degrees - 360.0
        else:
            hue = atan_degrees
        hue_radians = hue * math.pi / 180.0

        ac = p2 * vc.nbb
        j = 100.0 * (ac / vc.aw) ** (vc.c * vc.z)
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root

        hue_prime = hue + 360.0 if hue < 20.14 else hue
        e_hue = 0.25 * (math.cos(hue_prime * math.pi / 180.0 + 2.0) + 3.8)
        p1 = 50000.0 / 13.0 * e_hue * vc.nc * vc.ncb
        t = p1 * math.sqrt(a * a + b * b) / (u + 0.305)
        alpha = t**0.9 * (1.64 - 0.29**vc.n) ** 0.73

        chroma = alpha * math.sqrt(j / 100.0)
        m = chroma * vc.fl_root
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))

        jstar = 1.7000000000000002 * j / (1.0 + 0.007 * j)
        mstar = math.log(1.0 + 0.0228 * m) / 0.0228
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(hue, chroma, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_jch(cls, j: float, c: float, h: float) -> "Cam16":
        return cls.from_jch_in_viewing_conditions(j, c, h, ViewingConditions.DEFAULT)

    @classmethod
    def from_jch_in_viewing_conditions(
        cls, j: float, c: float, h: float, vc: ViewingConditions
    ) -> "Cam16":
        q = 4.0 / vc.c * math.sqrt(j / 100.0) * (vc.aw + 4.0) * vc.fl_root
        m = c * vc.fl_root
        alpha = c / math.sqrt(j / 100.0) if j > 0 else 0.0
        s = 50.0 * math.sqrt(alpha * vc.c / (vc.aw + 4.0))

        hue_radians = h * math.pi / 180.0
        jstar = 1.7000000000000002 * j / (1.0 + 0.007 * j)
        mstar = 1.0 / 0.0228 * math.log(1.0 + 0.0228 * m)
        astar = mstar * math.cos(hue_radians)
        bstar = mstar * math.sin(hue_radians)
        return cls(h, c, j, q, m, s, jstar, astar, bstar)

    @classmethod
    def from_ucs(cls, jstar: float, astar: float, bstar: float) -> "Cam16":
        return cls.from_ucs_in_viewing_conditions(
            jstar, astar, bstar, ViewingConditions.DEFAULT
        )

    @classmethod
    def from_ucs_in_viewing_conditions(
        cls, jstar: float, astar: float, bstar: float, vc: ViewingConditions
    ) -> "Cam16":
        m = math.sqrt(astar * astar + bstar * bstar)
        big_m = (math.exp(m * 0.0228) - 1.0) / 0.0228
        c = big_m / vc.fl_root
        h = math.atan2(bstar, astar) * (180.0 / math.pi)
        if h < 0.0:
            h += 360.0
        j = jstar / (1.0 - (jstar - 100.0) * 0.007)
        return cls.from_jch_in_viewing_conditions(j, c, h, vc)

    # ---- back to ARGB / XYZ ----

    def to_int(self) -> int:
        return self.viewed(ViewingConditions.DEFAULT)

    def viewed(self, vc: ViewingConditions) -> int:
        """ARGB of this colour when it is seen under `vc`."""
        x, y, z = self.xyz_in_viewing_conditions(vc)
        return argb_from_xyz(x, y, z)

    def xyz_in_viewing_conditions(self, vc: ViewingConditions) -> list[float]:
        alpha = (
            0.0
            if self.chroma == 0.0 or self.j == 0.0
            else self.chroma / math.sqrt(self.j / 100.0)
        )
        t = (alpha / (1.64 - 0.29**vc.n) ** 0.73) ** (1.0 / 0.9)
        h_rad = self.hue * math.pi / 180.0

        e_hue = 0.25 * (math.cos(h_rad + 2.0) + 3.8)
        ac = vc.aw * (self.j / 100.0) ** (1.0 / vc.c / vc.z)
        p1 = e_hue * (50000.0 / 13.0) * vc.nc * vc.ncb
        p2 = ac / vc.nbb

        h_sin = math.sin(h_rad)
        h_cos = math.cos(h_rad)

        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        r_a = (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0
        g_a = (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0
        b_a = (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0

        r_f = _unadapt(r_a, vc.fl) / vc.rgb_d[0]
        g_f = _unadapt(g_a, vc.fl) / vc.rgb_d[1]
        b_f = _unadapt(b_a, vc.fl) / vc.rgb_d[2]

        return [m[0] * r_f + m[1] * g_f + m[2] * b_f for m in _CAM16RGB_TO_XYZ]


# ---- internals ----


def _adapt(component: float, fl: float) -> float:
    af = (fl * abs(component) / 100.0) ** 0.42
    return signum(component) * 400.0 * af / (af + 27.13)


def _unadapt(adapted: float, fl: float) -> float:
    base = max(0.0, 27.13 * abs(adapted) / (400.0 - abs(adapted)))
    return signum(adapted) * (100.0 / fl) * base ** (1.0 / 0.42)


__all__ = ["Cam16"]
