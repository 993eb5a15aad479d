from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Sequence

from ..utils.color_utils import white_point_d65, y_from_lstar
from ..utils.math_utils import lerp


@dataclass(frozen=True)
class ViewingConditions:
    """
    Environment a colour is viewed in, reduced to the coefficients CAM16 needs.

    Build custom instances with `make`; `ViewingConditions.DEFAULT` is standard
    sRGB viewing (D65, ~11.7 lux adapting luminance, L* 50 background).
    """

    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    DEFAULT: ClassVar["ViewingConditions"]

    @classmethod
    def make(
        cls,
        white_point: Sequence[float] | None = None,
        adapting_luminance: float | None = None,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> "ViewingConditions":
        """
        white_point: XYZ of the white point, D65 by default.
        adapting_luminance: lux of the environment / pi, defaults to ~200 lux.
        background_lstar: lightness of the area surrounding the colour.
        surround: 0 is pitch dark, 1 dim, 2 average.
        discounting_illuminant: whether the eye fully adapts to the illuminant.
        """
        wp = tuple(white_point) if white_point is not None else white_point_d65()
        la = (
            adapting_luminance
            if adapting_luminance is not None
            else 200.0 / math.pi * y_from_lstar(50.0) / 100.0
        )

        r_w = wp[0] * 0.401288 + wp[1] * 0.650173 + wp[2] * -0.051461
        g_w = wp[0] * -0.250268 + wp[1] * 1.204414 + wp[2] * 0.045854
        b_w = wp[0] * -0.002079 + wp[1] * 0.048952 + wp[2] * 0.953127

        f = 0.8 + surround / 10.0
        c = (
            lerp(0.59, 0.69, (f - 0.9) * 10.0)
            if f >= 0.9
            else lerp(0.525, 0.59, (f - 0.8) * 10.0)
        )
        d = 1.0 if discounting_illuminant else f * (1.0 - (1.0 / 3.6) * math.exp((-la - 42.0) / 92.0))
        d = 1.0 if d > 1.0 else 0.0 if d < 0.0 else d
        nc = f
        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * la + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * la + 0.1 * k4f * k4f * (5.0 * la) ** (1.0 / 3.0)
        n = y_from_lstar(background_lstar) / wp[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / n**0.2
        ncb = nbb

        factors = [
            (fl * rgb_d[i] * w / 100.0) ** 0.42 for i, w in enumerate((r_w, g_w, b_w))
        ]
        rgb_a = [400.0 * f_ / (f_ + 27.13) for f_ in factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=fl**0.25,
            z=z,
        )


ViewingConditions.DEFAULT = ViewingConditions.make()

__all__ = ["ViewingConditions"]
