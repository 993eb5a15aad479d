from __future__ import annotations

from ..utils.color_utils import lstar_from_argb, lstar_from_y
from ..utils.math_utils import round_half_up
from . import hct_solver
from .cam16 import Cam16
from .viewing_conditions import ViewingConditions

Hue = float
Chroma = float
Tone = float


class Hct:
    """
    A colour as Hue, Chroma, Tone: CAM16 hue and chroma with L* as tone.

    Instances are immutable. `with_hue`, `with_chroma` and `with_tone` return a
    re-solved colour; the other two components may change because the maximum
    chroma depends on hue and tone.
    """

    __slots__ = ("_argb", "_hue", "_chroma", "_tone")

    def __init__(self, argb: int) -> None:
        cam = Cam16.from_int(argb)
        self._argb = argb
        self._hue = cam.hue
        self._chroma = cam.chroma
        self._tone = lstar_from_argb(argb)

    @classmethod
    def from_hct(cls, hue: Hue, chroma: Chroma, tone: Tone) -> "Hct":
        """
        hue: 0 <= hue < 360, other values are sanitized.
        chroma: the result may have lower chroma than requested.
        tone: 0 <= tone <= 100.
        """
        return cls(hct_solver.solve_to_int(hue, chroma, tone))

    @classmethod
    def from_int(cls, argb: int) -> "Hct":
        return cls(argb)

    def to_int(self) -> int:
        return self._argb

    @property
    def hue(self) -> Hue:
        return self._hue

    @property
    def chroma(self) -> Chroma:
        return self._chroma

    @property
    def tone(self) -> Tone:
        return self._tone

    def with_hue(self, hue: Hue) -> "Hct":
        return Hct.from_hct(hue, self._chroma, self._tone)

    def with_chroma(self, chroma: Chroma) -> "Hct":
        return Hct.from_hct(self._hue, chroma, self._tone)

    def with_tone(self, tone: Tone) -> "Hct":
        return Hct.from_hct(self._hue, self._chroma, tone)

    def in_viewing_conditions(self, vc: ViewingConditions) -> "Hct":
        """
        The colour that, viewed in standard conditions, looks like this one
        does in `vc`. Tone is taken from the luminance in `vc`.
        """
        cam = Cam16.from_int(self._argb)
        viewed_in_vc = cam.xyz_in_viewing_conditions(vc)
        recast_in_vc = Cam16.from_xyz_in_viewing_conditions(
            viewed_in_vc[0], viewed_in_vc[1], viewed_in_vc[2], ViewingConditions.make()
        )
        return Hct.from_hct(
            recast_in_vc.hue, recast_in_vc.chroma, lstar_from_y(viewed_in_vc[1])
        )

    @staticmethod
    def is_blue(hue: Hue) -> bool:
        return 250 <= hue < 270

    @staticmethod
    def is_yellow(hue: Hue) -> bool:
        return 105 <= hue < 125

    @staticmethod
    def is_cyan(hue: Hue) -> bool:
        return 170 <= hue < 207

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hct):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __str__(self) -> str:
        return "HCT({}, {}, {})".format(
            round_half_up(self._hue), round_half_up(self._chroma), round_half_up(self._tone)
        )

    def __repr__(self) -> str:
        return f"Hct(0x{self._argb:08x})"


__all__ = ["Hct", "Hue", "Chroma", "Tone"]
