from __future__ import annotations

from ..hct.hct import Hct
from ..utils.math_utils import round_half_up


class TonalPalette:
    """
    All tones of one (hue, chroma) pair.

    `tone(t)` solves each requested tone once and remembers it. Build with
    `from_int`, `from_hct` or `from_hue_and_chroma`.
    """

    def __init__(self, hue: float, chroma: float, key_color: Hct) -> None:
        self.hue = hue
        self.chroma = chroma
        self.key_color = key_color
        self._cache: dict[float, int] = {}

    @classmethod
    def from_int(cls, argb: int) -> "TonalPalette":
        return cls.from_hct(Hct.from_int(argb))

    @classmethod
    def from_hct(cls, hct: Hct) -> "TonalPalette":
        return cls(hct.hue, hct.chroma, hct)

    @classmethod
    def from_hue_and_chroma(cls, hue: float, chroma: float) -> "TonalPalette":
        key_color = KeyColor(hue, chroma).create()
        return cls(hue, chroma, key_color)

    def tone(self, tone: float) -> int:
        """ARGB of this palette at `tone` (0..100)."""
        argb = self._cache.get(tone)
        if argb is None:
            if tone == 99 and Hct.is_yellow(self.hue):
                # yellows are muddy when solved this close to white
                argb = _average_argb(self.tone(98), self.tone(100))
            else:
                argb = Hct.from_hct(self.hue, self.chroma, tone).to_int()
            self._cache[tone] = argb
        return argb

    def get_hct(self, tone: float) -> Hct:
        return Hct.from_int(self.tone(tone))

    def __repr__(self) -> str:
        return f"TonalPalette(hue={self.hue:.2f}, chroma={self.chroma:.2f})"


class KeyColor:
    """
    Finds the tone of a palette's key colour: the tone nearest 50 that reaches
    the requested chroma, or the tone with the most chroma when none does.
    """

    MAX_CHROMA_VALUE = 200.0

    def __init__(self, hue: float, requested_chroma: float) -> None:
        self.hue = hue
        self.requested_chroma = requested_chroma
        self._chroma_cache: dict[int, float] = {}

    def create(self) -> Hct:
        pivot_tone = 50
        tone_step_size = 1
        epsilon = 0.01

        lower_tone = 0
        upper_tone = 100
        while lower_tone < upper_tone:
            mid_tone = (lower_tone + upper_tone) // 2
            is_ascending = self.max_chroma(mid_tone) < self.max_chroma(mid_tone + tone_step_size)
            sufficient_chroma = self.max_chroma(mid_tone) >= self.requested_chroma - epsilon

            if sufficient_chroma:
                # Keep the half whose far end is closer to the pivot.
                if abs(lower_tone - pivot_tone) < abs(upper_tone - pivot_tone):
                    upper_tone = mid_tone
                else:
                    if lower_tone == mid_tone:
                        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)
                    lower_tone = mid_tone
            elif is_ascending:
                lower_tone = mid_tone + tone_step_size
            else:
                upper_tone = mid_tone

        return Hct.from_hct(self.hue, self.requested_chroma, lower_tone)

    def max_chroma(self, tone: int) -> float:
        chroma = self._chroma_cache.get(tone)
        if chroma is None:
            chroma = Hct.from_hct(self.hue, self.MAX_CHROMA_VALUE, tone).chroma
            self._chroma_cache[tone] = chroma
        return chroma


def _average_argb(argb1: int, argb2: int) -> int:
    red = round_half_up((((argb1 >> 16) & 255) + ((argb2 >> 16) & 255)) / 2)
    green = round_half_up((((argb1 >> 8) & 255) + ((argb2 >> 8) & 255)) / 2)
    blue = round_half_up(((argb1 & 255) + (argb2 & 255)) / 2)
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


__all__ = ["TonalPalette", "KeyColor"]
