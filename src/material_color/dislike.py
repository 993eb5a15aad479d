"""
Dark yellow-greens read as bile or mould, and are disliked across cultures
(Palmer & Schloss, 2010). These helpers find such colours and lighten them.
"""

from __future__ import annotations

from .hct.hct import Hct
from .utils.math_utils import round_half_up


def is_disliked(hct: Hct) -> bool:
    hue_passes = 90 <= round_half_up(hct.hue) <= 111
    chroma_passes = round_half_up(hct.chroma) > 16
    tone_passes = round_half_up(hct.tone) < 65
    return hue_passes and chroma_passes and tone_passes


def fix_if_disliked(hct: Hct) -> Hct:
    """Lift a disliked colour to tone 70, otherwise return it unchanged."""
    if is_disliked(hct):
        return Hct.from_hct(hct.hue, hct.chroma, 70.0)
    return hct


__all__ = ["is_disliked", "fix_if_disliked"]
