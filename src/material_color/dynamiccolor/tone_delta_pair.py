from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from .dynamic_color import DynamicColor

# Which role is lighter. The "relative" variants read as written in light
# mode and flip in dark mode; "nearer"/"farther" are relative to the surface.
DeltaPolarity = Literal[
    "darker", "lighter", "nearer", "farther", "relative_darker", "relative_lighter"
]

# "exact" forces the delta; "nearer" and "farther" only clamp toward or away
# from the reference role.
DeltaConstraint = Literal["exact", "nearer", "farther"]


@dataclass(frozen=True, eq=False)
class ToneDeltaPair:
    """
    Two roles whose tones must stay at least `delta` apart.

    stay_together: keep both roles on the same side of the 50..59 tone band.
    """

    role_a: DynamicColor
    role_b: DynamicColor
    delta: float
    polarity: DeltaPolarity
    stay_together: bool
    constraint: DeltaConstraint = "exact"


__all__ = ["ToneDeltaPair", "DeltaPolarity", "DeltaConstraint"]
