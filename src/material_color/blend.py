from __future__ import annotations

from .hct.cam16 import Cam16
from .hct.hct import Hct
from .utils.color_utils import lstar_from_argb
from .utils.math_utils import difference_degrees, rotation_direction, sanitize_degrees_double

# Harmonizing never moves a hue further than this.
MAX_HARMONIZE_ROTATION = 15.0


def harmonize(design_color: int, source_color: int) -> int:
    """Shift the hue of `design_color` toward `source_color`, at most 15 degrees."""
    from_hct = Hct.from_int(design_color)
    to_hct = Hct.from_int(source_color)
    diff = difference_degrees(from_hct.hue, to_hct.hue)
    rotation = min(diff * 0.5, MAX_HARMONIZE_ROTATION)
    output_hue = sanitize_degrees_double(
        from_hct.hue + rotation * rotation_direction(from_hct.hue, to_hct.hue)
    )
    return Hct.from_hct(output_hue, from_hct.chroma, from_hct.tone).to_int()


def hct_hue(start: int, end: int, amount: float) -> int:
    """Blend hue in CAM16-UCS, keeping chroma and tone of `start`."""
    ucs = cam16_ucs(start, end, amount)
    ucs_cam = Cam16.from_int(ucs)
    from_cam = Cam16.from_int(start)
    return Hct.from_hct(ucs_cam.hue, from_cam.chroma, lstar_from_argb(start)).to_int()


def cam16_ucs(start: int, end: int, amount: float) -> int:
    """Linear interpolation in CAM16-UCS; amount 0 is `start`, 1 is `end`."""
    from_cam = Cam16.from_int(start)
    to_cam = Cam16.from_int(end)
    jstar = from_cam.jstar + (to_cam.jstar - from_cam.jstar) * amount
    astar = from_cam.astar + (to_cam.astar - from_cam.astar) * amount
    bstar = from_cam.bstar + (to_cam.bstar - from_cam.bstar) * amount
    return Cam16.from_ucs(jstar, astar, bstar).to_int()


__all__ = ["harmonize", "hct_hue", "cam16_ucs"]
