# score.py – rank quantized colours for use as a theme seed
#   - favour hues that cover much of the image (smoothed over ±15°)
#   - favour chroma near 48; punish grays more than loud colours
#   - pick colours whose hues are as far apart as possible

from __future__ import annotations

import logging
from typing import Mapping

from .hct.hct import Hct
from .utils.math_utils import difference_degrees, round_half_up, sanitize_degrees_int

log = logging.getLogger(__name__)

# --- constants ---
TARGET_CHROMA = 48.0  # A1 chroma
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1
CUTOFF_CHROMA = 5.0
CUTOFF_EXCITED_PROPORTION = 0.01

DEFAULT_DESIRED = 4
DEFAULT_FALLBACK_ARGB = 0xFF4285F4  # Google Blue


def score(
    colors_to_population: Mapping[int, int],
    desired: int = DEFAULT_DESIRED,
    fallback_color_argb: int = DEFAULT_FALLBACK_ARGB,
    filter: bool = True,
) -> list[int]:
    """
    Colours suitable for a UI theme, best first.

    Never empty: if nothing survives the filter, the fallback colour is
    returned alone. With `filter=False` grays and rare hues are kept.
    """
    colors_hct: list[Hct] = []
    hue_population = [0] * 360
    population_sum = 0
    for argb, population in colors_to_population.items():
        hct = Hct.from_int(argb)
        colors_hct.append(hct)
        hue_population[int(hct.hue) % 360] += population
        population_sum += population

    hue_excited_proportions = [0.0] * 360
    if population_sum > 0:
        for hue in range(360):
            proportion = hue_population[hue] / population_sum
            for i in range(hue - 14, hue + 16):
                hue_excited_proportions[sanitize_degrees_int(i)] += proportion

    scored: list[tuple[Hct, float]] = []
    for hct in colors_hct:
        proportion = hue_excited_proportions[sanitize_degrees_int(round_half_up(hct.hue))]
        if filter and (hct.chroma < CUTOFF_CHROMA or proportion <= CUTOFF_EXCITED_PROPORTION):
            continue
        proportion_score = proportion * 100.0 * WEIGHT_PROPORTION
        chroma_weight = WEIGHT_CHROMA_BELOW if hct.chroma < TARGET_CHROMA else WEIGHT_CHROMA_ABOVE
        chroma_score = (hct.chroma - TARGET_CHROMA) * chroma_weight
        scored.append((hct, proportion_score + chroma_score))
    # stable: equal scores keep input order
    scored.sort(key=lambda pair: pair[1], reverse=True)

    chosen: list[Hct] = []
    for min_difference in range(90, 14, -1):
        chosen.clear()
        for hct, _ in scored:
            if not any(difference_degrees(hct.hue, c.hue) < min_difference for c in chosen):
                chosen.append(hct)
            if len(chosen) >= desired:
                break
        if len(chosen) >= desired:
            break

    if not chosen:
        log.debug("score: no colour passed, using fallback %08x", fallback_color_argb)
        return [fallback_color_argb]
    return [hct.to_int() for hct in chosen]


__all__ = [
    "score",
    "TARGET_CHROMA",
    "WEIGHT_PROPORTION",
    "WEIGHT_CHROMA_ABOVE",
    "WEIGHT_CHROMA_BELOW",
    "CUTOFF_CHROMA",
    "CUTOFF_EXCITED_PROPORTION",
]
