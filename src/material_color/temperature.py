"""
Warm/cool analysis of the colour wheel, after "Color Temperature Analysis"
(Ou et al., 2004): warm colours sit near orange, cool ones near blue.
"""

from __future__ import annotations

import math
from functools import cached_property

from .hct.hct import Hct
from .utils.color_utils import lab_from_argb
from .utils.math_utils import round_half_up, sanitize_degrees_double, sanitize_degrees_int


class TemperatureCache:
    """Temperature lookups around one input colour, computed lazily."""

    def __init__(self, input_hct: Hct) -> None:
        self.input = input_hct

    @cached_property
    def hcts_by_hue(self) -> list[Hct]:
        """Input chroma and tone at every integer hue, 0 through 360 inclusive."""
        return [
            Hct.from_hct(hue, self.input.chroma, self.input.tone) for hue in range(361)
        ]

    @cached_property
    def temps_by_hct(self) -> dict[Hct, float]:
        return {hct: raw_temperature(hct) for hct in self.hcts_by_hue + [self.input]}

    @cached_property
    def hcts_by_temp(self) -> list[Hct]:
        """Every hue's colour plus the input, coldest first."""
        temps = self.temps_by_hct
        return sorted(self.hcts_by_hue + [self.input], key=lambda hct: temps[hct])

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    def analogous(self, count: int = 5, divisions: int = 12) -> list[Hct]:
        """
        Colours of similar temperature to the input, spaced evenly in
        temperature rather than hue. The input is in the middle of the result.

        count: number of colours returned.
        divisions: number of slices the colour wheel is cut into.
        """
        start_hue = round_half_up(self.input.hue)
        start_hct = self.hcts_by_hue[start_hue]
        last_temp = self.relative_temperature(start_hct)
        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hct = self.hcts_by_hue[sanitize_degrees_int(start_hue + i)]
            temp = self.relative_temperature(hct)
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hct = self.hcts_by_hue[sanitize_degrees_int(start_hue + hue_addend)]
            temp = self.relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            index_satisfied = total_temp_delta >= len(all_colors) * temp_step
            index_addend = 1
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                index_satisfied = total_temp_delta >= (len(all_colors) + index_addend) * temp_step
                index_addend += 1

            last_temp = temp
            hue_addend += 1
            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]
        increase_hue_count = (count - 1) // 2
        for i in range(1, increase_hue_count + 1):
            answers.insert(0, all_colors[-i % len(all_colors)])
        decrease_hue_count = count - increase_hue_count - 1
        for i in range(1, decrease_hue_count + 1):
            answers.append(all_colors[i % len(all_colors)])
        return answers

    @cached_property
    def complement(self) -> Hct:
        """
        The colour whose relative temperature mirrors the input's, on the
        opposite side of the warm/cool axis.
        """
        coldest_hue = self.coldest.hue
        coldest_temp = self.temps_by_hct[self.coldest]
        warmest_hue = self.warmest.hue
        warmest_temp = self.temps_by_hct[self.warmest]
        temp_range = warmest_temp - coldest_temp
        if temp_range == 0:
            # every hue has the same temperature, e.g. grays
            return self.hcts_by_hue[round_half_up(self.input.hue)]

        start_is_coldest_to_warmest = is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_is_coldest_to_warmest else warmest_hue

        smallest_error = 1000.0
        answer = self.hcts_by_hue[round_half_up(self.input.hue)]
        complement_relative_temp = 1.0 - self.input_relative_temperature

        for hue_addend in range(361):
            hue = sanitize_degrees_double(start_hue + hue_addend)
            if not is_between(hue, start_hue, end_hue):
                continue
            possible_answer = self.hcts_by_hue[round_half_up(hue)]
            relative_temp = (self.temps_by_hct[possible_answer] - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer
        return answer

    def relative_temperature(self, hct: Hct) -> float:
        """0 for the coldest colour, 1 for the warmest; 0.5 if all are equal."""
        temps = self.temps_by_hct
        temp_range = temps[self.warmest] - temps[self.coldest]
        difference_from_coldest = temps[hct] - temps[self.coldest]
        if temp_range == 0:
            return 0.5
        return difference_from_coldest / temp_range

    @cached_property
    def input_relative_temperature(self) -> float:
        return self.relative_temperature(self.input)


def is_between(angle: float, a: float, b: float) -> bool:
    """Whether `angle` lies on the arc going clockwise from `a` to `b`."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b


def raw_temperature(color: Hct) -> float:
    """
    Temperature from L*a*b* hue and chroma. Roughly -0.5 for cool colours
    up to about 3.0 for warm ones; 50 degrees (orange) is the warmest hue.
    """
    lab = lab_from_argb(color.to_int())
    hue = sanitize_degrees_double(math.atan2(lab[2], lab[1]) * 180.0 / math.pi)
    chroma = math.sqrt(lab[1] * lab[1] + lab[2] * lab[2])
    return -0.5 + 0.02 * chroma**1.07 * math.cos(
        sanitize_degrees_double(hue - 50.0) * math.pi / 180.0
    )


__all__ = ["TemperatureCache", "is_between", "raw_temperature"]
