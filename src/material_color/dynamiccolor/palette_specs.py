# palette_specs.py – seed colour -> the six tonal palettes of a scheme
#   - PaletteSpec2021: per-variant hue/chroma formulas of the 2021 guidelines
#   - PaletteSpec2025: phone/watch aware overrides for the 2025 guidelines
#   - get_piecewise_hue / get_rotated_hue: hue lookups by source hue bucket

from __future__ import annotations

from typing import Optional, Sequence

from .. import dislike
from ..hct.hct import Hct
from ..palettes.tonal_palette import TonalPalette
from ..temperature import TemperatureCache
from ..utils.math_utils import sanitize_degrees_double
from .variant import Platform, Variant


def get_piecewise_hue(
    source_color_hct: Hct, hue_breakpoints: Sequence[float], hues: Sequence[float]
) -> float:
    """
    hues[i] for the bucket [breakpoints[i], breakpoints[i+1]) holding the
    source hue; the source hue itself when no bucket matches.
    """
    size = min(len(hue_breakpoints) - 1, len(hues))
    source_hue = source_color_hct.hue
    for i in range(size):
        if hue_breakpoints[i] <= source_hue < hue_breakpoints[i + 1]:
            return sanitize_degrees_double(hues[i])
    return source_hue


def get_rotated_hue(
    source_color_hct: Hct, hue_breakpoints: Sequence[float], rotations: Sequence[float]
) -> float:
    """Source hue rotated by the bucket's rotation."""
    rotation = get_piecewise_hue(source_color_hct, hue_breakpoints, rotations)
    if min(len(hue_breakpoints) - 1, len(rotations)) <= 0:
        rotation = 0
    return sanitize_degrees_double(source_color_hct.hue + rotation)


def _unsupported(variant) -> ValueError:
    return ValueError(f"Unsupported variant: {variant}")


class PaletteSpec2021:
    def get_primary_palette(
        self, variant, source: Hct, is_dark: bool, platform: Platform, contrast_level: float
    ) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(source.hue, source.chroma)
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue - 50), 48)
        if variant == Variant.MONOCHROME:
            return TonalPalette.from_hue_and_chroma(source.hue, 0)
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 12)
        if variant == Variant.RAINBOW:
            return TonalPalette.from_hue_and_chroma(source.hue, 48)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 36)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 240), 40)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(source.hue, 200)
        raise _unsupported(variant)

    def get_secondary_palette(
        self, variant, source: Hct, is_dark: bool, platform: Platform, contrast_level: float
    ) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(
                source.hue, max(source.chroma - 32.0, source.chroma * 0.5)
            )
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue - 50), 36)
        if variant == Variant.MONOCHROME:
            return TonalPalette.from_hue_and_chroma(source.hue, 0)
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 8)
        if variant in (Variant.RAINBOW, Variant.TONAL_SPOT):
            return TonalPalette.from_hue_and_chroma(source.hue, 16)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 21, 51, 121, 151, 191, 271, 321, 360],
                    [45, 95, 45, 20, 45, 90, 45, 45, 45],
                ),
                24,
            )
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 41, 61, 101, 131, 181, 251, 301, 360],
                    [18, 15, 10, 12, 15, 18, 15, 12, 12],
                ),
                24,
            )
        raise _unsupported(variant)

    def get_tertiary_palette(
        self, variant, source: Hct, is_dark: bool, platform: Platform, contrast_level: float
    ) -> TonalPalette:
        if variant == Variant.CONTENT:
            analogous = TemperatureCache(source).analogous(3, 6)[2]
            return TonalPalette.from_hct(dislike.fix_if_disliked(analogous))
        if variant == Variant.FIDELITY:
            complement = TemperatureCache(source).complement
            return TonalPalette.from_hct(dislike.fix_if_disliked(complement))
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(source.hue, 36)
        if variant == Variant.MONOCHROME:
            return TonalPalette.from_hue_and_chroma(source.hue, 0)
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 16)
        if variant in (Variant.RAINBOW, Variant.TONAL_SPOT):
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 60), 24)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 21, 51, 121, 151, 191, 271, 321, 360],
                    [120, 120, 20, 45, 20, 15, 20, 120, 120],
                ),
                32,
            )
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 41, 61, 101, 131, 181, 251, 301, 360],
                    [35, 30, 20, 25, 30, 35, 30, 25, 25],
                ),
                32,
            )
        raise _unsupported(variant)

    def get_neutral_palette(
        self, variant, source: Hct, is_dark: bool, platform: Platform, contrast_level: float
    ) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(source.hue, source.chroma / 8)
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(source.hue, 10)
        if variant in (Variant.MONOCHROME, Variant.RAINBOW):
            return TonalPalette.from_hue_and_chroma(source.hue, 0)
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 2)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 6)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 15), 8)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(source.hue, 10)
        raise _unsupported(variant)

    def get_neutral_variant_palette(
        self, variant, source: Hct, is_dark: bool, platform: Platform, contrast_level: float
    ) -> TonalPalette:
        if variant in (Variant.CONTENT, Variant.FIDELITY):
            return TonalPalette.from_hue_and_chroma(source.hue, source.chroma / 8 + 4)
        if variant == Variant.FRUIT_SALAD:
            return TonalPalette.from_hue_and_chroma(source.hue, 16)
        if variant in (Variant.MONOCHROME, Variant.RAINBOW):
            return TonalPalette.from_hue_and_chroma(source.hue, 0)
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 2)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 8)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(sanitize_degrees_double(source.hue + 15), 12)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(source.hue, 12)
        raise _unsupported(variant)

    def get_error_palette(
        self, variant, source: Hct, is_dark: bool, platform: Platform, contrast_level: float
    ) -> Optional[TonalPalette]:
        # the scheme falls back to its fixed red
        return None


class PaletteSpec2025(PaletteSpec2021):
    def get_primary_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            if phone:
                chroma = 12 if Hct.is_blue(source.hue) else 8
            else:
                chroma = 16 if Hct.is_blue(source.hue) else 12
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 26 if phone and is_dark else 32)
        if variant == Variant.EXPRESSIVE:
            chroma = (36 if is_dark else 48) if phone else 40
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(source.hue, 74 if phone else 56)
        return super().get_primary_palette(variant, source, is_dark, platform, contrast_level)

    def get_secondary_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            if phone:
                chroma = 6 if Hct.is_blue(source.hue) else 4
            else:
                chroma = 10 if Hct.is_blue(source.hue) else 6
            return TonalPalette.from_hue_and_chroma(source.hue, chroma)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 16)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 105, 140, 204, 253, 278, 300, 333, 360],
                    [-160, 155, -100, 96, -96, -156, -165, -160],
                ),
                (16 if is_dark else 24) if phone else 24,
            )
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source, [0, 38, 105, 140, 333, 360], [-14, 10, -14, 10, -14]
                ),
                56 if phone else 36,
            )
        return super().get_secondary_palette(variant, source, is_dark, platform, contrast_level)

    def get_tertiary_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 38, 105, 161, 204, 278, 333, 360],
                    [-32, 26, 10, -39, 24, -15, -32],
                ),
                20 if phone else 36,
            )
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source, [0, 20, 71, 161, 333, 360], [-40, 48, -32, 40, -32]
                ),
                28 if phone else 32,
            )
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 105, 140, 204, 253, 278, 300, 333, 360],
                    [-165, 160, -105, 101, -101, -160, -170, -165],
                ),
                48,
            )
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                get_rotated_hue(
                    source,
                    [0, 38, 71, 105, 140, 161, 253, 333, 360],
                    [-72, 35, 24, -24, 62, 50, 62, -72],
                ),
                56,
            )
        return super().get_tertiary_palette(variant, source, is_dark, platform, contrast_level)

    @staticmethod
    def get_expressive_neutral_hue(source: Hct) -> float:
        return get_rotated_hue(
            source, [0, 71, 124, 253, 278, 300, 360], [10, 0, 10, 0, 10, 0]
        )

    @staticmethod
    def get_expressive_neutral_chroma(source: Hct, is_dark: bool, platform: Platform) -> float:
        neutral_hue = PaletteSpec2025.get_expressive_neutral_hue(source)
        if platform != Platform.PHONE:
            return 12
        if is_dark:
            return 6 if Hct.is_yellow(neutral_hue) else 14
        return 18

    @staticmethod
    def get_vibrant_neutral_hue(source: Hct) -> float:
        return get_rotated_hue(source, [0, 38, 105, 140, 333, 360], [-14, 10, -14, 10, -14])

    @staticmethod
    def get_vibrant_neutral_chroma(source: Hct, platform: Platform) -> float:
        neutral_hue = PaletteSpec2025.get_vibrant_neutral_hue(source)
        if platform == Platform.PHONE:
            return 28
        return 28 if Hct.is_blue(neutral_hue) else 20

    def get_neutral_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, 1.4 if phone else 6)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, 5 if phone else 10)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(
                self.get_expressive_neutral_hue(source),
                self.get_expressive_neutral_chroma(source, is_dark, platform),
            )
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(
                self.get_vibrant_neutral_hue(source),
                self.get_vibrant_neutral_chroma(source, platform),
            )
        return super().get_neutral_palette(variant, source, is_dark, platform, contrast_level)

    def get_neutral_variant_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(source.hue, (1.4 if phone else 6) * 2.2)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(source.hue, (5 if phone else 10) * 1.7)
        if variant == Variant.EXPRESSIVE:
            hue = self.get_expressive_neutral_hue(source)
            chroma = self.get_expressive_neutral_chroma(source, is_dark, platform)
            return TonalPalette.from_hue_and_chroma(
                hue, chroma * (1.6 if 105 <= hue < 125 else 2.3)
            )
        if variant == Variant.VIBRANT:
            hue = self.get_vibrant_neutral_hue(source)
            chroma = self.get_vibrant_neutral_chroma(source, platform)
            return TonalPalette.from_hue_and_chroma(hue, chroma * 1.29)
        return super().get_neutral_variant_palette(
            variant, source, is_dark, platform, contrast_level
        )

    def get_error_palette(self, variant, source, is_dark, platform, contrast_level):
        phone = platform == Platform.PHONE
        error_hue = get_piecewise_hue(
            source,
            [0, 3, 13, 23, 33, 43, 153, 273, 360],
            [12, 22, 32, 12, 22, 32, 22, 12],
        )
        if variant == Variant.NEUTRAL:
            return TonalPalette.from_hue_and_chroma(error_hue, 50 if phone else 40)
        if variant == Variant.TONAL_SPOT:
            return TonalPalette.from_hue_and_chroma(error_hue, 60 if phone else 48)
        if variant == Variant.EXPRESSIVE:
            return TonalPalette.from_hue_and_chroma(error_hue, 64 if phone else 48)
        if variant == Variant.VIBRANT:
            return TonalPalette.from_hue_and_chroma(error_hue, 80 if phone else 60)
        return super().get_error_palette(variant, source, is_dark, platform, contrast_level)


_PALETTE_SPEC_2021 = PaletteSpec2021()
_PALETTE_SPEC_2025 = PaletteSpec2025()


def get_palette_spec(spec_version: str) -> PaletteSpec2021:
    return _PALETTE_SPEC_2025 if spec_version == "2025" else _PALETTE_SPEC_2021


__all__ = [
    "PaletteSpec2021",
    "PaletteSpec2025",
    "get_palette_spec",
    "get_piecewise_hue",
    "get_rotated_hue",
]
