# color_spec_2025.py – the 2025 Material colour roles
#   - ColorSpec2025: wraps a ColorSpec2021 table and overrides most roles
#     for "2025" schemes through extend_spec_version
#   - *_dim roles exist only here
#   - t_max_c / t_min_c: tones where a palette reaches its fullest chroma

from __future__ import annotations

from typing import TYPE_CHECKING

from ..hct.hct import Hct
from ..palettes.tonal_palette import TonalPalette
from ..utils.math_utils import clamp_double
from .color_spec_2021 import ColorSpec2021, role
from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor, extend_spec_version
from .tone_delta_pair import ToneDeltaPair
from .variant import Platform, SpecVersion, Variant

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme


def t_max_c(
    palette: TonalPalette,
    lower_bound: float = 0,
    upper_bound: float = 100,
    chroma_multiplier: float = 1,
) -> float:
    """Highest tone with the palette's fullest chroma, clamped to the bounds."""
    answer = find_best_tone_for_chroma(
        palette.hue, palette.chroma * chroma_multiplier, 100, True
    )
    return clamp_double(lower_bound, upper_bound, answer)


def t_min_c(palette: TonalPalette, lower_bound: float = 0, upper_bound: float = 100) -> float:
    """Lowest tone with the palette's fullest chroma, clamped to the bounds."""
    answer = find_best_tone_for_chroma(palette.hue, palette.chroma, 0, False)
    return clamp_double(lower_bound, upper_bound, answer)


def find_best_tone_for_chroma(
    hue: float, chroma: float, tone: float, by_decreasing_tone: bool
) -> float:
    answer = tone
    best = Hct.from_hct(hue, chroma, answer)
    while best.chroma < chroma:
        if tone < 0 or tone > 100:
            break
        tone += -1.0 if by_decreasing_tone else 1.0
        candidate = Hct.from_hct(hue, chroma, tone)
        if best.chroma < candidate.chroma:
            best = candidate
            answer = tone
    return answer


_CURVES = {
    1.5: ContrastCurve(1.5, 1.5, 3, 4.5),
    3: ContrastCurve(3, 3, 4.5, 7),
    4.5: ContrastCurve(4.5, 4.5, 7, 11),
    6: ContrastCurve(6, 6, 7, 11),
    7: ContrastCurve(7, 7, 11, 21),
    9: ContrastCurve(9, 9, 11, 21),
    11: ContrastCurve(11, 11, 21, 21),
    21: ContrastCurve(21, 21, 21, 21),
}


def get_curve(default_contrast: float) -> ContrastCurve:
    """Standard curve whose normal-contrast ratio is `default_contrast`."""
    curve = _CURVES.get(default_contrast)
    if curve is None:
        return ContrastCurve(default_contrast, default_contrast, 7, 21)
    return curve


def _is_phone(s: DynamicScheme) -> bool:
    return s.platform == Platform.PHONE


def _neutral_surface_tone(s: DynamicScheme, dark: float, yellow: float, vibrant: float,
                          other: float) -> float:
    if s.is_dark:
        return dark
    if Hct.is_yellow(s.neutral_palette.hue):
        return yellow
    if s.variant == Variant.VIBRANT:
        return vibrant
    return other


def _surface_chroma(s: DynamicScheme, neutral: float, tonal_spot: float,
                    expressive_yellow: float, expressive: float, vibrant: float) -> float:
    if s.variant == Variant.NEUTRAL:
        return neutral
    if s.variant == Variant.TONAL_SPOT:
        return tonal_spot
    if s.variant == Variant.EXPRESSIVE:
        return expressive_yellow if Hct.is_yellow(s.neutral_palette.hue) else expressive
    if s.variant == Variant.VIBRANT:
        return vibrant
    return 1.0


def _foreground_chroma(s: DynamicScheme) -> float:
    # shared by on_surface, on_surface_variant and the outlines
    if _is_phone(s):
        if s.variant == Variant.NEUTRAL:
            return 2.2
        if s.variant == Variant.TONAL_SPOT:
            return 1.7
        if s.variant == Variant.EXPRESSIVE:
            if Hct.is_yellow(s.neutral_palette.hue):
                return 3.0 if s.is_dark else 2.3
            return 1.6
    return 1.0


def _phone_watch_curve(phone: float, watch: float):
    return lambda s: get_curve(phone) if _is_phone(s) else get_curve(watch)


def _container_curve(s: DynamicScheme):
    if _is_phone(s) and s.contrast_level > 0:
        return get_curve(1.5)
    return None


def _light_reference(s: DynamicScheme) -> DynamicScheme:
    return s.copy_with(is_dark=False, contrast_level=0.0)


class ColorSpec2025:
    """
    Colour roles as defined by the 2025 Material guidelines.

    Every overridden role still answers for "2021" schemes with the 2021
    definition, so one table serves both spec versions.
    """

    def __init__(self) -> None:
        self._base = ColorSpec2021(roles=self)
        self._colors: dict = {}

    def _extend(self, original: DynamicColor, color2025: DynamicColor) -> DynamicColor:
        return extend_spec_version(original, SpecVersion.SPEC_2025, color2025)

    def _surface_background(self, s: DynamicScheme) -> DynamicColor:
        return self.highest_surface(s) if _is_phone(s) else self.surface_container_high()

    def _phone_background(self, s: DynamicScheme):
        return self.highest_surface(s) if _is_phone(s) else None

    # --- unchanged roles ---

    def primary_palette_key_color(self) -> DynamicColor:
        return self._base.primary_palette_key_color()

    def secondary_palette_key_color(self) -> DynamicColor:
        return self._base.secondary_palette_key_color()

    def tertiary_palette_key_color(self) -> DynamicColor:
        return self._base.tertiary_palette_key_color()

    def neutral_palette_key_color(self) -> DynamicColor:
        return self._base.neutral_palette_key_color()

    def neutral_variant_palette_key_color(self) -> DynamicColor:
        return self._base.neutral_variant_palette_key_color()

    def error_palette_key_color(self) -> DynamicColor:
        return self._base.error_palette_key_color()

    def shadow(self) -> DynamicColor:
        return self._base.shadow()

    def scrim(self) -> DynamicColor:
        return self._base.scrim()

    def highest_surface(self, s: DynamicScheme) -> DynamicColor:
        return self.surface_bright() if s.is_dark else self.surface_dim()

    # --- surfaces ---

    @role
    def background(self) -> DynamicColor:
        return self._extend(self._base.background(), self.surface().clone("background"))

    @role
    def on_background(self) -> DynamicColor:
        return self._extend(self._base.on_background(), self.on_surface().clone("on_background"))

    @role
    def surface(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if _is_phone(s):
                return _neutral_surface_tone(s, 4, 99, 97, 98)
            return 0

        return self._extend(
            self._base.surface(),
            DynamicColor.from_palette(
                name="surface",
                palette=lambda s: s.neutral_palette,
                tone=tone,
                is_background=True,
            ),
        )

    @role
    def surface_dim(self) -> DynamicColor:
        def chroma_multiplier(s: DynamicScheme) -> float:
            if not s.is_dark:
                return _surface_chroma(s, 2.5, 1.7, 2.7, 1.75, 1.36)
            return 1.0

        return self._extend(
            self._base.surface_dim(),
            DynamicColor.from_palette(
                name="surface_dim",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _neutral_surface_tone(s, 4, 90, 85, 87),
                is_background=True,
                chroma_multiplier=chroma_multiplier,
            ),
        )

    @role
    def surface_bright(self) -> DynamicColor:
        def chroma_multiplier(s: DynamicScheme) -> float:
            if s.is_dark:
                return _surface_chroma(s, 2.5, 1.7, 2.7, 1.75, 1.36)
            return 1.0

        return self._extend(
            self._base.surface_bright(),
            DynamicColor.from_palette(
                name="surface_bright",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _neutral_surface_tone(s, 18, 99, 97, 98),
                is_background=True,
                chroma_multiplier=chroma_multiplier,
            ),
        )

    @role
    def surface_container_lowest(self) -> DynamicColor:
        return self._extend(
            self._base.surface_container_lowest(),
            DynamicColor.from_palette(
                name="surface_container_lowest",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: 0 if s.is_dark else 100,
                is_background=True,
            ),
        )

    def _phone_container(self, original: DynamicColor, phone_tones: tuple, watch_tone: float,
                         chroma: tuple) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if _is_phone(s):
                return _neutral_surface_tone(s, *phone_tones)
            return watch_tone

        def chroma_multiplier(s: DynamicScheme) -> float:
            if _is_phone(s):
                return _surface_chroma(s, *chroma)
            return 1.0

        return self._extend(
            original,
            DynamicColor.from_palette(
                name=original.name,
                palette=lambda s: s.neutral_palette,
                tone=tone,
                is_background=True,
                chroma_multiplier=chroma_multiplier,
            ),
        )

    @role
    def surface_container_low(self) -> DynamicColor:
        return self._phone_container(
            self._base.surface_container_low(), (6, 98, 95, 96), 15, (1.3, 1.25, 1.3, 1.15, 1.08)
        )

    @role
    def surface_container(self) -> DynamicColor:
        return self._phone_container(
            self._base.surface_container(), (9, 96, 92, 94), 20, (1.6, 1.4, 1.6, 1.3, 1.15)
        )

    @role
    def surface_container_high(self) -> DynamicColor:
        return self._phone_container(
            self._base.surface_container_high(), (12, 94, 90, 92), 25,
            (1.9, 1.5, 1.95, 1.45, 1.22),
        )

    @role
    def surface_container_highest(self) -> DynamicColor:
        return self._extend(
            self._base.surface_container_highest(),
            DynamicColor.from_palette(
                name="surface_container_highest",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: _neutral_surface_tone(s, 15, 92, 88, 90),
                is_background=True,
                chroma_multiplier=lambda s: _surface_chroma(s, 2.2, 1.7, 2.3, 1.6, 1.29),
            ),
        )

    @role
    def on_surface(self) -> DynamicColor:
        initial = DynamicColor.get_initial_tone_from_background(self._surface_background)

        def tone(s: DynamicScheme) -> float:
            if s.variant == Variant.VIBRANT:
                return t_max_c(s.neutral_palette, 0, 100, 1.1)
            return initial(s)

        return self._extend(
            self._base.on_surface(),
            DynamicColor.from_palette(
                name="on_surface",
                palette=lambda s: s.neutral_palette,
                tone=tone,
                chroma_multiplier=_foreground_chroma,
                background=self._surface_background,
                contrast_curve=lambda s: get_curve(11) if s.is_dark else get_curve(9),
            ),
        )

    @role
    def surface_variant(self) -> DynamicColor:
        return self._extend(
            self._base.surface_variant(),
            self.surface_container_highest().clone("surface_variant"),
        )

    @role
    def on_surface_variant(self) -> DynamicColor:
        def curve(s: DynamicScheme) -> ContrastCurve:
            if _is_phone(s):
                return get_curve(6) if s.is_dark else get_curve(4.5)
            return get_curve(7)

        return self._extend(
            self._base.on_surface_variant(),
            DynamicColor.from_palette(
                name="on_surface_variant",
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_foreground_chroma,
                background=self._surface_background,
                contrast_curve=curve,
            ),
        )

    @role
    def inverse_surface(self) -> DynamicColor:
        return self._extend(
            self._base.inverse_surface(),
            DynamicColor.from_palette(
                name="inverse_surface",
                palette=lambda s: s.neutral_palette,
                tone=lambda s: 98 if s.is_dark else 4,
                is_background=True,
            ),
        )

    @role
    def inverse_on_surface(self) -> DynamicColor:
        return self._extend(
            self._base.inverse_on_surface(),
            DynamicColor.from_palette(
                name="inverse_on_surface",
                palette=lambda s: s.neutral_palette,
                background=lambda s: self.inverse_surface(),
                contrast_curve=lambda s: get_curve(7),
            ),
        )

    @role
    def outline(self) -> DynamicColor:
        return self._extend(
            self._base.outline(),
            DynamicColor.from_palette(
                name="outline",
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_foreground_chroma,
                background=self._surface_background,
                contrast_curve=_phone_watch_curve(3, 4.5),
            ),
        )

    @role
    def outline_variant(self) -> DynamicColor:
        return self._extend(
            self._base.outline_variant(),
            DynamicColor.from_palette(
                name="outline_variant",
                palette=lambda s: s.neutral_palette,
                chroma_multiplier=_foreground_chroma,
                background=self._surface_background,
                contrast_curve=_phone_watch_curve(1.5, 3),
            ),
        )

    @role
    def surface_tint(self) -> DynamicColor:
        return self._extend(self._base.surface_tint(), self.primary().clone("surface_tint"))

    # --- primary ---

    @role
    def primary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.primary_palette
            if s.variant == Variant.NEUTRAL:
                if _is_phone(s):
                    return 80 if s.is_dark else 40
                return 90
            if s.variant == Variant.TONAL_SPOT:
                if _is_phone(s):
                    return 80 if s.is_dark else t_max_c(p)
                return t_max_c(p, 0, 90)
            if s.variant == Variant.EXPRESSIVE:
                if Hct.is_yellow(p.hue):
                    upper = 25
                elif Hct.is_cyan(p.hue):
                    upper = 88
                else:
                    upper = 98
                return t_max_c(p, 0, upper)
            return t_max_c(p, 0, 88 if Hct.is_cyan(p.hue) else 98)

        def pair(s: DynamicScheme):
            if _is_phone(s):
                return ToneDeltaPair(
                    self.primary_container(), self.primary(), 5, "relative_lighter", True,
                    "farther",
                )
            return None

        return self._extend(
            self._base.primary(),
            DynamicColor.from_palette(
                name="primary",
                palette=lambda s: s.primary_palette,
                tone=tone,
                is_background=True,
                background=self._surface_background,
                contrast_curve=_phone_watch_curve(4.5, 7),
                tone_delta_pair=pair,
            ),
        )

    @role
    def primary_dim(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.variant == Variant.NEUTRAL:
                return 85
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(s.primary_palette, 0, 90)
            return t_max_c(s.primary_palette)

        return DynamicColor.from_palette(
            name="primary_dim",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.primary_dim(), self.primary(), 5, "darker", True, "farther"
            ),
        )

    @role
    def on_primary(self) -> DynamicColor:
        return self._extend(
            self._base.on_primary(),
            DynamicColor.from_palette(
                name="on_primary",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary() if _is_phone(s) else self.primary_dim(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def primary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.primary_palette
            if s.platform == Platform.WATCH:
                return 30
            if s.variant == Variant.NEUTRAL:
                return 30 if s.is_dark else 90
            if s.variant == Variant.TONAL_SPOT:
                return t_min_c(p, 35, 93) if s.is_dark else t_max_c(p, 0, 90)
            if s.variant == Variant.EXPRESSIVE:
                if s.is_dark:
                    return t_max_c(p, 30, 93)
                return t_max_c(p, 78, 88 if Hct.is_cyan(p.hue) else 90)
            if s.is_dark:
                return t_min_c(p, 66, 93)
            return t_max_c(p, 66, 88 if Hct.is_cyan(p.hue) else 93)

        def pair(s: DynamicScheme):
            if _is_phone(s):
                return None
            return ToneDeltaPair(
                self.primary_container(), self.primary_dim(), 10, "darker", True, "farther"
            )

        return self._extend(
            self._base.primary_container(),
            DynamicColor.from_palette(
                name="primary_container",
                palette=lambda s: s.primary_palette,
                tone=tone,
                is_background=True,
                background=self._phone_background,
                tone_delta_pair=pair,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def on_primary_container(self) -> DynamicColor:
        return self._extend(
            self._base.on_primary_container(),
            DynamicColor.from_palette(
                name="on_primary_container",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary_container(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def primary_fixed(self) -> DynamicColor:
        return self._extend(
            self._base.primary_fixed(),
            DynamicColor.from_palette(
                name="primary_fixed",
                palette=lambda s: s.primary_palette,
                tone=lambda s: self.primary_container().get_tone(_light_reference(s)),
                is_background=True,
                background=self._phone_background,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def primary_fixed_dim(self) -> DynamicColor:
        return self._extend(
            self._base.primary_fixed_dim(),
            DynamicColor.from_palette(
                name="primary_fixed_dim",
                palette=lambda s: s.primary_palette,
                tone=lambda s: self.primary_fixed().get_tone(s),
                is_background=True,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.primary_fixed_dim(), self.primary_fixed(), 5, "darker", True, "exact"
                ),
            ),
        )

    @role
    def on_primary_fixed(self) -> DynamicColor:
        return self._extend(
            self._base.on_primary_fixed(),
            DynamicColor.from_palette(
                name="on_primary_fixed",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary_fixed_dim(),
                contrast_curve=lambda s: get_curve(7),
            ),
        )

    @role
    def on_primary_fixed_variant(self) -> DynamicColor:
        return self._extend(
            self._base.on_primary_fixed_variant(),
            DynamicColor.from_palette(
                name="on_primary_fixed_variant",
                palette=lambda s: s.primary_palette,
                background=lambda s: self.primary_fixed_dim(),
                contrast_curve=lambda s: get_curve(4.5),
            ),
        )

    @role
    def inverse_primary(self) -> DynamicColor:
        return self._extend(
            self._base.inverse_primary(),
            DynamicColor.from_palette(
                name="inverse_primary",
                palette=lambda s: s.primary_palette,
                tone=lambda s: t_max_c(s.primary_palette),
                background=lambda s: self.inverse_surface(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    # --- secondary ---

    @role
    def secondary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.secondary_palette
            if s.platform == Platform.WATCH:
                return 90 if s.variant == Variant.NEUTRAL else t_max_c(p, 0, 90)
            if s.variant == Variant.NEUTRAL:
                return t_min_c(p, 0, 98) if s.is_dark else t_max_c(p)
            if s.variant == Variant.VIBRANT:
                return t_max_c(p, 0, 90 if s.is_dark else 98)
            return 80 if s.is_dark else t_max_c(p)

        def pair(s: DynamicScheme):
            if _is_phone(s):
                return ToneDeltaPair(
                    self.secondary_container(), self.secondary(), 5, "relative_lighter", True,
                    "farther",
                )
            return None

        return self._extend(
            self._base.secondary(),
            DynamicColor.from_palette(
                name="secondary",
                palette=lambda s: s.secondary_palette,
                tone=tone,
                is_background=True,
                background=self._surface_background,
                contrast_curve=_phone_watch_curve(4.5, 7),
                tone_delta_pair=pair,
            ),
        )

    @role
    def secondary_dim(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.variant == Variant.NEUTRAL:
                return 85
            return t_max_c(s.secondary_palette, 0, 90)

        return DynamicColor.from_palette(
            name="secondary_dim",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.secondary_dim(), self.secondary(), 5, "darker", True, "farther"
            ),
        )

    @role
    def on_secondary(self) -> DynamicColor:
        return self._extend(
            self._base.on_secondary(),
            DynamicColor.from_palette(
                name="on_secondary",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary() if _is_phone(s) else self.secondary_dim(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def secondary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.secondary_palette
            if s.platform == Platform.WATCH:
                return 30
            if s.variant == Variant.VIBRANT:
                return t_min_c(p, 30, 40) if s.is_dark else t_max_c(p, 84, 90)
            if s.variant == Variant.EXPRESSIVE:
                return 15 if s.is_dark else t_max_c(p, 90, 95)
            return 25 if s.is_dark else 90

        def pair(s: DynamicScheme):
            if s.platform == Platform.WATCH:
                return ToneDeltaPair(
                    self.secondary_container(), self.secondary_dim(), 10, "darker", True,
                    "farther",
                )
            return None

        return self._extend(
            self._base.secondary_container(),
            DynamicColor.from_palette(
                name="secondary_container",
                palette=lambda s: s.secondary_palette,
                tone=tone,
                is_background=True,
                background=self._phone_background,
                tone_delta_pair=pair,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def on_secondary_container(self) -> DynamicColor:
        return self._extend(
            self._base.on_secondary_container(),
            DynamicColor.from_palette(
                name="on_secondary_container",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary_container(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def secondary_fixed(self) -> DynamicColor:
        return self._extend(
            self._base.secondary_fixed(),
            DynamicColor.from_palette(
                name="secondary_fixed",
                palette=lambda s: s.secondary_palette,
                tone=lambda s: self.secondary_container().get_tone(_light_reference(s)),
                is_background=True,
                background=self._phone_background,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def secondary_fixed_dim(self) -> DynamicColor:
        return self._extend(
            self._base.secondary_fixed_dim(),
            DynamicColor.from_palette(
                name="secondary_fixed_dim",
                palette=lambda s: s.secondary_palette,
                tone=lambda s: self.secondary_fixed().get_tone(s),
                is_background=True,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.secondary_fixed_dim(), self.secondary_fixed(), 5, "darker", True,
                    "exact",
                ),
            ),
        )

    @role
    def on_secondary_fixed(self) -> DynamicColor:
        return self._extend(
            self._base.on_secondary_fixed(),
            DynamicColor.from_palette(
                name="on_secondary_fixed",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary_fixed_dim(),
                contrast_curve=lambda s: get_curve(7),
            ),
        )

    @role
    def on_secondary_fixed_variant(self) -> DynamicColor:
        return self._extend(
            self._base.on_secondary_fixed_variant(),
            DynamicColor.from_palette(
                name="on_secondary_fixed_variant",
                palette=lambda s: s.secondary_palette,
                background=lambda s: self.secondary_fixed_dim(),
                contrast_curve=lambda s: get_curve(4.5),
            ),
        )

    # --- tertiary ---

    @role
    def tertiary(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.tertiary_palette
            if s.platform == Platform.WATCH:
                if s.variant == Variant.TONAL_SPOT:
                    return t_max_c(p, 0, 90)
                return t_max_c(p)
            if s.variant in (Variant.EXPRESSIVE, Variant.VIBRANT):
                if Hct.is_cyan(p.hue):
                    upper = 88
                else:
                    upper = 98 if s.is_dark else 100
                return t_max_c(p, 0, upper)
            return t_max_c(p, 0, 98) if s.is_dark else t_max_c(p)

        def pair(s: DynamicScheme):
            if _is_phone(s):
                return ToneDeltaPair(
                    self.tertiary_container(), self.tertiary(), 5, "relative_lighter", True,
                    "farther",
                )
            return None

        return self._extend(
            self._base.tertiary(),
            DynamicColor.from_palette(
                name="tertiary",
                palette=lambda s: s.tertiary_palette,
                tone=tone,
                is_background=True,
                background=self._surface_background,
                contrast_curve=_phone_watch_curve(4.5, 7),
                tone_delta_pair=pair,
            ),
        )

    @role
    def tertiary_dim(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(s.tertiary_palette, 0, 90)
            return t_max_c(s.tertiary_palette)

        return DynamicColor.from_palette(
            name="tertiary_dim",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.tertiary_dim(), self.tertiary(), 5, "darker", True, "farther"
            ),
        )

    @role
    def on_tertiary(self) -> DynamicColor:
        return self._extend(
            self._base.on_tertiary(),
            DynamicColor.from_palette(
                name="on_tertiary",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary() if _is_phone(s) else self.tertiary_dim(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def tertiary_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.tertiary_palette
            if s.platform == Platform.WATCH:
                if s.variant == Variant.TONAL_SPOT:
                    return t_max_c(p, 0, 90)
                return t_max_c(p)
            if s.variant == Variant.NEUTRAL:
                return t_max_c(p, 0, 93) if s.is_dark else t_max_c(p, 0, 96)
            if s.variant == Variant.TONAL_SPOT:
                return t_max_c(p, 0, 93 if s.is_dark else 100)
            if s.variant == Variant.EXPRESSIVE:
                if Hct.is_cyan(p.hue):
                    upper = 88
                else:
                    upper = 93 if s.is_dark else 100
                return t_max_c(p, 75, upper)
            return t_max_c(p, 0, 93) if s.is_dark else t_max_c(p, 72, 100)

        def pair(s: DynamicScheme):
            if s.platform == Platform.WATCH:
                return ToneDeltaPair(
                    self.tertiary_container(), self.tertiary_dim(), 10, "darker", True,
                    "farther",
                )
            return None

        return self._extend(
            self._base.tertiary_container(),
            DynamicColor.from_palette(
                name="tertiary_container",
                palette=lambda s: s.tertiary_palette,
                tone=tone,
                is_background=True,
                background=self._phone_background,
                tone_delta_pair=pair,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def on_tertiary_container(self) -> DynamicColor:
        return self._extend(
            self._base.on_tertiary_container(),
            DynamicColor.from_palette(
                name="on_tertiary_container",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary_container(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def tertiary_fixed(self) -> DynamicColor:
        return self._extend(
            self._base.tertiary_fixed(),
            DynamicColor.from_palette(
                name="tertiary_fixed",
                palette=lambda s: s.tertiary_palette,
                tone=lambda s: self.tertiary_container().get_tone(_light_reference(s)),
                is_background=True,
                background=self._phone_background,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._extend(
            self._base.tertiary_fixed_dim(),
            DynamicColor.from_palette(
                name="tertiary_fixed_dim",
                palette=lambda s: s.tertiary_palette,
                tone=lambda s: self.tertiary_fixed().get_tone(s),
                is_background=True,
                tone_delta_pair=lambda s: ToneDeltaPair(
                    self.tertiary_fixed_dim(), self.tertiary_fixed(), 5, "darker", True, "exact"
                ),
            ),
        )

    @role
    def on_tertiary_fixed(self) -> DynamicColor:
        return self._extend(
            self._base.on_tertiary_fixed(),
            DynamicColor.from_palette(
                name="on_tertiary_fixed",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary_fixed_dim(),
                contrast_curve=lambda s: get_curve(7),
            ),
        )

    @role
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        return self._extend(
            self._base.on_tertiary_fixed_variant(),
            DynamicColor.from_palette(
                name="on_tertiary_fixed_variant",
                palette=lambda s: s.tertiary_palette,
                background=lambda s: self.tertiary_fixed_dim(),
                contrast_curve=lambda s: get_curve(4.5),
            ),
        )

    # --- error ---

    @role
    def error(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            p = s.error_palette
            if _is_phone(s):
                return t_min_c(p, 0, 98) if s.is_dark else t_max_c(p)
            return t_min_c(p)

        def pair(s: DynamicScheme):
            if _is_phone(s):
                return ToneDeltaPair(
                    self.error_container(), self.error(), 5, "relative_lighter", True, "farther"
                )
            return None

        return self._extend(
            self._base.error(),
            DynamicColor.from_palette(
                name="error",
                palette=lambda s: s.error_palette,
                tone=tone,
                is_background=True,
                background=self._surface_background,
                contrast_curve=_phone_watch_curve(4.5, 7),
                tone_delta_pair=pair,
            ),
        )

    @role
    def error_dim(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="error_dim",
            palette=lambda s: s.error_palette,
            tone=lambda s: t_min_c(s.error_palette),
            is_background=True,
            background=lambda s: self.surface_container_high(),
            contrast_curve=lambda s: get_curve(4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                self.error_dim(), self.error(), 5, "darker", True, "farther"
            ),
        )

    @role
    def on_error(self) -> DynamicColor:
        return self._extend(
            self._base.on_error(),
            DynamicColor.from_palette(
                name="on_error",
                palette=lambda s: s.error_palette,
                background=lambda s: self.error() if _is_phone(s) else self.error_dim(),
                contrast_curve=_phone_watch_curve(6, 7),
            ),
        )

    @role
    def error_container(self) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.platform == Platform.WATCH:
                return 30
            if s.is_dark:
                return t_min_c(s.error_palette, 30, 93)
            return t_max_c(s.error_palette, 0, 90)

        def pair(s: DynamicScheme):
            if s.platform == Platform.WATCH:
                return ToneDeltaPair(
                    self.error_container(), self.error_dim(), 10, "darker", True, "farther"
                )
            return None

        return self._extend(
            self._base.error_container(),
            DynamicColor.from_palette(
                name="error_container",
                palette=lambda s: s.error_palette,
                tone=tone,
                is_background=True,
                background=self._phone_background,
                tone_delta_pair=pair,
                contrast_curve=_container_curve,
            ),
        )

    @role
    def on_error_container(self) -> DynamicColor:
        return self._extend(
            self._base.on_error_container(),
            DynamicColor.from_palette(
                name="on_error_container",
                palette=lambda s: s.error_palette,
                background=lambda s: self.error_container(),
                contrast_curve=_phone_watch_curve(4.5, 7),
            ),
        )


__all__ = [
    "ColorSpec2025",
    "find_best_tone_for_chroma",
    "get_curve",
    "t_max_c",
    "t_min_c",
]
