# color_spec_2021.py – the original Material colour roles
#   - ColorSpec2021: one memoized DynamicColor per role
#   - roles refer to each other through `roles`, so a newer table can reuse
#     these definitions while its own overrides take part in cross-references

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Optional

from .. import dislike
from ..hct.hct import Hct
from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor
from .tone_delta_pair import ToneDeltaPair
from .variant import Variant

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme


def role(method):
    """Build a role once per table and hand out the same object afterwards."""
    name = method.__name__

    @functools.wraps(method)
    def wrapper(self):
        colors = self._colors
        if name not in colors:
            colors[name] = method(self)
        return colors[name]

    return wrapper


def is_fidelity(scheme: DynamicScheme) -> bool:
    return scheme.variant in (Variant.FIDELITY, Variant.CONTENT)


def is_monochrome(scheme: DynamicScheme) -> bool:
    return scheme.variant == Variant.MONOCHROME


def find_desired_chroma_by_tone(
    hue: float, chroma: float, tone: float, by_decreasing_tone: bool
) -> float:
    """
    Walk the tone away from `tone` until the palette can hold `chroma`, or
    until chroma starts dropping again.
    """
    answer = tone
    closest_to_chroma = Hct.from_hct(hue, chroma, tone)
    if closest_to_chroma.chroma < chroma:
        chroma_peak = closest_to_chroma.chroma
        while closest_to_chroma.chroma < chroma:
            answer += -1.0 if by_decreasing_tone else 1.0
            potential = Hct.from_hct(hue, chroma, answer)
            if chroma_peak > potential.chroma:
                break
            if abs(potential.chroma - chroma) < 0.4:
                break
            if abs(potential.chroma - chroma) < abs(closest_to_chroma.chroma - chroma):
                closest_to_chroma = potential
            chroma_peak = max(chroma_peak, potential.chroma)
    return answer


def _dark_light(dark: float, light: float):
    return lambda s: dark if s.is_dark else light


def _curve(low: float, normal: float, medium: float, high: float):
    curve = ContrastCurve(low, normal, medium, high)
    return lambda s: curve


class ColorSpec2021:
    """Colour roles as defined by the 2021 Material guidelines."""

    def __init__(self, roles: Optional[object] = None) -> None:
        self._roles = self if roles is None else roles
        self._colors: dict[str, Optional[DynamicColor]] = {}

    # --- key colours ---

    @role
    def primary_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="primary_palette_key_color",
            palette=lambda s: s.primary_palette,
            tone=lambda s: s.primary_palette.key_color.tone,
        )

    @role
    def secondary_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="secondary_palette_key_color",
            palette=lambda s: s.secondary_palette,
            tone=lambda s: s.secondary_palette.key_color.tone,
        )

    @role
    def tertiary_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="tertiary_palette_key_color",
            palette=lambda s: s.tertiary_palette,
            tone=lambda s: s.tertiary_palette.key_color.tone,
        )

    @role
    def neutral_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="neutral_palette_key_color",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: s.neutral_palette.key_color.tone,
        )

    @role
    def neutral_variant_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="neutral_variant_palette_key_color",
            palette=lambda s: s.neutral_variant_palette,
            tone=lambda s: s.neutral_variant_palette.key_color.tone,
        )

    @role
    def error_palette_key_color(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="error_palette_key_color",
            palette=lambda s: s.error_palette,
            tone=lambda s: s.error_palette.key_color.tone,
        )

    # --- surfaces ---

    @role
    def background(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="background",
            palette=lambda s: s.neutral_palette,
            tone=_dark_light(6, 98),
            is_background=True,
        )

    @role
    def on_background(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="on_background",
            palette=lambda s: s.neutral_palette,
            tone=_dark_light(90, 10),
            background=lambda s: r.background(),
            contrast_curve=_curve(3, 3, 4.5, 7),
        )

    @role
    def surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="surface",
            palette=lambda s: s.neutral_palette,
            tone=_dark_light(6, 98),
            is_background=True,
        )

    @role
    def surface_dim(self) -> DynamicColor:
        light = ContrastCurve(87, 87, 80, 75)
        return DynamicColor.from_palette(
            name="surface_dim",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: 6 if s.is_dark else light.get(s.contrast_level),
            is_background=True,
        )

    @role
    def surface_bright(self) -> DynamicColor:
        dark = ContrastCurve(24, 24, 29, 34)
        return DynamicColor.from_palette(
            name="surface_bright",
            palette=lambda s: s.neutral_palette,
            tone=lambda s: dark.get(s.contrast_level) if s.is_dark else 98,
            is_background=True,
        )

    def _surface_container(self, name: str, dark: ContrastCurve, light) -> DynamicColor:
        def tone(s: DynamicScheme) -> float:
            if s.is_dark:
                return dark.get(s.contrast_level)
            return light.get(s.contrast_level) if isinstance(light, ContrastCurve) else light

        return DynamicColor.from_palette(
            name=name, palette=lambda s: s.neutral_palette, tone=tone, is_background=True
        )

    @role
    def surface_container_lowest(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_lowest", ContrastCurve(4, 4, 2, 0), 100
        )

    @role
    def surface_container_low(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_low", ContrastCurve(10, 10, 11, 12), ContrastCurve(96, 96, 96, 95)
        )

    @role
    def surface_container(self) -> DynamicColor:
        return self._surface_container(
            "surface_container", ContrastCurve(12, 12, 16, 20), ContrastCurve(94, 94, 92, 90)
        )

    @role
    def surface_container_high(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_high", ContrastCurve(17, 17, 21, 25), ContrastCurve(92, 92, 88, 85)
        )

    @role
    def surface_container_highest(self) -> DynamicColor:
        return self._surface_container(
            "surface_container_highest",
            ContrastCurve(22, 22, 26, 30),
            ContrastCurve(90, 90, 84, 80),
        )

    @role
    def on_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_surface",
            palette=lambda s: s.neutral_palette,
            tone=_dark_light(90, 10),
            background=self._roles.highest_surface,
            contrast_curve=_curve(4.5, 7, 11, 21),
        )

    @role
    def surface_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="surface_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=_dark_light(30, 90),
            is_background=True,
        )

    @role
    def on_surface_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="on_surface_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=_dark_light(80, 30),
            background=self._roles.highest_surface,
            contrast_curve=_curve(3, 4.5, 7, 11),
        )

    @role
    def inverse_surface(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="inverse_surface",
            palette=lambda s: s.neutral_palette,
            tone=_dark_light(90, 20),
            is_background=True,
        )

    @role
    def inverse_on_surface(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="inverse_on_surface",
            palette=lambda s: s.neutral_palette,
            tone=_dark_light(20, 95),
            background=lambda s: r.inverse_surface(),
            contrast_curve=_curve(4.5, 7, 11, 21),
        )

    @role
    def outline(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="outline",
            palette=lambda s: s.neutral_variant_palette,
            tone=_dark_light(60, 50),
            background=self._roles.highest_surface,
            contrast_curve=_curve(1.5, 3, 4.5, 7),
        )

    @role
    def outline_variant(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="outline_variant",
            palette=lambda s: s.neutral_variant_palette,
            tone=_dark_light(30, 80),
            background=self._roles.highest_surface,
            contrast_curve=_curve(1, 1, 3, 4.5),
        )

    @role
    def shadow(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="shadow", palette=lambda s: s.neutral_palette, tone=lambda s: 0
        )

    @role
    def scrim(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="scrim", palette=lambda s: s.neutral_palette, tone=lambda s: 0
        )

    @role
    def surface_tint(self) -> DynamicColor:
        return DynamicColor.from_palette(
            name="surface_tint",
            palette=lambda s: s.primary_palette,
            tone=_dark_light(80, 40),
            is_background=True,
        )

    # --- primary ---

    @role
    def primary(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 100 if s.is_dark else 0
            return 80 if s.is_dark else 40

        return DynamicColor.from_palette(
            name="primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(3, 4.5, 7, 7),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.primary_container(), r.primary(), 10, "nearer", False
            ),
        )

    @role
    def primary_dim(self) -> Optional[DynamicColor]:
        return None

    @role
    def on_primary(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 10 if s.is_dark else 90
            return 20 if s.is_dark else 100

        return DynamicColor.from_palette(
            name="on_primary",
            palette=lambda s: s.primary_palette,
            tone=tone,
            background=lambda s: r.primary(),
            contrast_curve=_curve(4.5, 7, 11, 21),
        )

    @role
    def primary_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_fidelity(s):
                return s.source_color_hct.tone
            if is_monochrome(s):
                return 85 if s.is_dark else 25
            return 30 if s.is_dark else 90

        return DynamicColor.from_palette(
            name="primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(1, 1, 3, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.primary_container(), r.primary(), 10, "nearer", False
            ),
        )

    @role
    def on_primary_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_fidelity(s):
                return DynamicColor.foreground_tone(r.primary_container().tone(s), 4.5)
            if is_monochrome(s):
                return 0 if s.is_dark else 100
            return 90 if s.is_dark else 30

        return DynamicColor.from_palette(
            name="on_primary_container",
            palette=lambda s: s.primary_palette,
            tone=tone,
            background=lambda s: r.primary_container(),
            contrast_curve=_curve(3, 4.5, 7, 11),
        )

    @role
    def inverse_primary(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="inverse_primary",
            palette=lambda s: s.primary_palette,
            tone=_dark_light(40, 80),
            background=lambda s: r.inverse_surface(),
            contrast_curve=_curve(3, 4.5, 7, 7),
        )

    # --- secondary ---

    @role
    def secondary(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="secondary",
            palette=lambda s: s.secondary_palette,
            tone=_dark_light(80, 40),
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(3, 4.5, 7, 7),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.secondary_container(), r.secondary(), 10, "nearer", False
            ),
        )

    @role
    def secondary_dim(self) -> Optional[DynamicColor]:
        return None

    @role
    def on_secondary(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 10 if s.is_dark else 100
            return 20 if s.is_dark else 100

        return DynamicColor.from_palette(
            name="on_secondary",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            background=lambda s: r.secondary(),
            contrast_curve=_curve(4.5, 7, 11, 21),
        )

    @role
    def secondary_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            initial_tone = 30 if s.is_dark else 90
            if is_monochrome(s):
                return 30 if s.is_dark else 85
            if not is_fidelity(s):
                return initial_tone
            return find_desired_chroma_by_tone(
                s.secondary_palette.hue,
                s.secondary_palette.chroma,
                initial_tone,
                not s.is_dark,
            )

        return DynamicColor.from_palette(
            name="secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(1, 1, 3, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.secondary_container(), r.secondary(), 10, "nearer", False
            ),
        )

    @role
    def on_secondary_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 90 if s.is_dark else 10
            if not is_fidelity(s):
                return 90 if s.is_dark else 30
            return DynamicColor.foreground_tone(r.secondary_container().tone(s), 4.5)

        return DynamicColor.from_palette(
            name="on_secondary_container",
            palette=lambda s: s.secondary_palette,
            tone=tone,
            background=lambda s: r.secondary_container(),
            contrast_curve=_curve(3, 4.5, 7, 11),
        )

    # --- tertiary ---

    @role
    def tertiary(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 90 if s.is_dark else 25
            return 80 if s.is_dark else 40

        return DynamicColor.from_palette(
            name="tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(3, 4.5, 7, 7),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.tertiary_container(), r.tertiary(), 10, "nearer", False
            ),
        )

    @role
    def tertiary_dim(self) -> Optional[DynamicColor]:
        return None

    @role
    def on_tertiary(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 10 if s.is_dark else 90
            return 20 if s.is_dark else 100

        return DynamicColor.from_palette(
            name="on_tertiary",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            background=lambda s: r.tertiary(),
            contrast_curve=_curve(4.5, 7, 11, 21),
        )

    @role
    def tertiary_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 60 if s.is_dark else 49
            if not is_fidelity(s):
                return 30 if s.is_dark else 90
            proposed = s.tertiary_palette.get_hct(s.source_color_hct.tone)
            return dislike.fix_if_disliked(proposed).tone

        return DynamicColor.from_palette(
            name="tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(1, 1, 3, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.tertiary_container(), r.tertiary(), 10, "nearer", False
            ),
        )

    @role
    def on_tertiary_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 0 if s.is_dark else 100
            if not is_fidelity(s):
                return 90 if s.is_dark else 30
            return DynamicColor.foreground_tone(r.tertiary_container().tone(s), 4.5)

        return DynamicColor.from_palette(
            name="on_tertiary_container",
            palette=lambda s: s.tertiary_palette,
            tone=tone,
            background=lambda s: r.tertiary_container(),
            contrast_curve=_curve(3, 4.5, 7, 11),
        )

    # --- error ---

    @role
    def error(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="error",
            palette=lambda s: s.error_palette,
            tone=_dark_light(80, 40),
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(3, 4.5, 7, 7),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.error_container(), r.error(), 10, "nearer", False
            ),
        )

    @role
    def error_dim(self) -> Optional[DynamicColor]:
        return None

    @role
    def on_error(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="on_error",
            palette=lambda s: s.error_palette,
            tone=_dark_light(20, 100),
            background=lambda s: r.error(),
            contrast_curve=_curve(4.5, 7, 11, 21),
        )

    @role
    def error_container(self) -> DynamicColor:
        r = self._roles
        return DynamicColor.from_palette(
            name="error_container",
            palette=lambda s: s.error_palette,
            tone=_dark_light(30, 90),
            is_background=True,
            background=r.highest_surface,
            contrast_curve=_curve(1, 1, 3, 4.5),
            tone_delta_pair=lambda s: ToneDeltaPair(
                r.error_container(), r.error(), 10, "nearer", False
            ),
        )

    @role
    def on_error_container(self) -> DynamicColor:
        r = self._roles

        def tone(s: DynamicScheme) -> float:
            if is_monochrome(s):
                return 90 if s.is_dark else 10
            return 90 if s.is_dark else 30

        return DynamicColor.from_palette(
            name="on_error_container",
            palette=lambda s: s.error_palette,
            tone=tone,
            background=lambda s: r.error_container(),
            contrast_curve=_curve(3, 4.5, 7, 11),
        )

    # --- fixed colours ---

    def _fixed(self, name: str, palette, mono: float, other: float, pair) -> DynamicColor:
        return DynamicColor.from_palette(
            name=name,
            palette=palette,
            tone=lambda s: mono if is_monochrome(s) else other,
            is_background=True,
            background=self._roles.highest_surface,
            contrast_curve=_curve(1, 1, 3, 4.5),
            tone_delta_pair=pair,
        )

    def _on_fixed(
        self, name: str, palette, mono: float, other: float, fixed, fixed_dim, curve
    ) -> DynamicColor:
        return DynamicColor.from_palette(
            name=name,
            palette=palette,
            tone=lambda s: mono if is_monochrome(s) else other,
            background=lambda s: fixed_dim(),
            second_background=lambda s: fixed(),
            contrast_curve=curve,
        )

    def _primary_fixed_pair(self, s: DynamicScheme) -> ToneDeltaPair:
        r = self._roles
        return ToneDeltaPair(r.primary_fixed(), r.primary_fixed_dim(), 10, "lighter", True)

    def _secondary_fixed_pair(self, s: DynamicScheme) -> ToneDeltaPair:
        r = self._roles
        return ToneDeltaPair(r.secondary_fixed(), r.secondary_fixed_dim(), 10, "lighter", True)

    def _tertiary_fixed_pair(self, s: DynamicScheme) -> ToneDeltaPair:
        r = self._roles
        return ToneDeltaPair(r.tertiary_fixed(), r.tertiary_fixed_dim(), 10, "lighter", True)

    @role
    def primary_fixed(self) -> DynamicColor:
        return self._fixed(
            "primary_fixed", lambda s: s.primary_palette, 40, 90, self._primary_fixed_pair
        )

    @role
    def primary_fixed_dim(self) -> DynamicColor:
        return self._fixed(
            "primary_fixed_dim", lambda s: s.primary_palette, 30, 80, self._primary_fixed_pair
        )

    @role
    def on_primary_fixed(self) -> DynamicColor:
        r = self._roles
        return self._on_fixed(
            "on_primary_fixed", lambda s: s.primary_palette, 100, 10,
            r.primary_fixed, r.primary_fixed_dim, _curve(4.5, 7, 11, 21),
        )

    @role
    def on_primary_fixed_variant(self) -> DynamicColor:
        r = self._roles
        return self._on_fixed(
            "on_primary_fixed_variant", lambda s: s.primary_palette, 90, 30,
            r.primary_fixed, r.primary_fixed_dim, _curve(3, 4.5, 7, 11),
        )

    @role
    def secondary_fixed(self) -> DynamicColor:
        return self._fixed(
            "secondary_fixed", lambda s: s.secondary_palette, 80, 90, self._secondary_fixed_pair
        )

    @role
    def secondary_fixed_dim(self) -> DynamicColor:
        return self._fixed(
            "secondary_fixed_dim", lambda s: s.secondary_palette, 70, 80,
            self._secondary_fixed_pair,
        )

    @role
    def on_secondary_fixed(self) -> DynamicColor:
        r = self._roles
        return self._on_fixed(
            "on_secondary_fixed", lambda s: s.secondary_palette, 10, 10,
            r.secondary_fixed, r.secondary_fixed_dim, _curve(4.5, 7, 11, 21),
        )

    @role
    def on_secondary_fixed_variant(self) -> DynamicColor:
        r = self._roles
        return self._on_fixed(
            "on_secondary_fixed_variant", lambda s: s.secondary_palette, 25, 30,
            r.secondary_fixed, r.secondary_fixed_dim, _curve(3, 4.5, 7, 11),
        )

    @role
    def tertiary_fixed(self) -> DynamicColor:
        return self._fixed(
            "tertiary_fixed", lambda s: s.tertiary_palette, 40, 90, self._tertiary_fixed_pair
        )

    @role
    def tertiary_fixed_dim(self) -> DynamicColor:
        return self._fixed(
            "tertiary_fixed_dim", lambda s: s.tertiary_palette, 30, 80, self._tertiary_fixed_pair
        )

    @role
    def on_tertiary_fixed(self) -> DynamicColor:
        r = self._roles
        return self._on_fixed(
            "on_tertiary_fixed", lambda s: s.tertiary_palette, 100, 10,
            r.tertiary_fixed, r.tertiary_fixed_dim, _curve(4.5, 7, 11, 21),
        )

    @role
    def on_tertiary_fixed_variant(self) -> DynamicColor:
        r = self._roles
        return self._on_fixed(
            "on_tertiary_fixed_variant", lambda s: s.tertiary_palette, 90, 30,
            r.tertiary_fixed, r.tertiary_fixed_dim, _curve(3, 4.5, 7, 11),
        )

    # --- helpers ---

    def highest_surface(self, s: DynamicScheme) -> DynamicColor:
        r = self._roles
        return r.surface_bright() if s.is_dark else r.surface_dim()


__all__ = [
    "ColorSpec2021",
    "find_desired_chroma_by_tone",
    "is_fidelity",
    "is_monochrome",
]
