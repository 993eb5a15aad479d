# dynamic_color.py – colour roles resolved lazily against a DynamicScheme
#   - DynamicColor: palette + tone + contrast constraints for one named role
#   - extend_spec_version: per-field override of a role for one spec version
#   - _Calculation2021 / _Calculation2025: tone resolution rules per version

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from .. import contrast
from ..hct.hct import Hct
from ..palettes.tonal_palette import TonalPalette
from ..utils.math_utils import clamp_double, round_half_up
from .contrast_curve import ContrastCurve
from .tone_delta_pair import ToneDeltaPair

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme


PaletteFn = Callable[["DynamicScheme"], TonalPalette]
ToneFn = Callable[["DynamicScheme"], float]
ChromaMultiplierFn = Callable[["DynamicScheme"], float]
ColorFn = Callable[["DynamicScheme"], Optional["DynamicColor"]]
CurveFn = Callable[["DynamicScheme"], Optional[ContrastCurve]]
PairFn = Callable[["DynamicScheme"], Optional[ToneDeltaPair]]

# Resolved colours are kept for at most this many schemes per role.
_HCT_CACHE_SIZE = 4


@dataclass(eq=False)
class DynamicColor:
    """
    A named colour role whose value depends on the scheme it is read from.

    palette, tone: the role's palette and its nominal tone.
    is_background: whether the role is drawn behind other roles.
    chroma_multiplier: scales palette chroma (2025 rules only).
    background, second_background: roles this one must contrast with.
    contrast_curve: ratio required against `background` per contrast level.
    tone_delta_pair: constraint tying this role's tone to another role.
    """

    name: str
    palette: PaletteFn
    tone: Optional[ToneFn] = None
    is_background: bool = False
    chroma_multiplier: Optional[ChromaMultiplierFn] = None
    background: Optional[ColorFn] = None
    second_background: Optional[ColorFn] = None
    contrast_curve: Optional[CurveFn] = None
    tone_delta_pair: Optional[PairFn] = None
    _hct_cache: dict = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.tone is None:
            self.tone = DynamicColor.get_initial_tone_from_background(self.background)
        if self.background is None and self.second_background is not None:
            raise ValueError(
                f"Color {self.name} has secondBackground defined, but background is not defined."
            )
        if self.background is None and self.contrast_curve is not None:
            raise ValueError(
                f"Color {self.name} has contrastCurve defined, but background is not defined."
            )
        if self.background is not None and self.contrast_curve is None:
            raise ValueError(
                f"Color {self.name} has background defined, but contrastCurve is not defined."
            )

    @classmethod
    def from_palette(
        cls,
        *,
        name: str = "",
        palette: PaletteFn,
        tone: Optional[ToneFn] = None,
        is_background: bool = False,
        chroma_multiplier: Optional[ChromaMultiplierFn] = None,
        background: Optional[ColorFn] = None,
        second_background: Optional[ColorFn] = None,
        contrast_curve: Optional[CurveFn] = None,
        tone_delta_pair: Optional[PairFn] = None,
    ) -> "DynamicColor":
        return cls(
            name=name,
            palette=palette,
            tone=tone,
            is_background=is_background,
            chroma_multiplier=chroma_multiplier,
            background=background,
            second_background=second_background,
            contrast_curve=contrast_curve,
            tone_delta_pair=tone_delta_pair,
        )

    @staticmethod
    def get_initial_tone_from_background(background: Optional[ColorFn]) -> ToneFn:
        """Tone of the background role, or 50 when there is none."""
        if background is None:
            return lambda s: 50.0

        def tone(s: DynamicScheme) -> float:
            bg = background(s)
            return bg.get_tone(s) if bg is not None else 50.0

        return tone

    def clone(self, name: Optional[str] = None) -> "DynamicColor":
        """A copy with an empty cache, optionally under a new name."""
        return DynamicColor.from_palette(
            name=self.name if name is None else name,
            palette=self.palette,
            tone=self.tone,
            is_background=self.is_background,
            chroma_multiplier=self.chroma_multiplier,
            background=self.background,
            second_background=self.second_background,
            contrast_curve=self.contrast_curve,
            tone_delta_pair=self.tone_delta_pair,
        )

    def clear_cache(self) -> None:
        self._hct_cache.clear()

    def get_argb(self, scheme: DynamicScheme) -> int:
        return self.get_hct(scheme).to_int()

    def get_hct(self, scheme: DynamicScheme) -> Hct:
        cached = self._hct_cache.get(scheme)
        if cached is not None:
            return cached
        answer = _calculation_for(scheme.spec_version).get_hct(scheme, self)
        # Pure function of the scheme; a racing writer stores the same value.
        if len(self._hct_cache) > _HCT_CACHE_SIZE:
            self._hct_cache.clear()
        self._hct_cache[scheme] = answer
        return answer

    def get_tone(self, scheme: DynamicScheme) -> float:
        return _calculation_for(scheme.spec_version).get_tone(scheme, self)

    # ---- foreground helpers ----

    @staticmethod
    def foreground_tone(bg_tone: float, ratio: float) -> float:
        """
        Tone with contrast `ratio` against `bg_tone`. Backgrounds darker than
        tone 60 prefer a lighter foreground; when neither side reaches the
        ratio and they are within 0.1 of each other, lighter wins.
        """
        lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
        darker_tone = contrast.darker_unsafe(bg_tone, ratio)
        lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
        darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

        if DynamicColor.tone_prefers_light_foreground(bg_tone):
            negligible_difference = (
                abs(lighter_ratio - darker_ratio) < 0.1
                and lighter_ratio < ratio
                and darker_ratio < ratio
            )
            if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
                return lighter_tone
            return darker_tone
        if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
            return darker_tone
        return lighter_tone

    @staticmethod
    def tone_prefers_light_foreground(tone: float) -> bool:
        return round_half_up(tone) < 60

    @staticmethod
    def tone_allows_light_foreground(tone: float) -> bool:
        return round_half_up(tone) <= 49

    @staticmethod
    def enable_light_foreground(tone: float) -> float:
        """Move tones that prefer, but do not allow, a light foreground to 49."""
        if DynamicColor.tone_prefers_light_foreground(
            tone
        ) and not DynamicColor.tone_allows_light_foreground(tone):
            return 49.0
        return tone


def extend_spec_version(
    original: DynamicColor, spec_version: str, extended: DynamicColor
) -> DynamicColor:
    """
    A role that behaves like `extended` for schemes of `spec_version` and like
    `original` otherwise. Both must share name and background-ness.
    """
    _validate_extended_color(original, spec_version, extended)

    def pick(s: DynamicScheme) -> DynamicColor:
        return extended if s.spec_version == spec_version else original

    def chroma_multiplier(s: DynamicScheme) -> float:
        fn = pick(s).chroma_multiplier
        return fn(s) if fn is not None else 1.0

    def background(s: DynamicScheme) -> Optional[DynamicColor]:
        fn = pick(s).background
        return fn(s) if fn is not None else None

    def second_background(s: DynamicScheme) -> Optional[DynamicColor]:
        fn = pick(s).second_background
        return fn(s) if fn is not None else None

    def contrast_curve(s: DynamicScheme) -> Optional[ContrastCurve]:
        fn = pick(s).contrast_curve
        return fn(s) if fn is not None else None

    def tone_delta_pair(s: DynamicScheme) -> Optional[ToneDeltaPair]:
        fn = pick(s).tone_delta_pair
        return fn(s) if fn is not None else None

    return DynamicColor.from_palette(
        name=original.name,
        palette=lambda s: pick(s).palette(s),
        tone=lambda s: pick(s).tone(s),
        is_background=original.is_background,
        chroma_multiplier=chroma_multiplier,
        background=background,
        second_background=second_background,
        contrast_curve=contrast_curve,
        tone_delta_pair=tone_delta_pair,
    )


def _validate_extended_color(
    original: DynamicColor, spec_version: str, extended: DynamicColor
) -> None:
    if original.name != extended.name:
        raise ValueError(
            f"Attempting to extend color {original.name} with color {extended.name} "
            f"of different name for spec version {spec_version}."
        )
    if original.is_background != extended.is_background:
        raise ValueError(
            f"Attempting to extend color {original.name} as a "
            f"{'background' if original.is_background else 'foreground'} with color "
            f"{extended.name} as a {'background' if extended.is_background else 'foreground'} "
            f"for spec version {spec_version}."
        )


# ---- tone resolution per spec version ----


def _second_background_tone(
    scheme: DynamicScheme, color: DynamicColor, answer: float, desired_ratio: float
) -> float:
    """Adjust `answer` so it contrasts with both backgrounds of `color`."""
    bg_tone1 = color.background(scheme).get_tone(scheme)
    bg_tone2 = color.second_background(scheme).get_tone(scheme)
    upper = max(bg_tone1, bg_tone2)
    lower = min(bg_tone1, bg_tone2)

    if (
        contrast.ratio_of_tones(upper, answer) >= desired_ratio
        and contrast.ratio_of_tones(lower, answer) >= desired_ratio
    ):
        return answer

    # The answer sits between the two backgrounds; go outside them.
    light_option = contrast.lighter(upper, desired_ratio)
    dark_option = contrast.darker(lower, desired_ratio)
    availables = [t for t in (light_option, dark_option) if t != -1]

    prefers_light = DynamicColor.tone_prefers_light_foreground(
        bg_tone1
    ) or DynamicColor.tone_prefers_light_foreground(bg_tone2)
    if prefers_light:
        return 100.0 if light_option < 0 else light_option
    if len(availables) == 1:
        return availables[0]
    return 0.0 if dark_option < 0 else dark_option


def _has_background_and_curve(scheme: DynamicScheme, color: DynamicColor) -> bool:
    return (
        color.background is not None
        and color.background(scheme) is not None
        and color.contrast_curve is not None
        and color.contrast_curve(scheme) is not None
    )


def _has_second_background(scheme: DynamicScheme, color: DynamicColor) -> bool:
    return color.second_background is not None and color.second_background(scheme) is not None


class _Calculation2021:
    def get_hct(self, scheme: DynamicScheme, color: DynamicColor) -> Hct:
        tone = color.get_tone(scheme)
        return color.palette(scheme).get_hct(tone)

    def get_tone(self, scheme: DynamicScheme, color: DynamicColor) -> float:
        decreasing_contrast = scheme.contrast_level < 0
        pair = color.tone_delta_pair(scheme) if color.tone_delta_pair is not None else None

        if pair is not None:
            delta = pair.delta
            a_is_nearer = (
                pair.polarity == "nearer"
                or (pair.polarity == "lighter" and not scheme.is_dark)
                or (pair.polarity == "darker" and scheme.is_dark)
            )
            nearer = pair.role_a if a_is_nearer else pair.role_b
            farther = pair.role_b if a_is_nearer else pair.role_a
            am_nearer = color.name == nearer.name
            expansion_dir = 1 if scheme.is_dark else -1

            n_tone = nearer.tone(scheme)
            f_tone = farther.tone(scheme)

            # Meet each role's own contrast requirement first.
            if (
                color.background is not None
                and nearer.contrast_curve is not None
                and farther.contrast_curve is not None
            ):
                bg = color.background(scheme)
                n_curve = nearer.contrast_curve(scheme)
                f_curve = farther.contrast_curve(scheme)
                if bg is not None and n_curve is not None and f_curve is not None:
                    bg_tone = bg.get_tone(scheme)
                    n_contrast = n_curve.get(scheme.contrast_level)
                    f_contrast = f_curve.get(scheme.contrast_level)
                    if contrast.ratio_of_tones(bg_tone, n_tone) < n_contrast:
                        n_tone = DynamicColor.foreground_tone(bg_tone, n_contrast)
                    if contrast.ratio_of_tones(bg_tone, f_tone) < f_contrast:
                        f_tone = DynamicColor.foreground_tone(bg_tone, f_contrast)
                    if decreasing_contrast:
                        n_tone = DynamicColor.foreground_tone(bg_tone, n_contrast)
                        f_tone = DynamicColor.foreground_tone(bg_tone, f_contrast)

            # Then the delta, moving the farther role first.
            if (f_tone - n_tone) * expansion_dir < delta:
                f_tone = clamp_double(0.0, 100.0, n_tone + delta * expansion_dir)
                if (f_tone - n_tone) * expansion_dir < delta:
                    n_tone = clamp_double(0.0, 100.0, f_tone - delta * expansion_dir)

            # Keep out of the 50..59 band.
            if 50 <= n_tone < 60:
                if expansion_dir > 0:
                    n_tone = 60.0
                    f_tone = max(f_tone, n_tone + delta * expansion_dir)
                else:
                    n_tone = 49.0
                    f_tone = min(f_tone, n_tone + delta * expansion_dir)
            elif 50 <= f_tone < 60:
                if pair.stay_together:
                    if expansion_dir > 0:
                        n_tone = 60.0
                        f_tone = max(f_tone, n_tone + delta * expansion_dir)
                    else:
                        n_tone = 49.0
                        f_tone = min(f_tone, n_tone + delta * expansion_dir)
                elif expansion_dir > 0:
                    f_tone = 60.0
                else:
                    f_tone = 49.0

            return n_tone if am_nearer else f_tone

        answer = color.tone(scheme)
        if not _has_background_and_curve(scheme, color):
            return answer

        bg_tone = color.background(scheme).get_tone(scheme)
        desired_ratio = color.contrast_curve(scheme).get(scheme.contrast_level)

        if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = DynamicColor.foreground_tone(bg_tone, desired_ratio)
        if decreasing_contrast:
            answer = DynamicColor.foreground_tone(bg_tone, desired_ratio)

        if color.is_background and 50 <= answer < 60:
            if contrast.ratio_of_tones(49, bg_tone) >= desired_ratio:
                answer = 49.0
            else:
                answer = 60.0

        if not _has_second_background(scheme, color):
            return answer
        return _second_background_tone(scheme, color, answer, desired_ratio)


class _Calculation2025:
    def get_hct(self, scheme: DynamicScheme, color: DynamicColor) -> Hct:
        palette = color.palette(scheme)
        tone = color.get_tone(scheme)
        multiplier = color.chroma_multiplier(scheme) if color.chroma_multiplier is not None else 1.0
        return Hct.from_hct(palette.hue, palette.chroma * multiplier, tone)

    def get_tone(self, scheme: DynamicScheme, color: DynamicColor) -> float:
        pair = color.tone_delta_pair(scheme) if color.tone_delta_pair is not None else None

        if pair is not None:
            if (
                pair.polarity == "darker"
                or (pair.polarity == "relative_lighter" and scheme.is_dark)
                or (pair.polarity == "relative_darker" and not scheme.is_dark)
            ):
                absolute_delta = -pair.delta
            else:
                absolute_delta = pair.delta

            am_role_a = color.name == pair.role_a.name
            self_role = pair.role_a if am_role_a else pair.role_b
            ref_role = pair.role_b if am_role_a else pair.role_a
            self_tone = self_role.tone(scheme)
            ref_tone = ref_role.get_tone(scheme)
            relative_delta = absolute_delta * (1 if am_role_a else -1)

            if pair.constraint == "exact":
                self_tone = clamp_double(0.0, 100.0, ref_tone + relative_delta)
            elif pair.constraint == "nearer":
                if relative_delta > 0:
                    self_tone = clamp_double(
                        0.0, 100.0, clamp_double(ref_tone, ref_tone + relative_delta, self_tone)
                    )
                else:
                    self_tone = clamp_double(
                        0.0, 100.0, clamp_double(ref_tone + relative_delta, ref_tone, self_tone)
                    )
            elif pair.constraint == "farther":
                if relative_delta > 0:
                    self_tone = clamp_double(ref_tone + relative_delta, 100.0, self_tone)
                else:
                    self_tone = clamp_double(0.0, ref_tone + relative_delta, self_tone)

            if color.background is not None and color.contrast_curve is not None:
                background = color.background(scheme)
                curve = color.contrast_curve(scheme)
                if background is not None and curve is not None:
                    bg_tone = background.get_tone(scheme)
                    self_contrast = curve.get(scheme.contrast_level)
                    if not (
                        contrast.ratio_of_tones(bg_tone, self_tone) >= self_contrast
                        and scheme.contrast_level >= 0
                    ):
                        self_tone = DynamicColor.foreground_tone(bg_tone, self_contrast)

            if color.is_background and not color.name.endswith("_fixed_dim"):
                self_tone = _bucket_background_tone(self_tone)
            return self_tone

        answer = color.tone(scheme)
        if not _has_background_and_curve(scheme, color):
            return answer

        bg_tone = color.background(scheme).get_tone(scheme)
        desired_ratio = color.contrast_curve(scheme).get(scheme.contrast_level)

        if not (
            contrast.ratio_of_tones(bg_tone, answer) >= desired_ratio
            and scheme.contrast_level >= 0
        ):
            answer = DynamicColor.foreground_tone(bg_tone, desired_ratio)

        if color.is_background and not color.name.endswith("_fixed_dim"):
            answer = _bucket_background_tone(answer)

        if not _has_second_background(scheme, color):
            return answer
        return _second_background_tone(scheme, color, answer, desired_ratio)


def _bucket_background_tone(tone: float) -> float:
    """Backgrounds never sit between 49 and 65."""
    if tone >= 57:
        return clamp_double(65.0, 100.0, tone)
    return clamp_double(0.0, 49.0, tone)


_CALCULATION_2021 = _Calculation2021()
_CALCULATION_2025 = _Calculation2025()


def _calculation_for(spec_version: str) -> _Calculation2021 | _Calculation2025:
    return _CALCULATION_2025 if spec_version == "2025" else _CALCULATION_2021


__all__ = ["DynamicColor", "extend_spec_version"]
