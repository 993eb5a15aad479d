# dynamic_scheme.py – a seed colour bound to variant, mode, platform and contrast
#   - derives its six tonal palettes through the spec version's palette rules
#   - exposes one ARGB property per Material colour role
#   - the *_dim roles only exist for "2025" schemes

from __future__ import annotations

import logging
from typing import Optional

from ..hct.hct import Hct
from ..palettes.tonal_palette import TonalPalette
from .color_specs import get_color_spec
from .dynamic_color import DynamicColor
from .material_dynamic_colors import ROLE_NAMES, MaterialDynamicColors
from .palette_specs import get_palette_spec, get_piecewise_hue, get_rotated_hue
from .variant import Platform, SpecVersion, Variant

log = logging.getLogger(__name__)

# --- constants ---
DEFAULT_SPEC_VERSION = SpecVersion.SPEC_2021
DEFAULT_PLATFORM = Platform.PHONE
DEFAULT_SOURCE_ARGB = 0xFF6750A4
_DIM_ROLES = ("primary_dim", "secondary_dim", "tertiary_dim", "error_dim")


def _fallback_error_palette() -> TonalPalette:
    return TonalPalette.from_hue_and_chroma(25.0, 84.0)


class DynamicScheme:
    """
    Immutable bundle of everything a colour role needs to resolve.

    Palettes left as None are derived from the seed. Two schemes built from the
    same arguments resolve every role to the same ARGB, but they are distinct
    objects for the per-role caches.
    """

    DEFAULT_SPEC_VERSION = DEFAULT_SPEC_VERSION
    DEFAULT_PLATFORM = DEFAULT_PLATFORM

    get_piecewise_hue = staticmethod(get_piecewise_hue)
    get_rotated_hue = staticmethod(get_rotated_hue)

    def __init__(
        self,
        *,
        source_color_hct: Hct,
        is_dark: bool,
        variant,
        contrast_level: float = 0.0,
        spec_version=DEFAULT_SPEC_VERSION,
        platform=DEFAULT_PLATFORM,
        primary_palette: Optional[TonalPalette] = None,
        secondary_palette: Optional[TonalPalette] = None,
        tertiary_palette: Optional[TonalPalette] = None,
        neutral_palette: Optional[TonalPalette] = None,
        neutral_variant_palette: Optional[TonalPalette] = None,
        error_palette: Optional[TonalPalette] = None,
    ) -> None:
        spec_version = SpecVersion(spec_version)
        platform = Platform(platform)
        self.source_color_hct = source_color_hct
        self.source_color_argb = source_color_hct.to_int()
        self.variant = variant
        self.contrast_level = float(contrast_level)
        self.is_dark = bool(is_dark)
        self.platform = platform
        self.spec_version = spec_version

        spec = get_palette_spec(spec_version)
        args = (variant, source_color_hct, self.is_dark, platform, self.contrast_level)
        self.primary_palette = primary_palette or spec.get_primary_palette(*args)
        self.secondary_palette = secondary_palette or spec.get_secondary_palette(*args)
        self.tertiary_palette = tertiary_palette or spec.get_tertiary_palette(*args)
        self.neutral_palette = neutral_palette or spec.get_neutral_palette(*args)
        self.neutral_variant_palette = (
            neutral_variant_palette or spec.get_neutral_variant_palette(*args)
        )
        self.error_palette = (
            error_palette or spec.get_error_palette(*args) or _fallback_error_palette()
        )
        self.colors = MaterialDynamicColors()
        log.debug("built %s", self)

    @classmethod
    def from_(
        cls,
        *,
        is_dark: bool,
        source_color_hct: Optional[Hct] = None,
        contrast_level: float = 0.0,
        variant=Variant.TONAL_SPOT,
        spec_version=DEFAULT_SPEC_VERSION,
        platform=DEFAULT_PLATFORM,
        primary_palette: Optional[TonalPalette] = None,
        secondary_palette: Optional[TonalPalette] = None,
        tertiary_palette: Optional[TonalPalette] = None,
        neutral_palette: Optional[TonalPalette] = None,
        neutral_variant_palette: Optional[TonalPalette] = None,
        error_palette: Optional[TonalPalette] = None,
        primary_palette_key_color: Optional[Hct] = None,
        secondary_palette_key_color: Optional[Hct] = None,
        tertiary_palette_key_color: Optional[Hct] = None,
        neutral_palette_key_color: Optional[Hct] = None,
        neutral_variant_palette_key_color: Optional[Hct] = None,
        error_palette_key_color: Optional[Hct] = None,
    ) -> "DynamicScheme":
        """
        Keyword factory. Each palette may instead be derived from its own key
        colour, in place of the seed, with the same variant rules.
        """
        if source_color_hct is None:
            source_color_hct = Hct.from_int(DEFAULT_SOURCE_ARGB)
        spec = get_palette_spec(spec_version)
        platform = Platform(platform)

        def derive(getter, key_color: Optional[Hct]):
            seed = source_color_hct if key_color is None else key_color
            return getter(variant, seed, is_dark, platform, contrast_level)

        return cls(
            source_color_hct=source_color_hct,
            is_dark=is_dark,
            contrast_level=contrast_level,
            variant=variant,
            spec_version=spec_version,
            platform=platform,
            primary_palette=primary_palette
            or derive(spec.get_primary_palette, primary_palette_key_color),
            secondary_palette=secondary_palette
            or derive(spec.get_secondary_palette, secondary_palette_key_color),
            tertiary_palette=tertiary_palette
            or derive(spec.get_tertiary_palette, tertiary_palette_key_color),
            neutral_palette=neutral_palette
            or derive(spec.get_neutral_palette, neutral_palette_key_color),
            neutral_variant_palette=neutral_variant_palette
            or derive(spec.get_neutral_variant_palette, neutral_variant_palette_key_color),
            error_palette=error_palette
            or derive(spec.get_error_palette, error_palette_key_color)
            or _fallback_error_palette(),
        )

    def copy_with(self, *, is_dark: bool, contrast_level: float) -> "DynamicScheme":
        """Same palettes and seed under a different mode and contrast level."""
        return DynamicScheme(
            source_color_hct=self.source_color_hct,
            is_dark=is_dark,
            contrast_level=contrast_level,
            variant=self.variant,
            spec_version=self.spec_version,
            platform=self.platform,
            primary_palette=self.primary_palette,
            secondary_palette=self.secondary_palette,
            tertiary_palette=self.tertiary_palette,
            neutral_palette=self.neutral_palette,
            neutral_variant_palette=self.neutral_variant_palette,
            error_palette=self.error_palette,
        )

    def get_argb(self, dynamic_color: DynamicColor) -> int:
        return dynamic_color.get_argb(self)

    def get_hct(self, dynamic_color: DynamicColor) -> Hct:
        return dynamic_color.get_hct(self)

    def to_dict(self) -> dict[str, int]:
        """Every role defined for this scheme, by name."""
        out = {}
        for name in ROLE_NAMES:
            if name in _DIM_ROLES and self.spec_version != SpecVersion.SPEC_2025:
                continue
            out[name] = getattr(self, name)
        return out

    def __str__(self) -> str:
        try:
            variant = Variant(self.variant).name
        except ValueError:
            variant = str(self.variant)
        return (
            f"Scheme: variant={variant}, mode={'dark' if self.is_dark else 'light'}, "
            f"platform={self.platform.name.lower()}, "
            f"contrastLevel={self.contrast_level:.1f}, seed={self.source_color_hct}, "
            f"specVersion={self.spec_version}"
        )


def _role_property(name: str) -> property:
    def getter(self: DynamicScheme) -> int:
        return self.get_argb(getattr(self.colors, name)())

    getter.__name__ = name
    return property(getter, doc=f"ARGB of the {name} role.")


def _dim_role_property(name: str) -> property:
    head, _ = name.split("_")
    label = f"{head}Dim"

    def getter(self: DynamicScheme) -> int:
        color = getattr(get_color_spec(self.spec_version), name)()
        if color is None:
            raise ValueError(f"`{label}` color is undefined prior to 2025 spec.")
        return self.get_argb(color)

    getter.__name__ = name
    return property(
        getter,
        doc=f"ARGB of the {name} role; 2025 schemes only, older schemes raise ValueError "
        "instead of resolving the 2025 rule against their palettes.",
    )


for _name in ROLE_NAMES:
    if _name in _DIM_ROLES:
        setattr(DynamicScheme, _name, _dim_role_property(_name))
    else:
        setattr(DynamicScheme, _name, _role_property(_name))
del _name


__all__ = ["DynamicScheme", "DEFAULT_SPEC_VERSION", "DEFAULT_PLATFORM"]
