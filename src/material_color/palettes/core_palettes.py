from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tonal_palette import TonalPalette

if TYPE_CHECKING:
    from ..dynamiccolor.dynamic_scheme import DynamicScheme


@dataclass(frozen=True)
class CorePalettes:
    """The five accent and neutral palettes a scheme is built from."""

    primary: TonalPalette
    secondary: TonalPalette
    tertiary: TonalPalette
    neutral: TonalPalette
    neutral_variant: TonalPalette

    @classmethod
    def from_scheme(cls, scheme: DynamicScheme) -> "CorePalettes":
        return cls(
            primary=scheme.primary_palette,
            secondary=scheme.secondary_palette,
            tertiary=scheme.tertiary_palette,
            neutral=scheme.neutral_palette,
            neutral_variant=scheme.neutral_variant_palette,
        )

    def items(self) -> list[tuple[str, TonalPalette]]:
        return [
            ("primary", self.primary),
            ("secondary", self.secondary),
            ("tertiary", self.tertiary),
            ("neutral", self.neutral),
            ("neutral_variant", self.neutral_variant),
        ]


__all__ = ["CorePalettes"]
