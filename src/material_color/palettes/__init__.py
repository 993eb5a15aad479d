from .core_palettes import CorePalettes
from .tonal_palette import KeyColor, TonalPalette

__all__ = ["CorePalettes", "KeyColor", "TonalPalette"]
