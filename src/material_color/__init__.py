"""
Material colour utilities: the HCT colour space, tonal palettes, dynamic
colour schemes, contrast helpers and image quantization.
"""

from .blend import cam16_ucs, harmonize, hct_hue
from .contrast import darker, darker_unsafe, lighter, lighter_unsafe, ratio_of_tones
from .dislike import fix_if_disliked, is_disliked
from .dynamiccolor import (
    ContrastCurve,
    DynamicColor,
    DynamicScheme,
    MaterialDynamicColors,
    Platform,
    SpecVersion,
    ToneDeltaPair,
    Variant,
)
from .hct import Cam16, Hct, ViewingConditions
from .palettes import CorePalettes, KeyColor, TonalPalette
from .quantize import QuantizerWu, quantizer_celebi, quantizer_wsmeans
from .temperature import TemperatureCache
from .utils.image_utils import source_color_from_image_bytes
from .utils.string_utils import argb_from_hex, hex_from_argb

__version__ = "0.1.0"

__all__ = [
    "Cam16",
    "ContrastCurve",
    "CorePalettes",
    "DynamicColor",
    "DynamicScheme",
    "Hct",
    "KeyColor",
    "MaterialDynamicColors",
    "Platform",
    "QuantizerWu",
    "SpecVersion",
    "TemperatureCache",
    "TonalPalette",
    "ToneDeltaPair",
    "Variant",
    "ViewingConditions",
    "argb_from_hex",
    "cam16_ucs",
    "darker",
    "darker_unsafe",
    "fix_if_disliked",
    "harmonize",
    "hct_hue",
    "hex_from_argb",
    "is_disliked",
    "lighter",
    "lighter_unsafe",
    "quantizer_celebi",
    "quantizer_wsmeans",
    "ratio_of_tones",
    "source_color_from_image_bytes",
]
