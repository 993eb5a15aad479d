from .contrast_curve import ContrastCurve
from .dynamic_color import DynamicColor, extend_spec_version
from .dynamic_scheme import DynamicScheme
from .material_dynamic_colors import MaterialDynamicColors
from .tone_delta_pair import ToneDeltaPair
from .variant import Platform, SpecVersion, Variant

__all__ = [
    "ContrastCurve",
    "DynamicColor",
    "DynamicScheme",
    "MaterialDynamicColors",
    "Platform",
    "SpecVersion",
    "ToneDeltaPair",
    "Variant",
    "extend_spec_version",
]
