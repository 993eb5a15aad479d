from . import quantizer_celebi, quantizer_map, quantizer_wsmeans
from .point_provider_lab import LabPointProvider
from .quantizer_wu import QuantizerWu

__all__ = [
    "LabPointProvider",
    "QuantizerWu",
    "quantizer_celebi",
    "quantizer_map",
    "quantizer_wsmeans",
]
