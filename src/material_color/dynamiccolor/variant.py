"""Enumerations that parameterize a DynamicScheme."""

from __future__ import annotations

from enum import Enum, IntEnum


class Variant(IntEnum):
    """Style family used to derive a scheme's palettes from its seed."""

    MONOCHROME = 0
    NEUTRAL = 1
    TONAL_SPOT = 2
    VIBRANT = 3
    EXPRESSIVE = 4
    FIDELITY = 5
    CONTENT = 6
    RAINBOW = 7
    FRUIT_SALAD = 8


class Platform(IntEnum):
    """Device class a scheme targets. Only the 2025 rules look at it."""

    PHONE = 0
    WATCH = 1


class SpecVersion(str, Enum):
    """Ruleset used for palette generation and tone resolution."""

    SPEC_2021 = "2021"
    SPEC_2025 = "2025"

    def __str__(self) -> str:
        return self.value


__all__ = ["Variant", "Platform", "SpecVersion"]
