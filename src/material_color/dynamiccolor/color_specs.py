"""Shared role tables, one per spec version."""

from __future__ import annotations

from typing import Union

from .color_spec_2021 import ColorSpec2021
from .color_spec_2025 import ColorSpec2025

_COLOR_SPEC_2021 = ColorSpec2021()
_COLOR_SPEC_2025 = ColorSpec2025()


def get_color_spec(spec_version: str) -> Union[ColorSpec2021, ColorSpec2025]:
    """Role table for `spec_version`; anything but "2025" gets the 2021 table."""
    return _COLOR_SPEC_2025 if spec_version == "2025" else _COLOR_SPEC_2021


__all__ = ["get_color_spec"]
