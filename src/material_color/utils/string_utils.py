"""Hex string conversions for ARGB integers."""

from __future__ import annotations

from .color_utils import blue_from_argb, green_from_argb, red_from_argb


def hex_from_argb(argb: int) -> str:
    """"#rrggbb", lowercase; alpha is dropped."""
    return "#{:02x}{:02x}{:02x}".format(
        red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb)
    )


def argb_from_hex(hex: str) -> int:
    """
    Parse "#rgb", "#rrggbb" or "#aarrggbb" (the "#" is optional).

    The result is always opaque. Raises ValueError for any other length.
    """
    hex = hex.replace("#", "")
    if len(hex) == 3:
        r, g, b = (int(c * 2, 16) for c in hex)
    elif len(hex) == 6:
        r, g, b = int(hex[0:2], 16), int(hex[2:4], 16), int(hex[4:6], 16)
    elif len(hex) == 8:
        r, g, b = int(hex[2:4], 16), int(hex[4:6], 16), int(hex[6:8], 16)
    else:
        raise ValueError("unexpected hex " + hex)
    return ((255 << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)) & 0xFFFFFFFF


__all__ = ["hex_from_argb", "argb_from_hex"]
