"""Named access to every Material colour role."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .color_specs import get_color_spec
from .dynamic_color import DynamicColor

if TYPE_CHECKING:
    from .dynamic_scheme import DynamicScheme

# Order matches the role listing of the Material guidelines.
ROLE_NAMES = (
    "primary_palette_key_color",
    "secondary_palette_key_color",
    "tertiary_palette_key_color",
    "neutral_palette_key_color",
    "neutral_variant_palette_key_color",
    "error_palette_key_color",
    "background",
    "on_background",
    "surface",
    "surface_dim",
    "surface_bright",
    "surface_container_lowest",
    "surface_container_low",
    "surface_container",
    "surface_container_high",
    "surface_container_highest",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "outline",
    "outline_variant",
    "inverse_surface",
    "inverse_on_surface",
    "shadow",
    "scrim",
    "surface_tint",
    "primary",
    "primary_dim",
    "on_primary",
    "primary_container",
    "on_primary_container",
    "primary_fixed",
    "primary_fixed_dim",
    "on_primary_fixed",
    "on_primary_fixed_variant",
    "inverse_primary",
    "secondary",
    "secondary_dim",
    "on_secondary",
    "secondary_container",
    "on_secondary_container",
    "secondary_fixed",
    "secondary_fixed_dim",
    "on_secondary_fixed",
    "on_secondary_fixed_variant",
    "tertiary",
    "tertiary_dim",
    "on_tertiary",
    "tertiary_container",
    "on_tertiary_container",
    "tertiary_fixed",
    "tertiary_fixed_dim",
    "on_tertiary_fixed",
    "on_tertiary_fixed_variant",
    "error",
    "error_dim",
    "on_error",
    "error_container",
    "on_error_container",
)


class MaterialDynamicColors:
    """
    Role lookup backed by the 2025 table. Its roles fall back to the 2021
    rules for schemes of an older spec version, so one instance serves any
    scheme: `colors.primary().get_argb(scheme)`.
    """

    content_accent_tone_delta = 15.0
    color_spec = get_color_spec("2025")

    def highest_surface(self, s: DynamicScheme) -> DynamicColor:
        return self.color_spec.highest_surface(s)

    def all_colors(self) -> list[Optional[DynamicColor]]:
        return [getattr(self.color_spec, name)() for name in ROLE_NAMES]


def _role_method(name: str):
    def method(self: MaterialDynamicColors) -> Optional[DynamicColor]:
        return getattr(self.color_spec, name)()

    method.__name__ = name
    method.__doc__ = f"The {name} role."
    return method


for _name in ROLE_NAMES:
    setattr(MaterialDynamicColors, _name, _role_method(_name))
del _name


__all__ = ["MaterialDynamicColors", "ROLE_NAMES"]
