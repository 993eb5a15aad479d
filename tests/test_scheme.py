import pytest

from material_color import contrast
from material_color.dynamiccolor import (
    DynamicScheme,
    MaterialDynamicColors,
    Platform,
    SpecVersion,
    Variant,
)
from material_color.dynamiccolor.color_specs import get_color_spec
from material_color.dynamiccolor.material_dynamic_colors import ROLE_NAMES
from material_color.hct import Hct
from material_color.utils.math_utils import difference_degrees

SEED = Hct.from_int(0xFF6750A4)
COLORS = MaterialDynamicColors()
DIM_ROLES = {"primary_dim", "secondary_dim", "tertiary_dim", "error_dim"}


def _scheme(**kwargs):
    args = dict(source_color_hct=SEED, is_dark=False, variant=Variant.TONAL_SPOT)
    args.update(kwargs)
    return DynamicScheme.from_(**args)


def test_monochrome_primary_contrast():
    scheme = _scheme(variant=Variant.MONOCHROME)
    assert scheme.primary_palette.chroma == 0
    primary = scheme.get_hct(COLORS.primary())
    on_primary = scheme.get_hct(COLORS.on_primary())
    assert contrast.ratio_of_tones(primary.tone, on_primary.tone) >= 4.5


def test_tonal_spot_primary_palette():
    scheme = _scheme()
    assert scheme.primary_palette.hue == pytest.approx(SEED.hue)
    assert scheme.primary_palette.chroma == 36
    assert difference_degrees(Hct.from_int(scheme.primary).hue, SEED.hue) < 5.0


def test_default_seed_and_spec_version():
    scheme = DynamicScheme.from_(is_dark=False)
    assert scheme.source_color_argb == 0xFF6750A4
    assert scheme.spec_version == SpecVersion.SPEC_2021
    assert scheme.platform == Platform.PHONE


@pytest.mark.parametrize("variant", list(Variant))
@pytest.mark.parametrize("spec_version", ["2021", "2025"])
@pytest.mark.parametrize("is_dark", [False, True])
def test_schemes_are_deterministic(variant, spec_version, is_dark):
    one = _scheme(variant=variant, spec_version=spec_version, is_dark=is_dark)
    two = _scheme(variant=variant, spec_version=spec_version, is_dark=is_dark)
    values = one.to_dict()
    assert values == two.to_dict()
    assert all(0xFF000000 <= argb <= 0xFFFFFFFF for argb in values.values())


def test_role_set_per_spec_version():
    assert len(ROLE_NAMES) == 59
    assert set(_scheme(spec_version="2021").to_dict()) == set(ROLE_NAMES) - DIM_ROLES
    assert set(_scheme(spec_version="2025").to_dict()) == set(ROLE_NAMES)


def test_dim_roles_are_undefined_before_2025():
    scheme = _scheme(spec_version="2021")
    with pytest.raises(ValueError, match="`primaryDim` color is undefined prior to 2025 spec."):
        scheme.primary_dim
    with pytest.raises(ValueError, match="errorDim"):
        scheme.error_dim
    assert isinstance(_scheme(spec_version="2025").primary_dim, int)


@pytest.mark.parametrize("spec_version", ["2021", "2025"])
@pytest.mark.parametrize("platform", [Platform.PHONE, Platform.WATCH])
@pytest.mark.parametrize("is_dark", [False, True])
def test_contrast_curves_never_decrease(spec_version, platform, is_dark):
    scheme = _scheme(spec_version=spec_version, platform=platform, is_dark=is_dark)
    table = get_color_spec(spec_version)
    checked = 0
    for name in ROLE_NAMES:
        color = getattr(table, name)()
        if color is None or color.contrast_curve is None:
            continue
        curve = color.contrast_curve(scheme)
        if curve is None:
            continue
        assert curve.low <= curve.normal <= curve.medium <= curve.high, name
        assert curve.get(1.0) >= curve.get(0.0)
        checked += 1
    assert checked > 20


def test_higher_contrast_level_does_not_reduce_text_contrast():
    for spec_version in ("2021", "2025"):
        normal = _scheme(spec_version=spec_version, contrast_level=0.0)
        high = _scheme(spec_version=spec_version, contrast_level=1.0)
        for fg, bg in (("on_surface", "surface"), ("on_primary", "primary")):
            r_normal = contrast.ratio_of_tones(
                Hct.from_int(getattr(normal, fg)).tone, Hct.from_int(getattr(normal, bg)).tone
            )
            r_high = contrast.ratio_of_tones(
                Hct.from_int(getattr(high, fg)).tone, Hct.from_int(getattr(high, bg)).tone
            )
            assert r_high >= r_normal - 0.1


def test_dark_mode_flips_surfaces():
    light = _scheme()
    dark = _scheme(is_dark=True)
    assert Hct.from_int(light.surface).tone > 90
    assert Hct.from_int(dark.surface).tone < 10
    assert Hct.from_int(light.on_surface).tone < Hct.from_int(dark.on_surface).tone


def test_copy_with_keeps_palettes():
    light = _scheme()
    dark = light.copy_with(is_dark=True, contrast_level=0.5)
    assert dark.is_dark and dark.contrast_level == 0.5
    assert dark.primary_palette is light.primary_palette
    assert dark.primary != light.primary


def test_palette_key_color_overrides():
    green = Hct.from_int(0xFF00FF00)
    scheme = _scheme(primary_palette_key_color=green)
    assert scheme.primary_palette.hue == pytest.approx(green.hue)
    assert scheme.secondary_palette.hue == pytest.approx(SEED.hue)


def test_error_palette_fallback_in_2021():
    scheme = _scheme()
    assert scheme.error_palette.hue == 25.0
    assert scheme.error_palette.chroma == 84.0


def test_content_variant_keeps_seed_chroma():
    scheme = _scheme(variant=Variant.CONTENT)
    assert scheme.primary_palette.chroma == pytest.approx(SEED.chroma)


def test_unsupported_variant_fails_loudly():
    with pytest.raises(ValueError, match="Unsupported variant: 42"):
        _scheme(variant=42)


def test_unknown_spec_version_is_rejected():
    with pytest.raises(ValueError):
        DynamicScheme(source_color_hct=SEED, is_dark=False, variant=Variant.TONAL_SPOT, spec_version="2030")


def test_hue_helpers():
    assert DynamicScheme.get_piecewise_hue(SEED, [0, 100, 200, 360], [10, 20, 30]) == 30
    rotated = DynamicScheme.get_rotated_hue(SEED, [0, 100, 200, 360], [0, 0, 15])
    assert rotated == pytest.approx((SEED.hue + 15) % 360)


def test_summary_string():
    text = str(_scheme(contrast_level=0.5))
    assert text.startswith("Scheme: variant=TONAL_SPOT, mode=light, platform=phone, contrastLevel=0.5")
    assert "specVersion=2021" in text


def test_highest_surface():
    light = _scheme()
    dark = _scheme(is_dark=True)
    assert COLORS.highest_surface(light).name == "surface_dim"
    assert COLORS.highest_surface(dark).name == "surface_bright"


def _is_bucketed(color, scheme):
    """Background roles whose tone is resolved against a pair or a background."""
    if not color.is_background or color.name.endswith("_fixed_dim"):
        return False
    if color.tone_delta_pair is not None and color.tone_delta_pair(scheme) is not None:
        return True
    return (
        color.background is not None
        and color.background(scheme) is not None
        and color.contrast_curve is not None
        and color.contrast_curve(scheme) is not None
    )


@pytest.mark.parametrize("variant", list(Variant))
@pytest.mark.parametrize("platform", [Platform.PHONE, Platform.WATCH])
@pytest.mark.parametrize("is_dark", [False, True])
def test_2025_background_tones_skip_the_middle(variant, platform, is_dark):
    table = get_color_spec("2025")
    tones = []
    for level in (-1.0, 0.0, 0.5, 1.0):
        scheme = _scheme(
            variant=variant,
            spec_version="2025",
            platform=platform,
            is_dark=is_dark,
            contrast_level=level,
        )
        for name in ROLE_NAMES:
            color = getattr(table, name)()
            if not _is_bucketed(color, scheme):
                continue
            tone = color.get_tone(scheme)
            assert not 49.0 < tone < 65.0, (name, level, tone)
            tones.append(tone)
    assert tones
    if platform == Platform.PHONE:
        if is_dark:
            assert any(t <= 49.0 for t in tones)
        else:
            assert any(t >= 65.0 for t in tones)


@pytest.mark.parametrize(
    "is_dark, primary, primary_container",
    [
        (False, 0xFF555992, 0xFFE0E0FF),
        (True, 0xFFBEC2FF, 0xFF3E4278),
    ],
)
def test_tonal_spot_blue_seed_2021(is_dark, primary, primary_container):
    scheme = _scheme(source_color_hct=Hct.from_int(0xFF0000FF), is_dark=is_dark)
    assert scheme.primary == primary
    assert scheme.primary_container == primary_container


@pytest.mark.parametrize("is_dark, primary_tone, container_tone", [(False, 40, 90), (True, 80, 30)])
def test_tonal_spot_2021_reads_nominal_palette_tones(is_dark, primary_tone, container_tone):
    scheme = _scheme(is_dark=is_dark)
    assert scheme.primary == scheme.primary_palette.tone(primary_tone)
    assert scheme.primary_container == scheme.primary_palette.tone(container_tone)
    assert scheme.secondary_container == scheme.secondary_palette.tone(container_tone)
