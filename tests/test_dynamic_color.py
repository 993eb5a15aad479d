import pytest

from material_color.dynamiccolor import (
    ContrastCurve,
    DynamicColor,
    DynamicScheme,
    MaterialDynamicColors,
    SpecVersion,
    ToneDeltaPair,
    Variant,
    extend_spec_version,
)
from material_color.dynamiccolor.dynamic_color import _bucket_background_tone
from material_color.hct import Hct
from material_color.palettes import TonalPalette

PALETTE = TonalPalette.from_hue_and_chroma(200.0, 30.0)


def _color(name="test", **kwargs):
    return DynamicColor.from_palette(name=name, palette=lambda s: PALETTE, **kwargs)


def _scheme(**kwargs):
    args = dict(source_color_hct=Hct.from_int(0xFF6750A4), is_dark=False, variant=Variant.TONAL_SPOT)
    args.update(kwargs)
    return DynamicScheme.from_(**args)


def test_second_background_requires_background():
    with pytest.raises(ValueError, match="has secondBackground defined, but background is not defined"):
        _color(second_background=lambda s: None)


def test_contrast_curve_requires_background():
    with pytest.raises(ValueError, match="has contrastCurve defined, but background is not defined"):
        _color(contrast_curve=lambda s: ContrastCurve(1, 1, 3, 4.5))


def test_background_requires_contrast_curve():
    with pytest.raises(ValueError, match="has background defined, but contrastCurve is not defined"):
        _color(background=lambda s: None)


def test_default_tone_is_50_without_background():
    color = _color(tone=None)
    scheme = _scheme()
    assert color.get_tone(scheme) == 50.0
    assert color.get_argb(scheme) == PALETTE.tone(50.0)


def test_default_tone_follows_background():
    bg = _color(name="bg", tone=lambda s: 90.0, is_background=True)
    fg = _color(
        name="fg",
        background=lambda s: bg,
        contrast_curve=lambda s: ContrastCurve(1, 1, 1, 1),
    )
    scheme = _scheme()
    # ratio 1 is met at the background's own tone
    assert fg.tone(scheme) == pytest.approx(90.0)


def test_clone_renames_and_resolves_the_same():
    color = _color(tone=lambda s: 40.0)
    copy = color.clone("renamed")
    scheme = _scheme()
    assert copy.name == "renamed"
    assert copy.get_argb(scheme) == color.get_argb(scheme)


def test_extend_spec_version_rejects_other_names():
    with pytest.raises(ValueError, match="of different name for spec version 2025"):
        extend_spec_version(_color("a"), SpecVersion.SPEC_2025, _color("b"))


def test_extend_spec_version_rejects_other_background_role():
    with pytest.raises(ValueError, match="as a foreground with color a as a background"):
        extend_spec_version(_color("a"), SpecVersion.SPEC_2025, _color("a", is_background=True))


def test_extend_spec_version_picks_by_scheme_version():
    old = _color("role", tone=lambda s: 30.0)
    new = _color("role", tone=lambda s: 70.0)
    merged = extend_spec_version(old, SpecVersion.SPEC_2025, new)
    assert merged.name == "role"
    assert merged.get_tone(_scheme(spec_version="2021")) == pytest.approx(30.0)
    assert merged.get_tone(_scheme(spec_version="2025")) == pytest.approx(70.0)


def test_foreground_tone_prefers_light_on_dark_backgrounds():
    assert DynamicColor.foreground_tone(20.0, 4.5) > 20.0
    assert DynamicColor.foreground_tone(90.0, 4.5) < 90.0


def test_light_foreground_helpers():
    assert DynamicColor.tone_prefers_light_foreground(59.4)
    assert not DynamicColor.tone_prefers_light_foreground(59.5)
    assert DynamicColor.tone_allows_light_foreground(49.4)
    assert not DynamicColor.tone_allows_light_foreground(49.5)
    assert DynamicColor.enable_light_foreground(55.0) == 49.0
    assert DynamicColor.enable_light_foreground(40.0) == 40.0
    assert DynamicColor.enable_light_foreground(70.0) == 70.0


def test_contrast_curve_interpolates_between_anchors():
    curve = ContrastCurve(1.0, 3.0, 5.0, 9.0)
    assert curve.get(-2.0) == 1.0
    assert curve.get(-0.5) == pytest.approx(2.0)
    assert curve.get(0.0) == 3.0
    assert curve.get(0.25) == pytest.approx(4.0)
    assert curve.get(0.75) == pytest.approx(7.0)
    assert curve.get(1.0) == 9.0


def test_role_lookup_is_stable():
    colors = MaterialDynamicColors()
    assert colors.primary() is colors.primary()
    assert colors.primary().name == "primary"
    with pytest.raises(AttributeError):
        colors.not_a_role
    assert MaterialDynamicColors.surface_container_high.__name__ == "surface_container_high"
    assert "on_tertiary_fixed_variant" in dir(colors)


def test_all_colors_lists_every_role():
    colors = MaterialDynamicColors().all_colors()
    assert len(colors) == 59
    assert all(c is not None for c in colors)
    names = [c.name for c in colors]
    assert "surface_container_highest" in names
    assert "on_error_container" in names


def _follower(tone, delta, polarity, constraint, anchor_tone=40.0):
    anchor = _color(name="anchor", tone=lambda s: anchor_tone)
    follower = _color(
        name="follower",
        tone=lambda s: tone,
        tone_delta_pair=lambda s: ToneDeltaPair(
            follower, anchor, delta, polarity, False, constraint
        ),
    )
    return follower


@pytest.mark.parametrize(
    "tone, polarity, constraint, expected",
    [
        (80.0, "lighter", "exact", 50.0),
        (20.0, "lighter", "exact", 50.0),
        (80.0, "darker", "exact", 30.0),
        (45.0, "lighter", "farther", 50.0),
        (80.0, "lighter", "farther", 80.0),
        (35.0, "darker", "farther", 30.0),
        (10.0, "darker", "farther", 10.0),
        (80.0, "lighter", "nearer", 50.0),
        (45.0, "lighter", "nearer", 45.0),
        (20.0, "darker", "nearer", 30.0),
    ],
)
def test_tone_delta_constraints_2025(tone, polarity, constraint, expected):
    scheme = _scheme(spec_version=SpecVersion.SPEC_2025)
    follower = _follower(tone, 10.0, polarity, constraint)
    assert follower.get_tone(scheme) == pytest.approx(expected)


def test_tone_delta_relative_polarity_flips_in_dark_2025():
    light = _scheme(spec_version=SpecVersion.SPEC_2025)
    dark = _scheme(spec_version=SpecVersion.SPEC_2025, is_dark=True)
    assert _follower(0.0, 10.0, "relative_lighter", "exact").get_tone(light) == 50.0
    assert _follower(0.0, 10.0, "relative_lighter", "exact").get_tone(dark) == 30.0
    assert _follower(0.0, 10.0, "relative_darker", "exact").get_tone(light) == 30.0


def test_tone_delta_exact_clamps_to_tone_range_2025():
    scheme = _scheme(spec_version=SpecVersion.SPEC_2025)
    assert _follower(50.0, 10.0, "lighter", "exact", anchor_tone=95.0).get_tone(scheme) == 100.0
    assert _follower(50.0, 10.0, "darker", "exact", anchor_tone=5.0).get_tone(scheme) == 0.0


def _pair_2021(near_tone, far_tone, stay_together=False):
    near = _color(
        name="near",
        tone=lambda s: near_tone,
        tone_delta_pair=lambda s: pair,
    )
    far = _color(
        name="far",
        tone=lambda s: far_tone,
        tone_delta_pair=lambda s: pair,
    )
    pair = ToneDeltaPair(near, far, 10.0, "nearer", stay_together)
    return near, far


def test_tone_delta_pushes_farther_role_2021():
    near, far = _pair_2021(40.0, 35.0)
    light = _scheme()
    assert near.get_tone(light) == 40.0
    # light mode expands toward black
    assert far.get_tone(light) == 30.0


def test_tone_delta_keeps_already_separated_roles_2021():
    near, far = _pair_2021(40.0, 20.0)
    light = _scheme()
    assert near.get_tone(light) == 40.0
    assert far.get_tone(light) == 20.0


def test_tone_delta_avoids_middle_band_2021():
    near, far = _pair_2021(40.0, 45.0)
    dark = _scheme(is_dark=True)
    assert near.get_tone(dark) == 40.0
    # 50 lands in 50..59, so the farther role jumps to 60
    assert far.get_tone(dark) == 60.0

    # staying together moves both roles past the band
    near, far = _pair_2021(40.0, 45.0, stay_together=True)
    assert near.get_tone(dark) == 60.0
    assert far.get_tone(dark) == 70.0

    near, far = _pair_2021(55.0, 70.0, stay_together=True)
    assert near.get_tone(dark) == 60.0
    assert far.get_tone(dark) == 70.0


@pytest.mark.parametrize(
    "tone, expected",
    [(0.0, 0.0), (30.0, 30.0), (49.0, 49.0), (52.0, 49.0), (56.9, 49.0),
     (57.0, 65.0), (64.0, 65.0), (80.0, 80.0), (100.0, 100.0)],
)
def test_background_tone_bucketing(tone, expected):
    assert _bucket_background_tone(tone) == expected
