import numpy as np
import pytest
from coloraide import Color as _Base
from coloraide.spaces.hct import HCT

from material_color.hct import Cam16, Hct, ViewingConditions
from material_color.hct import hct_solver
from material_color.utils.color_utils import argb_from_lstar, argb_from_rgb, lstar_from_argb
from material_color.utils.math_utils import difference_degrees


class Color(_Base):
    pass


Color.register(HCT(), overwrite=True)

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
BLACK = 0xFF000000
WHITE = 0xFFFFFFFF


def test_known_primaries():
    red = Hct.from_int(RED)
    assert red.hue == pytest.approx(27.408, abs=1e-2)
    assert red.chroma == pytest.approx(113.357, abs=1e-2)
    assert red.tone == pytest.approx(53.233, abs=1e-2)

    green = Hct.from_int(GREEN)
    assert green.hue == pytest.approx(142.139, abs=1e-2)
    assert green.chroma == pytest.approx(108.410, abs=1e-2)
    assert green.tone == pytest.approx(87.737, abs=1e-2)

    blue = Hct.from_int(BLUE)
    assert blue.hue == pytest.approx(282.788, abs=1e-2)
    assert blue.chroma == pytest.approx(87.230, abs=1e-2)
    assert blue.tone == pytest.approx(32.302, abs=1e-2)


def test_cam16_red_appearance():
    cam = Cam16.from_int(RED)
    assert cam.j == pytest.approx(46.445, abs=1e-2)
    assert cam.q == pytest.approx(105.989, abs=1e-2)
    assert cam.m == pytest.approx(89.494, abs=1e-2)
    assert cam.s == pytest.approx(91.890, abs=1e-2)


def test_cam16_distance_is_zero_to_itself_and_symmetric():
    a = Cam16.from_int(RED)
    b = Cam16.from_int(BLUE)
    assert a.distance(a) == 0.0
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(b) > 10.0


def test_from_int_to_int_is_identity_on_samples():
    rng = np.random.default_rng(7)
    for rgb in rng.integers(0, 256, size=(200, 3)):
        argb = argb_from_rgb(int(rgb[0]), int(rgb[1]), int(rgb[2]))
        assert Hct.from_int(argb).to_int() == argb


def test_solver_round_trips_through_hct_coordinates():
    rng = np.random.default_rng(11)
    for rgb in rng.integers(0, 256, size=(100, 3)):
        argb = argb_from_rgb(int(rgb[0]), int(rgb[1]), int(rgb[2]))
        hct = Hct.from_int(argb)
        solved = Hct.from_hct(hct.hue, hct.chroma, hct.tone)
        # an exact hit is not guaranteed, but the tone is preserved and the
        # colour lands within an 8-bit step or two of the original
        assert solved.tone == pytest.approx(hct.tone, abs=0.5)
        assert Cam16.from_int(solved.to_int()).distance(Cam16.from_int(argb)) < 1.5


@pytest.mark.parametrize("hue", [0.0, 45.0, 90.0, 180.0, 270.0, 359.9])
def test_zero_chroma_is_gray(hue):
    for tone in range(0, 101, 5):
        assert hct_solver.solve_to_int(hue, 0.0, tone) == argb_from_lstar(tone)


def test_chroma_plateaus_at_gamut_boundary():
    hue, tone = 120.0, 60.0
    chromas = [Hct.from_hct(hue, c, tone).chroma for c in range(0, 200, 4)]
    # non-decreasing within rounding noise, then flat
    diffs = np.diff(chromas)
    assert np.all(diffs > -1.0)
    assert chromas[-1] == pytest.approx(chromas[-2], abs=0.5)
    assert max(chromas) < 200.0


@pytest.mark.parametrize("hue", [-30.0, 390.0, 720.0 + 12.5])
def test_hue_is_sanitized(hue):
    wrapped = Hct.from_hct(hue, 40.0, 50.0)
    expected = Hct.from_hct(hue % 360.0, 40.0, 50.0)
    assert wrapped.to_int() == expected.to_int()


def test_tone_is_lstar():
    for argb in (RED, GREEN, BLUE, 0xFF6750A4, 0xFF123456):
        assert Hct.from_int(argb).tone == pytest.approx(lstar_from_argb(argb))


def test_extreme_tones_are_black_and_white():
    assert Hct.from_hct(200.0, 50.0, 0.0).to_int() == BLACK
    assert Hct.from_hct(200.0, 50.0, 100.0).to_int() == WHITE


def test_with_tone_keeps_hue_roughly():
    hct = Hct.from_int(0xFF6750A4)
    lighter = hct.with_tone(80.0)
    assert lighter.tone == pytest.approx(80.0, abs=0.5)
    assert difference_degrees(lighter.hue, hct.hue) < 2.0


def test_equality_and_hash_follow_argb():
    a = Hct.from_int(BLUE)
    b = Hct.from_hct(a.hue, a.chroma, a.tone)
    assert a == Hct.from_int(BLUE)
    assert hash(a) == hash(Hct.from_int(BLUE))
    assert str(a).startswith("HCT(")
    assert b.to_int() >> 24 == 0xFF


def test_in_viewing_conditions_default_is_nearly_identity():
    hct = Hct.from_int(0xFF6750A4)
    same = hct.in_viewing_conditions(ViewingConditions.DEFAULT)
    assert Cam16.from_int(same.to_int()).distance(Cam16.from_int(hct.to_int())) < 1.0


def test_in_darker_viewing_conditions_changes_colour():
    hct = Hct.from_int(0xFF6750A4)
    vc = ViewingConditions.make(background_lstar=10.0)
    moved = hct.in_viewing_conditions(vc)
    assert moved.to_int() != hct.to_int()
    assert 0.0 <= moved.tone <= 100.0


def test_helpers_for_hue_families():
    assert Hct.is_blue(260.0)
    assert not Hct.is_blue(100.0)
    assert Hct.is_yellow(110.0)
    assert Hct.is_cyan(200.0)


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, 0xFF6750A4, 0xFFB3261E, 0xFF386A20])
def test_matches_coloraide_hct(argb):
    hex_str = "#{:06x}".format(argb & 0xFFFFFF)
    h, c, t = Color(hex_str).convert("hct").coords()
    ours = Hct.from_int(argb)
    assert difference_degrees(ours.hue, h) < 0.5
    assert ours.chroma == pytest.approx(c, abs=0.5)
    assert ours.tone == pytest.approx(t, abs=0.5)
