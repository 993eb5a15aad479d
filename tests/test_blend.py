import pytest

from material_color import blend
from material_color.hct import Cam16, Hct
from material_color.utils.math_utils import difference_degrees

RED = 0xFFFF0000
BLUE = 0xFF0000FF
GREEN = 0xFF00FF00
YELLOW = 0xFFFFFF00


@pytest.mark.parametrize("design, source", [(RED, BLUE), (RED, GREEN), (BLUE, YELLOW), (GREEN, RED)])
def test_harmonize_rotates_at_most_15_degrees(design, source):
    before = Hct.from_int(design)
    after = Hct.from_int(blend.harmonize(design, source))
    assert difference_degrees(before.hue, after.hue) <= 15.5
    assert after.tone == pytest.approx(before.tone, abs=1.0)


def test_harmonize_moves_toward_source():
    before = Hct.from_int(RED)
    target = Hct.from_int(BLUE)
    after = Hct.from_int(blend.harmonize(RED, BLUE))
    assert difference_degrees(after.hue, target.hue) < difference_degrees(before.hue, target.hue)


def test_harmonize_with_itself_keeps_the_colour():
    same = Hct.from_int(blend.harmonize(0xFF6750A4, 0xFF6750A4))
    assert Cam16.from_int(same.to_int()).distance(Cam16.from_int(0xFF6750A4)) < 1.0


def test_cam16_ucs_end_points():
    start = Cam16.from_int(blend.cam16_ucs(RED, BLUE, 0.0))
    end = Cam16.from_int(blend.cam16_ucs(RED, BLUE, 1.0))
    assert start.distance(Cam16.from_int(RED)) < 1.0
    assert end.distance(Cam16.from_int(BLUE)) < 1.0


def test_hct_hue_keeps_tone_of_start():
    start = Hct.from_int(RED)
    mixed = Hct.from_int(blend.hct_hue(RED, BLUE, 0.5))
    assert mixed.tone == pytest.approx(start.tone, abs=1.0)
