import pytest

from material_color.dislike import fix_if_disliked, is_disliked
from material_color.hct import Hct

MONK_SKIN_TONES = [0xFFF6ECE4, 0xFFF3E7DB, 0xFFF7EAD0, 0xFFEADABA, 0xFFD7BD96,
                   0xFFA07E56, 0xFF825C43, 0xFF604134, 0xFF3A312A, 0xFF292420]
BILE = [0xFF95884B, 0xFF716B40, 0xFFB08E00, 0xFF4C4308, 0xFF464521]


@pytest.mark.parametrize("argb", MONK_SKIN_TONES)
def test_skin_tones_are_liked(argb):
    assert not is_disliked(Hct.from_int(argb))


@pytest.mark.parametrize("argb", BILE)
def test_bile_colours_are_disliked_and_fixed(argb):
    hct = Hct.from_int(argb)
    assert is_disliked(hct)
    fixed = fix_if_disliked(hct)
    assert not is_disliked(fixed)
    assert fixed.tone == pytest.approx(70.0, abs=0.5)


def test_tone_67_is_liked_and_untouched():
    hct = Hct.from_hct(100.0, 50.0, 67.0)
    assert not is_disliked(hct)
    assert fix_if_disliked(hct).to_int() == hct.to_int()
