import pytest

from material_color.hct import Hct
from material_color.palettes import KeyColor, TonalPalette
from material_color.utils.math_utils import difference_degrees


def test_palette_of_blue():
    palette = TonalPalette.from_int(0xFF0000FF)
    assert palette.tone(0) == 0xFF000000
    assert palette.tone(100) == 0xFFFFFFFF
    assert palette.hue == pytest.approx(Hct.from_int(0xFF0000FF).hue)


def test_tone_is_memoized_and_deterministic():
    palette = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    first = [palette.tone(t) for t in range(0, 101, 5)]
    second = [palette.tone(t) for t in range(0, 101, 5)]
    assert first == second
    other = TonalPalette.from_hue_and_chroma(270.0, 36.0)
    assert [other.tone(t) for t in range(0, 101, 5)] == first


def test_tones_are_ordered_by_lightness():
    palette = TonalPalette.from_hue_and_chroma(150.0, 40.0)
    tones = [palette.get_hct(t).tone for t in range(0, 101, 10)]
    assert tones == sorted(tones)


def test_yellow_tone_99_is_not_muddy():
    palette = TonalPalette.from_hue_and_chroma(110.0, 60.0)
    hct = palette.get_hct(99)
    assert hct.tone == pytest.approx(99.0, abs=0.6)


def test_key_color_reaches_requested_chroma_near_tone_50():
    key = KeyColor(270.0, 36.0).create()
    assert key.chroma == pytest.approx(36.0, abs=1.0)
    assert difference_degrees(key.hue, 270.0) < 2.0
    assert 40.0 <= key.tone <= 60.0


def test_key_color_falls_back_to_maximum_chroma():
    key = KeyColor(149.0, 200.0).create()
    assert 0.0 < key.chroma < 200.0
    # no tone of this hue can carry more chroma
    for tone in range(0, 101, 10):
        assert Hct.from_hct(149.0, 200.0, tone).chroma <= key.chroma + 1.0


def test_from_hue_and_chroma_keeps_requested_values():
    palette = TonalPalette.from_hue_and_chroma(12.0, 16.0)
    assert palette.hue == 12.0
    assert palette.chroma == 16.0
    assert palette.key_color.chroma == pytest.approx(16.0, abs=1.0)
