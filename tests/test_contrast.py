import numpy as np
import pytest

from material_color import contrast

TONES = np.linspace(0.0, 100.0, 41)


def test_ratio_extremes():
    assert contrast.ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)
    assert contrast.ratio_of_tones(50.0, 50.0) == pytest.approx(1.0)


def test_ratio_is_symmetric():
    for a in TONES:
        for b in TONES:
            assert contrast.ratio_of_tones(a, b) == contrast.ratio_of_tones(b, a)


def test_ratio_clamps_out_of_range_tones():
    assert contrast.ratio_of_tones(-20.0, 120.0) == pytest.approx(21.0)


@pytest.mark.parametrize("ratio", [1.5, 3.0, 4.5, 7.0])
def test_lighter_reaches_ratio_when_possible(ratio):
    for tone in TONES:
        lighter = contrast.lighter(tone, ratio)
        if lighter == -1.0:
            continue
        assert lighter >= tone
        assert contrast.ratio_of_tones(tone, lighter) >= ratio - 0.041


@pytest.mark.parametrize("ratio", [1.5, 3.0, 4.5, 7.0])
def test_darker_reaches_ratio_when_possible(ratio):
    for tone in TONES:
        darker = contrast.darker(tone, ratio)
        if darker == -1.0:
            continue
        assert darker <= tone
        assert contrast.ratio_of_tones(tone, darker) >= ratio - 0.041


def test_unreachable_ratio_returns_sentinel():
    assert contrast.lighter(95.0, 21.0) == -1.0
    assert contrast.darker(5.0, 21.0) == -1.0
    assert contrast.lighter(-1.0, 3.0) == -1.0
    assert contrast.darker(101.0, 3.0) == -1.0


def test_unsafe_variants_clamp_to_extremes():
    assert contrast.lighter_unsafe(95.0, 21.0) == 100.0
    assert contrast.darker_unsafe(5.0, 21.0) == 0.0
    assert contrast.lighter_unsafe(40.0, 3.0) == contrast.lighter(40.0, 3.0)
