import numpy as np
import pytest

from material_color.quantize import (
    LabPointProvider,
    QuantizerWu,
    quantizer_celebi,
    quantizer_map,
    quantizer_wsmeans,
)
from material_color.utils.image_utils import source_color_from_image_bytes

RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
RANDO = 0xFF141216


def test_map_counts_opaque_pixels_only():
    counts = quantizer_map.quantize([RED, RED, BLUE, 0x80FF0000, 0x00000000])
    assert counts == {RED: 2, BLUE: 1}


def test_lab_point_provider_round_trip():
    provider = LabPointProvider()
    for argb in (RED, GREEN, BLUE, RANDO):
        assert provider.to_int(provider.from_int(argb)) == argb
    assert provider.distance([0, 0, 0], [1, 2, 2]) == 9


@pytest.mark.parametrize("argb", [RED, GREEN, BLUE, RANDO])
def test_wu_single_colour(argb):
    assert QuantizerWu().quantize([argb], 128) == [argb]


def test_wu_separates_primaries():
    result = QuantizerWu().quantize([RED, GREEN, BLUE], 128)
    assert sorted(result) == sorted([RED, GREEN, BLUE])


def test_wu_two_reds_three_greens():
    result = QuantizerWu().quantize([RED, RED, GREEN, GREEN, GREEN], 256)
    assert set(result) == {RED, GREEN}


def test_wu_respects_max_colors():
    rng = np.random.default_rng(5)
    pixels = [0xFF000000 | int(p) for p in rng.integers(0, 0xFFFFFF, size=2000)]
    result = QuantizerWu().quantize(pixels, 16)
    assert 0 < len(result) <= 16
    assert all(p >> 24 == 0xFF for p in result)


def test_wsmeans_with_starting_clusters():
    pixels = [RED] * 5 + [BLUE] * 3
    result = quantizer_wsmeans.quantize(pixels, [RED, BLUE], 2, rng=np.random.default_rng(0))
    assert result == {RED: 5, BLUE: 3}


def test_wsmeans_random_start_is_reproducible_with_rng():
    rng = np.random.default_rng(9)
    pixels = [0xFF000000 | int(p) for p in rng.integers(0, 0xFFFFFF, size=300)]
    one = quantizer_wsmeans.quantize(pixels, [], 8, rng=np.random.default_rng(1))
    two = quantizer_wsmeans.quantize(pixels, [], 8, rng=np.random.default_rng(1))
    assert one == two
    assert 0 < sum(one.values()) <= len(pixels)
    assert len(one) <= 8


def test_wsmeans_empty_input():
    assert quantizer_wsmeans.quantize([], [RED], 4) == {}


@pytest.mark.parametrize("max_colors", [1, 4, 128])
def test_celebi_single_colour(max_colors):
    pixels = [0xFF6750A4] * 37
    assert quantizer_celebi.quantize(pixels, max_colors) == {0xFF6750A4: 37}


def test_celebi_keeps_population():
    pixels = [RED] * 10 + [GREEN] * 20 + [BLUE] * 30
    result = quantizer_celebi.quantize(pixels, 128)
    assert result == {RED: 10, GREEN: 20, BLUE: 30}


def test_source_color_from_image_bytes():
    opaque_red = bytes([255, 0, 0, 255])
    transparent_blue = bytes([0, 0, 255, 0])
    data = opaque_red * 50 + transparent_blue * 500
    assert source_color_from_image_bytes(data) == RED


def test_source_color_of_transparent_image_is_fallback():
    assert source_color_from_image_bytes(bytes(4 * 10)) == 0xFF4285F4
