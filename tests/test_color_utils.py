import colour
import numpy as np
import pytest

from material_color.utils.color_utils import (
    alpha_from_argb,
    argb_from_lab,
    argb_from_lstar,
    argb_from_rgb,
    argb_from_xyz,
    blue_from_argb,
    green_from_argb,
    lab_from_argb,
    lstar_from_argb,
    lstar_from_y,
    red_from_argb,
    xyz_from_argb,
    y_from_lstar,
)
from material_color.utils.math_utils import (
    difference_degrees,
    round_half_up,
    rotation_direction,
    sanitize_degrees_double,
    sanitize_degrees_int,
    signum,
)
from material_color.utils.string_utils import argb_from_hex, hex_from_argb


def test_channels():
    argb = 0x80123456
    assert alpha_from_argb(argb) == 0x80
    assert red_from_argb(argb) == 0x12
    assert green_from_argb(argb) == 0x34
    assert blue_from_argb(argb) == 0x56
    assert argb_from_rgb(0x12, 0x34, 0x56) == 0xFF123456


def test_round_half_up_differs_from_bankers_rounding():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round(2.5) == 2


def test_degree_helpers():
    assert sanitize_degrees_int(-1) == 359
    assert sanitize_degrees_int(720) == 0
    assert sanitize_degrees_double(-0.5) == pytest.approx(359.5)
    assert sanitize_degrees_double(360.0) == 0.0
    assert difference_degrees(350.0, 10.0) == pytest.approx(20.0)
    assert rotation_direction(350.0, 10.0) == 1.0
    assert rotation_direction(10.0, 350.0) == -1.0
    assert signum(-3.0) == -1 and signum(0.0) == 0 and signum(2.0) == 1


def test_lstar_y_round_trip():
    for lstar in np.linspace(0.0, 100.0, 21):
        assert lstar_from_y(y_from_lstar(lstar)) == pytest.approx(lstar, abs=1e-8)


def test_lstar_of_gray_ramp():
    for lstar in range(0, 101, 10):
        gray = argb_from_lstar(lstar)
        assert red_from_argb(gray) == green_from_argb(gray) == blue_from_argb(gray)
        assert lstar_from_argb(gray) == pytest.approx(lstar, abs=0.5)


def test_xyz_and_lab_round_trip():
    rng = np.random.default_rng(3)
    for rgb in rng.integers(0, 256, size=(100, 3)):
        argb = argb_from_rgb(int(rgb[0]), int(rgb[1]), int(rgb[2]))
        assert argb_from_xyz(*xyz_from_argb(argb)) == argb
        assert argb_from_lab(*lab_from_argb(argb)) == argb


@pytest.mark.parametrize("argb", [0xFFFF0000, 0xFF00FF00, 0xFF0000FF, 0xFF6750A4, 0xFF808080])
def test_lab_matches_colour_science(argb):
    rgb = np.array([red_from_argb(argb), green_from_argb(argb), blue_from_argb(argb)]) / 255.0
    expected = colour.XYZ_to_Lab(colour.sRGB_to_XYZ(rgb))
    assert np.allclose(lab_from_argb(argb), expected, atol=0.2)


def test_hex_from_argb_is_lowercase_and_padded():
    assert hex_from_argb(0xFF0000FF) == "#0000ff"
    assert hex_from_argb(0xFFABCDEF) == "#abcdef"
    assert hex_from_argb(0x00010203) == "#010203"


@pytest.mark.parametrize(
    "text, argb",
    [
        ("#6750a4", 0xFF6750A4),
        ("6750A4", 0xFF6750A4),
        ("#fff", 0xFFFFFFFF),
        ("0a0", 0xFF00AA00),
        ("#806750a4", 0xFF6750A4),
    ],
)
def test_argb_from_hex(text, argb):
    assert argb_from_hex(text) == argb


@pytest.mark.parametrize("text", ["", "#12", "#12345", "1234567"])
def test_argb_from_hex_rejects_odd_lengths(text):
    with pytest.raises(ValueError, match="unexpected hex"):
        argb_from_hex(text)
