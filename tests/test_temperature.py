import pytest

from material_color.hct import Hct
from material_color.temperature import TemperatureCache, is_between, raw_temperature
from material_color.utils.math_utils import difference_degrees


def test_raw_temperature_of_primaries():
    assert raw_temperature(Hct.from_int(0xFF0000FF)) == pytest.approx(-1.393, abs=1e-2)
    assert raw_temperature(Hct.from_int(0xFFFF0000)) == pytest.approx(2.351, abs=1e-2)
    assert raw_temperature(Hct.from_int(0xFF00FF00)) == pytest.approx(-0.267, abs=1e-2)
    assert raw_temperature(Hct.from_int(0xFFFFFFFF)) == pytest.approx(-0.5, abs=1e-2)
    assert raw_temperature(Hct.from_int(0xFF000000)) == pytest.approx(-0.5, abs=1e-2)


def test_relative_temperature_range():
    cache = TemperatureCache(Hct.from_int(0xFF0000FF))
    assert cache.relative_temperature(cache.coldest) == 0.0
    assert cache.relative_temperature(cache.warmest) == 1.0
    assert 0.0 <= cache.input_relative_temperature <= 1.0


def test_warmest_is_orange_ish():
    cache = TemperatureCache(Hct.from_int(0xFF6750A4))
    assert cache.temps_by_hct[cache.warmest] > cache.temps_by_hct[cache.coldest]
    assert difference_degrees(cache.warmest.hue, 50.0) < 60.0


def test_complement_of_blue_is_warm():
    cache = TemperatureCache(Hct.from_int(0xFF0000FF))
    complement = cache.complement
    assert cache.relative_temperature(complement) > 0.5
    assert cache.complement is complement


def test_complement_of_gray_is_itself():
    for argb in (0xFFFFFFFF, 0xFF000000):
        assert TemperatureCache(Hct.from_int(argb)).complement.to_int() == argb


@pytest.mark.parametrize("count", [1, 3, 5, 6])
def test_analogous_has_input_in_the_middle(count):
    source = Hct.from_int(0xFF0000FF)
    colors = TemperatureCache(source).analogous(count=count)
    assert len(colors) == count
    assert colors[(count - 1) // 2] == source


def test_is_between():
    assert is_between(10.0, 0.0, 20.0)
    assert not is_between(30.0, 0.0, 20.0)
    assert is_between(355.0, 350.0, 10.0)
    assert is_between(5.0, 350.0, 10.0)
    assert not is_between(180.0, 350.0, 10.0)
