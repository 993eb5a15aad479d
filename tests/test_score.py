from material_color.score import score


def test_prioritizes_chroma():
    ranked = score({0xFF000000: 1, 0xFFFFFFFF: 1, 0xFF0000FF: 1})
    assert ranked == [0xFF0000FF]


def test_prioritizes_chroma_when_proportions_equal():
    ranked = score({0xFFFF0000: 1, 0xFF00FF00: 1, 0xFF0000FF: 1})
    assert ranked == [0xFFFF0000, 0xFF00FF00, 0xFF0000FF]


def test_falls_back_to_google_blue():
    assert score({0xFF000000: 1}) == [0xFF4285F4]
    assert score({}) == [0xFF4285F4]


def test_custom_fallback():
    assert score({0xFF000000: 1}, fallback_color_argb=0xFF123456) == [0xFF123456]


def test_dedupes_nearby_hues():
    assert score({0xFF008772: 1, 0xFF318477: 1}) == [0xFF008772]


def test_maximizes_hue_distance():
    ranked = score({0xFF008772: 1, 0xFF008587: 1, 0xFF007EBC: 1}, desired=2)
    assert ranked == [0xFF007EBC, 0xFF008772]


def test_unfiltered_keeps_grays():
    ranked = score({0xFF808080: 10}, filter=False)
    assert ranked == [0xFF808080]


def test_desired_caps_result_length():
    colors = {0xFFFF0000: 5, 0xFF00FF00: 5, 0xFF0000FF: 5, 0xFFFFFF00: 5}
    assert len(score(colors, desired=2)) == 2
