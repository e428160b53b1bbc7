from chromasort.utils import (
    hue_distance,
    normalize_hue,
    np_hue_distance,
    np_round_half_away,
    round_half_away,
)
from chromasort.types import SortMode
import numpy as np

def test_hue_distance_is_circular():
    assert hue_distance(10, 350) == 20
    assert hue_distance(350, 10) == 20
    assert hue_distance(0, 180) == 180
    assert hue_distance(90, 90) == 0
    for a in range(0, 360, 17):
        for b in range(0, 360, 23):
            assert 0 <= hue_distance(a, b) <= 180

def test_np_hue_distance():
    out = np_hue_distance(np.array([10, 0, 90]), np.array([350, 180, 90]))
    assert np.allclose(out, [20, 180, 0])

def test_normalize_hue():
    assert normalize_hue(360) == 0
    assert normalize_hue(-30) == 330
    assert normalize_hue(725) == 5

def test_round_half_away():
    assert round_half_away(2.5) == 3
    assert round_half_away(-2.5) == -3
    assert round_half_away(0.49) == 0
    assert round_half_away(127.5) == 128
    assert np.array_equal(np_round_half_away([0.5, 1.5, -0.5, 2.4]), [1, 2, -1, 2])

def test_sort_mode_parse():
    assert SortMode.parse("Chromatic") is SortMode.CHROMATIC
    assert SortMode.parse(SortMode.SATURATION) is SortMode.SATURATION
    assert SortMode.parse(None) is SortMode.HUE
    assert SortMode.parse("rainbow") is SortMode.HUE
