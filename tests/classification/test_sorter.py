from chromasort.classification import (
    compare_chromatic,
    chromatic_key,
    group_swatches,
    sort_by_hue,
    sort_by_lightness,
    sort_by_saturation,
    sort_chromatic,
    sort_swatches,
    ChromaticKey,
)
from chromasort.colors import Swatch
from chromasort.types import ColorGroup, SortMode
from chromasort.samples import DEMO_MARKERS, samples_hex_group
from functools import cmp_to_key
import pytest

def _key(hue, L=50.0, chroma=40.0, group=ColorGroup.BLUE):
    return ChromaticKey(L, 0.0, 0.0, hue, chroma, group)

def test_compare_by_group_rank():
    assert compare_chromatic(_key(0, group=ColorGroup.YELLOW), _key(0, group=ColorGroup.RED)) == -1
    assert compare_chromatic(_key(0, group=ColorGroup.BLACK_NEUTRAL), _key(0, group=ColorGroup.RED)) == 1

def test_compare_hue_tolerance():
    assert compare_chromatic(_key(100), _key(102)) == 0
    assert compare_chromatic(_key(100), _key(104)) == -1
    assert compare_chromatic(_key(104), _key(100)) == 1

def test_compare_lightness_then_chroma():
    # lighter first once the hues tie
    assert compare_chromatic(_key(100, L=70), _key(101, L=50)) == -1
    assert compare_chromatic(_key(100, L=50), _key(101, L=51)) == 0
    # more chroma first once lightness ties
    assert compare_chromatic(_key(100, L=50, chroma=60), _key(101, L=51, chroma=40)) == -1

def test_sort_chromatic_groups_in_rank_order():
    hexes = ["#000000", "#0000FF", "#FF0000", "#FFA500", "#00FF00", "#8B4513"]
    swatches = [Swatch(h) for h in hexes]
    result = sort_chromatic(swatches)
    assert len(result) == len(swatches)
    ranks = [chromatic_key(s.hex).group.rank for s in result]
    assert ranks == sorted(ranks)
    assert result[0].hex == "#FFA500"
    assert result[-1].hex == "#000000"

def test_sort_chromatic_is_stable_on_ties():
    swatches = [Swatch("#FF0000", name=str(i)) for i in range(5)]
    assert [s.name for s in sort_chromatic(swatches)] == ["0", "1", "2", "3", "4"]

def test_sort_chromatic_accepts_mappings():
    items = [{"hex": "#000000"}, {"hex": "#FFA500"}]
    assert sort_chromatic(items) == [{"hex": "#FFA500"}, {"hex": "#000000"}]

def test_sort_chromatic_keeps_malformed():
    items = [{"hex": "#FF0000"}, {"hex": "bogus"}, {"hex": "#FFA500"}]
    with pytest.warns(UserWarning):
        result = sort_chromatic(items)
    assert len(result) == 3
    assert result[-1] == {"hex": "bogus"}

def test_sort_empty():
    assert sort_chromatic([]) == []
    assert sort_by_hue([]) == []

def test_group_swatches():
    swatches = [Swatch(h) for h in ("#000000", "#FF0000", "#FF1000", "#FFA500")]
    groups = group_swatches(swatches)
    assert list(groups) == sorted(groups, key=lambda g: g.rank)
    assert [s.hex for s in groups[ColorGroup.BLACK_NEUTRAL]] == ["#000000"]
    assert len(groups[ColorGroup.RED]) == 2

def test_hsl_sorts():
    swatches = [Swatch(h) for h in ("#0000FF", "#FF0000", "#00FF00", "#808080", "#FFFFFF")]
    assert [s.hex for s in sort_by_hue(swatches)] == ["#FF0000", "#808080", "#FFFFFF", "#00FF00", "#0000FF"]
    assert [s.hex for s in sort_by_lightness(swatches)][-1] == "#FFFFFF"
    assert [s.hex for s in sort_by_lightness(swatches)][0] == "#0000FF"
    assert [s.hex for s in sort_by_saturation(swatches)][:3] == ["#0000FF", "#FF0000", "#00FF00"]

def test_hsl_sort_keeps_malformed():
    items = [{"hex": "#0000FF"}, {"hex": "xyz"}]
    with pytest.warns(UserWarning):
        result = sort_by_hue(items)
    assert result == [{"hex": "xyz"}, {"hex": "#0000FF"}]

def test_sort_swatches_modes():
    swatches = [Swatch(h) for h in ("#0000FF", "#FF0000", "#FFA500")]
    assert sort_swatches(swatches, SortMode.HUE) == sort_by_hue(swatches)
    assert sort_swatches(swatches, "chromatic") == sort_chromatic(swatches)
    assert sort_swatches(swatches, "lightness") == sort_by_lightness(swatches)
    assert sort_swatches(swatches, "nonsense") == sort_by_hue(swatches)
    assert sort_swatches(swatches) == sort_by_hue(swatches)

def test_sort_does_not_mutate_input():
    swatches = [Swatch(h) for h in ("#0000FF", "#FF0000")]
    before = list(swatches)
    sort_chromatic(swatches)
    assert swatches == before

def test_near_equal_hues_keep_input_order():
    first = ChromaticKey(53.0, 60.0, 50.0, 40.0, 78.0, ColorGroup.RED)
    second = ChromaticKey(53.0, 58.0, 52.0, 42.0, 78.0, ColorGroup.RED)
    assert compare_chromatic(first, second) == 0
    assert compare_chromatic(second, first) == 0
    assert sorted([first, second], key=cmp_to_key(compare_chromatic)) == [first, second]
    assert sorted([second, first], key=cmp_to_key(compare_chromatic)) == [second, first]

def test_sort_chromatic_is_idempotent():
    hexes = [h for h, _, _ in DEMO_MARKERS] + list(samples_hex_group) + ["#C0C0C0", "#FFFFFF"]
    swatches = [Swatch(h) for h in hexes]
    once = sort_chromatic(swatches)
    twice = sort_chromatic(once)
    assert [s.id for s in twice] == [s.id for s in once]
