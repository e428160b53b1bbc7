from chromasort.colors import Swatch
from chromasort.harmony import (
    find_analogous,
    find_complementary,
    find_harmony,
    find_monochromatic,
    find_split_complementary,
    find_triadic,
)
from chromasort.types import PaletteType
import pytest

def swatches(*hexes):
    return [Swatch(h, name=h) for h in hexes]

def hexes_of(items):
    return [s.hex for s in items]

def test_complementary_base_first():
    red, cyan = swatches("#FF0000", "#00FFFF")
    assert find_complementary([red, cyan], "#FF0000") == [red, cyan]
    assert find_complementary([cyan, red], "#FF0000") == [red, cyan]

def test_complementary_pads_with_near_base_colors():
    collection = swatches("#FF4000", "#00FFFF", "#FF2000", "#FF0000")
    # hues: 15, 180, 8, 0
    result = find_complementary(collection, "#FF0000", count=4)
    assert hexes_of(result) == ["#FF0000", "#00FFFF", "#FF2000", "#FF4000"]

def test_complementary_padding_uses_each_hex_once():
    collection = [Swatch("#FF0000"), Swatch("#00FFFF"), Swatch("#FF4000", id="a"), Swatch("#FF4000", id="b")]
    result = find_complementary(collection, "#FF0000", count=10)
    assert hexes_of(result) == ["#FF0000", "#00FFFF", "#FF4000"]
    assert result[2].id == "a"

def test_complementary_without_base_in_collection():
    collection = swatches("#00FFFF", "#00FF00")
    assert hexes_of(find_complementary(collection, "#FF0000")) == ["#00FFFF"]

def test_analogous():
    collection = swatches("#00AAFF", "#FFD500", "#FF0000")
    # hues: 200, 50, 0
    result = find_analogous(collection, "#FF0000")
    assert hexes_of(result) == ["#FF0000", "#FFD500"]

def test_analogous_count():
    collection = swatches("#FF0000", "#FF2000", "#FF4000", "#FF6000")
    assert hexes_of(find_analogous(collection, "#FF0000", count=2)) == ["#FF0000", "#FF2000"]

def test_triadic():
    collection = swatches("#00FFFF", "#0000FF", "#FF8000", "#00FF00", "#FF0000")
    # hues: 180, 240, 30, 120, 0
    result = find_triadic(collection, "#FF0000")
    assert hexes_of(result) == ["#FF0000", "#0000FF", "#00FF00", "#FF8000"]

def test_monochromatic_ranks_by_lightness():
    collection = swatches("#800000", "#FF8080", "#FF0000", "#FF4000", "#00FF00")
    # lightness: 25, 75, 50, 50; green is out of range
    result = find_monochromatic(collection, "#FF0000")
    assert hexes_of(result) == ["#FF0000", "#FF4000", "#800000", "#FF8080"]

def test_split_complementary():
    collection = swatches("#FFFF00", "#0080FF", "#00FF80", "#FF0000")
    # hues: 60, 210, 150, 0
    result = find_split_complementary(collection, "#FF0000")
    assert hexes_of(result) == ["#FF0000", "#0080FF", "#00FF80"]

def test_finders_return_collection_members():
    collection = swatches("#FF0000", "#00FFFF", "#00FF00", "#0000FF", "#FF8000")
    for palette_type in PaletteType:
        for item in find_harmony(collection, "#FF0000", palette_type):
            assert any(item is member for member in collection)

def test_zero_and_negative_count():
    collection = swatches("#FF0000", "#00FFFF")
    assert find_complementary(collection, "#FF0000", count=0) == []
    assert find_analogous(collection, "#FF0000", count=-3) == []

def test_empty_collection():
    for palette_type in PaletteType:
        assert find_harmony([], "#FF0000", palette_type) == []

def test_finders_accept_mappings_and_case():
    collection = [{"hex": "#ff0000"}, {"hex": "#00ffff"}]
    assert find_complementary(collection, "FF0000") == collection

def test_malformed_member_is_skipped():
    collection = [{"hex": "#FF0000"}, {"hex": "oops"}, {"hex": "#00FFFF"}]
    with pytest.warns(UserWarning):
        result = find_complementary(collection, "#FF0000")
    assert result == [{"hex": "#FF0000"}, {"hex": "#00FFFF"}]

def test_malformed_base_raises():
    with pytest.raises(ValueError):
        find_analogous(swatches("#FF0000"), "oops")

def test_find_harmony_default_counts():
    collection = swatches(*[f"#FF{g:02X}00" for g in range(0, 80, 8)])
    assert len(find_harmony(collection, "#FF0000", "analogous")) == 5
    assert len(find_harmony(collection, "#FF0000", PaletteType.COMPLEMENTARY)) == 4
    assert len(find_harmony(collection, "#FF0000", "triadic")) == 6
    assert len(find_harmony(collection, "#FF0000", "analogous", count=2)) == 2
    with pytest.raises(ValueError):
        find_harmony(collection, "#FF0000", "tetradic")
