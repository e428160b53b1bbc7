from chromasort.colors import Palette, Swatch
from chromasort.serialization import (
    STORAGE_KEYS,
    collection_from_json,
    collection_to_json,
    dump_state,
    load_state,
    palette_to_json,
)
from chromasort.types import PaletteType, SortMode, SwatchSource
from datetime import datetime, timezone
import json
import pytest

def test_collection_export_format():
    swatches = [Swatch("#FF6B6B", "Coral Red", "picker"), {"hex": "#4ECDC4", "name": "Turquoise", "source": "manual-hex"}]
    text = collection_to_json(swatches)
    assert json.loads(text) == [
        {"hex": "#FF6B6B", "name": "Coral Red", "source": "picker"},
        {"hex": "#4ECDC4", "name": "Turquoise", "source": "manual-hex"},
    ]
    # two-space indentation
    assert '\n  {' in text

def test_collection_export_keeps_unicode():
    text = collection_to_json([Swatch("#FFFFFF", "Blanc cassé")])
    assert "Blanc cassé" in text

def test_collection_import_round_trip():
    swatches = [Swatch("#FF6B6B", "Coral Red", "picker"), Swatch("#000000", "Ink", "csv")]
    loaded = collection_from_json(collection_to_json(swatches))
    assert [s.to_export_dict() for s in loaded] == [s.to_export_dict() for s in swatches]

def test_collection_import_skips_bad_records():
    text = json.dumps([{"hex": "#FF0000", "name": "Red"}, {"hex": "zzz"}, {"name": "no hex"}, "text"])
    with pytest.warns(UserWarning):
        loaded = collection_from_json(text)
    assert [s.hex for s in loaded] == ["#FF0000"]
    assert loaded[0].source is SwatchSource.MANUAL_HEX

def test_collection_import_rejects_other_shapes():
    with pytest.raises(ValueError):
        collection_from_json('{"hex": "#FF0000"}')
    with pytest.raises(ValueError):
        collection_from_json("not json")

def test_palette_export():
    red, cyan = Swatch("#FF0000", "Red"), Swatch("#00FFFF", "Cyan")
    palette = Palette("Complementary from Red", PaletteType.COMPLEMENTARY, "#FF0000", [red, cyan])
    stamp = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    data = json.loads(palette_to_json(palette, generated_at=stamp))
    assert data == {
        "name": "Complementary from Red",
        "type": "complementary",
        "colors": [
            {"hex": "#FF0000", "name": "Red", "source": "manual-hex"},
            {"hex": "#00FFFF", "name": "Cyan", "source": "manual-hex"},
        ],
        "baseColor": "#FF0000",
        "generatedAt": "2024-05-01T12:30:00+00:00",
    }

def test_palette_file_imports_as_collection():
    palette = Palette("p", "analogous", "#FF0000", [Swatch("#FF0000", "Red")])
    loaded = collection_from_json(palette_to_json(palette))
    assert [s.name for s in loaded] == ["Red"]

def test_state_round_trip():
    swatches = [Swatch("#FF0000", "Red", "bulk-text", id="one", frequency=2), Swatch("#00FFFF", id="two")]
    storage = dump_state(swatches, "chromatic")
    assert set(storage) == set(STORAGE_KEYS.values())
    assert storage[STORAGE_KEYS["sort_order"]] == "chromatic"
    loaded, mode = load_state(storage)
    assert loaded == swatches
    assert mode is SortMode.CHROMATIC

def test_load_state_defaults():
    assert load_state({}) == ([], SortMode.HUE)

def test_load_state_corrupt_colors():
    storage = {STORAGE_KEYS["colors"]: "{not json", STORAGE_KEYS["sort_order"]: "lightness"}
    with pytest.warns(UserWarning):
        loaded, mode = load_state(storage)
    assert loaded == []
    assert mode is SortMode.LIGHTNESS

def test_load_state_legacy_sources():
    raw = json.dumps([{"id": "x", "hex": "#ff0000", "name": "Red", "source": "hex"}])
    loaded, _ = load_state({STORAGE_KEYS["colors"]: raw})
    assert loaded[0].source is SwatchSource.MANUAL_HEX
    assert loaded[0].hex == "#FF0000"

def test_load_state_records_from_extractor():
    raw = json.dumps([
        {"id": 1717171717171.42, "hex": "#E53935", "name": "Rotulador 001", "source": "extracted", "frequency": 12, "saturation": 76},
        {"id": 1717171717172.9, "hex": "#1E88E5", "name": "Rotulador 002", "source": "grid"},
        {"id": 1717171717173.1, "hex": "#43A047", "name": "Punto 1", "source": "manual"},
    ])
    loaded, _ = load_state({STORAGE_KEYS["colors"]: raw})
    assert [s.hex for s in loaded] == ["#E53935", "#1E88E5", "#43A047"]
    assert [s.source for s in loaded] == [SwatchSource.AUTO_EXTRACT, SwatchSource.GRID_EXTRACT, SwatchSource.MANUAL_POINT]
    assert loaded[0].frequency == 12
    assert loaded[0].id == "1717171717171.42"
