from chromasort.colors import Palette, Swatch
from chromasort.types import PaletteType
import pytest

def test_palette_properties():
    colors = [Swatch("#FF0000", "Red"), {"hex": "#00ffff", "name": "Cyan"}]
    palette = Palette("Complementary from Red", "complementary", "ff0000", colors)
    assert palette.type is PaletteType.COMPLEMENTARY
    assert palette.base_color_hex == "#FF0000"
    assert palette.colors == tuple(colors)
    assert palette.hexes == ("#FF0000", "#00ffff")
    assert len(palette) == 2
    assert list(palette) == colors

def test_palette_rejects_unknown_type():
    with pytest.raises(ValueError):
        Palette("x", "tetradic", "#FF0000", [])

def test_palette_is_immutable():
    palette = Palette("x", PaletteType.TRIADIC, "#FF0000", [])
    with pytest.raises(AttributeError):
        palette._name = "y"

def test_palette_equality():
    red = Swatch("#FF0000", id="r")
    a = Palette("x", PaletteType.ANALOGOUS, "#FF0000", [red])
    b = Palette("x", "analogous", "#ff0000", (red,))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Palette("y", PaletteType.ANALOGOUS, "#FF0000", [red])
