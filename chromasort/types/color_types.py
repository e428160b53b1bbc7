from __future__ import annotations
from enum import Enum
from typing import Tuple

HexColor = str
RGBTuple = Tuple[int, int, int]
HSLTuple = Tuple[int, int, int]
LabTuple = Tuple[float, float, float]
XYZTuple = Tuple[float, float, float]


class SwatchSource(str, Enum):
    """Where a swatch came from."""
    MANUAL_HEX = "manual-hex"
    MANUAL_RGB = "manual-rgb"
    PICKER = "picker"
    FILE = "file"
    CSV = "csv"
    BULK_TEXT = "bulk-text"
    AUTO_EXTRACT = "auto-extract"
    GRID_EXTRACT = "grid-extract"
    MANUAL_POINT = "manual-point"


class PaletteType(str, Enum):
    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    SPLIT = "split"


class SortMode(str, Enum):
    HUE = "hue"
    SATURATION = "saturation"
    LIGHTNESS = "lightness"
    CHROMATIC = "chromatic"

    @classmethod
    def parse(cls, value: "SortMode | str | None") -> "SortMode":
        """Parse a stored sort mode, falling back to HUE for unknown values."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.HUE
