from .color_types import (
    HexColor,
    RGBTuple,
    HSLTuple,
    LabTuple,
    XYZTuple,
    SwatchSource,
    PaletteType,
    SortMode,
)
from .color_group import ColorGroup

__all__ = [
    "HexColor",
    "RGBTuple",
    "HSLTuple",
    "LabTuple",
    "XYZTuple",
    "SwatchSource",
    "PaletteType",
    "SortMode",
    "ColorGroup",
]
