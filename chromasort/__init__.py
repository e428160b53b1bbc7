"""Chromasort: order, classify and mine the colors of a photographed color chart."""

from .types import ColorGroup, PaletteType, SortMode, SwatchSource
from .colors import Swatch, Palette, build_swatches
from .conversions import (
    normalize_hex,
    is_valid_hex,
    hex_to_rgb,
    rgb_to_hex,
    hex_to_hsl,
    hsl_to_hex,
    hex_to_lab,
    lab_hue_chroma,
    get_color_brightness,
    get_complementary_color,
)
from .classification import (
    classify,
    classify_hex,
    sort_chromatic,
    sort_by_hue,
    sort_by_saturation,
    sort_by_lightness,
    sort_swatches,
    group_swatches,
)
from .harmony import (
    find_analogous,
    find_complementary,
    find_triadic,
    find_monochromatic,
    find_split_complementary,
    find_harmony,
    suggest_palettes,
)
from .calibration import CalibrationMatrix, ChannelCorrection, compute_calibration, apply_calibration
from .extraction import extract_swatches, consolidate_samples, is_valid_color, filter_valid_colors
from .serialization import collection_to_json, collection_from_json, palette_to_json, dump_state, load_state

__all__ = [
    # types
    "ColorGroup",
    "PaletteType",
    "SortMode",
    "SwatchSource",
    # value objects
    "Swatch",
    "Palette",
    "build_swatches",
    # conversions
    "normalize_hex",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsl",
    "hsl_to_hex",
    "hex_to_lab",
    "lab_hue_chroma",
    "get_color_brightness",
    "get_complementary_color",
    # classification and sorting
    "classify",
    "classify_hex",
    "sort_chromatic",
    "sort_by_hue",
    "sort_by_saturation",
    "sort_by_lightness",
    "sort_swatches",
    "group_swatches",
    # harmony
    "find_analogous",
    "find_complementary",
    "find_triadic",
    "find_monochromatic",
    "find_split_complementary",
    "find_harmony",
    "suggest_palettes",
    # calibration
    "CalibrationMatrix",
    "ChannelCorrection",
    "compute_calibration",
    "apply_calibration",
    # extraction
    "extract_swatches",
    "consolidate_samples",
    "is_valid_color",
    "filter_valid_colors",
    # serialization
    "collection_to_json",
    "collection_from_json",
    "palette_to_json",
    "dump_state",
    "load_state",
]
