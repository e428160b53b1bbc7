"""
Chromasort Color Space Conversions
==================================

Pure conversions between the color representations used when ordering a
color chart: hex strings, 8-bit RGB, HSL, XYZ and CIELAB.

Hex strings are the canonical form of a swatch; every other triple is
recomputed on demand.

Conversion Functions
--------------------

Hex / RGB:
    normalize_hex(value), is_valid_hex(value)
        Canonical ``#RRGGBB`` form and validation
    hex_to_rgb(hex) / rgb_to_hex(r, g, b)
        8-bit channels; ``rgb_to_hex`` rounds half away from zero and clamps
    np_hex_to_rgb(hexes)
        Vectorized, returns an (N, 3) array

HSL:
    hex_to_hsl(hex)
        Integer (h, s, l): degrees and percent
    unit_rgb_to_hsl(r, g, b)
        Float HSL from RGB in [0, 1]
    hsl_to_hex(h, s, l)
        Inverse of ``hex_to_hsl``
    hsl_to_unit_rgb(h, s, l)

CIELAB:
    hex_to_lab(hex), rgb_to_lab(r, g, b), np_hex_to_lab(hexes)
        sRGB -> XYZ (D65) -> Lab
    lab_hue_chroma(a, b), np_lab_hue_chroma(lab)
        Polar hue angle and chroma; the Lab hue is NOT the HSL hue

Derived:
    get_color_brightness(hex)
        Perceived luminance, 0-255
    get_complementary_color(hex)
        HSL hue rotated by 180 degrees

Examples
--------
>>> from chromasort.conversions import hex_to_hsl, hex_to_lab, lab_hue_chroma
>>> hex_to_hsl("#FF0000")
(0, 100, 50)
>>> L, a, b = hex_to_lab("#FF0000")
>>> hue, chroma = lab_hue_chroma(a, b)
"""

from .hex import (
    normalize_hex,
    is_valid_hex,
    hex_to_rgb,
    rgb_to_hex,
    np_hex_to_rgb,
    get_color_brightness,
)
from .to_hsl import (
    unit_rgb_to_hsl,
    hex_to_hsl,
)
from .to_rgb import (
    hsl_to_unit_rgb,
    hsl_to_hex,
    get_complementary_color,
)
from .to_lab import (
    LabHueChroma,
    srgb_to_linear,
    linear_rgb_to_xyz,
    rgb_to_xyz,
    xyz_to_lab,
    rgb_to_lab,
    hex_to_lab,
    lab_hue_chroma,
    np_srgb_to_linear,
    np_rgb_to_lab,
    np_hex_to_lab,
    np_lab_hue_chroma,
)

__all__ = [
    # Hex / RGB
    'normalize_hex',
    'is_valid_hex',
    'hex_to_rgb',
    'rgb_to_hex',
    'np_hex_to_rgb',
    'get_color_brightness',

    # HSL
    'unit_rgb_to_hsl',
    'hex_to_hsl',
    'hsl_to_unit_rgb',
    'hsl_to_hex',
    'get_complementary_color',

    # Lab
    'LabHueChroma',
    'srgb_to_linear',
    'linear_rgb_to_xyz',
    'rgb_to_xyz',
    'xyz_to_lab',
    'rgb_to_lab',
    'hex_to_lab',
    'lab_hue_chroma',
    'np_srgb_to_linear',
    'np_rgb_to_lab',
    'np_hex_to_lab',
    'np_lab_hue_chroma',
]
