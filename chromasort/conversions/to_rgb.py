from __future__ import annotations
import math
from typing import Tuple

from ..types.color_types import HexColor
from ..utils.hue import normalize_hue
from .constants import MAX_CHANNEL
from .hex import rgb_to_hex
from .to_hsl import hex_to_hsl


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB in [0, 1].

    Args:
        h: Hue in degrees (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
    """
    h = normalize_hue(h)
    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs((h / 60) % 2 - 1))
    m = l - chroma / 2

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsl_to_hex(h: float, s: float, l: float) -> HexColor:
    """
    Convert HSL to hex.

    Args:
        h: Hue in degrees
        s: Saturation in percent [0, 100]
        l: Lightness in percent [0, 100]
    """
    r, g, b = hsl_to_unit_rgb(h, s / 100, l / 100)
    return rgb_to_hex(r * MAX_CHANNEL, g * MAX_CHANNEL, b * MAX_CHANNEL)


def get_complementary_color(hex_color: str) -> HexColor:
    """Rotate the HSL hue of a color by 180 degrees, keeping s and l."""
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex((h + 180) % 360, s, l)
