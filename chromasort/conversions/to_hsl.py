from __future__ import annotations
from typing import Tuple

from ..types.color_types import HSLTuple
from ..utils.hue import HUE_360
from ..utils.num_utils import round_half_away
from .constants import MAX_CHANNEL
from .hex import hex_to_rgb


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB in [0, 1] to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness

    if lightness > 0.5:
        saturation = delta / (2.0 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    # Six-way piecewise hue; ties resolve red, then green, then blue
    if max_c == r:
        sector = (g - b) / delta + (6.0 if g < b else 0.0)
    elif max_c == g:
        sector = (b - r) / delta + 2.0
    else:
        sector = (r - g) / delta + 4.0

    hue = (sector * 60.0) % HUE_360
    return hue, saturation, lightness


def hex_to_hsl(hex_color: str) -> HSLTuple:
    """
    Convert a hex color to integer HSL.

    Returns:
        (h, s, l): hue in whole degrees [0, 360), saturation and lightness in
        whole percent [0, 100].

    Raises:
        ValueError: malformed hex color.
    """
    r, g, b = hex_to_rgb(hex_color)
    h, s, l = unit_rgb_to_hsl(r / MAX_CHANNEL, g / MAX_CHANNEL, b / MAX_CHANNEL)
    return (
        round_half_away(h) % HUE_360,
        round_half_away(s * 100),
        round_half_away(l * 100),
    )

