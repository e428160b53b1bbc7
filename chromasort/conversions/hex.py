from __future__ import annotations
import re
from typing import Any, Iterable

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HexColor, RGBTuple
from ..utils.num_utils import round_half_away
from .constants import LUMA_WEIGHTS, MAX_CHANNEL

HEX_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")
CANONICAL_HEX_PATTERN = re.compile(r"^#[0-9A-F]{6}$")


def is_valid_hex(value: Any) -> bool:
    """True for six hex digits with an optional leading ``#``, any case."""
    return isinstance(value, str) and HEX_PATTERN.fullmatch(value) is not None


def normalize_hex(value: str) -> HexColor:
    """
    Return the canonical ``#RRGGBB`` (uppercase) form of a hex color.

    Raises:
        TypeError: ``value`` is not a string.
        ValueError: ``value`` is not six hex digits with an optional ``#``.
    """
    if not isinstance(value, str):
        raise TypeError(f"Hex color must be a string, got {type(value).__name__}")
    if HEX_PATTERN.fullmatch(value) is None:
        raise ValueError(f"Invalid hex color: {value!r}")
    return "#" + value.lstrip("#").upper()


def hex_to_rgb(hex_color: str) -> RGBTuple:
    """Convert a hex color to an ``(r, g, b)`` tuple of ints in [0, 255]."""
    digits = normalize_hex(hex_color)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _clamp_channel(value: float) -> int:
    return max(0, min(round_half_away(value), MAX_CHANNEL))


def rgb_to_hex(r: float, g: float, b: float) -> HexColor:
    """
    Convert RGB channels to ``#RRGGBB``.

    Channels are rounded half away from zero and clamped to [0, 255], so
    slightly out-of-range values from calibration or HSL math are accepted.
    """
    return "#" + "".join(f"{_clamp_channel(c):02X}" for c in (r, g, b))


def np_hex_to_rgb(hex_colors: Iterable[str]) -> NDArray:
    """
    Vectorized: convert a sequence of hex colors to an ``(N, 3)`` int array.

    Raises ValueError on the first malformed entry.
    """
    rows = [hex_to_rgb(h) for h in hex_colors]
    if not rows:
        return np.zeros((0, 3), dtype=np.int64)
    return np.array(rows, dtype=np.int64)


def get_color_brightness(hex_color: str) -> int:
    """Perceived luminance of a hex color, 0 (black) to 255 (white)."""
    r, g, b = hex_to_rgb(hex_color)
    wr, wg, wb = LUMA_WEIGHTS
    return round_half_away(wr * r + wg * g + wb * b)
