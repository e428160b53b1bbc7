"""
sRGB -> XYZ -> CIELAB under D65.

Scalar functions work on plain floats; the ``np_`` variants take arrays with
channels on the last axis.
"""
from __future__ import annotations
import math
from typing import Iterable, NamedTuple, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LabTuple, XYZTuple
from ..utils.hue import HUE_360
from .constants import (
    CIE_EPSILON,
    CIE_KAPPA,
    D65_WHITE,
    MAX_CHANNEL,
    SRGB_GAMMA_EXPONENT,
    SRGB_GAMMA_OFFSET,
    SRGB_GAMMA_THRESHOLD,
    SRGB_LINEAR_SLOPE,
    SRGB_TO_XYZ,
    SRGB_TO_XYZ_NP,
)
from .hex import hex_to_rgb, np_hex_to_rgb


class LabHueChroma(NamedTuple):
    hue: float
    chroma: float


# ===================== scalar =====================

def srgb_to_linear(channel: float) -> float:
    """Inverse sRGB companding for one channel in [0, 1]."""
    if channel > SRGB_GAMMA_THRESHOLD:
        return ((channel + SRGB_GAMMA_OFFSET) / (1 + SRGB_GAMMA_OFFSET)) ** SRGB_GAMMA_EXPONENT
    return channel / SRGB_LINEAR_SLOPE


def linear_rgb_to_xyz(r: float, g: float, b: float) -> XYZTuple:
    """Linear sRGB in [0, 1] to XYZ (Y of white == 1)."""
    return tuple(row[0] * r + row[1] * g + row[2] * b for row in SRGB_TO_XYZ)  # type: ignore


def _lab_f(t: float) -> float:
    if t > CIE_EPSILON:
        return t ** (1 / 3)
    return (CIE_KAPPA * t + 16) / 116


def xyz_to_lab(x: float, y: float, z: float) -> LabTuple:
    """XYZ (Y of white == 1) to CIELAB relative to D65."""
    fx = _lab_f(x / D65_WHITE[0])
    fy = _lab_f(y / D65_WHITE[1])
    fz = _lab_f(z / D65_WHITE[2])
    return (116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def rgb_to_xyz(r: int, g: int, b: int) -> XYZTuple:
    """sRGB channels in [0, 255] to XYZ."""
    return linear_rgb_to_xyz(
        srgb_to_linear(r / MAX_CHANNEL),
        srgb_to_linear(g / MAX_CHANNEL),
        srgb_to_linear(b / MAX_CHANNEL),
    )


def rgb_to_lab(r: int, g: int, b: int) -> LabTuple:
    """sRGB channels in [0, 255] to CIELAB."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def hex_to_lab(hex_color: str) -> LabTuple:
    """
    Convert a hex color to CIELAB ``(L, a, b)``.

    Raises:
        ValueError: malformed hex color.
    """
    return rgb_to_lab(*hex_to_rgb(hex_color))


def lab_hue_chroma(a: float, b: float) -> LabHueChroma:
    """
    Polar form of the a*/b* plane.

    The hue is the CIELAB hue angle in [0, 360); it is not the HSL hue of the
    same color.
    """
    chroma = math.sqrt(a * a + b * b)
    hue = math.degrees(math.atan2(b, a))
    if hue < 0:
        hue += HUE_360
    return LabHueChroma(hue, chroma)


# ===================== vectorized =====================

def np_srgb_to_linear(rgb: NDArray) -> NDArray:
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.where(
        rgb > SRGB_GAMMA_THRESHOLD,
        ((rgb + SRGB_GAMMA_OFFSET) / (1 + SRGB_GAMMA_OFFSET)) ** SRGB_GAMMA_EXPONENT,
        rgb / SRGB_LINEAR_SLOPE,
    )


def np_rgb_to_lab(rgb: NDArray) -> NDArray:
    """
    Vectorized: sRGB in [0, 255] with shape (..., 3) to CIELAB (..., 3).
    """
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=np.float64) / MAX_CHANNEL)
    xyz = linear @ SRGB_TO_XYZ_NP.T
    ratio = xyz / np.array(D65_WHITE)
    f = np.where(ratio > CIE_EPSILON, np.cbrt(ratio), (CIE_KAPPA * ratio + 16) / 116)
    L = 116 * f[..., 1] - 16
    a = 500 * (f[..., 0] - f[..., 1])
    b = 200 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def np_hex_to_lab(hex_colors: Iterable[str]) -> NDArray:
    """Vectorized: convert hex colors to an ``(N, 3)`` Lab array."""
    return np_rgb_to_lab(np_hex_to_rgb(hex_colors))


def np_lab_hue_chroma(lab: NDArray) -> Tuple[NDArray, NDArray]:
    """Vectorized ``lab_hue_chroma`` over a (..., 3) Lab array."""
    lab = np.asarray(lab, dtype=np.float64)
    a, b = lab[..., 1], lab[..., 2]
    hue = np.degrees(np.arctan2(b, a))
    hue = np.where(hue < 0, hue + HUE_360, hue)
    return hue, np.hypot(a, b)
