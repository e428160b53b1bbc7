"""
Consolidation of sampled chart colors.

The pixel sampler is external; these functions take its output, an array of
8-bit RGB (or RGBA) samples, and collapse near-identical samples into one
color per marker. Each color remembers how many samples supported it.
"""
from __future__ import annotations
import math
from typing import Iterable, List, NamedTuple, Optional

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function
from numpy import ndarray as NDArray

from ..colors.swatch import Swatch
from ..conversions import hex_to_rgb, is_valid_hex, rgb_to_hex
from ..conversions.constants import MAX_CHANNEL
from ..normalizers import SwatchInput, swatch_hex
from ..types.color_types import HexColor, SwatchSource
from ..utils.num_utils import np_round_half_away
from .thresholds import (
    DEFAULT_MAX_COLORS,
    DEFAULT_TOLERANCE,
    MIN_ALPHA,
    SAMPLE_BRIGHTNESS_RANGE,
    SAMPLE_MIN_SATURATION,
    VALID_BRIGHTNESS_RANGE,
    VALID_MIN_SATURATION,
)


class ColorCluster(NamedTuple):
    """A consolidated color: its first sample, how many samples joined it and that sample's stats."""
    hex: HexColor
    frequency: int
    saturation: float
    brightness: float

    @property
    def score(self) -> float:
        return self.frequency * (1 + self.saturation)


# ===================== single colors =====================

def channel_saturation(r: float, g: float, b: float) -> float:
    """HSV-style saturation ``(max - min) / max``; 0 for black."""
    max_c = max(r, g, b)
    if max_c == 0:
        return 0.0
    return (max_c - min(r, g, b)) / max_c


def color_distance(hex1: str, hex2: str) -> float:
    """Euclidean distance between two hex colors in 8-bit RGB space."""
    return math.dist(hex_to_rgb(hex1), hex_to_rgb(hex2))


def is_valid_color(hex_color: Optional[str]) -> bool:
    """
    True for colors worth keeping as a marker: neither near-black,
    near-white nor grayish. Malformed or missing hex values are not valid.
    """
    if not is_valid_hex(hex_color):
        return False
    r, g, b = hex_to_rgb(hex_color)
    brightness = (r + g + b) / 3
    low, high = VALID_BRIGHTNESS_RANGE
    return low < brightness < high and channel_saturation(r, g, b) > VALID_MIN_SATURATION


def filter_valid_colors(swatches: Iterable[SwatchInput]) -> List[SwatchInput]:
    """Keep the items whose hex passes ``is_valid_color``, in order."""
    return [item for item in swatches if is_valid_color(swatch_hex(item))]


# ===================== sample arrays =====================

def _as_samples(samples: NDArray) -> NDArray:
    arr = np.asarray(samples, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.shape[-1] not in (3, 4):
        raise ValueError(f"Samples must have 3 (RGB) or 4 (RGBA) channels on the last axis, got shape {arr.shape}")
    return arr.reshape(-1, arr.shape[-1])


def np_channel_saturation(rgb: NDArray) -> NDArray:
    """Vectorized ``channel_saturation`` over an array of shape (..., 3)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    safe_max = np.where(max_c == 0, 1.0, max_c)
    return np.where(max_c == 0, 0.0, (max_c - min_c) / safe_max)


def np_sample_mask(samples: NDArray) -> NDArray:
    """
    Boolean mask of the samples that may seed or join a color: opaque,
    inside the brightness window and saturated enough.
    """
    arr = _as_samples(samples)
    rgb = arr[:, :3]
    brightness = rgb.mean(axis=1)
    low, high = SAMPLE_BRIGHTNESS_RANGE
    mask = (brightness >= low) & (brightness <= high)
    mask &= np_channel_saturation(rgb) >= SAMPLE_MIN_SATURATION
    if arr.shape[1] == 4:
        mask &= arr[:, 3] >= MIN_ALPHA
    return mask


def consolidate_samples(samples: NDArray, tolerance: float = DEFAULT_TOLERANCE) -> List[ColorCluster]:
    """
    Collapse sampled colors into clusters, best first.

    Samples are visited in order. A sample closer than ``tolerance`` (RGB
    distance) to an existing cluster's first sample joins the earliest such
    cluster; otherwise it starts a new one. Clusters are ranked by
    ``frequency * (1 + saturation)``, descending, ties keeping discovery order.

    Args:
        samples: array-like of shape (N, 3) or (N, 4), or an image of shape
            (H, W, 3|4); 8-bit channel values.
        tolerance: merge distance in 8-bit RGB units.
    """
    arr = _as_samples(samples)
    clamp = bound_type_to_np_function[BoundType.CLAMP]
    rgb = np.asarray(clamp(np_round_half_away(arr[:, :3]), 0.0, float(MAX_CHANNEL)))
    rgb = rgb[np_sample_mask(arr)]

    seeds = np.empty_like(rgb)
    clusters: List[ColorCluster] = []
    for sample in rgb:
        if clusters:
            distances = np.sqrt(((seeds[:len(clusters)] - sample) ** 2).sum(axis=1))
            hits = np.flatnonzero(distances < tolerance)
            if hits.size:
                first = int(hits[0])
                clusters[first] = clusters[first]._replace(frequency=clusters[first].frequency + 1)
                continue
        seeds[len(clusters)] = sample
        r, g, b = (int(c) for c in sample)
        clusters.append(ColorCluster(rgb_to_hex(r, g, b), 1, channel_saturation(r, g, b), (r + g + b) / 3))

    return sorted(clusters, key=lambda cluster: -cluster.score)


def extract_swatches(
    samples: NDArray,
    max_colors: int = DEFAULT_MAX_COLORS,
    tolerance: float = DEFAULT_TOLERANCE,
    name_prefix: str = "Marker",
) -> List[Swatch]:
    """
    Consolidate samples and turn the best ``max_colors`` clusters into
    ``AUTO_EXTRACT`` swatches named ``"<name_prefix> 001"``, ``"... 002"``, ...
    with ``frequency`` set to the cluster's sample count.
    """
    clusters = consolidate_samples(samples, tolerance)[:max(0, int(max_colors))]
    return [
        Swatch(
            cluster.hex,
            f"{name_prefix} {index:03d}",
            SwatchSource.AUTO_EXTRACT,
            frequency=cluster.frequency,
        )
        for index, cluster in enumerate(clusters, start=1)
    ]
