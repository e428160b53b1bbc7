"""Circular hue helpers shared by the classifier and the harmony finders."""

import numpy as np
from numpy import ndarray as NDArray

HUE_360 = 360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360


def hue_distance(h1: float, h2: float) -> float:
    """
    Circular distance between two hues in degrees.

    Always in [0, 180]: ``min(|h1 - h2|, 360 - |h1 - h2|)``.
    """
    diff = abs(h1 - h2)
    return min(diff, HUE_360 - diff)


def np_hue_distance(h1: NDArray, h2: NDArray) -> NDArray:
    """Vectorized: circular hue distance, broadcasting ``h1`` against ``h2``."""
    diff = np.abs(np.asarray(h1, dtype=float) - np.asarray(h2, dtype=float))
    return np.minimum(diff, HUE_360 - diff)
