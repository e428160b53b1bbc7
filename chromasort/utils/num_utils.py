import math

import numpy as np
from numpy import ndarray as NDArray


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def np_round_half_away(values: NDArray) -> NDArray:
    """Vectorized ``round_half_away``; returns a float array of whole numbers."""
    values = np.asarray(values, dtype=float)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)
