"""
Black/white point calibration.

A ``CalibrationMatrix`` holds one affine correction per RGB channel, computed
from the colors sampled on a chart's black and white reference patches. It
maps the black sample to 0 and the white sample to 255.
"""
from __future__ import annotations
from collections.abc import Mapping
from typing import Any, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from boundednumbers import BoundType, bound_type_to_np_function
from numpy import ndarray as NDArray

from ..colors.frozen import Frozen
from ..conversions import hex_to_rgb, rgb_to_hex
from ..conversions.constants import MAX_CHANNEL
from ..utils.num_utils import np_round_half_away, round_half_away

TARGET_BLACK = 0
TARGET_WHITE = MAX_CHANNEL
CHANNELS = ("r", "g", "b")


class ChannelCorrection(NamedTuple):
    scale: float
    offset: float

    def apply(self, value: float) -> int:
        return max(0, min(round_half_away(value * self.scale + self.offset), MAX_CHANNEL))


IDENTITY = ChannelCorrection(1.0, 0.0)


class CalibrationMatrix(Frozen):
    """Per-channel ``scale``/``offset`` pairs. Immutable; recompute to replace."""
    __slots__ = ('_r', '_g', '_b')

    def __init__(
        self,
        r: ChannelCorrection = IDENTITY,
        g: ChannelCorrection = IDENTITY,
        b: ChannelCorrection = IDENTITY,
    ) -> None:
        self._r = ChannelCorrection(*r)
        self._g = ChannelCorrection(*g)
        self._b = ChannelCorrection(*b)
        self._freeze()

    @property
    def r(self) -> ChannelCorrection:
        return self._r

    @property
    def g(self) -> ChannelCorrection:
        return self._g

    @property
    def b(self) -> ChannelCorrection:
        return self._b

    @property
    def channels(self) -> Tuple[ChannelCorrection, ChannelCorrection, ChannelCorrection]:
        return (self._r, self._g, self._b)

    @property
    def scales(self) -> NDArray:
        return np.array([c.scale for c in self.channels])

    @property
    def offsets(self) -> NDArray:
        return np.array([c.offset for c in self.channels])

    def to_dict(self) -> dict:
        return {
            name: {"scale": corr.scale, "offset": corr.offset}
            for name, corr in zip(CHANNELS, self.channels)
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> CalibrationMatrix:
        return cls(*(ChannelCorrection(data[name]["scale"], data[name]["offset"]) for name in CHANNELS))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalibrationMatrix):
            return NotImplemented
        return self.channels == other.channels

    def __hash__(self) -> int:
        return hash(self.channels)

    def __repr__(self) -> str:
        parts = ", ".join(f"{n}=({c.scale:.4g}, {c.offset:.4g})" for n, c in zip(CHANNELS, self.channels))
        return f"CalibrationMatrix({parts})"


def _rgb_triple(value: Any) -> Tuple[float, float, float]:
    """Read an RGB sample given as hex, ``{r, g, b}`` mapping or 3-sequence."""
    if isinstance(value, str):
        return hex_to_rgb(value)
    if isinstance(value, Mapping):
        try:
            return (value["r"], value["g"], value["b"])
        except KeyError as e:
            raise TypeError(f"RGB mapping is missing channel {e}") from None
    if hasattr(value, "__len__") and len(value) == 3:
        r, g, b = value
        return (r, g, b)
    raise TypeError(f"Unsupported RGB input: {value!r}")


def compute_calibration(black_sample: Any, white_sample: Any) -> CalibrationMatrix:
    """
    Build the correction that maps ``black_sample`` to 0 and ``white_sample``
    to 255 on every channel.

    ``scale = 255 / max(1, white - black)`` and ``offset = -black * scale``.
    Identical (or inverted) samples on a channel do not fail: the denominator
    is clamped to 1 and the resulting scale is large but finite.
    """
    black = _rgb_triple(black_sample)
    white = _rgb_triple(white_sample)

    corrections = []
    for dark, light in zip(black, white):
        scale = (TARGET_WHITE - TARGET_BLACK) / max(1, light - dark)
        corrections.append(ChannelCorrection(scale, TARGET_BLACK - dark * scale))
    return CalibrationMatrix(*corrections)


def np_apply_calibration(rgb: NDArray, matrix: CalibrationMatrix) -> NDArray:
    """Vectorized: correct an array of shape (..., 3) of 8-bit RGB values."""
    arr = np.asarray(rgb, dtype=np.float64)
    if arr.shape[-1] != 3:
        raise ValueError(f"RGB array must have 3 channels on the last axis, got shape {arr.shape}")
    corrected = np_round_half_away(arr * matrix.scales + matrix.offsets)
    clamp = bound_type_to_np_function[BoundType.CLAMP]
    return np.asarray(clamp(corrected, float(TARGET_BLACK), float(TARGET_WHITE))).astype(np.int64)


def apply_calibration(value: Any, matrix: Optional[CalibrationMatrix]) -> Any:
    """
    Correct a sampled color, returning the same shape it was given.

    Accepts a hex string, an ``{r, g, b}`` mapping, a 3-sequence, an array of
    shape (..., 3), or a swatch (anything with ``hex`` and ``with_hex``).
    A ``None`` matrix returns ``value`` unchanged.
    """
    if matrix is None:
        return value

    if isinstance(value, np.ndarray):
        return np_apply_calibration(value, matrix)

    if hasattr(value, "with_hex") and isinstance(getattr(value, "hex", None), str):
        return value.with_hex(apply_calibration(value.hex, matrix))

    corrected = tuple(corr.apply(c) for corr, c in zip(matrix.channels, _rgb_triple(value)))

    if isinstance(value, str):
        return rgb_to_hex(*corrected)
    if isinstance(value, Mapping):
        return dict(zip(CHANNELS, corrected))
    return corrected
