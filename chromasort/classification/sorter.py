from __future__ import annotations
import warnings
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List, Tuple, Union

from ..conversions import hex_to_hsl
from ..normalizers import SwatchInput, swatch_hex
from ..types.color_group import ColorGroup
from ..types.color_types import HSLTuple, SortMode
from .classifier import ChromaticKey, np_chromatic_keys
from .thresholds import FALLBACK_HSL, SORT_HUE_TOLERANCE, SORT_LIGHTNESS_TOLERANCE


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_chromatic(key_a: ChromaticKey, key_b: ChromaticKey) -> int:
    """
    Three-way comparison of two chromatic keys.

    1. group rank, ascending
    2. Lab hue, ascending, only when the hues differ by more than 3 degrees
    3. L*, descending (lighter first), only when it differs by more than 2
    4. chroma, descending (more saturated first)
    """
    if key_a.group != key_b.group:
        return _sign(key_a.group - key_b.group)

    hue_diff = key_a.hue - key_b.hue
    if abs(hue_diff) > SORT_HUE_TOLERANCE:
        return _sign(hue_diff)

    lightness_diff = key_b.L - key_a.L
    if abs(lightness_diff) > SORT_LIGHTNESS_TOLERANCE:
        return _sign(lightness_diff)

    return _sign(key_b.chroma - key_a.chroma)


def _chromatic_order(items: List[SwatchInput]) -> List[Tuple[int, ChromaticKey]]:
    keys = np_chromatic_keys(swatch_hex(item) for item in items)
    order = sorted(
        range(len(items)),
        key=cmp_to_key(lambda i, j: compare_chromatic(keys[i], keys[j])),
    )
    return [(i, keys[i]) for i in order]


def sort_chromatic(swatches: Iterable[SwatchInput]) -> List[SwatchInput]:
    """
    Order swatches the way a printed marker chart is laid out.

    The Lab keys are scratch values computed for this call only; the returned
    list holds the original items. Malformed hex values sort as neutrals
    instead of raising, so the output always has the input's length.
    """
    items = list(swatches)
    return [items[i] for i, _ in _chromatic_order(items)]


def group_swatches(swatches: Iterable[SwatchInput]) -> Dict[ColorGroup, List[SwatchInput]]:
    """Chromatically sorted swatches bucketed by group, groups in rank order."""
    items = list(swatches)
    groups: Dict[ColorGroup, List[SwatchInput]] = {}
    for i, key in _chromatic_order(items):
        groups.setdefault(key.group, []).append(items[i])
    return groups


# ===================== HSL orders =====================

def _safe_hsl(hex_color: str) -> HSLTuple:
    try:
        return hex_to_hsl(hex_color)
    except ValueError:
        warnings.warn(f"Invalid hex color {hex_color!r}; sorting it as mid gray")
        return FALLBACK_HSL


def _sort_by_hsl(swatches: Iterable[SwatchInput], key: Callable[[HSLTuple], float]) -> List[SwatchInput]:
    items = list(swatches)
    keys = [key(_safe_hsl(swatch_hex(item))) for item in items]
    order = sorted(range(len(items)), key=keys.__getitem__)
    return [items[i] for i in order]


def sort_by_hue(swatches: Iterable[SwatchInput]) -> List[SwatchInput]:
    """Ascending HSL hue."""
    return _sort_by_hsl(swatches, lambda hsl: hsl[0])


def sort_by_saturation(swatches: Iterable[SwatchInput]) -> List[SwatchInput]:
    """Descending HSL saturation (most saturated first)."""
    return _sort_by_hsl(swatches, lambda hsl: -hsl[1])


def sort_by_lightness(swatches: Iterable[SwatchInput]) -> List[SwatchInput]:
    """Ascending HSL lightness."""
    return _sort_by_hsl(swatches, lambda hsl: hsl[2])


SORTERS: Dict[SortMode, Callable[[Iterable[SwatchInput]], List[SwatchInput]]] = {
    SortMode.HUE: sort_by_hue,
    SortMode.SATURATION: sort_by_saturation,
    SortMode.LIGHTNESS: sort_by_lightness,
    SortMode.CHROMATIC: sort_chromatic,
}


def sort_swatches(swatches: Iterable[SwatchInput], mode: Union[SortMode, str, None] = SortMode.HUE) -> List[SwatchInput]:
    """Sort with the named mode; unknown modes fall back to hue order."""
    return SORTERS[SortMode.parse(mode)](swatches)
