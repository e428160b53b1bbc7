"""
Harmony retrieval over an existing collection.

Every finder returns members of ``collection`` (never generated colors),
ranked by ascending score and truncated to ``count``. Scores are HSL hue
distances, except for the monochromatic finder which ranks by lightness
difference. Short or empty results are normal.
"""
from __future__ import annotations
import warnings
from typing import Callable, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from ..conversions import hex_to_hsl, normalize_hex
from ..normalizers import SwatchInput, swatch_hex
from ..types.color_types import HexColor, PaletteType
from ..utils.hue import np_hue_distance
from .thresholds import (
    ANALOGOUS_RANGE,
    BASE_PRIORITY,
    COMPLEMENTARY_BASE_RANGE,
    COMPLEMENTARY_OFFSET,
    COMPLEMENTARY_RANGE,
    DEFAULT_COUNTS,
    MONOCHROMATIC_RANGE,
    PADDING_PENALTY,
    SPLIT_OFFSETS,
    SPLIT_RANGE,
    TRIADIC_OFFSETS,
    TRIADIC_RANGE,
)


class _Entry(NamedTuple):
    item: SwatchInput
    hex: HexColor
    hue: int
    lightness: int


def _entries(collection: Iterable[SwatchInput]) -> Iterator[_Entry]:
    """Parse each member once; members with malformed hex are skipped."""
    for item in collection:
        raw = swatch_hex(item)
        try:
            hex_color = normalize_hex(raw)
        except ValueError:
            warnings.warn(f"Skipping swatch with invalid hex color {raw!r}")
            continue
        h, _, l = hex_to_hsl(hex_color)
        yield _Entry(item, hex_color, h, l)


def _take(scored: List[Tuple[float, SwatchInput]], count: int) -> List[SwatchInput]:
    """Stable sort by score, then keep at most ``count`` items (none for count <= 0)."""
    scored.sort(key=lambda pair: pair[0])
    return [item for _, item in scored[:max(0, int(count))]]


def _hue_distances(entries: Sequence[_Entry], targets: Sequence[float]) -> List[float]:
    """Distance of every entry's hue to the closest target, in one numpy pass."""
    hues = np.array([e.hue for e in entries], dtype=float).reshape(-1, 1)
    distances = np_hue_distance(hues, np.asarray(targets, dtype=float).reshape(1, -1))
    return distances.min(axis=1).tolist()


def _base(base_hex: str) -> Tuple[HexColor, int, int]:
    base = normalize_hex(base_hex)
    h, _, l = hex_to_hsl(base)
    return base, h, l


def _with_targets(
    collection: Iterable[SwatchInput],
    base_hex: str,
    count: int,
    offsets: Tuple[int, ...],
    max_distance: float,
) -> List[SwatchInput]:
    """
    Shared body of the triadic and split-complementary finders.

    The base swatch (first exact hex match) leads; every other member scores
    its distance to the closest of the target hues or the base hue itself.
    """
    base, base_h, _ = _base(base_hex)
    targets = [(base_h + offset) % 360 for offset in offsets] + [base_h]
    entries = list(_entries(collection))

    scored: List[Tuple[float, SwatchInput]] = []
    base_found = False
    for entry, distance in zip(entries, _hue_distances(entries, targets)):
        if entry.hex == base:
            if not base_found:
                scored.append((BASE_PRIORITY, entry.item))
                base_found = True
            continue
        if distance <= max_distance:
            scored.append((distance, entry.item))
    return _take(scored, count)


def find_analogous(collection: Iterable[SwatchInput], base_hex: str, count: int = 5) -> List[SwatchInput]:
    """Members within 60 degrees of the base hue, closest first."""
    _, base_h, _ = _base(base_hex)
    entries = list(_entries(collection))
    scored = [
        (distance, entry.item)
        for entry, distance in zip(entries, _hue_distances(entries, [base_h]))
        if distance <= ANALOGOUS_RANGE
    ]
    return _take(scored, count)


def find_complementary(collection: Iterable[SwatchInput], base_hex: str, count: int = 4) -> List[SwatchInput]:
    """
    The base swatch, then members within 45 degrees of the opposite hue.

    Members within 30 degrees of the base hue are appended after every true
    complement as padding, and each hex is used at most once for padding.
    """
    base, base_h, _ = _base(base_hex)
    target = (base_h + COMPLEMENTARY_OFFSET) % 360
    entries = list(_entries(collection))
    to_target = _hue_distances(entries, [target])
    to_base = _hue_distances(entries, [base_h])

    scored: List[Tuple[float, SwatchInput]] = []
    used = set()
    base_entry = next((e for e in entries if e.hex == base), None)
    if base_entry is not None:
        scored.append((BASE_PRIORITY, base_entry.item))
        used.add(base)

    for entry, distance in zip(entries, to_target):
        if entry.hex == base:
            continue
        if distance <= COMPLEMENTARY_RANGE:
            scored.append((distance, entry.item))
            used.add(entry.hex)

    for entry, distance in zip(entries, to_base):
        if entry.hex == base or entry.hex in used:
            continue
        if distance <= COMPLEMENTARY_BASE_RANGE:
            scored.append((distance + PADDING_PENALTY, entry.item))
            used.add(entry.hex)

    return _take(scored, count)


def find_triadic(collection: Iterable[SwatchInput], base_hex: str, count: int = 6) -> List[SwatchInput]:
    """The base swatch, then members within 45 degrees of base+120, base+240 or the base hue."""
    return _with_targets(collection, base_hex, count, TRIADIC_OFFSETS, TRIADIC_RANGE)


def find_monochromatic(collection: Iterable[SwatchInput], base_hex: str, count: int = 5) -> List[SwatchInput]:
    """Members within 15 degrees of the base hue, ranked by lightness difference."""
    _, base_h, base_l = _base(base_hex)
    entries = list(_entries(collection))
    scored = [
        (abs(entry.lightness - base_l), entry.item)
        for entry, distance in zip(entries, _hue_distances(entries, [base_h]))
        if distance <= MONOCHROMATIC_RANGE
    ]
    return _take(scored, count)

def find_split_complementary(collection: Iterable[SwatchInput], base_hex: str, count: int = 5) -> List[SwatchInput]:
    """The base swatch, then members within 30 degrees of base+150, base+210 or the base hue."""
    return _with_targets(collection, base_hex, count, SPLIT_OFFSETS, SPLIT_RANGE)


FINDERS: Dict[PaletteType, Callable[..., List[SwatchInput]]] = {
    PaletteType.ANALOGOUS: find_analogous,
    PaletteType.COMPLEMENTARY: find_complementary,
    PaletteType.TRIADIC: find_triadic,
    PaletteType.MONOCHROMATIC: find_monochromatic,
    PaletteType.SPLIT: find_split_complementary,
}


def find_harmony(
    collection: Iterable[SwatchInput],
    base_hex: str,
    palette_type: Union[PaletteType, str],
    count: Optional[int] = None,
) -> List[SwatchInput]:
    """Run the finder for ``palette_type`` with its default count unless one is given."""
    palette_type = PaletteType(palette_type)
    if count is None:
        count = DEFAULT_COUNTS[palette_type]
    return FINDERS[palette_type](collection, base_hex, count)
