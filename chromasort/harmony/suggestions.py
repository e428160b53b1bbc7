from __future__ import annotations
import warnings
from typing import Iterable, List

from ..colors.palette import Palette
from ..conversions import is_valid_hex
from ..normalizers import SwatchInput, swatch_hex, swatch_name
from ..types.color_types import PaletteType
from .finders import find_analogous, find_complementary, find_triadic
from .thresholds import (
    ANALOGOUS_BASES,
    COMPLEMENTARY_BASES,
    DEFAULT_COUNTS,
    MAX_BASE_COLORS,
    MIN_COLLECTION_SIZE,
    MIN_PALETTE_SIZE,
    TRIADIC_BASES,
)


def suggest_palettes(collection: Iterable[SwatchInput]) -> List[Palette]:
    """
    Mine a collection for ready-made palettes.

    The first five members serve as base colors. The first three each get an
    analogous palette, the first two also get a complementary and a triadic
    one. Palettes with fewer than three colors are dropped; the rest keep
    generation order. Collections smaller than three give no suggestions.
    """
    items = list(collection)
    if len(items) < MIN_COLLECTION_SIZE:
        return []

    suggestions: List[Palette] = []
    for index, base in enumerate(items[:MAX_BASE_COLORS]):
        base_hex = swatch_hex(base)
        if not is_valid_hex(base_hex):
            warnings.warn(f"Skipping base color with invalid hex {base_hex!r}")
            continue
        name = swatch_name(base)

        if index < ANALOGOUS_BASES:
            suggestions.append(Palette(
                f"Analogous from {name}",
                PaletteType.ANALOGOUS,
                base_hex,
                find_analogous(items, base_hex, DEFAULT_COUNTS[PaletteType.ANALOGOUS]),
            ))

        if index < COMPLEMENTARY_BASES:
            suggestions.append(Palette(
                f"Complementary from {name}",
                PaletteType.COMPLEMENTARY,
                base_hex,
                find_complementary(items, base_hex, DEFAULT_COUNTS[PaletteType.COMPLEMENTARY]),
            ))

        if index < TRIADIC_BASES:
            suggestions.append(Palette(
                f"Triadic from {name}",
                PaletteType.TRIADIC,
                base_hex,
                find_triadic(items, base_hex, DEFAULT_COUNTS[PaletteType.TRIADIC]),
            ))

    return [palette for palette in suggestions if len(palette) >= MIN_PALETTE_SIZE]
