"""
Chromatic classification and ordering.

``classify`` maps a CIELAB color to one of the 15 ``ColorGroup`` families;
``sort_chromatic`` orders a collection by (group, Lab hue, L*, chroma). The
HSL-only orders (hue, saturation, lightness) are kept as alternative modes
selectable through ``sort_swatches``.
"""

from .classifier import ChromaticKey, NEUTRAL_FALLBACK_KEY, classify, classify_hex, chromatic_key, np_chromatic_keys
from .sorter import (
    SORTERS,
    compare_chromatic,
    group_swatches,
    sort_by_hue,
    sort_by_lightness,
    sort_by_saturation,
    sort_chromatic,
    sort_swatches,
)

__all__ = [
    'ChromaticKey',
    'NEUTRAL_FALLBACK_KEY',
    'classify',
    'classify_hex',
    'chromatic_key',
    'np_chromatic_keys',
    'SORTERS',
    'compare_chromatic',
    'group_swatches',
    'sort_by_hue',
    'sort_by_lightness',
    'sort_by_saturation',
    'sort_chromatic',
    'sort_swatches',
]
