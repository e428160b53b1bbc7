"""
Color harmony retrieval.

Finders search an existing collection for members that stand in a classical
hue relationship (HSL hue) to a base color: analogous, complementary,
triadic, monochromatic and split-complementary. ``suggest_palettes`` runs
them over the first colors of a collection.
"""

from .finders import (
    FINDERS,
    find_analogous,
    find_complementary,
    find_harmony,
    find_monochromatic,
    find_split_complementary,
    find_triadic,
)
from .suggestions import suggest_palettes

__all__ = [
    'FINDERS',
    'find_analogous',
    'find_complementary',
    'find_harmony',
    'find_monochromatic',
    'find_split_complementary',
    'find_triadic',
    'suggest_palettes',
]
