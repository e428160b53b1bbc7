"""
Chromasort Value Objects
========================

Immutable classes for the two records the library passes around:

- ``Swatch``: one sampled color with identity, canonical hex, display name
  and provenance tag (``SwatchSource``). Optional extraction metadata:
  ``frequency`` (support count) and ``position`` (``{row, col}`` or ``{x, y}``).
- ``Palette``: a named harmony (``PaletteType``) retrieved from a collection
  around a base color.

Both freeze after ``__init__``; use ``Swatch.with_hex`` to derive a corrected
copy.

>>> from chromasort.colors import Swatch
>>> s = Swatch("ff6b6b", "Coral Red", "picker")
>>> s.hex
'#FF6B6B'
>>> s.hsl
(0, 100, 71)
"""

from .swatch import Swatch, build_swatches, parse_source
from .palette import Palette

__all__ = ['Swatch', 'Palette', 'build_swatches', 'parse_source']
