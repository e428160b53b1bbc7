from __future__ import annotations
from typing import Any, Iterable, Iterator, Tuple, Union

from ..conversions import normalize_hex
from ..normalizers import swatch_hex
from ..types.color_types import HexColor, PaletteType
from .frozen import Frozen


class Palette(Frozen):
    """
    A named harmony retrieved from a collection.

    ``colors`` holds the collection items themselves (Swatch objects or swatch
    mappings), in ranking order.
    """
    __slots__ = ('_name', '_type', '_base_color_hex', '_colors')

    def __init__(
        self,
        name: str,
        type: Union[PaletteType, str],
        base_color_hex: str,
        colors: Iterable[Any],
    ) -> None:
        self._name = name
        self._type = PaletteType(type)
        self._base_color_hex = normalize_hex(base_color_hex)
        self._colors = tuple(colors)
        self._freeze()

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> PaletteType:
        return self._type

    @property
    def base_color_hex(self) -> HexColor:
        return self._base_color_hex

    @property
    def colors(self) -> Tuple[Any, ...]:
        return self._colors

    @property
    def hexes(self) -> Tuple[HexColor, ...]:
        return tuple(swatch_hex(c) for c in self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return (
            self._name == other._name
            and self._type == other._type
            and self._base_color_hex == other._base_color_hex
            and self._colors == other._colors
        )

    def __hash__(self) -> int:
        return hash((self._name, self._type, self._base_color_hex))

    def __repr__(self) -> str:
        return (
            f"Palette(name={self._name!r}, type={self._type.value!r}, "
            f"base_color_hex={self._base_color_hex!r}, colors={len(self._colors)})"
        )
