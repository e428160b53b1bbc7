from __future__ import annotations
import uuid
import warnings
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from ..conversions import hex_to_hsl, hex_to_lab, hex_to_rgb, is_valid_hex, normalize_hex
from ..types.color_types import HexColor, HSLTuple, LabTuple, RGBTuple, SwatchSource
from .frozen import Frozen

# Source tags written by older versions of the collection store
LEGACY_SOURCE_ALIASES = {
    "hex": SwatchSource.MANUAL_HEX,
    "rgb": SwatchSource.MANUAL_RGB,
    "bulk": SwatchSource.BULK_TEXT,
    "manual": SwatchSource.MANUAL_POINT,
    "auto": SwatchSource.AUTO_EXTRACT,
    "grid": SwatchSource.GRID_EXTRACT,
    "extracted": SwatchSource.AUTO_EXTRACT,
}

SourceInput = Union[SwatchSource, str]


def parse_source(source: SourceInput) -> SwatchSource:
    """Coerce a source tag (enum, current string or legacy alias) to SwatchSource."""
    if isinstance(source, SwatchSource):
        return source
    if not isinstance(source, str):
        raise TypeError(f"Swatch source must be a string, got {type(source).__name__}")
    key = source.strip().lower()
    if key in LEGACY_SOURCE_ALIASES:
        return LEGACY_SOURCE_ALIASES[key]
    return SwatchSource(key)


class Swatch(Frozen):
    """
    One sampled color of a chart: identity, canonical hex, display name and
    provenance.

    The hex value is validated and normalized to ``#RRGGBB`` on construction;
    HSL and Lab are derived on access and never stored.
    """
    __slots__ = ('_id', '_hex', '_name', '_source', '_frequency', '_position')

    def __init__(
        self,
        hex: str,
        name: Optional[str] = None,
        source: SourceInput = SwatchSource.MANUAL_HEX,
        *,
        id: Optional[str] = None,
        frequency: Optional[int] = None,
        position: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._hex = normalize_hex(hex)
        self._name = name if name is not None else self._hex
        self._source = parse_source(source)
        self._id = str(id) if id is not None else uuid.uuid4().hex
        if frequency is not None:
            frequency = int(frequency)
            if frequency < 0:
                raise ValueError(f"frequency must be non-negative, got {frequency}")
        self._frequency = frequency
        self._position = MappingProxyType(dict(position)) if position is not None else None
        self._freeze()

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def id(self) -> str:
        return self._id

    @property
    def hex(self) -> HexColor:
        return self._hex

    @property
    def name(self) -> str:
        return self._name

    @property
    def source(self) -> SwatchSource:
        return self._source

    @property
    def frequency(self) -> Optional[int]:
        return self._frequency

    @property
    def position(self) -> Optional[Mapping[str, Any]]:
        return self._position

    @property
    def rgb(self) -> RGBTuple:
        return hex_to_rgb(self._hex)

    @property
    def hsl(self) -> HSLTuple:
        return hex_to_hsl(self._hex)

    @property
    def lab(self) -> LabTuple:
        return hex_to_lab(self._hex)

    # ------------------ DERIVED COPIES ------------------
    def with_hex(self, hex: str) -> Swatch:
        """Return a copy with a new color, keeping identity and metadata."""
        return Swatch(
            hex,
            self._name,
            self._source,
            id=self._id,
            frequency=self._frequency,
            position=self._position,
        )

    def to_dict(self) -> dict:
        """Full record, as kept by the collection store."""
        data = {
            "id": self._id,
            "hex": self._hex,
            "name": self._name,
            "source": self._source.value,
        }
        if self._frequency is not None:
            data["frequency"] = self._frequency
        if self._position is not None:
            data["position"] = dict(self._position)
        return data

    def to_export_dict(self) -> dict:
        """The ``{hex, name, source}`` triple used by exported files."""
        return {"hex": self._hex, "name": self._name, "source": self._source.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Swatch:
        if not isinstance(data, Mapping):
            raise TypeError(f"Swatch record must be a mapping, got {type(data).__name__}")
        if "hex" not in data:
            raise TypeError("Swatch record has no 'hex' field")
        return cls(
            data["hex"],
            data.get("name"),
            data.get("source", SwatchSource.MANUAL_HEX),
            id=data.get("id"),
            frequency=data.get("frequency"),
            position=data.get("position"),
        )

    # ------------------ VALUE SEMANTICS ------------------
    def _key(self) -> Tuple:
        position = tuple(sorted(self._position.items())) if self._position is not None else None
        return (self._id, self._hex, self._name, self._source, self._frequency, position)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Swatch):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self._id, self._hex))

    def __repr__(self) -> str:
        return f"Swatch(hex={self._hex!r}, name={self._name!r}, source={self._source.value!r}, id={self._id!r})"


def build_swatches(
    values: Iterable[str],
    source: SourceInput = SwatchSource.BULK_TEXT,
    name_prefix: str = "Marker",
) -> List[Swatch]:
    """
    Build swatches from raw hex strings, dropping invalid ones.

    Valid entries are named ``"<name_prefix> <n>"`` where ``n`` is the 1-based
    position in ``values``. Each dropped entry emits a ``UserWarning``.
    """
    swatches = []
    for index, value in enumerate(values, start=1):
        if not is_valid_hex(value):
            warnings.warn(f"Skipping invalid hex color {value!r} at position {index}")
            continue
        swatches.append(Swatch(value, f"{name_prefix} {index}", source))
    return swatches
