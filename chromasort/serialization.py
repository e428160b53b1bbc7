"""
JSON export/import of collections and palettes.

Exported files are JSON arrays of ``{hex, name, source}`` records written
with 2-space indentation. ``dump_state``/``load_state`` translate a collection
and its sort mode to and from the two string values a key-value store keeps.
"""
from __future__ import annotations
import json
import warnings
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .colors.palette import Palette
from .colors.swatch import Swatch
from .normalizers import SwatchInput, swatch_hex, swatch_name, swatch_source
from .types.color_types import SortMode

INDENT = 2

STORAGE_KEYS = {
    "colors": "chromasort-colors",
    "sort_order": "chromasort-sortOrder",
}


def export_record(item: SwatchInput) -> Dict[str, str]:
    """The ``{hex, name, source}`` triple of a swatch or swatch mapping."""
    if isinstance(item, Swatch):
        return item.to_export_dict()
    return {"hex": swatch_hex(item), "name": swatch_name(item), "source": swatch_source(item)}


def collection_to_json(swatches: Iterable[SwatchInput]) -> str:
    return json.dumps([export_record(s) for s in swatches], indent=INDENT, ensure_ascii=False)


def palette_to_dict(palette: Palette, generated_at: Optional[datetime] = None) -> Dict[str, Any]:
    generated_at = generated_at or datetime.now(timezone.utc)
    return {
        "name": palette.name,
        "type": palette.type.value,
        "colors": [export_record(c) for c in palette.colors],
        "baseColor": palette.base_color_hex,
        "generatedAt": generated_at.isoformat(),
    }


def palette_to_json(palette: Palette, generated_at: Optional[datetime] = None) -> str:
    return json.dumps(palette_to_dict(palette, generated_at), indent=INDENT, ensure_ascii=False)


def _records(data: Any) -> List[Any]:
    if isinstance(data, Mapping) and "colors" in data:
        data = data["colors"]
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of colors or an object with a 'colors' array")
    return data


def swatches_from_records(records: Iterable[Any]) -> List[Swatch]:
    """Build swatches from loaded records, skipping (with a warning) any that are invalid."""
    swatches = []
    for index, record in enumerate(records):
        try:
            swatches.append(Swatch.from_dict(record))
        except (TypeError, ValueError) as e:
            warnings.warn(f"Skipping color record {index}: {e}")
    return swatches


def collection_from_json(text: Union[str, bytes]) -> List[Swatch]:
    """
    Load swatches from an exported collection, an exported palette or a
    stored collection (full records with ids).

    Raises:
        ValueError: the text is not JSON, or not one of those shapes.
    """
    return swatches_from_records(_records(json.loads(text)))


def dump_state(swatches: Iterable[SwatchInput], sort_mode: Union[SortMode, str]) -> Dict[str, str]:
    """Serialize a collection and its sort mode under the storage keys."""
    records = [s.to_dict() if isinstance(s, Swatch) else dict(s) for s in swatches]
    return {
        STORAGE_KEYS["colors"]: json.dumps(records, ensure_ascii=False),
        STORAGE_KEYS["sort_order"]: SortMode.parse(sort_mode).value,
    }


def load_state(storage: Mapping) -> Tuple[List[Swatch], SortMode]:
    """
    Restore a collection and sort mode from storage values.

    Missing keys give an empty collection and hue order; an unreadable
    collection is reported with a warning and treated as empty.
    """
    swatches: List[Swatch] = []
    raw_colors = storage.get(STORAGE_KEYS["colors"])
    if raw_colors:
        try:
            swatches = collection_from_json(raw_colors)
        except ValueError as e:
            warnings.warn(f"Could not load saved colors: {e}")
    return swatches, SortMode.parse(storage.get(STORAGE_KEYS["sort_order"]))
