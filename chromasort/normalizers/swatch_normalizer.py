from collections.abc import Mapping
from typing import Any

from ..types.color_types import HexColor

# Anything with a hex: a Swatch, a {"hex": ...} mapping or an object with a ``hex`` attribute
SwatchInput = Any


def swatch_hex(item: SwatchInput) -> HexColor:
    """
    Return the raw hex string of a swatch-like item, without validating it.

    Raises:
        TypeError: the item has no hex field, or it is not a string.
    """
    if isinstance(item, Mapping):
        if "hex" not in item:
            raise TypeError("Swatch mapping has no 'hex' field")
        value = item["hex"]
    elif hasattr(item, "hex"):
        value = item.hex
    else:
        raise TypeError(f"Unsupported swatch input type: {type(item).__name__}")
    if not isinstance(value, str):
        raise TypeError(f"Swatch hex must be a string, got {type(value).__name__}")
    return value


def swatch_name(item: SwatchInput) -> str:
    """Display name of a swatch-like item, falling back to its hex."""
    if isinstance(item, Mapping):
        name = item.get("name")
    else:
        name = getattr(item, "name", None)
    return name if name else swatch_hex(item)


def swatch_source(item: SwatchInput) -> str:
    if isinstance(item, Mapping):
        source = item.get("source", "")
    else:
        source = getattr(item, "source", "")
    return getattr(source, "value", source)
