from __future__ import annotations
import warnings
from typing import Iterable, List, NamedTuple

from ..conversions import hex_to_lab, is_valid_hex, lab_hue_chroma, np_hex_to_lab, np_lab_hue_chroma
from ..types.color_group import ColorGroup
from ..utils.hue import normalize_hue
from .thresholds import (
    BLACK_LIGHTNESS,
    BROWN_HUE_RANGE,
    BROWN_LIGHTNESS_RANGE,
    BROWN_MAX_CHROMA,
    DARK_MUTED_LIGHTNESS,
    FALLBACK_GROUP,
    FALLBACK_GROUP_FOR_INVALID,
    FALLBACK_LIGHTNESS,
    HUE_BANDS,
    MUTED_CHROMA,
    NEUTRAL_CHROMA,
    PALE_CHROMA,
    PALE_LIGHTNESS,
    SKIN_CHROMA_RANGE,
    SKIN_HUE_RANGE,
    SKIN_LIGHTNESS_RANGE,
)


class ChromaticKey(NamedTuple):
    """Lab coordinates of a color plus its polar hue/chroma and group."""
    L: float
    a: float
    b: float
    hue: float
    chroma: float
    group: ColorGroup


NEUTRAL_FALLBACK_KEY = ChromaticKey(
    L=FALLBACK_LIGHTNESS, a=0.0, b=0.0, hue=0.0, chroma=0.0, group=FALLBACK_GROUP_FOR_INVALID,
)


def _gray(a: float, b: float) -> ColorGroup:
    return ColorGroup.WARM_GRAY if (a > 0 or b > 0) else ColorGroup.COOL_GRAY


def classify(L: float, hue: float, chroma: float, a: float, b: float) -> ColorGroup:
    """
    Assign a CIELAB color to one of the 15 chromatic groups.

    First match wins:

    1. chroma < 5: black below L*=20, otherwise warm/cool gray by the sign of a*/b*
    2. chroma < 20 and L* < 25: black
    3. chroma < 10 and L* > 75: warm/cool gray
    4. browns, then skin tones (they overlap the orange/yellow hue bands)
    5. Lab hue bands, GREEN as the fallback

    Args:
        L: Lightness L* in [0, 100]
        hue: CIELAB hue angle in degrees (not the HSL hue)
        chroma: CIELAB chroma
        a, b: a* and b*, used to split warm from cool grays
    """
    if chroma < NEUTRAL_CHROMA:
        if L < BLACK_LIGHTNESS:
            return ColorGroup.BLACK_NEUTRAL
        return _gray(a, b)

    if chroma < MUTED_CHROMA and L < DARK_MUTED_LIGHTNESS:
        return ColorGroup.BLACK_NEUTRAL

    if chroma < MUTED_CHROMA and L > PALE_LIGHTNESS and chroma < PALE_CHROMA:
        return _gray(a, b)

    if (
        BROWN_HUE_RANGE[0] <= hue <= BROWN_HUE_RANGE[1]
        and BROWN_LIGHTNESS_RANGE[0] < L < BROWN_LIGHTNESS_RANGE[1]
        and chroma < BROWN_MAX_CHROMA
    ):
        return ColorGroup.BROWN

    if (
        SKIN_HUE_RANGE[0] <= hue <= SKIN_HUE_RANGE[1]
        and SKIN_LIGHTNESS_RANGE[0] <= L <= SKIN_LIGHTNESS_RANGE[1]
        and SKIN_CHROMA_RANGE[0] <= chroma <= SKIN_CHROMA_RANGE[1]
    ):
        return ColorGroup.SKIN_TONE

    hue = normalize_hue(hue)
    for start, end, group in HUE_BANDS:
        if start <= hue < end:
            return group

    return FALLBACK_GROUP


def chromatic_key(hex_color: str) -> ChromaticKey:
    """
    Compute the Lab sort key of a hex color.

    A malformed hex never raises here: it yields ``NEUTRAL_FALLBACK_KEY`` and a
    ``UserWarning`` so a batch sort can carry on.
    """
    try:
        L, a, b = hex_to_lab(hex_color)
    except ValueError:
        warnings.warn(f"Invalid hex color {hex_color!r}; sorting it as a neutral")
        return NEUTRAL_FALLBACK_KEY
    hue, chroma = lab_hue_chroma(a, b)
    return ChromaticKey(L, a, b, hue, chroma, classify(L, hue, chroma, a, b))


def classify_hex(hex_color: str) -> ColorGroup:
    """Chromatic group of a hex color (BLACK_NEUTRAL for malformed input)."""
    return chromatic_key(hex_color).group


def np_chromatic_keys(hex_colors: Iterable[str]) -> List[ChromaticKey]:
    """
    Vectorized ``chromatic_key``: one Lab conversion for the whole batch.

    Malformed entries get ``NEUTRAL_FALLBACK_KEY`` and a ``UserWarning``, in
    place, so the result always lines up with the input.
    """
    hexes = list(hex_colors)
    keys = [NEUTRAL_FALLBACK_KEY] * len(hexes)
    valid = []
    for i, hex_color in enumerate(hexes):
        if is_valid_hex(hex_color):
            valid.append(i)
        else:
            warnings.warn(f"Invalid hex color {hex_color!r}; sorting it as a neutral")
    if not valid:
        return keys

    lab = np_hex_to_lab([hexes[i] for i in valid])
    hues, chromas = np_lab_hue_chroma(lab)
    for row, i in enumerate(valid):
        L, a, b = (float(v) for v in lab[row])
        hue, chroma = float(hues[row]), float(chromas[row])
        keys[i] = ChromaticKey(L, a, b, hue, chroma, classify(L, hue, chroma, a, b))
    return keys
