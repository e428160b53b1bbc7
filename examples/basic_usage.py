"""Basic Chromasort usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from chromasort import (
    Swatch,
    compute_calibration,
    apply_calibration,
    find_complementary,
    group_swatches,
    sort_chromatic,
    suggest_palettes,
    collection_to_json,
    palette_to_json,
    extract_swatches,
)
from chromasort.samples import DEMO_MARKERS


def demonstrate_sorting(swatches) -> None:
    # Lay the collection out in chart order, one row per chromatic group.
    for swatch in sort_chromatic(swatches):
        print(f"{swatch.hex}  {swatch.name}")

    for group, members in group_swatches(swatches).items():
        print(f"{group.label}: {', '.join(s.name for s in members)}")


def demonstrate_harmonies(swatches) -> None:
    base = swatches[0]
    print("Complements of", base.name, [s.name for s in find_complementary(swatches, base.hex)])

    suggestions = suggest_palettes(swatches)
    for palette in suggestions:
        print(palette.name, palette.hexes)

    if suggestions:
        print(palette_to_json(suggestions[0]))


def demonstrate_calibration(swatches) -> None:
    # Colors sampled from the chart's black and white patches.
    matrix = compute_calibration("#0C0B10", "#F2F0EA")
    for swatch in swatches[:3]:
        print(swatch.hex, "->", apply_calibration(swatch, matrix).hex)


def demonstrate_extraction() -> None:
    # Stand-in for pixels sampled from a chart photo: two markers on white paper.
    rng = np.random.default_rng(7)
    red = np.array([230, 57, 53]) + rng.integers(-3, 4, size=(40, 3))
    blue = np.array([30, 136, 229]) + rng.integers(-3, 4, size=(25, 3))
    paper = np.full((60, 3), 245)
    samples = np.vstack([red, paper, blue])
    for swatch in extract_swatches(samples):
        print(swatch.name, swatch.hex, swatch.frequency)


if __name__ == "__main__":
    markers = [Swatch(hex_color, name, source) for hex_color, name, source in DEMO_MARKERS]
    demonstrate_sorting(markers)
    demonstrate_harmonies(markers)
    demonstrate_calibration(markers)
    demonstrate_extraction()
    print(collection_to_json(markers))
