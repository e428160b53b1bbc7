"""Hue windows (HSL degrees) and sizes used by the harmony finders."""
from ..types.color_types import PaletteType

ANALOGOUS_RANGE = 60

COMPLEMENTARY_OFFSET = 180
COMPLEMENTARY_RANGE = 45
# Near-base colors pad a complementary palette after every true complement
COMPLEMENTARY_BASE_RANGE = 30
PADDING_PENALTY = 1000

TRIADIC_OFFSETS = (120, 240)
TRIADIC_RANGE = 45

MONOCHROMATIC_RANGE = 15

SPLIT_OFFSETS = (150, 210)
SPLIT_RANGE = 30

# Score of the base swatch itself, ahead of any distance
BASE_PRIORITY = -1.0

DEFAULT_COUNTS = {
    PaletteType.ANALOGOUS: 5,
    PaletteType.COMPLEMENTARY: 4,
    PaletteType.TRIADIC: 6,
    PaletteType.MONOCHROMATIC: 5,
    PaletteType.SPLIT: 5,
}

# Suggestion engine
MIN_COLLECTION_SIZE = 3
MAX_BASE_COLORS = 5
ANALOGOUS_BASES = 3
COMPLEMENTARY_BASES = 2
TRIADIC_BASES = 2
MIN_PALETTE_SIZE = 3
