"""
Decision table constants for the chromatic classifier and sorter.

All lightness values are CIELAB L* (0-100), chroma is sqrt(a*^2 + b*^2) and
hues are CIELAB hue angles in degrees.
"""
from ..types.color_group import ColorGroup

# Neutrals
NEUTRAL_CHROMA = 5
BLACK_LIGHTNESS = 20
MUTED_CHROMA = 20
DARK_MUTED_LIGHTNESS = 25
PALE_LIGHTNESS = 75
PALE_CHROMA = 10

# Brown: hue in [30, 70], 15 < L < 55, chroma < 50
BROWN_HUE_RANGE = (30, 70)
BROWN_LIGHTNESS_RANGE = (15, 55)
BROWN_MAX_CHROMA = 50

# Skin tone: hue in [40, 80], L in [60, 85], chroma in [15, 40]
SKIN_HUE_RANGE = (40, 80)
SKIN_LIGHTNESS_RANGE = (60, 85)
SKIN_CHROMA_RANGE = (15, 40)

# Hue bands, half-open [start, end), checked in order
HUE_BANDS = (
    (85, 100, ColorGroup.YELLOW),
    (70, 85, ColorGroup.YELLOW_ORANGE),
    (45, 70, ColorGroup.ORANGE),
    (0, 45, ColorGroup.RED),
    (345, 360, ColorGroup.RED),
    (310, 345, ColorGroup.PINK_MAGENTA),
    (270, 310, ColorGroup.VIOLET_PURPLE),
    (220, 270, ColorGroup.BLUE),
    (170, 220, ColorGroup.TURQUOISE),
    (130, 170, ColorGroup.GREEN),
    (100, 130, ColorGroup.YELLOW_GREEN),
)
FALLBACK_GROUP = ColorGroup.GREEN

# Differences at or below these are ties at their sort level
SORT_HUE_TOLERANCE = 3
SORT_LIGHTNESS_TOLERANCE = 2

# Key used for swatches whose hex cannot be parsed
FALLBACK_LIGHTNESS = 50.0
FALLBACK_GROUP_FOR_INVALID = ColorGroup.BLACK_NEUTRAL
FALLBACK_HSL = (0, 0, 50)
