"""Reference colors with known conversions, plus a small demo marker set."""
from ..types.color_group import ColorGroup

# Integer HSL (degrees, percent, percent)
RED_HSL = (0, 100, 50)
GREEN_HSL = (120, 100, 50)
BLUE_HSL = (240, 100, 50)
YELLOW_HSL = (60, 100, 50)
CYAN_HSL = (180, 100, 50)
MAGENTA_HSL = (300, 100, 50)
WHITE_HSL = (0, 0, 100)
BLACK_HSL = (0, 0, 0)
GRAY_HSL = (0, 0, 50)

samples_hex_hsl = {
    "#FF0000": RED_HSL,
    "#00FF00": GREEN_HSL,
    "#0000FF": BLUE_HSL,
    "#FFFF00": YELLOW_HSL,
    "#00FFFF": CYAN_HSL,
    "#FF00FF": MAGENTA_HSL,
    "#FFFFFF": WHITE_HSL,
    "#000000": BLACK_HSL,
    "#808080": GRAY_HSL,
    "#FF6B6B": (0, 100, 71),
}

# CIELAB (D65) reference values, two decimals
samples_hex_lab = {
    "#FF0000": (53.24, 80.09, 67.20),
    "#00FF00": (87.73, -86.18, 83.18),
    "#0000FF": (32.30, 79.19, -107.86),
    "#FFFF00": (97.14, -21.55, 94.48),
    "#00FFFF": (91.11, -48.09, -14.13),
    "#FF00FF": (60.32, 98.23, -60.82),
    "#FFFFFF": (100.0, 0.0, 0.0),
    "#000000": (0.0, 0.0, 0.0),
    "#808080": (53.59, 0.0, 0.0),
}

# Expected chromatic group under the classifier's decision table
samples_hex_group = {
    "#FF0000": ColorGroup.RED,
    "#00FF00": ColorGroup.GREEN,
    # Pure blue has a Lab hue of about 306 degrees
    "#0000FF": ColorGroup.VIOLET_PURPLE,
    "#FFFF00": ColorGroup.YELLOW_GREEN,
    "#00FFFF": ColorGroup.TURQUOISE,
    "#FF00FF": ColorGroup.PINK_MAGENTA,
    "#FF8C00": ColorGroup.ORANGE,
    "#FFA500": ColorGroup.YELLOW_ORANGE,
    "#4682B4": ColorGroup.BLUE,
    "#8B4513": ColorGroup.BROWN,
    "#E8B796": ColorGroup.SKIN_TONE,
    "#000000": ColorGroup.BLACK_NEUTRAL,
}

# (hex, name, source) of a small marker set
DEMO_MARKERS = (
    ("#FF6B6B", "Coral Red", "picker"),
    ("#4ECDC4", "Turquoise", "manual-hex"),
    ("#45B7D1", "Sky Blue", "manual-rgb"),
    ("#96CEB4", "Mint Green", "file"),
    ("#FFEAA7", "Light Yellow", "picker"),
    ("#DDA0DD", "Plum", "manual-hex"),
    ("#98D8C8", "Mint Blue", "manual-rgb"),
    ("#F06292", "Pink", "file"),
)

__all__ = [
    "RED_HSL",
    "GREEN_HSL",
    "BLUE_HSL",
    "YELLOW_HSL",
    "CYAN_HSL",
    "MAGENTA_HSL",
    "WHITE_HSL",
    "BLACK_HSL",
    "GRAY_HSL",
    "samples_hex_hsl",
    "samples_hex_lab",
    "samples_hex_group",
    "DEMO_MARKERS",
]
