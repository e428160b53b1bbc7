from enum import IntEnum


class ColorGroup(IntEnum):
    """
    Chromatic families used as the primary sort bucket.

    The integer value is the sort rank: warm hues first, then cool hues,
    then browns, skin tones and the neutrals.
    """
    YELLOW = 0
    YELLOW_ORANGE = 1
    ORANGE = 2
    RED = 3
    PINK_MAGENTA = 4
    VIOLET_PURPLE = 5
    BLUE = 6
    TURQUOISE = 7
    GREEN = 8
    YELLOW_GREEN = 9
    BROWN = 10
    SKIN_TONE = 11
    WARM_GRAY = 12
    COOL_GRAY = 13
    BLACK_NEUTRAL = 14

    @property
    def rank(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``"Yellow orange"``."""
        return self.name.replace("_", " ").capitalize()

    @property
    def is_neutral(self) -> bool:
        return self in NEUTRAL_GROUPS


NEUTRAL_GROUPS = frozenset({
    ColorGroup.WARM_GRAY,
    ColorGroup.COOL_GRAY,
    ColorGroup.BLACK_NEUTRAL,
})
