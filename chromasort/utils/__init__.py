from .hue import normalize_hue, hue_distance, np_hue_distance
from .num_utils import round_half_away, np_round_half_away

__all__ = [
    "normalize_hue",
    "hue_distance",
    "np_hue_distance",
    "round_half_away",
    "np_round_half_away",
]
