"""
Sample consolidation.

``extract_swatches`` turns the raw RGB samples of an automatic chart scan into
ranked ``Swatch`` objects with a ``frequency``; ``is_valid_color`` and
``filter_valid_colors`` gate colors from grid or point sampling.
"""
from .consolidation import (
    ColorCluster,
    channel_saturation,
    color_distance,
    consolidate_samples,
    extract_swatches,
    filter_valid_colors,
    is_valid_color,
    np_channel_saturation,
    np_sample_mask,
)

__all__ = [
    'ColorCluster',
    'channel_saturation',
    'color_distance',
    'consolidate_samples',
    'extract_swatches',
    'filter_valid_colors',
    'is_valid_color',
    'np_channel_saturation',
    'np_sample_mask',
]
