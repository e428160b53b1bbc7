from .swatch_normalizer import SwatchInput, swatch_hex, swatch_name, swatch_source

__all__ = ['SwatchInput', 'swatch_hex', 'swatch_name', 'swatch_source']
