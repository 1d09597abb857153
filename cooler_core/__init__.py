"""
Parametric panel generator for a laser-cut evaporative (swamp) cooler.
"""

from .dimensions import Dimensions, derive_dimensions
from .generator import CoolerGenerator
from .materials import PLASTIC, WOOD
from .params import CoolerParams, UnknownPresetError, available_presets, load_params, load_preset
from .units import inch, mm, parse_length, to_inches

__all__ = [
    'CoolerGenerator',
    'CoolerParams',
    'Dimensions',
    'UnknownPresetError',
    'PLASTIC',
    'WOOD',
    'available_presets',
    'derive_dimensions',
    'inch',
    'load_params',
    'load_preset',
    'mm',
    'parse_length',
    'to_inches',
]
