"""
Synthetic float generation for the ARGO float catalog
"""

from .generator import (
    SyntheticFloatGenerator,
    generate_synthetic_floats,
    floats_per_box,
    KNOWN_OCEAN_LOCATIONS,
    OCEAN_SAMPLING_BOXES
)

__all__ = [
    'SyntheticFloatGenerator',
    'generate_synthetic_floats',
    'floats_per_box',
    'KNOWN_OCEAN_LOCATIONS',
    'OCEAN_SAMPLING_BOXES'
]
