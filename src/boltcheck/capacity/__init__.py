"""Limit-state capacity functions.

All functions are pure and never raise: unreadable arguments are read as 0,
which yields a degenerate zero capacity rather than an error.
"""

from .bearing import bearing_capacity
from .block_shear import BlockShearAreas, block_shear_areas, block_shear_capacity
from .bolts import bolt_area, bolt_shear_capacity, bolt_tensile_capacity

__all__ = [
    "bolt_area",
    "bolt_shear_capacity",
    "bolt_tensile_capacity",
    "block_shear_capacity",
    "block_shear_areas",
    "BlockShearAreas",
    "bearing_capacity",
]
