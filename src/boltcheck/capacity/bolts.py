"""Bolt shear and tension capacities (kip, in, ksi)."""

from __future__ import annotations

import logging
import math

from ..common.parsing import as_number

logger = logging.getLogger(__name__)

SHEAR_STRESS_FACTOR = 0.6
TENSION_STRESS_FACTOR = 0.75
FALLBACK_DIAMETER = 0.875  # in


def bolt_area(diameter: float) -> float:
    """Nominal bolt area π·d²/4 (in²)."""
    return math.pi * diameter**2 / 4.0


def bolt_shear_capacity(
    n_bolts: float,
    bolt_diameter: float,
    fu: float = 65.0,
    safety_factor: float = 2.0,
    fallback_diameter: float = FALLBACK_DIAMETER,
) -> float:
    """Vr = n × 0.6 × Fu × (π·d²/4) / γs.

    A non-positive or unreadable diameter is replaced by ``fallback_diameter``
    (7/8 in unless the caller passes its own).
    """
    d = as_number(bolt_diameter, 0.0)
    if d <= 0.0:
        logger.warning("Bolt diameter %r is not positive; using %s in", bolt_diameter, fallback_diameter)
        d = fallback_diameter

    n = as_number(n_bolts)
    gamma = as_number(safety_factor)
    if gamma <= 0.0:
        logger.warning("Bolt safety factor %r is not positive; shear capacity taken as 0", safety_factor)
        return 0.0
    return n * SHEAR_STRESS_FACTOR * as_number(fu) * bolt_area(d) / gamma


def bolt_tensile_capacity(
    n_bolts: float,
    bolt_area: float,
    fu: float = 65.0,
    safety_factor: float = 2.0,
) -> float:
    """Tr = n × 0.75 × Fu × As / γs."""
    gamma = as_number(safety_factor)
    if gamma <= 0.0:
        logger.warning("Bolt safety factor %r is not positive; tensile capacity taken as 0", safety_factor)
        return 0.0
    return as_number(n_bolts) * TENSION_STRESS_FACTOR * as_number(fu) * as_number(bolt_area) / gamma


__all__ = [
    "SHEAR_STRESS_FACTOR",
    "TENSION_STRESS_FACTOR",
    "FALLBACK_DIAMETER",
    "bolt_area",
    "bolt_shear_capacity",
    "bolt_tensile_capacity",
]
