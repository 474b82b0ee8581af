"""Bolt bearing on the connected ply."""

from __future__ import annotations

import logging

from ..common.parsing import as_number

logger = logging.getLogger(__name__)

BEARING_FACTOR = 3.0


def bearing_capacity(
    bolt_diameter: float,
    plate_thickness: float,
    fu: float,
    safety_factor: float,
    n_bolts: float = 1,
) -> float:
    """Br = n × 3.0 × d × t × Fu / γb (kip).

    With the default ``n_bolts=1`` this is the capacity of a single bolt hole.
    """
    gamma = as_number(safety_factor)
    if gamma <= 0.0:
        logger.warning("Bearing safety factor %r is not positive; bearing capacity taken as 0", safety_factor)
        return 0.0
    d = as_number(bolt_diameter)
    t = as_number(plate_thickness)
    return as_number(n_bolts) * BEARING_FACTOR * d * t * as_number(fu) / gamma


__all__ = ["BEARING_FACTOR", "bearing_capacity"]
