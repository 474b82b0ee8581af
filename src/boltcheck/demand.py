"""Applied demand on the bolt group.

The canonical ("combined") demand adds the force resultant, the moment
resultant divided by an effective eccentricity, and the direct load:

    P = √(Fx² + Fy² + Fz²) + √(Mx² + My² + Mz²) / e_eff + P_direct

The "direct" formula keeps only the direct load, which is what earlier
releases reported as the applied load.
"""

from __future__ import annotations

import logging
import math

from .common.parsing import as_number
from .common.settings import DemandFormula

logger = logging.getLogger(__name__)


def resultant_demand(
    fx: float,
    fy: float,
    fz: float,
    mx: float,
    my: float,
    mz: float,
    direct_load: float,
    effective_eccentricity: float = 1.0,
    formula: DemandFormula = "combined",
) -> float:
    """Single demand value (kip) from a 6-component load vector and a direct load."""
    direct = as_number(direct_load)
    if formula == "direct":
        return direct
    if formula != "combined":
        raise ValueError("formula must be 'combined' or 'direct'")

    e = as_number(effective_eccentricity)
    if e <= 0.0:
        logger.warning("Effective eccentricity %r is not positive; using 1.0", effective_eccentricity)
        e = 1.0

    force = math.sqrt(as_number(fx) ** 2 + as_number(fy) ** 2 + as_number(fz) ** 2)
    moment = math.sqrt(as_number(mx) ** 2 + as_number(my) ** 2 + as_number(mz) ** 2)
    return force + moment / e + direct


__all__ = ["resultant_demand"]
