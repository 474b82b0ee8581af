"""Design settings shared by the capacity functions and the evaluator."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

DemandFormula = Literal["combined", "direct"]


@dataclass(frozen=True)
class DesignSettings:
    """Fixed design constants (kip, in, ksi).

    Attributes:
        bolt_fu: Bolt ultimate strength used for shear and tension (ksi)
        bolt_safety_factor: γs applied to bolt shear and tension
        bearing_safety_factor: γb applied to bearing
        ubs: Block shear tension stress factor
        effective_eccentricity: e_eff dividing the moment resultant (in)
        hole_allowance: Added to bolt diameter for the net-area hole (in)
        default_bolt_diameter: Fallback when a diameter is missing or non-positive (in)
        demand_formula: "combined" force + moment + direct, or "direct" only
        strict_parsing: Raise on unreadable form input instead of using defaults
    """

    bolt_fu: float = 65.0
    bolt_safety_factor: float = 2.0
    bearing_safety_factor: float = 1.25
    ubs: float = 1.0
    effective_eccentricity: float = 1.0
    hole_allowance: float = 0.125
    default_bolt_diameter: float = 0.875
    demand_formula: DemandFormula = "combined"
    strict_parsing: bool = False

    def __post_init__(self) -> None:
        if self.demand_formula not in ("combined", "direct"):
            raise ValueError("demand_formula must be 'combined' or 'direct'")
        if self.hole_allowance < 0.0:
            raise ValueError("hole_allowance must be non-negative")
        if self.default_bolt_diameter <= 0.0:
            raise ValueError("default_bolt_diameter must be positive")

    def replace(self, **changes) -> "DesignSettings":
        return replace(self, **changes)


DEFAULT_SETTINGS = DesignSettings()


__all__ = ["DemandFormula", "DesignSettings", "DEFAULT_SETTINGS"]
