"""Result models for connection evaluation."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Literal

from ..capacity.block_shear import BlockShearAreas
from ..common.settings import DesignSettings
from ..model.bolts import BoltConfiguration
from ..model.connection import Connection
from ..model.loads import GlobalLoads

LimitState = Literal["bolt_shear", "block_shear", "bearing"]
Verdict = Literal["SAFE", "UNSAFE"]
EvaluationStatus = Literal["UNEVALUATED", "EVALUATED"]

# Tie-break order for the governing limit state.
LIMIT_STATES: tuple[LimitState, ...] = ("bolt_shear", "block_shear", "bearing")


@dataclass(frozen=True)
class PlyCapacity:
    """Bearing and block shear of one connected ply."""

    side: Literal["A", "B"]
    member_name: str
    component: str
    material: str
    thickness: float
    fy: float
    fu: float
    bearing_capacity: float
    block_shear_capacity: float
    block_shear: BlockShearAreas

    @property
    def info(self) -> dict[str, Any]:
        return {
            "side": self.side,
            "member": self.member_name,
            "component": self.component,
            "material": self.material,
            "thickness_in": self.thickness,
            "Fy_ksi": self.fy,
            "Fu_ksi": self.fu,
            "bearing_capacity_kip": self.bearing_capacity,
            "block_shear_capacity_kip": self.block_shear_capacity,
            "block_shear": self.block_shear.info,
        }


@dataclass(frozen=True)
class EvaluationResult:
    connection: Connection
    bolt_configuration: BoltConfiguration
    global_loads: GlobalLoads
    n_bolts: int
    bolt_area: float
    bolt_shear_capacity: float
    bolt_tensile_capacity: float
    block_shear_capacity: float
    bearing_capacity: float
    demand: float
    governing_capacity: float
    governing_limit_state: LimitState
    utilization_ratio: float
    verdict: Verdict
    ply_a: PlyCapacity
    ply_b: PlyCapacity
    settings: DesignSettings

    @property
    def is_safe(self) -> bool:
        return self.verdict == "SAFE"

    @property
    def governing_ply(self) -> PlyCapacity | None:
        """Ply whose bearing or block shear value governs the connection.

        ``None`` when bolt shear governs.
        """
        if self.governing_limit_state == "bolt_shear":
            return None
        if self.governing_limit_state == "block_shear":
            return min((self.ply_a, self.ply_b), key=lambda ply: ply.block_shear_capacity)
        return min((self.ply_a, self.ply_b), key=lambda ply: ply.bearing_capacity)

    @property
    def capacities(self) -> dict[LimitState, float]:
        return {
            "bolt_shear": self.bolt_shear_capacity,
            "block_shear": self.block_shear_capacity,
            "bearing": self.bearing_capacity,
        }

    @property
    def info(self) -> dict[str, Any]:
        ratio = self.utilization_ratio
        return {
            "connection_id": self.connection.id,
            "connection": self.connection.name,
            "member_a": self.connection.member_a.name,
            "member_b": self.connection.member_b.name,
            "bolt_configuration_id": self.bolt_configuration.id,
            "global_loads_id": self.global_loads.id,
            "n_bolts": self.n_bolts,
            "bolt_diameter_in": self.bolt_configuration.bolt_diameter,
            "bolt_area_in2": self.bolt_area,
            "bolt_shear_capacity_kip": self.bolt_shear_capacity,
            "bolt_tensile_capacity_kip": self.bolt_tensile_capacity,
            "block_shear_capacity_kip": self.block_shear_capacity,
            "bearing_capacity_kip": self.bearing_capacity,
            "demand_kip": self.demand,
            "governing_capacity_kip": self.governing_capacity,
            "governing_limit_state": self.governing_limit_state,
            "utilization_ratio": ratio,
            "utilization_percent": ratio * 100.0 if math.isfinite(ratio) else math.inf,
            "verdict": self.verdict,
            "plies": [self.ply_a.info, self.ply_b.info],
        }


__all__ = [
    "LimitState",
    "Verdict",
    "EvaluationStatus",
    "LIMIT_STATES",
    "PlyCapacity",
    "EvaluationResult",
]
