"""Block shear rupture of the connected ply.

The tear-out block is L-shaped: one shear plane runs along the bottom bolt
row out to the loaded edge, and one tension plane runs across the rows up
to the free edge.

    Vbs = min(0.6·Fu·Anv + Ubs·Fu·Ant, 0.6·Fy·Agv + Ubs·Fu·Ant)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..common.parsing import as_number

if TYPE_CHECKING:
    from ..model.bolts import BoltConfiguration


@dataclass(frozen=True)
class BlockShearAreas:
    """Gross/net shear and net tension areas (in²)."""

    agv: float
    anv: float
    ant: float
    shear_length: float
    tension_length: float
    hole_diameter: float
    thickness: float

    @property
    def info(self) -> dict[str, float]:
        return {
            "Agv_in2": self.agv,
            "Anv_in2": self.anv,
            "Ant_in2": self.ant,
            "shear_length_in": self.shear_length,
            "tension_length_in": self.tension_length,
            "hole_diameter_in": self.hole_diameter,
            "thickness_in": self.thickness,
        }


def block_shear_capacity(
    fu: float,
    fy: float,
    anv: float,
    ant: float,
    agv: float,
    ubs: float = 1.0,
) -> float:
    """Nominal block shear capacity (kip)."""
    fu = as_number(fu)
    tension_term = as_number(ubs) * fu * as_number(ant)
    rupture = 0.6 * fu * as_number(anv) + tension_term
    yielding = 0.6 * as_number(fy) * as_number(agv) + tension_term
    return min(rupture, yielding)


def block_shear_areas(
    config: "BoltConfiguration",
    thickness: float,
    hole_diameter: float,
    override_agv: float | None = None,
) -> BlockShearAreas:
    """Areas of the L-shaped block for a rectangular pattern.

    Each plane loses its full holes plus half of the end hole. An
    ``override_agv`` replaces the gross shear area; the net area is then
    derived from it by the same hole deduction.
    """
    shear_length = config.edge_distance_horizontal + (config.n_columns - 1) * config.column_spacing
    tension_length = config.edge_distance_vertical + (config.n_rows - 1) * config.row_spacing

    shear_holes = (config.n_columns - 0.5) * hole_diameter
    tension_holes = (config.n_rows - 0.5) * hole_diameter

    agv = thickness * shear_length if override_agv is None else float(override_agv)
    anv = max(agv - thickness * shear_holes, 0.0)
    ant = max(thickness * (tension_length - tension_holes), 0.0)

    return BlockShearAreas(
        agv=agv,
        anv=anv,
        ant=ant,
        shear_length=shear_length,
        tension_length=tension_length,
        hole_diameter=hole_diameter,
        thickness=thickness,
    )


__all__ = ["BlockShearAreas", "block_shear_capacity", "block_shear_areas"]
