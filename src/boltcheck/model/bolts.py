"""
Bolt configuration templates.

A configuration is a reusable rectangular bolt pattern. Connections refer to
it by identifier, so one template can serve many connections.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Literal, Mapping

import numpy as np

from ..common.parsing import parse_float, parse_int
from ..common.settings import DEFAULT_SETTINGS, DesignSettings
from ..materials import BOLT_GRADES

logger = logging.getLogger(__name__)

Point2D = tuple[float, float]  # (y, z)

DEFAULT_BOLT_DIAMETER = 0.875  # in


@dataclass(frozen=True)
class BoltConfiguration:
    """Rectangular bolt pattern + bolt size/grade (in).

    Rows run horizontally and are stacked vertically at ``row_spacing``;
    columns are spaced horizontally at ``column_spacing``. The first bolt
    sits ``edge_distance_horizontal`` from the left edge and
    ``edge_distance_vertical`` from the bottom edge.
    """

    row_spacing: float = 3.0
    column_spacing: float = 3.0
    n_rows: int = 2
    n_columns: int = 7
    edge_distance_vertical: float = 2.0
    edge_distance_horizontal: float = 1.5
    bolt_diameter: float = DEFAULT_BOLT_DIAMETER
    bolt_grade: str = "A325-X"
    angle: float = 47.2
    name: str = ""
    connection_type: Literal["bolted"] = "bolted"
    id: str | None = None

    def __post_init__(self) -> None:
        if self.n_rows < 1 or self.n_columns < 1:
            raise ValueError("n_rows and n_columns must be at least 1")
        if self.bolt_diameter <= 0.0:
            raise ValueError("Bolt diameter must be positive")
        if self.bolt_grade not in BOLT_GRADES:
            raise ValueError(f"Unsupported bolt grade: {self.bolt_grade}")
        if self.row_spacing < 0.0 or self.column_spacing < 0.0:
            raise ValueError("Bolt spacing must be non-negative")
        if self.edge_distance_vertical < 0.0 or self.edge_distance_horizontal < 0.0:
            raise ValueError("Edge distances must be non-negative")
        if self.connection_type != "bolted":
            raise ValueError("connection_type must be 'bolted'")

    @classmethod
    def from_form(
        cls,
        fields: Mapping[str, str],
        *,
        strict: bool = False,
        settings: DesignSettings | None = None,
    ) -> "BoltConfiguration":
        """Build a configuration from raw form strings.

        A missing, unreadable or non-positive diameter becomes
        ``settings.default_bolt_diameter`` (0.875 in by default).
        ``settings.strict_parsing`` turns strict parsing on as well.
        """
        settings = settings or DEFAULT_SETTINGS
        strict = strict or settings.strict_parsing
        fallback = settings.default_bolt_diameter
        diameter = parse_float(
            fields.get("bolt_diameter", fallback), fallback, strict=strict, field="bolt_diameter"
        )
        if diameter <= 0.0:
            logger.warning("Non-positive bolt diameter %r; using %s in", diameter, fallback)
            diameter = fallback

        return cls(
            name=fields.get("name", "").strip(),
            row_spacing=parse_float(fields.get("row_spacing", "3.0"), 3.0, strict=strict, field="row_spacing"),
            column_spacing=parse_float(
                fields.get("column_spacing", "3.0"), 3.0, strict=strict, field="column_spacing"
            ),
            n_rows=parse_int(fields.get("n_rows", "2"), 2, strict=strict, field="n_rows"),
            n_columns=parse_int(fields.get("n_columns", "7"), 7, strict=strict, field="n_columns"),
            edge_distance_vertical=parse_float(
                fields.get("edge_distance_vertical", "2.0"), 2.0, strict=strict, field="edge_distance_vertical"
            ),
            edge_distance_horizontal=parse_float(
                fields.get("edge_distance_horizontal", "1.5"), 1.5, strict=strict, field="edge_distance_horizontal"
            ),
            bolt_diameter=diameter,
            bolt_grade=fields.get("bolt_grade", "A325-X"),
            angle=parse_float(fields.get("angle", "47.2"), 47.2, strict=strict, field="angle"),
        )

    @property
    def n_bolts(self) -> int:
        return self.n_rows * self.n_columns

    @property
    def bolt_area(self) -> float:
        """Nominal (unthreaded) bolt area, in²."""
        return math.pi * self.bolt_diameter**2 / 4.0

    @property
    def threads_excluded(self) -> bool:
        return self.bolt_grade.endswith("-X")

    def hole_diameter(self, allowance: float = 0.125) -> float:
        return self.bolt_diameter + allowance

    def default_name(self, sequence: int) -> str:
        return f"Bolt Config {sequence}"

    def bolt_points(self) -> np.ndarray:
        """Bolt centres as an (n, 2) array of (y, z), row-major from the bottom-left bolt."""
        y = self.edge_distance_vertical + np.arange(self.n_rows, dtype=float) * self.row_spacing
        z = self.edge_distance_horizontal + np.arange(self.n_columns, dtype=float) * self.column_spacing
        yy, zz = np.meshgrid(y, z, indexing="ij")
        return np.column_stack([yy.ravel(), zz.ravel()])

    @property
    def centroid(self) -> Point2D:
        points = self.bolt_points()
        return float(np.mean(points[:, 0])), float(np.mean(points[:, 1]))

    def outline(self) -> tuple[float, float]:
        """Height and width of the rectangle enclosing the pattern with edge distances on all sides."""
        height = 2.0 * self.edge_distance_vertical + (self.n_rows - 1) * self.row_spacing
        width = 2.0 * self.edge_distance_horizontal + (self.n_columns - 1) * self.column_spacing
        return height, width


__all__ = ["Point2D", "DEFAULT_BOLT_DIAMETER", "BoltConfiguration"]
