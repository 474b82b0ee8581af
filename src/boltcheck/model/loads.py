"""Global load cases for connections."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Mapping

from ..common.parsing import parse_float
from ..common.settings import DEFAULT_SETTINGS, DesignSettings


@dataclass(frozen=True)
class GlobalLoads:
    """Applied forces and moments for a connection.

    Attributes:
        Fx: Force in x-direction (kip)
        Fy: Force in y-direction (kip)
        Fz: Force in z-direction (kip)
        Mx: Moment about x-axis (kip-in)
        My: Moment about y-axis (kip-in)
        Mz: Moment about z-axis (kip-in)
        direct_load: Load applied directly to the bolt group (kip)
    """

    Fx: float = 0.0
    Fy: float = 0.0
    Fz: float = 0.0
    Mx: float = 0.0
    My: float = 0.0
    Mz: float = 0.0
    direct_load: float = 0.0
    name: str = ""
    id: str | None = None

    @classmethod
    def from_form(
        cls,
        fields: Mapping[str, str],
        *,
        strict: bool = False,
        settings: DesignSettings | None = None,
    ) -> "GlobalLoads":
        strict = strict or (settings or DEFAULT_SETTINGS).strict_parsing

        def read(key: str, default: str) -> float:
            return parse_float(fields.get(key, default), 0.0, strict=strict, field=key)

        return cls(
            name=fields.get("name", "").strip(),
            Fx=read("fx", "0"),
            Fy=read("fy", "0"),
            Fz=read("fz", "0"),
            Mx=read("mx", "0"),
            My=read("my", "0"),
            Mz=read("mz", "0"),
            direct_load=read("direct_load", "150"),
        )

    @property
    def force_resultant(self) -> float:
        return math.sqrt(self.Fx**2 + self.Fy**2 + self.Fz**2)

    @property
    def moment_resultant(self) -> float:
        return math.sqrt(self.Mx**2 + self.My**2 + self.Mz**2)

    def default_name(self, sequence: int) -> str:
        return f"Global Loads {sequence}"


__all__ = ["GlobalLoads"]
