"""Material reference data (ksi)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SteelGrade:
    name: str
    fy: float
    fu: float


STEEL_GRADES: dict[str, SteelGrade] = {
    "A992": SteelGrade("A992", fy=50.0, fu=65.0),
    "A572_GR50": SteelGrade("A572_GR50", fy=50.0, fu=65.0),
    "A36": SteelGrade("A36", fy=36.0, fu=58.0),
}

# X: threads excluded from the shear plane, N: threads included.
BOLT_GRADES: tuple[str, ...] = ("A325-X", "A325-N", "A490-X", "A490-N")


def steel_grade(name: str) -> SteelGrade:
    try:
        return STEEL_GRADES[name]
    except KeyError:
        raise ValueError(f"Unsupported material grade: {name}") from None


__all__ = ["SteelGrade", "STEEL_GRADES", "BOLT_GRADES", "steel_grade"]
