"""Rolled-section dimensions (AISC Shapes Database, inches).

Only the shapes offered by the member form are catalogued. Angles carry the
leg thickness as both ``tw`` and ``tf``.
"""

from __future__ import annotations

from dataclasses import dataclass

from .common.errors import UnknownSection


@dataclass(frozen=True)
class SectionDimensions:
    name: str
    shape_type: str
    d: float
    bf: float
    tw: float
    tf: float


_ROWS = [
    # name, shape, d, bf, tw, tf
    ("W14X90", "W", 14.0, 14.5, 0.440, 0.710),
    ("W16X67", "W", 16.3, 10.2, 0.395, 0.665),
    ("W18X76", "W", 18.2, 11.0, 0.425, 0.680),
    ("W21X83", "W", 21.4, 8.36, 0.515, 0.835),
    ("W24X94", "W", 24.3, 9.07, 0.515, 0.875),
    ("L8X6X1", "L", 8.0, 6.0, 1.0, 1.0),
    ("L6X4X1/2", "L", 6.0, 4.0, 0.5, 0.5),
    ("L4X4X1/2", "L", 4.0, 4.0, 0.5, 0.5),
    ("L3X3X1/4", "L", 3.0, 3.0, 0.25, 0.25),
    ("C15X50", "C", 15.0, 3.72, 0.716, 0.650),
    ("C12X30", "C", 12.0, 3.17, 0.510, 0.501),
    ("C10X25", "C", 10.0, 2.89, 0.526, 0.436),
]

SECTIONS: dict[str, SectionDimensions] = {
    row[0]: SectionDimensions(*row) for row in _ROWS
}


def lookup_section(name: str) -> SectionDimensions:
    key = name.strip().upper()
    if key not in SECTIONS:
        raise UnknownSection(name)
    return SECTIONS[key]


__all__ = ["SectionDimensions", "SECTIONS", "lookup_section"]
