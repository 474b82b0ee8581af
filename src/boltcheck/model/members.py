"""Structural members joined by a connection.

A member carries exactly one shape payload: a catalogued steel section or a
custom plate. The member kind is read from the payload type, so a plate can
never expose section fields and vice versa.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Union

from ..common.parsing import parse_float
from ..common.settings import DEFAULT_SETTINGS, DesignSettings
from ..materials import STEEL_GRADES, SteelGrade, steel_grade
from ..sections import SECTIONS, lookup_section

MemberKind = Literal["steel-section", "plate"]
Component = Literal["TOTAL", "WEB", "FLANGE"]
Role = Literal["BEAM", "COLUMN", "BRACE"]

SECTION_CLASSES = ("W_shapes", "L_shapes", "C_shapes", "HSS_shapes")
SHAPE_TYPES = ("W", "L", "C", "HSS")
ROLES = ("BEAM", "COLUMN", "BRACE")
COMPONENTS = ("TOTAL", "WEB", "FLANGE")
LOADING_CONDITIONS = {"1": "Normal", "2": "Bracing", "3": "Special"}


@dataclass(frozen=True)
class SteelSection:
    """Rolled section payload."""

    section_class: str = "W_shapes"
    section_name: str = "W21X83"
    shape_type: str = "W"
    role: Role = "BEAM"

    def __post_init__(self) -> None:
        if self.section_class not in SECTION_CLASSES:
            raise ValueError(f"Unsupported section class: {self.section_class}")
        if self.shape_type not in SHAPE_TYPES:
            raise ValueError(f"Unsupported shape type: {self.shape_type}")
        if self.role not in ROLES:
            raise ValueError(f"Role must be one of {ROLES}")
        if not self.section_name.strip():
            raise ValueError("Section name must not be empty")


@dataclass(frozen=True)
class PlateShape:
    """Custom plate payload (in).

    Attributes:
        thickness: Plate thickness
        width: Plate width
        clipping: Corner clip dimension
    """

    thickness: float = 0.625
    width: float = 10.0
    clipping: float = 0.0

    def __post_init__(self) -> None:
        if self.thickness <= 0:
            raise ValueError("Plate thickness must be positive")
        if self.width <= 0:
            raise ValueError("Plate width must be positive")
        if self.clipping < 0:
            raise ValueError("Plate clipping must be non-negative")


Shape = Union[SteelSection, PlateShape]


@dataclass(frozen=True)
class Member:
    """One side of a connection.

    ``id`` is assigned by the store; a member built by hand has ``id=None``
    until it is added.
    """

    shape: Shape
    name: str = ""
    material: str = "A992"
    loading_condition: str = "1"
    length: float = 25.0
    id: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.shape, (SteelSection, PlateShape)):
            raise TypeError("shape must be a SteelSection or PlateShape")
        if self.material not in STEEL_GRADES:
            raise ValueError(f"Unsupported material grade: {self.material}")
        if self.loading_condition not in LOADING_CONDITIONS:
            raise ValueError(f"Loading condition must be one of {tuple(LOADING_CONDITIONS)}")
        if self.length < 0:
            raise ValueError("Member length must be non-negative")

    @classmethod
    def steel_section(cls, section_name: str, **kwargs) -> "Member":
        """Member with a rolled section payload.

        Shape type and section class come from the section catalogue when it
        lists ``section_name``; explicit keyword arguments still win.
        """
        shape_fields = {
            key: kwargs.pop(key) for key in ("section_class", "shape_type", "role") if key in kwargs
        }
        dims = SECTIONS.get(section_name.strip().upper())
        if dims is not None:
            shape_fields.setdefault("shape_type", dims.shape_type)
            shape_fields.setdefault("section_class", f"{dims.shape_type}_shapes")
        return cls(shape=SteelSection(section_name=section_name, **shape_fields), **kwargs)

    @classmethod
    def plate(cls, thickness: float, **kwargs) -> "Member":
        shape_fields = {key: kwargs.pop(key) for key in ("width", "clipping") if key in kwargs}
        return cls(shape=PlateShape(thickness=thickness, **shape_fields), **kwargs)

    @classmethod
    def from_form(
        cls,
        fields: Mapping[str, str],
        *,
        strict: bool = False,
        settings: DesignSettings | None = None,
    ) -> "Member":
        """Build a member from raw form strings.

        ``member_type`` selects the payload: ``"steel-section"`` (default) or
        ``"plate"``. ``settings.strict_parsing`` turns strict parsing on as well.
        """
        strict = strict or (settings or DEFAULT_SETTINGS).strict_parsing
        common = dict(
            name=fields.get("name", "").strip(),
            material=fields.get("material", "A992"),
            loading_condition=fields.get("loading_condition", "1"),
            length=parse_float(fields.get("length", "25"), 25.0, strict=strict, field="length"),
        )
        if fields.get("member_type", "steel-section") == "plate":
            shape: Shape = PlateShape(
                thickness=parse_float(
                    fields.get("thickness", "0.625"), 0.625, strict=strict, field="thickness"
                ),
                width=parse_float(fields.get("width", "10"), 10.0, strict=strict, field="width"),
                clipping=parse_float(
                    fields.get("clipping", "0"), 0.0, strict=strict, field="clipping"
                ),
            )
        else:
            shape = SteelSection(
                section_class=fields.get("section_class", "W_shapes"),
                section_name=fields.get("section_name", "W21X83"),
                shape_type=fields.get("shape_type", "W"),
                role=fields.get("role", "BEAM"),
            )
        return cls(shape=shape, **common)

    @property
    def kind(self) -> MemberKind:
        return "plate" if isinstance(self.shape, PlateShape) else "steel-section"

    @property
    def grade(self) -> SteelGrade:
        return steel_grade(self.material)

    def default_name(self, sequence: int) -> str:
        if isinstance(self.shape, SteelSection):
            return f"{self.shape.section_name} {sequence}"
        return f"Plate {sequence}"

    def ply_thickness(self, component: Component = "TOTAL") -> float:
        """Thickness of the ply the bolts pass through (in)."""
        if component not in COMPONENTS:
            raise ValueError(f"Component must be one of {COMPONENTS}")
        if isinstance(self.shape, PlateShape):
            return self.shape.thickness

        dims = lookup_section(self.shape.section_name)
        if component == "WEB":
            return dims.tw
        if component == "FLANGE":
            return dims.tf
        return min(dims.tw, dims.tf)


__all__ = [
    "MemberKind",
    "Component",
    "Role",
    "COMPONENTS",
    "SteelSection",
    "PlateShape",
    "Shape",
    "Member",
]
