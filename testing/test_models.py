import math

import numpy as np
import pytest

from boltcheck import (
    BoltConfiguration,
    DesignSettings,
    GlobalLoads,
    InvalidInput,
    Member,
    PlateShape,
    SteelSection,
    UnknownSection,
)


class TestMember:
    def test_kind_follows_payload(self) -> None:
        assert Member.steel_section("W21X83").kind == "steel-section"
        assert Member.plate(thickness=0.5).kind == "plate"

    def test_payload_fields_are_exclusive(self) -> None:
        plate = Member.plate(thickness=0.5, width=8.0)
        assert isinstance(plate.shape, PlateShape)
        assert not hasattr(plate.shape, "section_name")

        beam = Member.steel_section("W18X76", role="COLUMN")
        assert isinstance(beam.shape, SteelSection)
        assert beam.shape.role == "COLUMN"
        assert not hasattr(beam.shape, "thickness")

    def test_invalid_values_rejected(self) -> None:
        with pytest.raises(ValueError):
            Member.plate(thickness=0.0)
        with pytest.raises(ValueError):
            Member.steel_section("W21X83", role="GIRDER")
        with pytest.raises(ValueError):
            Member.plate(thickness=0.5, material="S355")
        with pytest.raises(TypeError):
            Member(shape="plate")

    @pytest.mark.parametrize(
        "component,expected",
        [("WEB", 0.515), ("FLANGE", 0.835), ("TOTAL", 0.515)],
    )
    def test_steel_section_ply_thickness(self, component: str, expected: float) -> None:
        assert Member.steel_section("W21X83").ply_thickness(component) == pytest.approx(expected)

    def test_plate_ply_thickness_ignores_component(self) -> None:
        plate = Member.plate(thickness=0.75)
        assert plate.ply_thickness("WEB") == 0.75
        assert plate.ply_thickness("FLANGE") == 0.75

    def test_uncatalogued_section(self) -> None:
        member = Member(shape=SteelSection(section_class="HSS_shapes", section_name="HSS6X6X1/2", shape_type="HSS"))
        with pytest.raises(UnknownSection):
            member.ply_thickness("TOTAL")

    def test_from_form_plate(self) -> None:
        member = Member.from_form(
            {"member_type": "plate", "thickness": "0.5", "width": "abc", "material": "A36"}
        )
        assert member.kind == "plate"
        assert member.shape.thickness == 0.5
        assert member.shape.width == 10.0
        assert member.grade.fu == 58.0

    def test_from_form_steel_section_defaults(self) -> None:
        member = Member.from_form({})
        assert member.kind == "steel-section"
        assert member.shape.section_name == "W21X83"
        assert member.length == 25.0

    def test_from_form_strict(self) -> None:
        with pytest.raises(InvalidInput):
            Member.from_form({"member_type": "plate", "thickness": "thin"}, strict=True)

    def test_from_form_strict_from_settings(self) -> None:
        fields = {"member_type": "plate", "thickness": "thin"}
        assert Member.from_form(fields).shape.thickness == 0.625
        with pytest.raises(InvalidInput):
            Member.from_form(fields, settings=DesignSettings(strict_parsing=True))

    @pytest.mark.parametrize(
        "name,shape_type,section_class",
        [("L4X4X1/2", "L", "L_shapes"), ("C12X30", "C", "C_shapes"), ("W18X76", "W", "W_shapes")],
    )
    def test_steel_section_shape_from_catalogue(self, name: str, shape_type: str, section_class: str) -> None:
        shape = Member.steel_section(name).shape
        assert shape.shape_type == shape_type
        assert shape.section_class == section_class

    def test_steel_section_explicit_shape_wins(self) -> None:
        shape = Member.steel_section("HSS6X6X1/2", section_class="HSS_shapes", shape_type="HSS").shape
        assert shape.shape_type == "HSS"


class TestBoltConfiguration:
    def test_bolt_count_and_area(self, bolt_config: BoltConfiguration) -> None:
        assert bolt_config.n_bolts == 14
        assert bolt_config.bolt_area == pytest.approx(math.pi * 0.875**2 / 4.0)
        assert bolt_config.hole_diameter(0.125) == pytest.approx(1.0)
        assert bolt_config.threads_excluded

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"n_rows": 0},
            {"n_columns": 0},
            {"bolt_diameter": 0.0},
            {"bolt_grade": "8.8"},
            {"row_spacing": -1.0},
            {"edge_distance_vertical": -0.5},
        ],
    )
    def test_invalid_values_rejected(self, kwargs) -> None:
        with pytest.raises(ValueError):
            BoltConfiguration(**kwargs)

    def test_bolt_points(self, bolt_config: BoltConfiguration) -> None:
        points = bolt_config.bolt_points()

        assert points.shape == (14, 2)
        np.testing.assert_allclose(points[0], [2.0, 1.5])
        np.testing.assert_allclose(points[-1], [5.0, 19.5])
        assert bolt_config.centroid == pytest.approx((3.5, 10.5))

    def test_outline(self, bolt_config: BoltConfiguration) -> None:
        height, width = bolt_config.outline()
        assert height == pytest.approx(7.0)
        assert width == pytest.approx(21.0)

    def test_from_form_diameter_fallback(self) -> None:
        for raw in ("", "abc", "0", "-0.5"):
            config = BoltConfiguration.from_form({"bolt_diameter": raw})
            assert config.bolt_diameter == 0.875

    def test_from_form_diameter_fallback_from_settings(self) -> None:
        settings = DesignSettings(default_bolt_diameter=1.0)
        for raw in ("", "abc", "0", "-0.5"):
            config = BoltConfiguration.from_form({"bolt_diameter": raw}, settings=settings)
            assert config.bolt_diameter == 1.0
        assert BoltConfiguration.from_form({}, settings=settings).bolt_diameter == 1.0

    def test_from_form_strict_from_settings(self) -> None:
        fields = {"row_spacing": "abc"}
        assert BoltConfiguration.from_form(fields).row_spacing == 3.0
        with pytest.raises(InvalidInput):
            BoltConfiguration.from_form(fields, settings=DesignSettings(strict_parsing=True))

    def test_from_form_reads_fields(self) -> None:
        config = BoltConfiguration.from_form(
            {"n_rows": "3", "n_columns": "4", "bolt_diameter": "1.0", "bolt_grade": "A490-N"}
        )
        assert config.n_bolts == 12
        assert config.bolt_diameter == 1.0
        assert not config.threads_excluded


class TestGlobalLoads:
    def test_resultants(self) -> None:
        loads = GlobalLoads(Fx=3.0, Fy=4.0, Mz=12.0, My=5.0)
        assert loads.force_resultant == pytest.approx(5.0)
        assert loads.moment_resultant == pytest.approx(13.0)

    def test_from_form(self) -> None:
        loads = GlobalLoads.from_form({"fx": "10", "fy": "oops", "direct_load": "150"})
        assert loads.Fx == 10.0
        assert loads.Fy == 0.0
        assert loads.direct_load == 150.0

    def test_from_form_default_direct_load(self) -> None:
        assert GlobalLoads.from_form({}).direct_load == 150.0

    def test_from_form_strict_from_settings(self) -> None:
        with pytest.raises(InvalidInput):
            GlobalLoads.from_form({"fy": "oops"}, settings=DesignSettings(strict_parsing=True))
        assert GlobalLoads.from_form({"fx": "0"}, settings=DesignSettings(strict_parsing=True)).Fx == 0.0
