import math

import pytest

from boltcheck import (
    BoltConfiguration,
    ConnectionEvaluator,
    ConnectionNotFound,
    DesignSettings,
    EntityStore,
    EvaluationError,
    GlobalLoads,
    Member,
    SteelSection,
    UnknownSection,
    UnresolvedBoltConfiguration,
    UnresolvedGlobalLoads,
    evaluate,
)
from boltcheck.evaluation import evaluate_connection


def _build(store: EntityStore, *, config: BoltConfiguration, loads: GlobalLoads,
           member_a: Member | None = None, member_b: Member | None = None, **kwargs) -> str:
    a = store.add_member(member_a or Member.steel_section("W21X83"))
    b = store.add_member(member_b or Member.plate(thickness=0.5))
    return store.add_connection(
        a, b, store.add_bolt_configuration(config), store.add_global_loads(loads), **kwargs
    )


def test_end_to_end_reference_connection(populated_store: dict) -> None:
    store = populated_store["store"]
    result = ConnectionEvaluator(store).evaluate(populated_store["connection"])

    assert result.n_bolts == 14
    assert result.bolt_shear_capacity == pytest.approx(164.0, abs=0.2)
    assert result.demand == pytest.approx(150.0)
    assert result.utilization_ratio == pytest.approx(0.91, abs=0.01)
    assert result.verdict == "SAFE"
    assert result.is_safe
    assert result.governing_limit_state == "bolt_shear"
    assert result.governing_capacity == result.bolt_shear_capacity


def test_end_to_end_ply_values(populated_store: dict) -> None:
    result = evaluate(populated_store["store"], populated_store["connection"])

    # plate ply (0.5 in A992) is thinner than the W21X83 web (0.515 in)
    assert result.bearing_capacity == pytest.approx(14 * 68.25)
    assert result.block_shear_capacity == pytest.approx(367.25)
    assert result.ply_a.thickness == pytest.approx(0.515)
    assert result.ply_b.thickness == pytest.approx(0.5)
    assert result.bolt_tensile_capacity == pytest.approx(205.20, abs=0.01)


def test_result_carries_resolved_records(populated_store: dict) -> None:
    store = populated_store["store"]
    result = evaluate(store, populated_store["connection"])

    assert result.connection == store.get_connection(populated_store["connection"])
    assert result.bolt_configuration == store.get_bolt_configuration(populated_store["bolts"])
    assert result.global_loads == store.get_global_loads(populated_store["loads"])


def test_result_is_immutable(populated_store: dict) -> None:
    result = evaluate(populated_store["store"], populated_store["connection"])
    with pytest.raises(AttributeError):
        result.verdict = "UNSAFE"


def test_governing_capacity_is_minimum(populated_store: dict) -> None:
    result = evaluate(populated_store["store"], populated_store["connection"])

    assert result.governing_capacity <= result.bolt_shear_capacity
    assert result.governing_capacity <= result.block_shear_capacity
    assert result.governing_capacity <= result.bearing_capacity
    assert result.governing_capacity == min(result.capacities.values())


@pytest.mark.parametrize("direct_load", [0.0, 50.0, 150.0, 163.0, 170.0, 500.0])
def test_verdict_matches_ratio(store: EntityStore, bolt_config: BoltConfiguration, direct_load: float) -> None:
    conn = _build(store, config=bolt_config, loads=GlobalLoads(direct_load=direct_load))
    result = evaluate(store, conn)

    assert math.isfinite(result.utilization_ratio)
    assert (result.utilization_ratio <= 1.0) == (result.verdict == "SAFE")


def test_overloaded_connection_is_unsafe(store: EntityStore, bolt_config: BoltConfiguration) -> None:
    conn = _build(store, config=bolt_config, loads=GlobalLoads(direct_load=400.0))
    result = evaluate(store, conn)

    assert result.verdict == "UNSAFE"
    assert result.utilization_ratio > 1.0


def test_ply_limit_states_govern_with_strong_bolts(store: EntityStore) -> None:
    config = BoltConfiguration(n_rows=1, n_columns=2, bolt_diameter=1.0, edge_distance_horizontal=3.0)
    thin = Member.plate(thickness=0.25, material="A36")
    conn = _build(store, config=config, loads=GlobalLoads(direct_load=10.0), member_a=thin, member_b=thin)
    result = evaluate(store, conn)

    # bearing: 2 * 3.0 * 1.0 * 0.25 * 58 / 1.25 = 69.6; bolt shear: 2 * 0.6 * 65 * π/4 / 2 = 30.6
    assert result.bearing_capacity == pytest.approx(69.6)
    assert result.governing_limit_state == "bolt_shear"

    strong_bolts = DesignSettings(bolt_fu=150.0)
    result = evaluate(store, conn, settings=strong_bolts)
    assert result.governing_limit_state == "block_shear"
    assert result.governing_capacity == min(result.block_shear_capacity, result.bearing_capacity)


def test_tie_prefers_bolt_shear(populated_store: dict) -> None:
    store = populated_store["store"]
    connection = store.get_connection(populated_store["connection"])
    config = store.get_bolt_configuration(populated_store["bolts"])
    loads = store.get_global_loads(populated_store["loads"])

    # bolt shear and bearing both collapse to zero
    settings = DesignSettings(bolt_fu=0.0, bearing_safety_factor=0.0)
    result = evaluate_connection(connection, config, loads, settings)
    assert result.bolt_shear_capacity == 0.0
    assert result.bearing_capacity == 0.0
    assert result.governing_limit_state == "bolt_shear"


def test_zero_governing_capacity_is_unsafe_not_an_error(populated_store: dict) -> None:
    settings = DesignSettings(bolt_fu=0.0)
    result = evaluate(populated_store["store"], populated_store["connection"], settings=settings)

    assert result.governing_capacity == 0.0
    assert result.utilization_ratio == math.inf
    assert result.verdict == "UNSAFE"


def test_combined_demand_includes_load_vector(store: EntityStore, bolt_config: BoltConfiguration) -> None:
    loads = GlobalLoads(Fx=30.0, Fy=40.0, Mz=120.0, direct_load=20.0)
    conn = _build(store, config=bolt_config, loads=loads)

    combined = evaluate(store, conn, settings=DesignSettings(effective_eccentricity=12.0))
    assert combined.demand == pytest.approx(50.0 + 10.0 + 20.0)

    direct = evaluate(store, conn, settings=DesignSettings(demand_formula="direct"))
    assert direct.demand == pytest.approx(20.0)


def test_override_gross_area_changes_block_shear(store: EntityStore, bolt_config: BoltConfiguration) -> None:
    plain = _build(store, config=bolt_config, loads=GlobalLoads(direct_load=10.0))
    overridden = _build(store, config=bolt_config, loads=GlobalLoads(direct_load=10.0), override_ag=5.0)

    assert evaluate(store, overridden).block_shear_capacity < evaluate(store, plain).block_shear_capacity


def test_component_selects_flange_thickness(store: EntityStore, bolt_config: BoltConfiguration) -> None:
    thick_plate = Member.plate(thickness=1.0)
    conn = _build(
        store, config=bolt_config, loads=GlobalLoads(direct_load=10.0),
        member_b=thick_plate, component_a="FLANGE",
    )
    result = evaluate(store, conn, settings=DesignSettings(bolt_fu=400.0))

    assert result.ply_a.thickness == pytest.approx(0.835)
    assert result.governing_limit_state == "block_shear"
    assert result.governing_ply.side == "A"


def test_no_governing_ply_when_bolt_shear_governs(populated_store: dict) -> None:
    result = evaluate(populated_store["store"], populated_store["connection"])

    assert result.governing_limit_state == "bolt_shear"
    assert result.governing_ply is None


def test_missing_connection(store: EntityStore) -> None:
    with pytest.raises(ConnectionNotFound):
        evaluate(store, "connection-1")


def test_removed_bolt_configuration_fails_evaluation(populated_store: dict) -> None:
    store = populated_store["store"]
    store.remove_bolt_configuration(populated_store["bolts"])

    assert store.get_connection(populated_store["connection"]) is not None
    with pytest.raises(UnresolvedBoltConfiguration) as excinfo:
        evaluate(store, populated_store["connection"])
    assert excinfo.value.reference == populated_store["bolts"]
    assert isinstance(excinfo.value, EvaluationError)


def test_removed_global_loads_fails_evaluation(populated_store: dict) -> None:
    store = populated_store["store"]
    store.remove_global_loads(populated_store["loads"])

    with pytest.raises(UnresolvedGlobalLoads):
        evaluate(store, populated_store["connection"])


def test_removed_member_does_not_affect_evaluation(populated_store: dict) -> None:
    store = populated_store["store"]
    before = evaluate(store, populated_store["connection"])
    store.remove_member(populated_store["member_a"])
    store.remove_member(populated_store["member_b"])

    after = evaluate(store, populated_store["connection"])
    assert after.utilization_ratio == pytest.approx(before.utilization_ratio)


def test_uncatalogued_section_fails_evaluation(store: EntityStore, bolt_config: BoltConfiguration) -> None:
    hss = Member(shape=SteelSection(section_class="HSS_shapes", section_name="HSS8X8X1/2", shape_type="HSS"))
    conn = _build(store, config=bolt_config, loads=GlobalLoads(direct_load=10.0), member_a=hss)

    with pytest.raises(UnknownSection):
        evaluate(store, conn)


def test_evaluator_status(populated_store: dict) -> None:
    store = populated_store["store"]
    evaluator = ConnectionEvaluator(store)
    conn = populated_store["connection"]

    assert evaluator.status(conn) == "UNEVALUATED"
    assert evaluator.last_result(conn) is None

    first = evaluator.evaluate(conn)
    assert evaluator.status(conn) == "EVALUATED"
    assert evaluator.last_result(conn) is first

    second = evaluator.evaluate(conn)
    assert evaluator.last_result(conn) is second
    assert second == first


def test_failed_evaluation_keeps_previous_result(populated_store: dict) -> None:
    store = populated_store["store"]
    evaluator = ConnectionEvaluator(store)
    conn = populated_store["connection"]
    first = evaluator.evaluate(conn)

    store.remove_global_loads(populated_store["loads"])
    with pytest.raises(UnresolvedGlobalLoads):
        evaluator.evaluate(conn)

    assert evaluator.status(conn) == "EVALUATED"
    assert evaluator.last_result(conn) is first


def test_info_is_tabular(populated_store: dict) -> None:
    info = evaluate(populated_store["store"], populated_store["connection"]).info

    assert info["verdict"] == "SAFE"
    assert info["governing_limit_state"] == "bolt_shear"
    assert info["utilization_percent"] == pytest.approx(info["utilization_ratio"] * 100.0)
    assert len(info["plies"]) == 2
    assert info["plies"][1]["block_shear"]["Agv_in2"] == pytest.approx(9.75)


def test_removed_connection_drops_cached_result(populated_store: dict) -> None:
    store = populated_store["store"]
    evaluator = ConnectionEvaluator(store)
    conn = populated_store["connection"]
    evaluator.evaluate(conn)

    store.remove_connection(conn)

    assert evaluator.status(conn) == "UNEVALUATED"
    assert evaluator.last_result(conn) is None
    with pytest.raises(ConnectionNotFound):
        evaluator.evaluate(conn)
