"""
boltcheck - Bolted Connection Capacity Evaluation

Assemble members, bolt configurations and load cases, wire them into
connections, and check each bolted joint against bolt shear, block shear
and bearing (bolt tension reported alongside). Units are kip, in and ksi.

Example usage:
    from boltcheck import (
        BoltConfiguration, ConnectionEvaluator, EntityStore, GlobalLoads, Member,
    )

    store = EntityStore()

    # 1. Members, bolt pattern and load case
    beam = store.add_member(Member.steel_section("W21X83", role="BEAM"))
    plate = store.add_member(Member.plate(thickness=0.5))
    bolts = store.add_bolt_configuration(
        BoltConfiguration(n_rows=2, n_columns=7, bolt_diameter=0.875, bolt_grade="A325-X")
    )
    loads = store.add_global_loads(GlobalLoads(direct_load=150.0))

    # 2. Connection (references must exist now)
    conn = store.add_connection(beam, plate, bolts, loads, component_a="WEB")

    # 3. Evaluate
    result = ConnectionEvaluator(store).evaluate(conn)
    print(f"{result.verdict}: {result.utilization_ratio:.1%} ({result.governing_limit_state})")
"""

import logging

from .capacity import (
    BlockShearAreas,
    bearing_capacity,
    block_shear_areas,
    block_shear_capacity,
    bolt_area,
    bolt_shear_capacity,
    bolt_tensile_capacity,
)
from .common import (
    DEFAULT_SETTINGS,
    BoltcheckError,
    ConnectionNotFound,
    DesignSettings,
    EvaluationError,
    InvalidInput,
    MissingBoltConfiguration,
    MissingGlobalLoads,
    MissingMemberA,
    MissingMemberB,
    MissingReference,
    UnknownSection,
    UnresolvedBoltConfiguration,
    UnresolvedGlobalLoads,
    ValidationError,
    parse_float,
    parse_int,
)
from .demand import resultant_demand
from .evaluation import ConnectionEvaluator, EvaluationResult, PlyCapacity, evaluate
from .model import (
    BoltConfiguration,
    Connection,
    EntityStore,
    GlobalLoads,
    Member,
    PlateShape,
    SteelSection,
    sequential_ids,
    uuid_ids,
)
from .plotting import plot_bolt_configuration, plot_capacity_summary

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Entities
    "Member",
    "SteelSection",
    "PlateShape",
    "BoltConfiguration",
    "GlobalLoads",
    "Connection",
    "EntityStore",
    "sequential_ids",
    "uuid_ids",
    # Capacity and demand
    "bolt_area",
    "bolt_shear_capacity",
    "bolt_tensile_capacity",
    "block_shear_capacity",
    "block_shear_areas",
    "BlockShearAreas",
    "bearing_capacity",
    "resultant_demand",
    # Evaluation
    "ConnectionEvaluator",
    "EvaluationResult",
    "PlyCapacity",
    "evaluate",
    # Settings and parsing
    "DesignSettings",
    "DEFAULT_SETTINGS",
    "parse_float",
    "parse_int",
    # Errors
    "BoltcheckError",
    "ValidationError",
    "MissingReference",
    "MissingMemberA",
    "MissingMemberB",
    "MissingBoltConfiguration",
    "MissingGlobalLoads",
    "InvalidInput",
    "EvaluationError",
    "ConnectionNotFound",
    "UnresolvedBoltConfiguration",
    "UnresolvedGlobalLoads",
    "UnknownSection",
    # Plotting
    "plot_bolt_configuration",
    "plot_capacity_summary",
]

__version__ = "0.1.0"
