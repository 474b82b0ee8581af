"""
Connection evaluation.

Resolves a connection's bolt configuration and load case from the store,
computes the limit-state capacities and the applied demand, and reports the
governing capacity, utilization ratio and SAFE/UNSAFE verdict.
"""

from __future__ import annotations

import logging
import math
from typing import Literal

from ..capacity import (
    bearing_capacity,
    block_shear_areas,
    block_shear_capacity,
    bolt_shear_capacity,
    bolt_tensile_capacity,
)
from ..common.errors import ConnectionNotFound, UnresolvedBoltConfiguration, UnresolvedGlobalLoads
from ..common.settings import DEFAULT_SETTINGS, DesignSettings
from ..demand import resultant_demand
from ..model.bolts import BoltConfiguration
from ..model.connection import Connection
from ..model.loads import GlobalLoads
from ..model.members import Component, Member
from ..model.store import EntityStore
from .models import LIMIT_STATES, EvaluationResult, EvaluationStatus, PlyCapacity

logger = logging.getLogger(__name__)


class ConnectionEvaluator:
    """Evaluates connections held by an :class:`EntityStore`.

    The latest successful result per connection is kept, so a caller can
    ask whether a connection has been evaluated yet. Results for connections
    that have since been removed from the store are dropped.
    """

    def __init__(self, store: EntityStore, settings: DesignSettings = DEFAULT_SETTINGS) -> None:
        self.store = store
        self.settings = settings
        self._results: dict[str, EvaluationResult] = {}

    def evaluate(self, connection_id: str) -> EvaluationResult:
        with self.store.lock:
            self._prune()
            connection = self.store.get_connection(connection_id)
            if connection is None:
                raise ConnectionNotFound(connection_id)
            config = self.store.get_bolt_configuration(connection.bolt_configuration_id)
            if config is None:
                raise UnresolvedBoltConfiguration(connection_id, connection.bolt_configuration_id)
            loads = self.store.get_global_loads(connection.global_loads_id)
            if loads is None:
                raise UnresolvedGlobalLoads(connection_id, connection.global_loads_id)

        result = evaluate_connection(connection, config, loads, self.settings)

        with self.store.lock:
            self._results[connection_id] = result
        logger.info(
            "Evaluated %s: demand=%.2f kip, governing %s=%.2f kip, ratio=%.3f, %s",
            connection_id,
            result.demand,
            result.governing_limit_state,
            result.governing_capacity,
            result.utilization_ratio,
            result.verdict,
        )
        return result

    def status(self, connection_id: str) -> EvaluationStatus:
        return "EVALUATED" if self.last_result(connection_id) is not None else "UNEVALUATED"

    def last_result(self, connection_id: str) -> EvaluationResult | None:
        with self.store.lock:
            self._prune()
            return self._results.get(connection_id)

    def _prune(self) -> None:
        stale = [cid for cid in self._results if self.store.get_connection(cid) is None]
        for cid in stale:
            del self._results[cid]


def evaluate(
    store: EntityStore,
    connection_id: str,
    settings: DesignSettings | None = None,
) -> EvaluationResult:
    """Evaluate one connection without keeping an evaluator around."""
    return ConnectionEvaluator(store, settings or DEFAULT_SETTINGS).evaluate(connection_id)


def evaluate_connection(
    connection: Connection,
    config: BoltConfiguration,
    loads: GlobalLoads,
    settings: DesignSettings = DEFAULT_SETTINGS,
) -> EvaluationResult:
    """Evaluate already-resolved records."""
    n_bolts = config.n_bolts
    area = config.bolt_area

    shear_cap = bolt_shear_capacity(
        n_bolts,
        config.bolt_diameter,
        settings.bolt_fu,
        settings.bolt_safety_factor,
        fallback_diameter=settings.default_bolt_diameter,
    )
    tension_cap = bolt_tensile_capacity(
        n_bolts, area, settings.bolt_fu, settings.bolt_safety_factor
    )

    ply_a = _ply_capacity("A", connection.member_a, connection.component_a, config, connection, settings)
    ply_b = _ply_capacity("B", connection.member_b, connection.component_b, config, connection, settings)
    block_cap = min(ply_a.block_shear_capacity, ply_b.block_shear_capacity)
    bearing_cap = min(ply_a.bearing_capacity, ply_b.bearing_capacity)

    demand = resultant_demand(
        loads.Fx,
        loads.Fy,
        loads.Fz,
        loads.Mx,
        loads.My,
        loads.Mz,
        loads.direct_load,
        effective_eccentricity=settings.effective_eccentricity,
        formula=settings.demand_formula,
    )

    # min() keeps the first of equal values, so LIMIT_STATES order breaks ties.
    capacities = dict(zip(LIMIT_STATES, (shear_cap, block_cap, bearing_cap)))
    governing_state = min(LIMIT_STATES, key=lambda state: capacities[state])
    governing_cap = capacities[governing_state]

    if governing_cap <= 0.0:
        logger.warning(
            "Connection %s has non-positive governing capacity (%s=%.3f); reported UNSAFE",
            connection.id,
            governing_state,
            governing_cap,
        )
        ratio = math.inf
    else:
        ratio = demand / governing_cap

    return EvaluationResult(
        connection=connection,
        bolt_configuration=config,
        global_loads=loads,
        n_bolts=n_bolts,
        bolt_area=area,
        bolt_shear_capacity=shear_cap,
        bolt_tensile_capacity=tension_cap,
        block_shear_capacity=block_cap,
        bearing_capacity=bearing_cap,
        demand=demand,
        governing_capacity=governing_cap,
        governing_limit_state=governing_state,
        utilization_ratio=ratio,
        verdict="SAFE" if ratio <= 1.0 else "UNSAFE",
        ply_a=ply_a,
        ply_b=ply_b,
        settings=settings,
    )


def _ply_capacity(
    side: Literal["A", "B"],
    member: Member,
    component: Component,
    config: BoltConfiguration,
    connection: Connection,
    settings: DesignSettings,
) -> PlyCapacity:
    thickness = member.ply_thickness(component)
    grade = member.grade
    areas = block_shear_areas(
        config,
        thickness=thickness,
        hole_diameter=config.hole_diameter(settings.hole_allowance),
        override_agv=connection.override_ag,
    )
    return PlyCapacity(
        side=side,
        member_name=member.name,
        component=component,
        material=grade.name,
        thickness=thickness,
        fy=grade.fy,
        fu=grade.fu,
        bearing_capacity=bearing_capacity(
            config.bolt_diameter,
            thickness,
            grade.fu,
            settings.bearing_safety_factor,
            n_bolts=config.n_bolts,
        ),
        block_shear_capacity=block_shear_capacity(
            grade.fu, grade.fy, areas.anv, areas.ant, areas.agv, settings.ubs
        ),
        block_shear=areas,
    )


__all__ = ["ConnectionEvaluator", "evaluate", "evaluate_connection"]
