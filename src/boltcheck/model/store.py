"""In-memory entity store.

The store owns the four collections (members, bolt configurations, load
cases and connections), hands out identifiers and checks references when a
connection is created. It never cascades: removing a member leaves existing
connections alone, and removing a bolt configuration or load case only
surfaces later, when a connection that still points at it is evaluated.
"""

from __future__ import annotations

from dataclasses import replace
import itertools
import logging
import threading
import uuid
from typing import Callable, Iterator, Literal, Union

from ..common.errors import (
    MissingBoltConfiguration,
    MissingGlobalLoads,
    MissingMemberA,
    MissingMemberB,
)
from .bolts import BoltConfiguration
from .connection import Connection
from .loads import GlobalLoads
from .members import Component, Member

logger = logging.getLogger(__name__)

EntityKind = Literal["member", "bolt-configuration", "global-loads", "connection"]
Entity = Union[Member, BoltConfiguration, GlobalLoads, Connection]
IdGenerator = Callable[[str, int], str]

KINDS: tuple[str, ...] = ("member", "bolt-configuration", "global-loads", "connection")

_PREFIXES = {
    "member": "member",
    "bolt-configuration": "bolt-config",
    "global-loads": "global-loads",
    "connection": "connection",
}

_KIND_OF_TYPE = {
    Member: "member",
    BoltConfiguration: "bolt-configuration",
    GlobalLoads: "global-loads",
    Connection: "connection",
}


def sequential_ids(kind: str, sequence: int) -> str:
    """``member-1``, ``bolt-config-2``, ..."""
    return f"{_PREFIXES[kind]}-{sequence}"


def uuid_ids(kind: str, sequence: int) -> str:
    return f"{_PREFIXES[kind]}-{uuid.uuid4().hex[:12]}"


class EntityStore:
    """Holds every entity by identifier, in insertion order per kind."""

    def __init__(self, id_generator: IdGenerator = sequential_ids) -> None:
        self._id_generator = id_generator
        self._collections: dict[str, dict[str, Entity]] = {kind: {} for kind in KINDS}
        self._sequences: dict[str, Iterator[int]] = {kind: itertools.count(1) for kind in KINDS}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Lock serialising every mutation and lookup on this store."""
        return self._lock

    # === Adding ===

    def add(self, entity: Entity) -> str:
        """Store ``entity`` under a fresh identifier and return it.

        The stored record is a copy carrying the identifier (and a default
        name when the entity has none); the argument is left untouched.
        A connection must reference records this store still holds; its
        member snapshots are replaced by the stored members.
        """
        kind = _KIND_OF_TYPE.get(type(entity))
        if kind is None:
            raise TypeError(f"Cannot store object of type {type(entity).__name__}")

        with self._lock:
            if kind == "connection":
                member_a, member_b = self._check_references(
                    entity.member_a.id,
                    entity.member_b.id,
                    entity.bolt_configuration_id,
                    entity.global_loads_id,
                )
                entity = replace(entity, member_a=member_a, member_b=member_b)
            sequence = next(self._sequences[kind])
            entity_id = self._id_generator(kind, sequence)
            name = entity.name or entity.default_name(sequence)
            stored = replace(entity, id=entity_id, name=name)
            self._collections[kind][entity_id] = stored

        logger.debug("Added %s %s (%s)", kind, entity_id, name)
        return entity_id

    def add_member(self, member: Member) -> str:
        return self.add(member)

    def add_bolt_configuration(self, config: BoltConfiguration) -> str:
        return self.add(config)

    def add_global_loads(self, loads: GlobalLoads) -> str:
        return self.add(loads)

    def create_connection(
        self,
        member_a_id: str,
        member_b_id: str,
        bolt_configuration_id: str,
        global_loads_id: str,
        *,
        name: str | None = None,
        component_a: Component = "TOTAL",
        component_b: Component = "TOTAL",
        connection_type: str = "bolted",
        override_ag: float | None = None,
    ) -> Connection:
        """Create and store a connection, returning the stored record.

        Every reference must resolve now; nothing is stored otherwise.
        """
        with self._lock:
            member_a, member_b = self._check_references(
                member_a_id, member_b_id, bolt_configuration_id, global_loads_id
            )
            # Members are frozen, so holding the stored instance is a snapshot.
            connection = Connection(
                member_a=member_a,
                member_b=member_b,
                bolt_configuration_id=bolt_configuration_id,
                global_loads_id=global_loads_id,
                component_a=component_a,
                component_b=component_b,
                connection_type=connection_type,
                override_ag=override_ag,
                name=(name or "").strip(),
            )
            connection_id = self.add(connection)
            stored = self._collections["connection"][connection_id]

        logger.info(
            "Created %s: %s -> %s, bolts=%s, loads=%s",
            connection_id,
            member_a.id,
            member_b.id,
            bolt_configuration_id,
            global_loads_id,
        )
        return stored

    def add_connection(self, member_a_id: str, member_b_id: str, bolt_configuration_id: str,
                       global_loads_id: str, **kwargs) -> str:
        return self.create_connection(
            member_a_id, member_b_id, bolt_configuration_id, global_loads_id, **kwargs
        ).id

    def _check_references(
        self,
        member_a_id: str | None,
        member_b_id: str | None,
        bolt_configuration_id: str,
        global_loads_id: str,
    ) -> tuple[Member, Member]:
        member_a = self.get_member(member_a_id) if member_a_id is not None else None
        if member_a is None:
            raise MissingMemberA(member_a_id)
        member_b = self.get_member(member_b_id) if member_b_id is not None else None
        if member_b is None:
            raise MissingMemberB(member_b_id)
        if self.get_bolt_configuration(bolt_configuration_id) is None:
            raise MissingBoltConfiguration(bolt_configuration_id)
        if self.get_global_loads(global_loads_id) is None:
            raise MissingGlobalLoads(global_loads_id)
        return member_a, member_b

    # === Removing ===

    def remove(self, kind: EntityKind, entity_id: str) -> None:
        """Delete a record if present; missing identifiers are ignored."""
        with self._lock:
            removed = self._collection(kind).pop(entity_id, None)
        if removed is not None:
            logger.debug("Removed %s %s", kind, entity_id)

    def remove_member(self, member_id: str) -> None:
        self.remove("member", member_id)

    def remove_bolt_configuration(self, config_id: str) -> None:
        self.remove("bolt-configuration", config_id)

    def remove_global_loads(self, loads_id: str) -> None:
        self.remove("global-loads", loads_id)

    def remove_connection(self, connection_id: str) -> None:
        self.remove("connection", connection_id)

    # === Lookup ===

    def get(self, kind: EntityKind, entity_id: str) -> Entity | None:
        with self._lock:
            return self._collection(kind).get(entity_id)

    def get_member(self, member_id: str) -> Member | None:
        return self.get("member", member_id)

    def get_bolt_configuration(self, config_id: str) -> BoltConfiguration | None:
        return self.get("bolt-configuration", config_id)

    def get_global_loads(self, loads_id: str) -> GlobalLoads | None:
        return self.get("global-loads", loads_id)

    def get_connection(self, connection_id: str) -> Connection | None:
        return self.get("connection", connection_id)

    @property
    def members(self) -> tuple[Member, ...]:
        return self._listing("member")

    @property
    def bolt_configurations(self) -> tuple[BoltConfiguration, ...]:
        return self._listing("bolt-configuration")

    @property
    def global_loads(self) -> tuple[GlobalLoads, ...]:
        return self._listing("global-loads")

    @property
    def connections(self) -> tuple[Connection, ...]:
        return self._listing("connection")

    def _listing(self, kind: str) -> tuple:
        with self._lock:
            return tuple(self._collections[kind].values())

    def _collection(self, kind: str) -> dict[str, Entity]:
        try:
            return self._collections[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind!r}; expected one of {KINDS}") from None


__all__ = [
    "EntityKind",
    "Entity",
    "IdGenerator",
    "KINDS",
    "sequential_ids",
    "uuid_ids",
    "EntityStore",
]
