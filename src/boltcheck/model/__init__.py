"""Entity model: members, bolt configurations, load cases, connections and their store."""

from .bolts import BoltConfiguration
from .connection import Connection
from .loads import GlobalLoads
from .members import COMPONENTS, Member, PlateShape, SteelSection
from .store import KINDS, EntityStore, sequential_ids, uuid_ids

__all__ = [
    "Member",
    "SteelSection",
    "PlateShape",
    "COMPONENTS",
    "BoltConfiguration",
    "GlobalLoads",
    "Connection",
    "EntityStore",
    "KINDS",
    "sequential_ids",
    "uuid_ids",
]
