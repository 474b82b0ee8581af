"""Connection records.

A Connection joins two member snapshots under a bolt configuration and a
load case. The members are copied in when the connection is created; the
bolt configuration and load case are held by identifier only and are looked
up again at evaluation time.
"""

from __future__ import annotations

from dataclasses import dataclass

from .members import COMPONENTS, Component, Member


@dataclass(frozen=True)
class Connection:
    """Bolted joint between two members.

    Attributes:
        member_a: Snapshot of member A at creation time
        member_b: Snapshot of member B at creation time
        bolt_configuration_id: Weak reference into the store
        global_loads_id: Weak reference into the store
        component_a: Ply of member A the bolts pass through
        component_b: Ply of member B the bolts pass through
        override_ag: Gross shear area used for block shear instead of the pattern geometry (in²)
    """

    member_a: Member
    member_b: Member
    bolt_configuration_id: str
    global_loads_id: str
    component_a: Component = "TOTAL"
    component_b: Component = "TOTAL"
    connection_type: str = "bolted"
    override_ag: float | None = None
    name: str = ""
    id: str | None = None

    def __post_init__(self) -> None:
        if self.component_a not in COMPONENTS or self.component_b not in COMPONENTS:
            raise ValueError(f"Components must be one of {COMPONENTS}")
        if self.override_ag is not None and self.override_ag <= 0.0:
            raise ValueError("override_ag must be positive when given")

    def default_name(self, sequence: int) -> str:
        return f"Connection {sequence}"

    @property
    def label(self) -> str:
        return f"{self.name} ({self.member_a.name} → {self.member_b.name})"


__all__ = ["Connection"]
