"""Exception types raised by boltcheck.

Two families are kept apart so a caller can tell "cannot evaluate" from
"evaluated and failed": validation errors come from the store when a
connection is created, evaluation errors come from the evaluator when a
reference no longer resolves. An UNSAFE verdict is never an exception.
"""

from __future__ import annotations


class BoltcheckError(Exception):
    """Base class for all boltcheck errors."""


class ValidationError(BoltcheckError, ValueError):
    """Input rejected before anything was stored."""


class MissingReference(ValidationError):
    """A connection referenced an entity the store does not hold."""

    label = "reference"

    def __init__(self, reference: str | None) -> None:
        self.reference = reference
        super().__init__(f"Missing {self.label}: {reference!r}")


class MissingMemberA(MissingReference):
    label = "member A"


class MissingMemberB(MissingReference):
    label = "member B"


class MissingBoltConfiguration(MissingReference):
    label = "bolt configuration"


class MissingGlobalLoads(MissingReference):
    label = "global loads"


class InvalidInput(ValidationError):
    """A raw form value could not be parsed (strict parsing only)."""

    def __init__(self, field: str | None, raw: object) -> None:
        self.field = field
        self.raw = raw
        name = field or "value"
        super().__init__(f"Invalid numeric input for {name}: {raw!r}")


class EvaluationError(BoltcheckError, LookupError):
    """A connection could not be evaluated."""


class ConnectionNotFound(EvaluationError):
    def __init__(self, connection_id: str) -> None:
        self.connection_id = connection_id
        super().__init__(f"Connection not found: {connection_id!r}")


class UnresolvedBoltConfiguration(EvaluationError):
    def __init__(self, connection_id: str, reference: str) -> None:
        self.connection_id = connection_id
        self.reference = reference
        super().__init__(
            f"Connection {connection_id!r} references removed bolt configuration {reference!r}"
        )


class UnresolvedGlobalLoads(EvaluationError):
    def __init__(self, connection_id: str, reference: str) -> None:
        self.connection_id = connection_id
        self.reference = reference
        super().__init__(
            f"Connection {connection_id!r} references removed global loads {reference!r}"
        )


class UnknownSection(EvaluationError):
    def __init__(self, section_name: str) -> None:
        self.section_name = section_name
        super().__init__(f"No dimensions catalogued for section {section_name!r}")


__all__ = [
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
]
