"""
Common infrastructure shared by the model, capacity and evaluation layers.

Includes the error taxonomy, form-input parsing and design settings.
"""

from .errors import (
    BoltcheckError,
    ConnectionNotFound,
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
)
from .parsing import as_number, parse_float, parse_int
from .settings import DEFAULT_SETTINGS, DemandFormula, DesignSettings

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
    "parse_float",
    "parse_int",
    "as_number",
    "DemandFormula",
    "DesignSettings",
    "DEFAULT_SETTINGS",
]
