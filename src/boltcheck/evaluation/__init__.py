"""Connection evaluation against bolt shear, block shear and bearing."""

from __future__ import annotations

from .evaluator import ConnectionEvaluator, evaluate, evaluate_connection
from .models import LIMIT_STATES, EvaluationResult, PlyCapacity

__all__ = [
    "ConnectionEvaluator",
    "EvaluationResult",
    "PlyCapacity",
    "LIMIT_STATES",
    "evaluate",
    "evaluate_connection",
]
