"""User interaction interfaces and result schemas."""

from .schema import (
    ActionOutcome,
    ActionStatus,
    ExecutionResult,
    SkipReason,
)
from .interfaces import Confirmer

__all__ = [
    "ActionOutcome",
    "ActionStatus",
    "ExecutionResult",
    "SkipReason",
    "Confirmer",
]
