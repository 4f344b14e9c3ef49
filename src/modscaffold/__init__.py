"""Scaffold two-module ``app``/``lib`` project skeletons.

The package turns package name segments into nested source directories, plans
the four targets of an ``app`` module depending on a ``lib`` module, and
creates them in normal, what-if or confirm-per-step mode. Everything is usable
programmatically and through the ``modscaffold`` command line interface.
"""

from __future__ import annotations

from .config import ScaffoldConfig
from .echo import echo_message
from .errors import InvalidSegment, IOFailure, ScaffoldError, UnknownOption
from .executor import ScaffoldExecutor, execute
from .io.schema import ActionOutcome, ActionStatus, ExecutionResult, SkipReason
from .naming import join_segments, split_path, validate_segment
from .scaffold import ActionKind, ScaffoldAction, ScaffoldPlan, ScaffoldPlanner, plan

__all__ = [
    "ActionKind",
    "ActionOutcome",
    "ActionStatus",
    "ExecutionResult",
    "IOFailure",
    "InvalidSegment",
    "ScaffoldAction",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldExecutor",
    "ScaffoldPlan",
    "ScaffoldPlanner",
    "SkipReason",
    "UnknownOption",
    "echo_message",
    "execute",
    "join_segments",
    "plan",
    "split_path",
    "validate_segment",
]

__version__ = "0.1.0"
