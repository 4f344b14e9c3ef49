"""Result schemas reported by the scaffold executor."""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..scaffold import ActionKind


class ActionStatus(str, Enum):
    """Outcome of a single scaffold action."""

    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


class SkipReason(str, Enum):
    """Why an action was skipped instead of performed."""

    SIMULATED = "simulated"
    DECLINED = "declined"


class ActionOutcome(BaseModel):
    """What happened to one directory or file of the plan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ActionKind = Field(..., description="Kind of filesystem operation.")
    label: str = Field(..., description="Human-readable name of the action target.")
    target: str = Field(..., description="Path the action was aimed at.")
    status: ActionStatus = Field(..., description="Whether the target was created, skipped or failed.")
    reason: SkipReason | None = Field(None, description="Why the action was skipped, if it was.")
    error: str | None = Field(None, description="Error message for failed actions.")


class ExecutionResult(BaseModel):
    """Ordered outcomes for every action attempted during a run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    outcomes: List[ActionOutcome] = Field(default_factory=list, description="Outcomes in execution order.")

    def _with_status(self, status: ActionStatus) -> list[ActionOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status is status]

    @property
    def created(self) -> list[ActionOutcome]:
        return self._with_status(ActionStatus.CREATED)

    @property
    def skipped(self) -> list[ActionOutcome]:
        return self._with_status(ActionStatus.SKIPPED)

    @property
    def failed(self) -> list[ActionOutcome]:
        return self._with_status(ActionStatus.FAILED)

    @property
    def ok(self) -> bool:
        """``True`` when no action failed."""

        return not self.failed

    def summary(self) -> str:
        """Return a one-line description such as ``created 4, skipped 0``."""

        text = f"created {len(self.created)}, skipped {len(self.skipped)}"
        if self.failed:
            text += f", failed {len(self.failed)}"
        return text


__all__ = [
    "ActionOutcome",
    "ActionStatus",
    "ExecutionResult",
    "SkipReason",
]
