"""Perform, simulate or confirm the actions of a :class:`ScaffoldPlan`."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .config import ScaffoldConfig
from .errors import IOFailure
from .io.adapters.console import ConsoleConfirmer
from .io.interfaces import Confirmer
from .io.schema import ActionOutcome, ActionStatus, ExecutionResult, SkipReason
from .scaffold import ActionKind, ScaffoldAction, ScaffoldPlan

__all__ = ["ScaffoldExecutor", "execute"]


LOGGER = logging.getLogger(__name__)


class ScaffoldExecutor:
    """Run the four scaffold actions in order, gated by the config's mode flags.

    For every action the executor first describes it when ``verbose`` is set,
    then either reports it (``what_if``), asks the confirmer (``confirm``) or
    performs it. Declined and simulated actions are recorded as skipped and the
    sequence continues; the first filesystem error aborts the run with
    :class:`~modscaffold.errors.IOFailure`.
    """

    def __init__(
        self,
        confirmer: Confirmer | None = None,
        *,
        root: str | Path | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._out = out
        self.confirmer = confirmer or ConsoleConfirmer(stream=out)
        self.root = Path.cwd() if root is None else Path(root)

    def _emit(self, line: str) -> None:
        stream = self._out or sys.stdout
        stream.write(f"{line}\n")

    def execute(self, plan: ScaffoldPlan, config: ScaffoldConfig) -> ExecutionResult:
        outcomes: list[ActionOutcome] = []
        for action in plan.actions():
            try:
                outcome = self._run(action, config)
            except OSError as exc:
                path = self.root / action.target
                outcomes.append(
                    _outcome(action, ActionStatus.FAILED, error=exc.strerror or str(exc))
                )
                LOGGER.debug("failed to create %s %s: %s", action.label, path, exc)
                raise IOFailure(action, path, exc, ExecutionResult(outcomes=outcomes)) from exc
            outcomes.append(outcome)
        return ExecutionResult(outcomes=outcomes)

    def _run(self, action: ScaffoldAction, config: ScaffoldConfig) -> ActionOutcome:
        if config.verbose:
            self._emit(f"Creating {action.label}: {action.target}")

        if config.what_if:
            self._emit(f"WhatIf: create {action.label} '{action.target}'")
            LOGGER.debug("simulated %s %s", action.label, action.target)
            return _outcome(action, ActionStatus.SKIPPED, reason=SkipReason.SIMULATED)

        if config.confirm:
            question = f"Create {action.label} '{action.target}'? [y/N]"
            if not self.confirmer.confirm(question):
                LOGGER.debug("declined %s %s", action.label, action.target)
                return _outcome(action, ActionStatus.SKIPPED, reason=SkipReason.DECLINED)

        path = self.root / action.target
        if action.kind is ActionKind.CREATE_DIRECTORY:
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.write_text("", encoding="utf-8")
        LOGGER.debug("created %s %s", action.label, path)
        return _outcome(action, ActionStatus.CREATED)


def _outcome(
    action: ScaffoldAction,
    status: ActionStatus,
    *,
    reason: SkipReason | None = None,
    error: str | None = None,
) -> ActionOutcome:
    return ActionOutcome(
        kind=action.kind,
        label=action.label,
        target=action.target.as_posix(),
        status=status,
        reason=reason,
        error=error,
    )


def execute(
    plan: ScaffoldPlan,
    config: ScaffoldConfig,
    *,
    confirmer: Confirmer | None = None,
    root: str | Path | None = None,
) -> ExecutionResult:
    """Convenience wrapper around :meth:`ScaffoldExecutor.execute`."""

    return ScaffoldExecutor(confirmer, root=root).execute(plan, config)
