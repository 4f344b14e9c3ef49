"""Custom exception types raised by the scaffolding generator."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .io.schema import ExecutionResult
    from .scaffold import ScaffoldAction


class ScaffoldError(RuntimeError):
    """Base class for every error surfaced by :mod:`modscaffold`."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidSegment(ScaffoldError, ValueError):
    """Raised when a package segment or file name cannot be used as a path component."""

    def __init__(self, segment: object, reason: str) -> None:
        super().__init__(f"invalid segment {segment!r}: {reason}")
        self.segment = segment
        self.reason = reason


class UnknownOption(ScaffoldError):
    """Raised when the command line contains arguments the parser does not recognise."""

    def __init__(self, options: list[str]) -> None:
        super().__init__(f"unknown option: {' '.join(options)}")
        self.options = list(options)


class IOFailure(ScaffoldError):
    """Raised when creating a directory or file fails.

    ``result`` holds the outcomes recorded up to and including the failed
    action; the original :class:`OSError` is chained as ``__cause__``.
    """

    def __init__(
        self,
        action: ScaffoldAction,
        path: Path,
        error: OSError,
        result: ExecutionResult | None = None,
    ) -> None:
        detail = error.strerror or str(error)
        super().__init__(f"failed to create {action.label} '{path}': {detail}")
        self.action = action
        self.path = path
        self.error = error
        self.result = result


__all__ = ["IOFailure", "InvalidSegment", "ScaffoldError", "UnknownOption"]
