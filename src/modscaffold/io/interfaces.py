"""Abstract interfaces for user interaction during scaffolding."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Confirmer(ABC):
    """Source of yes/no answers for confirm mode."""

    @abstractmethod
    def confirm(self, question: str) -> bool:
        """Ask ``question`` and return ``True`` only for an affirmative answer."""


__all__ = ["Confirmer"]
