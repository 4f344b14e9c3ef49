"""Concrete confirmer implementations."""

from .console import ConsoleConfirmer, ScriptedConfirmer, is_affirmative

__all__ = [
    "ConsoleConfirmer",
    "ScriptedConfirmer",
    "is_affirmative",
]
