"""Console and scripted :class:`Confirmer` implementations."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, TextIO

from ..interfaces import Confirmer

_AFFIRMATIVE = frozenset({"y", "Y"})


def is_affirmative(reply: str) -> bool:
    """Only a lone ``y`` or ``Y`` counts as yes; anything else declines."""

    return reply.strip() in _AFFIRMATIVE


class ConsoleConfirmer(Confirmer):
    """Prompt on a text stream and read the reply from the console."""

    def __init__(
        self,
        reader: Optional[Callable[[], str]] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self._reader = reader
        self._stream = stream

    def confirm(self, question: str) -> bool:
        stream = self._stream or sys.stdout
        stream.write(f"{question} ")
        stream.flush()
        try:
            reply = (self._reader or input)()
        except EOFError:
            # no more input behaves like an empty answer
            stream.write("\n")
            return False
        return is_affirmative(reply)


class ScriptedConfirmer(Confirmer):
    """Replay canned answers, recording each question that was asked."""

    def __init__(self, answers: Iterable[str | bool] = ()) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []

    def confirm(self, question: str) -> bool:
        self.questions.append(question)
        if not self._answers:
            return False
        answer = self._answers.pop(0)
        if isinstance(answer, bool):
            return answer
        return is_affirmative(answer)


__all__ = ["ConsoleConfirmer", "ScriptedConfirmer", "is_affirmative"]
