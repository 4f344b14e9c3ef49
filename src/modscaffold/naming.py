"""Path segment helpers used to turn package names into directories."""

from __future__ import annotations

import os
import re
from typing import Iterable

from .errors import InvalidSegment

__all__ = ["join_segments", "split_path", "validate_segment"]


_RELATIVE_MARKERS = frozenset({".", ".."})
_SPLIT_PATTERN = re.compile("|".join(re.escape(sep) for sep in {"/", os.sep}))


def _separators() -> set[str]:
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return separators


def validate_segment(segment: object) -> str:
    """Return ``segment`` unchanged if it can be used as a single path component.

    Raises
    ------
    InvalidSegment
        When the value is not a string, is blank, is a relative marker such as
        ``..`` or contains a path separator or NUL character.
    """

    if not isinstance(segment, str):
        raise InvalidSegment(segment, "segments must be strings")
    if not segment.strip():
        raise InvalidSegment(segment, "segments must not be empty")
    if segment in _RELATIVE_MARKERS:
        raise InvalidSegment(segment, "relative markers are not package names")
    if "\0" in segment:
        raise InvalidSegment(segment, "segments must not contain NUL characters")
    for separator in _separators():
        if separator in segment:
            raise InvalidSegment(segment, f"segments must not contain {separator!r}")
    return segment


def join_segments(segments: Iterable[str]) -> str:
    """Join ``segments`` with the platform path separator, preserving order.

    >>> join_segments(["src", "main", "app"]).split(os.sep)
    ['src', 'main', 'app']
    """

    parts = [validate_segment(segment) for segment in segments]
    if not parts:
        raise InvalidSegment((), "at least one segment is required")
    return os.sep.join(parts)


def split_path(path: str | os.PathLike[str]) -> tuple[str, ...]:
    """Split ``path`` back into the segments :func:`join_segments` received."""

    text = os.fspath(path)
    return tuple(part for part in _SPLIT_PATTERN.split(text) if part)
