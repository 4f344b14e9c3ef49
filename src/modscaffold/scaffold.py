"""Compute the directories and files of an ``app``/``lib`` module skeleton."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from .config import PackagePath, ScaffoldConfig
from .naming import join_segments, validate_segment

__all__ = [
    "APP_MODULE",
    "LIB_MODULE",
    "SOURCE_ROOT",
    "ActionKind",
    "ScaffoldAction",
    "ScaffoldPlan",
    "ScaffoldPlanner",
    "plan",
]


SOURCE_ROOT: PackagePath = ("src", "main", "scala")
APP_MODULE = "app"
LIB_MODULE = "lib"


class ActionKind(str, Enum):
    """Filesystem operations the executor knows how to perform."""

    CREATE_DIRECTORY = "create_directory"
    CREATE_FILE = "create_file"


@dataclass(frozen=True, slots=True)
class ScaffoldAction:
    """A single directory or file to create."""

    kind: ActionKind
    target: Path
    label: str


@dataclass(frozen=True, slots=True)
class ScaffoldPlan:
    """Targets derived from a :class:`ScaffoldConfig`, relative to the project root."""

    app_dir: Path
    lib_dir: Path
    app_file: Path
    lib_file: Path

    def actions(self) -> Iterator[ScaffoldAction]:
        """Yield the four actions in execution order: directories first, then files."""

        yield ScaffoldAction(ActionKind.CREATE_DIRECTORY, self.app_dir, "app directory")
        yield ScaffoldAction(ActionKind.CREATE_DIRECTORY, self.lib_dir, "lib directory")
        yield ScaffoldAction(ActionKind.CREATE_FILE, self.app_file, "app file")
        yield ScaffoldAction(ActionKind.CREATE_FILE, self.lib_file, "lib file")


@dataclass(frozen=True, slots=True)
class ScaffoldPlanner:
    """Lay out module directories as ``<module>/<source root>/<base>/<package>``."""

    source_root: PackagePath = SOURCE_ROOT

    def plan(self, config: ScaffoldConfig) -> ScaffoldPlan:
        shared_prefix = join_segments((*self.source_root, *config.base_package))
        app_dir = Path(APP_MODULE, shared_prefix, join_segments(config.app_package))
        lib_dir = Path(LIB_MODULE, shared_prefix, join_segments(config.lib_package))
        return ScaffoldPlan(
            app_dir=app_dir,
            lib_dir=lib_dir,
            app_file=app_dir / validate_segment(config.app_file_name),
            lib_file=lib_dir / validate_segment(config.lib_file_name),
        )


def plan(config: ScaffoldConfig) -> ScaffoldPlan:
    """Plan ``config`` with the default source root."""

    return ScaffoldPlanner().plan(config)
