"""Configuration shared by the planner, executor and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidSegment
from .naming import validate_segment

__all__ = [
    "DEFAULT_APP_FILE_NAME",
    "DEFAULT_APP_PACKAGE",
    "DEFAULT_BASE_PACKAGE",
    "DEFAULT_LIB_FILE_NAME",
    "DEFAULT_LIB_PACKAGE",
    "PackagePath",
    "ScaffoldConfig",
]


PackagePath = tuple[str, ...]

DEFAULT_BASE_PACKAGE: PackagePath = ("com", "github", "username")
DEFAULT_APP_PACKAGE: PackagePath = ("app",)
DEFAULT_LIB_PACKAGE: PackagePath = ("lib",)
DEFAULT_APP_FILE_NAME = "App.scala"
DEFAULT_LIB_FILE_NAME = "Lib.scala"


def _package_path(segments: Iterable[str], field_name: str) -> PackagePath:
    if isinstance(segments, str):
        # a bare string would otherwise be split into characters
        segments = (segments,)
    package = tuple(validate_segment(segment) for segment in segments)
    if not package:
        raise InvalidSegment((), f"{field_name} needs at least one segment")
    return package


@dataclass(frozen=True, slots=True)
class ScaffoldConfig:
    """Inputs for a single scaffolding run.

    Attributes
    ----------
    base_package:
        Namespace shared by both modules, e.g. ``("com", "github", "username")``.
    app_package, lib_package:
        Subpackages appended below :attr:`base_package` for each module.
    app_file_name, lib_file_name:
        Names of the empty source files created inside each package directory.
    confirm:
        Ask before every action.
    what_if:
        Report the actions without touching the filesystem. Takes precedence
        over :attr:`confirm`.
    verbose:
        Describe every action before it is attempted.
    """

    base_package: PackagePath = DEFAULT_BASE_PACKAGE
    app_package: PackagePath = DEFAULT_APP_PACKAGE
    lib_package: PackagePath = DEFAULT_LIB_PACKAGE
    app_file_name: str = DEFAULT_APP_FILE_NAME
    lib_file_name: str = DEFAULT_LIB_FILE_NAME
    confirm: bool = False
    what_if: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_package", _package_path(self.base_package, "base package"))
        object.__setattr__(self, "app_package", _package_path(self.app_package, "app package"))
        object.__setattr__(self, "lib_package", _package_path(self.lib_package, "lib package"))
        object.__setattr__(self, "app_file_name", validate_segment(self.app_file_name))
        object.__setattr__(self, "lib_file_name", validate_segment(self.lib_file_name))
        object.__setattr__(self, "confirm", bool(self.confirm))
        object.__setattr__(self, "what_if", bool(self.what_if))
        object.__setattr__(self, "verbose", bool(self.verbose))

    @classmethod
    def from_options(
        cls,
        *,
        base_package: Iterable[str] | None = None,
        app_package: Iterable[str] | None = None,
        lib_package: Iterable[str] | None = None,
        app_file_name: str | None = None,
        lib_file_name: str | None = None,
        confirm: bool = False,
        what_if: bool = False,
        verbose: bool = False,
    ) -> "ScaffoldConfig":
        """Build a :class:`ScaffoldConfig`, falling back to defaults for ``None``.

        Raises :class:`~modscaffold.errors.InvalidSegment` for any package
        segment or file name that cannot be used as a path component.
        """

        return cls(
            base_package=DEFAULT_BASE_PACKAGE if base_package is None else base_package,
            app_package=DEFAULT_APP_PACKAGE if app_package is None else app_package,
            lib_package=DEFAULT_LIB_PACKAGE if lib_package is None else lib_package,
            app_file_name=DEFAULT_APP_FILE_NAME if app_file_name is None else app_file_name,
            lib_file_name=DEFAULT_LIB_FILE_NAME if lib_file_name is None else lib_file_name,
            confirm=confirm,
            what_if=what_if,
            verbose=verbose,
        )
