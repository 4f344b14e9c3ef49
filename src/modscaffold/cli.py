"""Command line interface for the module scaffolder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import (
    DEFAULT_APP_FILE_NAME,
    DEFAULT_APP_PACKAGE,
    DEFAULT_BASE_PACKAGE,
    DEFAULT_LIB_FILE_NAME,
    DEFAULT_LIB_PACKAGE,
    ScaffoldConfig,
)
from .errors import InvalidSegment, IOFailure, UnknownOption
from .executor import ScaffoldExecutor
from .scaffold import plan

EPILOG = f"""\
examples:
  modscaffold
      creates app/src/main/scala/{'/'.join(DEFAULT_BASE_PACKAGE)}/app/{DEFAULT_APP_FILE_NAME}
          and lib/src/main/scala/{'/'.join(DEFAULT_BASE_PACKAGE)}/lib/{DEFAULT_LIB_FILE_NAME}

  modscaffold --what-if --verbose
      prints the planned structure without creating anything

  modscaffold --base-package org example --app-file-name Main.scala
      uses a custom base package and names the app file Main.scala

Directories are created with all missing parents; existing directories are
left alone and existing files are truncated.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="modscaffold",
        allow_abbrev=False,
        description="Scaffold a modular project with `app` and `lib` components.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--confirm",
        action="store_true",
        help="Ask for confirmation before each directory or file is created",
    )
    parser.add_argument(
        "--what-if",
        action="store_true",
        help="Display the actions that would be taken without executing them",
    )
    parser.add_argument("--verbose", action="store_true", help="Describe every action")
    parser.add_argument(
        "--base-package",
        nargs="+",
        metavar="PART",
        default=list(DEFAULT_BASE_PACKAGE),
        help="Base namespace shared by app and lib (default: %(default)s)",
    )
    parser.add_argument(
        "--app-package",
        nargs="+",
        metavar="PART",
        default=list(DEFAULT_APP_PACKAGE),
        help="Subpackage path for the app module (default: %(default)s)",
    )
    parser.add_argument(
        "--lib-package",
        nargs="+",
        metavar="PART",
        default=list(DEFAULT_LIB_PACKAGE),
        help="Subpackage path for the lib module (default: %(default)s)",
    )
    parser.add_argument(
        "--app-file-name",
        default=DEFAULT_APP_FILE_NAME,
        help="File name for the app module (default: %(default)s)",
    )
    parser.add_argument(
        "--lib-file-name",
        default=DEFAULT_LIB_FILE_NAME,
        help="File name for the lib module (default: %(default)s)",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the modules are created (default: current directory)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the outcome of every action as JSON",
    )
    return parser


def parse_args(parser: argparse.ArgumentParser, argv: Sequence[str] | None) -> argparse.Namespace:
    args, unknown = parser.parse_known_args(argv)
    if unknown:
        raise UnknownOption(unknown)
    return args


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _handle_scaffold(args: argparse.Namespace) -> int:
    config = ScaffoldConfig.from_options(
        base_package=args.base_package,
        app_package=args.app_package,
        lib_package=args.lib_package,
        app_file_name=args.app_file_name,
        lib_file_name=args.lib_file_name,
        confirm=args.confirm,
        what_if=args.what_if,
        verbose=args.verbose,
    )
    scaffold_plan = plan(config)
    # keep stdout a single JSON document when --json is set
    notices = sys.stderr if args.json else sys.stdout
    if config.verbose:
        print(f"App: {scaffold_plan.app_file}", file=notices)
        print(f"Lib: {scaffold_plan.lib_file}", file=notices)

    executor = ScaffoldExecutor(root=args.directory, out=notices)
    result = executor.execute(scaffold_plan, config)
    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
    else:
        print(result.summary())
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parse_args(parser, argv)
    except UnknownOption as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2

    _configure_logging(args.verbose)
    try:
        return _handle_scaffold(args)
    except InvalidSegment as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 2
    except IOFailure as exc:
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        if args.json and exc.result is not None:
            print(json.dumps(exc.result.model_dump(mode="json"), indent=2))
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
