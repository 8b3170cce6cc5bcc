# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for hover-packaging.

Commands:

    init-packaging: Create configuration files for a packaging format
    build: Build a package for an initialized packaging format

Example:
    Scaffold snap packaging:
        ```bash
        $ hover-packaging init-packaging linux-snap
        ```

    Build the deb package of a project in another directory:
        ```bash
        $ hover-packaging --project-dir ~/src/myapp build linux-deb
        ```

    Enable verbose output:
        ```bash
        $ hover-packaging build linux-snap --verbose
        ```

Exit Codes:

- 0: Success
- 1: Error (configuration, platform, missing tool, or packaging failure)

Note:
    This is the only place that prints errors and decides the exit status.
    Every HoverError is reported as a single "hover: <message>" line on
    stderr. Verbose mode also prints the traceback.

"""

from __future__ import annotations

import argparse
from importlib.metadata import version
from pathlib import Path
import sys
import traceback

from hoverpkg.core import build_project_package, init_project_packaging
from hoverpkg.exceptions import HoverError
from hoverpkg.logging import PREFIX, get_logger, set_global_logger
from hoverpkg.packaging import PACKAGING_FORMATS


def _report_error(err: HoverError, args: argparse.Namespace) -> int:
    print(f"{PREFIX}: {err}", file=sys.stderr)
    if args.verbose or args.debug:
        traceback.print_exc()
    return 1


def cmd_init_packaging(args: argparse.Namespace) -> int:
    """Handler for 'init-packaging' command.

    Scaffolds go/packaging/<format>/ with the configuration files for the
    selected format, filled in from pubspec.yaml.

    Args:
        args: Parsed command-line arguments containing
            project directory, packaging format and flags.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        result = init_project_packaging(Path(args.project_dir), args.format)
    except HoverError as err:
        return _report_error(err, args)

    for file_path in result.files:
        logger.verbose("INIT", f"Created {file_path}")

    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handler for 'build' command.

    Stages the compiled app, runs the native packager for the selected
    format and moves the package to go/build/outputs/<format>/.

    Args:
        args: Parsed command-line arguments containing
            project directory, packaging format and flags.

    Returns:
        Exit code (0 for success, 1 for failure).

    Note:
        The native packager runs in the foreground and may prompt for input.
    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    try:
        result = build_project_package(Path(args.project_dir), args.format)
    except HoverError as err:
        return _report_error(err, args)

    logger.info(f"Successfully packaged {result.packaging_format}: {result.package_path}")
    return 0


def _add_common_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "format",
        choices=PACKAGING_FORMATS,
        help="Packaging format",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the hover-packaging CLI."""
    parser = argparse.ArgumentParser(
        prog="hover-packaging",
        description="Create snap and deb packages for hover desktop apps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"hover-packaging {version('hover-packaging')}",
    )
    parser.add_argument(
        "--project-dir",
        default=".",
        help="Directory containing pubspec.yaml (default: current directory)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'init-packaging' command
    parser_init = subparsers.add_parser(
        "init-packaging",
        help="Create configuration files for a packaging format",
        description="Create go/packaging/<format> with editable configuration files.",
    )
    _add_common_flags(parser_init)
    parser_init.set_defaults(func=cmd_init_packaging)

    # 'build' command
    parser_build = subparsers.add_parser(
        "build",
        help="Build a package for an initialized packaging format",
        description="Stage the compiled app and run the native packager.",
    )
    _add_common_flags(parser_build)
    parser_build.set_defaults(func=cmd_build)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the hover-packaging CLI.

    This function is registered as the 'hover-packaging' console script in
    pyproject.toml.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
