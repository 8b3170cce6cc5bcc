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

"""Filesystem helpers for scaffolding packaging configuration trees.

Private to the packaging recipes. Each helper performs one filesystem
operation and converts OSError into PackagingError with a message naming
what was being created. Nothing is rolled back on failure: directories
created before an error stay on disk.

Design Principles:
    - A format directory is never scaffolded twice (user edits are kept)
    - Directories are created group-writable (0o775)
    - Files are written line by line, each line terminated by "\\n"
"""

from __future__ import annotations

from collections.abc import Iterable
import os
from pathlib import Path

from hoverpkg.config import HoverPaths
from hoverpkg.exceptions import PackagingError
from hoverpkg.logging import get_global_logger

from .formats import format_os, packaging_format_path

DIRECTORY_MODE = 0o775
EXECUTABLE_MODE = 0o777


def create_packaging_format_directory(paths: HoverPaths, packaging_format: str) -> Path:
    """Create the root of a format's configuration tree.

    Args:
        paths: Project locations.
        packaging_format: Format identifier.

    Returns:
        The created directory.

    Raises:
        PackagingError: If a file or directory already exists at that path,
            or if it cannot be created.
    """
    logger = get_global_logger()
    directory = packaging_format_path(paths, packaging_format)

    if os.path.lexists(directory):
        raise PackagingError(
            f"A file or directory named `{packaging_format}` already exists. "
            f"Cannot continue packaging init for {packaging_format}."
        )

    make_directory(directory, f"{packaging_format} directory")
    logger.verbose("INIT", f"Created {directory}")
    return directory


def make_directory(directory: Path, description: str) -> Path:
    """Create a directory (and missing parents) with DIRECTORY_MODE."""
    try:
        directory.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as err:
        raise PackagingError(
            f"Failed to create {description} {directory}: {err}"
        ) from err
    return directory


def write_lines(file_path: Path, lines: Iterable[str], description: str) -> Path:
    """Write lines to a new file, terminating each with a newline.

    Args:
        file_path: File to create (truncated if it exists).
        lines: Lines without terminators.
        description: Human-readable name used in error messages.

    Returns:
        The written file.

    Raises:
        PackagingError: If the file cannot be created, written or closed.
    """
    logger = get_global_logger()

    try:
        handle = file_path.open("w", encoding="utf-8", newline="\n")
    except OSError as err:
        raise PackagingError(
            f"Failed to create {description} {file_path}: {err}"
        ) from err

    try:
        with handle:
            for line in lines:
                handle.write(f"{line}\n")
    except OSError as err:
        raise PackagingError(f"Could not write {description}: {err}") from err

    logger.debug("INIT", f"Wrote {file_path}")
    return file_path


def make_executable(file_path: Path, description: str) -> None:
    """Give a scaffolded script execute permission for everyone."""
    try:
        file_path.chmod(EXECUTABLE_MODE)
    except OSError as err:
        raise PackagingError(
            f"Failed to change file permissions for {description}: {err}"
        ) from err


def announce_init_finished(packaging_format: str) -> None:
    """Tell the user where the configuration went and how to build it."""
    logger = get_global_logger()
    logger.info(
        f"go/packaging/{packaging_format} has been created. "
        "You can modify the configuration files and add it to git."
    )
    logger.info(
        f"You now can package the {format_os(packaging_format)} using "
        f"`hover build {packaging_format}`"
    )
