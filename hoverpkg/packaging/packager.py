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

"""Native packager execution and artifact placement.

This module wraps the platform packaging tools (snapcraft, dpkg-deb) that
turn a staged directory into a package.

Design Principles:
    - The packager is looked up on PATH before anything is staged
    - The packager inherits stdin/stdout/stderr, so it can prompt the user
    - No timeout: the call blocks until the packager exits
    - The artifact is moved to the output directory before the staging
      directory is removed, so a cleanup failure never loses the package

Example:
    from pathlib import Path
    from hoverpkg.packaging.packager import find_packager, run_packager

    dpkg_deb = find_packager("dpkg-deb", "Please install dpkg-deb.")
    run_packager([dpkg_deb, "--build", ".", "myapp_amd64.deb"], staging_dir, "deb")
"""

from __future__ import annotations

from pathlib import Path
import shutil
import subprocess

from hoverpkg.exceptions import PackagingError, ToolNotFoundError
from hoverpkg.logging import get_global_logger


def find_packager(executable: str, install_hint: str) -> str:
    """Locate a packaging executable on PATH.

    Args:
        executable: Executable name (e.g., "snapcraft").
        install_hint: Appended to the error message when the tool is missing.

    Returns:
        Full path to the executable.

    Raises:
        ToolNotFoundError: If the executable is not on PATH.
    """
    logger = get_global_logger()
    tool_path = shutil.which(executable)
    if tool_path is None:
        raise ToolNotFoundError(
            f"Failed to lookup `{executable}` executable. {install_hint}"
        )

    logger.verbose("BUILD", f"Using {executable}: {tool_path}")
    return tool_path


def run_packager(cmd: list[str], staging_dir: Path, kind: str) -> None:
    """Run the native packager in the staging directory and wait for it.

    Args:
        cmd: Command line, executable first.
        staging_dir: Working directory for the packager.
        kind: Package kind for messages ("snap", "deb").

    Raises:
        PackagingError: If the packager cannot be started or exits non-zero.
    """
    logger = get_global_logger()
    logger.verbose("BUILD", f"Running: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=staging_dir, check=True)
    except subprocess.CalledProcessError as err:
        raise PackagingError(
            f"Failed to package {kind}: exit status {err.returncode}"
        ) from err
    except OSError as err:
        raise PackagingError(f"Failed to package {kind}: {err}") from err


def move_artifact(produced: Path, destination: Path, kind: str) -> Path:
    """Move the produced package to its final location, replacing any old one.

    The destination directory is created if missing. Moving works across
    filesystems (the staging directory usually lives on tmpfs).

    Raises:
        PackagingError: If the package is missing or cannot be moved.
    """
    logger = get_global_logger()
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(produced), str(destination))
    except OSError as err:
        raise PackagingError(f"Could not move {kind} file: {err}") from err

    logger.verbose("BUILD", f"[OK] Moved {produced.name} -> {destination}")
    return destination


def remove_staging_directory(staging_dir: Path, package_path: Path) -> None:
    """Recursively delete the staging directory after a successful build.

    Raises:
        PackagingError: If removal fails. The package at package_path is
            already in place at that point.
    """
    logger = get_global_logger()
    try:
        shutil.rmtree(staging_dir)
    except OSError as err:
        raise PackagingError(
            f"Could not remove staging directory {staging_dir}: {err}\n"
            f"The package was created at {package_path}"
        ) from err

    logger.verbose("BUILD", f"[OK] Removed staging directory: {staging_dir}")
