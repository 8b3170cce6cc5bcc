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

"""Snap packaging recipe (linux-snap).

Configuration tree (go/packaging/linux-snap/):

    snap/
        snapcraft.yaml
        local/<name>.desktop

Staging layout handed to snapcraft:

    assets/   <- go/assets
    build/    <- go/build/outputs/linux
    snap/     <- go/packaging/linux-snap/snap

snapcraft names its output <name>_<version>_<arch>.snap. The version is
dropped when the file is moved to go/build/outputs/linux-snap/, so repeated
builds always land on the same path.
"""

from __future__ import annotations

from pathlib import Path

from hoverpkg.config import HoverPaths, ProjectMetadata
from hoverpkg.logging import get_global_logger
from hoverpkg.results import BuildResult, InitResult

from .formats import (
    LINUX_SNAP,
    assert_correct_os,
    assert_packaging_format_initialized,
    host_arch,
    remove_dashes_and_underscores,
)
from .packager import (
    find_packager,
    move_artifact,
    remove_staging_directory,
    run_packager,
)
from .scaffold import (
    announce_init_finished,
    create_packaging_format_directory,
    make_directory,
    write_lines,
)
from .staging import copy_into_staging, create_staging_directory
from .templates import snap_desktop_lines, snapcraft_yaml_lines

SNAPCRAFT_INSTALL_HINT = (
    "Please install snapcraft.\n"
    "https://tutorials.ubuntu.com/tutorial/create-your-first-snap#1"
)


def snap_file_name(metadata: ProjectMetadata, arch: str, with_version: bool = False) -> str:
    """Return the snap file name for a project.

    Example:
        >>> snap_file_name(ProjectMetadata("my_app", "1.0.0", "", ""), "amd64", True)
        'myapp_1.0.0_amd64.snap'
    """
    snap_name = remove_dashes_and_underscores(metadata.name)
    if with_version:
        return f"{snap_name}_{metadata.version}_{arch}.snap"
    return f"{snap_name}_{arch}.snap"


def init_linux_snap(paths: HoverPaths, metadata: ProjectMetadata) -> InitResult:
    """Scaffold go/packaging/linux-snap.

    Args:
        paths: Project locations.
        metadata: Project metadata used to fill the templates.

    Returns:
        InitResult listing the written files.

    Raises:
        PlatformError: If the host is not Linux.
        PackagingError: If the format is already initialized or a file
            cannot be written.
    """
    logger = get_global_logger()
    assert_correct_os(LINUX_SNAP)

    snap_dir = create_packaging_format_directory(paths, LINUX_SNAP)
    local_dir = make_directory(snap_dir / "snap" / "local", "snap local directory")

    logger.verbose("INIT", "Writing snapcraft.yaml")
    snapcraft_file = write_lines(
        snap_dir / "snap" / "snapcraft.yaml",
        snapcraft_yaml_lines(metadata),
        "snapcraft.yaml",
    )

    logger.verbose("INIT", f"Writing {metadata.name}.desktop")
    desktop_file = write_lines(
        local_dir / f"{metadata.name}.desktop",
        snap_desktop_lines(metadata),
        f"{metadata.name}.desktop",
    )

    announce_init_finished(LINUX_SNAP)

    return InitResult(
        packaging_format=LINUX_SNAP,
        config_dir=snap_dir,
        files=(snapcraft_file, desktop_file),
        status="success",
    )


def stage_linux_snap(paths: HoverPaths, metadata: ProjectMetadata, config_dir: Path) -> Path:
    """Create a staging directory and fill it for snapcraft.

    Returns:
        The staging directory.
    """
    staging_dir = create_staging_directory(metadata.name, LINUX_SNAP)

    copy_into_staging(paths.assets_dir, staging_dir / "assets", "assets folder", staging_dir)
    copy_into_staging(
        paths.output_directory("linux"),
        staging_dir / "build",
        "build folder",
        staging_dir,
    )
    copy_into_staging(
        config_dir, staging_dir, "packaging configuration folder", staging_dir
    )
    return staging_dir


def build_linux_snap(paths: HoverPaths, metadata: ProjectMetadata) -> BuildResult:
    """Build go/build/outputs/linux-snap/<name>_<arch>.snap with snapcraft.

    Args:
        paths: Project locations.
        metadata: Project metadata (name and version select the artifact).

    Returns:
        BuildResult with the final package path.

    Raises:
        PlatformError: If the host is not Linux.
        PackagingError: If the format is not initialized, staging fails,
            snapcraft fails, or the snap cannot be moved.
        ToolNotFoundError: If snapcraft is not on PATH.
    """
    logger = get_global_logger()
    assert_correct_os(LINUX_SNAP)
    config_dir = assert_packaging_format_initialized(paths, LINUX_SNAP)

    logger.step(1, 4, "Looking up snapcraft...")
    snapcraft = find_packager("snapcraft", SNAPCRAFT_INSTALL_HINT)

    logger.step(2, 4, "Staging build output...")
    staging_dir = stage_linux_snap(paths, metadata, config_dir)
    logger.info(f"Packaging snap in {staging_dir}")

    logger.step(3, 4, "Running snapcraft...")
    run_packager([snapcraft], staging_dir, "snap")

    logger.step(4, 4, "Moving snap to output directory...")
    arch = host_arch()
    package_path = move_artifact(
        staging_dir / snap_file_name(metadata, arch, with_version=True),
        paths.output_directory(LINUX_SNAP) / snap_file_name(metadata, arch),
        "snap",
    )
    remove_staging_directory(staging_dir, package_path)

    return BuildResult(
        packaging_format=LINUX_SNAP,
        package_path=package_path,
        project_name=metadata.name,
        version=metadata.version,
        status="success",
    )
