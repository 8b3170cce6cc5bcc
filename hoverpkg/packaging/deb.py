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

"""Debian packaging recipe (linux-deb).

Configuration tree (go/packaging/linux-deb/), laid out like the root of
the installed system:

    DEBIAN/control
    usr/bin/<stripped name>                    wrapper script (0777)
    usr/share/applications/<name>.desktop

Staging layout handed to `dpkg-deb --build`:

    usr/lib/<name>/   <- go/build/outputs/linux
    DEBIAN/, usr/...  <- go/packaging/linux-deb (merged over usr/)

dpkg-deb takes the output file name as an argument, so the package is
written straight to <stripped name>_<arch>.deb and moved to
go/build/outputs/linux-deb/.
"""

from __future__ import annotations

import getpass
from pathlib import Path

from hoverpkg.config import HoverPaths, ProjectMetadata
from hoverpkg.exceptions import ConfigError
from hoverpkg.logging import get_global_logger
from hoverpkg.results import BuildResult, InitResult

from .formats import (
    LINUX_DEB,
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
    make_executable,
    write_lines,
)
from .staging import copy_into_staging, create_staging_directory
from .templates import deb_bin_lines, deb_control_lines, deb_desktop_lines

DPKG_DEB_INSTALL_HINT = "Please install dpkg-deb."


def deb_file_name(metadata: ProjectMetadata, arch: str) -> str:
    """Return the .deb file name for a project (e.g., "myapp_amd64.deb")."""
    return f"{remove_dashes_and_underscores(metadata.name)}_{arch}.deb"


def resolve_maintainer(metadata: ProjectMetadata) -> str:
    """Return the package maintainer, falling back to the OS username.

    Raises:
        ConfigError: If the author is empty and the current user cannot
            be determined.
    """
    logger = get_global_logger()
    if metadata.author:
        return metadata.author

    logger.warning("Missing author field in pubspec.yaml")
    try:
        username = getpass.getuser()
    except (OSError, KeyError) as err:
        raise ConfigError(f"Couldn't get current user: {err}") from err

    logger.warning(f"Using this username from system instead: {username}")
    return username


def init_linux_deb(paths: HoverPaths, metadata: ProjectMetadata) -> InitResult:
    """Scaffold go/packaging/linux-deb.

    Args:
        paths: Project locations.
        metadata: Project metadata used to fill the templates.

    Returns:
        InitResult listing the written files.

    Raises:
        PlatformError: If the host is not Linux.
        ConfigError: If no maintainer can be determined.
        PackagingError: If the format is already initialized or a file
            cannot be written.
    """
    logger = get_global_logger()
    assert_correct_os(LINUX_DEB)
    maintainer = resolve_maintainer(metadata)

    deb_dir = create_packaging_format_directory(paths, LINUX_DEB)
    debian_dir = make_directory(deb_dir / "DEBIAN", "DEBIAN directory")
    bin_dir = make_directory(deb_dir / "usr" / "bin", "bin directory")
    applications_dir = make_directory(
        deb_dir / "usr" / "share" / "applications", "applications directory"
    )

    logger.verbose("INIT", "Writing DEBIAN/control")
    control_file = write_lines(
        debian_dir / "control",
        deb_control_lines(metadata, maintainer=maintainer, arch=host_arch()),
        "control file",
    )

    logger.verbose("INIT", "Writing bin wrapper")
    bin_file = write_lines(
        bin_dir / remove_dashes_and_underscores(metadata.name),
        deb_bin_lines(metadata),
        "bin file",
    )
    make_executable(bin_file, "bin file")

    logger.verbose("INIT", f"Writing {metadata.name}.desktop")
    desktop_file = write_lines(
        applications_dir / f"{metadata.name}.desktop",
        deb_desktop_lines(metadata),
        f"{metadata.name}.desktop file",
    )

    announce_init_finished(LINUX_DEB)

    return InitResult(
        packaging_format=LINUX_DEB,
        config_dir=deb_dir,
        files=(control_file, bin_file, desktop_file),
        status="success",
    )


def stage_linux_deb(paths: HoverPaths, metadata: ProjectMetadata, config_dir: Path) -> Path:
    """Create a staging directory and fill it for dpkg-deb.

    Returns:
        The staging directory.
    """
    staging_dir = create_staging_directory(metadata.name, LINUX_DEB)

    copy_into_staging(
        paths.output_directory("linux"),
        staging_dir / "usr" / "lib" / metadata.name,
        "build folder",
        staging_dir,
    )
    copy_into_staging(
        config_dir, staging_dir, "packaging configuration folder", staging_dir
    )
    return staging_dir


def build_linux_deb(paths: HoverPaths, metadata: ProjectMetadata) -> BuildResult:
    """Build go/build/outputs/linux-deb/<name>_<arch>.deb with dpkg-deb.

    Args:
        paths: Project locations.
        metadata: Project metadata (name selects the artifact).

    Returns:
        BuildResult with the final package path.

    Raises:
        PlatformError: If the host is not Linux.
        PackagingError: If the format is not initialized, staging fails,
            dpkg-deb fails, or the package cannot be moved.
        ToolNotFoundError: If dpkg-deb is not on PATH.
    """
    logger = get_global_logger()
    assert_correct_os(LINUX_DEB)
    config_dir = assert_packaging_format_initialized(paths, LINUX_DEB)

    logger.step(1, 4, "Looking up dpkg-deb...")
    dpkg_deb = find_packager("dpkg-deb", DPKG_DEB_INSTALL_HINT)

    logger.step(2, 4, "Staging build output...")
    staging_dir = stage_linux_deb(paths, metadata, config_dir)
    logger.info(f"Packaging deb in {staging_dir}")

    output_file_name = deb_file_name(metadata, host_arch())

    logger.step(3, 4, "Running dpkg-deb...")
    run_packager([dpkg_deb, "--build", ".", output_file_name], staging_dir, "deb")

    logger.step(4, 4, "Moving deb to output directory...")
    package_path = move_artifact(
        staging_dir / output_file_name,
        paths.output_directory(LINUX_DEB) / output_file_name,
        "deb",
    )
    remove_staging_directory(staging_dir, package_path)

    return BuildResult(
        packaging_format=LINUX_DEB,
        package_path=package_path,
        project_name=metadata.name,
        version=metadata.version,
        status="success",
    )
