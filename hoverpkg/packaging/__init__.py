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

"""
OS-native packaging for hover projects.

Each packaging format is an independent recipe module (snap, deb) with an
init function that scaffolds go/packaging/<format>/ and a build function
that stages the app, runs the native packager and moves the package to
go/build/outputs/<format>/.

Example:
    from pathlib import Path
    from hoverpkg.config import HoverPaths, load_project_metadata
    from hoverpkg.packaging import build_packaging, init_packaging

    paths = HoverPaths(Path(".").resolve())
    metadata = load_project_metadata(paths.project_root)

    init_packaging(paths, "linux-deb", metadata)
    result = build_packaging(paths, "linux-deb", metadata)

    print(f"Package: {result.package_path}")
"""

from __future__ import annotations

from collections.abc import Callable

from hoverpkg.config import HoverPaths, ProjectMetadata
from hoverpkg.exceptions import ConfigError
from hoverpkg.results import BuildResult, InitResult

from .deb import build_linux_deb, init_linux_deb
from .formats import (
    LINUX_DEB,
    LINUX_SNAP,
    PACKAGING_FORMATS,
    packaging_format_path,
    remove_dashes_and_underscores,
)
from .snap import build_linux_snap, init_linux_snap

_INIT_RECIPES: dict[str, Callable[[HoverPaths, ProjectMetadata], InitResult]] = {
    LINUX_SNAP: init_linux_snap,
    LINUX_DEB: init_linux_deb,
}

_BUILD_RECIPES: dict[str, Callable[[HoverPaths, ProjectMetadata], BuildResult]] = {
    LINUX_SNAP: build_linux_snap,
    LINUX_DEB: build_linux_deb,
}


def _check_format(packaging_format: str) -> None:
    if packaging_format not in PACKAGING_FORMATS:
        raise ConfigError(
            f"Unknown packaging format: {packaging_format!r}. "
            f"Available: {', '.join(PACKAGING_FORMATS)}"
        )


def init_packaging(
    paths: HoverPaths, packaging_format: str, metadata: ProjectMetadata
) -> InitResult:
    """Scaffold the configuration tree of a packaging format.

    Raises:
        ConfigError: If the format is unknown.
        PlatformError: If the format cannot be used on this OS.
        PackagingError: If the format is already initialized or writing fails.
    """
    _check_format(packaging_format)
    return _INIT_RECIPES[packaging_format](paths, metadata)


def build_packaging(
    paths: HoverPaths, packaging_format: str, metadata: ProjectMetadata
) -> BuildResult:
    """Build the package for an initialized packaging format.

    Raises:
        ConfigError: If the format is unknown.
        PlatformError: If the format cannot be used on this OS.
        ToolNotFoundError: If the native packager is not installed.
        PackagingError: If the format is not initialized or building fails.
    """
    _check_format(packaging_format)
    return _BUILD_RECIPES[packaging_format](paths, metadata)


__all__ = [
    "LINUX_DEB",
    "LINUX_SNAP",
    "PACKAGING_FORMATS",
    "build_packaging",
    "init_packaging",
    "packaging_format_path",
    "remove_dashes_and_underscores",
]
