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

"""Core orchestration for hover-packaging.

This module ties project configuration to the packaging recipes. Each
command reads pubspec.yaml fresh, checks that the project has been set up
for hover, and hands explicit paths and metadata to the recipe.

Design Principles:

- Metadata is loaded once per command and never mutated
- Paths are derived from the project root, never from module globals
- Error handling uses exceptions; CLI layer formats for user display

Example:
    Programmatic usage:
        ```python
        from pathlib import Path
        from hoverpkg.core import build_project_package, init_project_packaging

        init_project_packaging(Path("."), "linux-snap")
        result = build_project_package(Path("."), "linux-snap")
        print(result.package_path)
        ```
"""

from __future__ import annotations

from pathlib import Path

from hoverpkg.config import (
    HoverPaths,
    ProjectMetadata,
    assert_hover_initialized,
    load_project_metadata,
)
from hoverpkg.logging import get_global_logger
from hoverpkg.packaging import build_packaging, init_packaging
from hoverpkg.results import BuildResult, InitResult


def _prepare(project_root: Path) -> tuple[HoverPaths, ProjectMetadata]:
    logger = get_global_logger()
    paths = HoverPaths(project_root.resolve())
    logger.debug("PATHS", f"Project root: {paths.project_root}")

    metadata = load_project_metadata(paths.project_root)
    logger.verbose(
        "CONFIG", f"Loaded {metadata.name} {metadata.version} from pubspec.yaml"
    )

    assert_hover_initialized(paths)
    return paths, metadata


def init_project_packaging(project_root: Path, packaging_format: str) -> InitResult:
    """Scaffold a packaging format for the project at project_root.

    This is the main entry point for the 'init-packaging' command.

    Args:
        project_root: Directory containing pubspec.yaml and go/.
        packaging_format: Format identifier (e.g., "linux-deb").

    Returns:
        InitResult for the scaffolded format.

    Raises:
        ConfigError: If pubspec.yaml is unusable or go/ is missing.
        PlatformError: If the format cannot be used on this OS.
        PackagingError: If the format is already initialized or writing fails.
    """
    paths, metadata = _prepare(project_root)
    return init_packaging(paths, packaging_format, metadata)


def build_project_package(project_root: Path, packaging_format: str) -> BuildResult:
    """Build a package for the project at project_root.

    This is the main entry point for the 'build' command.

    Args:
        project_root: Directory containing pubspec.yaml and go/.
        packaging_format: Format identifier (e.g., "linux-snap").

    Returns:
        BuildResult with the package location.

    Raises:
        ConfigError: If pubspec.yaml is unusable or go/ is missing.
        PlatformError: If the format cannot be used on this OS.
        ToolNotFoundError: If the native packager is not installed.
        PackagingError: If the format is not initialized or building fails.
    """
    paths, metadata = _prepare(project_root)
    return build_packaging(paths, packaging_format, metadata)
