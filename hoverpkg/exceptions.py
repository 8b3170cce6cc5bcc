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

"""Exception hierarchy for hover-packaging.

Library code never prints and exits on failure. It raises one of the
exceptions below and leaves reporting to the caller (the CLI turns every
HoverError into a `hover:` diagnostic and a non-zero exit status).

- ConfigError: Project metadata or project layout problems
- PlatformError: Packaging format does not match the host operating system
- PackagingError: Filesystem and packager subprocess failures
- ToolNotFoundError: Native packager executable missing from PATH

Example:
    Catching all packaging errors:
        ```python
        from hoverpkg.exceptions import HoverError

        try:
            build_packaging(paths, "linux-deb", metadata)
        except HoverError as e:
            print(f"hover: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "HoverError",
    "ConfigError",
    "PlatformError",
    "PackagingError",
    "ToolNotFoundError",
]


class HoverError(Exception):
    """Base exception for all hover-packaging errors."""

    pass


class ConfigError(HoverError):
    """Raised for project configuration errors.

    This exception is raised when there are problems with:

    - pubspec.yaml (missing file, YAML parse errors, missing name field)
    - The project not being initialized for hover (no go/ directory)
    """

    pass


class PlatformError(HoverError):
    """Raised when a packaging format cannot run on the host OS.

    Packaging formats are prefixed with the operating system they target
    (e.g., "linux-snap"). Initializing or building one on another OS
    raises this error before anything is written to disk.
    """

    pass


class PackagingError(HoverError):
    """Raised for packaging/build-related errors.

    This exception is raised when there are problems with:

    - Packaging format directories (already initialized, not initialized)
    - Writing scaffolded configuration files
    - Copying files into the staging directory
    - The native packager exiting with an error
    - Moving the produced artifact or removing the staging directory
    """

    pass


class ToolNotFoundError(PackagingError):
    """Raised when a native packaging executable is not on PATH.

    The message carries an install hint for the missing tool.
    """

    pass
