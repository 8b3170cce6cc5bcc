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

"""Packaging format identifiers, host detection and format paths.

A packaging format is named "<os>-<kind>" (e.g., "linux-snap"). The part
before the first dash is the operating system the format can be built on.
Each initialized format owns a configuration tree at
<build root>/packaging/<format>/.

Architecture names use the Go spelling (amd64, arm64, 386, arm), which is
what Debian control files and snap artifact names expect on the platforms
hover supports.
"""

from __future__ import annotations

from pathlib import Path
import platform
import sys

from hoverpkg.config import HoverPaths
from hoverpkg.exceptions import PackagingError, PlatformError

LINUX_SNAP = "linux-snap"
LINUX_DEB = "linux-deb"

PACKAGING_FORMATS = (LINUX_SNAP, LINUX_DEB)

# Native libraries the compiled desktop app links against
LINUX_PACKAGING_DEPENDENCIES = (
    "libx11-6",
    "libxrandr2",
    "libxcursor1",
    "libxinerama1",
)

_OS_NAMES = {
    "linux": "linux",
    "darwin": "darwin",
    "win32": "windows",
    "cygwin": "windows",
}

_ARCH_NAMES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "armv6l": "arm",
    "armv7l": "arm",
}


def host_os() -> str:
    """Return the host operating system as used in format prefixes."""
    return _OS_NAMES.get(sys.platform, sys.platform)


def host_arch() -> str:
    """Return the host CPU architecture in Go naming (e.g., "amd64")."""
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine)


def format_os(packaging_format: str) -> str:
    """Return the operating system prefix of a packaging format.

    Example:
        >>> format_os("linux-deb")
        'linux'
    """
    return packaging_format.split("-")[0]


def remove_dashes_and_underscores(project_name: str) -> str:
    """Strip every "-" and "_" from a project name.

    Snap and Debian package names do not allow underscores, and hover drops
    dashes as well so both formats share one package name.

    Example:
        >>> remove_dashes_and_underscores("my_cool-app")
        'mycoolapp'
    """
    return project_name.replace("-", "").replace("_", "")


def packaging_format_path(paths: HoverPaths, packaging_format: str) -> Path:
    """Compute the absolute path of a format's configuration tree.

    Args:
        paths: Project locations.
        packaging_format: Format identifier (e.g., "linux-snap").

    Returns:
        Absolute path <build root>/packaging/<format>.

    Raises:
        PackagingError: If the path cannot be made absolute (e.g., the
            working directory no longer exists).
    """
    try:
        return (paths.packaging_root / packaging_format).absolute()
    except OSError as err:
        raise PackagingError(
            f"Failed to resolve absolute path for {packaging_format} directory: {err}"
        ) from err


def assert_correct_os(packaging_format: str) -> None:
    """Raise PlatformError unless the host OS matches the format prefix."""
    required = format_os(packaging_format)
    if host_os() != required:
        raise PlatformError(f"{packaging_format} only works on {required}")


def assert_packaging_format_initialized(
    paths: HoverPaths, packaging_format: str
) -> Path:
    """Ensure a format has been scaffolded.

    Returns:
        The format's configuration tree.

    Raises:
        PackagingError: If the configuration tree does not exist.
    """
    directory = packaging_format_path(paths, packaging_format)
    if not directory.exists():
        raise PackagingError(
            f"{packaging_format} is not initialized for packaging. "
            f"Please run `hover init-packaging {packaging_format}` first."
        )
    return directory
