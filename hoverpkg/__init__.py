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

"""hover-packaging - OS-native packages for hover desktop apps

A Python CLI that scaffolds and builds Linux distribution packages for
Flutter desktop applications laid out by hover (pubspec.yaml + go/).

hover-packaging provides:

- Editable packaging configuration under go/packaging/<format>/
- snap packages built with snapcraft
- deb packages built with dpkg-deb
- Stable output paths under go/build/outputs/<format>/

Quick Start:
Create the snap configuration once:

    $ hover-packaging init-packaging linux-snap

Build the snap whenever the app changes:

    $ hover-packaging build linux-snap

For full CLI documentation:

    $ hover-packaging --help
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "hover-packaging - snap and deb packaging for hover desktop apps"

# Re-export commonly used functions for convenience
from hoverpkg.config import HoverPaths, ProjectMetadata, load_project_metadata
from hoverpkg.core import build_project_package, init_project_packaging
from hoverpkg.exceptions import (
    ConfigError,
    HoverError,
    PackagingError,
    PlatformError,
    ToolNotFoundError,
)
from hoverpkg.packaging import build_packaging, init_packaging
from hoverpkg.results import BuildResult, InitResult

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "BuildResult",
    "InitResult",
    "HoverPaths",
    "ProjectMetadata",
    "load_project_metadata",
    "init_project_packaging",
    "build_project_package",
    "init_packaging",
    "build_packaging",
    "HoverError",
    "ConfigError",
    "PlatformError",
    "PackagingError",
    "ToolNotFoundError",
]
