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

"""Public API return types for hover-packaging.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from hoverpkg.packaging import build_packaging

        result = build_packaging(paths, "linux-deb", metadata)
        print(result.package_path)
        ```
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class InitResult:
    """Result from scaffolding a packaging format.

    Attributes:
        packaging_format: Format identifier (e.g., "linux-snap").
        config_dir: Absolute path to the created configuration tree.
        files: Files written into the configuration tree, in write order.
        status: Always "success" for a completed scaffold.
    """

    packaging_format: str
    config_dir: Path
    files: tuple[Path, ...]
    status: str


@dataclass(frozen=True)
class BuildResult:
    """Result from building a package.

    Attributes:
        packaging_format: Format identifier (e.g., "linux-deb").
        package_path: Final location of the produced artifact.
        project_name: Project name from pubspec.yaml.
        version: Project version from pubspec.yaml.
        status: Always "success" for a completed build.
    """

    packaging_format: str
    package_path: Path
    project_name: str
    version: str
    status: str
