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

"""Project configuration for hover-packaging.

Public API:

- HoverPaths: Locations inside a hover project (build root, outputs, ...)
- ProjectMetadata: name, version, author and description of the project
- load_project_metadata: Read ProjectMetadata from pubspec.yaml
- assert_hover_initialized: Fail unless the project has a go/ directory

Example:
    Basic usage:

        from pathlib import Path
        from hoverpkg.config import HoverPaths, load_project_metadata

        paths = HoverPaths(Path(".").resolve())
        metadata = load_project_metadata(paths.project_root)
        print(metadata.version)  # "1.2.3"

"""

from .loader import (
    HoverPaths,
    ProjectMetadata,
    assert_hover_initialized,
    load_project_metadata,
)

__all__ = [
    "HoverPaths",
    "ProjectMetadata",
    "assert_hover_initialized",
    "load_project_metadata",
]
