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

"""Staging directories for native packager runs.

Every build gets a fresh, uniquely named temporary directory. The recipes
copy the compiled app, the asset bundle and the scaffolded configuration
tree into it, and the native packager runs with it as working directory.

A failed copy leaves the staging directory on disk so its partial content
can be inspected; the error message names the directory.
"""

from __future__ import annotations

from pathlib import Path
import shutil
import tempfile

from hoverpkg.exceptions import PackagingError
from hoverpkg.logging import get_global_logger


def create_staging_directory(project_name: str, packaging_format: str) -> Path:
    """Create an empty staging directory in the system temp location.

    The name starts with "hover-build-<project>-<format>" and gets a random
    suffix, so concurrent or leftover staging directories never collide.

    Raises:
        PackagingError: If the directory cannot be created.
    """
    logger = get_global_logger()
    try:
        staging_dir = Path(
            tempfile.mkdtemp(prefix=f"hover-build-{project_name}-{packaging_format}")
        )
    except OSError as err:
        raise PackagingError(
            f"Couldn't get temporary build directory: {err}"
        ) from err

    logger.verbose("STAGE", f"Created staging directory: {staging_dir}")
    return staging_dir


def copy_into_staging(
    source: Path, destination: Path, description: str, staging_dir: Path
) -> None:
    """Recursively copy a directory into the staging tree.

    Existing directories at the destination are merged (the configuration
    tree is copied over the staging root after the build output). Symlinks
    are copied as symlinks.

    Args:
        source: Directory to copy.
        destination: Target directory inside staging_dir.
        description: Human-readable name used in messages.
        staging_dir: Root of the staging tree (reported on failure).

    Raises:
        PackagingError: If the copy fails. staging_dir is left in place.
    """
    logger = get_global_logger()
    try:
        shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)
    except OSError as err:
        raise PackagingError(
            f"Could not copy {description}: {err}\n"
            f"The staging directory was left for inspection: {staging_dir}"
        ) from err

    logger.verbose("STAGE", f"  Copied {description}: {source} -> {destination}")
