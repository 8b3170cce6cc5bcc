"""
Project configuration loading for hover-packaging.

The packaging commands need two kinds of configuration: the project's
metadata (read from pubspec.yaml) and the on-disk layout of a hover
project (the go/ build tree). Both are loaded once per command and passed
explicitly to every packaging component.

Project Layout
--------------
<project>/
    pubspec.yaml                 project metadata
    go/                          hover build root ("build root")
        assets/                  asset bundle (icon.png, ...)
        packaging/<format>/      scaffolded packaging configuration
        build/outputs/<target>/  compiled build output per target

Functions
---------
load_project_metadata : function
    Read name, version, author and description from pubspec.yaml.
assert_hover_initialized : function
    Fail unless the project has a go/ build root.

Private Helpers
---------------
_load_yaml_file : Load YAML with error handling
_as_text : Coerce optional YAML scalars to str

Error Handling
--------------
- ConfigError: pubspec.yaml missing, unparsable, not a mapping, or no name
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from hoverpkg.config import HoverPaths, load_project_metadata
    >>> paths = HoverPaths(Path("."))
    >>> metadata = load_project_metadata(paths.project_root)
    >>> print(metadata.name)
    myapp
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hoverpkg.exceptions import ConfigError

PUBSPEC_FILENAME = "pubspec.yaml"
BUILD_ROOT_NAME = "go"

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class ProjectMetadata:
    """
    Read-only project metadata consumed by the packaging recipes.

    An empty author is allowed; the deb recipe substitutes the current
    OS username.
    """

    name: str
    version: str
    author: str
    description: str


@dataclass(frozen=True)
class HoverPaths:
    """
    Locations inside a hover project.

    All derived paths are relative to project_root. Nothing is created or
    checked here.
    """

    project_root: Path

    @property
    def build_root(self) -> Path:
        return self.project_root / BUILD_ROOT_NAME

    @property
    def packaging_root(self) -> Path:
        return self.build_root / "packaging"

    @property
    def assets_dir(self) -> Path:
        return self.build_root / "assets"

    def output_directory(self, target: str) -> Path:
        """Directory holding the build output for a target.

        Targets are either a platform ("linux") for the compiled app or a
        packaging format ("linux-deb") for finished packages.
        """
        return self.build_root / "build" / "outputs" / target


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file is missing, unreadable, invalid or empty
    """
    if not p.exists():
        raise ConfigError(f"{p.name} not found in {p.parent}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    except OSError as err:
        raise ConfigError(f"Could not read {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


def _as_text(value: Any) -> str:
    # version: 1.0 parses as a float
    if value is None:
        return ""
    return str(value).strip()


# -------------------------------
# Public API
# -------------------------------


def load_project_metadata(project_root: Path) -> ProjectMetadata:
    """
    Load the project metadata from <project_root>/pubspec.yaml.

    Returns
      ProjectMetadata with name, version, author and description. Fields
      other than name default to an empty string.

    Raises
      ConfigError if the file cannot be loaded or has no name.
    """
    pubspec_path = project_root / PUBSPEC_FILENAME
    data = _load_yaml_file(pubspec_path)
    if not isinstance(data, dict):
        raise ConfigError(
            f"top-level YAML must be a mapping (dict): {pubspec_path}"
        )

    name = _as_text(data.get("name"))
    if not name:
        raise ConfigError(f"Missing name field in {PUBSPEC_FILENAME}")

    return ProjectMetadata(
        name=name,
        version=_as_text(data.get("version")),
        author=_as_text(data.get("author")),
        description=_as_text(data.get("description")),
    )


def assert_hover_initialized(paths: HoverPaths) -> None:
    """
    Ensure the project has been set up with `hover init`.

    Raises
      ConfigError if the go/ build root does not exist.
    """
    if not paths.build_root.is_dir():
        raise ConfigError(
            f"Directory '{BUILD_ROOT_NAME}' is missing in {paths.project_root}. "
            "Please run `hover init` first."
        )
