"""Configuration file templates for the Linux packaging formats.

Every function here returns the file content as a list of lines (without
line terminators) built purely from project metadata. Writing them to disk
is the scaffolder's job, which keeps these functions trivial to test.

Design Principles:
    - Line-oriented output, written one line at a time by the caller
    - Names with dashes/underscores are stripped where the format requires it
    - Desktop entries differ per format only in their Exec and Icon paths
    - No YAML/INI serializer: the output layout is fixed and hand-editable

Example:
    from hoverpkg.config import ProjectMetadata
    from hoverpkg.packaging.templates import deb_control_lines

    metadata = ProjectMetadata("myapp", "1.2.3", "jane", "demo")
    lines = deb_control_lines(metadata, maintainer="jane", arch="amd64")
    # ['Package: myapp', 'Architecture: amd64', 'Maintainer: @jane', ...]
"""

from __future__ import annotations

from collections.abc import Iterable

from hoverpkg.config import ProjectMetadata

from .formats import LINUX_PACKAGING_DEPENDENCIES, remove_dashes_and_underscores


def desktop_entry_lines(metadata: ProjectMetadata, exec_path: str, icon_path: str) -> list[str]:
    """Build a freedesktop.org desktop entry.

    Args:
        metadata: Project metadata.
        exec_path: Absolute path of the executable inside the installed package.
        icon_path: Absolute path of the icon inside the installed package.

    Returns:
        Desktop entry lines.
    """
    return [
        "[Desktop Entry]",
        "Encoding=UTF-8",
        f"Version={metadata.version}",
        "Type=Application",
        "Terminal=false",
        f"Exec={exec_path}",
        f"Name={metadata.name}",
        f"Icon={icon_path}",
    ]


def snapcraft_yaml_lines(
    metadata: ProjectMetadata,
    dependencies: Iterable[str] = LINUX_PACKAGING_DEPENDENCIES,
) -> list[str]:
    """Build snap/snapcraft.yaml.

    The manifest declares three dump parts that mirror the staging layout:
    "desktop" (the snap/ directory holding the desktop entry), "assets"
    and "app" (the compiled build output, which also pulls in the native
    library dependencies as stage-packages).
    """
    snap_name = remove_dashes_and_underscores(metadata.name)
    lines = [
        f"name: {snap_name}",
        "base: core18",
        f"version: '{metadata.version}'",
        f"summary: {metadata.description}",
        "description: |",
        f"  {metadata.description}",
        "confinement: devmode",
        "grade: devel",
        "apps:",
        f"  {snap_name}:",
        f"    command: {metadata.name}",
        f"    desktop: local/{metadata.name}.desktop",
        "parts:",
        "  desktop:",
        "    plugin: dump",
        "    source: snap",
        "  assets:",
        "    plugin: dump",
        "    source: assets",
        "  app:",
        "    plugin: dump",
        "    source: build",
        "    stage-packages:",
    ]
    lines.extend(f"      - {dependency}" for dependency in dependencies)
    return lines


def snap_desktop_lines(metadata: ProjectMetadata) -> list[str]:
    """Build snap/local/<name>.desktop (paths are relative to the snap root)."""
    return desktop_entry_lines(
        metadata,
        exec_path=f"/{metadata.name}",
        icon_path="/icon.png",
    )


def deb_control_lines(
    metadata: ProjectMetadata,
    maintainer: str,
    arch: str,
    dependencies: Iterable[str] = LINUX_PACKAGING_DEPENDENCIES,
) -> list[str]:
    """Build DEBIAN/control.

    Args:
        metadata: Project metadata.
        maintainer: Maintainer name, written with a leading "@".
        arch: Debian architecture (e.g., "amd64").
        dependencies: Runtime package dependencies.

    Returns:
        Control file lines.
    """
    return [
        f"Package: {remove_dashes_and_underscores(metadata.name)}",
        f"Architecture: {arch}",
        f"Maintainer: @{maintainer}",
        "Priority: optional",
        f"Version: {metadata.version}",
        f"Description: {metadata.description}",
        f"Depends: {','.join(dependencies)}",
    ]


def deb_bin_lines(metadata: ProjectMetadata) -> list[str]:
    """Build the /usr/bin wrapper that runs the binary installed in /usr/lib."""
    return [
        "#!/bin/sh",
        f"/usr/lib/{metadata.name}/{metadata.name}",
    ]


def deb_desktop_lines(metadata: ProjectMetadata) -> list[str]:
    """Build usr/share/applications/<name>.desktop for the deb package."""
    return desktop_entry_lines(
        metadata,
        exec_path=f"/usr/bin/{metadata.name}",
        icon_path=f"/usr/lib/{metadata.name}/assets/icon.png",
    )
