"""
Pytest configuration and shared fixtures for hover-packaging tests.

This module provides a fake hover project on disk, deterministic host
detection, an isolated temp directory for staging, and a logger that
records messages instead of printing them.
"""

from __future__ import annotations

from pathlib import Path
import subprocess
import tempfile
from typing import Any

import pytest
import yaml

from hoverpkg.config import HoverPaths, ProjectMetadata
from hoverpkg.logging import SilentLogger, set_global_logger


class RecordingLogger:
    """Logger that keeps every message for assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.steps: list[str] = []
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def step(self, step: int, total: int, message: str) -> None:
        self.steps.append(message)

    def verbose(self, prefix: str, message: str) -> None:
        self.messages.append((prefix, message))

    def debug(self, prefix: str, message: str) -> None:
        self.messages.append((prefix, message))


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Install and return a RecordingLogger as the global logger."""
    logger = RecordingLogger()
    set_global_logger(logger)
    return logger


@pytest.fixture
def linux_host(monkeypatch):
    """Pretend to run on a 64-bit x86 Linux host."""
    monkeypatch.setattr("hoverpkg.packaging.formats.host_os", lambda: "linux")
    monkeypatch.setattr("hoverpkg.packaging.snap.host_arch", lambda: "amd64")
    monkeypatch.setattr("hoverpkg.packaging.deb.host_arch", lambda: "amd64")


@pytest.fixture
def darwin_host(monkeypatch):
    """Pretend to run on macOS."""
    monkeypatch.setattr("hoverpkg.packaging.formats.host_os", lambda: "darwin")


@pytest.fixture
def staging_root(tmp_path: Path, monkeypatch) -> Path:
    """
    Redirect tempfile.mkdtemp into a private directory.

    Tests can list this directory to check that no staging directory was
    created or left behind.
    """
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def pubspec_data() -> dict[str, Any]:
    """Provide pubspec.yaml content with an empty author."""
    return {
        "name": "myapp",
        "version": "1.2.3",
        "author": "",
        "description": "demo",
    }


@pytest.fixture
def hover_project(tmp_path: Path, pubspec_data: dict[str, Any]) -> Path:
    """
    Create a hover project with a compiled Linux build and assets.

    Layout:
        pubspec.yaml
        go/assets/icon.png
        go/build/outputs/linux/myapp
        go/build/outputs/linux/assets/icon.png
        go/build/outputs/linux/lib/libflutter_engine.so
    """
    project = tmp_path / "project"
    project.mkdir()
    with (project / "pubspec.yaml").open("w", encoding="utf-8") as f:
        yaml.safe_dump(pubspec_data, f)

    go_dir = project / "go"
    (go_dir / "assets").mkdir(parents=True)
    (go_dir / "assets" / "icon.png").write_bytes(b"png")

    linux_out = go_dir / "build" / "outputs" / "linux"
    (linux_out / "assets").mkdir(parents=True)
    (linux_out / "lib").mkdir()
    (linux_out / "myapp").write_bytes(b"\x7fELF")
    (linux_out / "assets" / "icon.png").write_bytes(b"png")
    (linux_out / "lib" / "libflutter_engine.so").write_bytes(b"so")

    return project


@pytest.fixture
def paths(hover_project: Path) -> HoverPaths:
    """Provide HoverPaths for the fake project."""
    return HoverPaths(hover_project)


@pytest.fixture
def metadata(pubspec_data: dict[str, Any]) -> ProjectMetadata:
    """Provide ProjectMetadata matching pubspec_data."""
    return ProjectMetadata(**pubspec_data)


@pytest.fixture
def fake_packager():
    """
    Factory for subprocess.run replacements that emulate a packager.

    Usage:
        run = fake_packager(lambda cmd: "myapp_amd64.deb")
    The callable maps the command line to the artifact name written into
    the working directory. Every call is recorded in run.calls.
    """

    def _create(artifact_name):
        calls: list[dict[str, Any]] = []

        def _run(cmd, cwd=None, check=False, **kwargs):
            calls.append({"cmd": list(cmd), "cwd": Path(cwd), "kwargs": kwargs})
            staged = sorted(
                str(p.relative_to(cwd)) for p in Path(cwd).rglob("*")
            )
            calls[-1]["staged"] = staged
            (Path(cwd) / artifact_name(cmd)).write_bytes(b"package")
            return subprocess.CompletedProcess(cmd, 0)

        _run.calls = calls
        return _run

    return _create
