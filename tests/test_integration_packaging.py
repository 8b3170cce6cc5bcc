"""
Integration tests for deb packaging with the real dpkg-deb.

These tests validate:
- The scaffolded tree is accepted by dpkg-deb
- The produced .deb carries the control fields and installed layout

Run with: pytest tests/test_integration_packaging.py -m integration
Skip with: pytest tests/ -m "not integration"
"""

from __future__ import annotations

import shutil
import subprocess
import sys

import pytest

from hoverpkg.core import build_project_package, init_project_packaging
from hoverpkg.packaging.formats import host_arch

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(sys.platform != "linux", reason="deb packaging only works on linux"),
    pytest.mark.skipif(shutil.which("dpkg-deb") is None, reason="dpkg-deb not installed"),
]


@pytest.fixture
def authored_project(hover_project):
    pubspec = hover_project / "pubspec.yaml"
    pubspec.write_text(pubspec.read_text().replace("author: ''", "author: jane"))
    return hover_project


class TestRealDpkgDeb:
    """Build a real .deb from the fake project."""

    def test_build_deb(self, authored_project, staging_root):
        """Test that dpkg-deb produces a package with our control file."""
        init_project_packaging(authored_project, "linux-deb")

        result = build_project_package(authored_project, "linux-deb")

        assert result.package_path.name == f"myapp_{host_arch()}.deb"
        assert list(staging_root.iterdir()) == []

        fields = subprocess.run(
            ["dpkg-deb", "--field", str(result.package_path), "Package", "Version"],
            capture_output=True,
            text=True,
            check=True,
        ).stdout
        assert "Package: myapp" in fields
        assert "Version: 1.2.3" in fields

        contents = subprocess.run(
            ["dpkg-deb", "--contents", str(result.package_path)],
            capture_output=True,
            text=True,
            check=True,
        ).stdout
        assert "./usr/lib/myapp/myapp" in contents
        assert "./usr/bin/myapp" in contents
        assert "./usr/share/applications/myapp.desktop" in contents
