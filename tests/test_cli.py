"""
Tests for hoverpkg.cli module.

Tests the command-line surface including:
- Exit codes for success and failure
- "hover:" prefixed diagnostics on stderr
- Argument validation
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from hoverpkg.cli import main

pytestmark = pytest.mark.unit


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    return exc.value.code


class TestInitPackagingCommand:
    """Tests for 'init-packaging'."""

    def test_success(self, hover_project, linux_host, capsys):
        """Test exit code 0 and the completion notice."""
        code = _run(["--project-dir", str(hover_project), "init-packaging", "linux-snap"])

        out = capsys.readouterr().out
        assert code == 0
        assert "hover: go/packaging/linux-snap has been created." in out
        assert (hover_project / "go" / "packaging" / "linux-snap").is_dir()

    def test_already_initialized(self, hover_project, linux_host, capsys):
        """Test exit code 1 with a prefixed diagnostic."""
        _run(["--project-dir", str(hover_project), "init-packaging", "linux-snap"])
        capsys.readouterr()

        code = _run(["--project-dir", str(hover_project), "init-packaging", "linux-snap"])

        err = capsys.readouterr().err
        assert code == 1
        assert err.startswith("hover: A file or directory named `linux-snap` already exists.")

    def test_wrong_os(self, hover_project, darwin_host, capsys):
        """Test the platform diagnostic."""
        code = _run(["--project-dir", str(hover_project), "init-packaging", "linux-deb"])

        assert code == 1
        assert "hover: linux-deb only works on linux" in capsys.readouterr().err

    def test_warning_for_missing_author(self, hover_project, linux_host, capsys):
        """Test the author fallback warnings are shown."""
        with patch("hoverpkg.packaging.deb.getpass.getuser", return_value="builder"):
            code = _run(
                ["--project-dir", str(hover_project), "init-packaging", "linux-deb"]
            )

        err = capsys.readouterr().err
        assert code == 0
        assert "hover: Missing author field in pubspec.yaml" in err
        assert "hover: Using this username from system instead: builder" in err

    def test_unknown_format_rejected_by_parser(self, hover_project):
        """Test that argparse rejects formats without a recipe."""
        code = _run(["--project-dir", str(hover_project), "init-packaging", "windows-msi"])

        assert code == 2


class TestBuildCommand:
    """Tests for 'build'."""

    def test_success(self, hover_project, linux_host, staging_root, fake_packager, capsys):
        """Test a build run from the project directory."""
        _run(["--project-dir", str(hover_project), "init-packaging", "linux-snap"])

        with patch(
            "hoverpkg.packaging.packager.shutil.which", return_value="/snap/bin/snapcraft"
        ), patch(
            "hoverpkg.packaging.packager.subprocess.run",
            side_effect=fake_packager(lambda cmd: "myapp_1.2.3_amd64.snap"),
        ):
            code = _run(["--project-dir", str(hover_project), "build", "linux-snap"])

        out = capsys.readouterr().out
        assert code == 0
        assert "hover: Packaging snap in " in out
        assert "hover: Successfully packaged linux-snap" in out

    def test_not_initialized(self, hover_project, linux_host, staging_root, capsys):
        """Test the init hint for an uninitialized format."""
        code = _run(["--project-dir", str(hover_project), "build", "linux-deb"])

        err = capsys.readouterr().err
        assert code == 1
        assert (
            "hover: linux-deb is not initialized for packaging. "
            "Please run `hover init-packaging linux-deb` first." in err
        )
        assert list(staging_root.iterdir()) == []

    def test_missing_packager(self, hover_project, linux_host, staging_root, capsys):
        """Test non-zero exit and install hint when dpkg-deb is missing."""
        with patch("hoverpkg.packaging.deb.getpass.getuser", return_value="builder"):
            _run(["--project-dir", str(hover_project), "init-packaging", "linux-deb"])

        with patch("hoverpkg.packaging.packager.shutil.which", return_value=None):
            code = _run(["--project-dir", str(hover_project), "build", "linux-deb"])

        assert code == 1
        assert "hover: Failed to lookup `dpkg-deb` executable." in capsys.readouterr().err
        assert list(staging_root.iterdir()) == []

    def test_verbose_prints_traceback(self, tmp_path, linux_host, capsys):
        """Test that --verbose adds the traceback to the diagnostic."""
        code = _run(["--project-dir", str(tmp_path), "build", "linux-deb", "--verbose"])

        err = capsys.readouterr().err
        assert code == 1
        assert "hover: pubspec.yaml not found" in err
        assert "Traceback" in err
