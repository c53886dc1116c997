"""Tests for CLI argument parsing and output."""

import json
import logging
from unittest.mock import patch

import pytest

from osdistro import __version__
from osdistro.cli import build_distribution, main, parse_args
from conftest import CENTOS_RELEASE, UBUNTU_LSB_RELEASE, UBUNTU_OS_RELEASE


@pytest.fixture
def os_release_path(write_file):
    return write_file("os-release", UBUNTU_OS_RELEASE)


class TestParseArgs:
    """Test parse_args() function."""

    def test_defaults(self):
        """No arguments selects the text summary with every source."""
        args = parse_args([])
        assert args.as_json is False
        assert args.show_sources is False
        assert args.best is False
        assert args.tui is False
        assert args.os_release_file == ""
        assert args.distro_release_file == ""
        assert args.include_lsb is True
        assert args.include_uname is True
        assert args.debug is False

    def test_short_json_flag(self):
        """-j is the same as --json."""
        assert parse_args(["-j"]).as_json is True

    def test_source_flags(self, os_release_path, write_file):
        """Source selection flags are carried through."""
        release = write_file("centos-release", CENTOS_RELEASE)
        args = parse_args([
            "--os-release-file", os_release_path,
            "--distro-release-file", release,
            "--no-lsb",
            "--no-uname",
            "--best",
        ])
        assert args.os_release_file == os_release_path
        assert args.distro_release_file == release
        assert args.include_lsb is False
        assert args.include_uname is False
        assert args.best is True

    def test_missing_os_release_file_exits(self, tmp_path, capsys):
        """A nonexistent explicit path is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--os-release-file", str(tmp_path / "nope")])
        assert exc_info.value.code == 2
        assert "no such file" in capsys.readouterr().err

    def test_missing_distro_release_file_exits(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--distro-release-file", str(tmp_path / "nope-release")])
        assert exc_info.value.code == 2

    def test_version(self, capsys):
        """--version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_build_distribution(self, os_release_path):
        """The resolver is configured from the arguments."""
        dist = build_distribution(parse_args(["--os-release-file", os_release_path, "--no-lsb"]))
        assert dist.os_release_file == os_release_path
        assert dist.include_lsb is False
        assert dist.include_uname is True


class TestMain:
    """Test main() output modes."""

    @pytest.fixture(autouse=True)
    def commands(self, conf_dir, fake_commands):
        fake_commands.outputs["lsb_release"] = UBUNTU_LSB_RELEASE
        return fake_commands

    def test_summary(self, os_release_path, capsys):
        """Default output is name, version and codename."""
        main(["--os-release-file", os_release_path])
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "Name: Ubuntu 18.04.3 LTS",
            "Version: 18.04 (Bionic Beaver)",
            "Codename: Bionic Beaver",
        ]

    def test_summary_best(self, os_release_path, capsys):
        main(["--os-release-file", os_release_path, "--best"])
        assert "Version: 18.04.3 (Bionic Beaver)" in capsys.readouterr().out

    def test_json(self, os_release_path, capsys):
        """--json prints info() as JSON."""
        main(["--json", "--os-release-file", os_release_path])
        data = json.loads(capsys.readouterr().out)
        assert data == {
            "id": "ubuntu",
            "version": "18.04",
            "like": "debian",
            "codename": "Bionic Beaver",
            "version_parts": {"major": "18", "minor": "04", "build_number": ""},
        }

    def test_json_sources(self, os_release_path, capsys):
        """--json --sources prints every raw attribute map."""
        main(["--json", "--sources", "--os-release-file", os_release_path])
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"os_release", "lsb_release", "distro_release", "uname"}
        assert data["lsb_release"]["codename"] == "bionic"
        assert data["uname"] == {}

    def test_sources_text(self, os_release_path, capsys):
        """--sources prints a section per source."""
        main(["--sources", "--os-release-file", os_release_path])
        out = capsys.readouterr().out
        assert f"os-release file: {os_release_path}" in out
        assert "distro release file: (none found)" in out
        assert "  distributor_id: Ubuntu" in out
        assert "  (no data)" in out

    def test_no_lsb(self, commands, capsys, conf_dir):
        """--no-lsb never runs lsb_release."""
        main(["--json", "--no-lsb"])
        invoked = [call.args[0][0] for call in commands.call_args_list]
        assert "lsb_release" not in invoked
        assert json.loads(capsys.readouterr().out)["id"] == ""

    def test_debug_logs_to_stderr(self, os_release_path):
        """--debug configures logging."""
        with patch("osdistro.cli.logging.basicConfig") as mock_config:
            main(["--debug", "--os-release-file", os_release_path])
        assert mock_config.call_args.kwargs["level"] == logging.DEBUG

    def test_tui_dispatch(self, os_release_path):
        """--tui launches the viewer instead of printing."""
        with patch("osdistro.cli.run_tui") as mock_tui:
            main(["--tui", "--best", "--os-release-file", os_release_path])
        dist = mock_tui.call_args.args[0]
        assert dist.os_release_file == os_release_path
        assert mock_tui.call_args.kwargs["best"] is True
