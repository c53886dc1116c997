"""Shared fixtures for osdistro tests."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from osdistro import LinuxDistribution

UBUNTU_OS_RELEASE = """\
NAME="Ubuntu"
VERSION="18.04.3 LTS (Bionic Beaver)"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Ubuntu 18.04.3 LTS"
VERSION_ID="18.04"
HOME_URL="https://www.ubuntu.com/"
VERSION_CODENAME=bionic
UBUNTU_CODENAME=bionic
"""

UBUNTU_LSB_RELEASE = [
    "Distributor ID:\tUbuntu",
    "Description:\tUbuntu 18.04.3 LTS",
    "Release:\t18.04",
    "Codename:\tbionic",
]

CENTOS_RELEASE = "CentOS Linux release 7.1.1503 (Core)\n"


@pytest.fixture
def conf_dir(tmp_path, monkeypatch):
    """Empty configuration directory used in place of /etc."""
    etc = tmp_path / "etc"
    etc.mkdir()
    monkeypatch.setattr("osdistro.config.UNIXCONFDIR", str(etc))
    return etc


@pytest.fixture
def no_commands():
    """Pretend neither lsb_release nor uname is installed."""
    with patch("osdistro.sources.run_command", side_effect=FileNotFoundError) as mock_run:
        yield mock_run


@pytest.fixture
def fake_commands():
    """Serve canned stdout for lsb_release/uname.

    Set ``outputs[argv0]`` to a list of lines, or to an exception instance to
    raise. Commands without an entry behave as not installed.
    """
    outputs: dict = {}

    def run(argv):
        result = outputs.get(argv[0], FileNotFoundError(argv[0]))
        if isinstance(result, BaseException):
            raise result
        return list(result)

    with patch("osdistro.sources.run_command", side_effect=run) as mock_run:
        mock_run.outputs = outputs
        yield mock_run


@pytest.fixture
def write_file(tmp_path):
    """Write a text file under tmp_path and return its path as a string."""

    def _write(name: str, content: str) -> str:
        path = Path(tmp_path) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return str(path)

    return _write


@pytest.fixture
def ubuntu(write_file, conf_dir, fake_commands):
    """Resolver over an Ubuntu 18.04 os-release file and lsb_release output."""
    fake_commands.outputs["lsb_release"] = UBUNTU_LSB_RELEASE
    fake_commands.outputs["uname"] = ["Linux 4.15.0-58-generic"]
    return LinuxDistribution(os_release_file=write_file("os-release", UBUNTU_OS_RELEASE))


@pytest.fixture
def called_process_error():
    """Factory for the error raised by a command exiting non-zero."""

    def _error(argv0: str, returncode: int = 1) -> subprocess.CalledProcessError:
        return subprocess.CalledProcessError(returncode, [argv0])

    return _error
