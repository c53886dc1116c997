"""Tests for configuration read from the environment."""

import importlib

import pytest

from osdistro import config


class TestReadCommandTimeout:
    """Test read_command_timeout() function."""

    def test_default(self):
        """Unset variable yields the default."""
        assert config.read_command_timeout({}) == config.DEFAULT_COMMAND_TIMEOUT

    def test_override(self):
        """A numeric value is used as seconds."""
        assert config.read_command_timeout({"OSDISTRO_COMMAND_TIMEOUT": "2.5"}) == 2.5

    @pytest.mark.parametrize("raw", ["", "soon", "10s"])
    def test_malformed_falls_back(self, raw):
        """A malformed value yields the default instead of raising."""
        assert config.read_command_timeout({"OSDISTRO_COMMAND_TIMEOUT": raw}) == 10.0


class TestModuleImport:
    """Importing the configuration never fails on bad environment values."""

    @pytest.fixture
    def reload_config(self, monkeypatch):
        yield lambda: importlib.reload(config)
        monkeypatch.undo()
        importlib.reload(config)

    def test_bad_timeout_env(self, monkeypatch, reload_config):
        """A malformed OSDISTRO_COMMAND_TIMEOUT does not break import."""
        monkeypatch.setenv("OSDISTRO_COMMAND_TIMEOUT", "not-a-number")
        module = reload_config()
        assert module.COMMAND_TIMEOUT == 10.0


class TestGetLogPath:
    """Test get_log_path() function."""

    def test_uses_xdg_state_home(self, monkeypatch, tmp_path):
        """Log file lives in $XDG_STATE_HOME/osdistro, which is created."""
        monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path))
        path = config.get_log_path()
        assert path == tmp_path / "osdistro" / "osdistro.log"
        assert path.parent.is_dir()
