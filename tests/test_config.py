"""
Tests for configuration management
"""

import pytest
import json
import os
from pathlib import Path
from unittest.mock import patch

from gitremote.config import Config


class TestConfig:
    """Test configuration management"""

    @pytest.fixture
    def temp_config(self, tmp_path):
        """Create temporary config directory"""
        config_dir = tmp_path / "gitremote_test"
        return Config(config_dir)

    @staticmethod
    def write(config, content):
        config.config_dir.mkdir(parents=True, exist_ok=True)
        config.config_file.write_text(content)

    def test_config_get_default(self, temp_config):
        """Test getting config with default"""
        assert temp_config.get("nonexistent", "default") == "default"

    def test_config_get_from_file(self, temp_config):
        """Values are read from config.json"""
        self.write(temp_config, json.dumps({"link": "never"}))
        assert temp_config.get("link") == "never"

    def test_corrupt_file_reads_empty(self, temp_config):
        """A corrupt config file reads as empty"""
        self.write(temp_config, "{not json")
        assert temp_config.get("link", "auto") == "auto"

    def test_non_object_file_reads_empty(self, temp_config):
        """A JSON file that is not an object reads as empty"""
        self.write(temp_config, '["always"]')
        assert temp_config.get("link") is None

    @patch.dict(os.environ, {}, clear=True)
    def test_link_mode_from_file(self, temp_config):
        """Link mode falls back to the config file"""
        assert temp_config.get_link_mode() == "auto"
        self.write(temp_config, json.dumps({"link": "never"}))
        assert Config(temp_config.config_dir).get_link_mode() == "never"

    @pytest.mark.parametrize('value', [True, 1, None, ["always"], {"mode": "always"}, ""])
    @patch.dict(os.environ, {}, clear=True)
    def test_non_string_mode_is_auto(self, temp_config, value):
        """Modes that are not strings fall back to auto"""
        self.write(temp_config, json.dumps({"link": value, "color": value}))
        assert temp_config.get_link_mode() == "auto"
        assert temp_config.get_color_mode() == "auto"

    @patch.dict(os.environ, {"GITREMOTE_LINK": "always"}, clear=True)
    def test_link_mode_env_overrides_file(self, temp_config):
        """Environment wins over the config file"""
        self.write(temp_config, json.dumps({"link": "never"}))
        assert temp_config.get_link_mode() == "always"

    @patch.dict(os.environ, {"GITREMOTE_COLOR": "never"}, clear=True)
    def test_color_mode_env(self, temp_config):
        assert temp_config.get_color_mode() == "never"

    @patch.dict(os.environ, {"GITREMOTE_HOME": "/opt/gitremote"}, clear=True)
    def test_config_dir_home_override(self):
        assert Config.get_config_dir() == Path("/opt/gitremote")

    @patch.dict(os.environ, {"XDG_CONFIG_HOME": "/xdg"}, clear=True)
    def test_config_dir_xdg(self):
        assert Config.get_config_dir() == Path("/xdg/open-git-remote-url")

    @patch.dict(os.environ, {"GITREMOTE_LOG_LEVEL": "debug"}, clear=True)
    def test_log_level(self):
        assert Config.get_log_level() == "DEBUG"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
