"""
Configuration management for open-git-remote-url
"""

import os
import json
from pathlib import Path
from typing import Optional, Dict, Any


CONFIG_DIR_NAME = "open-git-remote-url"


class Config:
    """Configuration file manager"""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = self.get_config_dir()
        self.config_dir = config_dir
        self.config_file = config_dir / "config.json"
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def get_config_dir() -> Path:
        """Get configuration directory"""
        # GITREMOTE_HOME overrides everything
        home = os.environ.get("GITREMOTE_HOME")
        if home:
            return Path(home)

        if "XDG_CONFIG_HOME" in os.environ:
            config_home = Path(os.environ["XDG_CONFIG_HOME"])
        else:
            config_home = Path.home() / ".config"
        return config_home / CONFIG_DIR_NAME

    def _load(self) -> Dict[str, Any]:
        """Load configuration from file"""
        if self._config is not None:
            return self._config

        if not self.config_file.exists():
            self._config = {}
            return self._config

        try:
            with open(self.config_file, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError):
            loaded = {}

        self._config = loaded if isinstance(loaded, dict) else {}
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value"""
        config = self._load()
        return config.get(key, default)

    def _get_mode(self, env_var: str, key: str) -> str:
        """Get an auto/always/never mode: environment first, then config file"""
        value = os.environ.get(env_var) or self.get(key)
        # Anything but a string in the file means "auto"
        return value if isinstance(value, str) and value else "auto"

    def get_link_mode(self) -> str:
        """Get hyperlink mode"""
        return self._get_mode("GITREMOTE_LINK", "link")

    def get_color_mode(self) -> str:
        """Get color mode"""
        return self._get_mode("GITREMOTE_COLOR", "color")

    @staticmethod
    def get_log_level() -> str:
        """Get log level"""
        return os.environ.get("GITREMOTE_LOG_LEVEL", "ERROR").upper()

