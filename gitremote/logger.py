"""
Levelled logging to a file in the configuration directory
"""

from pathlib import Path
from datetime import datetime
from enum import IntEnum
from typing import Optional

from .config import Config


LOG_FILE_NAME = "open-git-remote-url.log"


class LogLevel(IntEnum):
    """Log levels"""
    DEBUG = 0
    VERBOSE = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


class Logger:
    """Structured logging system"""

    _instance: Optional['Logger'] = None
    _log_file: Optional[Path] = None
    _log_level: Optional[int] = None

    def __init__(self):
        self.config_dir = self._get_config_dir()

    @classmethod
    def get_instance(cls) -> 'Logger':
        """Get singleton logger instance"""
        if cls._instance is None:
            cls._instance = Logger()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Forget the singleton and cached settings"""
        cls._instance = None
        cls._log_file = None
        cls._log_level = None

    @staticmethod
    def _get_config_dir() -> Path:
        """Get configuration directory"""
        return Config.get_config_dir()

    def get_log_level(self) -> int:
        """Get configured log level"""
        if self._log_level is not None:
            return self._log_level

        level_str = Config.get_log_level()

        try:
            self._log_level = LogLevel[level_str]
        except KeyError:
            # Default: only errors
            self._log_level = LogLevel.ERROR

        return self._log_level

    def get_log_file(self) -> Optional[Path]:
        """Get log file path"""
        if self._log_file is not None:
            return self._log_file

        # Only create log file if logging is enabled
        if self.get_log_level() < LogLevel.ERROR:
            self._log_file = self.config_dir / LOG_FILE_NAME
            self.config_dir.mkdir(parents=True, exist_ok=True, mode=0o700)
            return self._log_file

        return None

    def log(self, level: int, message: str, *args) -> None:
        """
        Log a message if level is enabled

        Args:
            level: Log level (LogLevel enum value)
            message: Message format string
            *args: Format arguments
        """
        if level < self.get_log_level():
            return

        if args:
            try:
                formatted_message = message % args
            except (TypeError, ValueError):
                formatted_message = message
        else:
            formatted_message = message

        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        level_name = LogLevel(level).name
        log_line = f"[{timestamp}] {level_name}: {formatted_message}\n"

        log_file = self.get_log_file()
        if log_file:
            try:
                with open(log_file, 'a') as f:
                    f.write(log_line)
            except OSError:
                # An unwritable log file must not break the command
                pass

    def debug(self, message: str, *args) -> None:
        """Log debug message"""
        self.log(LogLevel.DEBUG, message, *args)

    def verbose(self, message: str, *args) -> None:
        """Log verbose message"""
        self.log(LogLevel.VERBOSE, message, *args)


def get_logger() -> Logger:
    """Get global logger instance"""
    return Logger.get_instance()
