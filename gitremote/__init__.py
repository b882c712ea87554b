"""
open-git-remote-url

Print the remote URL of a git repository as a clickable terminal link and
open it with the platform's default handler.
"""

__version__ = "1.0.0"

from .environment import (
    OSFamily,
    EnvironmentDescriptor,
    capture_environment,
)
from .terminal import (
    Terminal,
    ColorMode,
    LinkMode,
    detect_link_support,
    render_link,
    hyperlinks_enabled,
)
from .opener import LaunchSpec, resolve_launch_spec, launch, open_url
from .git import get_remote_url
from .config import Config
from .logger import Logger, LogLevel, get_logger
from .exceptions import (
    GitRemoteException,
    NoOpenerAvailableException,
    LaunchFailedException,
)

__all__ = [
    "OSFamily",
    "EnvironmentDescriptor",
    "capture_environment",
    "Terminal",
    "ColorMode",
    "LinkMode",
    "detect_link_support",
    "render_link",
    "hyperlinks_enabled",
    "LaunchSpec",
    "resolve_launch_spec",
    "launch",
    "open_url",
    "get_remote_url",
    "Config",
    "Logger",
    "LogLevel",
    "get_logger",
    "GitRemoteException",
    "NoOpenerAvailableException",
    "LaunchFailedException",
]
