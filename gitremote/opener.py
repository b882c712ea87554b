"""
Open a URL with the platform's default handler

Opener selection is an ordered list of rules; the first rule whose
predicate matches the environment builds the LaunchSpec. The WSL rule
must stay ahead of the generic POSIX rule.
"""

import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .environment import EnvironmentDescriptor, OSFamily
from .exceptions import LaunchFailedException, NoOpenerAvailableException
from .logger import get_logger


MACOS_OPEN = "open"
WSL_POWERSHELL = "/mnt/c/Windows/System32/WindowsPowerShell/v1.0/powershell.exe"
WINDOWS_CMD = "cmd"

# Windows process creation flags
DETACHED_PROCESS = 0x00000008
CREATE_NEW_PROCESS_GROUP = 0x00000200


@dataclass(frozen=True)
class LaunchSpec:
    """One external process invocation"""
    executable: str
    args: Tuple[str, ...]
    verbatim: bool = False

    @property
    def command_line(self) -> str:
        """Command line passed unchanged to the OS for verbatim specs"""
        return ' '.join((self.executable,) + self.args)


def quote_for_cmd(url: str) -> str:
    """
    Wrap a URL in double quotes for cmd.exe

    Embedded double quotes are percent-encoded so the URL cannot close
    its own quoting and inject further commands.
    """
    return '"' + url.replace('"', '%22') + '"'


def _macos_spec(env: EnvironmentDescriptor, url: str) -> LaunchSpec:
    return LaunchSpec(MACOS_OPEN, (url,))


def _wsl_spec(env: EnvironmentDescriptor, url: str) -> LaunchSpec:
    # PowerShell runs its joined arguments as a command; the URL is not quoted
    return LaunchSpec(WSL_POWERSHELL, ("Start", url))


def _windows_spec(env: EnvironmentDescriptor, url: str) -> LaunchSpec:
    # Start "" /b "<url>": empty window title, no new console
    return LaunchSpec(
        WINDOWS_CMD,
        ("/s", "/c", "Start", '""', "/b", quote_for_cmd(url)),
        verbatim=True,
    )


def _helper_spec(env: EnvironmentDescriptor, url: str) -> LaunchSpec:
    return LaunchSpec(env.helper_path, (url,))


Rule = Tuple[str,
             Callable[[EnvironmentDescriptor], bool],
             Callable[[EnvironmentDescriptor, str], LaunchSpec]]

RULES: List[Rule] = [
    ("macos", lambda env: env.os_family is OSFamily.DARWIN, _macos_spec),
    ("wsl", lambda env: env.is_wsl, _wsl_spec),
    ("windows", lambda env: env.os_family is OSFamily.WINDOWS, _windows_spec),
    ("xdg-open",
     lambda env: env.os_family is OSFamily.POSIX and bool(env.helper_path),
     _helper_spec),
]


def resolve_launch_spec(env: EnvironmentDescriptor, url: str) -> Optional[LaunchSpec]:
    """
    Pick the opener for ``env``

    Args:
        env: Captured environment
        url: URL to open

    Returns:
        LaunchSpec from the first matching rule, or None if no rule matches
    """
    logger = get_logger()

    for name, matches, build in RULES:
        if matches(env):
            spec = build(env, url)
            logger.debug("Opener rule '%s' selected %s", name, spec.executable)
            return spec

    logger.debug("No opener rule matched %s", env)
    return None


def launch(spec: LaunchSpec) -> None:
    """
    Start the opener detached and forget about it

    The child gets its own session (process group on Windows) and no
    standard streams, so it outlives this process. It is never waited on.

    Raises:
        LaunchFailedException: If the process cannot be created
    """
    kwargs = {
        'stdin': subprocess.DEVNULL,
        'stdout': subprocess.DEVNULL,
        'stderr': subprocess.DEVNULL,
        'close_fds': True,
    }
    if sys.platform == "win32":
        kwargs['creationflags'] = DETACHED_PROCESS | CREATE_NEW_PROCESS_GROUP
    else:
        kwargs['start_new_session'] = True

    command = spec.command_line if spec.verbatim else [spec.executable, *spec.args]

    try:
        subprocess.Popen(command, **kwargs)
    except OSError as e:
        raise LaunchFailedException(spec.executable, e) from e

    get_logger().verbose("Launched %s", command)


def open_url(url: str, env: EnvironmentDescriptor) -> LaunchSpec:
    """
    Open ``url`` with the opener selected for ``env``

    Returns:
        The LaunchSpec that was started

    Raises:
        NoOpenerAvailableException: If no opener is known for ``env``
        LaunchFailedException: If the opener cannot be started
    """
    spec = resolve_launch_spec(env, url)
    if spec is None:
        raise NoOpenerAvailableException(url)

    launch(spec)
    return spec
