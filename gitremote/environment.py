"""
Snapshot of the runtime environment used to pick a link style and an opener
"""

import os
import platform
import shutil
import sys
from dataclasses import dataclass, replace
from enum import Enum
from typing import Mapping, Optional

from .logger import get_logger


# Kernel release marker of the Windows Subsystem for Linux
WSL_RELEASE_MARKER = "microsoft"

# Desktop helper looked up on PATH for generic POSIX hosts
POSIX_OPEN_HELPER = "xdg-open"


class OSFamily(Enum):
    """Operating system families the opener distinguishes"""
    DARWIN = "darwin"
    WINDOWS = "windows"
    POSIX = "posix"


@dataclass(frozen=True)
class EnvironmentDescriptor:
    """Immutable view of everything the core reads from the host"""
    os_family: OSFamily
    kernel_release: str = ""
    term_program: Optional[str] = None
    wt_session: bool = False
    helper_path: Optional[str] = None

    @property
    def is_wsl(self) -> bool:
        """True for a POSIX host running under Windows Subsystem for Linux"""
        return (
            self.os_family is OSFamily.POSIX
            and WSL_RELEASE_MARKER in self.kernel_release.lower()
        )


def detect_os_family(platform_name: str) -> OSFamily:
    """Map a ``sys.platform`` value to an OSFamily"""
    if platform_name == "darwin":
        return OSFamily.DARWIN
    if platform_name == "win32":
        return OSFamily.WINDOWS
    return OSFamily.POSIX


def find_open_helper() -> Optional[str]:
    """Locate the POSIX desktop open helper on PATH"""
    return shutil.which(POSIX_OPEN_HELPER)


def capture_environment(environ: Optional[Mapping[str, str]] = None,
                        platform_name: Optional[str] = None,
                        kernel_release: Optional[str] = None) -> EnvironmentDescriptor:
    """
    Capture the current environment once

    The PATH lookup for the open helper only runs on generic POSIX hosts
    that are not WSL, since no other opener rule consults it.

    Args:
        environ: Environment variables (defaults to ``os.environ``)
        platform_name: ``sys.platform`` override
        kernel_release: ``platform.release()`` override

    Returns:
        EnvironmentDescriptor snapshot
    """
    logger = get_logger()

    if environ is None:
        environ = os.environ
    if platform_name is None:
        platform_name = sys.platform
    if kernel_release is None:
        kernel_release = platform.release()

    os_family = detect_os_family(platform_name)
    descriptor = EnvironmentDescriptor(
        os_family=os_family,
        kernel_release=kernel_release,
        term_program=environ.get("TERM_PROGRAM") or None,
        wt_session=bool(environ.get("WT_SESSION")),
    )

    if os_family is OSFamily.POSIX and not descriptor.is_wsl:
        helper_path = find_open_helper()
        logger.debug("%s lookup: %s", POSIX_OPEN_HELPER, helper_path)
        if helper_path:
            descriptor = replace(descriptor, helper_path=helper_path)

    logger.verbose("Captured environment: %s", descriptor)
    return descriptor
