"""
Read the remote URL of the current git repository
"""

import subprocess
from typing import Optional

from .logger import get_logger


REMOTE_NAME = "origin"


def get_remote_url(cwd: Optional[str] = None) -> Optional[str]:
    """
    Get the URL of the ``origin`` remote

    Args:
        cwd: Directory to run git in (defaults to the current directory)

    Returns:
        First non-blank line printed by git, or None if git failed or
        printed nothing
    """
    logger = get_logger()

    try:
        result = subprocess.run(
            ['git', 'remote', 'get-url', REMOTE_NAME],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.verbose("git remote get-url failed: %s", e)
        return None

    for line in result.stdout.splitlines():
        if line.strip():
            return line.strip()

    return None
