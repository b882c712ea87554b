"""
Exceptions raised while opening a git remote URL
"""


class GitRemoteException(Exception):
    """Base exception for open-git-remote-url"""
    pass


class NoOpenerAvailableException(GitRemoteException):
    """No opener program is known for the current environment"""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No Method Available For Opening {url}")


class LaunchFailedException(GitRemoteException):
    """The opener program could not be started"""

    def __init__(self, executable: str, cause: Exception):
        self.executable = executable
        self.cause = cause
        super().__init__(f"Failed to start {executable}: {cause}")
