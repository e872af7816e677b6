"""
Base class for host socket-state snapshot sources
"""
from abc import ABC, abstractmethod
from typing import Optional

from ..config import Config
from ..models import Protocol

class SnapshotSource(ABC):
    """Abstract base class for listening-socket snapshot providers"""

    @classmethod
    def from_config(cls, config: Config) -> 'SnapshotSource':
        """Build a source from configuration"""
        return cls()

    @abstractmethod
    def snapshot(self, protocol: Protocol) -> str:
        """
        Take a point-in-time snapshot of listening sockets

        Args:
            protocol: Protocol to report sockets for

        Returns:
            Line-oriented text, one socket per line, with the local
            address as the 4th whitespace-separated field

        Raises:
            LaunchFailed: If the host tool cannot be started
            NonZeroExit: If the host tool reports failure
            QueryTimeout: If the host tool does not finish in time
        """
        pass

class QueryError(Exception):
    """Base exception for snapshot queries"""
    pass

class LaunchFailed(QueryError):
    """The host tool could not be started"""

    def __init__(self, command: str, cause: Optional[OSError] = None):
        self.command = command
        self.cause = cause
        message = f"Failed to launch `{command}`"
        if cause is not None:
            message += f": {cause.strerror or cause}"
        super().__init__(message)

class NonZeroExit(QueryError):
    """The host tool ran but exited with a failure status"""

    def __init__(self, command: str, status: int):
        self.command = command
        self.status = status
        super().__init__(f"`{command}` exited with status {status}")

class QueryTimeout(QueryError):
    """The host tool did not finish within the bounded wait"""

    def __init__(self, command: str, timeout: float):
        self.command = command
        self.timeout = timeout
        super().__init__(f"`{command}` did not finish within {timeout:g}s")
