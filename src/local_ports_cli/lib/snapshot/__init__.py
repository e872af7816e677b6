"""
Host socket-state snapshot sources
"""
from .base import (
    SnapshotSource,
    QueryError,
    LaunchFailed,
    NonZeroExit,
    QueryTimeout,
)
from .ss import SsSnapshotSource

__all__ = [
    'SnapshotSource',
    'SsSnapshotSource',
    'QueryError',
    'LaunchFailed',
    'NonZeroExit',
    'QueryTimeout',
]
