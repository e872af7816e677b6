"""
Core library for Local Ports CLI
"""

from .config import Config, ConfigError
from .factory import SnapshotSourceFactory
from .models import Mode, PortRange, Protocol
from .query import PortStateQuery, parse_listening_ports
from .snapshot import (
    SnapshotSource,
    SsSnapshotSource,
    QueryError,
    LaunchFailed,
    NonZeroExit,
    QueryTimeout,
)
from .ports import (
    privileged_tcp_used,
    privileged_tcp_free,
    unprivileged_tcp_used,
    unprivileged_tcp_free,
    privileged_udp_used,
    privileged_udp_free,
    unprivileged_udp_used,
    unprivileged_udp_free,
)

# Import utils module, not individual functions
import local_ports_cli.lib.utils as utils

__all__ = [
    "Config",
    "ConfigError",
    "SnapshotSourceFactory",
    "Mode",
    "PortRange",
    "Protocol",
    "PortStateQuery",
    "parse_listening_ports",
    "SnapshotSource",
    "SsSnapshotSource",
    "QueryError",
    "LaunchFailed",
    "NonZeroExit",
    "QueryTimeout",
    "privileged_tcp_used",
    "privileged_tcp_free",
    "unprivileged_tcp_used",
    "unprivileged_tcp_free",
    "privileged_udp_used",
    "privileged_udp_free",
    "unprivileged_udp_used",
    "unprivileged_udp_free",
    "utils"
]
