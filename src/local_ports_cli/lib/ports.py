"""
Public entry points: used/free ports per protocol and range

Each function takes an optional PortStateQuery; when omitted, one is built
from the loaded configuration. All of them return an ascending list of
ports, or None when the query succeeded but the set is empty, and raise
QueryError when the snapshot could not be taken.
"""
from typing import List, Optional

from .models import Mode, PortRange, Protocol
from .query import PortStateQuery

def _run(query: Optional[PortStateQuery], protocol: Protocol,
         port_range: PortRange, mode: Mode) -> Optional[List[int]]:
    if query is None:
        query = PortStateQuery.from_config()
    return query.query(protocol, port_range, mode)

# TCP

def privileged_tcp_used(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Privileged (1-1023) TCP ports in LISTEN state"""
    return _run(query, Protocol.TCP, PortRange.PRIVILEGED, Mode.USED)

def privileged_tcp_free(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Privileged (1-1023) TCP ports nothing listens on"""
    return _run(query, Protocol.TCP, PortRange.PRIVILEGED, Mode.FREE)

def unprivileged_tcp_used(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Unprivileged (1024-65535) TCP ports in LISTEN state"""
    return _run(query, Protocol.TCP, PortRange.UNPRIVILEGED, Mode.USED)

def unprivileged_tcp_free(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Unprivileged (1024-65535) TCP ports nothing listens on"""
    return _run(query, Protocol.TCP, PortRange.UNPRIVILEGED, Mode.FREE)

# UDP

def privileged_udp_used(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Privileged (1-1023) UDP ports with a bound socket"""
    return _run(query, Protocol.UDP, PortRange.PRIVILEGED, Mode.USED)

def privileged_udp_free(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Privileged (1-1023) UDP ports with no bound socket"""
    return _run(query, Protocol.UDP, PortRange.PRIVILEGED, Mode.FREE)

def unprivileged_udp_used(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Unprivileged (1024-65535) UDP ports with a bound socket"""
    return _run(query, Protocol.UDP, PortRange.UNPRIVILEGED, Mode.USED)

def unprivileged_udp_free(query: Optional[PortStateQuery] = None) -> Optional[List[int]]:
    """Unprivileged (1024-65535) UDP ports with no bound socket"""
    return _run(query, Protocol.UDP, PortRange.UNPRIVILEGED, Mode.FREE)
