"""
Listening-port snapshot parsing and used/free set computation
"""
import logging
from typing import Iterable, List, Optional, Set

from .config import Config
from .factory import SnapshotSourceFactory
from .models import Mode, PortRange, Protocol, MAX_PORT
from .snapshot.base import SnapshotSource
from .utils import range_for_port

logger = logging.getLogger(__name__)

# Local address column of `ss -H` output, 0-indexed
LOCAL_ADDRESS_FIELD = 3

def parse_port(local_address: str) -> Optional[int]:
    """
    Extract the port from a `<host>:<port>` local address

    The host part may itself contain colons (IPv6), so the split happens
    on the last one.

    Returns:
        Port number, or None if the field has no valid 16-bit port
    """
    port_str = local_address.rsplit(':', 1)[-1]
    if not (port_str.isascii() and port_str.isdigit()):
        return None
    port = int(port_str)
    if port > MAX_PORT:
        return None
    return port

def parse_listening_ports(lines: Iterable[str], port_range: PortRange) -> Set[int]:
    """
    Parse snapshot lines into the set of listening ports inside a range

    Lines that are not socket records and addresses without a usable
    port are skipped.

    Args:
        lines: Snapshot text split into lines
        port_range: Range to keep ports from

    Returns:
        Unordered set of ports
    """
    ports = set()
    for line in lines:
        parts = line.split()
        if len(parts) <= LOCAL_ADDRESS_FIELD:
            continue

        local = parts[LOCAL_ADDRESS_FIELD]
        port = parse_port(local)
        if port is None:
            logger.debug(f"Skipping unparsable local address {local!r}")
            continue

        if port_range.contains(port):
            ports.add(port)
    return ports

def complement(used: Set[int], port_range: PortRange) -> List[int]:
    """Ascending list of ports in range that are not in used"""
    return [port for port in port_range if port not in used]

def _or_none(ports: List[int]) -> Optional[List[int]]:
    return ports or None

class PortStateQuery:
    """Point-in-time view of listening and free ports for one host"""

    def __init__(self, source: SnapshotSource):
        self.source = source

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> 'PortStateQuery':
        """
        Create a query using the configured snapshot source

        Args:
            config: Configuration object (loaded from disk if None)

        Raises:
            ConfigError: If configuration cannot be loaded
            ValueError: If the configured source is not supported
        """
        if config is None:
            config = Config.load()
        return cls(SnapshotSourceFactory.create(config=config))

    def listening_ports(self, protocol: Protocol, port_range: PortRange) -> Set[int]:
        """Take a fresh snapshot and return its listening ports within range"""
        text = self.source.snapshot(protocol)
        ports = parse_listening_ports(text.split("\n"), port_range)
        logger.debug(
            f"{len(ports)} {protocol.name} ports listening in {port_range.label} range"
        )
        return ports

    def used_ports(self, protocol: Protocol, port_range: PortRange) -> Optional[List[int]]:
        """
        Get listening ports in a range

        Returns:
            Ascending list of ports, or None if none are listening

        Raises:
            QueryError: If the snapshot could not be taken
        """
        return _or_none(sorted(self.listening_ports(protocol, port_range)))

    def free_ports(self, protocol: Protocol, port_range: PortRange) -> Optional[List[int]]:
        """
        Get ports in a range that nothing is listening on

        Returns:
            Ascending list of ports, or None if every port is in use

        Raises:
            QueryError: If the snapshot could not be taken
        """
        used = self.listening_ports(protocol, port_range)
        return _or_none(complement(used, port_range))

    def query(self, protocol: Protocol, port_range: PortRange, mode: Mode) -> Optional[List[int]]:
        """Run a used or free query"""
        if mode is Mode.USED:
            return self.used_ports(protocol, port_range)
        return self.free_ports(protocol, port_range)

    def is_port_used(self, protocol: Protocol, port: int) -> bool:
        """Check whether a single port is listening"""
        return port in self.listening_ports(protocol, range_for_port(port))
