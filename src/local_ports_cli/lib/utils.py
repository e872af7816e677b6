"""
Utility functions for Local Ports CLI
"""
from typing import Iterable, List, Optional, Tuple

from .models import PortRange, MIN_PORT, MAX_PORT

def validate_port(port: int) -> bool:
    """Validate port number is in valid range"""
    return MIN_PORT <= port <= MAX_PORT

def range_for_port(port: int) -> PortRange:
    """
    Get the fixed range a port belongs to

    Raises:
        ValueError: If the port is outside 1-65535
    """
    if not validate_port(port):
        raise ValueError(f"Invalid port number: {port}")
    if PortRange.PRIVILEGED.contains(port):
        return PortRange.PRIVILEGED
    return PortRange.UNPRIVILEGED

def compress_ports(ports: Optional[Iterable[int]]) -> List[Tuple[int, int]]:
    """
    Collapse ascending ports into consecutive (start, end) runs

    Args:
        ports: Ascending, duplicate-free ports (None is treated as empty)

    Returns:
        List of inclusive runs
    """
    runs: List[Tuple[int, int]] = []
    for port in ports or ():
        if runs and port == runs[-1][1] + 1:
            runs[-1] = (runs[-1][0], port)
        else:
            runs.append((port, port))
    return runs

def format_port_ranges(ports: Optional[Iterable[int]]) -> str:
    """Format ports in compact run notation, e.g. "1-21, 23, 25-1023" """
    return ", ".join(
        str(start) if start == end else f"{start}-{end}"
        for start, end in compress_ports(ports)
    )
