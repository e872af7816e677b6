"""
Protocol, port range and query mode definitions
"""
from enum import Enum
from typing import Iterator

MIN_PORT = 1
MAX_PORT = 65535


class Protocol(Enum):
    """Transport protocol and the ss selector used to snapshot it"""
    TCP = "tcp"
    UDP = "udp"

    @property
    def flags(self) -> str:
        """ss flags: listening, numeric, no header"""
        return "-tlnH" if self is Protocol.TCP else "-ulnH"


class PortRange(Enum):
    """Fixed, non-overlapping closed port intervals"""
    PRIVILEGED = (1, 1023)
    UNPRIVILEGED = (1024, 65535)

    @property
    def low(self) -> int:
        return self.value[0]

    @property
    def high(self) -> int:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.name.lower()

    def contains(self, port: int) -> bool:
        """Check whether port lies inside this range, bounds inclusive"""
        return self.low <= port <= self.high

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.low, self.high + 1))

    def __len__(self) -> int:
        return self.high - self.low + 1


class Mode(Enum):
    """Which view of a snapshot a query returns"""
    USED = "used"
    FREE = "free"
