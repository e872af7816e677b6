"""
Shared fixtures for Local Ports CLI tests
"""
import pytest

from local_ports_cli.lib.models import Protocol
from local_ports_cli.lib.query import PortStateQuery
from local_ports_cli.lib.snapshot.base import SnapshotSource

TCP_SNAPSHOT = """\
LISTEN 0      4096   127.0.0.53%lo:53        0.0.0.0:*
LISTEN 0      128          0.0.0.0:22        0.0.0.0:*
LISTEN 0      5          127.0.0.1:631       0.0.0.0:*
LISTEN 0      511          0.0.0.0:80        0.0.0.0:*
LISTEN 0      4096            [::]:8080         [::]:*
LISTEN 0      128             [::]:22           [::]:*
LISTEN 0      244        127.0.0.1:5432      0.0.0.0:*
"""

UDP_SNAPSHOT = """\
UNCONN 0      0      127.0.0.53%lo:53        0.0.0.0:*
UNCONN 0      0      0.0.0.0%eth0:68         0.0.0.0:*
UNCONN 0      0            0.0.0.0:5353      0.0.0.0:*
UNCONN 0      0      [fe80::1%eth0]:546         [::]:*
UNCONN 0      0               [::]:5353         [::]:*
"""

class FakeSource(SnapshotSource):
    """Snapshot source returning canned text per protocol"""

    def __init__(self, snapshots=None):
        self.snapshots = snapshots or {}
        self.calls = []

    def snapshot(self, protocol: Protocol) -> str:
        self.calls.append(protocol)
        return self.snapshots.get(protocol, "")

@pytest.fixture
def fake_source():
    """Fake source with realistic TCP and UDP snapshots"""
    return FakeSource({Protocol.TCP: TCP_SNAPSHOT, Protocol.UDP: UDP_SNAPSHOT})

@pytest.fixture
def query(fake_source):
    """Query backed by the fake source"""
    return PortStateQuery(fake_source)

@pytest.fixture
def make_query():
    """Build a query over arbitrary TCP/UDP snapshot text"""
    def _make(tcp: str = "", udp: str = "") -> PortStateQuery:
        return PortStateQuery(FakeSource({Protocol.TCP: tcp, Protocol.UDP: udp}))
    return _make
