"""
Snapshot source backed by the iproute2 `ss` tool
"""
import logging
import subprocess
from typing import List, Optional

from ..config import Config, DEFAULT_TIMEOUT
from ..models import Protocol
from .base import SnapshotSource, LaunchFailed, NonZeroExit, QueryTimeout

logger = logging.getLogger(__name__)

class SsSnapshotSource(SnapshotSource):
    """Runs `ss` directly, without a shell, once per snapshot"""

    def __init__(self, binary: str = "ss", timeout: Optional[float] = DEFAULT_TIMEOUT):
        self.binary = binary
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> 'SsSnapshotSource':
        """Build a source from configuration"""
        return cls(binary=config.ss_binary, timeout=config.timeout)

    def command(self, protocol: Protocol) -> List[str]:
        """Get the argument vector for a protocol"""
        return [self.binary, protocol.flags]

    def snapshot(self, protocol: Protocol) -> str:
        """Run ss and return its stdout, decoded lossily"""
        cmd = self.command(protocol)
        display = " ".join(cmd)
        logger.debug(f"Running {display}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout,
                check=False
            )
        except subprocess.TimeoutExpired as e:
            raise QueryTimeout(display, self.timeout) from e
        except OSError as e:
            raise LaunchFailed(display, e) from e

        if result.returncode != 0:
            raise NonZeroExit(display, result.returncode)

        output = result.stdout or b""
        logger.debug(f"{display} produced {len(output)} bytes")
        return output.decode("utf-8", errors="replace")
