"""
Configuration management for Local Ports CLI
"""
import math
import os
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import yaml

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

CONFIG_DIR = Path("~/.config/local-ports").expanduser()
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_TIMEOUT = 30.0

@dataclass
class Config:
    """Configuration data"""
    # Snapshot source settings
    source: str = "ss"
    ss_binary: str = "ss"
    timeout: Optional[float] = DEFAULT_TIMEOUT  # seconds, None waits forever

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from file, falling back to defaults

        Args:
            path: Config file to read (defaults to CONFIG_FILE)

        Returns:
            Config object with environment overrides applied

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values
        """
        path = path or CONFIG_FILE
        data = {}

        if path.exists():
            try:
                with open(path) as f:
                    data = yaml.safe_load(f) or {}
            except OSError as e:
                raise ConfigError(f"Cannot read configuration file {path}: {e.strerror or e}") from e
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid configuration file {path}: {e}") from e

            if not isinstance(data, dict):
                raise ConfigError(f"Invalid configuration file {path}: expected a mapping")

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(data) - known)
            if unknown:
                raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
        else:
            logger.debug(f"No configuration file at {path}, using defaults")

        # Override with environment variables if they exist
        env_source = os.getenv("LOCAL_PORTS_SOURCE")
        env_binary = os.getenv("LOCAL_PORTS_SS_BINARY")
        env_timeout = os.getenv("LOCAL_PORTS_TIMEOUT")

        if env_source:
            data['source'] = env_source
        if env_binary:
            data['ss_binary'] = env_binary
        if env_timeout is not None:
            data['timeout'] = env_timeout

        for key in ('source', 'ss_binary'):
            if key in data and not (isinstance(data[key], str) and data[key]):
                raise ConfigError(f"Invalid {key}: {data[key]!r} (expected a non-empty string)")

        if 'timeout' in data:
            data['timeout'] = parse_timeout(data['timeout'])

        return cls(**data)

    def save(self, path: Optional[Path] = None) -> Path:
        """Save configuration to file"""
        path = path or CONFIG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            yaml.safe_dump(asdict(self), f)

        return path

def parse_timeout(value) -> Optional[float]:
    """Normalize a timeout value; empty or zero disables the bounded wait"""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ConfigError(f"Invalid timeout: {value!r}")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid timeout: {value!r}") from e
    if not math.isfinite(timeout):
        raise ConfigError(f"Invalid timeout: {value!r}")
    if timeout < 0:
        raise ConfigError(f"Timeout must not be negative: {value!r}")
    return timeout or None

class ConfigError(Exception):
    """Configuration error"""
    pass
