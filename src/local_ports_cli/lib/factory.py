"""
Factory for snapshot source instantiation
"""
from typing import Type, Dict, Optional

from .config import Config
from .snapshot.base import SnapshotSource
from .snapshot.ss import SsSnapshotSource

class SnapshotSourceFactory:
    """Factory for snapshot sources"""

    _sources: Dict[str, Type[SnapshotSource]] = {
        'ss': SsSnapshotSource
    }

    @classmethod
    def create(cls, source_type: Optional[str] = None, config: Optional[Config] = None) -> SnapshotSource:
        """
        Create snapshot source instance

        Args:
            source_type: Source name (if None, uses config.source)
            config: Configuration object (defaults are used if None)

        Returns:
            SnapshotSource instance

        Raises:
            ValueError: If source type is not supported
        """
        config = config or Config()
        if source_type is None:
            source_type = config.source
        if source_type not in cls.get_sources():
            raise ValueError(f"Unsupported snapshot source: {source_type}")
        return cls.get_sources()[source_type].from_config(config)

    @classmethod
    def get_sources(cls) -> Dict[str, Type[SnapshotSource]]:
        """Get available snapshot sources"""
        return cls._sources

    @classmethod
    def register_source(cls, name: str, source_class: Type[SnapshotSource]):
        """Register new snapshot source"""
        cls._sources[name] = source_class
