"""Registry mapping data source ids to data source classes."""

from typing import Iterable, Type

from mvvmd.core.config import Config
from .base import BaseDataSource


class SourceRegistry:
    """Registry for data source classes."""

    def __init__(self):
        self._sources: dict[str, Type[BaseDataSource]] = {}

    def register(self, source_class: Type[BaseDataSource]) -> Type[BaseDataSource]:
        """Register a data source class. Can be used as a decorator.

        Args:
            source_class: The data source class to register.

        Returns:
            The same class (for decorator usage).
        """
        self._sources[source_class.data_source_id] = source_class
        return source_class

    def get(self, data_source_id: str) -> Type[BaseDataSource] | None:
        """Get a data source class by id."""
        return self._sources.get(data_source_id)

    def get_all(self) -> dict[str, Type[BaseDataSource]]:
        """Get all registered source classes."""
        return self._sources.copy()

    def get_descriptors(self, data_source_ids: Iterable[str]) -> list[Type[BaseDataSource]]:
        """Resolve data source ids to the classes a DataManager is built from.

        Raises:
            KeyError: If an id is not registered.
        """
        descriptors = []
        for data_source_id in data_source_ids:
            source_class = self._sources.get(data_source_id)
            if source_class is None:
                raise KeyError(f"Data source '{data_source_id}' not found in registry")
            descriptors.append(source_class)
        return descriptors

    def get_enabled_descriptors(self, config: Config) -> list[Type[BaseDataSource]]:
        """Classes of all registered data sources enabled in configuration."""
        return [self._sources[name] for name in config.get_enabled_sources()
                if name in self._sources]


# Global registry instance
_registry = SourceRegistry()


def get_registry() -> SourceRegistry:
    """Get the global source registry."""
    return _registry


def register(source_class: Type[BaseDataSource]) -> Type[BaseDataSource]:
    """Decorator to register a data source class."""
    return _registry.register(source_class)
