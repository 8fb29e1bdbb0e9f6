"""Base class for data sources with dependency injection."""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from mvvmd.core.container import Container, get_container
from mvvmd.core.protocols import DataAccessObject, DataSourceState


class BaseDataSource(ABC):
    """Abstract base class for data sources with dependency injection.

    Constructible without arguments so a DataManager can build it; the
    process-wide container is used when none is given.
    """

    # Subclasses must define these
    data_source_id: str
    description: str = ""

    def __init__(self, container: Container | None = None):
        """Initialize with dependency container."""
        self.container = container or get_container()
        config = self.container.get_config()
        if config.has_source_config(self.data_source_id):
            self.config = config.get_source_config(self.data_source_id)
        else:
            self.config = {}
        self.logger = self.container.get_logger(f"sources.{self.data_source_id}")
        self.description = self.config.get('description', self.description)
        self._params = {str(k): str(v) for k, v in (self.config.get('params') or {}).items()}
        self._state = DataSourceState.INITIALIZED

    @property
    def state(self) -> DataSourceState:
        return self._state

    @property
    def params(self) -> dict[str, str]:
        """Snapshot of the configured source parameters."""
        return self._params.copy()

    def set_state(self, state: DataSourceState) -> None:
        if state is not self._state:
            self.logger.info(f"{self.data_source_id}: {self._state.value} -> {state.value}")
            self._state = state

    def get_services(self) -> dict[str, Any]:
        """Service id to backing-resource mapping from configuration."""
        return dict(self.config.get('services') or {})

    @abstractmethod
    def create_data_access_object(self, service_id: str,
                                  params: Mapping[str, str]) -> DataAccessObject | None:
        """Create a DAO for one of this source's services.

        Args:
            service_id: Service name, the part after the dot in a DAO id.
            params: Parameters bound to the DAO.

        Returns:
            The DAO, or None if the service is unknown.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(id={self.data_source_id}, state={self._state.value})>"
