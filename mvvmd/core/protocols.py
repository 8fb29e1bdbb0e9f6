"""Protocol definitions for the data layer and its dependencies."""

from enum import Enum
from typing import Protocol, Any, Iterator, Mapping, runtime_checkable
from contextlib import contextmanager


class DataSourceState(Enum):
    """Lifecycle state reported by a data source."""

    INITIALIZED = "initialized"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@runtime_checkable
class DataAccessObject(Protocol):
    """Protocol for per-service objects produced by a data source."""

    service_id: str

    def fetch(self, **params: Any) -> Any:
        """Read from the backing service."""
        ...


@runtime_checkable
class DataSource(Protocol):
    """Protocol every data source registered with a DataManager satisfies.

    Implementations must be constructible without arguments. Construction
    may raise, e.g. when the type already has a live single instance.
    """

    @property
    def data_source_id(self) -> str: ...

    @property
    def state(self) -> DataSourceState: ...

    @property
    def params(self) -> Mapping[str, str]: ...

    def create_data_access_object(self, service_id: str,
                                  params: Mapping[str, str]) -> DataAccessObject | None:
        """Create a DAO for `service_id`, or None if the service is unknown."""
        ...


class HttpClient(Protocol):
    """Protocol for HTTP client implementations."""

    def get(self, url: str, params: dict[str, Any] | None = None,
            timeout: int = 30) -> dict[str, Any]:
        """Make a GET request and return JSON response."""
        ...


class DatabaseSessionFactory(Protocol):
    """Protocol for database session factory."""

    @contextmanager
    def get_session(self) -> Iterator[Any]:
        """Get a database session context manager."""
        ...
