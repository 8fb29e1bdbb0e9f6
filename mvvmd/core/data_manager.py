"""DataManager: construct-once registry of single-instance data sources."""

import logging
from typing import Any, Callable, Mapping, Sequence, TypeVar

from .errors import (
    DataManagerConstructionError,
    DataSourceNotFoundError,
    DataSourceNotUniquelyInstancedError,
    DataSourceTypeConversionError,
    DirectInstantiationError,
    DuplicateDataSourceIDError,
    NoDataSourcesError,
)
from .protocols import DataAccessObject, DataSource
from .single_instance import SingleInstanceError, SingleInstanceStore, get_instance_store

logger = logging.getLogger(__name__)

T = TypeVar('T')

DAO_ID_SEPARATOR = '.'


class DataManager:
    """Registry of data sources, resolved by type or by dotted DAO id.

    Only subclasses can be instantiated. Every data source type passed in is
    constructed exactly once through the single-instance store, which keeps
    ownership of the instances; the manager only holds references to them.
    The registry never changes after construction.
    """

    def __init__(self, data_sources: Sequence[type],
                 instance_store: SingleInstanceStore | None = None):
        if type(self) is DataManager:
            logger.error("ERROR: Do not create direct instances of DataManager, "
                         "instantiate subclasses instead.")
            raise DirectInstantiationError()

        if not data_sources:
            logger.error("ERROR: DataManager cannot initialize without data sources")
            raise NoDataSourcesError()

        self._store = instance_store if instance_store is not None else get_instance_store()
        self._data_sources: dict[str, DataSource] = {}
        self._data_source_types: dict[str, type] = {}

        try:
            self._store.claim(self)
        except SingleInstanceError as e:
            logger.error(f"ERROR: {e}. DataManager not initialized.")
            raise DataManagerConstructionError(str(e)) from e

        created: list[type] = []
        try:
            for data_source_type in data_sources:
                try:
                    data_source = self._store.create(data_source_type)
                except Exception as e:
                    raise DataSourceNotUniquelyInstancedError(data_source_type) from e
                created.append(data_source_type)

                data_source_id = data_source.data_source_id
                if data_source_id in self._data_sources:
                    raise DuplicateDataSourceIDError(data_source_id)

                self._data_sources[data_source_id] = data_source
                self._data_source_types[data_source_id] = data_source_type
        except BaseException as e:
            for data_source_type in created:
                self._store.release(data_source_type)
            self._store.release(type(self))
            self._data_sources.clear()
            self._data_source_types.clear()
            logger.error(f"ERROR: {e!r}. DataManager not initialized.")
            raise

        logger.debug(f"{type(self).__name__} initialized with data sources: "
                     f"{', '.join(self.data_source_ids)}")

    @property
    def data_source_ids(self) -> tuple[str, ...]:
        return tuple(sorted(self._data_sources))

    def get_data_source(self, data_source_id: str) -> DataSource | None:
        """Look up a data source by id, None if it isn't registered."""
        return self._data_sources.get(data_source_id)

    def inject_data_source(self, data_source_type: type[T]) -> T:
        """Return the registered instance of `data_source_type`.

        Raises:
            DataSourceNotFoundError: No data source was registered with this type.
            DataSourceTypeConversionError: The registered instance is not a
                `data_source_type`.
        """
        data_source_id = next(
            (key for key, value in self._data_source_types.items() if value is data_source_type),
            None,
        )
        if data_source_id is None:
            raise DataSourceNotFoundError(data_source_type)

        data_source = self._data_sources[data_source_id]
        if not isinstance(data_source, data_source_type):
            raise DataSourceTypeConversionError(data_source_id)
        return data_source

    def create_data_access_object(self, dao_id: str,
                                  params: Mapping[str, str] | None = None) -> DataAccessObject | None:
        """Create a DAO through the data source named in `dao_id`.

        `dao_id` has the form "<data_source_id>.<service_id>". Segments after
        the service id are ignored. Returns None when the id is malformed, the
        data source is unknown or the data source has no such service; only
        the malformed case is logged.
        """
        components = [c for c in dao_id.split(DAO_ID_SEPARATOR) if c]
        if len(components) < 2:
            logger.error(f"ERROR: create_data_access_object id requires at least two "
                         f"dot-separated components (\"datasource.service\"), got \"{dao_id}\"")
            return None

        data_source = self._data_sources.get(components[0])
        if data_source is None:
            return None
        return data_source.create_data_access_object(components[1], dict(params or {}))

    def close(self) -> None:
        """Release this manager's single-instance claim.

        Data sources are left in the store; they belong to it, not to the manager.
        """
        if self._store.get(type(self)) is self:
            self._store.release(type(self))

    def __contains__(self, data_source_id: object) -> bool:
        return data_source_id in self._data_sources

    def __len__(self) -> int:
        return len(self._data_sources)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(data_sources={list(self.data_source_ids)})>"


_manager_types: dict[str, type[DataManager]] = {}


def register_manager(name: str) -> Callable[[type[DataManager]], type[DataManager]]:
    """Decorator to register a DataManager variant under `name`."""
    def decorator(manager_class: type[DataManager]) -> type[DataManager]:
        if manager_class is DataManager:
            raise TypeError("Register DataManager subclasses, not DataManager itself")
        _manager_types[name] = manager_class
        return manager_class
    return decorator


def get_manager_types() -> dict[str, type[DataManager]]:
    """Get all registered DataManager variants."""
    return _manager_types.copy()


def create_data_manager(name: str, data_sources: Sequence[type], **kwargs: Any) -> DataManager:
    """Build the registered DataManager variant `name`.

    Raises:
        KeyError: If no variant is registered under `name`.
        DataManagerConstructionError: If the manager can't be constructed.
    """
    manager_class = _manager_types.get(name)
    if manager_class is None:
        raise KeyError(f"DataManager variant '{name}' not found")
    return manager_class(data_sources, **kwargs)


@register_manager("default")
class AppDataManager(DataManager):
    """Default DataManager variant used by the command-line runner."""
