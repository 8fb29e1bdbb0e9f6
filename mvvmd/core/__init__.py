from .config import Config
from .container import Container, get_container, set_container
from .data_manager import AppDataManager, DataManager, create_data_manager, register_manager
from .errors import (
    DataManagerConstructionError,
    DataManagerError,
    DataSourceNotFoundError,
    DataSourceNotUniquelyInstancedError,
    DataSourceTypeConversionError,
    DirectInstantiationError,
    DuplicateDataSourceIDError,
    NoDataSourcesError,
)
from .protocols import DataAccessObject, DataSource, DataSourceState, HttpClient
from .single_instance import SingleInstanceError, SingleInstanceStore, get_instance_store

__all__ = [
    'Config',
    'Container',
    'get_container',
    'set_container',
    'AppDataManager',
    'DataManager',
    'create_data_manager',
    'register_manager',
    'DataManagerConstructionError',
    'DataManagerError',
    'DataSourceNotFoundError',
    'DataSourceNotUniquelyInstancedError',
    'DataSourceTypeConversionError',
    'DirectInstantiationError',
    'DuplicateDataSourceIDError',
    'NoDataSourcesError',
    'DataAccessObject',
    'DataSource',
    'DataSourceState',
    'HttpClient',
    'SingleInstanceError',
    'SingleInstanceStore',
    'get_instance_store',
]
