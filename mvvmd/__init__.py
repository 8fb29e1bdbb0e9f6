"""Data-layer registry for MVVM applications."""

from .core import (
    DataAccessObject,
    DataManager,
    DataManagerConstructionError,
    DataManagerError,
    DataSource,
    DataSourceNotFoundError,
    DataSourceState,
    DataSourceTypeConversionError,
    create_data_manager,
    register_manager,
)

__version__ = "0.1.0"

__all__ = [
    'DataAccessObject',
    'DataManager',
    'DataManagerConstructionError',
    'DataManagerError',
    'DataSource',
    'DataSourceNotFoundError',
    'DataSourceState',
    'DataSourceTypeConversionError',
    'create_data_manager',
    'register_manager',
]
