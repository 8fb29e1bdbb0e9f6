from .base import BaseDataSource
from .registry import SourceRegistry, get_registry, register
from .rest import RestDataSource
from .sql import SqlDataSource

__all__ = [
    'BaseDataSource',
    'SourceRegistry',
    'get_registry',
    'register',
    'RestDataSource',
    'SqlDataSource',
]
