"""Dependency injection container."""

import os
import time
import logging
import requests
from typing import Any, Iterator
from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from .config import Config
from .protocols import HttpClient, DatabaseSessionFactory
from .single_instance import SingleInstanceStore, get_instance_store

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class RequestsHttpClient:
    """HTTP client implementation using requests library."""

    def __init__(self, retries: int = 3, retry_delay: float = 1.0):
        self.retries = max(1, retries)
        self.retry_delay = retry_delay
        self.session = requests.Session()

    def get(self, url: str, params: dict[str, Any] | None = None,
            timeout: int = 30) -> dict[str, Any]:
        """Make a GET request with retry logic."""
        last_error = None
        for attempt in range(self.retries):
            try:
                response = self.session.get(url, params=params, timeout=timeout)
                response.raise_for_status()
                return response.json()
            except requests.RequestException as e:
                last_error = e
                logger.warning(f"GET {url} failed (attempt {attempt + 1}/{self.retries}): {e}")
                if attempt < self.retries - 1:
                    time.sleep(self.retry_delay)

        raise last_error


class SQLAlchemySessionFactory:
    """Database session factory using SQLAlchemy."""

    def __init__(self, database_url: str | None = None, pool_pre_ping: bool = True):
        if database_url is None:
            database_url = os.getenv('DATABASE_URL')
            if not database_url:
                raise ValueError("DATABASE_URL environment variable not set")

        self.engine = create_engine(database_url, pool_pre_ping=pool_pre_ping)
        self._session_maker = sessionmaker(bind=self.engine)

    @contextmanager
    def get_session(self) -> Iterator[Session]:
        """Get a database session with automatic commit/rollback."""
        session = self._session_maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


class Container:
    """Dependency injection container for the data layer."""

    def __init__(self, config: Config | None = None,
                 instance_store: SingleInstanceStore | None = None):
        self._config = config or Config()
        self._instances: dict[str, Any] = {}
        self._factories: dict[str, Any] = {}

        self._instances['instance_store'] = (
            instance_store if instance_store is not None else get_instance_store()
        )

        # Register default implementations
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default dependency implementations."""
        global_config = self._config.get_global_config()

        # Logger factory
        def create_logger(name: str) -> logging.Logger:
            log_config = global_config.get('logging', {})
            logging.basicConfig(
                level=getattr(logging, log_config.get('level', 'INFO')),
                format=log_config.get('format', DEFAULT_LOG_FORMAT)
            )
            return logging.getLogger(name)

        self._factories['logger'] = create_logger

        # HTTP client (singleton)
        http_config = global_config.get('http', {})
        self._factories['http_client'] = lambda: RequestsHttpClient(
            retries=http_config.get('retries', 3),
            retry_delay=http_config.get('retry_delay', 1.0)
        )

        # Database session factory (singleton)
        db_config = global_config.get('database', {})
        self._factories['db_session_factory'] = lambda: SQLAlchemySessionFactory(
            database_url=db_config.get('url'),
            pool_pre_ping=db_config.get('pool_pre_ping', True)
        )

    def get_logger(self, name: str) -> logging.Logger:
        """Get a logger instance for the given name."""
        return self._factories['logger'](name)

    def get_http_client(self) -> HttpClient:
        """Get the HTTP client instance."""
        if 'http_client' not in self._instances:
            self._instances['http_client'] = self._factories['http_client']()
        return self._instances['http_client']

    def get_db_session_factory(self) -> SQLAlchemySessionFactory:
        """Get the database session factory."""
        if 'db_session_factory' not in self._instances:
            self._instances['db_session_factory'] = self._factories['db_session_factory']()
        return self._instances['db_session_factory']

    def get_instance_store(self) -> SingleInstanceStore:
        """Get the single-instance store data sources are created in."""
        return self._instances['instance_store']

    def get_config(self) -> Config:
        """Get the configuration instance."""
        return self._config

    # Methods for testing - allow overriding dependencies
    def set_http_client(self, client: HttpClient) -> None:
        """Override the HTTP client (useful for testing)."""
        self._instances['http_client'] = client

    def set_db_session_factory(self, factory: DatabaseSessionFactory) -> None:
        """Override the database session factory (useful for testing)."""
        self._instances['db_session_factory'] = factory


# Global container instance, created on first use
_container: Container | None = None


def get_container() -> Container:
    """Get the process-wide container, building it from the default config."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def set_container(container: Container | None) -> None:
    """Replace the process-wide container (None resets it)."""
    global _container
    _container = container
