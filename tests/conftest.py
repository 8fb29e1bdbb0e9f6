"""Shared pytest fixtures for mvvmd tests.

Every test gets its own single-instance store and container, so data sources
constructed in one test never leak into another.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from mvvmd.core.config import Config
from mvvmd.core.container import Container, set_container
from mvvmd.core.single_instance import SingleInstanceStore


@pytest.fixture
def store() -> SingleInstanceStore:
    """Fresh single-instance store."""
    return SingleInstanceStore()


@pytest.fixture
def config_data(tmp_path: Path) -> dict[str, Any]:
    """Configuration mapping with a REST and a SQLite-backed SQL source."""
    return {
        "global": {
            "logging": {"level": "DEBUG"},
            "http": {"retries": 1, "retry_delay": 0},
            "database": {"url": f"sqlite:///{tmp_path / 'test.db'}"},
        },
        "manager": {"name": "default", "data_sources": ["rest", "sql"]},
        "data_sources": {
            "rest": {
                "enabled": True,
                "description": "Test API",
                "base_url": "https://api.example.com/v1/",
                "timeout": 5,
                "params": {"format": "json", "version": 2},
                "services": {"users": "/users", "orders": "orders/"},
            },
            "sql": {
                "enabled": True,
                "services": {"users": "users"},
            },
            "disabled_source": {"enabled": False},
        },
    }


@pytest.fixture
def config(config_data: dict[str, Any]) -> Config:
    return Config.from_mapping(config_data)


@pytest.fixture
def container(config: Config, store: SingleInstanceStore) -> Iterator[Container]:
    """Container installed as the process default for the test's duration."""
    container = Container(config, instance_store=store)
    set_container(container)
    yield container
    set_container(None)
