"""Tests for the dependency container."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from mvvmd.core.config import Config
from mvvmd.core.container import (
    Container,
    RequestsHttpClient,
    SQLAlchemySessionFactory,
    get_container,
    set_container,
)
from mvvmd.core.single_instance import SingleInstanceStore, get_instance_store


class TestContainer:
    def test_uses_given_store(self, container: Container, store: SingleInstanceStore) -> None:
        assert container.get_instance_store() is store

    def test_defaults_to_global_store(self, config: Config) -> None:
        assert Container(config).get_instance_store() is get_instance_store()

    def test_logger(self, container: Container) -> None:
        logger = container.get_logger("sources.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "sources.test"

    def test_http_client_is_cached_and_configured(self, container: Container) -> None:
        client = container.get_http_client()

        assert isinstance(client, RequestsHttpClient)
        assert client is container.get_http_client()
        assert client.retries == 1
        assert client.retry_delay == 0

    def test_db_session_factory_uses_configured_url(self, container: Container) -> None:
        factory = container.get_db_session_factory()

        assert isinstance(factory, SQLAlchemySessionFactory)
        assert factory.engine.url.drivername == "sqlite"
        assert factory is container.get_db_session_factory()

    def test_overrides(self, container: Container) -> None:
        client = MagicMock()
        factory = MagicMock()
        container.set_http_client(client)
        container.set_db_session_factory(factory)

        assert container.get_http_client() is client
        assert container.get_db_session_factory() is factory

    def test_global_container(self, container: Container) -> None:
        assert get_container() is container
        set_container(None)
        set_container(container)
        assert get_container() is container


class TestSQLAlchemySessionFactory:
    def test_missing_url_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValueError):
            SQLAlchemySessionFactory()

    def test_url_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "sqlite://")

        factory = SQLAlchemySessionFactory()

        assert factory.engine.url.drivername == "sqlite"

    def test_rolls_back_on_error(self) -> None:
        factory = SQLAlchemySessionFactory("sqlite://")
        session = MagicMock()
        factory._session_maker = MagicMock(return_value=session)

        with pytest.raises(RuntimeError):
            with factory.get_session():
                raise RuntimeError("boom")

        session.rollback.assert_called_once()
        session.commit.assert_not_called()
        session.close.assert_called_once()


class TestRequestsHttpClient:
    def test_returns_json(self) -> None:
        client = RequestsHttpClient(retries=2, retry_delay=0)
        response = MagicMock()
        response.json.return_value = {"ok": True}

        with patch.object(client.session, "get", return_value=response) as mock_get:
            assert client.get("https://x.test", params={"a": "1"}, timeout=3) == {"ok": True}

        mock_get.assert_called_once_with("https://x.test", params={"a": "1"}, timeout=3)

    def test_retries_then_raises(self) -> None:
        client = RequestsHttpClient(retries=3, retry_delay=0)
        error = requests.ConnectionError("down")

        with patch.object(client.session, "get", side_effect=error) as mock_get:
            with pytest.raises(requests.ConnectionError):
                client.get("https://x.test")

        assert mock_get.call_count == 3
