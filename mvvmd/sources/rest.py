"""REST data source backed by the container's HTTP client."""

from typing import Any, Mapping

import requests

from mvvmd.core.container import Container
from mvvmd.core.protocols import DataSourceState
from .base import BaseDataSource
from .registry import register


class RestDataAccessObject:
    """Reads one REST endpoint of a RestDataSource."""

    def __init__(self, source: "RestDataSource", service_id: str, url: str,
                 params: Mapping[str, str]):
        self.source = source
        self.service_id = service_id
        self.url = url
        self.params = dict(params)

    def fetch(self, **params: Any) -> dict[str, Any]:
        """GET the endpoint with source, DAO and call params merged in that order."""
        query = {**self.source.params, **self.params, **params}
        try:
            result = self.source.http_client.get(self.url, params=query,
                                                 timeout=self.source.timeout)
        except requests.RequestException as e:
            self.source.logger.error(f"Fetching {self.service_id} failed: {e}")
            self.source.set_state(DataSourceState.UNAVAILABLE)
            raise

        self.source.set_state(DataSourceState.AVAILABLE)
        return result


@register
class RestDataSource(BaseDataSource):
    """JSON-over-HTTP data source; services map to URL paths."""

    data_source_id = "rest"
    description = "REST API"

    def __init__(self, container: Container | None = None):
        super().__init__(container)
        self.base_url = self.config.get('base_url', '')
        self.timeout = self.config.get('timeout', 30)
        self.http_client = self.container.get_http_client()

    def build_url(self, path: str) -> str:
        if not self.base_url:
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def create_data_access_object(self, service_id: str,
                                  params: Mapping[str, str]) -> RestDataAccessObject | None:
        path = self.get_services().get(service_id)
        if path is None:
            self.logger.debug(f"Unknown service '{service_id}'")
            return None
        return RestDataAccessObject(self, service_id, self.build_url(path), params)
