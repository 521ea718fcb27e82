"""A small HTTP client for GET requests and JSON POST requests."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import requests
from requests.adapters import HTTPAdapter

from imtools.jsonutil import JsonError, json_marshal, json_unmarshal

__all__ = ["HTTPClientError", "ClientConfig", "HTTPClient"]

_JSON_CONTENT_TYPE = "application/json; charset=utf-8"


class HTTPClientError(Exception):
    """Raised when a request cannot be sent or its response cannot be read."""


@dataclass
class ClientConfig:
    """Request timeout in seconds and the connection limit per host."""

    timeout: float = 15.0
    max_conns_per_host: int = 100


class HTTPClient:
    """HTTP client backed by a pooled session."""

    def __init__(self, config: ClientConfig | None = None) -> None:
        self.config = config if config is not None else ClientConfig()
        self._session = requests.Session()
        adapter = HTTPAdapter(
            pool_connections=self.config.max_conns_per_host,
            pool_maxsize=self.config.max_conns_per_host,
            pool_block=True,
        )
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Release the pooled connections."""
        self._session.close()

    def get(self, url: str) -> bytes:
        """Send a GET request and return the response body, whatever its status."""
        try:
            response = self._session.get(url, timeout=self.config.timeout)
            return response.content
        except requests.RequestException as exc:
            raise HTTPClientError(f"GET request failed: {exc} (url={url!r})") from exc

    def post(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        data: Any = None,
        timeout: int = 0,
    ) -> bytes:
        """Send data as JSON in a POST request and return the response body.

        A positive timeout, in seconds, replaces the client's default.
        """
        body = b""
        if data is not None:
            try:
                body = json_marshal(data) + b"\n"
            except JsonError as exc:
                raise HTTPClientError(f"JSON encode failed: {exc}") from exc
        request_headers = dict(headers or {})
        request_headers["Content-Type"] = _JSON_CONTENT_TYPE
        limit = timeout if timeout > 0 else self.config.timeout
        try:
            response = self._session.post(
                url, data=body, headers=request_headers, timeout=limit
            )
            return response.content
        except requests.RequestException as exc:
            raise HTTPClientError(f"HTTP request failed: {exc} (url={url!r})") from exc

    def post_return(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        input_data: Any = None,
        timeout: int = 0,
    ) -> Any:
        """Send a JSON POST request and return the decoded JSON response."""
        content = self.post(url, headers, input_data, timeout)
        try:
            return json_unmarshal(content)
        except JsonError as exc:
            raise HTTPClientError(f"JSON unmarshal failed: {exc}") from exc