"""
HTTP request dispatch.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import time
from dataclasses import dataclass

import httpx

from naivehttp.config import ClientConfig, get_config
from naivehttp.errors import NetworkError
from naivehttp.http.input import KeyValuePair, build_json_body
from naivehttp.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class GetRequest:
    """GET <url>, no body."""
    url: str


@dataclass(frozen=True)
class PostRequest:
    """POST <url> with a JSON object body built from key=value pairs."""
    url: str
    pairs: tuple[KeyValuePair, ...] = ()


RequestSpec = GetRequest | PostRequest


class HTTPClient:
    """Issues a single request per RequestSpec through httpx."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.config = config or get_config()
        self.transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers=self.config.default_headers,
                follow_redirects=self.config.follow_redirects,
                transport=self.transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def dispatch(self, spec: RequestSpec) -> httpx.Response:
        """Send the request described by ``spec`` and return the response.

        Any status code is a successful call; only transport failures
        raise, as NetworkError.
        """
        client = self._get_client()

        if isinstance(spec, GetRequest):
            method = "GET"
            json_body = None
        elif isinstance(spec, PostRequest):
            method = "POST"
            json_body = build_json_body(spec.pairs)
        else:
            raise TypeError(f"Unsupported request spec: {spec!r}")

        logger.debug("%s %s", method, spec.url)
        start_time = time.time()

        try:
            response = client.request(method=method, url=spec.url, json=json_body)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, spec.url, e)
            raise NetworkError(method, spec.url, e) from e

        elapsed_ms = (time.time() - start_time) * 1000
        logger.debug(
            "%s %s -> %d (%.0fms)", method, spec.url, response.status_code, elapsed_ms
        )
        return response
