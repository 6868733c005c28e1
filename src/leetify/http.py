from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

Json = Any


@dataclass
class BaseHttpClient:
    """
    Thin wrapper over a single httpx.Client.

    - One timeout applies uniformly to connect/read/write/pool for every request.
    - Transport failures surface as TransportError; status codes are left to callers.
    - `transport` is the seam for tests (httpx.MockTransport).
    - `client_options` is passed straight to httpx.Client for advanced configuration.
    """

    base_url: str
    timeout_s: float = 30.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.BaseTransport | None = None
    client_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self._client = httpx.Client(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
            **dict(self.client_options),
        )

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> BaseHttpClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """
        Single GET attempt.

        Raises DecodeError when the body can't be content-decoded (e.g. broken gzip)
        and TransportError for every other httpx request failure (timeouts, network
        issues, redirect loops).
        """

        try:
            resp = self._client.get(path.lstrip("/"), params=params, headers=headers)
        except httpx.DecodingError as e:
            raise DecodeError(str(e) or type(e).__name__) from e
        except httpx.RequestError as e:
            raise TransportError(str(e) or type(e).__name__) from e

        logger.debug("GET %s -> %s", resp.request.url.path, resp.status_code)
        return resp

    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        """GET and parse the body as JSON, without any status handling."""

        resp = self.get(path, params=params, headers=headers)
        try:
            return resp.json()
        except ValueError as e:
            raise DecodeError("Response was not valid JSON.") from e
