from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import timedelta
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from leetify.constants import API_KEY_HEADER, DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S
from leetify.data_source import DataSource, as_data_source
from leetify.errors import ApiError, InvalidApiKeyError, ServerError
from leetify.http import BaseHttpClient
from leetify.ids import PlayerId, as_player_id, profile_query_params
from leetify.models import MatchDetailsList, MatchDetailsResponse, ProfileResponse
from leetify.player import Player

if TYPE_CHECKING:
    from leetify.core.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_PROFILE_ADAPTER = TypeAdapter(ProfileResponse)
_MATCH_ADAPTER = TypeAdapter(MatchDetailsResponse)


def _check_timeout(timeout_s: float) -> float:
    timeout_s = float(timeout_s)
    if not timeout_s > 0:
        raise ValueError(f"timeout must be greater than 0 seconds, got {timeout_s}")
    return timeout_s


class Client:
    """
    Client for the Leetify public CS API.

    Requests without an API key are subject to stricter rate limits. Keys can be
    obtained at https://leetify.com/app/developer.

    Configuration is fixed at construction. Every method performs exactly one
    request; there are no retries.

    Pass either the transport settings (base_url, timeout_s, transport,
    client_options) or a ready-made `http` client, not both.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout_s: float | None = None,
        transport: httpx.BaseTransport | None = None,
        client_options: Mapping[str, Any] | None = None,
        http: BaseHttpClient | None = None,
    ) -> None:
        self._api_key = api_key

        if http is not None:
            conflicting = [
                name
                for name, value in (
                    ("base_url", base_url),
                    ("timeout_s", timeout_s),
                    ("transport", transport),
                    ("client_options", client_options),
                )
                if value is not None
            ]
            if conflicting:
                raise ValueError(f"Cannot combine http= with {', '.join(conflicting)}")
            self.http = http
            return

        timeout_s = DEFAULT_TIMEOUT_S if timeout_s is None else _check_timeout(timeout_s)
        self.http = BaseHttpClient(
            base_url=base_url or DEFAULT_BASE_URL,
            timeout_s=timeout_s,
            transport=transport,
            client_options=dict(client_options or {}),
        )

    @classmethod
    def with_api_key(cls, api_key: str) -> Client:
        return cls(api_key=api_key)

    @classmethod
    def builder(cls) -> ClientBuilder:
        return ClientBuilder()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> Client:
        """Build a client from environment / .env configuration."""

        return cls(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout_s=settings.timeout_s,
            **kwargs,
        )

    @property
    def base_url(self) -> str:
        return self.http.base_url

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def timeout_s(self) -> float:
        return self.http.timeout_s

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -----------------------------
    # Endpoints
    # -----------------------------

    def get_profile(self, player_id: PlayerId | str) -> ProfileResponse:
        """Player profile by Steam64 ID or Leetify ID."""

        params = profile_query_params(as_player_id(player_id))
        return self._get_decoded("/v3/profile", _PROFILE_ADAPTER, params=params)

    def get_profile_matches(self, player_id: PlayerId | str) -> list[MatchDetailsResponse]:
        """Player match history, in the order the API returns it."""

        params = profile_query_params(as_player_id(player_id))
        return self._get_decoded("/v3/profile/matches", MatchDetailsList, params=params)

    def get_match_by_game_id(self, game_id: str) -> MatchDetailsResponse:
        return self._get_decoded(f"/v2/matches/{game_id}", _MATCH_ADAPTER)

    def get_match_by_data_source(
        self, data_source: DataSource | str, data_source_id: str
    ) -> MatchDetailsResponse:
        """
        Match details by data source and that source's match id.

        `data_source` may be a DataSource variant or its string form
        (e.g. "faceit", "matchmaking").
        """

        source = as_data_source(data_source).as_str()
        return self._get_decoded(f"/v2/matches/{source}/{data_source_id}", _MATCH_ADAPTER)

    def validate_api_key(self) -> None:
        """
        Returns None if the key is valid.
        Raises InvalidApiKeyError (401), ServerError (500) or ApiError otherwise.
        """

        resp = self.http.get("/api-key/validate", headers=self._headers())
        status = resp.status_code
        if status == 200:
            return None
        if status == 401:
            raise InvalidApiKeyError()
        if status == 500:
            raise ServerError()
        raise ApiError(status, f"Unexpected status code: {status} {resp.reason_phrase}".rstrip())

    def player(self, player_id: PlayerId | str) -> Player:
        """Bind a player id to this client."""

        return Player(player_id, self)

    # -----------------------------
    # Internals
    # -----------------------------

    def _headers(self) -> dict[str, str]:
        if self._api_key is None:
            return {}
        return {API_KEY_HEADER: self._api_key}

    def _get_decoded(
        self,
        path: str,
        adapter: TypeAdapter[T],
        *,
        params: Mapping[str, str] | None = None,
    ) -> T:
        resp = self.http.get(path, params=params, headers=self._headers())
        status = resp.status_code
        body = resp.text

        if not resp.is_success:
            if status == 401:
                raise InvalidApiKeyError()
            if status == 500:
                raise ServerError()
            raise ApiError(status, body)

        try:
            return adapter.validate_json(body)
        except ValidationError as e:
            logger.debug("Schema mismatch for %s: %s", path, e)
            raise ApiError(
                status,
                f"Failed to parse JSON response: {e}. Response body: {body}",
            ) from e


class ClientBuilder:
    """
    Fluent builder for Client.

        client = (
            Client.builder()
            .api_key("your-api-key")
            .timeout(60)
            .base_url("https://custom-api.example.com")
            .build()
        )
    """

    def __init__(self) -> None:
        self._base_url: str | None = None
        self._api_key: str | None = None
        self._timeout_s: float | None = None
        self._transport: httpx.BaseTransport | None = None
        self._client_options: dict[str, Any] = {}

    def base_url(self, url: str) -> ClientBuilder:
        self._base_url = url
        return self

    def api_key(self, key: str) -> ClientBuilder:
        self._api_key = key
        return self

    def timeout(self, timeout: float | timedelta) -> ClientBuilder:
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self._timeout_s = _check_timeout(timeout)
        return self

    def transport(self, transport: httpx.BaseTransport) -> ClientBuilder:
        self._transport = transport
        return self

    def client_options(self, **options: Any) -> ClientBuilder:
        """Extra keyword arguments for the underlying httpx.Client (verify, proxy, ...)."""

        self._client_options.update(options)
        return self

    def build(self) -> Client:
        return Client(
            base_url=self._base_url or DEFAULT_BASE_URL,
            api_key=self._api_key,
            timeout_s=self._timeout_s if self._timeout_s is not None else DEFAULT_TIMEOUT_S,
            transport=self._transport,
            client_options=self._client_options,
        )
