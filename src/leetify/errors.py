from __future__ import annotations


class LeetifyError(RuntimeError):
    """Base exception for Leetify client failures."""


class TransportError(LeetifyError):
    """Network/connection layer failures (timeouts, refused connections, DNS, etc.)."""


class DecodeError(LeetifyError):
    """Response body was not valid JSON at all."""


class ApiError(LeetifyError):
    """Non-2xx response, or a 2xx response whose body does not match the expected schema."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(status, message)
        self.status = status
        self.message = message

    def __str__(self) -> str:
        return f"API error (status {self.status}): {self.message}"


class InvalidApiKeyError(LeetifyError):
    """HTTP 401: the configured API key is invalid or missing."""

    def __str__(self) -> str:
        return "Invalid or missing API key"


class ServerError(LeetifyError):
    """HTTP 500 from the API."""

    def __str__(self) -> str:
        return "Server error (500)"


# Reserved for stricter client-side validation; not raised by the client today.


class MissingParameterError(LeetifyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Missing required parameter: {self.name}"


class InvalidGameIdError(LeetifyError):
    def __init__(self, game_id: str) -> None:
        super().__init__(game_id)
        self.game_id = game_id

    def __str__(self) -> str:
        return f"Invalid game ID: {self.game_id}"


class InvalidDataSourceError(LeetifyError):
    def __init__(self, value: str) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"Invalid data source: {self.value}"
