"""Closed set of failures the fetch client can raise.

Every transport, status and decoding problem is mapped onto one of these at
the client boundary; controllers store them unchanged in their display state.
"""

from __future__ import annotations

from typing import Any


class NetworkError(Exception):
    kind = "unknown"
    message = "An unknown error occurred"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


class InvalidURLError(NetworkError):
    kind = "invalid_url"
    message = "Invalid request address"


class InvalidResponseError(NetworkError):
    kind = "invalid_response"
    message = "The server returned an invalid response"


class HTTPStatusError(NetworkError):
    kind = "http_error"

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}")

    @property
    def message(self) -> str:  # type: ignore[override]
        return f"Server error: {self.status_code}"

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "status_code": self.status_code}


class RateLimitedError(NetworkError):
    kind = "rate_limited"
    message = "Too many requests. Please try again later"


class DecodingError(NetworkError):
    kind = "decoding_error"
    message = "Failed to process data"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"decoding failed: {cause}")


class NoConnectionError(NetworkError):
    kind = "no_connection"
    message = "No internet connection"


class RequestTimeoutError(NetworkError):
    kind = "timeout"
    message = "Request timed out"


class UnknownNetworkError(NetworkError):
    kind = "unknown"

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"unexpected failure: {cause!r}")
