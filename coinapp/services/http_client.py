"""Single-shot GET + JSON decode on top of httpx."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Type, TypeVar

import httpx
from pydantic import TypeAdapter

from coinapp.services.errors import (
    DecodingError,
    HTTPStatusError,
    InvalidResponseError,
    InvalidURLError,
    NoConnectionError,
    RateLimitedError,
    RequestTimeoutError,
    UnknownNetworkError,
)

logger = logging.getLogger("coinapp.http")

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_HEADERS = {"Accept": "application/json"}
BODY_LOG_LIMIT = 500


def _validate_url(url: str) -> None:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InvalidURLError(f"invalid url: {url!r}") from exc

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise InvalidURLError(f"invalid url: {url!r}")


def _decode(response: httpx.Response, response_type: Type[T]) -> T:
    try:
        payload = response.json()
        return TypeAdapter(response_type).validate_python(payload)
    except ValueError as exc:  # JSONDecodeError and pydantic.ValidationError
        logger.debug(
            "decoding error | url=%s | err=%s | body=%s",
            response.request.url,
            exc,
            response.text[:BODY_LOG_LIMIT],
        )
        raise DecodingError(exc) from exc


class FetchClient:
    """Performs one GET per call and decodes the body into ``response_type``.

    No retries happen here; a failed call raises one of the
    ``coinapp.services.errors`` types and the caller decides what to do.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.transport = transport

    async def fetch(
        self,
        url: str,
        response_type: Type[T],
        params: Optional[Mapping[str, Any]] = None,
    ) -> T:
        _validate_url(url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=DEFAULT_HEADERS,
                transport=self.transport,
            ) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError() from exc
        except httpx.NetworkError as exc:
            raise NoConnectionError() from exc
        except httpx.ProtocolError as exc:
            raise InvalidResponseError() from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise InvalidURLError(f"invalid url: {url!r}") from exc
        except Exception as exc:
            raise UnknownNetworkError(exc) from exc

        status = response.status_code
        if status == 429:
            raise RateLimitedError()
        if not 200 <= status < 300:
            raise HTTPStatusError(status)

        return _decode(response, response_type)
