# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Shared HTTP plumbing for the REST-backed providers.

Every remote call makes exactly one attempt and ends in one of four outcomes:

- success: the status is accepted and the body decodes
- transport failure: the request could not be built or sent (SystemError)
- decode failure: the body could not be decoded (SystemError)
- business failure: any other status, raised with the backend's own code

Each provider owns one ``httpx.Client`` for its whole lifetime. The client is
thread-safe, so one provider instance can serve concurrent calls, and an
injected transport stays open until the provider is closed.
"""

from typing import Any, Callable, TypeVar
from urllib.parse import quote

import httpx

from .errors import ProviderError
from .log import Logger, create_logger
from .wire import decode_json_object

DEFAULT_TIMEOUT_SECONDS = 10.0
API_KEY_HEADER = "X-API-KEY"

T = TypeVar("T")


def resolve_timeout(timeout: float | None) -> float:
    """Substitute the default for a zero or missing timeout.

    Raises:
        ValueError: If the timeout is negative
    """
    if not timeout:
        return DEFAULT_TIMEOUT_SECONDS
    if timeout < 0:
        raise ValueError(f"timeout must not be negative, got {timeout}")
    return float(timeout)


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single URL path segment.

    The dot segments "." and ".." are encoded as well, since URL normalization
    would otherwise resolve them against the parent path.
    """
    if value in (".", ".."):
        return "%2E" * len(value)
    return quote(value, safe="")


class RestClient:
    """Base class for providers talking to an external identity service.

    Attributes:
        base_url: Service base URL without a trailing slash
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
        logger: Logger | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Base URL of the identity service
            api_key: Pre-shared credential sent in the X-API-KEY header
            timeout: Request timeout in seconds; zero or None means 10 seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
            logger: Optional structured logger

        Raises:
            ValueError: If base_url is empty, api_key cannot be sent as a
                header value, or timeout is negative
        """
        if not base_url:
            raise ValueError("base_url is required for a REST provider")
        api_key = api_key or ""
        if not (api_key.isascii() and api_key.isprintable()):
            raise ValueError("api_key must contain only printable ASCII characters")
        self._base_url = base_url.rstrip("/")
        self._timeout = resolve_timeout(timeout)
        self._logger = logger or create_logger(name=f"identity_backends.{type(self).__name__}")
        self._client = httpx.Client(
            timeout=self._timeout,
            transport=transport,
            headers={API_KEY_HEADER: api_key, "Accept": "application/json"},
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def close(self) -> None:
        """Release pooled connections and the transport."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _encode(self, encoder: Callable[[Any], bytes], payload: Any) -> bytes:
        try:
            return encoder(payload)
        except (TypeError, ValueError, RecursionError) as e:
            self._logger.warning("Failed to encode request body", error=str(e))
            raise ProviderError.system_error("Failed to marshal request", e) from e

    def _send(
        self,
        method: str,
        path: str,
        content: bytes | None = None,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        headers = {"Content-Type": "application/json"} if content is not None else None

        try:
            response = self._client.request(
                method,
                f"{self._base_url}{path}",
                content=content,
                params=params,
                headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self._logger.warning(
                "Request to identity service failed", method=method, path=path, error=str(e)
            )
            raise ProviderError.system_error("Failed to send request", e) from e

        self._logger.debug(
            "Identity service responded", method=method, path=path, status=response.status_code
        )
        return response

    def _decode(self, response: httpx.Response, decoder: Callable[[bytes], T]) -> T:
        try:
            return decoder(response.content)
        except (TypeError, ValueError, RecursionError) as e:
            self._logger.warning(
                "Failed to decode identity service response",
                status=response.status_code,
                error=str(e),
            )
            raise ProviderError.system_error("Failed to decode response", e) from e

    def _decode_error(self, response: httpx.Response) -> ProviderError:
        """Decode a non-success body into the backend's own error."""
        try:
            error = ProviderError.from_dict(decode_json_object(response.content))
        except (ValueError, RecursionError) as e:
            return ProviderError.system_error(
                "Failed to decode error response", f"HTTP {response.status_code}: {e}"
            )
        self._logger.info(
            "Identity service rejected request", status=response.status_code, code=error.code
        )
        return error

    def _call(
        self,
        method: str,
        path: str,
        decoder: Callable[[bytes], T] | None = None,
        content: bytes | None = None,
        params: dict[str, str] | None = None,
        success: tuple[int, ...] = (200,),
    ) -> T | None:
        """Send one request and map the outcome.

        Returns:
            The decoded body, or None when no decoder is given

        Raises:
            ProviderError: On any transport, decode or business failure
        """
        response = self._send(method, path, content=content, params=params)
        if response.status_code not in success:
            raise self._decode_error(response)
        if decoder is None:
            return None
        return self._decode(response, decoder)
