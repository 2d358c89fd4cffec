"""HTTP transport used by the request executors.

The executors only need "GET this URL with these headers, give me the
status and the bytes". Anything implementing the Transport protocol can
be plugged in; HttpxTransport is the default.
"""

from dataclasses import dataclass
from typing import Protocol

import httpx
import structlog

from pwnquery.exceptions import BodyReadError, TransportError

logger = structlog.get_logger()


@dataclass(frozen=True)
class TransportResponse:
    """Raw result of one round trip."""

    status_code: int
    content: bytes
    url: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Protocol for anything that can perform a GET."""

    def get(self, url: str, headers: dict[str, str]) -> TransportResponse:
        """Send a GET request and return the full response.

        Raises:
            TransportError: If the request could not be sent
            BodyReadError: If the body could not be fully read
        """
        ...

    def close(self) -> None:
        """Release connections and cleanup resources."""
        ...


class HttpxTransport:
    """Synchronous transport backed by ``httpx.Client``.

    Timeouts, TLS and connection reuse are all owned here.

    Example:
        with HttpxTransport(timeout=10.0) as transport:
            response = transport.get(url, {"User-Agent": "my-app"})
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds (ignored if client is given)
            client: Preconfigured httpx client to use instead of a new one
        """
        self._client = client if client is not None else httpx.Client(timeout=httpx.Timeout(timeout))

    def get(self, url: str, headers: dict[str, str]) -> TransportResponse:
        request = self._client.build_request("GET", url, headers=headers)

        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as e:
            raise TransportError("Failed to connect", url=url, detail=str(e)) from e

        try:
            content = response.read()
        except (httpx.RequestError, httpx.StreamError) as e:
            raise BodyReadError("Failed to read response body", url=url, detail=str(e)) from e
        finally:
            response.close()

        logger.debug("Response received", url=url, status_code=response.status_code, size=len(content))
        return TransportResponse(status_code=response.status_code, content=content, url=url)

    def close(self) -> None:
        """Close the HTTP client."""
        if not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
