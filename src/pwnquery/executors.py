"""Request executors for the breach-notification service.

Each executor is a single-shot pipeline: compose the URL, GET it through
the transport, read the body as text, decode it. Either the fully decoded
records are returned or an error is raised; there is no retry and no
partial result.

API Documentation: https://haveibeenpwned.com/API/v2
"""

from collections.abc import Callable
from typing import TypeVar

import structlog
from pydantic import BaseModel, Field

from pwnquery.decoder import decode_breaches, decode_data_classes, decode_pastes
from pwnquery.exceptions import BodyReadError, HTTPStatusError, PwnQueryError
from pwnquery.models import Breach, DataClass, Paste
from pwnquery.transport import HttpxTransport, Transport
from pwnquery.urls import (
    DEFAULT_BASE_URL,
    AccountBreachRequest,
    AllBreachesRequest,
    BreachRequest,
    DataClassRequest,
    PasteRequest,
    account_breaches_url,
    all_breaches_url,
    breach_url,
    data_classes_url,
    pastes_url,
)

logger = structlog.get_logger()

T = TypeVar("T")


def _execute(
    transport: Transport,
    user_agent: str,
    url: str,
    decode: Callable[[str], list[T]],
) -> list[T]:
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    logger.debug("Sending request", url=url)

    try:
        response = transport.get(url, headers)

        if not response.is_success:
            raise HTTPStatusError(
                "Service returned an error status",
                url=url,
                status_code=response.status_code,
            )

        try:
            body = response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise BodyReadError("Response body is not valid UTF-8", url=url, detail=str(e)) from e

        records = decode(body)
    except PwnQueryError as e:
        logger.warning("Request failed", url=url, error=str(e))
        raise

    logger.debug("Decoded response", url=url, count=len(records))
    return records


def fetch_account_breaches(
    transport: Transport,
    user_agent: str,
    request: AccountBreachRequest,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> list[Breach]:
    """Get all breaches an account has been involved in."""
    return _execute(transport, user_agent, account_breaches_url(request, base_url), decode_breaches)


def fetch_all_breaches(
    transport: Transport,
    user_agent: str,
    request: AllBreachesRequest,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> list[Breach]:
    """Get every breach in the system, optionally for one domain."""
    return _execute(transport, user_agent, all_breaches_url(request, base_url), decode_breaches)


def fetch_breach(
    transport: Transport,
    user_agent: str,
    request: BreachRequest,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> list[Breach]:
    """Get a single breach by name.

    The service answers with one object; it is returned as a one-element list.
    """
    return _execute(transport, user_agent, breach_url(request, base_url), decode_breaches)


def fetch_data_classes(
    transport: Transport,
    user_agent: str,
    request: DataClassRequest | None = None,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> list[DataClass]:
    """Get the full data class taxonomy."""
    return _execute(transport, user_agent, data_classes_url(request, base_url), decode_data_classes)


def fetch_pastes(
    transport: Transport,
    user_agent: str,
    request: PasteRequest,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> list[Paste]:
    """Get all pastes an account appears in."""
    return _execute(transport, user_agent, pastes_url(request, base_url), decode_pastes)


class ClientConfig(BaseModel):
    """Configuration for PwnClient."""

    user_agent: str = Field(description="Identifies the consumer to the service (required)")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")


class PwnClient:
    """Client for the breach-notification API.

    Holds the caller's user agent and a transport, and exposes one method
    per endpoint.

    Example:
        with PwnClient(ClientConfig(user_agent="my-app")) as client:
            for breach in client.account_breaches("user@example.com"):
                print(f"Found in {breach.title} ({breach.breach_date})")
    """

    def __init__(self, config: ClientConfig, transport: Transport | None = None) -> None:
        """Initialize the client.

        Args:
            config: Client configuration with user agent.
            transport: Transport to use; an HttpxTransport is created if omitted.
        """
        self.config = config
        self._owns_transport = transport is None
        self.transport: Transport = transport if transport is not None else HttpxTransport(timeout=config.timeout)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "PwnClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def account_breaches(
        self,
        account: str,
        *,
        truncate: bool = False,
        domain: str | None = None,
    ) -> list[Breach]:
        """Check an account against all known breaches.

        Args:
            account: Email address or username to check
            truncate: Return only breach names
            domain: Only return breaches on this domain

        Returns:
            Breaches containing this account
        """
        request = AccountBreachRequest(account=account, truncate=truncate, domain=domain)
        return fetch_account_breaches(
            self.transport, self.config.user_agent, request, base_url=self.config.base_url
        )

    def all_breaches(self, *, domain: str | None = None) -> list[Breach]:
        """List all breaches, optionally filtered by domain (e.g., "adobe.com")."""
        return fetch_all_breaches(
            self.transport,
            self.config.user_agent,
            AllBreachesRequest(domain=domain),
            base_url=self.config.base_url,
        )

    def breach(self, name: str) -> list[Breach]:
        """Get details of a specific breach (e.g., "Adobe")."""
        return fetch_breach(
            self.transport,
            self.config.user_agent,
            BreachRequest(name=name),
            base_url=self.config.base_url,
        )

    def data_classes(self) -> list[DataClass]:
        return fetch_data_classes(
            self.transport,
            self.config.user_agent,
            DataClassRequest(),
            base_url=self.config.base_url,
        )

    def pastes(self, account: str) -> list[Paste]:
        """Check if an email address appears in any pastes."""
        return fetch_pastes(
            self.transport,
            self.config.user_agent,
            PasteRequest(account=account),
            base_url=self.config.base_url,
        )
