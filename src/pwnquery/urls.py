"""Request parameters and URL composition for each endpoint.

Composition is pure: identical requests always produce identical URLs.
Arguments are escaped but never validated.
"""

from urllib.parse import quote, urlencode

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://haveibeenpwned.com/api/v2"


class AccountBreachRequest(BaseModel):
    """Breaches an account appears in."""

    model_config = ConfigDict(frozen=True)

    account: str = Field(description="Email address or username")
    truncate: bool = Field(default=False, description="Ask for breach names only")
    domain: str | None = Field(default=None, description="Only breaches on this domain")

    def with_truncate(self, truncate: bool = True) -> "AccountBreachRequest":
        return self.model_copy(update={"truncate": truncate})

    def with_domain(self, domain: str | None) -> "AccountBreachRequest":
        return self.model_copy(update={"domain": domain})


class AllBreachesRequest(BaseModel):
    """Every breach in the system, optionally filtered by domain."""

    model_config = ConfigDict(frozen=True)

    domain: str | None = Field(default=None, description="Only breaches on this domain")

    def with_domain(self, domain: str | None) -> "AllBreachesRequest":
        return self.model_copy(update={"domain": domain})


class BreachRequest(BaseModel):
    """A single breach by name."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Breach name (e.g., 'Adobe')")


class DataClassRequest(BaseModel):
    """The full data class taxonomy."""

    model_config = ConfigDict(frozen=True)


class PasteRequest(BaseModel):
    """Pastes an account appears in."""

    model_config = ConfigDict(frozen=True)

    account: str = Field(description="Email address")


def _base(base_url: str) -> str:
    return base_url.rstrip("/")


def _segment(value: str) -> str:
    return quote(value, safe="@")


def _with_query(url: str, params: list[tuple[str, str]]) -> str:
    if not params:
        return url
    return f"{url}?{urlencode(params)}"


def account_breaches_url(request: AccountBreachRequest, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build ``/breachedaccount/{account}[?domain=..][&truncateResponse=true]``."""
    params: list[tuple[str, str]] = []
    if request.domain:
        params.append(("domain", request.domain))
    if request.truncate:
        params.append(("truncateResponse", "true"))
    return _with_query(f"{_base(base_url)}/breachedaccount/{_segment(request.account)}", params)


def all_breaches_url(request: AllBreachesRequest, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build ``/breaches[?domain=..]``."""
    params: list[tuple[str, str]] = []
    if request.domain:
        params.append(("domain", request.domain))
    return _with_query(f"{_base(base_url)}/breaches", params)


def breach_url(request: BreachRequest, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build ``/breach/{name}``."""
    return f"{_base(base_url)}/breach/{_segment(request.name)}"


def data_classes_url(request: DataClassRequest | None = None, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build ``/dataclasses``."""
    return f"{_base(base_url)}/dataclasses"


def pastes_url(request: PasteRequest, base_url: str = DEFAULT_BASE_URL) -> str:
    """Build ``/pasteaccount/{account}``."""
    return f"{_base(base_url)}/pasteaccount/{_segment(request.account)}"
