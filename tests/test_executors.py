"""Tests for request executors and the PwnClient facade."""

from unittest.mock import MagicMock, patch

import pytest

from pwnquery.exceptions import (
    BodyReadError,
    HTTPStatusError,
    ParseError,
    SchemaError,
    TransportError,
)
from pwnquery.executors import (
    ClientConfig,
    PwnClient,
    fetch_account_breaches,
    fetch_all_breaches,
    fetch_breach,
    fetch_data_classes,
    fetch_pastes,
)
from pwnquery.models import Breach
from pwnquery.transport import HttpxTransport, Transport
from pwnquery.urls import (
    AccountBreachRequest,
    AllBreachesRequest,
    BreachRequest,
    DataClassRequest,
    PasteRequest,
)

BASE = "https://haveibeenpwned.com/api/v2"
UA = "pwnquery-tests"


class TestExecutors:
    """Tests for the module-level executors."""

    def test_account_breaches(self, make_transport) -> None:
        transport = make_transport('[{"Name": "Adobe"}, {"Name": "LinkedIn"}]')
        request = AccountBreachRequest(account="user@example.com").with_domain("adobe.com").with_truncate()

        breaches = fetch_account_breaches(transport, UA, request)

        assert [b.name for b in breaches] == ["Adobe", "LinkedIn"]
        transport.get.assert_called_once_with(
            f"{BASE}/breachedaccount/user@example.com?domain=adobe.com&truncateResponse=true",
            {"User-Agent": UA, "Accept": "application/json"},
        )

    def test_all_breaches(self, make_transport) -> None:
        transport = make_transport('[{"Name": "Adobe", "Domain": "adobe.com"}]')

        breaches = fetch_all_breaches(transport, UA, AllBreachesRequest(domain="adobe.com"))

        assert breaches[0].domain == "adobe.com"
        assert transport.get.call_args[0][0] == f"{BASE}/breaches?domain=adobe.com"

    def test_single_breach(self, make_transport) -> None:
        """Request "Adobe", get a one-element list back."""
        transport = make_transport('{"Name":"Adobe","PwnCount":152445165,"IsVerified":true}')

        breaches = fetch_breach(transport, UA, BreachRequest(name="Adobe"))

        assert breaches == [Breach(name="Adobe", pwn_count=152445165, is_verified=True)]
        assert transport.get.call_args[0][0] == f"{BASE}/breach/Adobe"

    def test_data_classes(self, make_transport) -> None:
        transport = make_transport('["Email addresses","Passwords"]')

        assert fetch_data_classes(transport, UA, DataClassRequest()) == ["Email addresses", "Passwords"]
        assert transport.get.call_args[0][0] == f"{BASE}/dataclasses"

    def test_pastes(self, make_transport) -> None:
        transport = make_transport('[{"Source": "Pastebin", "Id": "AbCd", "EmailCount": 3}]')

        pastes = fetch_pastes(transport, UA, PasteRequest(account="user@example.com"))

        assert pastes[0].id == "AbCd"
        assert transport.get.call_args[0][0] == f"{BASE}/pasteaccount/user@example.com"

    def test_pastes_empty_body(self, make_transport) -> None:
        transport = make_transport(b"")
        assert fetch_pastes(transport, UA, PasteRequest(account="user@example.com")) == []

    def test_custom_base_url(self, make_transport) -> None:
        transport = make_transport("[]")
        fetch_all_breaches(transport, UA, AllBreachesRequest(), base_url="http://localhost:9000/v2")
        assert transport.get.call_args[0][0] == "http://localhost:9000/v2/breaches"


class TestExecutorErrors:
    """Tests for error propagation."""

    @pytest.mark.parametrize("status_code", [400, 403, 404, 429, 500, 503])
    def test_non_success_status(self, make_transport, status_code: int) -> None:
        transport = make_transport('{"Name": "Adobe"}', status_code=status_code)

        with pytest.raises(HTTPStatusError) as exc_info:
            fetch_breach(transport, UA, BreachRequest(name="Adobe"))

        assert exc_info.value.status_code == status_code
        assert exc_info.value.context["url"] == f"{BASE}/breach/Adobe"

    def test_not_found_flag(self, make_transport) -> None:
        transport = make_transport(b"", status_code=404)

        with pytest.raises(HTTPStatusError) as exc_info:
            fetch_account_breaches(transport, UA, AccountBreachRequest(account="clean@example.com"))

        assert exc_info.value.is_not_found is True
        assert isinstance(exc_info.value, TransportError)

    def test_transport_error_propagates(self) -> None:
        transport = MagicMock(spec=Transport)
        transport.get.side_effect = TransportError("Failed to connect", url="x")

        with pytest.raises(TransportError, match="Failed to connect"):
            fetch_data_classes(transport, UA)

    def test_invalid_utf8_body(self, make_transport) -> None:
        transport = make_transport(b"\xff\xfe\x00")

        with pytest.raises(BodyReadError):
            fetch_all_breaches(transport, UA, AllBreachesRequest())

    def test_parse_error(self, make_transport) -> None:
        transport = make_transport("<html>oops</html>")

        with pytest.raises(ParseError):
            fetch_all_breaches(transport, UA, AllBreachesRequest())

    def test_schema_error_returns_nothing(self, make_transport) -> None:
        """A bad record fails the whole call; no partial list."""
        transport = make_transport('[{"Name": "Adobe"}, {"Name": 5}]')

        with pytest.raises(SchemaError) as exc_info:
            fetch_all_breaches(transport, UA, AllBreachesRequest())

        assert exc_info.value.field == "Name"


class TestClientConfig:
    """Tests for client configuration."""

    def test_defaults(self) -> None:
        config = ClientConfig(user_agent=UA)
        assert config.user_agent == UA
        assert config.base_url == BASE
        assert config.timeout == 30.0

    def test_user_agent_required(self) -> None:
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            ClientConfig()  # type: ignore[call-arg]


class TestPwnClient:
    """Tests for the client facade."""

    def test_default_transport(self) -> None:
        client = PwnClient(ClientConfig(user_agent=UA, timeout=5.0))
        assert isinstance(client.transport, HttpxTransport)
        client.close()

    def test_context_manager_closes_owned_transport(self) -> None:
        with patch.object(HttpxTransport, "close") as mock_close:
            with PwnClient(ClientConfig(user_agent=UA)):
                pass
        mock_close.assert_called_once()

    def test_injected_transport_not_closed(self, make_transport) -> None:
        transport = make_transport("[]")
        with PwnClient(ClientConfig(user_agent=UA), transport=transport):
            pass
        transport.close.assert_not_called()

    def test_account_breaches(self, make_transport) -> None:
        transport = make_transport('[{"Name": "Adobe"}]')
        client = PwnClient(ClientConfig(user_agent=UA), transport=transport)

        breaches = client.account_breaches("user@example.com", truncate=True)

        assert breaches == [Breach(name="Adobe")]
        url, headers = transport.get.call_args[0]
        assert url == f"{BASE}/breachedaccount/user@example.com?truncateResponse=true"
        assert headers["User-Agent"] == UA

    def test_all_endpoints_use_base_url(self, make_transport) -> None:
        transport = make_transport("[]")
        client = PwnClient(ClientConfig(user_agent=UA, base_url="http://mirror/api"), transport=transport)

        client.all_breaches(domain="adobe.com")
        client.breach("Adobe")
        client.data_classes()
        client.pastes("user@example.com")

        urls = [call[0][0] for call in transport.get.call_args_list]
        assert urls == [
            "http://mirror/api/breaches?domain=adobe.com",
            "http://mirror/api/breach/Adobe",
            "http://mirror/api/dataclasses",
            "http://mirror/api/pasteaccount/user@example.com",
        ]
