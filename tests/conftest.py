"""Pytest fixtures for pwnquery tests."""

from unittest.mock import MagicMock

import pytest

from pwnquery.config import reset_settings
from pwnquery.transport import Transport, TransportResponse


@pytest.fixture(autouse=True)
def reset_global_settings():
    """Reset settings before each test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_transport():
    """Build a mock transport answering every GET with the given status and body."""

    def _make(body: bytes | str = b"", status_code: int = 200) -> MagicMock:
        if isinstance(body, str):
            body = body.encode("utf-8")
        transport = MagicMock(spec=Transport)
        transport.get.side_effect = lambda url, headers: TransportResponse(
            status_code=status_code,
            content=body,
            url=url,
        )
        return transport

    return _make
