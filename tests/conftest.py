from unittest import mock

import pytest

from requrl.client.request import Request
from requrl.http.ports import PortTable


@pytest.fixture
def fake_resolver():
    """Fixture providing a mock resolver that only knows ``proto`` (port 7000)."""
    resolver = mock.Mock()
    resolver.lookup.side_effect = lambda protocol: 7000 if protocol == "proto" else None
    return resolver


@pytest.fixture
def port_table():
    """Fixture providing a table with WebSocket schemes added."""
    return PortTable(ws=80, wss=443)


@pytest.fixture
def request_at():
    """Fixture returning a factory of Requests already pointed at a URL."""

    def _request_at(url, **kwargs):
        req = Request(**kwargs)
        assert req.set_url(url)
        return req

    return _request_at
