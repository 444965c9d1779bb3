"""Content client tests against a mocked transport"""

import httpx
import pytest

from projection_engine.content import ContentClient, generate_content
from projection_engine.domain.exceptions import ContentServiceError


def make_client(handler) -> ContentClient:
    return ContentClient(base_url="http://content.test", timeout=1.0, transport=httpx.MockTransport(handler))


def test_generate_returns_service_content():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/generate"
        return httpx.Response(200, json={"title": "Compound Interest", "body": "Grows over time."})

    content = generate_content("Compound Interest Calculator", ["compound interest"], client=make_client(handler))

    assert content.generated is True
    assert content.title == "Compound Interest"
    assert content.body == "Grows over time."


def test_server_error_falls_back():
    client = make_client(lambda request: httpx.Response(503))

    with pytest.raises(ContentServiceError):
        client.generate("Crypto Tax Calculator", [])

    content = generate_content("Crypto Tax Calculator", "crypto tax", client=client)
    assert content.generated is False
    assert content.title == "Crypto Tax Calculator"


def test_malformed_payload_falls_back():
    client = make_client(lambda request: httpx.Response(200, json={"headline": "missing fields"}))

    content = generate_content("Dividend Yield Calculator", None, client=client)

    assert content.generated is False
    assert "investing" in content.body


def test_transport_failure_falls_back():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    content = generate_content("Market Timing Cost Calculator", ["market timing"], client=make_client(handler))

    assert content.generated is False


def test_unconfigured_client_never_calls_out():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"title": "t", "body": "b"})

    client = ContentClient(base_url="", transport=httpx.MockTransport(handler))
    client.base_url = None

    content = generate_content("Bitcoin ROI Calculator", ["bitcoin roi"], client=client)

    assert content.generated is False
    assert calls == []
