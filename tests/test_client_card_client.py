"""
Tests for ClientCardClient.
"""

import httpx
import pytest

from escrow_refund.core.exceptions import (
    NotFoundException,
    SourceAPIConnectionException,
    SourceAPIException,
    SourceAPITimeoutException,
)
from escrow_refund.services.client_card_client import ClientCardClient

CLIENT_CARD = {
    "firstName": "Ivan",
    "middleName": "Ivanovich",
    "lastName": "Petrov",
    "inn": "123",
    "address": {"city": "Moscow", "street": "Tverskaya", "house": "1"},
    "segment": "retail",
}


@pytest.mark.asyncio
async def test_fetch_client_success() -> None:
    """Should parse a CSPC client card."""
    seen: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=CLIENT_CARD)

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        record = await client.fetch_client("42")

    assert seen == ["/api/v1/clients/42/information"]
    assert record.first_name == "Ivan"
    assert record.middle_name == "Ivanovich"
    assert record.last_name == "Petrov"
    assert record.tax_id == "123"
    assert record.address is not None
    assert record.address.city == "Moscow"


@pytest.mark.asyncio
async def test_fetch_client_not_found() -> None:
    transport = httpx.MockTransport(lambda req: httpx.Response(404, json={}))
    async with httpx.AsyncClient(transport=transport) as hc:
        client = ClientCardClient(http_client=hc)
        with pytest.raises(NotFoundException):
            await client.fetch_client("42")


@pytest.mark.asyncio
async def test_fetch_client_http_error() -> None:
    """Should raise SourceAPIException on 500 from CSPC."""
    transport = httpx.MockTransport(
        lambda req: httpx.Response(500, text="Internal Server Error")
    )
    async with httpx.AsyncClient(transport=transport) as hc:
        client = ClientCardClient(http_client=hc)
        with pytest.raises(SourceAPIException) as exc_info:
            await client.fetch_client("42")

    assert exc_info.value.details["status_code"] == 500


@pytest.mark.asyncio
async def test_fetch_client_timeout() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        with pytest.raises(SourceAPITimeoutException):
            await client.fetch_client("42")


@pytest.mark.asyncio
async def test_fetch_client_connection_error() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        with pytest.raises(SourceAPIConnectionException):
            await client.fetch_client("42")


@pytest.mark.asyncio
async def test_fetch_client_unparsable_body() -> None:
    transport = httpx.MockTransport(
        lambda req: httpx.Response(200, text="<html>login</html>")
    )
    async with httpx.AsyncClient(transport=transport) as hc:
        client = ClientCardClient(http_client=hc)
        with pytest.raises(SourceAPIException):
            await client.fetch_client("42")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(404, json={}),
        httpx.Response(503, text="Service Unavailable"),
        httpx.Response(200, text="not json"),
    ],
)
async def test_get_client_information_returns_none_on_failure(
    response: httpx.Response,
) -> None:
    """The lookup used by the depositor pass never raises."""
    transport = httpx.MockTransport(lambda req: response)
    async with httpx.AsyncClient(transport=transport) as hc:
        client = ClientCardClient(http_client=hc)
        assert await client.get_client_information("42") is None


@pytest.mark.asyncio
async def test_get_client_information_returns_none_on_timeout() -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        assert await client.get_client_information("42") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("client_id", [None, ""])
async def test_get_client_information_skips_empty_id(client_id: str | None) -> None:
    calls: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=CLIENT_CARD)

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        assert await client.get_client_information(client_id) is None

    assert calls == []


@pytest.mark.asyncio
async def test_get_client_information_success() -> None:
    transport = httpx.MockTransport(lambda req: httpx.Response(200, json=CLIENT_CARD))
    async with httpx.AsyncClient(transport=transport) as hc:
        client = ClientCardClient(http_client=hc)
        record = await client.get_client_information("42")

    assert record is not None
    assert record.last_name == "Petrov"


@pytest.mark.asyncio
async def test_fetch_client_escapes_client_id() -> None:
    """Reserved characters in an id stay inside one path segment."""
    seen: list[bytes] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path)
        return httpx.Response(404, json={})

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        assert await client.get_client_information("43/information#?x=1") is None

    assert seen == [b"/api/v1/clients/43%2Finformation%23%3Fx%3D1/information"]


@pytest.mark.asyncio
async def test_fetch_client_control_character_in_id() -> None:
    seen: list[bytes] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.raw_path)
        return httpx.Response(404, json={})

    async with httpx.AsyncClient(transport=httpx.MockTransport(_handler)) as hc:
        client = ClientCardClient(http_client=hc)
        assert await client.get_client_information("x\n1") is None

    assert seen == [b"/api/v1/clients/x%0A1/information"]


@pytest.mark.asyncio
async def test_invalid_url_maps_to_source_api_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A URL httpx refuses to build is a lookup failure, not a crash."""
    monkeypatch.setattr(
        ClientCardClient,
        "_client_url",
        lambda self, client_id: "https://cspc.example.internal/clients/x\n1",
    )
    transport = httpx.MockTransport(lambda req: httpx.Response(200, json=CLIENT_CARD))
    async with httpx.AsyncClient(transport=transport) as hc:
        client = ClientCardClient(http_client=hc)
        with pytest.raises(SourceAPIException):
            await client.fetch_client("x")
        assert await client.get_client_information("x") is None
