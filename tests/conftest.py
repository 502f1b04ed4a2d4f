"""
Pytest configuration & shared fixtures.
"""

from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import unquote

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from escrow_refund.main import create_app

IVAN_PETROV: dict[str, Any] = {
    "firstName": "Ivan",
    "middleName": "",
    "lastName": "Petrov",
    "inn": "123",
    "address": {
        "postalCode": "101000",
        "city": "Moscow",
        "street": "Tverskaya",
        "house": "1",
    },
}

ANNA_SIDOROVA: dict[str, Any] = {
    "firstName": "Anna",
    "middleName": "Sergeevna",
    "lastName": "Sidorova",
    "inn": "7707083893",
    "address": {"fullAddress": "190000, Saint Petersburg, Nevsky pr., 28"},
}

# client id -> CSPC client card
CSPC_CLIENTS: dict[str, dict[str, Any]] = {
    "42": IVAN_PETROV,
    "43": ANNA_SIDOROVA,
}


def cspc_handler(request: httpx.Request) -> httpx.Response:
    """Fake CSPC: known ids answer 200, '500' answers 500, the rest 404."""
    raw_path = request.url.raw_path.decode("ascii").partition("?")[0]
    parts = [unquote(segment) for segment in raw_path.strip("/").split("/")]
    client_id = parts[-2] if parts[-1] == "information" else parts[-1]

    if client_id == "500":
        return httpx.Response(500, text="Internal Server Error")
    if client_id in CSPC_CLIENTS:
        return httpx.Response(200, json=CSPC_CLIENTS[client_id])
    return httpx.Response(404, json={"message": "client not found"})


@pytest.fixture
def refund_payload() -> dict[str, Any]:
    """A refund detail payload with two depositors and one beneficiary."""
    return {
        "data": {
            "retailEscrowProductInstance": {
                "productId": "ESC-2024-0001",
                "participants": [
                    {"type": "Depositor", "party": {"id": "42"}},
                    {
                        "type": "beneficiary",
                        "party": {"id": "900", "depositorName": "OOO Stroy"},
                    },
                    {"type": "DEPOSITOR", "party": {"id": "unknown"}},
                ],
            },
        },
        "status": "CALCULATED",
    }


@pytest_asyncio.fixture
async def cspc_http() -> AsyncIterator[httpx.AsyncClient]:
    """An httpx client wired to the fake CSPC."""
    async with httpx.AsyncClient(
        transport=httpx.MockTransport(cspc_handler),
        timeout=httpx.Timeout(5),
    ) as mock_http:
        yield mock_http


@pytest_asyncio.fixture
async def app() -> AsyncIterator[FastAPI]:
    """Provide a fresh FastAPI app whose shared http client talks to fake CSPC."""
    application = create_app()

    async with httpx.AsyncClient(
        transport=httpx.MockTransport(cspc_handler),
        timeout=httpx.Timeout(5),
    ) as mock_http:
        application.state.http_client = mock_http
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Provide an async test client."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as ac:
        yield ac
