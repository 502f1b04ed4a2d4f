"""
HTTP client for CSPC, the client information system.

Handles:
  1. Fetching a client card by client id.
  2. Translating transport failures into the SourceAPIException family.

``get_client_information`` is the lookup used by the depositor pass and
never raises: a missing client and a failed call both come back as None.
"""

from typing import Any
from urllib.parse import quote

import httpx

from escrow_refund.config import get_settings
from escrow_refund.core.exceptions import (
    NotFoundException,
    SourceAPIConnectionException,
    SourceAPIException,
    SourceAPITimeoutException,
)
from escrow_refund.core.logging import get_logger
from escrow_refund.schemas import ClientRecord

logger = get_logger(__name__)


class ClientCardClient:
    """httpx-backed client for the CSPC client card API."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    def _client_url(self, client_id: str) -> str:
        """CSPC card URL; the id is escaped as a single path segment."""
        settings = get_settings()
        path = settings.cspc_client_info_path.format(
            client_id=quote(client_id, safe="")
        )
        return f"{settings.cspc_base_url.rstrip('/')}{path}"

    # ── Lookup used by the depositor pass ─────────────────────────────

    async def get_client_information(
        self, client_id: str | None
    ) -> ClientRecord | None:
        """
        Return the client card for ``client_id``, or None when CSPC has
        no such client or could not be queried.
        """
        if not client_id:
            logger.warning("Client lookup skipped: empty client id")
            return None

        try:
            return await self.fetch_client(client_id)
        except NotFoundException:
            logger.warning("Client not found in CSPC",
                           extra={"client_id": client_id})
        except SourceAPIException as exc:
            logger.warning(
                "CSPC client lookup failed",
                extra={
                    "client_id": client_id,
                    "error_code": exc.error_code,
                    "error": exc.message,
                },
            )
        return None

    # ── Raw fetch ─────────────────────────────────────────────────────

    async def fetch_client(self, client_id: str) -> ClientRecord:
        """
        Fetch one client card.

        GET {CSPC_BASE_URL}/api/v1/clients/{client_id}/information

        Raises:
            NotFoundException:            CSPC answered 404.
            SourceAPITimeoutException:    the request timed out.
            SourceAPIConnectionException: CSPC could not be reached.
            SourceAPIException:           any other status, an unparsable body
                                          or a URL httpx rejects.
        """
        settings = get_settings()
        url = self._client_url(client_id)

        logger.info("Fetching CSPC client card",
                    extra={"url": url, "client_id": client_id})

        try:
            response = await self._http.get(
                url,
                headers={"Accept": "application/json"},
                timeout=settings.cspc_api_timeout,
            )
        except httpx.TimeoutException as exc:
            raise SourceAPITimeoutException(
                message=f"Request to {url} timed out after "
                        f"{settings.cspc_api_timeout}s.",
                details={"endpoint": url, "error": str(exc)},
            ) from exc
        except httpx.ConnectError as exc:
            raise SourceAPIConnectionException(
                details={"endpoint": url, "error": str(exc)},
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SourceAPIException(
                message=f"HTTP error calling CSPC: {type(exc).__name__}.",
                details={"endpoint": url, "error": str(exc)},
            ) from exc

        if response.status_code == 404:
            raise NotFoundException(
                message=f"Client '{client_id}' not found in CSPC.",
                details={"client_id": client_id},
            )
        if response.status_code != 200:
            raise SourceAPIException(
                message=f"CSPC returned HTTP {response.status_code}.",
                details={
                    "endpoint": url,
                    "status_code": response.status_code,
                    "body": response.text[:500],
                },
            )

        try:
            payload: Any = response.json()
            client = ClientRecord.model_validate(payload)
        except Exception as exc:
            raise SourceAPIException(
                message="Failed to parse CSPC client card.",
                details={
                    "endpoint": url,
                    "error": str(exc),
                    "raw_body": response.text[:500],
                },
            ) from exc

        logger.info("CSPC client card fetched", extra={"client_id": client_id})
        return client
