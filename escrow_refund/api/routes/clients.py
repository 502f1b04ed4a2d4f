"""
Clients endpoint — CSPC client card pass-through.

GET /clients/{client_id}
"""

from fastapi import APIRouter, Depends

from escrow_refund.api.dependencies import get_client_card_client
from escrow_refund.schemas import ClientRecord
from escrow_refund.services.client_card_client import ClientCardClient

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get(
    "/{client_id}",
    response_model=ClientRecord,
    summary="Get a CSPC client card",
    description="Fetches the client card for one client id from CSPC.",
)
async def get_client(
    client_id: str,
    client: ClientCardClient = Depends(get_client_card_client),
) -> ClientRecord:
    return await client.fetch_client(client_id)
