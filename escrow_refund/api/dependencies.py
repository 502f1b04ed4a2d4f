"""
Shared FastAPI dependencies — injected into route handlers.
"""

from fastapi import Depends, Request

from escrow_refund.services.client_card_client import ClientCardClient
from escrow_refund.services.depositor_service import DepositorEnrichmentService


def get_client_card_client(request: Request) -> ClientCardClient:
    """Provide a ClientCardClient backed by the shared httpx client."""
    return ClientCardClient(http_client=request.app.state.http_client)


def get_depositor_service(
    client_card_client: ClientCardClient = Depends(get_client_card_client),
) -> DepositorEnrichmentService:
    """Provide a DepositorEnrichmentService with its dependencies wired up."""
    return DepositorEnrichmentService(client_lookup=client_card_client)
