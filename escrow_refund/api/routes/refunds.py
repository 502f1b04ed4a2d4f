"""
Refund detail endpoints — depositor enrichment of a refund payload.
"""

from fastapi import APIRouter, Depends

from escrow_refund.api.dependencies import get_depositor_service
from escrow_refund.schemas.refund_schema import DetailRefundAmountResponse
from escrow_refund.services.depositor_service import DepositorEnrichmentService

router = APIRouter(prefix="/refunds", tags=["Refunds"])


@router.post(
    "/detail/depositors",
    response_model=DetailRefundAmountResponse,
    summary="Fill depositor parties from CSPC",
    description=(
        "Looks up every participant of type 'depositor' in CSPC and copies "
        "the client's name, tax id and address onto its party. Depositors "
        "CSPC has no data for are filled with an error message."
    ),
)
async def fill_depositors(
    payload: DetailRefundAmountResponse,
    service: DepositorEnrichmentService = Depends(get_depositor_service),
) -> DetailRefundAmountResponse:
    return await service.fill_depositor_names(payload)
