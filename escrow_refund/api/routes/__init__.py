"""
Route aggregation for API v1.
"""

from fastapi import APIRouter

from escrow_refund.api.routes.clients import router as clients_router
from escrow_refund.api.routes.refunds import router as refunds_router

router = APIRouter()
router.include_router(refunds_router)
router.include_router(clients_router)
