"""API routes for receipt processing and points lookup."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_receipt_store
from app.core.observability import sentry_breadcrumb
from app.models.schemas import GetPointsResponse, ProcessReceiptResponse, Receipt
from app.services.rule_engine import calculate_points, points_breakdown
from app.services.store import ReceiptStore
from app.services.validation import validate_receipt

logger = logging.getLogger(__name__)

INVALID_RECEIPT_DETAIL = "Invalid receipt format"
RECEIPT_NOT_FOUND_DETAIL = "Receipt not found"

router = APIRouter(prefix="/receipts", tags=["receipts"])


@router.post("/process", response_model=ProcessReceiptResponse)
def process_receipt(
    receipt: Receipt,
    store: ReceiptStore = Depends(get_receipt_store),
) -> ProcessReceiptResponse:
    """Validate a receipt, score it and return the id its points are stored under."""
    if not validate_receipt(receipt):
        logger.info("Rejected receipt from retailer %r", receipt.retailer)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_RECEIPT_DETAIL)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Points breakdown: %s", points_breakdown(receipt))
    points = calculate_points(receipt)
    receipt_id = store.create(points)

    logger.info("Processed receipt %s: %d points", receipt_id, points)
    sentry_breadcrumb(
        category="receipts",
        message="process_receipt.stored",
        data={"receipt_id": receipt_id, "points": points},
    )
    return ProcessReceiptResponse(id=receipt_id)


@router.get("/{receipt_id}/points", response_model=GetPointsResponse)
def get_points(
    receipt_id: str,
    store: ReceiptStore = Depends(get_receipt_store),
) -> GetPointsResponse:
    """Return the points awarded to a previously processed receipt."""
    points = store.lookup(receipt_id)
    if points is None:
        logger.info("Points requested for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=RECEIPT_NOT_FOUND_DETAIL)
    return GetPointsResponse(points=points)
