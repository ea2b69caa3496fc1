"""
Request-for-quote endpoint.

Receives a quote request for one catalog product, notifies sales and returns
the reference id the buyer can quote back.
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status

from app.api.deps import get_quote_request_service
from app.schemas.error import ErrorResponse
from app.schemas.rfq import QuoteResponse
from app.services.rfq_service import QuoteRequestService

router = APIRouter()


@router.post(
    "/rfq",
    response_model=QuoteResponse,
    status_code=status.HTTP_200_OK,
    summary="Request a quote",
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        500: {"model": ErrorResponse, "description": "Mail relay failure"},
    },
)
async def submit_rfq(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    service: QuoteRequestService = Depends(get_quote_request_service),
) -> QuoteResponse:
    outcome = await service.submit(payload, request_id=getattr(request.state, "request_id", None))
    return QuoteResponse(reference_id=outcome.reference_id)
