"""
Contact form endpoint.

Public endpoint receiving general inquiries from the website and relaying
them by email to the sales or general inbox.
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request, status

from app.api.deps import get_contact_service
from app.schemas.contact import ContactResponse
from app.schemas.error import ErrorResponse
from app.services.contact_service import ContactService

router = APIRouter()


@router.post(
    "/contact",
    response_model=ContactResponse,
    status_code=status.HTTP_200_OK,
    summary="Send a contact message",
    description=(
        "Validates the inquiry, routes it to the sales or general inbox by "
        "topic and optionally acknowledges it to the sender."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
        500: {"model": ErrorResponse, "description": "Mail relay failure"},
    },
)
async def submit_contact(
    request: Request,
    payload: Dict[str, Any] = Body(...),
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    """Relay a contact message; bot submissions get the same success body."""
    await service.submit(payload, request_id=getattr(request.state, "request_id", None))
    return ContactResponse()
