"""
Presence-only validation of inbound form payloads.

Required fields are checked before any parsing, so the caller always gets the
complete list of what is missing. Formats (email syntax, numeric quantity,
enum membership) are deliberately not checked.
"""
from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from pydantic import ValidationError

from app.core.errors import InvalidPayloadError, MissingFieldsError
from app.schemas.contact import ContactMessage
from app.schemas.rfq import QuoteRequest

CONTACT_REQUIRED_FIELDS = ("name", "email", "message", "topic")
RFQ_REQUIRED_FIELDS = (
    "product",
    "productName",
    "company",
    "contactName",
    "email",
    "quantity",
    "unit",
    "incoterm",
)
HONEYPOT_FIELDS = ("hp", "honeypot")


def is_blank(value: Any) -> bool:
    """Whitespace-only strings, zero and NaN count as absent."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def find_missing_fields(payload: Mapping[str, Any], required: Sequence[str]) -> List[str]:
    return [field for field in required if is_blank(payload.get(field))]


def is_honeypot_tripped(payload: Mapping[str, Any]) -> bool:
    # Any non-empty value trips it, whitespace included.
    return any(payload.get(field) for field in HONEYPOT_FIELDS)


def _ensure_mapping(payload: Any) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError()
    return payload


def _invalid_field(exc: ValidationError) -> InvalidPayloadError:
    loc = exc.errors()[0].get("loc") or ("payload",)
    return InvalidPayloadError(f"Invalid field: {loc[0]}")


def parse_contact(payload: Any) -> ContactMessage:
    """Return a ContactMessage or raise MissingFieldsError / InvalidPayloadError."""
    data = _ensure_mapping(payload)
    missing = find_missing_fields(data, CONTACT_REQUIRED_FIELDS)
    if missing:
        raise MissingFieldsError(missing)
    try:
        return ContactMessage.model_validate(data)
    except ValidationError as exc:
        raise _invalid_field(exc) from exc


def parse_quote_request(payload: Any) -> QuoteRequest:
    """Return a QuoteRequest or raise MissingFieldsError / InvalidPayloadError."""
    data = _ensure_mapping(payload)
    missing = find_missing_fields(data, RFQ_REQUIRED_FIELDS)
    if missing:
        raise MissingFieldsError(missing)
    try:
        return QuoteRequest.model_validate(data)
    except ValidationError as exc:
        raise _invalid_field(exc) from exc
