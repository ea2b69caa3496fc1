"""
EAST Hides lead-intake services.

Services:
    - ContactService: contact form relay to the sales or general inbox
    - QuoteRequestService: request-for-quote relay with reference ids
    - product_catalog: static, read-only product list
"""

from .contact_service import ContactOutcome, ContactService
from .rfq_service import QuoteOutcome, QuoteRequestService

__all__ = [
    "ContactOutcome",
    "ContactService",
    "QuoteOutcome",
    "QuoteRequestService",
]
