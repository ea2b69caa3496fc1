from __future__ import annotations

import logging
from dataclasses import dataclass
from email.utils import formataddr
from typing import Any, Optional

from app.core.email import EmailDispatcher, OutboundEmail
from app.core.email_config import MailConfig
from app.core.errors import SubmissionFailed
from app.schemas.rfq import QuoteRequest
from app.services.contact_service import email_domain
from app.services.email_templates import TemplateKind, render_email
from app.services.reference_id import make_reference_id
from app.services.validation import parse_quote_request

logger = logging.getLogger(__name__)

RFQ_FAILURE_MESSAGE = "Failed to send request"


@dataclass(frozen=True)
class QuoteOutcome:
    reference_id: str
    confirmed: bool = False


class QuoteRequestService:
    """Validate an RFQ, mint its reference id and notify sales."""

    def __init__(self, config: MailConfig, dispatcher: EmailDispatcher):
        self.config = config
        self.dispatcher = dispatcher

    async def submit(self, payload: Any, request_id: Optional[str] = None) -> QuoteOutcome:
        quote = parse_quote_request(payload)
        reference_id = make_reference_id(quote.product_reference_code)
        rendered = render_email(
            TemplateKind.RFQ_NOTIFICATION, quote, self.config, reference_id=reference_id
        )

        try:
            await self.dispatcher.send(
                OutboundEmail(
                    to=[self.config.sales_inbox],
                    sender=self.config.sender(f"{self.config.brand_name} RFQ Bot"),
                    reply_to=formataddr((quote.contact_name, quote.email)),
                    subject=rendered.subject,
                    text=rendered.text,
                    html=rendered.html,
                )
            )
        except Exception as exc:
            logger.error(
                "RFQ delivery failed id=%s reference=%s error=%s",
                request_id,
                reference_id,
                exc,
                exc_info=True,
                extra={
                    "event": "rfq_delivery_failed",
                    "request_id": request_id,
                    "reference_id": reference_id,
                    "product": quote.product_slug,
                },
            )
            raise SubmissionFailed(RFQ_FAILURE_MESSAGE) from exc

        confirmed = False
        if self.config.rfq_confirm:
            confirmed = await self._confirm(quote, reference_id, request_id)

        logger.info(
            "AUDIT: RFQ delivered id=%s reference=%s product=%s confirmed=%s",
            request_id,
            reference_id,
            quote.product_slug,
            confirmed,
            extra={
                "event": "rfq_delivered",
                "request_id": request_id,
                "reference_id": reference_id,
                "email_domain": email_domain(quote.email),
            },
        )
        return QuoteOutcome(reference_id=reference_id, confirmed=confirmed)

    async def _confirm(self, quote: QuoteRequest, reference_id: str, request_id: Optional[str]) -> bool:
        rendered = render_email(
            TemplateKind.RFQ_CONFIRMATION, quote, self.config, reference_id=reference_id
        )
        try:
            await self.dispatcher.send(
                OutboundEmail(
                    to=[quote.email],
                    sender=self.config.sender(f"{self.config.brand_name} Sales"),
                    subject=rendered.subject,
                    text=rendered.text,
                    html=rendered.html,
                )
            )
        except Exception as exc:
            logger.warning(
                "RFQ confirmation failed id=%s reference=%s error=%s",
                request_id,
                reference_id,
                exc,
                extra={
                    "event": "rfq_confirmation_failed",
                    "request_id": request_id,
                    "reference_id": reference_id,
                },
            )
            return False
        return True
