from __future__ import annotations

import logging
from dataclasses import dataclass
from email.utils import formataddr
from typing import Any, Mapping, Optional

from app.core.email import EmailDispatcher, OutboundEmail
from app.core.email_config import MailConfig
from app.core.errors import SubmissionFailed
from app.schemas.contact import ContactMessage
from app.services.email_templates import TemplateKind, render_email
from app.services.validation import is_honeypot_tripped, parse_contact

logger = logging.getLogger(__name__)

CONTACT_FAILURE_MESSAGE = "Failed to send message"


def email_domain(address: Optional[str]) -> Optional[str]:
    if address and "@" in address:
        return address.rsplit("@", 1)[-1]
    return None


@dataclass(frozen=True)
class ContactOutcome:
    suppressed: bool = False
    acknowledged: bool = False


class ContactService:
    """Validate a contact submission and notify the right inbox."""

    def __init__(self, config: MailConfig, dispatcher: EmailDispatcher):
        self.config = config
        self.dispatcher = dispatcher

    def select_recipient(self, message: ContactMessage) -> str:
        # Never taken from the payload.
        return self.config.sales_inbox if message.is_sales else self.config.info_inbox

    async def submit(self, payload: Any, request_id: Optional[str] = None) -> ContactOutcome:
        if isinstance(payload, Mapping) and is_honeypot_tripped(payload):
            logger.info(
                "Contact submission discarded by honeypot id=%s",
                request_id,
                extra={"event": "contact_honeypot", "request_id": request_id},
            )
            return ContactOutcome(suppressed=True)

        message = parse_contact(payload)
        recipient = self.select_recipient(message)
        rendered = render_email(TemplateKind.CONTACT_NOTIFICATION, message, self.config)

        try:
            await self.dispatcher.send(
                OutboundEmail(
                    to=[recipient],
                    sender=self.config.sender(f"{self.config.brand_name} — Website"),
                    reply_to=formataddr((message.name, message.email)),
                    subject=rendered.subject,
                    text=rendered.text,
                    html=rendered.html,
                )
            )
        except Exception as exc:
            logger.error(
                "Contact delivery failed id=%s error=%s",
                request_id,
                exc,
                exc_info=True,
                extra={
                    "event": "contact_delivery_failed",
                    "request_id": request_id,
                    "topic": message.topic,
                    "email_domain": email_domain(message.email),
                },
            )
            raise SubmissionFailed(CONTACT_FAILURE_MESSAGE) from exc

        acknowledged = False
        if self.config.contact_confirm:
            acknowledged = await self._acknowledge(message, request_id)

        logger.info(
            "AUDIT: Contact request delivered id=%s topic=%s acknowledged=%s",
            request_id,
            message.topic,
            acknowledged,
            extra={
                "event": "contact_request_delivered",
                "request_id": request_id,
                "email_domain": email_domain(message.email),
            },
        )
        return ContactOutcome(acknowledged=acknowledged)

    async def _acknowledge(self, message: ContactMessage, request_id: Optional[str]) -> bool:
        rendered = render_email(TemplateKind.CONTACT_ACKNOWLEDGEMENT, message, self.config)
        try:
            await self.dispatcher.send(
                OutboundEmail(
                    to=[message.email],
                    sender=self.config.sender(f"{self.config.brand_name} — No-Reply"),
                    subject=rendered.subject,
                    text=rendered.text,
                    html=rendered.html,
                )
            )
        except Exception as exc:
            # The staff notification already went out; a retry from the
            # browser would duplicate it.
            logger.warning(
                "Contact acknowledgement failed id=%s error=%s",
                request_id,
                exc,
                extra={
                    "event": "contact_ack_failed",
                    "request_id": request_id,
                    "email_domain": email_domain(message.email),
                },
            )
            return False
        return True
