from __future__ import annotations

import asyncio
import logging
import re
import smtplib
import ssl
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Optional, Sequence

from app.core.email_config import MailConfig
from app.core.errors import DispatchFault

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutboundEmail:
    """A fully rendered message ready for the relay."""

    to: Sequence[str]
    sender: str
    subject: str
    text: str
    html: str
    reply_to: Optional[str] = None


_LINE_BREAKS = re.compile(r"\s*[\r\n]+\s*")


def header_value(value: str) -> str:
    """Collapse CR/LF runs from submitted text into one space."""
    return _LINE_BREAKS.sub(" ", value).strip()


def build_message(email: OutboundEmail) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = header_value(email.sender)
    msg["To"] = header_value(", ".join(email.to))
    if email.reply_to:
        msg["Reply-To"] = header_value(email.reply_to)
    msg["Subject"] = header_value(email.subject)
    msg.set_content(email.text)
    msg.add_alternative(email.html, subtype="html")
    return msg


def _tls_context(config: MailConfig) -> ssl.SSLContext:
    context = ssl.create_default_context()
    if not config.reject_unauthorized:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


def _send_email_sync(config: MailConfig, message: EmailMessage) -> None:
    if not config.smtp_host:
        raise RuntimeError("SMTP_HOST is not configured")

    context = _tls_context(config)
    if config.smtp_secure:
        server = smtplib.SMTP_SSL(
            config.smtp_host,
            config.smtp_port,
            context=context,
            timeout=config.timeout_seconds,
        )
    else:
        server = smtplib.SMTP(
            config.smtp_host, config.smtp_port, timeout=config.timeout_seconds
        )

    with server:
        if not config.smtp_secure:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls(context=context)
                server.ehlo()
        if config.smtp_user and config.smtp_password:
            server.login(config.smtp_user, config.smtp_password)
        server.send_message(message)


class EmailDispatcher:
    """SMTP client shared by the contact and RFQ flows. Never retries."""

    def __init__(self, config: MailConfig):
        self.config = config

    async def send(self, email: OutboundEmail) -> None:
        message = build_message(email)
        try:
            await asyncio.wait_for(
                asyncio.to_thread(_send_email_sync, self.config, message),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.warning(
                "SMTP send timed out after %ss host=%s",
                self.config.timeout_seconds,
                self.config.smtp_host,
            )
            raise DispatchFault("SMTP send timed out") from exc
        except (smtplib.SMTPException, OSError, RuntimeError) as exc:
            logger.warning(
                "SMTP send failed host=%s error=%s", self.config.smtp_host, exc
            )
            raise DispatchFault(str(exc)) from exc
