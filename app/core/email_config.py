"""
=============================================================================
EAST HIDES - CENTRALIZED MAIL CONFIGURATION
=============================================================================

Every address, flag and SMTP parameter used by the contact and RFQ flows
lives in ``MailConfig``. It is derived once from ``settings`` and handed to
the dispatcher and the orchestrators, which never read the environment
themselves.

Usage:
    from app.core.email_config import get_mail_config

    config = get_mail_config()
    recipient = config.sales_inbox
=============================================================================
"""
from __future__ import annotations

from dataclasses import dataclass
from email.utils import formataddr, parseaddr
from functools import lru_cache
from typing import Optional

from app.core.config import Settings, settings

FALLBACK_FROM_ADDRESS = "no-reply@east-hides.com"


@dataclass(frozen=True)
class MailConfig:
    """Immutable mail settings for one process."""

    # =========================================================================
    # SMTP TRANSPORT
    # =========================================================================
    smtp_host: Optional[str]
    smtp_port: int = 587
    smtp_secure: bool = False
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    reject_unauthorized: bool = True
    timeout_seconds: float = 15.0

    # =========================================================================
    # ADDRESSES
    # =========================================================================

    # Raw SMTP_FROM value; may already carry a display name
    from_address: Optional[str] = None

    # Staff inboxes; selected server-side, never from client input
    sales_inbox: str = "sales@east-hides.com"
    info_inbox: str = "info@east-hides.com"

    # =========================================================================
    # ACKNOWLEDGEMENTS
    # =========================================================================
    contact_confirm: bool = False
    rfq_confirm: bool = False

    # =========================================================================
    # BRANDING
    # =========================================================================
    brand_name: str = "EAST Hides"
    company_legal_name: str = "East Hides & investment company LTD"
    site_domain: str = "east-hides.com"

    @classmethod
    def from_settings(cls, source: Settings) -> "MailConfig":
        password = source.SMTP_PASS.get_secret_value() if source.SMTP_PASS else None
        return cls(
            smtp_host=source.SMTP_HOST,
            smtp_port=source.SMTP_PORT,
            smtp_secure=source.SMTP_SECURE,
            smtp_user=source.SMTP_USER,
            smtp_password=password,
            reject_unauthorized=source.SMTP_REJECT_UNAUTH,
            timeout_seconds=source.SMTP_TIMEOUT_SECONDS,
            from_address=source.SMTP_FROM,
            sales_inbox=source.SALES_INBOX,
            info_inbox=source.INFO_INBOX,
            contact_confirm=source.CONTACT_CONFIRM,
            rfq_confirm=source.MAIL_CONFIRM,
            brand_name=source.BRAND_NAME,
            company_legal_name=source.COMPANY_LEGAL_NAME,
            site_domain=source.SITE_DOMAIN,
        )

    def sender(self, display_name: str) -> str:
        """
        Build the From header for one kind of mail.

        An explicit SMTP_FROM is used verbatim; otherwise the SMTP login
        (or a no-reply fallback) is labelled with ``display_name``.
        """
        if self.from_address:
            name, _ = parseaddr(self.from_address)
            if name:
                return self.from_address
            return formataddr((display_name, self.from_address))
        return formataddr((display_name, self.smtp_user or FALLBACK_FROM_ADDRESS))


@lru_cache(maxsize=1)
def get_mail_config() -> MailConfig:
    """Return the process-wide mail configuration (read once per cold start)."""
    return MailConfig.from_settings(settings)
