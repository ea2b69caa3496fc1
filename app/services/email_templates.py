"""
Rendering of contact and RFQ emails.

Each template kind has a ``<kind>.txt`` and ``<kind>.html`` Jinja2 template
under ``app/templates/email``. ``render_email`` is pure: it builds one context
from the submission, renders the text body from the raw values and the HTML
body from the same values passed through ``escape_html``. Templates never
receive unescaped user input.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from app.core.email_config import MailConfig
from app.schemas.contact import ContactMessage
from app.schemas.rfq import QuoteRequest

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates" / "email"

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",), default_for_string=False),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


class TemplateKind(str, Enum):
    CONTACT_NOTIFICATION = "contact_notification"
    CONTACT_ACKNOWLEDGEMENT = "contact_acknowledgement"
    RFQ_NOTIFICATION = "rfq_notification"
    RFQ_CONFIRMATION = "rfq_confirmation"


@dataclass(frozen=True)
class RenderedEmail:
    subject: str
    text: str
    html: str


def escape_html(value: Any) -> Markup:
    """Escape ``& < > " '`` and mark the result safe for the HTML templates."""
    text = "" if value is None else str(value)
    for raw, entity in _HTML_ESCAPES:
        text = text.replace(raw, entity)
    return Markup(text)


def _escape_context(context: Mapping[str, Any]) -> Dict[str, Any]:
    escaped: Dict[str, Any] = {}
    for key, value in context.items():
        if isinstance(value, Mapping):
            escaped[key] = _escape_context(value)
        elif isinstance(value, (str, int, float)) and not isinstance(value, bool):
            escaped[key] = escape_html(value)
        else:
            escaped[key] = value
    return escaped


def _brand_context(config: MailConfig, now: datetime) -> Dict[str, Any]:
    return {
        "name": config.brand_name,
        "legal_name": config.company_legal_name,
        "domain": config.site_domain,
        "sales_email": config.sales_inbox,
        "year": now.year,
    }


def _contact_context(message: ContactMessage) -> Dict[str, Any]:
    return {
        "topic": message.topic,
        "topic_label": message.topic_label,
        "name": message.name,
        "company": message.company or "-",
        "email": message.email,
        "phone": message.phone or "-",
        "subject": message.subject or "-",
        "message": message.message,
    }


def _rfq_context(request: QuoteRequest, reference_id: str, config: MailConfig) -> Dict[str, Any]:
    reply_subject = f"Re: RFQ {request.product_name} [{reference_id}]"
    return {
        "reference_id": reference_id,
        "product_slug": request.product_slug,
        "product_name": request.product_name,
        "product_reference_code": request.product_reference_code or "-",
        "company": request.company,
        "contact_name": request.contact_name,
        "email": request.email,
        "quantity": request.quantity,
        "unit": request.unit,
        "incoterm": request.incoterm,
        "destination": request.destination or "-",
        "message": request.message or "-",
        "origin_url": request.origin_url or "-",
        "reply_href": f"mailto:{quote(request.email, safe='@')}?subject={quote(reply_subject)}",
        "sales_href": f"mailto:{config.sales_inbox}",
    }


def _subject(kind: TemplateKind, submission: Union[ContactMessage, QuoteRequest], reference_id: Optional[str]) -> str:
    if kind is TemplateKind.CONTACT_NOTIFICATION:
        return f"{submission.topic_label} — {submission.subject or '(no subject)'}"
    if kind is TemplateKind.CONTACT_ACKNOWLEDGEMENT:
        return "We received your message"
    if kind is TemplateKind.RFQ_NOTIFICATION:
        return f"RFQ — {submission.product_name} ({submission.product_slug}) [{reference_id}]"
    return f"We received your RFQ — {submission.product_name} [{reference_id}]"


def render_email(
    kind: TemplateKind,
    submission: Union[ContactMessage, QuoteRequest],
    config: MailConfig,
    reference_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> RenderedEmail:
    """Render subject, plain-text body and HTML body for one email."""
    kind = TemplateKind(kind)
    now = now or datetime.now(timezone.utc)

    if kind in (TemplateKind.RFQ_NOTIFICATION, TemplateKind.RFQ_CONFIRMATION):
        if not isinstance(submission, QuoteRequest) or not reference_id:
            raise ValueError(f"{kind.value} needs a QuoteRequest and a reference id")
        fields = _rfq_context(submission, reference_id, config)
    else:
        if not isinstance(submission, ContactMessage):
            raise ValueError(f"{kind.value} needs a ContactMessage")
        fields = _contact_context(submission)

    context = {
        "d": fields,
        "brand": _brand_context(config, now),
        "sent_at": now.isoformat(timespec="seconds"),
    }

    text = _env.get_template(f"{kind.value}.txt").render(context)
    html = _env.get_template(f"{kind.value}.html").render(_escape_context(context))
    return RenderedEmail(subject=_subject(kind, submission, reference_id), text=text, html=html)
