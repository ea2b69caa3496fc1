"""Orchestrator tests without the HTTP layer."""
from dataclasses import replace
from email.utils import formataddr
from unittest.mock import patch

import anyio
import pytest

from app.core import email as email_module
from app.core.email import EmailDispatcher
from app.core.errors import InvalidPayloadError, MissingFieldsError, SubmissionFailed
from app.services import rfq_service
from app.services.contact_service import ContactService, email_domain
from app.services.rfq_service import QuoteRequestService

CONTACT = {
    "name": "Amina Yusuf",
    "email": "amina@example.com",
    "message": "Price list please.",
    "topic": "other",
}

QUOTE = {
    "product": "oppoponax-gum",
    "productName": "Opoponax Gum",
    "productId2": "EPRD-100504",
    "company": "Grasse Aromatics SARL",
    "contactName": "Claire Martin",
    "email": "claire@example.com",
    "quantity": "2",
    "unit": "ton",
    "incoterm": "FOB",
}


def _submit(service, payload, request_id="req-1"):
    return anyio.run(service.submit, payload, request_id)


class TestContactService:
    def test_general_topic_goes_to_info_inbox(self, mail_config, dispatcher):
        outcome = _submit(ContactService(mail_config, dispatcher), CONTACT)

        assert outcome.suppressed is False
        assert outcome.acknowledged is False
        assert list(dispatcher.sent[0].to) == [mail_config.info_inbox]
        assert dispatcher.sent[0].sender == formataddr(
            ("EAST Hides — Website", "mailer@east-hides.com")
        )

    def test_honeypot_suppresses_before_validation(self, mail_config, dispatcher):
        outcome = _submit(ContactService(mail_config, dispatcher), {"honeypot": "yes"})

        assert outcome.suppressed is True
        assert dispatcher.calls == 0

    def test_missing_fields_raise_before_sending(self, mail_config, dispatcher):
        payload = dict(CONTACT, email="   ")

        with pytest.raises(MissingFieldsError) as excinfo:
            _submit(ContactService(mail_config, dispatcher), payload)

        assert excinfo.value.missing_fields == ["email"]
        assert dispatcher.calls == 0

    def test_non_mapping_payload_is_invalid(self, mail_config, dispatcher):
        with pytest.raises(InvalidPayloadError):
            _submit(ContactService(mail_config, dispatcher), "hello")

    def test_dispatch_fault_becomes_generic_failure(self, mail_config, dispatcher):
        dispatcher.fail_on = {1}

        with pytest.raises(SubmissionFailed) as excinfo:
            _submit(ContactService(mail_config, dispatcher), CONTACT)

        assert excinfo.value.public_message == "Failed to send message"

    def test_acknowledgement_reported(self, mail_config, dispatcher):
        config = replace(mail_config, contact_confirm=True)

        outcome = _submit(ContactService(config, dispatcher), CONTACT)

        assert outcome.acknowledged is True
        assert [list(mail.to) for mail in dispatcher.sent] == [
            [config.info_inbox],
            ["amina@example.com"],
        ]

    def test_failed_acknowledgement_is_not_fatal(self, mail_config, dispatcher):
        dispatcher.fail_on = {2}
        config = replace(mail_config, contact_confirm=True)

        outcome = _submit(ContactService(config, dispatcher), CONTACT)

        assert outcome.acknowledged is False
        assert len(dispatcher.sent) == 1


class TestQuoteRequestService:
    def test_reference_id_uses_product_code(self, mail_config, dispatcher):
        with patch.object(
            rfq_service, "make_reference_id", return_value="EPRD-100504-LOYW3ABCD"
        ) as mint:
            outcome = _submit(QuoteRequestService(mail_config, dispatcher), QUOTE)

        mint.assert_called_once_with("EPRD-100504")
        assert outcome.reference_id == "EPRD-100504-LOYW3ABCD"
        assert dispatcher.sent[0].subject == (
            "RFQ — Opoponax Gum (oppoponax-gum) [EPRD-100504-LOYW3ABCD]"
        )
        assert dispatcher.sent[0].sender == "EAST Hides RFQ Bot <mailer@east-hides.com>"

    def test_explicit_from_address_is_used_verbatim(self, mail_config, dispatcher):
        config = replace(mail_config, from_address="East Web <web@east-hides.com>")

        _submit(QuoteRequestService(config, dispatcher), QUOTE)

        assert dispatcher.sent[0].sender == "East Web <web@east-hides.com>"

    def test_missing_fields_are_reported_together(self, mail_config, dispatcher):
        payload = dict(QUOTE, quantity="")
        del payload["company"]

        with pytest.raises(MissingFieldsError) as excinfo:
            _submit(QuoteRequestService(mail_config, dispatcher), payload)

        assert excinfo.value.missing_fields == ["company", "quantity"]
        assert dispatcher.calls == 0

    def test_dispatch_fault_becomes_generic_failure(self, mail_config, dispatcher):
        dispatcher.fail_on = {1}

        with pytest.raises(SubmissionFailed) as excinfo:
            _submit(QuoteRequestService(mail_config, dispatcher), QUOTE)

        assert excinfo.value.public_message == "Failed to send request"

    def test_confirmation_reported(self, mail_config, dispatcher):
        config = replace(mail_config, rfq_confirm=True)

        outcome = _submit(QuoteRequestService(config, dispatcher), QUOTE)

        assert outcome.confirmed is True
        assert list(dispatcher.sent[1].to) == ["claire@example.com"]
        assert dispatcher.sent[1].sender == "EAST Hides Sales <mailer@east-hides.com>"


class TestMultilineHeaderFields:
    """Line breaks in submitted header values reach the relay as spaces."""

    def _relay(self, service_cls, mail_config, payload):
        with patch.object(email_module.smtplib, "SMTP") as smtp_cls:
            server = smtp_cls.return_value
            server.has_extn.return_value = False
            outcome = _submit(service_cls(mail_config, EmailDispatcher(mail_config)), payload)

        server.send_message.assert_called_once()
        return outcome, server.send_message.call_args[0][0]

    def test_contact_subject_with_newline(self, mail_config):
        _, message = self._relay(
            ContactService, mail_config, dict(CONTACT, subject="Price\nlist")
        )

        assert message["Subject"] == "General Inquiry — Price list"

    def test_contact_name_with_crlf(self, mail_config):
        _, message = self._relay(
            ContactService, mail_config, dict(CONTACT, name="Amina\r\nYusuf")
        )

        assert message["Reply-To"] == "Amina Yusuf <amina@example.com>"

    def test_rfq_product_and_contact_with_newlines(self, mail_config):
        payload = dict(
            QUOTE,
            productName="Gum\nArabic",
            product="gum\r\narabic",
            contactName="Claire\n\nMartin",
        )

        outcome, message = self._relay(QuoteRequestService, mail_config, payload)

        assert message["Subject"] == (
            f"RFQ — Gum Arabic (gum arabic) [{outcome.reference_id}]"
        )
        assert message["Reply-To"] == "Claire Martin <claire@example.com>"


@pytest.mark.parametrize(
    "address, expected",
    [("a@example.com", "example.com"), ("not-an-email", None), (None, None)],
)
def test_email_domain(address, expected):
    assert email_domain(address) == expected
