from fastapi import Depends

from app.core.email import EmailDispatcher
from app.core.email_config import MailConfig, get_mail_config
from app.services.contact_service import ContactService
from app.services.rfq_service import QuoteRequestService


def get_email_dispatcher(config: MailConfig = Depends(get_mail_config)) -> EmailDispatcher:
    """
    SMTP dispatcher dependency.

    Tests override this with a fake to capture outgoing mail:
        app.dependency_overrides[get_email_dispatcher] = lambda: fake
    """
    return EmailDispatcher(config)


def get_contact_service(
    config: MailConfig = Depends(get_mail_config),
    dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
) -> ContactService:
    return ContactService(config, dispatcher)


def get_quote_request_service(
    config: MailConfig = Depends(get_mail_config),
    dispatcher: EmailDispatcher = Depends(get_email_dispatcher),
) -> QuoteRequestService:
    return QuoteRequestService(config, dispatcher)
