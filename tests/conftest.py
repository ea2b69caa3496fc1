from typing import List, Optional

import fastapi.testclient as fastapi_testclient
import pytest

from app.api.deps import get_email_dispatcher
from app.core.email import OutboundEmail
from app.core.email_config import MailConfig, get_mail_config
from app.main import app

# -----------------------------------------------------------------------------
# Mail fakes
# -----------------------------------------------------------------------------


class FakeDispatcher:
    """Records outgoing mail; optionally fails on given call numbers (1-based)."""

    __test__ = False

    def __init__(
        self,
        fail_on: Optional[List[int]] = None,
        error: Optional[Exception] = None,
    ):
        self.sent: List[OutboundEmail] = []
        self.calls = 0
        self.fail_on = set(fail_on or [])
        self.error = error or RuntimeError("535 authentication failed for smtp.internal")

    async def send(self, email: OutboundEmail) -> None:
        self.calls += 1
        if self.calls in self.fail_on:
            raise self.error
        self.sent.append(email)


def make_mail_config(**overrides) -> MailConfig:
    values = dict(
        smtp_host="smtp.test",
        smtp_port=587,
        smtp_user="mailer@east-hides.com",
        smtp_password="pass",
        from_address=None,
        sales_inbox="sales@test.east-hides.com",
        info_inbox="info@test.east-hides.com",
        contact_confirm=False,
        rfq_confirm=False,
    )
    values.update(overrides)
    return MailConfig(**values)


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def mail_config() -> MailConfig:
    return make_mail_config()


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture
def client(mail_config, dispatcher):
    """
    TestClient with the mail configuration and dispatcher overridden.

    Tests that need another configuration or a failing dispatcher override
    the ``mail_config`` / ``dispatcher`` fixtures.
    """
    app.dependency_overrides[get_mail_config] = lambda: mail_config
    app.dependency_overrides[get_email_dispatcher] = lambda: dispatcher

    # Using 'with' context manager to trigger lifespan events (startup/shutdown)
    with fastapi_testclient.TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
