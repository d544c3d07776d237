"""
Unit tests for the SMTP mailer (smtplib replaced by a recorder).

Covered:
- STARTTLS on submission ports, implicit TLS on 465
- message headers and the link in the body
"""

import pytest

from liftlog.services import mailer as mailer_module
from liftlog.services.mailer import SmtpMailer

pytestmark = pytest.mark.unit


class RecordingSMTP:
    instances: list["RecordingSMTP"] = []

    def __init__(self, host, port):
        self.host, self.port = host, port
        self.calls: list[str] = []
        self.messages = []
        RecordingSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def starttls(self):
        self.calls.append("starttls")

    def login(self, user, password):
        self.calls.append(f"login:{user}")

    def send_message(self, message):
        self.messages.append(message)


@pytest.fixture(autouse=True)
def recorder(monkeypatch):
    RecordingSMTP.instances = []
    monkeypatch.setattr(mailer_module.smtplib, "SMTP", RecordingSMTP)
    monkeypatch.setattr(mailer_module.smtplib, "SMTP_SSL", RecordingSMTP)
    return RecordingSMTP


async def test_starttls_on_submission_port(settings, recorder):
    await SmtpMailer(settings).send_sign_in_link("lifter@example.com", "http://test/api/auth/callback/email?token=t")

    [server] = recorder.instances
    assert (server.host, server.port) == ("smtp.test", 587)
    assert server.calls == ["starttls", "login:mailer"]
    [message] = server.messages
    assert message["To"] == "lifter@example.com"
    assert message["From"] == "LiftLog <noreply@liftlog.test>"
    assert message["Subject"] == "Sign in to LiftLog"
    assert "http://test/api/auth/callback/email?token=t" in message.get_content()


async def test_implicit_tls_on_465(settings, recorder):
    settings.email_server_port = 465
    await SmtpMailer(settings).send_sign_in_link("lifter@example.com", "http://test/link")

    [server] = recorder.instances
    assert server.port == 465
    assert server.calls == ["login:mailer"]
