"""Outgoing mail for sign-in links (SMTP)."""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from typing import Protocol

from liftlog.core.config import Settings

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    async def send_sign_in_link(self, to: str, url: str) -> None: ...


class SmtpMailer:
    """Sends through the configured SMTP server. Port 465 uses implicit TLS, others STARTTLS."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _build_message(self, to: str, url: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = f"Sign in to {self.settings.app_name}"
        message["From"] = self.settings.email_from
        message["To"] = to
        message.set_content(f"Sign in to {self.settings.app_name}:\n\n{url}\n\nIf you did not request this, ignore it.")
        return message

    def _send(self, message: EmailMessage) -> None:
        host, port = self.settings.email_server_host, self.settings.email_server_port
        if port == 465:
            with smtplib.SMTP_SSL(host, port) as server:
                server.login(self.settings.email_server_user, self.settings.email_server_password)
                server.send_message(message)
            return
        with smtplib.SMTP(host, port) as server:
            server.starttls()
            server.login(self.settings.email_server_user, self.settings.email_server_password)
            server.send_message(message)

    async def send_sign_in_link(self, to: str, url: str) -> None:
        logger.info("Sending sign-in link to %s", to)
        # smtplib blocks
        await asyncio.to_thread(self._send, self._build_message(to, url))
