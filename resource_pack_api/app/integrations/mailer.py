"""
Outbound email.

``Mailer`` is the interface the service layer depends on.
``SmtpMailer`` delivers through SMTP with aiosmtplib using the
``SMTP_*`` settings.  Delivery failures raise ``UpstreamError``; there
is no retry and no queue, the caller awaits the send inline.
"""

import logging
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Protocol

import aiosmtplib

from ..core.config import settings
from ..core.errors import UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class OutboundEmail:
    sender: str
    to: str
    subject: str
    body: str


class Mailer(Protocol):
    async def send(self, message: OutboundEmail) -> None:
        ...


class SmtpMailer:
    """Send plain text emails through the configured SMTP server."""

    def build_message(self, message: OutboundEmail) -> EmailMessage:
        email = EmailMessage()
        email["From"] = message.sender
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.body)
        return email

    async def send(self, message: OutboundEmail) -> None:
        try:
            await aiosmtplib.send(
                self.build_message(message),
                hostname=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_username or None,
                password=settings.smtp_password or None,
                start_tls=settings.smtp_use_tls,
                timeout=settings.http_timeout,
            )
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error("Failed to send '%s' to %s: %s", message.subject, message.to, e)
            raise UpstreamError("Email delivery failed", details={"to": message.to}) from e
        logger.info("Sent '%s' to %s", message.subject, message.to)
