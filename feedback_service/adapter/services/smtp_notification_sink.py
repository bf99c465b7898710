"""
SMTP notification sink.

smtplib is blocking, so each message is sent from a worker thread.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage

from feedback_service.app.services.notification_sink import (
    DispatchResult,
    INotificationSink,
    MailMessage,
)

logger = logging.getLogger(__name__)


class SmtpNotificationSink(INotificationSink):
    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        sender: str,
        use_tls: bool = True,
        enabled: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender
        self.use_tls = use_tls
        self.enabled = enabled
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "SmtpNotificationSink":
        return cls(
            host=config.MAIL_HOST,
            port=config.MAIL_PORT,
            username=config.MAIL_USERNAME,
            password=config.MAIL_PASSWORD,
            sender=config.MAIL_FROM,
            use_tls=config.MAIL_USE_TLS,
            enabled=config.MAIL_ENABLED,
        )

    async def send(self, message: MailMessage) -> DispatchResult:
        if not self.enabled:
            logger.info("Mail delivery disabled, not sending %r to %s", message.subject, message.to)
            return DispatchResult.failed("Mail delivery disabled")

        try:
            await asyncio.to_thread(self._send_smtp, message)
        except (smtplib.SMTPException, OSError) as exc:
            return DispatchResult.failed(f"{type(exc).__name__}: {exc}")

        logger.info("Sent %r to %s", message.subject, message.to)
        return DispatchResult.sent()

    def _build_message(self, message: MailMessage) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = self.sender
        msg["To"] = message.to
        msg.set_content(message.body, subtype="html")
        return msg

    def _send_smtp(self, message: MailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(self._build_message(message))
