"""
Mail sender adapters - implement IMailSender.
"""

import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.app.services.mail_sender import IMailSender
from src.domain.exceptions import DeliveryError

logger = logging.getLogger(__name__)


class SmtpMailSender(IMailSender):
    """Delivers mail over SMTP; the blocking client runs in a worker thread"""

    def __init__(
        self,
        host: str,
        port: int,
        from_email: str,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.from_email = from_email
        self.username = username
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    async def send_mail(self, to: str, subject: str, html: str) -> None:
        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = self.from_email
        message["To"] = to
        message.attach(MIMEText(html, "html"))

        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as exc:
            raise DeliveryError(f"Failed to deliver mail to {to}: {exc}") from exc

    def _send(self, message: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
            if self.use_tls:
                server.starttls()
            if self.username:
                server.login(self.username, self.password)
            server.send_message(message)


class ConsoleMailSender(IMailSender):
    """Logs mail instead of sending it (development)"""

    async def send_mail(self, to: str, subject: str, html: str) -> None:
        logger.info(f"[MAIL] To: {to} Subject: {subject}\n{html}")
