import re
from dataclasses import dataclass
from typing import Dict, List
from urllib.parse import parse_qs, urlparse

from src.app.services.mail_sender import IMailSender
from src.domain.exceptions import DeliveryError


@dataclass
class SentMail:
    to: str
    subject: str
    html: str

    def link_params(self) -> Dict[str, str]:
        """Query parameters of the first link in the body"""
        url = re.search(r"href='([^']+)'", self.html).group(1)
        return {key: values[0] for key, values in parse_qs(urlparse(url).query).items()}


class MailOutbox(IMailSender):
    """Mail sender that keeps every message in memory"""

    def __init__(self):
        self.messages: List[SentMail] = []

    async def send_mail(self, to: str, subject: str, html: str) -> None:
        self.messages.append(SentMail(to=to, subject=subject, html=html))

    @property
    def last(self) -> SentMail:
        return self.messages[-1]


class FailingMailSender(IMailSender):
    async def send_mail(self, to: str, subject: str, html: str) -> None:
        raise DeliveryError("SMTP server unavailable")
