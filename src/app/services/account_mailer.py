"""
Account mail composition.

Builds the account-verification and forgot-password messages. Links point
at client pages described by an explicit MailLinks struct.
"""

from dataclasses import dataclass
from urllib.parse import urlencode

from .mail_sender import IMailSender


@dataclass(frozen=True)
class MailLinks:
    """Client host and page paths linked from account emails"""

    host: str
    account_verification_path: str
    forgot_password_path: str


_BODY = (
    "<html><p>Dear {name},</p><p><a href='{url}'>{action}</a></p></br>"
    "<p>If you can't click the link, copy it and paste it into your "
    "browser's address bar.</p><p>{url}</p></html>"
)


class AccountMailer:
    def __init__(self, sender: IMailSender, links: MailLinks):
        self.sender = sender
        self.links = links

    def account_verification_url(self, code: str, token: str) -> str:
        query = urlencode({"c": code, "t": token})
        return f"{self.links.host}{self.links.account_verification_path}?{query}"

    def forgot_password_url(self, code: str, token: str) -> str:
        query = urlencode({"code": code, "t": token})
        return f"{self.links.host}{self.links.forgot_password_path}?{query}"

    async def send_account_verification(self, to: str, name: str, code: str, token: str) -> None:
        url = self.account_verification_url(code, token)
        await self.sender.send_mail(
            to=to,
            subject="Account Verification",
            html=_BODY.format(name=name, url=url, action="Click to activate your account"),
        )

    async def send_forgot_password(self, to: str, name: str, code: str, token: str) -> None:
        url = self.forgot_password_url(code, token)
        await self.sender.send_mail(
            to=to,
            subject="Forgot Password",
            html=_BODY.format(name=name, url=url, action="Click to renew your password"),
        )
