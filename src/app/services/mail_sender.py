from abc import ABC, abstractmethod


class IMailSender(ABC):
    """Outbound mail port - application layer"""

    @abstractmethod
    async def send_mail(self, to: str, subject: str, html: str) -> None:
        """
        Deliver one message.

        Raises:
            DeliveryError: message could not be delivered
        """
        pass
