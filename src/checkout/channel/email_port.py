"""Notification channel port — abstract interface for email dispatch."""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    """Abstract interface for email dispatch adapters."""

    @abstractmethod
    async def send(self, recipient: str, subject: str, body: str) -> bool:
        """Send an email message.

        Returns:
            True when the message was accepted for delivery.
        """
        ...
