"""Fake email adapter — records sent emails for testing."""

from uuid import uuid4

from checkout.channel.email_port import NotificationService
from checkout.exceptions import NotificationDeliveryError


class FakeEmailAdapter(NotificationService):
    """Email adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def send(self, recipient: str, subject: str, body: str) -> bool:
        if not self.should_succeed:
            raise NotificationDeliveryError(self.failure_reason)

        self.sent_emails.append(
            {
                "message_id": f"email-{uuid4().hex[:12]}",
                "to": recipient,
                "subject": subject,
                "body": body,
            }
        )
        return True

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
