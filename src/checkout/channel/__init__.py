"""Notification channel port and the recording email adapter."""

from checkout.channel.email_port import NotificationService
from checkout.channel.fake_email import FakeEmailAdapter

__all__ = ["FakeEmailAdapter", "NotificationService"]
