"""Pytest configuration for contact relay tests."""

import pytest
from django.core.mail import EmailMessage

from apps.contact.conf import ContactSettings
from apps.contact.transports import SendReceipt, VerifyResult


@pytest.fixture
def valid_payload() -> dict:
    """A submission that passes every validation rule."""
    return {
        "firstName": "Sara",
        "lastName": "Ali",
        "email": "sara@example.com",
        "phone": "0500000000",
        "projectType": "landing",
        "message": "Hello",
    }


@pytest.fixture
def contact_settings() -> ContactSettings:
    """Settings for an authenticated SMTP account."""
    return ContactSettings(
        smtp_host="smtp.example.com",
        smtp_port=587,
        smtp_user="owner@example.com",
        smtp_password="secret",
        smtp_timeout=5,
    )


class FakeTransport:
    """In-memory stand-in for the SMTP transport."""

    name = "fake"
    verify_result = VerifyResult.success()
    send_error: Exception | None = None
    instances: list["FakeTransport"] = []

    def __init__(self, config: ContactSettings) -> None:
        self.config = config
        self.sent: list[EmailMessage] = []
        self.closed = False
        type(self).instances.append(self)

    def verify(self) -> VerifyResult:
        return self.verify_result

    def send(self, message: EmailMessage) -> SendReceipt:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(message)
        return SendReceipt(transport=self.name, message_id=message.extra_headers.get("Message-ID", ""))

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_transport():
    """Return a fresh FakeTransport subclass so per-test tweaks don't leak."""

    class _Transport(FakeTransport):
        instances: list[FakeTransport] = []

    return _Transport
