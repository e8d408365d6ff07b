"""Contact relay settings, loaded once from Django settings."""

from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings
from django.core.signals import setting_changed
from django.dispatch import receiver

DEFAULT_SENDER = "no-reply@example.com"

SMTPS_PORT = 465

_CONTACT_SETTINGS = {
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USER",
    "SMTP_PASS",
    "SMTP_TIMEOUT",
    "MAIL_FROM",
    "MAIL_TO",
}


@dataclass(frozen=True)
class ContactSettings:
    """SMTP credentials and addressing for outbound contact mail."""

    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_timeout: int | None = None
    mail_from: str = ""
    mail_to: str = ""

    @classmethod
    def from_settings(cls) -> "ContactSettings":
        return cls(
            smtp_host=getattr(settings, "SMTP_HOST", "") or "localhost",
            smtp_port=int(getattr(settings, "SMTP_PORT", 587)),
            smtp_user=getattr(settings, "SMTP_USER", ""),
            smtp_password=getattr(settings, "SMTP_PASS", ""),
            smtp_timeout=getattr(settings, "SMTP_TIMEOUT", None),
            mail_from=getattr(settings, "MAIL_FROM", ""),
            mail_to=getattr(settings, "MAIL_TO", ""),
        )

    @property
    def use_ssl(self) -> bool:
        """Port 465 speaks TLS from the first byte; every other port upgrades with STARTTLS."""
        return self.smtp_port == SMTPS_PORT

    @property
    def sender(self) -> str:
        return self.mail_from or self.smtp_user or DEFAULT_SENDER

    def recipient_for(self, submitter_email: str) -> str:
        """Return the inbox that receives a submission from ``submitter_email``."""
        return self.mail_to or self.smtp_user or submitter_email


@lru_cache(maxsize=1)
def get_contact_settings() -> ContactSettings:
    """Return the process-wide contact settings."""
    return ContactSettings.from_settings()


@receiver(setting_changed)
def _reset_contact_settings(*, setting, **kwargs) -> None:
    if setting in _CONTACT_SETTINGS:
        get_contact_settings.cache_clear()
