"""Contact app configuration."""

from django.apps import AppConfig


class ContactConfig(AppConfig):
    """Relays website contact-form submissions by email."""

    name = "apps.contact"
    label = "contact"
    verbose_name = "Contact"
