"""Development server bound to the configured PORT."""

import logging

from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand

logger = logging.getLogger(__name__)


def describe_cors_policy() -> str:
    if settings.CORS_ALLOW_ALL_ORIGINS:
        return "CORS: * (any origin)"
    return "CORS origins: " + ", ".join(settings.CORS_ALLOWED_ORIGINS)


class Command(RunserverCommand):
    help = "Starts the contact relay development server (defaults to settings.PORT)."

    @property
    def default_port(self) -> str:
        return str(settings.PORT)

    def inner_run(self, *args, **options):
        logger.info(describe_cors_policy())
        super().inner_run(*args, **options)
