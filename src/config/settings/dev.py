"""
Django development settings for the contact relay.
"""

from .base import *  # noqa: F403

DEBUG = True

ALLOWED_HOSTS = ["*"]

SECRET_KEY = "django-insecure-dev-key-do-not-use-in-production"  # noqa: S105
