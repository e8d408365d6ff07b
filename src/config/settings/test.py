"""
Django test settings for the contact relay.
"""

from .base import *  # noqa: F403

DEBUG = False

SECRET_KEY = "django-insecure-test-key-only"  # noqa: S105

ALLOWED_HOSTS = ["*"]

CORS_ORIGIN = []
CORS_ALLOWED_ORIGINS = []
CORS_ALLOW_ALL_ORIGINS = True

# Tests substitute fake transports; nothing here should ever be dialled
SMTP_HOST = "smtp.invalid"
SMTP_PORT = 587
SMTP_USER = ""
SMTP_PASS = ""
SMTP_TIMEOUT = 1
MAIL_FROM = ""
MAIL_TO = ""
