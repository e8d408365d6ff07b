"""
Django base settings for the contact relay.
"""

from pathlib import Path

import environ

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    PORT=(int, 4000),
    CORS_ORIGIN=(list, []),
    SMTP_HOST=(str, "localhost"),
    SMTP_PORT=(int, 587),
    SMTP_USER=(str, ""),
    SMTP_PASS=(str, ""),
    SMTP_TIMEOUT=(int, 60),
    MAIL_FROM=(str, ""),
    MAIL_TO=(str, ""),
    LOG_LEVEL=(str, "INFO"),
)

# Read .env file from project root (parent of src/)
env_file = BASE_DIR.parent / ".env"
if env_file.exists():
    environ.Env.read_env(str(env_file))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-change-me-in-production")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# Application definition
INSTALLED_APPS = [
    # Third party
    "corsheaders",
    # Local apps
    "apps.contact",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

ASGI_APPLICATION = "config.asgi.application"
WSGI_APPLICATION = "config.wsgi.application"

# Submissions are relayed, never stored
DATABASES = {}

APPEND_SLASH = False

# Internationalization
LANGUAGE_CODE = "ar"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Request body ceiling for JSON and form posts
DATA_UPLOAD_MAX_MEMORY_SIZE = 100 * 1024

# Development server
PORT = env("PORT")

# CORS (empty CORS_ORIGIN allows any origin)
CORS_ORIGIN = [origin.strip() for origin in env("CORS_ORIGIN") if origin.strip()]
CORS_ALLOWED_ORIGINS = CORS_ORIGIN
CORS_ALLOW_ALL_ORIGINS = not CORS_ORIGIN

# Outbound mail
SMTP_HOST = env("SMTP_HOST")
SMTP_PORT = env("SMTP_PORT")
SMTP_USER = env("SMTP_USER")
SMTP_PASS = env("SMTP_PASS")
SMTP_TIMEOUT = env("SMTP_TIMEOUT")
MAIL_FROM = env("MAIL_FROM")
MAIL_TO = env("MAIL_TO")

# Logging
LOG_LEVEL = env("LOG_LEVEL")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
