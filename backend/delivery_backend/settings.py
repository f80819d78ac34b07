"""
Django settings for the courier dispatch API.

Environment-specific values come from the process environment, optionally
loaded from a .env file at the repository root:

DJANGO_SECRET_KEY=change-me
DJANGO_DEBUG=true
DELIVERY_SEED_COURIERS=true
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR.parent / ".env")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-secret-key")
DEBUG = _env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS = [host for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if host]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "delivery",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "delivery_backend.urls"
WSGI_APPLICATION = "delivery_backend.wsgi.application"

# Couriers and orders live in process memory (see delivery.container); no database.
DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "delivery.exceptions.domain_exception_handler",
}

# --- Delivery service knobs ---
DELIVERY_SEED_COURIERS = _env_bool("DELIVERY_SEED_COURIERS", True)
DISPATCH_PRIORITY_COEFFICIENT = float(os.getenv("DISPATCH_PRIORITY_COEFFICIENT", "0.5"))
DISPATCH_TIE_BREAK_DISTANCE = float(os.getenv("DISPATCH_TIE_BREAK_DISTANCE", "1.0"))

LOG_LEVEL = os.getenv("DELIVERY_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    },
    "loggers": {
        "dispatch": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "couriers": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "orders": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "delivery": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
