"""Minimal Django settings for the Storeman test suite."""

SECRET_KEY = "storeman-tests"

DEBUG = False

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "taggit",
    "simple_history",
    "storeman",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True
USE_I18N = True
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

STOREMAN = {
    "LOW_STOCK_THRESHOLD": 5,
    "DEFAULT_CURRENCY": "USD",
    "PLATFORM_DOMAIN": "aluro.shop",
}
