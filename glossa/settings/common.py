import os
from pathlib import Path

import yaml

BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "glossa-insecure-development-key")
DEBUG = True
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost 127.0.0.1").split()

INSTALLED_APPS = [
    "rest_framework",
    "language",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "glossa.urls"

# language tags are parsed and validated in memory
DATABASES = {}

USE_I18N = True
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "UNAUTHENTICATED_USER": None,
}

YAML_LOADER = yaml.SafeLoader

LANGUAGE_TAGS_REGISTRY_PATH = BASE_DIR / "language" / "data" / "subtags.yaml"
LANGUAGE_TAGS_IANA_REGISTRY_URL = (
    "https://www.iana.org/assignments/language-subtag-registry/language-subtag-registry"
)
LANGUAGE_TAGS_FETCH_TIMEOUT = 30
LANGUAGE_TAGS_PRELOAD_REGISTRY = True

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
        "level": "WARNING",
    },
    "loggers": {
        "language": {
            "handlers": ["console"],
            "level": os.environ.get("LANGUAGE_TAGS_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
