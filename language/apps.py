import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class LanguageConfig(AppConfig):
    name = "language"
    verbose_name = "RFC 4646 language tags"

    def ready(self) -> None:
        if getattr(settings, "LANGUAGE_TAGS_PRELOAD_REGISTRY", False):
            from language.registration import default_registry

            registry = default_registry()
            logger.info(
                "preloaded language subtag registry dated %s", registry.file_date)
