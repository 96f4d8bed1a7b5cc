import os

from django.conf import settings
from django.test import SimpleTestCase

from glossa.settings import common


class TestSettingsTests(SimpleTestCase):
    def test_logging_override_is_a_copy(self) -> None:
        self.assertEqual(settings.LOGGING["loggers"]["language"]["level"], "WARNING")
        self.assertEqual(
            common.LOGGING["loggers"]["language"]["level"],
            os.environ.get("LANGUAGE_TAGS_LOG_LEVEL", "INFO"))
        self.assertIsNot(settings.LOGGING, common.LOGGING)
