from django.conf import settings
from django.core.management.base import BaseCommand, CommandParser

from language.registration import dump_registry, fetch_iana_registry


class Command(BaseCommand):
    help = "Saves a snapshot of the IANA Language Subtag Registry used for validation"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument(
            "--url",
            default=settings.LANGUAGE_TAGS_IANA_REGISTRY_URL,
            help="URL of the registry in record-jar format",
        )
        parser.add_argument(
            "--path",
            default=str(settings.LANGUAGE_TAGS_REGISTRY_PATH),
            help="Path of the YAML snapshot to write",
        )

    def handle(self, *args, **options) -> None:
        registry = fetch_iana_registry(options["url"])
        dump_registry(registry, options["path"])
        self.stdout.write(self.style.SUCCESS(
            f"saved registry dated {registry.file_date} to {options['path']}"))
