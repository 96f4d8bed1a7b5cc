from pathlib import Path
from typing import Iterator

from django.core.management.base import BaseCommand, CommandError, CommandParser

from language.registry import RegistryError
from language.rfc4646 import WellFormednessError, parse

WELL_FORMED = "well-formed"
ILL_FORMED = "ill-formed"


def read_tags(path: Path) -> Iterator[str]:
    """Yields one tag per line, skipping blank lines and '#' comments."""
    with path.open(encoding="utf-8") as f:
        for line in f:
            tag = line.strip()
            if tag and not tag.startswith("#"):
                yield tag


class Command(BaseCommand):
    help = "Parses language tags and reports whether they are well-formed"

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("tags", nargs="*", help="Language tags to check")
        parser.add_argument(
            "-f",
            "--file",
            action="append",
            default=[],
            help="File with one language tag per line (repeatable)",
        )
        parser.add_argument(
            "--validate",
            action="store_true",
            help="Also check subtags against the subtag registry",
        )
        parser.add_argument(
            "--expect",
            choices=[WELL_FORMED, ILL_FORMED],
            help="Fail if any tag does not have this outcome",
        )

    def handle(self, *args, **options) -> None:
        tags = list(options["tags"])
        for fn in options["file"]:
            path = Path(fn)
            if not path.is_file():
                raise CommandError(f"invalid path {path}")
            tags.extend(read_tags(path))
        if not tags:
            raise CommandError("no language tags given")

        mismatches = []
        for tag in tags:
            try:
                lang_tag = parse(tag, validate=options["validate"])
            except WellFormednessError as e:
                self.stdout.write(f"{tag}\t{ILL_FORMED}\t{e.reason}")
                if options["expect"] == WELL_FORMED:
                    mismatches.append(tag)
                continue
            except RegistryError as e:
                self.stdout.write(f"{tag}\tunregistered\t{e}")
                if options["expect"] == ILL_FORMED:
                    mismatches.append(tag)
                continue
            summary = lang_tag.kind.label
            if lang_tag.lsr is not None:
                summary += "\t" + "-".join(filter(None, lang_tag.lsr))
            self.stdout.write(f"{tag}\t{WELL_FORMED}\t{summary}")
            if options["expect"] == ILL_FORMED:
                mismatches.append(tag)

        if mismatches:
            raise CommandError(
                f"{len(mismatches)} of {len(tags)} tags were not {options['expect']}: "
                + ", ".join(mismatches))
        self.stdout.write(self.style.SUCCESS(f"checked {len(tags)} language tags"))
