"""
Validation of parsed language tags against static subtag tables
(ISO 639, ISO 15924, ISO 3166-1 / UN M.49 and the IANA variants).

The tables are immutable once built and are passed to `RegistryValidator`
explicitly; see `language.registration` for loading them.
"""
from __future__ import annotations

import logging
import string
import warnings
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping, NamedTuple, Optional

from language import tags
from language.record_jar import Record
from language.rfc4646 import LanguageTag

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = ".."

_SNAPSHOT_SETS = ("languages", "scripts", "regions", "variants")
_SNAPSHOT_MAPPINGS = ("preferred_languages", "preferred_regions")
_SNAPSHOT_KEYS = _SNAPSHOT_SETS + _SNAPSHOT_MAPPINGS + ("file_date",)


class RegistryError(ValueError):
    """A well-formed tag references a subtag missing from the registry."""

    def __init__(self, tag: str, subtag_type: tags.SubtagType, subtag: str):
        super().__init__(
            f"unregistered {subtag_type.label} subtag '{subtag}' in language tag '{tag}'")
        self.tag = tag
        self.subtag_type = subtag_type
        self.subtag = subtag


class LSR(NamedTuple):
    """Validated language, script and region of a tag."""
    language: str
    script: Optional[str] = None
    region: Optional[str] = None


def _increment(code: str) -> str:
    chars = list(code)
    for i in reversed(range(len(chars))):
        alphabet = string.digits if chars[i].isdigit() else string.ascii_lowercase
        index = alphabet.index(chars[i])
        if index + 1 < len(alphabet):
            chars[i] = alphabet[index + 1]
            return "".join(chars)
        chars[i] = alphabet[0]
    raise ValueError(f"cannot increment subtag '{code}'")


def expand_range(subtags: str) -> list[str]:
    """Expands an IANA registry range such as 'qaa..qtz'
    into lowercase subtags. Single subtags are returned as is.
    """
    start, sep, end = subtags.lower().partition(RANGE_SEPARATOR)
    if not sep:
        return [start]
    if len(start) != len(end) or start > end:
        raise ValueError(f"invalid subtag range '{subtags}'")
    codes = [start]
    while codes[-1] != end:
        codes.append(_increment(codes[-1]))
    return codes


def _frozen_mapping(mapping: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    return MappingProxyType({
        key.lower(): val.lower() for key, val in (mapping or {}).items()
    })


@dataclass(frozen=True)
class SubtagRegistry:
    """Lowercase subtag tables.

    `preferred_languages` and `preferred_regions` map deprecated subtags
    to their replacements, e.g. 'iw' to 'he'.
    `variants` is carried in snapshots only, validation does not look it up.
    """
    languages: frozenset[str] = frozenset()
    scripts: frozenset[str] = frozenset()
    regions: frozenset[str] = frozenset()
    variants: frozenset[str] = frozenset()
    preferred_languages: Mapping[str, str] = field(default_factory=_frozen_mapping)
    preferred_regions: Mapping[str, str] = field(default_factory=_frozen_mapping)
    file_date: Optional[str] = None

    def has_language(self, subtag: str) -> bool:
        return subtag.lower() in self.languages

    def has_script(self, subtag: str) -> bool:
        return subtag.lower() in self.scripts

    def has_region(self, subtag: str) -> bool:
        return subtag.lower() in self.regions

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> SubtagRegistry:
        """Builds a registry from IANA Language Subtag Registry records.

        Extlang, grandfathered and redundant records are skipped.
        """
        subtags: dict[str, set[str]] = {
            tags.IanaSubtagType.LANGUAGE: set(),
            tags.IanaSubtagType.SCRIPT: set(),
            tags.IanaSubtagType.REGION: set(),
            tags.IanaSubtagType.VARIANT: set(),
        }
        preferred: dict[str, dict[str, str]] = {
            tags.IanaSubtagType.LANGUAGE: {},
            tags.IanaSubtagType.REGION: {},
        }
        file_date = None
        for record in records:
            if "File-Date" in record:
                file_date = record.one("File-Date")
                continue
            type_ = record.get_one("Type")
            if type_ not in subtags:
                logger.debug(
                    "skipping %s record %s", type_,
                    record.get_one("Subtag") or record.get_one("Tag"))
                continue
            subtag = record.one("Subtag")
            subtags[type_].update(expand_range(subtag))
            pref_value = record.get_one("Preferred-Value")
            if pref_value and type_ in preferred:
                preferred[type_][subtag] = pref_value

        return cls(
            languages=frozenset(subtags[tags.IanaSubtagType.LANGUAGE]),
            scripts=frozenset(subtags[tags.IanaSubtagType.SCRIPT]),
            regions=frozenset(subtags[tags.IanaSubtagType.REGION]),
            variants=frozenset(subtags[tags.IanaSubtagType.VARIANT]),
            preferred_languages=_frozen_mapping(preferred[tags.IanaSubtagType.LANGUAGE]),
            preferred_regions=_frozen_mapping(preferred[tags.IanaSubtagType.REGION]),
            file_date=file_date,
        )

    @classmethod
    def from_snapshot(cls, data: Mapping[str, Any]) -> SubtagRegistry:
        """Builds a registry from a snapshot mapping,
        as written by `to_snapshot`.

        Subtag tables may be lists or whitespace-separated strings,
        and may contain ranges such as 'qaa..qtz'.
        """
        unknown = sorted(str(key) for key in data if key not in _SNAPSHOT_KEYS)
        if unknown:
            warnings.warn(
                f"ignoring unknown registry snapshot keys: {', '.join(unknown)}",
                stacklevel=2)
        kwargs: dict[str, Any] = {}
        for name in _SNAPSHOT_SETS:
            entries = data.get(name) or []
            if isinstance(entries, str):
                entries = entries.split()
            codes = set()
            for entry in entries:
                codes.update(expand_range(str(entry)))
            kwargs[name] = frozenset(codes)
        for name in _SNAPSHOT_MAPPINGS:
            kwargs[name] = _frozen_mapping(data.get(name))
        if data.get("file_date") is not None:
            kwargs["file_date"] = str(data["file_date"])
        return cls(**kwargs)

    def to_snapshot(self) -> dict[str, Any]:
        snapshot: dict[str, Any] = {"file_date": self.file_date}
        for name in _SNAPSHOT_SETS:
            snapshot[name] = sorted(getattr(self, name))
        for name in _SNAPSHOT_MAPPINGS:
            snapshot[name] = dict(sorted(getattr(self, name).items()))
        return snapshot


class RegistryValidator:
    """Checks the language, script and region of parsed tags
    against a `SubtagRegistry`.
    """

    def __init__(self, registry: SubtagRegistry):
        self.registry = registry

    def lsr(self, tag: LanguageTag) -> LSR:
        registry = self.registry
        language = tag.primary.lower()
        language = registry.preferred_languages.get(language, language)
        script = None
        if tag.script:
            script = tags.format_subtag(tag.script, tags.SubtagType.SCRIPT)
        region = None
        if tag.region:
            region = registry.preferred_regions.get(tag.region.lower(), tag.region)
            region = tags.format_subtag(region, tags.SubtagType.REGION)
        return LSR(language, script, region)

    def validate(self, tag: LanguageTag) -> LanguageTag:
        """Returns a copy of `tag` with `lsr` set.

        Irregular grandfathered and private use tags have no
        registered components and are returned unchanged.

        Raises
        ------
        RegistryError
            If the primary language, script or region is not registered.
        """
        if tag.primary is None:
            return tag
        if not self.registry.has_language(tag.primary):
            raise RegistryError(tag.tag, tags.SubtagType.LANGUAGE, tag.primary)
        if tag.script and not self.registry.has_script(tag.script):
            raise RegistryError(tag.tag, tags.SubtagType.SCRIPT, tag.script)
        if tag.region and not self.registry.has_region(tag.region):
            raise RegistryError(tag.tag, tags.SubtagType.REGION, tag.region)
        return replace(tag, lsr=self.lsr(tag))
