"""
Parser for RFC 4646 language tags.
https://www.rfc-editor.org/rfc/rfc4646.html

Only the syntax of a tag is checked here;
looking subtags up in a registry is done by `language.registry`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from language import tags

if TYPE_CHECKING:
    from language.registry import LSR, RegistryValidator


class WellFormednessError(ValueError):
    """The string cannot be reduced to any RFC 4646 production."""

    def __init__(self, tag: str, reason: str):
        super().__init__(f"{reason} in language tag '{tag}'")
        self.tag = tag
        self.reason = reason


class _Position(IntEnum):
    EXTLANG = 0
    SCRIPT = 1
    REGION = 2
    VARIANT = 3
    EXTENSION = 4


_SHAPES = {
    _Position.EXTLANG: tags.EXTLANG_RE,
    _Position.SCRIPT: tags.SCRIPT_RE,
    _Position.REGION: tags.REGION_RE,
    _Position.VARIANT: tags.VARIANT_RE,
}


@dataclass(frozen=True, eq=False)
class LanguageTag:
    """A parsed RFC 4646 language tag.

    Exactly one of three forms is populated:
    an irregular grandfathered tag (`irregulars`),
    a private use tag (`privateuse` only),
    or a regular langtag (`primary` and its optional components).

    Two tags are equal when their primary language and region match,
    ignoring case. A tag is equal to a string that matches `str(tag)`,
    but hashes differently, so do not mix tags and strings as dict or set keys.
    """
    tag: str
    primary: Optional[str] = None
    extlangs: tuple[str, ...] = ()
    script: Optional[str] = None
    region: Optional[str] = None
    variants: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    privateuse: Optional[str] = None
    irregulars: Optional[str] = None
    lsr: Optional[LSR] = None

    @property
    def kind(self) -> tags.LangTagType:
        if self.irregulars is not None:
            return tags.LangTagType.IRREGULAR
        if self.primary is None:
            return tags.LangTagType.PRIVATE_USE
        if self.tag.lower() in tags.REGULAR_TAGS:
            return tags.LangTagType.REGULAR
        return tags.LangTagType.LANG_TAG

    @property
    def is_grandfathered(self) -> bool:
        return self.kind in (tags.LangTagType.IRREGULAR, tags.LangTagType.REGULAR)

    @property
    def is_private_use(self) -> bool:
        return self.kind == tags.LangTagType.PRIVATE_USE

    @property
    def normalized(self) -> str:
        """The tag with RFC 4646 case conventions applied,
        e.g. 'en-latn-us' becomes 'en-Latn-US'.
        """
        if self.irregulars is not None:
            return self.irregulars
        if self.primary is None:
            return self.privateuse.lower()
        if self.tag.lower() in tags.REGULAR_TAGS:
            return tags.REGULAR_TAGS[self.tag.lower()]
        subtags = [self.primary.lower()]
        subtags.extend(extlang.lower() for extlang in self.extlangs)
        if self.script:
            subtags.append(tags.format_subtag(self.script, tags.SubtagType.SCRIPT))
        if self.region:
            subtags.append(tags.format_subtag(self.region, tags.SubtagType.REGION))
        subtags.extend(variant.lower() for variant in self.variants)
        subtags.extend(extension.lower() for extension in self.extensions)
        if self.privateuse:
            subtags.append(self.privateuse.lower())
        return tags.SEPARATOR.join(subtags)

    def possible_codes(self) -> list[str]:
        """Codes to try when looking up resources for this tag,
        from the most to the least specific.
        """
        codes = []
        for code in (self.tag, self.primary, self.region):
            if code and code not in codes:
                codes.append(code)
        return codes

    def _key(self) -> tuple:
        if self.primary is None:
            return (self.tag.lower(),)
        return (self.primary.lower(), self.region.upper() if self.region else None)

    def __eq__(self, other):
        if isinstance(other, LanguageTag):
            return self._key() == other._key()
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.tag


def _parse_privateuse(raw: str, subtags: list[str]) -> str:
    if len(subtags) == 1:
        raise WellFormednessError(
            raw, f"singleton '{subtags[0]}' must be followed by a subtag")
    for subtag in subtags[1:]:
        if not tags.PRIVATE_USE_SUBTAG_RE.fullmatch(subtag):
            raise WellFormednessError(raw, f"invalid private use subtag '{subtag}'")
    return tags.SEPARATOR.join(subtags)


def _out_of_place(subtag: str, position: _Position, expect: _Position) -> str:
    expected = [p.name.lower() for p in _Position if p >= expect]
    expected.extend(["private use", "end of tag"])
    return "{} subtag '{}' is out of place, expected {}".format(
        position.name.lower(), subtag, " or ".join(expected))


def _parse_langtag(raw: str, subtags: list[str]) -> LanguageTag:
    primary = subtags[0]
    if not tags.PRIMARY_RE.fullmatch(primary):
        raise WellFormednessError(raw, f"invalid primary language subtag '{primary}'")

    extlangs: list[str] = []
    script = None
    region = None
    variants: list[str] = []
    extensions: list[str] = []
    singletons: set[str] = set()
    privateuse = None
    # extlangs may only follow a 2-3 letter primary subtag
    expect = _Position.EXTLANG if len(primary) <= 3 else _Position.SCRIPT

    i = 1
    while i < len(subtags):
        subtag = subtags[i]
        if len(subtag) == 1:
            if subtag.lower() == tags.PRIVATE_USE_SINGLETON:
                privateuse = _parse_privateuse(raw, subtags[i:])
                break
            if not tags.SINGLETON_RE.fullmatch(subtag):
                raise WellFormednessError(raw, f"invalid singleton '{subtag}'")
            if subtag.lower() in singletons:
                raise WellFormednessError(raw, f"repeated singleton '{subtag}'")
            singletons.add(subtag.lower())
            end = i + 1
            while end < len(subtags) and len(subtags[end]) != 1:
                if not tags.EXTENSION_SUBTAG_RE.fullmatch(subtags[end]):
                    raise WellFormednessError(
                        raw, f"invalid extension subtag '{subtags[end]}'")
                end += 1
            if end == i + 1:
                raise WellFormednessError(
                    raw, f"singleton '{subtag}' must be followed by a subtag")
            extensions.append(tags.SEPARATOR.join(subtags[i:end]))
            expect = _Position.EXTENSION
            i = end
            continue

        position = next(
            (p for p, shape in _SHAPES.items() if shape.fullmatch(subtag)), None)
        if position is None:
            raise WellFormednessError(raw, f"invalid subtag '{subtag}'")
        if position < expect:
            raise WellFormednessError(raw, _out_of_place(subtag, position, expect))

        if position == _Position.EXTLANG:
            extlangs.append(subtag)
            if len(extlangs) == tags.MAX_EXTLANGS:
                expect = _Position.SCRIPT
        elif position == _Position.SCRIPT:
            script = subtag
            expect = _Position.REGION
        elif position == _Position.REGION:
            region = subtag
            expect = _Position.VARIANT
        else:
            if subtag.lower() in (variant.lower() for variant in variants):
                raise WellFormednessError(raw, f"repeated variant '{subtag}'")
            variants.append(subtag)
            expect = _Position.VARIANT
        i += 1

    return LanguageTag(
        tag=raw,
        primary=primary,
        extlangs=tuple(extlangs),
        script=script,
        region=region,
        variants=tuple(variants),
        extensions=tuple(extensions),
        privateuse=privateuse,
    )


def parse(raw: str, validate: bool = False,
          validator: Optional[RegistryValidator] = None) -> LanguageTag:
    """Parse a language tag.

    Parameters
    ----------
    raw: str
        The tag, e.g. 'en-US'. It is stored unmodified in `LanguageTag.tag`.
    validate: bool
        Also look the subtags up in a registry and set `LanguageTag.lsr`.
    validator: RegistryValidator
        Used when validating, defaults to the configured registry.

    Raises
    ------
    WellFormednessError
        If `raw` is not a well-formed tag.
    language.registry.RegistryError
        If validating and a subtag is not registered.
    """
    if not raw:
        raise WellFormednessError(raw, "empty tag")
    if not raw.isascii():
        raise WellFormednessError(raw, "non-ASCII characters")

    irregular = tags.IRREGULAR_TAGS.get(raw.lower())
    if irregular is not None:
        lang_tag = LanguageTag(tag=raw, irregulars=irregular)
    else:
        subtags = raw.split(tags.SEPARATOR)
        if subtags[0].lower() == tags.PRIVATE_USE_SINGLETON:
            lang_tag = LanguageTag(tag=raw, privateuse=_parse_privateuse(raw, subtags))
        else:
            lang_tag = _parse_langtag(raw, subtags)

    if validate:
        if validator is None:
            from language.registration import default_validator
            validator = default_validator()
        lang_tag = validator.validate(lang_tag)
    return lang_tag
