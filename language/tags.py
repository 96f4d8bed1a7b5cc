import re

from django.db import models


# RFC 4646 section 2.1 productions, ASCII only
PRIMARY_RE = re.compile(r'[A-Za-z]{2,8}')
EXTLANG_RE = re.compile(r'[A-Za-z]{3}')
SCRIPT_RE = re.compile(r'[A-Za-z]{4}')
REGION_RE = re.compile(r'[A-Za-z]{2}|[0-9]{3}')
VARIANT_RE = re.compile(r'[A-Za-z0-9]{5,8}|[0-9][A-Za-z0-9]{3}')
SINGLETON_RE = re.compile(r'[A-WYZa-wyz0-9]')
EXTENSION_SUBTAG_RE = re.compile(r'[A-Za-z0-9]{2,8}')
PRIVATE_USE_SUBTAG_RE = re.compile(r'[A-Za-z0-9]{1,8}')

PRIVATE_USE_SINGLETON = 'x'
SEPARATOR = '-'
MAX_EXTLANGS = 3


class LangTagType(models.TextChoices):
    LANG_TAG = 'L', 'language tag'
    IRREGULAR = 'I', 'irregular grandfathered'
    REGULAR = 'R', 'regular grandfathered'
    PRIVATE_USE = 'P', 'private use'


class SubtagType(models.TextChoices):
    LANGUAGE = 'L', 'language'
    EXTLANG = 'E', 'extended language'
    SCRIPT = 'S', 'script'
    REGION = 'R', 'region'
    VARIANT = 'V', 'variant'
    EXTENSION = 'X', 'extension'
    PRIVATE_USE = 'P', 'private use'


class IanaSubtagType(models.TextChoices):
    LANGUAGE = 'language', 'language'
    EXTLANG = 'extlang', 'extended language'
    SCRIPT = 'script', 'script'
    REGION = 'region', 'region'
    VARIANT = 'variant', 'variant'
    GRANDFATHERED = 'grandfathered', 'grandfathered'
    REDUNDANT = 'redundant', 'redundant'


def _by_lower(tags: list[str]) -> dict[str, str]:
    return {tag.lower(): tag for tag in tags}


IRREGULAR_TAGS = _by_lower([
    'en-GB-oed',
    'i-ami',
    'i-bnn',
    'i-default',
    'i-enochian',
    'i-hak',
    'i-klingon',
    'i-lux',
    'i-mingo',
    'i-navajo',
    'i-pwn',
    'i-tao',
    'i-tay',
    'i-tsu',
    'sgn-BE-FR',
    'sgn-BE-NL',
    'sgn-CH-DE',
])


REGULAR_TAGS = _by_lower([
    'art-lojban',
    'cel-gaulish',
    'no-bok',
    'no-nyn',
    'zh-guoyu',
    'zh-hakka',
    'zh-min',
    'zh-min-nan',
    'zh-xiang',
])


def format_subtag(subtag: str, subtag_type: SubtagType) -> str:
    """Applies the case conventions of RFC 4646 section 2.1.1."""
    if subtag_type == SubtagType.SCRIPT:
        return subtag.title()
    if subtag_type == SubtagType.REGION:
        return subtag.upper()
    return subtag.lower()
