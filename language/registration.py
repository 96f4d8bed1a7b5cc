"""Loading, fetching and saving the subtag tables used for validation."""
import logging
from functools import cache
from pathlib import Path
from typing import Any, Iterator, Optional, Union

import requests
import yaml
from django.conf import settings
from requests.models import ITER_CHUNK_SIZE
from yaml.error import MarkedYAMLError

from language.record_jar import Record, parse_record_jar
from language.registry import RegistryValidator, SubtagRegistry

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_REGISTRY_PATH = DATA_DIR / "subtags.yaml"
IANA_REGISTRY_URL = "https://www.iana.org/assignments/language-subtag-registry/language-subtag-registry"
DEFAULT_FETCH_TIMEOUT = 30
YAML_SUFFIXES = (".yaml", ".yml")


def get_setting(name: str, default: Any) -> Any:
    """Reads a Django setting, falling back to `default`
    when settings are not configured.
    """
    if not settings.configured:
        return default
    return getattr(settings, name, default)


class IanaRegistryReader:
    """Streams records from
    https://www.iana.org/assignments/language-subtag-registry/language-subtag-registry.
    """
    chunk_size = ITER_CHUNK_SIZE

    def __init__(self, url: str = IANA_REGISTRY_URL, timeout: float = DEFAULT_FETCH_TIMEOUT):
        self.response = requests.get(url, stream=True, timeout=timeout)
        self.response.raise_for_status()
        self.response.encoding = "utf-8"

    def __iter__(self) -> Iterator[Record]:
        return parse_record_jar(
            self.response.iter_lines(self.chunk_size, decode_unicode=True))


def fetch_iana_registry(url: Optional[str] = None, timeout: Optional[float] = None) -> SubtagRegistry:
    url = url or get_setting("LANGUAGE_TAGS_IANA_REGISTRY_URL", IANA_REGISTRY_URL)
    timeout = timeout or get_setting("LANGUAGE_TAGS_FETCH_TIMEOUT", DEFAULT_FETCH_TIMEOUT)
    logger.info("fetching language subtag registry from %s", url)
    registry = SubtagRegistry.from_records(IanaRegistryReader(url, timeout))
    logger.info(
        "fetched registry dated %s: %d languages, %d scripts, %d regions, %d variants",
        registry.file_date, len(registry.languages), len(registry.scripts),
        len(registry.regions), len(registry.variants))
    return registry


def load_registry(path: Union[str, Path]) -> SubtagRegistry:
    """Reads a YAML snapshot (.yaml, .yml)
    or a file in the IANA record-jar format (anything else).
    """
    path = Path(path)
    logger.info("loading language subtag registry from %s", path)
    with path.open(encoding="utf-8") as f:
        if path.suffix not in YAML_SUFFIXES:
            return SubtagRegistry.from_records(parse_record_jar(f))
        try:
            data = yaml.load(f.read(), get_setting("YAML_LOADER", yaml.SafeLoader))
        except MarkedYAMLError as e:
            raise ValueError(f"invalid yaml file at {path}") from e
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping in {path}")
    return SubtagRegistry.from_snapshot(data)


def dump_registry(registry: SubtagRegistry, path: Union[str, Path]) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(registry.to_snapshot(), f, sort_keys=False)
    logger.info("saved language subtag registry to %s", path)


@cache
def default_registry() -> SubtagRegistry:
    """The registry at `settings.LANGUAGE_TAGS_REGISTRY_PATH`,
    or the bundled snapshot. Loaded once per process.
    """
    return load_registry(get_setting("LANGUAGE_TAGS_REGISTRY_PATH", DEFAULT_REGISTRY_PATH))


@cache
def default_validator() -> RegistryValidator:
    return RegistryValidator(default_registry())
