from django.core.exceptions import ValidationError
from django.utils.deconstruct import deconstructible

from language.registry import RegistryError
from language.rfc4646 import WellFormednessError, parse


@deconstructible
class LanguageTagValidator:
    """Validates that a value is a well-formed RFC 4646 language tag,
    and with `registry=True` that its subtags are registered.
    """
    ill_formed_message = "'%(value)s' is not a well-formed language tag: %(reason)s."
    unregistered_message = "'%(value)s' has an unregistered %(subtag_type)s subtag '%(subtag)s'."

    def __init__(self, registry: bool = False):
        self.registry = registry

    def __call__(self, value):
        try:
            parse(str(value), validate=self.registry)
        except WellFormednessError as e:
            raise ValidationError(
                self.ill_formed_message,
                code="ill_formed",
                params={"value": value, "reason": e.reason},
            ) from e
        except RegistryError as e:
            raise ValidationError(
                self.unregistered_message,
                code="unregistered",
                params={
                    "value": value,
                    "subtag_type": e.subtag_type.label,
                    "subtag": e.subtag,
                },
            ) from e

    def __eq__(self, other):
        return isinstance(other, LanguageTagValidator) and self.registry == other.registry


validate_language_tag = LanguageTagValidator()
