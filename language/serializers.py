from rest_framework import serializers

from language.registry import RegistryError
from language.rfc4646 import LanguageTag, WellFormednessError, parse


class LanguageTagField(serializers.Field):
    """Parses input into a `LanguageTag`, represented as its string."""
    default_error_messages = {
        'invalid': 'Expected a string, got {input_type}.',
        'ill_formed': 'Ill-formed language tag: {reason}.',
        'unregistered': "Unregistered {subtag_type} subtag '{subtag}'.",
    }

    def __init__(self, validate_registry=False, **kwargs):
        self.validate_registry = validate_registry
        super().__init__(**kwargs)

    def to_internal_value(self, data) -> LanguageTag:
        if isinstance(data, LanguageTag):
            data = str(data)
        if not isinstance(data, str):
            self.fail('invalid', input_type=type(data).__name__)
        try:
            return parse(data, validate=self.validate_registry)
        except WellFormednessError as e:
            self.fail('ill_formed', reason=e.reason)
        except RegistryError as e:
            self.fail('unregistered', subtag_type=e.subtag_type.label, subtag=e.subtag)

    def to_representation(self, value) -> str:
        return str(value)


class LSRSerializer(serializers.Serializer):
    language = serializers.CharField()
    script = serializers.CharField(allow_null=True)
    region = serializers.CharField(allow_null=True)


class LanguageTagSerializer(serializers.Serializer):
    tag = serializers.CharField()
    kind = serializers.CharField(source='kind.label')
    normalized = serializers.CharField()
    primary = serializers.CharField(allow_null=True)
    extlangs = serializers.ListField(child=serializers.CharField())
    script = serializers.CharField(allow_null=True)
    region = serializers.CharField(allow_null=True)
    variants = serializers.ListField(child=serializers.CharField())
    extensions = serializers.ListField(child=serializers.CharField())
    privateuse = serializers.CharField(allow_null=True)
    irregulars = serializers.CharField(allow_null=True)
    lsr = LSRSerializer(allow_null=True)
