from django.core.exceptions import ValidationError
from django.test import SimpleTestCase
from django.urls import reverse
from rest_framework import serializers

from language.rfc4646 import LanguageTag, parse
from language.serializers import LanguageTagField, LanguageTagSerializer
from language.validators import LanguageTagValidator, validate_language_tag


class LanguageTagValidatorTests(SimpleTestCase):
    def test_well_formed(self) -> None:
        validate_language_tag("en-US")
        validate_language_tag("x-private")

    def test_ill_formed(self) -> None:
        with self.assertRaises(ValidationError) as cm:
            validate_language_tag("en--US")
        self.assertEqual(cm.exception.code, "ill_formed")

    def test_registry(self) -> None:
        validator = LanguageTagValidator(registry=True)
        validator("en-Latn-US")
        with self.assertRaises(ValidationError) as cm:
            validator("zz-US")
        self.assertEqual(cm.exception.code, "unregistered")
        self.assertIn("zz", cm.exception.messages[0])

    def test_deconstruct(self) -> None:
        path, args, kwargs = LanguageTagValidator(registry=True).deconstruct()
        self.assertEqual(path, "language.validators.LanguageTagValidator")
        self.assertEqual(kwargs, {"registry": True})
        self.assertEqual(LanguageTagValidator(registry=True), LanguageTagValidator(registry=True))
        self.assertNotEqual(LanguageTagValidator(), LanguageTagValidator(registry=True))


class LanguageTagFieldTests(SimpleTestCase):
    def test_to_internal_value(self) -> None:
        tag = LanguageTagField().run_validation("sr-Latn-CS")
        self.assertIsInstance(tag, LanguageTag)
        self.assertEqual(tag.script, "Latn")
        self.assertIsNone(tag.lsr)

    def test_validate_registry(self) -> None:
        field = LanguageTagField(validate_registry=True)
        self.assertIsNotNone(field.run_validation("en-US").lsr)
        with self.assertRaises(serializers.ValidationError) as cm:
            field.run_validation("en-Abcd")
        self.assertIn("Unregistered script subtag 'Abcd'.", str(cm.exception.detail))

    def test_errors(self) -> None:
        field = LanguageTagField()
        for value in ["", "en--US", 42]:
            with self.subTest(value=value):
                with self.assertRaises(serializers.ValidationError):
                    field.run_validation(value)

    def test_to_representation(self) -> None:
        self.assertEqual(LanguageTagField().to_representation(parse("en-US")), "en-US")


class LanguageTagSerializerTests(SimpleTestCase):
    def test_langtag(self) -> None:
        data = LanguageTagSerializer(parse("zh-yue-Hant-HK-x-a")).data
        self.assertEqual(data["tag"], "zh-yue-Hant-HK-x-a")
        self.assertEqual(data["kind"], "language tag")
        self.assertEqual(data["primary"], "zh")
        self.assertEqual(data["extlangs"], ["yue"])
        self.assertEqual(data["script"], "Hant")
        self.assertEqual(data["region"], "HK")
        self.assertEqual(data["variants"], [])
        self.assertEqual(data["privateuse"], "x-a")
        self.assertIsNone(data["irregulars"])
        self.assertIsNone(data["lsr"])

    def test_lsr(self) -> None:
        data = LanguageTagSerializer(parse("en-latn-us", validate=True)).data
        self.assertEqual(data["normalized"], "en-Latn-US")
        self.assertEqual(data["lsr"], {"language": "en", "script": "Latn", "region": "US"})


class ParseTagViewTests(SimpleTestCase):
    def test_parse(self) -> None:
        response = self.client.get(reverse("language:parse_tag", args=["en-US"]))
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["primary"], "en")
        self.assertEqual(data["region"], "US")
        self.assertIsNone(data["lsr"])

    def test_validate(self) -> None:
        response = self.client.get("/tags/en-US/", {"validate": "1"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["lsr"], {"language": "en", "script": None, "region": "US"})

    def test_irregular(self) -> None:
        response = self.client.get("/tags/i-klingon/", {"validate": "true"})
        data = response.json()
        self.assertEqual(data["kind"], "irregular grandfathered")
        self.assertEqual(data["irregulars"], "i-klingon")
        self.assertIsNone(data["lsr"])

    def test_ill_formed(self) -> None:
        response = self.client.get("/tags/en--US/")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["error"], "ill_formed")
        self.assertEqual(response.json()["tag"], "en--US")

    def test_unregistered(self) -> None:
        response = self.client.get("/tags/zz-US/", {"validate": "1"})
        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertEqual(data["error"], "unregistered")
        self.assertEqual(data["subtag_type"], "language")
        self.assertEqual(data["subtag"], "zz")

    def test_get_only(self) -> None:
        response = self.client.post("/tags/en-US/")
        self.assertEqual(response.status_code, 405)
