from django.test import SimpleTestCase

from language.record_jar import Record, parse_record_jar


class RecordTests(SimpleTestCase):
    def test_one(self) -> None:
        record = Record()
        record.add("Type", "language")
        self.assertEqual(record.one("Type"), "language")

    def test_one_with_multiple_values(self) -> None:
        record = Record()
        record.add("Description", "Spanish")
        record.add("Description", "Castilian")
        self.assertEqual(record["Description"], ["Spanish", "Castilian"])
        with self.assertRaises(ValueError):
            record.one("Description")

    def test_get_one_default(self) -> None:
        self.assertIsNone(Record().get_one("Preferred-Value"))
        self.assertEqual(Record().get_one("Scope", "individual"), "individual")


class ParseRecordJarTests(SimpleTestCase):
    def test_records(self) -> None:
        records = list(parse_record_jar([
            "File-Date: 2006-10-17\n",
            "%%\n",
            "Type: language\n",
            "Subtag: en\n",
            "%%\n",
            "Type: script\n",
            "Subtag: Latn\n",
        ]))
        self.assertEqual(len(records), 3)
        self.assertEqual(records[0].one("File-Date"), "2006-10-17")
        self.assertEqual(records[1], {"Type": ["language"], "Subtag": ["en"]})
        self.assertEqual(records[2].one("Subtag"), "Latn")

    def test_continuation_lines(self) -> None:
        records = list(parse_record_jar([
            "Comments: written in the traditional script,",
            "  as used in Taiwan",
        ]))
        self.assertEqual(
            records[0].one("Comments"),
            "written in the traditional script, as used in Taiwan")

    def test_values_may_contain_colons(self) -> None:
        records = list(parse_record_jar(["Description: Ratio: one to one"]))
        self.assertEqual(records[0].one("Description"), "Ratio: one to one")

    def test_bytes_and_blank_lines(self) -> None:
        records = list(parse_record_jar([b"Type: region", b"", b"Subtag: US", b"%%", b""]))
        self.assertEqual(records, [{"Type": ["region"], "Subtag": ["US"]}])

    def test_malformed_line(self) -> None:
        with self.assertRaises(ValueError) as cm:
            list(parse_record_jar(["Type: language", "no separator here"]))
        self.assertIn("line 2", str(cm.exception))

    def test_continuation_without_field(self) -> None:
        with self.assertRaises(ValueError):
            list(parse_record_jar(["  dangling"]))
