"""
https://datatracker.ietf.org/doc/pdf/draft-phillips-record-jar-02
used for reading the IANA language subtag registry
https://www.iana.org/assignments/language-subtag-registry/language-subtag-registry
"""
from typing import Any, Generator, Iterable, Union

RECORD_SEPARATOR = '%%'


class Record(dict[str, list[str]]):
    def add(self, key: str, val: str):
        """
        Adds a value to a field.
        """
        self.setdefault(key, []).append(val)

    def extend_last(self, key: str, text: str):
        """
        Appends a continuation line to the last value of a field.
        """
        self[key][-1] += ' ' + text

    def one(self, key: str) -> str:
        """
        Return a single value from a field.

        Raises
        ------
        ValueError
            If the field has multiple values.
        KeyError
            If the field has no values.
        """
        vals = self[key]
        if len(vals) > 1:
            raise ValueError(f"key '{key}' has multiple values {vals}")
        if not vals:
            raise KeyError(f"key '{key}' has an empty list of values")
        return vals[0]

    def get_one(self, key: str, default=None) -> Union[str, Any]:
        """
        Return a single value from a field, or `default`.

        Raises
        ------
        ValueError
            If the field has multiple values.
        """
        try:
            return self.one(key)
        except KeyError:
            return default


def parse_record_jar(lines: Iterable[Union[str, bytes]], encoding='utf-8') -> Generator[Record, None, None]:
    """
    Yields non-empty records from an iterable of lines.

    Lines starting with whitespace continue the previous field's value.

    Raises
    ------
    ValueError
        If a line is neither a field, a continuation nor a separator.
    """
    record = Record()
    key = None
    for lineno, line in enumerate(lines, 1):
        if isinstance(line, bytes):
            line = line.decode(encoding)
        line_text = line.strip()
        if not line_text:
            continue
        if line_text == RECORD_SEPARATOR:
            if record:
                yield record
            record = Record()
            key = None
        elif line[0].isspace():
            if key is None:
                raise ValueError(f'continuation without a field at line {lineno}')
            record.extend_last(key, line_text)
        else:
            key, sep, val = line_text.partition(':')
            if not sep:
                raise ValueError(f"expected 'Field: value' at line {lineno}, got '{line_text}'")
            key = key.strip()
            record.add(key, val.strip())
    if record:
        yield record
