"""
sales_sheets/parsing/row_tokenizer.py

Field splitting for delimiter-inconsistent CSV exports.

The upstream export tool writes keyword and daily-trend files with
commas but summary and monthly files with semicolons, so the delimiter
is always chosen by the caller per resource. Quoted delimiters are not
honoured: columns are accessed positionally and the exports never quote
a delimiter inside a field.
"""

from __future__ import annotations

COMMA = ","
SEMICOLON = ";"

_QUOTE = '"'


def clean_field(raw: str) -> str:
    """
    Strip surrounding whitespace and one layer of double quotes.
    """

    value = raw.strip()
    if value.startswith(_QUOTE):
        value = value[1:]
    if value.endswith(_QUOTE):
        value = value[:-1]
    return value.strip()


class RowTokenizer:
    """
    Splits raw lines into cleaned text fields.
    """

    def split(self, line: str, delimiter: str) -> list[str]:
        """
        Split ``line`` on ``delimiter`` and clean every field.

        A blank line yields a single empty field, matching ``str.split``.
        """

        if not delimiter:
            raise ValueError("delimiter must be a non-empty string.")
        return [clean_field(part) for part in line.split(delimiter)]
