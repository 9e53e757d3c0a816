from __future__ import annotations

import csv
import re
from collections.abc import Iterable, Mapping, Sequence
from io import StringIO
from typing import Any

_WHITESPACE = re.compile(r"\s+")


def header_key(header: str) -> str:
    """'Total Animals' -> 'total_animals'."""
    return _WHITESPACE.sub("_", header.lower())


def generate_csv(rows: Iterable[Mapping[str, Any]], headers: Sequence[str]) -> str:
    """Render rows as CSV text, one header line then one line per row.

    Each cell is looked up by the normalized header key, then by the header
    itself; missing values render empty. Values containing a comma or a quote
    are quoted with inner quotes doubled.
    """
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    for row in rows:
        values = []
        for header in headers:
            value = row.get(header_key(header))
            if value is None:
                value = row.get(header)
            values.append("" if value is None else value)
        writer.writerow(values)
    return buffer.getvalue().removesuffix("\n")
