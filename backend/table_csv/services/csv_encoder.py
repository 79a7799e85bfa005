"""Serialize a row grid as CSV text."""
from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from ..exceptions import EncodeError

CRLF = "\r\n"
LF = "\n"


def encode_csv(grid: Iterable[Sequence[str]], *, line_terminator: str = CRLF) -> str:
    """Return ``grid`` as a CSV document.

    Fields containing the delimiter, a quote or a line break are quoted and
    embedded quotes are doubled. Every row, the last one included, ends with
    ``line_terminator``.
    """

    # The writer only quotes line-break characters present in its own
    # terminator, so rows are always written with CRLF and re-terminated.
    line = io.StringIO()
    writer = csv.writer(line, lineterminator=CRLF, quoting=csv.QUOTE_MINIMAL)
    lines: list[str] = []
    try:
        for row in grid:
            line.seek(0)
            line.truncate()
            writer.writerow(row)
            lines.append(line.getvalue()[: -len(CRLF)] + line_terminator)
    except csv.Error as exc:
        raise EncodeError(f"failed to write CSV: {exc}") from exc
    return "".join(lines)


__all__ = ["CRLF", "LF", "encode_csv"]
