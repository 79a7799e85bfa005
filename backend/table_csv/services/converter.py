"""Pipeline turning HTML markup into the CSV text of its first table."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exceptions import NoTableError
from .csv_encoder import CRLF, encode_csv
from .grid_extractor import CellTextMode, Grid, extract_grid
from .html_document import DEFAULT_PARSER, validate_html
from .table_locator import find_table

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ConversionResult:
    """CSV text together with the grid it was built from."""

    csv_text: str
    rows: Grid

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


class HtmlTableConverter:
    """Convert the first table of an HTML document into CSV."""

    def __init__(
        self,
        *,
        parser: str = DEFAULT_PARSER,
        cell_text: CellTextMode = "flatten",
        strip_cells: bool = False,
        line_terminator: str = CRLF,
        log: logging.Logger | None = None,
    ) -> None:
        self._parser = parser
        self._cell_text = cell_text
        self._strip_cells = strip_cells
        self._line_terminator = line_terminator
        self._log = log or logger

    # ------------------------------------------------------------------
    def convert(self, html: str) -> ConversionResult:
        """Return the CSV rendering of the first ``table`` in ``html``.

        Raises :class:`~table_csv.exceptions.ParseError`,
        :class:`~table_csv.exceptions.NoTableError` or
        :class:`~table_csv.exceptions.EncodeError`; nothing is returned on
        failure.
        """

        document = validate_html(html, parser=self._parser)

        table = find_table(document)
        if table is None:
            self._log.debug("No table element found in %s characters of markup", len(html))
            raise NoTableError()
        self._log.debug("Located table element")

        rows = extract_grid(table, mode=self._cell_text, strip=self._strip_cells)
        self._log.debug("Extracted %s rows", len(rows))

        csv_text = encode_csv(rows, line_terminator=self._line_terminator)
        return ConversionResult(csv_text=csv_text, rows=rows)

    def convert_to_csv(self, html: str) -> str:
        return self.convert(html).csv_text


__all__ = ["ConversionResult", "HtmlTableConverter"]
