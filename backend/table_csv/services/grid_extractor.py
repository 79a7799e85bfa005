"""Extract the row/cell grid from a table element."""
from __future__ import annotations

from typing import Literal

from bs4 import NavigableString, Tag
from bs4.element import PageElement

from .table_locator import iter_elements

CellTextMode = Literal["flatten", "first_child"]

Row = list[str]
Grid = list[Row]

_CELL_TAGS = frozenset({"td", "th"})


def _first_child_text(cell: Tag) -> str:
    if not cell.contents:
        return ""
    child = cell.contents[0]
    if isinstance(child, NavigableString):
        return str(child)
    return child.get_text()


def cell_text(cell: Tag, *, mode: CellTextMode = "flatten", strip: bool = False) -> str:
    """Return the text of a ``td``/``th`` element.

    ``flatten`` joins every text node below the cell. ``first_child`` reads
    only the cell's first child node; an empty cell gives ``""``.
    """

    if mode == "first_child":
        text = _first_child_text(cell)
    else:
        text = cell.get_text()
    return text.strip() if strip else text


def extract_row(tr: Tag, *, mode: CellTextMode = "flatten", strip: bool = False) -> Row:
    """Collect the text of the direct ``td``/``th`` children of ``tr``."""

    return [
        cell_text(child, mode=mode, strip=strip)
        for child in tr.children
        if isinstance(child, Tag) and child.name.lower() in _CELL_TAGS
    ]


def extract_grid(
    table: PageElement,
    *,
    mode: CellTextMode = "flatten",
    strip: bool = False,
) -> Grid:
    """Walk ``table`` in document order and return the non-empty rows.

    Every ``tr`` below ``table`` is visited, including those wrapped in
    ``thead``/``tbody``/``tfoot``. Rows without cells are dropped.
    """

    grid: Grid = []
    for element in iter_elements(table):
        if element.name.lower() != "tr":
            continue
        row = extract_row(element, mode=mode, strip=strip)
        if row:
            grid.append(row)
    return grid


__all__ = ["CellTextMode", "Grid", "Row", "cell_text", "extract_grid", "extract_row"]
