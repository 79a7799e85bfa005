"""Locate the first ``table`` element of a parsed document."""
from __future__ import annotations

from bs4 import Tag
from bs4.element import PageElement


def iter_elements(root: PageElement):
    """Yield ``root`` and every descendant element in pre-order.

    Uses an explicit stack so deeply nested markup cannot exhaust the
    interpreter's recursion limit. Text and comment nodes are skipped.
    """

    stack: list[PageElement] = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, Tag):
            continue
        yield node
        # reversed so the first child is popped next
        stack.extend(reversed(node.contents))


def find_table(root: PageElement) -> Tag | None:
    """Return the first ``table`` element under ``root`` or ``None``."""

    for element in iter_elements(root):
        if element.name.lower() == "table":
            return element
    return None


__all__ = ["find_table", "iter_elements"]
