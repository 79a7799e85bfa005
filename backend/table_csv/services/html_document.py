"""Thin adapter around BeautifulSoup producing the document tree."""
from __future__ import annotations

import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup

from ..exceptions import ParseError

logger = logging.getLogger(__name__)

# html5lib applies the HTML5 implied end tags, so ``<td>a<td>b`` gives two
# sibling cells instead of nested ones.
DEFAULT_PARSER = "html5lib"


def parse_document(markup: str, *, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse ``markup`` into a read-only tree.

    ``bs4.FeatureNotFound`` is not caught: a missing parser backend is a
    deployment problem, not bad input.
    """

    try:
        return BeautifulSoup(markup, parser)
    except ParserRejectedMarkup as exc:
        raise ParseError(f"invalid HTML: {exc}") from exc


def validate_html(markup: str, *, parser: str = DEFAULT_PARSER) -> BeautifulSoup:
    """Parse the markup, log the outcome and return the tree for reuse."""

    try:
        document = parse_document(markup, parser=parser)
    except ParseError as exc:
        logger.warning("Invalid HTML: %s", exc)
        raise
    logger.debug("HTML is valid (%s characters)", len(markup))
    return document


__all__ = ["DEFAULT_PARSER", "parse_document", "validate_html"]
