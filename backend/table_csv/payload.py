"""Decoding of the form-encoded body posted by the landing page."""
from __future__ import annotations

import re
from urllib.parse import unquote_plus

from .exceptions import PayloadDecodeError

CONTENT_PREFIX = "content="

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_form_payload(body: bytes) -> str:
    """Return the HTML carried by a ``content=<urlencoded>`` request body.

    The ``content=`` prefix is optional. ``+`` decodes to a space and a ``%``
    that is not followed by two hex digits is rejected.
    """

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise PayloadDecodeError("Cannot read request body") from exc

    text = text.removeprefix(CONTENT_PREFIX)
    if _BAD_ESCAPE.search(text):
        raise PayloadDecodeError("invalid URL escape")

    try:
        decoded = unquote_plus(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise PayloadDecodeError("invalid URL escape") from exc

    if not decoded.strip():
        raise PayloadDecodeError("empty content")
    return decoded


__all__ = ["CONTENT_PREFIX", "decode_form_payload"]
