"""Errors raised while turning HTML markup into CSV text."""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for failures of a single conversion request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(ConversionError):
    """Raised when the markup cannot be turned into a document tree."""


class NoTableError(ConversionError):
    """Raised when the document contains no ``table`` element."""

    def __init__(self, message: str = "no table") -> None:
        super().__init__(message)


class EncodeError(ConversionError):
    """Raised when the extracted grid cannot be serialized as CSV."""


class PayloadDecodeError(ValueError):
    """Raised when a request body cannot be decoded into HTML text."""


__all__ = [
    "ConversionError",
    "EncodeError",
    "NoTableError",
    "ParseError",
    "PayloadDecodeError",
]
