"""Exception types raised by flattoml."""

from __future__ import annotations


class FlatTomlError(ValueError):
    """Base class for flattoml errors."""


class ParseError(FlatTomlError):
    """Raised when a document cannot be parsed.

    The line scanner is total, so nothing raises this today. It stays part
    of the public contract so callers can already handle it.
    """


class ConfigFileError(FlatTomlError):
    """Raised when a configuration file cannot be read from disk."""
