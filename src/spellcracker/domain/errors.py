"""Error types raised by the card resolution core."""

from __future__ import annotations


class DataSourceError(RuntimeError):
    """Raised when a catalog snapshot cannot be fetched, parsed or indexed."""


class AliasSourceError(RuntimeError):
    """Raised when the alias mapping cannot be loaded."""


class CatalogNotLoadedError(RuntimeError):
    """Raised when a lookup is attempted before any catalog has been built."""
