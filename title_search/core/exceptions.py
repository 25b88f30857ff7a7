"""Exception types raised by the title search engine."""


class TitleSearchError(Exception):
    """Base class for all title search errors."""


class ConfigurationError(TitleSearchError, ValueError):
    """Raised when an index is constructed with invalid settings."""


class InvalidArgumentError(TitleSearchError, TypeError):
    """Raised when a query or comparison receives unusable input."""


class CatalogError(TitleSearchError):
    """Raised when a catalog file cannot be loaded."""
