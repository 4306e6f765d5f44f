"""Custom exceptions for linktags."""


class LinkTagError(Exception):
    """Base exception for all linktags errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(LinkTagError):
    """Raised when there's a configuration problem."""

    pass


class PageLookupError(LinkTagError):
    """Raised when the page index cannot be queried.

    Distinct from a page legitimately not existing, which is reported
    as ``None`` by the lookup.
    """

    pass
