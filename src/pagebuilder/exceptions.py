"""Custom exceptions for pagebuilder."""


class PageBuilderError(Exception):
    """Base exception for pagebuilder operations."""


class DocumentError(PageBuilderError):
    """Error involving a persisted page document."""


class DocumentLoadError(DocumentError):
    """Persisted payload does not match the page document shape."""


class StoreError(PageBuilderError):
    """Error raised by a document store."""
