"""Typed exceptions for event handling, document models and I/O formats."""


class InvalidArgumentError(ValueError):
    """Raised when a required event payload is missing."""


class DocumentFormatError(ValueError):
    """Raised when a serialized document model has an unexpected shape."""


class ExtractionError(RuntimeError):
    """Raised when a third-party parser fails to decode a document."""


class IOFormatError(ValueError):
    """Base class for I/O format related errors."""


class UnsupportedFormatError(IOFormatError):
    """Raised when no reader or writer is registered for a file format."""
