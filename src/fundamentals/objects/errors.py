"""Serialization error types."""

from fundamentals.errors import SourceError


class SerializationError(SourceError):
    """Raised when an object cannot be written as JSON or rebuilt from it."""
