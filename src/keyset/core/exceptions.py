"""Exceptions raised by the keyset package."""

__all__ = [
    "KeysetError",
    "InvalidArgument",
    "KeyCompatibilityError",
]


class KeysetError(Exception):
    """Base class for all keyset errors."""


class InvalidArgument(KeysetError, ValueError):
    """Raised when an argument is outside the accepted domain (e.g. a chunk size of 0)."""


class KeyCompatibilityError(KeysetError, TypeError):
    """Raised when a value cannot be stored in a keyset.

    Only integers and strings are key-compatible. Booleans, floats, ``None``
    and containers are rejected.
    """
