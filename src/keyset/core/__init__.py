"""Core data structures for keysets."""

from keyset.core.containers import Keyset
from keyset.core.exceptions import InvalidArgument, KeyCompatibilityError, KeysetError
from keyset.core.types import ArrayKey, ChunkSize

__all__ = [
    "Keyset",
    "KeysetError",
    "InvalidArgument",
    "KeyCompatibilityError",
    "ArrayKey",
    "ChunkSize",
]
