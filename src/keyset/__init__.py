"""Insertion-ordered sets of integer and string keys, and transforms over them."""

from keyset.core import InvalidArgument, KeyCompatibilityError, Keyset, KeysetError
from keyset.functional import chunk, flatten, map, map_with_key, union

__all__ = [
    "Keyset",
    "KeysetError",
    "InvalidArgument",
    "KeyCompatibilityError",
    "chunk",
    "map",
    "map_with_key",
    "flatten",
    "union",
]
