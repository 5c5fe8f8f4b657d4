"""Functional primitives for keyset.

This package provides the transforms that build keysets out of arbitrary
iterables. Functions are stateless and side-effect-free apart from calling
the value functions supplied by the caller, so they compose freely into
larger pipelines.
"""

from keyset.functional.transform import chunk, flatten, map, map_with_key, union

__all__ = [
    "chunk",
    "map",
    "map_with_key",
    "flatten",
    "union",
]
