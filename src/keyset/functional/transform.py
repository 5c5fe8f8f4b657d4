"""Keyset transforms.

This module provides pure functions that build keysets out of arbitrary
iterables. Each function makes a single pass over its input, allocates a new
container, and leaves the input untouched.

Deduplication scope differs between operations and callers should pick
accordingly:
    - **chunk**: duplicates collapse *within a chunk* only. A value already
      emitted in an earlier chunk can appear again in a later one, and a chunk
      that received a duplicate ends up smaller than ``size``.
    - **map / map_with_key / flatten / union**: duplicates collapse across the
      whole result, keeping the position of the first occurrence.

Examples:
    >>> from keyset.functional.transform import chunk, flatten, map
    >>> chunk([1, 2, 2, 3, 4], 2)
    [keyset[1, 2], keyset[2, 3], keyset[4]]
    >>> map(["a", "bb", "ccc"], len)
    keyset[1, 2, 3]
    >>> flatten([[1, 2], [2, 3]])
    keyset[1, 2, 3]
"""

import typing as tp
from collections.abc import Sequence, Set

import numpy as np

from keyset.core.containers import Keyset
from keyset.core.exceptions import InvalidArgument
from keyset.core.types import validate_chunk_size
from keyset.logger.logger import logger

__all__ = [
    "chunk",
    "map",
    "map_with_key",
    "flatten",
    "union",
]

Tk = tp.TypeVar("Tk")
Tv = tp.TypeVar("Tv")
Tv2 = tp.TypeVar("Tv2", int, str)


def chunk(iterable: tp.Iterable[Tv2], size: int) -> tp.List[Keyset[Tv2]]:
    """Split an iterable into consecutive keysets of up to ``size`` elements.

    A new chunk is opened every ``size`` input elements. The position counter
    advances for every element seen, duplicates included, so a chunk that
    receives a value it already holds is left short. Chunks do not share
    deduplication state.

    Args:
        iterable: Values to split, consumed in iteration order.
        size: Number of input elements per chunk. Must be a positive integer.

    Returns:
        List of keysets in production order. Empty input gives ``[]``.

    Raises:
        InvalidArgument: If ``size`` is not a positive integer. Raised before
            the iterable is touched.
    """
    try:
        size = validate_chunk_size(size)
    except InvalidArgument as e:
        logger.error(f"chunk rejected size: {e}")
        raise

    result: tp.List[Keyset[Tv2]] = []
    for ii, value in enumerate(iterable):
        if ii % size == 0:
            result.append(Keyset())
        result[-1].add(value)

    logger.debug(f"chunk produced {len(result)} chunk(s) of size <= {size}")
    return result


def map(
    iterable: tp.Iterable[Tv], value_func: tp.Callable[[Tv], Tv2]
) -> Keyset[Tv2]:
    """Return a keyset of ``value_func(v)`` for every ``v`` in ``iterable``.

    ``value_func`` is called exactly once per element, in order, even when its
    result is already in the keyset.
    """
    result: Keyset[Tv2] = Keyset()
    for value in iterable:
        result.add(value_func(value))

    logger.debug(f"map produced {len(result)} distinct value(s)")
    return result


def _keyed_items(keyed: tp.Any) -> tp.Iterable[tp.Tuple[tp.Any, tp.Any]]:
    """Yield ``(key, value)`` pairs from a keyed container.

    Mappings (anything with ``items()``, including ``pandas.Series``) yield
    their items. Sets, including keysets, are keyed by their own values, so
    they yield ``(value, value)``. Sequences and NumPy arrays yield
    ``(index, element)``. Any other iterable is expected to already produce
    pairs.
    """
    items = getattr(keyed, "items", None)
    if callable(items):
        return items()
    if isinstance(keyed, Set):
        return ((value, value) for value in keyed)
    if isinstance(keyed, np.ndarray) or (
        isinstance(keyed, Sequence) and not isinstance(keyed, (str, bytes))
    ):
        return enumerate(keyed)
    return keyed


def map_with_key(
    keyed: tp.Union[tp.Mapping[Tk, Tv], tp.Iterable[tp.Tuple[Tk, Tv]]],
    value_func: tp.Callable[[Tk, Tv], Tv2],
) -> Keyset[Tv2]:
    """Return a keyset of ``value_func(key, value)`` over a keyed container.

    Args:
        keyed: A mapping, a set or keyset (keys are the values themselves),
            a sequence (keys are positional indices), or an iterable of
            ``(key, value)`` pairs such as ``enumerate(...)``.
        value_func: Called once per pair, in iteration order.

    Returns:
        Keyset of the distinct results, ordered by first occurrence.
    """
    result: Keyset[Tv2] = Keyset()
    for key, value in _keyed_items(keyed):
        result.add(value_func(key, value))

    logger.debug(f"map_with_key produced {len(result)} distinct value(s)")
    return result


def flatten(iterables: tp.Iterable[tp.Iterable[Tv2]]) -> Keyset[Tv2]:
    """Join the values of several iterables into one keyset.

    Deduplication spans all inner iterables. For a fixed number of inputs see
    :func:`union`.
    """
    result: Keyset[Tv2] = Keyset()
    for iterable in iterables:
        for value in iterable:
            result.add(value)

    logger.debug(f"flatten produced {len(result)} distinct value(s)")
    return result


def union(first: tp.Iterable[Tv2], *rest: tp.Iterable[Tv2]) -> Keyset[Tv2]:
    """Return a keyset of the values in ``first`` followed by each of ``rest``."""
    return flatten((first, *rest))
