"""Reusable type definitions for the keyset package.

This module provides the constrained types used to guard the boundary of
every keyset: which values may be stored, and which chunk sizes are valid.

Type Aliases:
    ArrayKey: An integer or string usable as a keyset member.
    ChunkSize: A strictly positive integer.

NumPy scalars are unwrapped before validation, so values taken straight out
of an ``np.ndarray`` (``np.int64``, ``np.str_``) are accepted and stored as
plain Python ``int``/``str``.
"""

from typing import Annotated, Any, Union

import annotated_types as at
import numpy as np
from pydantic import StrictInt, StrictStr, TypeAdapter, ValidationError
from pydantic.functional_validators import BeforeValidator

from .exceptions import InvalidArgument, KeyCompatibilityError

__all__ = [
    "ArrayKey",
    "ChunkSize",
    "validate_key",
    "validate_chunk_size",
]


def unwrap_numpy_scalar(value: Any) -> Any:
    """Convert NumPy integer and string scalars to their Python equivalents.

    Args:
        value (Any): The candidate key.
    Returns:
        Any: ``int``/``str`` for NumPy scalars, otherwise the value unchanged.
    """
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.str_):
        return str(value)
    return value


# An integer or string, strictly (no bool, no float, no numeric strings coerced)
ArrayKey = Annotated[
    Union[StrictInt, StrictStr], BeforeValidator(unwrap_numpy_scalar)
]

def unwrap_numpy_integer(value: Any) -> Any:
    """Convert NumPy integer scalars to ``int``; leave anything else untouched."""
    if isinstance(value, np.integer):
        return int(value)
    return value


# A strictly positive integer
ChunkSize = Annotated[StrictInt, at.Gt(0), BeforeValidator(unwrap_numpy_integer)]

_array_key_adapter = TypeAdapter(ArrayKey)
_chunk_size_adapter = TypeAdapter(ChunkSize)


def validate_key(value: Any) -> Union[int, str]:
    """Validate that ``value`` can be stored in a keyset.

    Args:
        value (Any): The candidate key.
    Returns:
        Union[int, str]: The normalized key.
    Raises:
        KeyCompatibilityError: If the value is not an integer or a string.
    """
    try:
        return _array_key_adapter.validate_python(value)
    except ValidationError as e:
        raise KeyCompatibilityError(
            f"Expected int or str keyset value, got {type(value).__name__}: {value!r}"
        ) from e


def validate_chunk_size(size: Any) -> int:
    """Validate a chunk size.

    Raises:
        InvalidArgument: If ``size`` is not a positive integer.
    """
    try:
        return _chunk_size_adapter.validate_python(size)
    except ValidationError as e:
        raise InvalidArgument(f"Expected positive chunk size, got {size!r}.") from e
