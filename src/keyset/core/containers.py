"""Insertion-ordered set of integer and string keys.

A :class:`Keyset` behaves like a Python ``set`` restricted to key-compatible
values (``int`` and ``str``), with two differences that matter to callers:

    - **Ordering**: iteration follows the order in which values were first
      inserted. Re-inserting a present value neither raises nor moves it.
    - **Validation**: values are checked at insertion time and anything that
      is not an integer or a string raises
      :class:`~keyset.core.exceptions.KeyCompatibilityError`. The check can be
      switched off with ``KEYSET_VALIDATE_KEYS=false``. Membership tests
      apply the same check, so ``True`` and ``1.0`` are never members.

Equality follows set semantics: two keysets with the same members compare
equal whatever their order. Compare ``list(a) == list(b)`` when order matters.

Examples:
    >>> ks = Keyset([3, 1, 3, 2])
    >>> ks
    keyset[3, 1, 2]
    >>> 1 in ks
    True
    >>> ks == {1, 2, 3}
    True
"""

import typing as tp
from collections.abc import MutableSet

from .config import settings
from .types import validate_key

__all__ = ["Keyset"]

Tk = tp.TypeVar("Tk", int, str)


class Keyset(MutableSet, tp.Generic[Tk]):
    """Deduplicating, insertion-ordered container of ``int``/``str`` values.

    Backed by a ``dict`` mapping each value to ``None``, which gives O(1)
    membership and preserves first-insertion order.
    """

    __slots__ = ("_members",)

    def __init__(self, values: tp.Iterable[Tk] = ()) -> None:
        self._members: tp.Dict[Tk, None] = {}
        for value in values:
            self.add(value)

    def add(self, value: Tk) -> None:
        """Insert ``value``; no-op if already present."""
        if settings.VALIDATE_KEYS:
            value = validate_key(value)
        self._members[value] = None

    def discard(self, value: Tk) -> None:
        if value in self:
            del self._members[value]

    def __contains__(self, value: object) -> bool:
        # Values that could never be added (bool, float, unhashable) are never members
        try:
            if settings.VALIDATE_KEYS:
                value = validate_key(value)
            return value in self._members
        except TypeError:
            return False

    def __iter__(self) -> tp.Iterator[Tk]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"keyset[{', '.join(repr(value) for value in self._members)}]"
