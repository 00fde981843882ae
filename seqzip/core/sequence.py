#!filepath: seqzip/core/sequence.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

from seqzip.core.option import Absence, Nothing, Option, Some

T = TypeVar("T")


@dataclass(frozen=True, eq=False, repr=False)
class ConsList(Generic[T]):
    """
    ConsList（FINAL · PERSISTENT）

    Immutable singly linked list with structural sharing.

    Costs:
      - head / tail / prepend / len : O(1)
      - reverse / concat / iteration : O(n)

    Nodes are never mutated; prepend shares the whole receiver as its tail.
    Build instances with ConsList.of() / ConsList.empty(), not the constructor.
    """

    _head: Any = None
    _tail: Optional["ConsList[T]"] = None
    _size: int = 0

    # --------------------------------------------------
    @classmethod
    def empty(cls) -> "ConsList[Any]":
        return _EMPTY

    @classmethod
    def of(cls, items: Iterable[T] = ()) -> "ConsList[T]":
        if isinstance(items, ConsList):
            return items
        node: ConsList[T] = _EMPTY
        for x in reversed(tuple(items)):
            node = node.prepend(x)
        return node

    # --------------------------------------------------
    @property
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def head(self) -> T:
        if self._size == 0:
            raise IndexError("head of empty ConsList")
        return self._head

    @property
    def tail(self) -> "ConsList[T]":
        if self._size == 0:
            raise IndexError("tail of empty ConsList")
        return self._tail

    @property
    def head_option(self) -> "Option[T]":
        if self._size == 0:
            return Nothing(Absence.EMPTY_INPUT)
        return Some(self._head)

    # --------------------------------------------------
    def prepend(self, x: T) -> "ConsList[T]":
        return ConsList(x, self, self._size + 1)

    cons = prepend

    def reverse(self) -> "ConsList[T]":
        out: ConsList[T] = _EMPTY
        for x in self:
            out = out.prepend(x)
        return out

    def concat(self, other: "ConsList[T]") -> "ConsList[T]":
        """self ++ other; other is shared, self is copied."""
        if other.is_empty:
            return self
        out = other
        for x in self.reverse():
            out = out.prepend(x)
        return out

    def __add__(self, other: Iterable[T]) -> "ConsList[T]":
        return self.concat(ConsList.of(other))

    # --------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._size:
            yield node._head
            node = node._tail

    def __eq__(self, other: object) -> bool:
        # list / tuple compare element-wise, so results can be checked against literals
        if not isinstance(other, (ConsList, list, tuple)):
            return NotImplemented
        if self is other:
            return True
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"ConsList({list(self)!r})"

    def to_list(self) -> list:
        return list(self)

    def to_tuple(self) -> tuple:
        return tuple(self)


_EMPTY: ConsList[Any] = ConsList()
