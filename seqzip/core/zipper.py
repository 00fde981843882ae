#!filepath: seqzip/core/zipper.py
"""
Zipper (FINAL / FROZEN)

A cursor into an ordered sequence:

    reverse(left) ++ [focus] ++ right == original sequence

- left  : elements before the focus, nearest first
- right : elements after the focus, in forward order

Contract:
- move_left / move_right / previous / next / modify_focus : O(1)
- to_sequence : O(n), the only linearizing operation

Invariants:
- Navigation only reorganizes elements across (left, focus, right)
- Every operation returns a NEW Zipper; nothing is mutated
- Boundary moves return Nothing(BOUNDARY_NAVIGATION), never raise
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, TypeVar

from seqzip.core.option import Absence, Nothing, Option, Some
from seqzip.core.sequence import ConsList


T = TypeVar("T")


@dataclass(frozen=True)
class Zipper(Generic[T]):
    focus: T
    left: ConsList[T] = field(default_factory=ConsList.empty)
    right: ConsList[T] = field(default_factory=ConsList.empty)

    # --------------------------------------------------
    @classmethod
    def from_sequence(cls, seq: Iterable[T]) -> "Option[Zipper[T]]":
        items = ConsList.of(seq)
        if items.is_empty:
            return Nothing(Absence.EMPTY_INPUT)
        return Some(cls(items.head, ConsList.empty(), items.tail))

    # --------------------------------------------------
    @property
    def offset(self) -> int:
        return len(self.left)

    @property
    def size(self) -> int:
        return len(self.left) + 1 + len(self.right)

    @property
    def is_first(self) -> bool:
        return self.left.is_empty

    @property
    def is_last(self) -> bool:
        return self.right.is_empty

    # ---------- navigation ----------
    def move_right(self) -> "Option[Zipper[T]]":
        if self.right.is_empty:
            return Nothing(Absence.BOUNDARY_NAVIGATION)
        return Some(self._step_right())

    def move_left(self) -> "Option[Zipper[T]]":
        if self.left.is_empty:
            return Nothing(Absence.BOUNDARY_NAVIGATION)
        return Some(self._step_left())

    def move_by(self, steps: int) -> "Option[Zipper[T]]":
        """Signed multi-step move; Nothing if it would leave the sequence."""
        if steps > len(self.right) or -steps > len(self.left):
            return Nothing(Absence.BOUNDARY_NAVIGATION)
        z = self
        for _ in range(abs(steps)):
            z = z._step_right() if steps > 0 else z._step_left()
        return Some(z)

    def start(self) -> "Zipper[T]":
        z = self
        while not z.left.is_empty:
            z = z._step_left()
        return z

    def end(self) -> "Zipper[T]":
        z = self
        while not z.right.is_empty:
            z = z._step_right()
        return z

    def _step_right(self) -> "Zipper[T]":
        return Zipper(self.right.head, self.left.prepend(self.focus), self.right.tail)

    def _step_left(self) -> "Zipper[T]":
        return Zipper(self.left.head, self.left.tail, self.right.prepend(self.focus))

    # ---------- peek ----------
    def previous(self) -> "Option[T]":
        if self.left.is_empty:
            return Nothing(Absence.BOUNDARY_NAVIGATION)
        return Some(self.left.head)

    def next(self) -> "Option[T]":
        if self.right.is_empty:
            return Nothing(Absence.BOUNDARY_NAVIGATION)
        return Some(self.right.head)

    # ---------- edit ----------
    def modify_focus(self, f: Callable[[T], T]) -> "Zipper[T]":
        return Zipper(f(self.focus), self.left, self.right)

    def replace(self, value: T) -> "Zipper[T]":
        return Zipper(value, self.left, self.right)

    def insert_left(self, value: T) -> "Zipper[T]":
        return Zipper(self.focus, self.left.prepend(value), self.right)

    def insert_right(self, value: T) -> "Zipper[T]":
        return Zipper(self.focus, self.left, self.right.prepend(value))

    def delete(self) -> "Option[Zipper[T]]":
        """Drop the focus; the right neighbour takes over, else the left one."""
        if not self.right.is_empty:
            return Some(Zipper(self.right.head, self.left, self.right.tail))
        if not self.left.is_empty:
            return Some(Zipper(self.left.head, self.left.tail, self.right))
        return Nothing(Absence.EMPTY_INPUT)

    # --------------------------------------------------
    def to_sequence(self) -> ConsList[T]:
        # left is nearest-first, so prepending it in order restores reverse(left)
        out = self.right.prepend(self.focus)
        for x in self.left:
            out = out.prepend(x)
        return out


# ============================================================
# function forms, for Option.map / Option.flat_map pipelines
# ============================================================
def from_sequence(seq: Iterable[T]) -> "Option[Zipper[T]]":
    return Zipper.from_sequence(seq)


def move_right(z: Zipper[T]) -> "Option[Zipper[T]]":
    return z.move_right()


def move_left(z: Zipper[T]) -> "Option[Zipper[T]]":
    return z.move_left()


def previous(z: Zipper[T]) -> "Option[T]":
    return z.previous()


def next_(z: Zipper[T]) -> "Option[T]":
    return z.next()


def modify_focus(z: Zipper[T], f: Callable[[T], T]) -> Zipper[T]:
    return z.modify_focus(f)


def to_sequence(z: Zipper[T]) -> ConsList[T]:
    return z.to_sequence()
