#!filepath: seqzip/core/search.py
from __future__ import annotations

from typing import Callable, Iterable, Iterator, TypeVar

from seqzip.core.option import Absence, Nothing, Option, Some
from seqzip.core.zipper import Zipper
from seqzip.utils.errors import UserInputError

T = TypeVar("T")

Predicate = Callable[[Zipper[T]], bool]


def _require_callable(predicate) -> None:
    if not callable(predicate):
        raise UserInputError(f"predicate must be callable, got {type(predicate).__name__}")


def find_next(stream: Iterable[Zipper[T]], predicate: Predicate) -> "Option[Zipper[T]]":
    """
    Forward-only scan: first zipper in stream satisfying predicate.

    Starts at the stream's first element, never moves left, never wraps.
    Stops at the first match, so at most k positions are materialized.
    """
    _require_callable(predicate)
    for z in stream:
        if predicate(z):
            return Some(z)
    return Nothing(Absence.NO_MATCH)


def find_all(stream: Iterable[Zipper[T]], predicate: Predicate) -> Iterator[Zipper[T]]:
    """Lazily yield every matching zipper, left to right."""
    _require_callable(predicate)
    return (z for z in stream if predicate(z))


def find_previous(z: Zipper[T], predicate: Predicate) -> "Option[Zipper[T]]":
    """Backward-only scan starting at z's left neighbour."""
    _require_callable(predicate)
    cur = z
    while not cur.is_first:
        cur = cur._step_left()
        if predicate(cur):
            return Some(cur)
    return Nothing(Absence.NO_MATCH)
