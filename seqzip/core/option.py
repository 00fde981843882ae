"""
Option (FINAL / FROZEN)

Present-or-absent result used by every fallible operation in seqzip.

Contract:
- Some(value): a present value (value may be any object, including None)
- Nothing(reason): an absent value, tagged with an Absence reason

Invariants:
- Absent results are returned, never raised
- Combinators short-circuit on the first Nothing
- Nothing values compare equal regardless of reason
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterator, TypeVar, Union

from seqzip.utils.errors import AbsentValueError

# seqzip/core/option.py

T = TypeVar("T")
U = TypeVar("U")


class Absence(str, Enum):
    EMPTY_INPUT = "empty_input"
    BOUNDARY_NAVIGATION = "boundary_navigation"
    NO_MATCH = "no_match"


@dataclass(frozen=True)
class Some(Generic[T]):
    value: T

    # --------------------------------------------------
    @property
    def is_some(self) -> bool:
        return True

    @property
    def is_nothing(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return True

    def __iter__(self) -> Iterator[T]:
        yield self.value

    # --------------------------------------------------
    def map(self, f: Callable[[T], U]) -> "Some[U]":
        return Some(f(self.value))

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if predicate(self.value):
            return self
        return Nothing(Absence.NO_MATCH)

    def get_or(self, default: Any) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Nothing:
    # reason 只用于诊断，不参与相等比较
    reason: Absence = field(default=Absence.NO_MATCH, compare=False)

    # --------------------------------------------------
    @property
    def is_some(self) -> bool:
        return False

    @property
    def is_nothing(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    # --------------------------------------------------
    def map(self, f: Callable[[Any], Any]) -> "Nothing":
        return self

    def flat_map(self, f: Callable[[Any], Any]) -> "Nothing":
        return self

    def filter(self, predicate: Callable[[Any], bool]) -> "Nothing":
        return self

    def get_or(self, default: U) -> U:
        return default

    def unwrap(self) -> Any:
        raise AbsentValueError(self.reason)


Option = Union[Some[T], Nothing]


def from_nullable(value: Any, reason: Absence = Absence.NO_MATCH) -> "Option[Any]":
    """Wrap a possibly-None value."""
    if value is None:
        return Nothing(reason)
    return Some(value)
