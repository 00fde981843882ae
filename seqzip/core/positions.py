# seqzip/core/positions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

from seqzip.core.option import Absence, Nothing, Option
from seqzip.core.zipper import Zipper

T = TypeVar("T")


@dataclass(frozen=True)
class PositionStream(Generic[T]):
    """
    PositionStream（FINAL · LAZY · RESTARTABLE）

    Every cursor placement over the origin's sequence, left to right.

    职责（冻结）：
      - entry at origin.offset == origin
      - positions are produced on demand by repeated move_right
      - iterating twice yields equal zippers (pure function of origin)

    include_left=False restricts the stream to the origin and everything
    to its right (see from_origin()).
    """

    origin: Zipper[T]
    include_left: bool = True

    # --------------------------------------------------
    def _first(self) -> Zipper[T]:
        return self.origin.start() if self.include_left else self.origin

    def __iter__(self) -> Iterator[Zipper[T]]:
        z = self._first()
        yield z
        while not z.is_last:
            z = z._step_right()
            yield z

    def __len__(self) -> int:
        if self.include_left:
            return self.origin.size
        return self.origin.size - self.origin.offset

    # --------------------------------------------------
    def at(self, index: int) -> "Option[Zipper[T]]":
        """Entry at stream index; Nothing when out of range."""
        if index < 0 or index >= len(self):
            return Nothing(Absence.BOUNDARY_NAVIGATION)
        base = 0 if self.include_left else self.origin.offset
        return self.origin.move_by(base + index - self.origin.offset)

    def from_origin(self) -> "PositionStream[T]":
        return PositionStream(self.origin, include_left=False)


def positions(z: Zipper[T]) -> PositionStream[T]:
    return PositionStream(z)
