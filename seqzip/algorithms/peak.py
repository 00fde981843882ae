# seqzip/algorithms/peak.py
from __future__ import annotations

from typing import Iterable, List

from seqzip.core.option import Option
from seqzip.core.positions import positions
from seqzip.core.search import find_all, find_next
from seqzip.core.sequence import ConsList
from seqzip.core.zipper import Zipper, from_sequence
from seqzip.utils.logger import logs


def is_peak(z: Zipper[int]) -> bool:
    """Both neighbours present and strictly below the focus."""
    prev, nxt = z.previous(), z.next()
    if not (prev and nxt):
        return False
    return prev.unwrap() < z.focus and nxt.unwrap() < z.focus


def _first_peak(seq: Iterable[int]) -> "Option[Zipper[int]]":
    # forward-only scan: when several peaks exist the leftmost wins
    return from_sequence(seq).flat_map(lambda z0: find_next(positions(z0), is_peak))


@logs.catch("peak scan failed")
def peak(seq: Iterable[int]) -> "Option[int]":
    hit = _first_peak(seq)
    if hit:
        logs.debug(f"[peak] found {hit.unwrap().focus} at offset {hit.unwrap().offset}")
    else:
        logs.debug(f"[peak] none ({hit.reason.value})")
    return hit.map(lambda z: z.focus)


@logs.catch("raise_peak failed")
def raise_peak(seq: Iterable[int]) -> "Option[ConsList[int]]":
    """
    Increment the leftmost peak and rebuild the sequence.

    One forward scan plus one reconstruction: two linear passes.
    The result is a ConsList, which compares equal to a list or tuple
    holding the same elements.
    """
    return _first_peak(seq).map(lambda z: z.modify_focus(lambda x: x + 1).to_sequence())


def peaks(seq: Iterable[int]) -> List[int]:
    """All peak values, left to right."""
    return (
        from_sequence(seq)
        .map(lambda z0: [z.focus for z in find_all(positions(z0), is_peak)])
        .get_or([])
    )
