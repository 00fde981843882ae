from __future__ import annotations

import pytest

from seqzip import Absence, UserInputError, find_all, find_next, find_previous, positions


# ============================================================
# 1. find_next
# ============================================================
def test_find_next_returns_first_match(make_zipper):
    z = make_zipper([1, 8, 3, 9, 2])
    hit = find_next(positions(z), lambda p: p.focus > 5)

    assert hit.unwrap().focus == 8
    assert hit.unwrap().offset == 1


def test_find_next_scans_from_stream_start(make_zipper):
    # origin sits right of the only match; the full stream still starts at offset 0
    z = make_zipper([9, 1, 1], offset=2)
    assert find_next(positions(z), lambda p: p.focus == 9).unwrap().offset == 0


def test_find_next_no_match(make_zipper):
    out = find_next(positions(make_zipper([1, 2, 3])), lambda p: False)

    assert out.is_nothing
    assert out.reason is Absence.NO_MATCH


def test_find_next_stops_at_first_match(make_zipper):
    seen = []

    def pred(p):
        seen.append(p.offset)
        return p.focus == "c"

    find_next(positions(make_zipper(list("abcdef"))), pred)
    assert seen == [0, 1, 2]


def test_find_next_from_origin_never_looks_left(make_zipper):
    z = make_zipper([5, 0, 0, 5], offset=1)
    hit = find_next(positions(z).from_origin(), lambda p: p.focus == 5)

    assert hit.unwrap().offset == 3


def test_predicate_errors_propagate(make_zipper):
    def boom(p):
        raise KeyError("x")

    with pytest.raises(KeyError):
        find_next(positions(make_zipper([1])), boom)


def test_non_callable_predicate_rejected(make_zipper):
    with pytest.raises(UserInputError):
        find_next(positions(make_zipper([1])), "not-callable")


# ============================================================
# 2. find_all
# ============================================================
def test_find_all_in_order(make_zipper):
    z = make_zipper([1, 8, 3, 9, 2], offset=4)
    hits = [p.focus for p in find_all(positions(z), lambda p: p.focus % 2 == 1)]

    assert hits == [1, 3, 9]


def test_find_all_is_lazy(make_zipper):
    it = find_all(positions(make_zipper(list(range(1000)))), lambda p: True)
    assert next(it).focus == 0


def test_find_all_rejects_non_callable_eagerly(make_zipper):
    with pytest.raises(UserInputError):
        find_all(positions(make_zipper([1])), None)


# ============================================================
# 3. find_previous
# ============================================================
def test_find_previous_scans_left_only(make_zipper):
    z = make_zipper([5, 1, 5, 2, 5], offset=2)
    hit = find_previous(z, lambda p: p.focus == 5)

    # the focus itself and everything to its right are never examined
    assert hit.unwrap().offset == 0


def test_find_previous_at_start(make_zipper):
    out = find_previous(make_zipper([5, 5]), lambda p: True)
    assert out.reason is Absence.NO_MATCH
