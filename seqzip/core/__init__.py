"""
Core Cursor Model (FINAL / FROZEN)

Defines HOW an ordered sequence is traversed, independent of any algorithm.

Invariants:
- ConsList / Zipper / PositionStream values are immutable.
- Every move or edit produces a new value; old values stay valid.
- Absence (empty input, boundary, no match) is a returned Nothing, never raised.
- PositionStream is generated lazily and is a pure function of its origin.

Core explicitly does NOT:
- Perform IO
- Log
- Hold shared mutable state

Algorithms MUST be composed from these primitives only.
"""
