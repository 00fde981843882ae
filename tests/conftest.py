# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from seqzip import ConsList, Zipper


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


@pytest.fixture
def make_zipper():
    """
    Factory fixture: zipper over items, focused at offset.

    Usage:
        z = make_zipper([1, 2, 3])
        z = make_zipper([1, 2, 3], offset=2)
    """

    def _make(items, offset: int = 0) -> Zipper:
        return Zipper.from_sequence(items).unwrap().move_by(offset).unwrap()

    return _make


@pytest.fixture
def abc() -> ConsList:
    return ConsList.of("abc")
