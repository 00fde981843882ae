#!filepath: seqzip/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import AbsentValueError, UserInputError
from .config import AppConfig, LogConfig

from .core.option import Absence, Nothing, Option, Some, from_nullable
from .core.sequence import ConsList
from .core.zipper import Zipper, from_sequence
from .core.positions import PositionStream, positions
from .core.search import find_all, find_next, find_previous
from .algorithms.peak import is_peak, peak, peaks, raise_peak

__all__ = [
    "logs", "Logging", "init_logging",
    "AbsentValueError", "UserInputError",
    "AppConfig", "LogConfig",
    "Absence", "Nothing", "Option", "Some", "from_nullable",
    "ConsList",
    "Zipper", "from_sequence",
    "PositionStream", "positions",
    "find_all", "find_next", "find_previous",
    "is_peak", "peak", "peaks", "raise_peak",
]
