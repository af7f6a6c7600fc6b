"""Combinators - behavior construction and composition primitives."""

from .laws import samples_equal
from .ops import add, multiply, to_float
from .time import current_time, faster, forever, wait, wiggle

__all__ = [
    "current_time",
    "wiggle",
    "forever",
    "faster",
    "wait",
    "to_float",
    "add",
    "multiply",
    "samples_equal",
]
