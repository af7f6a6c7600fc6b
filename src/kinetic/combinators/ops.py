"""Arithmetic combinators over numeric behaviors."""

# Arithmetic is plain lifting: the result at time t depends only on the
# operands sampled at that same t.
#
# 1. add(a, b).sample(t) == a.sample(t) + b.sample(t)
# 2. multiply(a, b).sample(t) == a.sample(t) * b.sample(t)
# 3. Both are associative and commutative up to float rounding, because
#    + and * on floats are.
#
# No operand is widened implicitly. Behaviors of other numeric types are
# normalised with to_float() first.

from __future__ import annotations

import operator
from typing import Any

from kinetic.kernel import Behavior, lift

_lifted_add = lift(operator.add)
_lifted_mul = lift(operator.mul)


def to_float(behavior: Behavior[Any]) -> Behavior[float]:
    """Convert every sample to ``float``.

    Conversion errors (e.g. a sample that is not numeric) surface when the
    result is sampled, not here.
    """
    return behavior.map(float)


def add(left: Behavior[float], right: Behavior[float]) -> Behavior[float]:
    """Pointwise sum of two behaviors."""
    return _lifted_add(left, right)


def multiply(left: Behavior[float], right: Behavior[float]) -> Behavior[float]:
    """Pointwise product of two behaviors."""
    return _lifted_mul(left, right)
