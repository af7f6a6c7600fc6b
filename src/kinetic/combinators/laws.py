"""Combinator laws and helpers to check them."""

# Behaviors and options satisfy the following algebraic laws:
#
# 1. Option identity: opt.map(lambda v: v) == opt
#
# 2. Option left identity: some(v).bind(f) == f(v)
#
# 3. Option absorption: none().bind(f) == none(), and f is never called
#
# 4. Map through bind: opt.map(f) == opt.bind(lambda v: some(f(v)))
#
# 5. Lift synchronisation: lift(f)(b1, ..., bn).sample(t) == f(b1.sample(t), ..., bn.sample(t))
#    Every operand is sampled at the same instant
#
# 6. Re-timing distributes over lifting:
#    lift(f)(a, b).faster(s) == lift(f)(a.faster(s), b.faster(s)), same for wait
#
# 7. Associativity: for an associative f,
#    lift(f)(lift(f)(a, b), c) == lift(f)(a, lift(f)(b, c))
#
# Behaviors cannot be compared directly, so "==" on behaviors above means
# "samples equal at every tested time", see samples_equal().

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from kinetic.kernel import Behavior, Option, some

T = TypeVar("T")
R = TypeVar("R")


def samples_equal(
    left: Behavior[Any],
    right: Behavior[Any],
    times: Iterable[float],
    rel_tol: float = 1e-9,
    abs_tol: float = 1e-12,
) -> bool:
    """Check that two behaviors agree at every time in ``times``.

    Float samples are compared with ``math.isclose``; anything else with ``==``.
    """
    for t in times:
        a = left.sample(t)
        b = right.sample(t)
        if isinstance(a, float) or isinstance(b, float):
            if not math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
                return False
        elif a != b:
            return False
    return True


def option_identity_holds(opt: Option[T]) -> bool:
    return opt.map(lambda v: v) == opt


def left_identity_holds(value: T, func: Callable[[T], Option[R]]) -> bool:
    return some(value).bind(func) == func(value)


def map_through_bind_holds(opt: Option[T], func: Callable[[T], R]) -> bool:
    return opt.map(func) == opt.bind(lambda v: some(func(v)))
