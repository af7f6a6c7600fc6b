"""Primitive time sources and time-axis transforms."""

from __future__ import annotations

import math
from typing import TypeVar

from kinetic.kernel import Behavior

T = TypeVar("T")


def _identity(time: float) -> float:
    return time


def _sine(time: float) -> float:
    return math.sin(time * math.pi)


# The current time of the animation
current_time: Behavior[float] = Behavior.create(_identity)

# A value oscillating between 1 and -1 with period 2
wiggle: Behavior[float] = Behavior.create(_sine)


def forever(value: T) -> Behavior[T]:
    """Create a constant behavior."""
    return Behavior.lift_value(value)


def faster(behavior: Behavior[T], speed: float) -> Behavior[T]:
    """Sample ``behavior`` at ``time * speed``.

    Args:
        behavior: The behavior to re-time
        speed: Time scale; values in (0, 1) slow down, negatives reverse

    Returns:
        New behavior on the scaled time axis
    """
    return behavior.faster(speed)


def wait(behavior: Behavior[T], delay: float) -> Behavior[T]:
    """Sample ``behavior`` at ``time + delay``.

    Note the sign: a positive delay makes the behavior look as if it
    had already been running for ``delay`` time units.
    """
    return behavior.wait(delay)
