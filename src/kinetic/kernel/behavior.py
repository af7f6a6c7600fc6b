"""Behavior - a value that varies over time."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


Sampler = Callable[[float], T]


# Extension registry - class-level storage for fluent Behavior operations
_extensions_registry: dict[str, Callable] = {}


@dataclass(frozen=True)
class Behavior(Generic[T]):
    """A pure function from time to a value.

    Behaviors never mutate. Sampling the same behavior at the same time
    always gives the same value, in any order and any number of times.
    New behaviors are derived through combinators, never by inspecting
    the wrapped function.

    Fluent operations can be registered via register_op() for extensibility.
    """

    _sample: Sampler[T]

    @classmethod
    def register_op(cls, name: str, fn: Callable[..., Any]) -> None:
        """Register a fluent operation on the Behavior class.

        Args:
            name: The operation name (e.g., "translate")
            fn: Function taking the behavior as its first argument
        """
        _extensions_registry[name] = fn

    def __getattr__(self, name: str) -> Any:
        """Allow calling registered extension methods."""
        if name in _extensions_registry:
            fn = _extensions_registry[name]
            return lambda *args, **kwargs: fn(self, *args, **kwargs)
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def sample(self, time: float) -> T:
        """Evaluate the behavior at ``time``.

        Exceptions raised by the wrapped function propagate unchanged.
        """
        return self._sample(time)

    def map(self, func: Callable[[T], R]) -> Behavior[R]:
        """Apply ``func`` to every sample. Same as ``lift(func)(self)``."""
        def sampler(time: float) -> R:
            return func(self._sample(time))

        return Behavior(_sample=sampler)

    def faster(self, speed: float) -> Behavior[T]:
        """Scale the time axis: sample at ``time * speed``.

        Speeds below one slow the behavior down, negative speeds play it
        backwards.
        """
        def sampler(time: float) -> T:
            return self._sample(time * speed)

        return Behavior(_sample=sampler)

    def wait(self, delay: float) -> Behavior[T]:
        """Shift the time axis: sample at ``time + delay``.

        A positive delay samples ahead, so the result appears to have
        already progressed by ``delay``.
        """
        def sampler(time: float) -> T:
            return self._sample(time + delay)

        return Behavior(_sample=sampler)

    def __add__(self, other: Any) -> Behavior[float]:
        from kinetic.combinators.ops import add

        operand = _as_behavior(other)
        if operand is None:
            return NotImplemented
        return add(self, operand)

    def __radd__(self, other: Any) -> Behavior[float]:
        from kinetic.combinators.ops import add

        operand = _as_behavior(other)
        if operand is None:
            return NotImplemented
        return add(operand, self)

    def __mul__(self, other: Any) -> Behavior[float]:
        from kinetic.combinators.ops import multiply

        operand = _as_behavior(other)
        if operand is None:
            return NotImplemented
        return multiply(self, operand)

    def __rmul__(self, other: Any) -> Behavior[float]:
        from kinetic.combinators.ops import multiply

        operand = _as_behavior(other)
        if operand is None:
            return NotImplemented
        return multiply(operand, self)

    @staticmethod
    def create(func: Sampler[T]) -> Behavior[T]:
        """Create a Behavior from a function of time."""
        return Behavior(_sample=func)

    @staticmethod
    def lift_value(value: T) -> Behavior[T]:
        """Create a Behavior that holds ``value`` at every time."""
        def sampler(_: float) -> T:
            return value

        return Behavior(_sample=sampler)


def _as_behavior(value: Any) -> Behavior[Any] | None:
    # bools excluded
    if isinstance(value, Behavior):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Behavior.lift_value(float(value))
    return None


def create(func: Sampler[T]) -> Behavior[T]:
    """Wrap a pure function of time as a Behavior."""
    return Behavior.create(func)


def lift(func: Callable[..., R]) -> Callable[..., Behavior[R]]:
    """Turn a function over plain values into a function over behaviors.

    ``lift(f)(b1, ..., bn)`` samples every ``bi`` at the same time ``t``
    and applies ``f`` to the samples. Nothing is cached between samples.

    Args:
        func: Pure function of any arity (usually one, two or three)

    Returns:
        Function of the same arity taking and returning behaviors

    Raises:
        TypeError: When the lifted function is applied to a number of
            behaviors that ``func`` cannot accept

    Example:
        >>> total = lift(lambda x, y: x + y)(forever(2.0), current_time)
        >>> total.sample(5.0)
        7.0
    """
    try:
        signature: inspect.Signature | None = inspect.signature(func)
    except (TypeError, ValueError):
        # some builtins expose no signature
        signature = None

    def lifted(*behaviors: Behavior[Any]) -> Behavior[R]:
        if signature is not None:
            signature.bind(*behaviors)

        def sampler(time: float) -> R:
            return func(*[b.sample(time) for b in behaviors])

        return Behavior(_sample=sampler)

    return lifted


def select(behavior: Behavior[T], func: Callable[[T], R]) -> Behavior[R]:
    """Function form of ``Behavior.map``."""
    return behavior.map(func)
