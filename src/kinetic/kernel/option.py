"""Option type - a value or nothing, as a closed tagged union."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from kinetic.kernel.errors import NothingError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Option(Generic[T]):
    """
    Optional value container.

    Kinds:
    - some: carries exactly one value (which may itself be Python ``None``)
    - none: carries nothing

    The ``kind`` tag decides the variant, never the payload. Build options
    through ``Option.Some`` / ``Option.Nothing`` (or ``some`` / ``none``).
    """

    kind: Literal["some", "none"]
    value: T | None = None

    def __post_init__(self) -> None:
        if self.kind not in ("some", "none"):
            raise ValueError(f"Unknown option kind: {self.kind!r}")
        if self.kind == "none" and self.value is not None:
            raise ValueError("Nothing cannot carry a value")

    @staticmethod
    def Some(value: Any) -> Option[Any]:
        return Option(kind="some", value=value)

    @staticmethod
    def Nothing() -> Option[Any]:
        return _NOTHING

    def match_none(self) -> bool:
        """Return True when this is the empty option."""
        return self.kind == "none"

    def match_some(self) -> tuple[bool, T | None]:
        """Return ``(True, value)`` for Some, ``(False, None)`` otherwise."""
        if self.kind == "some":
            return True, self.value
        return False, None

    def bind(self, func: Callable[[T], Option[R]]) -> Option[R]:
        """Feed the carried value into ``func``; short-circuit on Nothing.

        ``func`` runs at most once and only when a value is present. Its
        result is returned as is, including Nothing.
        """
        if self.kind == "some":
            return func(self.value)  # type: ignore[arg-type]
        return _NOTHING

    def map(self, func: Callable[[T], R]) -> Option[R]:
        """Transform the carried value and wrap the result in Some."""
        if self.kind == "some":
            return Option.Some(func(self.value))  # type: ignore[arg-type]
        return _NOTHING

    def unwrap(self) -> T:
        if self.kind == "none":
            raise NothingError("Called unwrap() on Nothing")
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        if self.kind == "none":
            return default
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.kind == "some"

    def __repr__(self) -> str:
        if self.kind == "none":
            return "Nothing"
        return f"Some({self.value!r})"


_NOTHING: Option[Any] = Option(kind="none")


def none() -> Option[Any]:
    """Create an empty option."""
    return Option.Nothing()


def some(value: T) -> Option[T]:
    """Create an option carrying ``value``."""
    return Option.Some(value)


def from_nullable(value: T | None) -> Option[T]:
    """Map Python ``None`` to Nothing and anything else to Some."""
    if value is None:
        return Option.Nothing()
    return Option.Some(value)


def match_none(opt: Option[Any]) -> bool:
    return opt.match_none()


def match_some(opt: Option[T]) -> tuple[bool, T | None]:
    return opt.match_some()


def bind(opt: Option[T], func: Callable[[T], Option[R]]) -> Option[R]:
    """Function form of ``Option.bind``."""
    return opt.bind(func)


def map(opt: Option[T], func: Callable[[T], R]) -> Option[R]:  # noqa: A001
    """Function form of ``Option.map``."""
    return opt.map(func)


map_option = map
