"""Error types for the kinetic kernel."""

from __future__ import annotations


class NothingError(ValueError):
    """Error raised when a value is demanded from an empty option.

    Only the explicit ``Option.unwrap()`` escape hatch raises it; every
    other option operation represents absence structurally.
    """

    def __repr__(self) -> str:
        return f"NothingError({super().__str__()!r})"
