"""Port protocols for painting drawings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from kinetic.drawing.shapes import Brush


class CanvasPort(Protocol):
    """
    Painting surface supplied by the host.
    Infrastructure-level.
    Drawings only issue calls; they never read canvas state back.
    """

    def fill_ellipse(self, brush: Brush, x: float, y: float, width: float, height: float) -> None:
        """Fill the ellipse inscribed in the given rectangle."""
        ...

    def translate_transform(self, dx: float, dy: float) -> None:
        """Shift the origin for subsequent calls."""
        ...
