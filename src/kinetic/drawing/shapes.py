"""Drawing values - immutable descriptions of pictures.

A drawing is one of three shapes:
- Circle: a filled circle of a given size centred on the origin
- Translate: another drawing moved by (x, y)
- Compose: two drawings, the second painted over the first

Drawings are plain data. Painting happens only in draw(), which walks the
value and issues calls on a CanvasPort.
"""

from __future__ import annotations

from dataclasses import dataclass

from kinetic.drawing.ports import CanvasPort


@dataclass(frozen=True)
class Brush:
    """A named solid colour."""

    name: str
    rgb: tuple[int, int, int]


OLIVE_DRAB = Brush("olive_drab", (107, 142, 35))
GOLDENROD = Brush("goldenrod", (218, 165, 32))
STEEL_BLUE = Brush("steel_blue", (70, 130, 180))
DIM_GRAY = Brush("dim_gray", (105, 105, 105))


class Shape:
    """Fluent operations shared by every drawing variant."""

    def translate(self, x: float, y: float) -> Translate:
        return Translate(self, x, y)  # type: ignore[arg-type]

    def compose(self, other: Drawing) -> Compose:
        return Compose(self, other)  # type: ignore[arg-type]

    def draw(self, canvas: CanvasPort) -> None:
        draw(self, canvas)  # type: ignore[arg-type]


@dataclass(frozen=True)
class Circle(Shape):
    brush: Brush
    size: float


@dataclass(frozen=True)
class Translate(Shape):
    drawing: Drawing
    x: float
    y: float


@dataclass(frozen=True)
class Compose(Shape):
    first: Drawing
    second: Drawing


Drawing = Circle | Translate | Compose


def circle(brush: Brush, size: float) -> Drawing:
    """Create a circle of diameter ``size`` centred on the origin."""
    return Circle(brush, size)


def translate(drawing: Drawing, x: float, y: float) -> Drawing:
    """Move ``drawing`` by ``(x, y)``."""
    return Translate(drawing, x, y)


def compose(first: Drawing, second: Drawing) -> Drawing:
    """Paint ``second`` over ``first``."""
    return Compose(first, second)


def draw(drawing: Drawing, canvas: CanvasPort) -> None:
    """Paint ``drawing`` onto ``canvas``.

    Translations are undone after their child is painted, so the canvas
    origin is unchanged when this returns, whether or not painting raised.

    Raises:
        TypeError: If ``drawing`` is not one of the drawing variants
    """
    if isinstance(drawing, Circle):
        half = drawing.size / 2.0
        canvas.fill_ellipse(drawing.brush, -half, -half, drawing.size, drawing.size)
    elif isinstance(drawing, Translate):
        canvas.translate_transform(drawing.x, drawing.y)
        try:
            draw(drawing.drawing, canvas)
        finally:
            canvas.translate_transform(-drawing.x, -drawing.y)
    elif isinstance(drawing, Compose):
        draw(drawing.first, canvas)
        draw(drawing.second, canvas)
    else:
        raise TypeError(f"Not a drawing: {drawing!r}")
