"""Animation primitives - drawing operations lifted to behaviors.

Importing this module registers ``compose``, ``translate`` and ``rotate``
as fluent Behavior operations, so animations read left to right:

    >>> earth.compose(moon.rotate(50.0, 12.0)).rotate(150.0, 1.0)
"""

from __future__ import annotations

from kinetic.combinators.time import forever, wiggle
from kinetic.drawing import shapes
from kinetic.drawing.shapes import Brush, Drawing
from kinetic.kernel import Behavior, lift

_lifted_circle = lift(shapes.circle)
_lifted_translate = lift(shapes.translate)
_lifted_compose = lift(shapes.compose)


def circle(brush: Behavior[Brush], size: Behavior[float]) -> Behavior[Drawing]:
    """Animated circle whose colour and size may both vary over time."""
    return _lifted_circle(brush, size)


def translate(
    drawing: Behavior[Drawing],
    x: Behavior[float],
    y: Behavior[float],
) -> Behavior[Drawing]:
    """Move an animated drawing by animated offsets."""
    return _lifted_translate(drawing, x, y)


def compose(first: Behavior[Drawing], second: Behavior[Drawing]) -> Behavior[Drawing]:
    """Paint one animation over another."""
    return _lifted_compose(first, second)


def rotate(drawing: Behavior[Drawing], dist: float, speed: float) -> Behavior[Drawing]:
    """Move a drawing around the origin.

    The x offset follows ``wiggle * dist`` and the y offset follows the
    same signal half a time unit ahead, which traces a circle of radius
    ``dist``. ``speed`` scales how fast the loop is travelled.

    Args:
        drawing: The animation to move
        dist: Radius of the path
        speed: Time scale passed to ``faster``

    Returns:
        New animation moving along the path
    """
    pos = wiggle * forever(dist)
    return translate(drawing, pos, pos.wait(0.5)).faster(speed)


# Register the fluent drawing operations
Behavior.register_op("compose", compose)
Behavior.register_op("translate", translate)
Behavior.register_op("rotate", rotate)
