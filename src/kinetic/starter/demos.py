"""Ready-made scenes built from the animation primitives."""

from __future__ import annotations

from kinetic.combinators.time import forever
from kinetic.drawing import anims
from kinetic.drawing.shapes import DIM_GRAY, GOLDENROD, OLIVE_DRAB, STEEL_BLUE, Drawing, circle
from kinetic.kernel import Behavior


def simple_scene() -> Behavior[Drawing]:
    """Two overlapping green circles that never move."""
    green_circle = circle(OLIVE_DRAB, 100.0)
    drawing = green_circle.translate(-35.0, 35.0).compose(green_circle.translate(35.0, -35.0))
    return forever(drawing)


def solar_system() -> Behavior[Drawing]:
    """Sun in the middle, earth circling it, moon circling the earth."""
    sun = anims.circle(forever(GOLDENROD), forever(100.0))
    earth = anims.circle(forever(STEEL_BLUE), forever(50.0))
    moon = anims.circle(forever(DIM_GRAY), forever(20.0))

    planets = sun.compose(
        earth.compose(moon.rotate(50.0, 12.0)).rotate(150.0, 1.0)
    )
    return planets.faster(0.2)
