"""Drawings and their animated counterparts.

Importing this package registers the fluent Behavior operations defined in
``anims`` (``compose``, ``translate``, ``rotate``).
"""

# Import anims to register capabilities
from . import anims  # noqa: F401
from .ports import CanvasPort
from .shapes import (
    DIM_GRAY,
    GOLDENROD,
    OLIVE_DRAB,
    STEEL_BLUE,
    Brush,
    Circle,
    Compose,
    Drawing,
    Translate,
    circle,
    compose,
    draw,
    translate,
)

__all__ = [
    "CanvasPort",
    "Brush",
    "Circle",
    "Translate",
    "Compose",
    "Drawing",
    "circle",
    "translate",
    "compose",
    "draw",
    "OLIVE_DRAB",
    "GOLDENROD",
    "STEEL_BLUE",
    "DIM_GRAY",
]
