from .combinators import (
    add,
    current_time,
    faster,
    forever,
    multiply,
    samples_equal,
    to_float,
    wait,
    wiggle,
)
from .drawing import Brush, CanvasPort, Drawing, circle, compose, draw, translate
from .kernel import (
    Behavior,
    NothingError,
    Option,
    Trace,
    bind,
    create,
    from_nullable,
    lift,
    map_option,
    match_none,
    match_some,
    none,
    select,
    some,
)
from .runtime import RenderConfig, frame_times, render_frames, sample_frames
from .starter import simple_scene, solar_system

__all__ = [
    # Behavior
    "Behavior",
    "create",
    "lift",
    "select",
    "forever",
    "current_time",
    "wiggle",
    "faster",
    "wait",
    "to_float",
    "add",
    "multiply",
    "samples_equal",
    # Option
    "Option",
    "none",
    "some",
    "from_nullable",
    "match_none",
    "match_some",
    "bind",
    "map_option",
    "NothingError",
    # Drawing
    "Brush",
    "Drawing",
    "CanvasPort",
    "circle",
    "translate",
    "compose",
    "draw",
    # Runtime
    "RenderConfig",
    "Trace",
    "frame_times",
    "render_frames",
    "sample_frames",
    # Starter
    "simple_scene",
    "solar_system",
]
