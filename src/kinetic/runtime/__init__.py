"""Runtime host layer - frame loop, configuration."""

from kinetic.runtime.config import RenderConfig
from kinetic.runtime.player import frame_times, render_frames, sample_frames

__all__ = [
    "RenderConfig",
    "frame_times",
    "render_frames",
    "sample_frames",
]
