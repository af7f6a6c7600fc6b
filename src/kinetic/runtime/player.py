"""Frame runner - the host side of an animation.

The runner owns the only clock. It turns a RenderConfig into frame times,
samples the animation once per frame and paints the result. Behaviors stay
pure; tracing and logging happen here and nowhere below.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator
from typing import TypeVar

from kinetic.drawing.ports import CanvasPort
from kinetic.drawing.shapes import Drawing, draw
from kinetic.kernel import Behavior, Trace
from kinetic.runtime.config import RenderConfig

T = TypeVar("T")

logger = logging.getLogger(__name__)


def frame_times(config: RenderConfig) -> list[float]:
    """Return the sample time of every frame described by ``config``."""
    return [config.start + i * config.step for i in range(config.frames)]


def sample_frames(behavior: Behavior[T], times: Iterable[float]) -> Iterator[T]:
    """Lazily sample ``behavior`` at each of ``times``, in the order given."""
    for t in times:
        yield behavior.sample(t)


def render_frames(
    animation: Behavior[Drawing],
    canvas: CanvasPort,
    config: RenderConfig | None = None,
    trace: Trace | None = None,
) -> int:
    """Sample and paint every frame of ``animation``.

    Args:
        animation: The animated drawing
        canvas: Surface to paint on
        config: Frame times; defaults to RenderConfig()
        trace: Optional trace receiving frame_begin / frame_end / frame_error

    Returns:
        Number of frames painted

    Note: A failing frame is recorded and its exception re-raised as is.
    The runner does not retry or skip frames.
    """
    config = config or RenderConfig()
    count = 0

    for t in frame_times(config):
        frame_id: int | None = None
        if trace is not None:
            frame_id = trace.record("frame_begin", info={"time": t})
            if frame_id is not None:
                trace.push(frame_id)

        try:
            start = time.perf_counter()
            try:
                draw(animation.sample(t), canvas)
            except Exception as exc:
                logger.debug("Frame at t=%s failed: %s", t, exc)
                if trace is not None:
                    trace.record(
                        "frame_error",
                        info={"time": t, "error": str(exc)},
                        parent_id=frame_id,
                    )
                raise
            duration_ms = (time.perf_counter() - start) * 1000

            if trace is not None:
                trace.record(
                    "frame_end",
                    info={"time": t},
                    parent_id=frame_id,
                    duration_ms=duration_ms,
                )
        finally:
            if trace is not None and frame_id is not None:
                trace.pop()

        count += 1
        logger.debug("Painted frame %d at t=%s in %.3f ms", count, t, duration_ms)

    logger.info("Rendered %d frames", count)
    return count
