"""
Solar system example: print what a host would paint.

This example shows:
1. Building an animation from lifted drawing primitives
2. Sampling it through the frame runner with a trace
3. A canvas that prints its calls instead of drawing pixels
"""

import logging

from kinetic import RenderConfig, Trace, render_frames, solar_system
from kinetic.drawing import Brush


# =============================================================================
# Printing canvas (stands in for a real rendering backend)
# =============================================================================
class PrintingCanvas:
    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0

    def fill_ellipse(self, brush: Brush, x: float, y: float, width: float, height: float) -> None:
        cx = self.x + x + width / 2
        cy = self.y + y + height / 2
        print(f"  {brush.name:<10} at ({cx:8.2f}, {cy:8.2f}) size {width:g}")

    def translate_transform(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    trace = Trace()
    config = RenderConfig(start=0.0, step=0.5, frames=5)
    canvas = PrintingCanvas()

    count = render_frames(solar_system(), canvas, config, trace=trace)

    print(f"\n{count} frames, {len(trace)} trace events")
    for ev in trace.find_all("frame_end"):
        print(f"  t={ev.info['time']:.2f} took {ev.duration_ms:.3f} ms")


if __name__ == "__main__":
    main()
