#
# PROJECT: braille-canvas
# MODULE: braille_canvas/turtle.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from .canvas import Canvas
from .math_utils import heading_vector, to_pixel

logger = logging.getLogger(__name__)


class Turtle:
    """
    A cursor that walks around a canvas drawing lines.

    The turtle starts with its pen down, facing along +x (heading 0).
    Heading is in degrees and grows clockwise; it is never wrapped, so
    spirals can keep turning past 360.

    Position is kept as raw floats.  Rounding and clamping to the canvas
    only happen when a line is drawn, so small moves do not lose their
    fractional part.
    """
    __slots__ = ('x', 'y', 'heading', 'pen_down', 'canvas')

    def __init__(self, x: float = 0.0, y: float = 0.0, canvas: Canvas = None):
        self.x = float(x)
        self.y = float(y)
        self.heading = 0.0
        self.pen_down = True
        self.canvas = canvas if canvas is not None else Canvas(0, 0)

    def __repr__(self):
        pen = 'down' if self.pen_down else 'up'
        return f"Turtle(x={self.x:.2f}, y={self.y:.2f}, heading={self.heading:.2f}, pen={pen})"

    @classmethod
    def from_canvas(cls, x: float, y: float, canvas: Canvas) -> 'Turtle':
        """Create a turtle that takes over an existing canvas."""
        logger.debug("turtle adopting %r", canvas)
        return cls(x, y, canvas)

    @property
    def position(self):
        return self.x, self.y

    # ── Canvas sizing (chainable) ──────────────────────────────────────
    def set_width(self, width: int) -> 'Turtle':
        """Set the canvas's declared width in cells."""
        self.canvas.width = int(width)
        return self

    def set_height(self, height: int) -> 'Turtle':
        """Set the canvas's declared height in cells."""
        self.canvas.height = int(height)
        return self

    # ── Pen ────────────────────────────────────────────────────────────
    def up(self):
        self.pen_down = False

    def down(self):
        self.pen_down = True

    def toggle(self):
        self.pen_down = not self.pen_down

    # ── Motion ─────────────────────────────────────────────────────────
    def forward(self, dist: float):
        """Move `dist` steps along the current heading."""
        dx, dy = heading_vector(self.heading)
        self.teleport(self.x + dx * dist, self.y + dy * dist)

    def back(self, dist: float):
        self.forward(-dist)

    def teleport(self, x: float, y: float):
        """
        Jump to (x, y), drawing a line from the old position if the pen
        is down.  Line ends are rounded to the nearest pixel and clamped
        to zero.
        """
        if self.pen_down:
            self.canvas.line(to_pixel(self.x), to_pixel(self.y),
                             to_pixel(x), to_pixel(y))
        self.x = x
        self.y = y

    def right(self, angle: float):
        """Turn clockwise by `angle` degrees."""
        self.heading += angle

    def left(self, angle: float):
        """Turn anticlockwise by `angle` degrees."""
        self.heading -= angle

    def frame(self, config=None) -> str:
        return self.canvas.frame(config)
