#
# PROJECT: braille-canvas
# MODULE: braille_canvas/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas


def line_points(x1, y1, x2, y2):
    """
    Yield the pixels of a line from (x1, y1) to (x2, y2), both ends included.

    Each step advances the major axis by one pixel and places the minor axis
    at i * delta / steps, truncated toward zero.  The truncation decides
    which staircase a diagonal gets, so it must not be rounded.
    """
    x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    x_dir = 1 if x1 <= x2 else -1
    y_dir = 1 if y1 <= y2 else -1

    steps = dx if dx > dy else dy

    for i in range(steps + 1):
        x, y = x1, y1
        if dx:
            x += (i * dx // steps) * x_dir
        if dy:
            y += (i * dy // steps) * y_dir
        yield x, y


def draw_line(canvas: Canvas, x1, y1, x2, y2):
    """Set every pixel of the line on the canvas."""
    for x, y in line_points(x1, y1, x2, y2):
        canvas.set(x, y)
