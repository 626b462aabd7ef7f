#
# PROJECT: braille-canvas
# MODULE: braille_canvas/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .config import RenderConfig
from .canvas import Canvas, PIXEL_MAP, render_cell_ascii, render_cell_braille
from .rasterizer import line_points, draw_line
from .turtle import Turtle
