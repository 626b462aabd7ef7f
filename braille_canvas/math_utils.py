#
# PROJECT: braille-canvas
# MODULE: braille_canvas/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


def degrees_to_radians(deg: float) -> float:
    return deg * (math.pi / 180.0)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def to_pixel(value: float) -> int:
    """Snap a float coordinate to the nearest pixel, floored at zero."""
    return max(0, round_half_away(value))


def heading_vector(heading: float):
    """Unit (dx, dy) for a heading in degrees.  Heading 0 points along +x."""
    rad = degrees_to_radians(heading)
    return math.cos(rad), math.sin(rad)
