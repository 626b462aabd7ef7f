#
# PROJECT: braille-canvas
# MODULE: braille_canvas/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

logger = logging.getLogger(__name__)

# Braille dot mapping for a 2x4 cell, indexed [y % 4][x % 2]
#  1 4
#  2 5
#  3 6
#  7 8
PIXEL_MAP = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)

BRAILLE_BASE = 0x2800
BLANK = ' '


def _locate(x, y):
    """Map a pixel to its cell key and the bit inside that cell."""
    if x < 0 or y < 0:
        raise ValueError(f"pixel coordinates must be non-negative, got ({x}, {y})")
    return (x >> 1, y >> 2), PIXEL_MAP[y & 3][x & 1]


class Canvas:
    """
    Sparse Braille canvas addressed in pixels.

    Every 2x4 block of pixels is one cell.  A cell holds a dot mask and an
    override character; the mask wins when it is non-zero.  Drawing outside
    the declared size grows the rendered frame.
    """
    __slots__ = ['cells', 'width', 'height']

    def __init__(self, width=0, height=0):
        # Declared size in cells, only a floor for rendering
        self.width = int(width) // 2
        self.height = int(height) // 4
        self.cells = {}  # (cell_x, cell_y) -> (mask, char)

    def __repr__(self):
        return f"Canvas(cells={len(self.cells)}, width={self.width}, height={self.height})"

    def __eq__(self, other):
        if not isinstance(other, Canvas):
            return NotImplemented
        return (self.cells == other.cells
                and self.width == other.width
                and self.height == other.height)

    def copy(self) -> 'Canvas':
        dup = Canvas()
        dup.width, dup.height = self.width, self.height
        dup.cells = dict(self.cells)
        return dup

    # ── Pixel access ───────────────────────────────────────────────────
    def set(self, x, y):
        """Set a pixel.  Any override character in the cell is dropped."""
        key, bit = _locate(x, y)
        mask, _ = self.cells.get(key, (0, BLANK))
        self.cells[key] = (mask | bit, BLANK)

    def unset(self, x, y):
        key, bit = _locate(x, y)
        mask, char = self.cells.get(key, (0, BLANK))
        self.cells[key] = (mask & ~bit, char)

    def toggle(self, x, y):
        key, bit = _locate(x, y)
        mask, char = self.cells.get(key, (0, BLANK))
        self.cells[key] = (mask ^ bit, char)

    def get(self, x, y) -> bool:
        key, bit = _locate(x, y)
        cell = self.cells.get(key)
        return cell is not None and bool(cell[0] & bit)

    # ── Text overlay ───────────────────────────────────────────────────
    def set_char(self, x, y, char):
        """Replace the whole cell holding (x, y) with a literal character."""
        key, _ = _locate(x, y)
        self.cells[key] = (0, char)

    def text(self, x, y, max_width, text):
        """
        Write text one character per cell starting at pixel (x, y).

        Character i lands at x + 2*i.  Writing stops at the first offset
        strictly greater than max_width, so an offset equal to max_width
        is still written.
        """
        for i, char in enumerate(text):
            offset = i * 2
            if offset > max_width:
                return
            self.set_char(x + offset, y, char)

    # ── Drawing ────────────────────────────────────────────────────────
    def line(self, x1, y1, x2, y2):
        """Draw a straight line between two pixels, both ends included."""
        from .rasterizer import draw_line
        draw_line(self, x1, y1, x2, y2)

    def clear(self):
        """Forget every cell.  The declared size is kept."""
        logger.debug("clearing %d cells", len(self.cells))
        self.cells.clear()

    # ── Output ─────────────────────────────────────────────────────────
    def extent(self):
        """Return the inclusive (max_x, max_y) cell bounds of the frame."""
        max_x, max_y = self.width, self.height
        for cx, cy in self.cells:
            if cx > max_x:
                max_x = cx
            if cy > max_y:
                max_y = cy
        return max_x, max_y

    def rows(self, config=None):
        """
        Render the canvas as a list of strings, one per cell row.

        Each row is four pixels high.  Untouched cells inside the frame
        render as blanks.
        """
        render_cell = render_cell_braille
        if config is not None and not config.use_braille:
            render_cell = render_cell_ascii

        max_x, max_y = self.extent()
        if max_x > self.width or max_y > self.height:
            logger.debug("frame grew past declared %dx%d to %dx%d cells",
                         self.width + 1, self.height + 1, max_x + 1, max_y + 1)

        cells = self.cells
        result = []
        for cy in range(max_y + 1):
            row = []
            for cx in range(max_x + 1):
                mask, char = cells.get((cx, cy), (0, BLANK))
                row.append(render_cell(mask) if mask else char)
            result.append(''.join(row))
        return result

    def frame(self, config=None) -> str:
        """Render the canvas to a single newline-separated string."""
        return '\n'.join(self.rows(config))


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return BLANK

    # Map density 1-8 to ASCII gradient
    chars = " .:-=+*#%@"
    density = bin(mask).count('1')
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return BLANK
    return chr(BRAILLE_BASE + mask)
