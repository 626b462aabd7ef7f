"""Pixel addressing, text overlay and rendering of the Braille canvas."""
from __future__ import annotations

import itertools

import pytest

from braille_canvas import Canvas, PIXEL_MAP, RenderConfig


def test_canonical_frame() -> None:
    canvas = Canvas(10, 10)
    canvas.set(5, 4)
    canvas.line(2, 2, 8, 8)

    assert canvas.frame() == "\n".join([
        " ⢄    ",
        "  ⠙⢄  ",
        "    ⠁ ",
    ])


def test_pixel_map_matches_braille_dot_order() -> None:
    left = [row[0] for row in PIXEL_MAP]
    right = [row[1] for row in PIXEL_MAP]
    assert left == [0x01, 0x02, 0x04, 0x40]
    assert right == [0x08, 0x10, 0x20, 0x80]


@pytest.mark.parametrize("x, y", [(0, 0), (1, 3), (7, 2), (40, 81)])
def test_set_unset_toggle_roundtrip(x: int, y: int) -> None:
    canvas = Canvas()
    assert not canvas.get(x, y)

    canvas.set(x, y)
    assert canvas.get(x, y)

    canvas.unset(x, y)
    assert not canvas.get(x, y)

    canvas.toggle(x, y)
    assert canvas.get(x, y)
    canvas.toggle(x, y)
    assert not canvas.get(x, y)


def test_set_only_touches_its_own_pixel() -> None:
    canvas = Canvas()
    canvas.set(3, 5)

    for x, y in itertools.product(range(6), range(10)):
        assert canvas.get(x, y) == ((x, y) == (3, 5))


def test_every_cell_position_maps_to_a_distinct_glyph_bit() -> None:
    masks = set()
    for x, y in itertools.product(range(2), range(4)):
        canvas = Canvas()
        canvas.set(x, y)
        masks.add(canvas.cells[(0, 0)][0])
    assert masks == {0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40, 0x80}


def test_full_cell_renders_as_full_braille_block() -> None:
    canvas = Canvas()
    for x, y in itertools.product(range(2), range(4)):
        canvas.set(x, y)
    assert canvas.frame() == "⣿"


def test_get_does_not_create_cells() -> None:
    canvas = Canvas()
    assert not canvas.get(12, 12)
    assert canvas.cells == {}


def test_unset_creates_cell_and_grows_frame() -> None:
    canvas = Canvas()
    canvas.unset(4, 0)
    assert canvas.cells == {(2, 0): (0, " ")}
    assert canvas.frame() == "   "


def test_clear_blanks_to_declared_size() -> None:
    canvas = Canvas(4, 8)
    canvas.set(1, 1)
    canvas.set(20, 20)
    canvas.text(0, 4, 10, "hi")

    canvas.clear()

    assert not canvas.get(1, 1)
    assert not canvas.get(20, 20)
    assert canvas.rows() == ["   ", "   ", "   "]
    assert (canvas.width, canvas.height) == (2, 2)


def test_empty_canvas_renders_one_cell() -> None:
    assert Canvas().rows() == [" "]


def test_draws_outside_declared_size() -> None:
    canvas = Canvas(2, 4)
    canvas.set(6, 9)
    rows = canvas.rows()
    assert len(rows) == 3
    assert all(len(row) == 4 for row in rows)
    assert rows[2][3] == chr(0x2800 + 0x02)


def test_set_char_renders_character() -> None:
    canvas = Canvas()
    canvas.set(0, 0)
    canvas.set_char(1, 1, "X")
    assert canvas.frame() == "X"
    assert not canvas.get(0, 0)


def test_dot_write_wins_over_character() -> None:
    canvas = Canvas()
    canvas.set_char(0, 0, "X")
    canvas.set(1, 1)
    assert canvas.frame() == chr(0x2800 + 0x10)

    # the character is gone for good once a dot was written
    canvas.unset(1, 1)
    assert canvas.frame() == " "


def test_unset_keeps_override_character() -> None:
    canvas = Canvas()
    canvas.set_char(0, 0, "Q")
    canvas.unset(0, 0)
    assert canvas.frame() == "Q"


@pytest.mark.parametrize(
    "max_width, expected",
    [(0, "A  "), (1, "A  "), (2, "AB "), (3, "AB "), (4, "ABC")],
)
def test_text_stops_past_max_width(max_width: int, expected: str) -> None:
    canvas = Canvas(4, 0)
    canvas.text(0, 0, max_width, "ABC")
    assert canvas.frame() == expected


def test_text_places_one_character_per_cell() -> None:
    canvas = Canvas()
    canvas.text(2, 4, 100, "ok")
    assert canvas.rows() == ["   ", " ok"]


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1)])
def test_negative_coordinates_are_rejected(x: int, y: int) -> None:
    canvas = Canvas()
    with pytest.raises(ValueError):
        canvas.set(x, y)
    with pytest.raises(ValueError):
        canvas.get(x, y)
    with pytest.raises(ValueError):
        canvas.set_char(x, y, "x")


def test_ascii_fallback_uses_density_ramp() -> None:
    canvas = Canvas()
    canvas.set(0, 0)
    canvas.set(1, 0)
    canvas.set_char(2, 0, "#")
    assert canvas.frame(RenderConfig(use_braille=False)) == ":#"
    assert canvas.frame(RenderConfig()) == chr(0x2809) + "#"


def test_copy_is_independent_and_equal() -> None:
    canvas = Canvas(4, 4)
    canvas.set(1, 1)
    dup = canvas.copy()
    assert dup == canvas

    dup.set(0, 0)
    assert dup != canvas
    assert not canvas.get(0, 0)
