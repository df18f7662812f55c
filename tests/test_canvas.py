from pbn.rendering.canvas import BLANK, Canvas, Glyph


def test_new_canvas_is_blank():
    canvas = Canvas(3, 2)
    assert canvas.row_text(0) == "   "
    assert canvas.get(2, 1) == BLANK


def test_text_is_clipped_at_edges():
    canvas = Canvas(4, 1)
    canvas.text(2, 0, "abc", fg=(1, 2, 3))
    canvas.text(-1, 0, "xy")
    assert canvas.row_text(0) == "y ab"
    assert canvas.get(3, 0) == Glyph("b", (1, 2, 3), None)


def test_writes_outside_are_ignored():
    canvas = Canvas(2, 2)
    canvas.put(5, 5, "z")
    canvas.put(0, -1, "z")
    assert [canvas.row_text(y) for y in range(2)] == ["  ", "  "]


def test_fill_sets_background():
    canvas = Canvas(4, 3)
    canvas.fill(1, 1, 2, 5, bg=(9, 9, 9))
    assert canvas.get(1, 1).bg == (9, 9, 9)
    assert canvas.get(2, 2).bg == (9, 9, 9)
    assert canvas.get(0, 1).bg is None
    assert canvas.get(3, 1).bg is None


def test_negative_size_is_empty():
    canvas = Canvas(-3, -1)
    assert (canvas.width, canvas.height) == (0, 0)
    assert list(canvas.rows()) == []
