import pytest

from wolfcast.shape import Canvas, fill_circle


def _painted(canvas, color):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get(x, y) == color
    }


def test_new_canvas_is_blank():
    canvas = Canvas(4, 3)
    assert canvas.pixels == [0] * 12


def test_pixel_count_must_match():
    with pytest.raises(ValueError):
        Canvas(2, 2, [1, 2, 3])


def test_get_out_of_range():
    canvas = Canvas(3, 3)
    with pytest.raises(IndexError):
        canvas.get(3, 0)
    with pytest.raises(IndexError):
        canvas.get(0, -1)


def test_radius_zero_paints_centre_only():
    canvas = Canvas(5, 5)
    fill_circle(canvas, 2, 2, 0, 9)
    assert _painted(canvas, 9) == {(2, 2)}


def test_disc_covers_centre_and_radius_points():
    canvas = Canvas(10, 10)
    fill_circle(canvas, 5, 5, 2, 7)
    assert canvas.get(5, 5) == 7
    assert canvas.get(5, 3) == 7
    assert canvas.get(7, 5) == 7
    assert canvas.get(5, 8) == 0


def test_disc_is_symmetric_and_bounded():
    canvas = Canvas(12, 12)
    fill_circle(canvas, 5, 5, 3, 4)
    points = _painted(canvas, 4)
    for x, y in points:
        assert (10 - x, y) in points
        assert (x, 10 - y) in points
        assert (y, x) in points
        assert (x - 5) ** 2 + (y - 5) ** 2 <= (3 + 1) ** 2


def test_disc_near_edge_is_clipped():
    canvas = Canvas(5, 5)
    fill_circle(canvas, 0, 0, 3, 2)
    assert canvas.get(0, 0) == 2
    assert canvas.get(4, 4) == 0
    assert len(canvas.pixels) == 25