from array import array

import pytest

from ipcosd.draw_paint import (
    BorderEffect,
    BorderInfo,
    BorderPainter,
    DrawRect,
    draw_dotted_border,
    draw_solid_border,
)

COLOR = 0xFF00FF00
KEY = 0x11111111


def _info(w, h, thick=1, style=BorderEffect.LINE, interval=1):
    return BorderInfo(
        rect=DrawRect(0, 0, w, h),
        color=COLOR,
        color_key=KEY,
        thick=thick,
        display_style=style,
        interval=interval,
    )


def _border_cell(x, y, w, h, thick):
    return x < thick or y < thick or x >= w - thick or y >= h - thick


def test_solid_border_marks_edges_only():
    w, h, thick = 6, 5, 1
    buffer = [0] * (w * h)
    draw_solid_border(buffer, _info(w, h, thick))
    for y in range(h):
        for x in range(w):
            expected = COLOR if _border_cell(x, y, w, h, thick) else 0
            assert buffer[y * w + x] == expected


def test_solid_border_thickness_two():
    w, h, thick = 8, 7, 2
    buffer = [0] * (w * h)
    draw_solid_border(buffer, _info(w, h, thick))
    for y in range(h):
        for x in range(w):
            expected = COLOR if _border_cell(x, y, w, h, thick) else 0
            assert buffer[y * w + x] == expected
    assert len(buffer) == w * h


def test_solid_border_works_on_array():
    w, h = 4, 4
    buffer = array("I", [0] * (w * h))
    draw_solid_border(buffer, _info(w, h))
    assert buffer[0] == COLOR
    assert buffer[w + 1] == 0
    assert len(buffer) == w * h


def test_dotted_top_row_alternates():
    w, h = 4, 4
    buffer = [0] * (w * h)
    draw_dotted_border(buffer, _info(w, h, style=BorderEffect.DOTTED), 0)
    assert buffer[:w] == [KEY, COLOR, KEY, COLOR]
    assert buffer[(h - 1) * w:] == [KEY, COLOR, KEY, COLOR]


def test_dotted_side_columns_only_on_lit_rows():
    w, h = 5, 6
    buffer = [0] * (w * h)
    draw_dotted_border(buffer, _info(w, h, style=BorderEffect.DOTTED), 0)
    for y in range(1, h - 1):
        left = buffer[y * w]
        right = buffer[y * w + w - 1]
        expected = COLOR if y % 2 else 0
        assert left == expected
        assert right == expected


def test_dotted_rejects_zero_interval():
    with pytest.raises(ValueError):
        draw_dotted_border([0] * 16, _info(4, 4, interval=0), 0)


def test_short_buffer_rejected():
    with pytest.raises(ValueError):
        draw_solid_border([0] * 3, _info(4, 4))


def test_painter_waterfall_advances_and_dotted_resets():
    painter = BorderPainter()
    w, h = 4, 4
    info = _info(w, h, style=BorderEffect.WATERFULL_LIGHT, interval=40)
    buffer = [0] * (w * h)
    painter.draw(buffer, info)
    assert painter.interval_offset == 40
    assert buffer[:w] == [COLOR] * w
    painter.draw(buffer, info)
    assert painter.interval_offset == 80
    assert buffer[:w] == [KEY] * w
    info.display_style = BorderEffect.DOTTED
    painter.draw(buffer, info)
    assert painter.interval_offset == 0


def test_painter_line_matches_solid():
    w, h = 5, 5
    painted = [0] * (w * h)
    direct = [0] * (w * h)
    BorderPainter().draw(painted, _info(w, h))
    draw_solid_border(direct, _info(w, h))
    assert painted == direct


def test_painter_unknown_style_leaves_buffer():
    buffer = [0] * 16
    BorderPainter().draw(buffer, _info(4, 4, style=7))
    assert buffer == [0] * 16