import pytest

from datui.render import Buffer, Constraint, Direction, Rect, Style, split


def test_vertical_split_fill_and_lengths():
    area = Rect(0, 0, 80, 24)
    parts = split(area, Direction.VERTICAL, [Constraint.fill(1), Constraint.length(1), Constraint.length(1)])
    assert [p.height for p in parts[1:]] == [1, 1]
    assert sum(p.height for p in parts) == area.height
    assert parts[0].y == area.y
    assert parts[1].y == parts[0].y + parts[0].height
    assert all(p.width == area.width for p in parts)


def test_horizontal_fill_and_max():
    area = Rect(0, 0, 120, 10)
    left, right = split(area, Direction.HORIZONTAL, [Constraint.fill(1), Constraint.max(50)])
    assert right.width == 50
    assert left.width == area.width - 50
    assert right.x == left.width


def test_max_shrinks_when_space_is_short():
    area = Rect(0, 0, 30, 3)
    left, right = split(area, Direction.HORIZONTAL, [Constraint.fill(1), Constraint.max(50)])
    assert right.width == area.width
    assert left.width == 0


def test_percentages_split_evenly():
    area = Rect(0, 0, 10, 1)
    a, b = split(area, Direction.HORIZONTAL, [Constraint.percentage(50), Constraint.percentage(50)])
    assert a.width == b.width
    assert a.width + b.width == area.width


def test_fill_weights_share_space():
    area = Rect(0, 0, 40, 1)
    a, b = split(area, Direction.HORIZONTAL, [Constraint.fill(1), Constraint.fill(3)])
    assert a.width + b.width == area.width
    assert b.width == 3 * a.width


def test_lengths_clipped_to_area():
    area = Rect(0, 0, 5, 1)
    parts = split(area, Direction.HORIZONTAL, [Constraint.length(4), Constraint.length(4)])
    assert [p.width for p in parts] == [4, area.width - 4]


@pytest.mark.parametrize("maker", [Constraint.length, Constraint.fill, Constraint.max, Constraint.percentage])
def test_negative_constraint_rejected(maker):
    with pytest.raises(ValueError):
        maker(-1)


def test_percentage_over_hundred_rejected():
    with pytest.raises(ValueError):
        Constraint.percentage(101)


def test_rect_inner_and_clamp():
    rect = Rect(2, 3, 10, 6)
    inner = rect.inner(1, 1, 1, 1)
    assert inner == Rect(3, 4, rect.width - 2, rect.height - 2)
    assert rect.inner(20, 20, 0, 0).width == 0


def test_rect_rejects_negative_size():
    with pytest.raises(ValueError):
        Rect(0, 0, -1, 1)


def test_set_string_clips_to_buffer():
    buf = Buffer(Rect(0, 0, 5, 2))
    buf.set_string(3, 0, "hello")
    buf.set_string(0, 5, "ignored")
    lines = buf.lines()
    assert len(lines) == 2
    assert lines[0][3:] == "hello"[:2]
    assert lines[1].strip() == ""


def test_fill_and_set_string_patch_styles():
    buf = Buffer(Rect(0, 0, 3, 1))
    buf.fill(Rect(0, 0, 3, 1), Style(bg="blue"))
    buf.set_string(0, 0, "a", Style(bold=True))
    assert buf[(0, 0)] == ("a", Style(bg="blue", bold=True))
    assert buf[(2, 0)] == (" ", Style(bg="blue"))


def test_buffer_index_outside_raises():
    buf = Buffer(Rect(0, 0, 2, 2))
    buf.set_string(1, 1, "x")
    assert buf[(1, 1)][0] == "x"
    with pytest.raises(IndexError):
        buf[(2, 0)]
    with pytest.raises(IndexError):
        buf[(0, 2)]