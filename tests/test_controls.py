from datui.controls import Controls
from datui.render import Buffer, Rect


def _render(width, height=1):
    buf = Buffer(Rect(0, 0, width, height))
    Controls().render(buf.area, buf)
    return buf


def test_all_controls_appear_in_order():
    line = _render(80).lines()[0]
    positions = [line.index(word) for word in ("Arrows", "PgUp/PgDown", "Home", "Info", "Quit")]
    assert positions == sorted(positions)


def test_first_key_is_centered_before_its_action():
    line = _render(80).lines()[0]
    assert line.startswith(" Arrows Scroll")


def test_key_is_bold_and_action_has_background():
    buf = _render(80)
    line = buf.lines()[0]
    key_style = buf[(line.index("Arrows"), 0)][1]
    action_style = buf[(line.index("Scroll"), 0)][1]
    trailing_style = buf[(79, 0)][1]
    assert key_style.bold
    assert key_style.bg is None
    assert action_style.bg == trailing_style.bg
    assert trailing_style.bg is not None


def test_narrow_area_is_clipped():
    buf = _render(10)
    line = buf.lines()[0]
    assert len(line) == 10
    assert "Arrows" in line
    assert "Quit" not in line


def test_zero_height_draws_nothing():
    buf = Buffer(Rect(0, 0, 20, 2))
    Controls().render(Rect(0, 0, 20, 0), buf)
    assert buf.lines() == [" " * 20, " " * 20]