import pandas as pd

from datui.datatable import DataTableState
from datui.render import Buffer, Rect
from datui.schema import SchemaView

WIDTH = 30


def _render(frame, height=6):
    buf = Buffer(Rect(0, 0, WIDTH, height))
    SchemaView(frame).render(buf.area, buf)
    return buf


def test_border_and_title():
    lines = _render(pd.DataFrame({"a": [1]})).lines()
    assert lines[0].startswith("┌Schema")
    assert lines[0].endswith("┐")
    assert lines[-1].startswith("└")
    assert lines[-1].endswith("┘")


def test_header_is_bold():
    buf = _render(pd.DataFrame({"a": [1]}))
    line = buf.lines()[1]
    assert "Column" in line and "Type" in line
    assert buf[(line.index("Column"), 1)][1].bold


def test_rows_list_names_and_types_in_order():
    frame = pd.DataFrame({"a": [1, 2], "name": ["x", "y"]})
    lines = _render(frame).lines()
    schema = DataTableState(frame).schema
    for line, name in zip(lines[2:4], frame.columns):
        assert line.startswith("│" + name)
        assert schema[name] in line


def test_rows_beyond_area_are_dropped():
    frame = pd.DataFrame({f"c{n}": [n] for n in range(10)})
    lines = _render(frame, height=5).lines()
    assert len(lines) == 5
    assert lines[3].startswith("│c1")
    assert not any("c2" in line for line in lines)


def test_empty_frame_shows_only_header():
    lines = _render(pd.DataFrame()).lines()
    assert "Column" in lines[1]
    assert lines[2] == "│" + " " * (WIDTH - 2) + "│"