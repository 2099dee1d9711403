"""A side panel summarising the loaded data."""

from __future__ import annotations

import math

from .controls import _paragraph
from .datatable import DataTableState
from .render import Buffer, Constraint, Direction, Rect, Style, split
from .schema import _draw_borders, _draw_table, _draw_title

_BORDER_STYLE = Style(fg="white")
_GAUGE_STYLE = Style(fg="#0ea5e9")
_LINE = "─"


def _draw_line_gauge(buf: Buffer, area: Rect, label: str, ratio: float, style: Style) -> None:
    if not area.width or not area.height:
        return
    label = label[: area.width]
    buf.set_string(area.x, area.y, label)
    start = area.x + len(label) + 1
    right = area.x + area.width
    if start >= right:
        return
    end = start + math.floor((right - start) * ratio)
    buf.set_string(start, area.y, _LINE * (end - start), style)
    buf.set_string(end, area.y, _LINE * (right - end))


class DataTableInfo:
    """Shows the size of the data, the selected row and the schema."""

    def __init__(self, state: DataTableState) -> None:
        self.state = state

    def render(self, area: Rect, buf: Buffer) -> None:
        state = self.state
        inner = area.inner(1, 1, 1, 1).inner(left=1, right=1)
        stats_area, gauge_area, table_area = split(
            inner,
            Direction.VERTICAL,
            [Constraint.length(1), Constraint.length(1), Constraint.fill(1)],
        )

        _paragraph(buf, stats_area, f"Rows x Columns: {state.num_rows} x {len(state.schema)}", Style())

        selected = state.table_state.selected
        if selected is not None:
            selected += state.start_row
            ratio = (selected + 1) / state.num_rows if state.num_rows else 0.0
            _draw_line_gauge(buf, gauge_area, f"Selected: {selected}", min(max(ratio, 0.0), 1.0), _GAUGE_STYLE)
        else:
            _paragraph(buf, gauge_area, "No row selected", Style())

        _draw_title(buf, table_area, "Schema", Style(underline=True), bordered=False)
        table_inner = table_area.inner(top=1).inner(1, 1, 1, 1)
        columns = split(
            table_inner,
            Direction.HORIZONTAL,
            [Constraint.percentage(50), Constraint.length(1), Constraint.fill(1)],
        )
        _draw_table(buf, table_inner, [columns[0], columns[2]], ("Column", "Type"), state.schema.items())

        _draw_borders(buf, area, _BORDER_STYLE)
        _draw_title(buf, area, "Info", Style(bold=True), bordered=True, centered=True)