"""A bordered two-column view of a frame's column names and types."""

from __future__ import annotations

import pandas as pd

from .datatable import _dtype_name
from .render import Buffer, Constraint, Direction, Rect, Style, split

_HEADER_STYLE = Style(bold=True)


def _draw_borders(buf: Buffer, area: Rect, style: Style) -> None:
    if not area.width or not area.height:
        return
    left, top = area.x, area.y
    right, bottom = area.x + area.width - 1, area.y + area.height - 1
    buf.set_string(left, top, "─" * area.width, style)
    buf.set_string(left, bottom, "─" * area.width, style)
    for y in range(top, bottom + 1):
        buf.set_string(left, y, "│", style)
        buf.set_string(right, y, "│", style)
    buf.set_string(left, top, "┌", style)
    buf.set_string(right, top, "┐", style)
    buf.set_string(left, bottom, "└", style)
    buf.set_string(right, bottom, "┘", style)


def _draw_title(buf: Buffer, area: Rect, title: str, style: Style, bordered: bool, centered: bool = False) -> None:
    title_area = area.inner(left=1, right=1) if bordered else area
    if not title_area.width or not area.height:
        return
    title = title[: title_area.width]
    offset = (title_area.width - len(title)) // 2 if centered else 0
    buf.set_string(title_area.x + offset, title_area.y, title, style)


def _draw_table(buf: Buffer, area: Rect, columns: list[Rect], header: tuple[str, ...], rows) -> None:
    lines = [(header, _HEADER_STYLE)] + [(row, Style()) for row in rows]
    for y, (cells, style) in zip(range(area.y, area.y + area.height), lines):
        for column, text in zip(columns, cells):
            if column.width:
                buf.set_string(column.x, y, text[: column.width], style)


class SchemaView:
    """Lists every column of ``frame`` with its type."""

    def __init__(self, frame: pd.DataFrame) -> None:
        self.frame = frame

    def render(self, area: Rect, buf: Buffer) -> None:
        rows = [(str(name), _dtype_name(dtype)) for name, dtype in self.frame.dtypes.items()]
        inner = area.inner(1, 1, 1, 1)
        half = area.width // 2
        columns = split(
            inner,
            Direction.HORIZONTAL,
            [Constraint.length(half), Constraint.length(1), Constraint.length(half)],
        )
        _draw_table(buf, inner, [columns[0], columns[2]], ("Column", "Type"), rows)
        _draw_borders(buf, area, Style())
        _draw_title(buf, area, "Schema", Style(), bordered=True)