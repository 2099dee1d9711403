"""A scrollable window over a data frame, and the widget that draws it."""

from __future__ import annotations

import io
import json
import sys
import textwrap
from pathlib import Path

import pandas as pd

from .options import OpenOptions
from .render import Buffer, Rect, Style

_HEADER_STYLE = Style(bold=True, underline=True)
_HIGHLIGHT_STYLE = Style(bg="blue")


class TableState:
    """Selection and scroll offset of a table widget."""

    def __init__(self) -> None:
        self.selected: int | None = None
        self.offset = 0

    def select(self, index: int | None) -> None:
        self.selected = index
        if index is None:
            self.offset = 0

    def select_next(self) -> None:
        self.select(0 if self.selected is None else self.selected + 1)

    def select_previous(self) -> None:
        # With nothing selected, jump to the end; rendering clamps it.
        self.select(sys.maxsize if self.selected is None else max(self.selected - 1, 0))


def _dtype_name(dtype) -> str:
    if isinstance(dtype, pd.CategoricalDtype):
        return "cat"
    kind = dtype.kind
    if kind == "b":
        return "bool"
    if kind in "iuf":
        return f"{kind}{dtype.itemsize * 8}"
    if kind == "M":
        unit = getattr(dtype, "unit", "ns")
        tz = getattr(dtype, "tz", None)
        return f"datetime[{unit}, {tz}]" if tz is not None else f"datetime[{unit}]"
    if kind in "OSU":
        return "str"
    return str(dtype)


def _format_value(value) -> str:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _read_delimited(source, separator: str, has_header: bool = True, skip_rows: int = 0) -> pd.DataFrame:
    frame = pd.read_csv(source, sep=separator, header=0 if has_header else None, skiprows=skip_rows)
    if not has_header:
        frame.columns = [f"column_{n}" for n in range(1, len(frame.columns) + 1)]
    return frame


def _records_frame(records) -> pd.DataFrame:
    if not all(isinstance(record, dict) for record in records):
        raise ValueError("expected JSON objects as rows")
    return pd.DataFrame.from_records(records)


def _read_json_lines(path) -> pd.DataFrame:
    with open(path, encoding="utf-8") as handle:
        records = [json.loads(line) for line in handle if line.strip()]
    return _records_frame(records)


class DataTableState:
    """A data frame plus the visible window onto it."""

    def __init__(self, frame: pd.DataFrame) -> None:
        frame = frame.rename(columns=str)
        if frame.columns.duplicated().any():
            raise ValueError("column names must be unique")
        self.frame = frame
        self.df: pd.DataFrame | None = None
        self.table_state = TableState()
        self.start_row = 0
        self.visible_rows = 0
        self.termcol_index = 0
        self.visible_termcols = 0
        self.error: Exception | None = None
        self.schema = {name: _dtype_name(dtype) for name, dtype in frame.dtypes.items()}
        self.num_rows = 0

    @classmethod
    def from_parquet(cls, path) -> DataTableState:
        return cls(pd.read_parquet(path))

    @classmethod
    def from_csv(cls, path, options: OpenOptions | None = None) -> DataTableState:
        options = options or OpenOptions()
        source = path
        if options.skip_lines:
            text = Path(path).read_text(encoding="utf-8")
            source = io.StringIO("".join(text.splitlines(keepends=True)[options.skip_lines:]))
        return cls(_read_delimited(source, ",", options.has_header is not False, options.skip_rows or 0))

    @classmethod
    def from_delimited(cls, path, delimiter: str | int) -> DataTableState:
        separator = OpenOptions().with_delimiter(delimiter).delimiter
        return cls(_read_delimited(path, separator))

    @classmethod
    def from_json(cls, path) -> DataTableState:
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list):
            raise ValueError("expected a JSON array of objects")
        return cls(_records_frame(data))

    @classmethod
    def from_json_lines(cls, path) -> DataTableState:
        return cls(_read_json_lines(path))

    @classmethod
    def from_ndjson(cls, path) -> DataTableState:
        return cls(_read_json_lines(path))

    def _slide_table(self, rows: int) -> None:
        if self.start_row + rows <= 0:
            self.start_row = 0
        else:
            # A window that does not fill the screen cannot slide further down.
            if self.df is not None and rows > 0 and len(self.df) <= self.visible_rows:
                return
            self.start_row += rows
        self.collect()

    def collect(self) -> None:
        """Refresh the row count and the visible window."""
        self.num_rows = len(self.frame)
        try:
            window = self.frame.iloc[
                self.start_row : self.start_row + self.visible_rows + 1,
                self.termcol_index :,
            ]
        except (IndexError, ValueError, TypeError) as exc:
            self.error = exc
            return
        self.df = window
        self.error = None

    def select_next(self) -> None:
        self.table_state.select_next()
        selected = self.table_state.selected
        if selected is not None and selected >= self.visible_rows and self.visible_rows > 0:
            self._slide_table(1)

    def page_down(self) -> None:
        self._slide_table(self.visible_rows)

    def select_previous(self) -> None:
        selected = self.table_state.selected
        if selected is None:
            self.table_state.select(0)
            return
        self.table_state.select_previous()
        if selected == 0 and self.start_row > 0:
            self._slide_table(-1)

    def scroll_to(self, index: int) -> None:
        self.start_row = index
        self.collect()

    def page_up(self) -> None:
        self._slide_table(-self.visible_rows)

    def scroll_right(self) -> None:
        if self.termcol_index < len(self.schema) - 1:
            self.termcol_index += 1
            self.collect()

    def scroll_left(self) -> None:
        if self.termcol_index > 0:
            self.termcol_index -= 1
            self.collect()


class DataTable:
    """Draws the visible window of a DataTableState."""

    def render(self, area: Rect, buf: Buffer, state: DataTableState) -> None:
        state.visible_termcols = area.width
        state.visible_rows = max(area.height - 1, 0)

        selected = state.table_state.selected
        if selected is not None and selected >= state.visible_rows:
            state.table_state.select(state.visible_rows - 1 if state.visible_rows else None)

        if state.df is not None:
            self._render_dataframe(state.df, area, buf, state.table_state)
        elif state.error is not None:
            self._render_message(f"Error: {state.error}", area, buf)
        elif area.height:
            buf.set_string(area.x, area.y, "No data"[: area.width])

    @staticmethod
    def _render_message(text: str, area: Rect, buf: Buffer) -> None:
        inner = area.inner(top=area.height // 2)
        if not inner.width:
            return
        for y, line in zip(range(inner.y, inner.y + inner.height), textwrap.wrap(text, inner.width)):
            buf.set_string(inner.x + (inner.width - len(line)) // 2, y, line)

    def _render_dataframe(self, df: pd.DataFrame, area: Rect, buf: Buffer, table_state: TableState) -> None:
        if not area.height:
            return
        names = [str(name) for name in df.columns]
        widths = [len(name) for name in names]
        row_limit = min(len(df), area.height - 1 if area.height > 1 else 0)
        rows: list[list[str]] = [[] for _ in range(len(df))]
        used_width = 0
        visible_columns = 0

        for index, dtype in enumerate(df.dtypes):
            cells = [_format_value(v) for v in df.iloc[:row_limit, index].tolist()]
            max_len = max([widths[index], *map(len, cells)])
            for row, text in zip(rows, cells):
                row.append(text)

            overflows = used_width + max_len >= area.width
            if overflows and _dtype_name(dtype) == "str":
                widths[index] = area.width - used_width
                visible_columns += 1
                break
            if overflows:
                break
            widths[index] = max_len
            visible_columns += 1
            used_width += max_len + 1

        widths = widths[:visible_columns]

        def draw_row(y: int, texts: list[str], style: Style) -> None:
            x = area.x
            for text, width in zip(texts, widths):
                buf.set_string(x, y, text[:width], style)
                x += width + 1

        buf.fill(Rect(area.x, area.y, area.width, 1), _HEADER_STYLE)
        draw_row(area.y, names[:visible_columns], _HEADER_STYLE)

        body_height = area.height - 1
        selected = table_state.selected
        if selected is not None and rows:
            selected = min(selected, len(rows) - 1)
            if selected < table_state.offset:
                table_state.offset = selected
            elif selected >= table_state.offset + body_height:
                table_state.offset = selected - body_height + 1
        table_state.offset = min(table_state.offset, max(len(rows) - 1, 0))

        visible = rows[table_state.offset : table_state.offset + body_height]
        for position, row in enumerate(visible):
            y = area.y + 1 + position
            if selected is not None and table_state.offset + position == selected:
                buf.fill(Rect(area.x, y, area.width, 1), _HIGHLIGHT_STYLE)
            draw_row(y, row[:visible_columns], Style())