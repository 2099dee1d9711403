"""Application state: reacts to events and draws the whole screen."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from .controls import Controls, _paragraph
from .datatable import DataTable, DataTableState
from .debug import DebugState
from .events import AppEvent, Collect, Crash, Exit, Key, KeyEvent, Open, Resize
from .info import DataTableInfo
from .options import OpenOptions
from .render import Buffer, Constraint, Direction, Rect, Style, split

_Loader = Callable[[Path, OpenOptions], DataTableState]

_LOADERS: dict[str, _Loader] = {
    "parquet": lambda path, options: DataTableState.from_parquet(path),
    "csv": DataTableState.from_csv,
    "tsv": lambda path, options: DataTableState.from_delimited(path, "\t"),
    "psv": lambda path, options: DataTableState.from_delimited(path, "|"),
    "json": lambda path, options: DataTableState.from_json(path),
    "jsonl": lambda path, options: DataTableState.from_json_lines(path),
    "ndjson": lambda path, options: DataTableState.from_ndjson(path),
}

_STATE_ACTIONS: dict[str, Callable[[DataTableState], None]] = {
    "Right": DataTableState.scroll_right,
    "l": DataTableState.scroll_right,
    "Left": DataTableState.scroll_left,
    "h": DataTableState.scroll_left,
    "Down": DataTableState.select_next,
    "j": DataTableState.select_next,
    "Up": DataTableState.select_previous,
    "k": DataTableState.select_previous,
    "PageDown": DataTableState.page_down,
    "PageUp": DataTableState.page_up,
    "Home": lambda state: state.scroll_to(0),
}

_LOAD_ERRORS = (OSError, ValueError, ImportError)


class App:
    """Holds the loaded table and the UI state around it."""

    def __init__(self, events) -> None:
        self.data_table_state: DataTableState | None = None
        self.path: Path | None = None
        self.events = events
        self.focus = 0
        self.debug = DebugState()
        self.info_visible = False

    def send_event(self, event: AppEvent) -> None:
        self.events.put(event)

    def enable_debug(self) -> None:
        self.debug.enabled = True

    def _load(self, path: Path, options: OpenOptions) -> None:
        loader = _LOADERS.get(path.suffix[1:].lower())
        if loader is None:
            raise ValueError("Unsupported file type")
        self.data_table_state = loader(path, options)
        self.path = path

    def _key(self, event: KeyEvent) -> AppEvent | None:
        self.debug.on_key(event)
        code = event.code
        if code == "q":
            return Exit()
        if not event.is_press():
            return None
        if code in _STATE_ACTIONS:
            if self.data_table_state is not None:
                _STATE_ACTIONS[code](self.data_table_state)
        elif code == "Tab":
            self.focus = (self.focus + 1) % 2
        elif code == "i":
            self.info_visible = not self.info_visible
        return None

    def event(self, event: AppEvent) -> AppEvent | None:
        """Handle one event, returning a follow-up event if there is one."""
        self.debug.num_events += 1
        match event:
            case Key(event=key):
                return self._key(key)
            case Open(path=path, options=options):
                try:
                    self._load(path, options)
                except _LOAD_ERRORS as exc:
                    return Crash(str(exc))
                return Collect()
            case Resize(height=rows):
                if self.data_table_state is not None:
                    self.data_table_state.visible_rows = rows
                    self.data_table_state.collect()
            case Collect():
                if self.data_table_state is not None:
                    self.data_table_state.collect()
        return None

    def render(self, area: Rect, buf: Buffer) -> None:
        self.debug.num_frames += 1

        constraints = [Constraint.fill(1), Constraint.length(1)]
        if self.debug.enabled:
            constraints.append(Constraint.length(1))
        layout = split(area, Direction.VERTICAL, constraints)

        state = self.data_table_state
        if state is None:
            _paragraph(buf, layout[0], "No data loaded", Style())
        elif self.info_visible:
            table_area, info_area = split(
                layout[0], Direction.HORIZONTAL, [Constraint.fill(1), Constraint.max(50)]
            )
            DataTable().render(table_area, buf, state)
            DataTableInfo(state).render(info_area, buf)
        else:
            DataTable().render(layout[0], buf, state)

        Controls().render(layout[1], buf)
        if self.debug.enabled:
            self.debug.render(layout[2], buf)