"""Counters describing what the application has been doing."""

from __future__ import annotations

from dataclasses import dataclass

from .events import KeyEvent
from .render import Buffer, Rect


def _key_code_name(code: str) -> str:
    return f"Char('{code}')" if len(code) == 1 else code


@dataclass
class DebugState:
    """Event and frame counters, shown in a status line when enabled."""

    num_events: int = 0
    num_frames: int = 0
    num_key_events: int = 0
    last_key_event_name: str = ""
    last_type_name: str = ""
    enabled: bool = False

    def on_key(self, event: KeyEvent) -> None:
        self.num_key_events += 1
        self.last_key_event_name = _key_code_name(event.code)
        self.last_type_name = event.kind.value

    def render(self, area: Rect, buf: Buffer) -> None:
        if not area.width or not area.height:
            return
        text = (
            f"num_events={self.num_events} num_key_events={self.num_key_events} "
            f"last_key_name={self.last_key_event_name} last_type={self.last_type_name} "
            f"num_frames={self.num_frames}"
        )
        buf.set_string(area.x, area.y, text[: area.width])