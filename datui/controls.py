"""The key-binding bar shown along the bottom of the screen."""

from __future__ import annotations

from .render import Buffer, Constraint, Direction, Rect, Style, split

_CONTROLS = (
    ("Arrows", "Scroll"),
    ("PgUp/PgDown", "Jump"),
    ("Home", "Top"),
    ("i", "Info"),
    ("q", "Quit"),
)

_KEY_STYLE = Style(bold=True)
_ACTION_STYLE = Style(bg="darkgray")


def _paragraph(buf: Buffer, area: Rect, text: str, style: Style, centered: bool = False) -> None:
    if not area.width or not area.height:
        return
    buf.fill(area, style)
    text = text[: area.width]
    offset = (area.width - len(text)) // 2 if centered else 0
    buf.set_string(area.x + offset, area.y, text, style)


class Controls:
    """Renders each key next to the action it performs."""

    def render(self, area: Rect, buf: Buffer) -> None:
        constraints: list[Constraint] = []
        for key, action in _CONTROLS:
            constraints.append(Constraint.length(len(key) + 2))
            constraints.append(Constraint.length(len(action) + 1))
        constraints.append(Constraint.fill(1))

        cells = split(area, Direction.HORIZONTAL, constraints)
        for (key, action), key_area, action_area in zip(_CONTROLS, cells[0::2], cells[1::2]):
            _paragraph(buf, key_area, key, _KEY_STYLE, centered=True)
            _paragraph(buf, action_area, action, _ACTION_STYLE)

        _paragraph(buf, cells[-1], "", _ACTION_STYLE)