"""Terminal drawing primitives: rectangles, styles, layout splitting and a cell buffer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


@dataclass(frozen=True)
class Rect:
    """An axis-aligned area of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle coordinates and sizes must not be negative")

    @property
    def area(self) -> int:
        return self.width * self.height

    def inner(self, left: int = 0, right: int = 0, top: int = 0, bottom: int = 0) -> Rect:
        """Return the rectangle shrunk by the given margins, never below zero size."""
        return Rect(
            self.x + min(left, self.width),
            self.y + min(top, self.height),
            max(self.width - left - right, 0),
            max(self.height - top - bottom, 0),
        )


@dataclass(frozen=True)
class Style:
    """Colours and text attributes of a cell."""

    fg: str | None = None
    bg: str | None = None
    bold: bool = False
    underline: bool = False


def _patched(base: Style, over: Style) -> Style:
    return Style(
        fg=over.fg if over.fg is not None else base.fg,
        bg=over.bg if over.bg is not None else base.bg,
        bold=base.bold or over.bold,
        underline=base.underline or over.underline,
    )


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Constraint:
    """A size rule for one segment of a layout."""

    kind: str
    value: int

    @classmethod
    def _make(cls, kind: str, value: int) -> Constraint:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{kind} constraint needs a non-negative integer, got {value!r}")
        if kind == "percentage" and value > 100:
            raise ValueError(f"percentage must be at most 100, got {value}")
        return cls(kind, value)

    @classmethod
    def length(cls, value: int) -> Constraint:
        return cls._make("length", value)

    @classmethod
    def fill(cls, weight: int) -> Constraint:
        return cls._make("fill", weight)

    @classmethod
    def max(cls, value: int) -> Constraint:
        return cls._make("max", value)

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        return cls._make("percentage", value)


def split(area: Rect, direction: Direction, constraints: Iterable[Constraint]) -> list[Rect]:
    """Divide ``area`` along ``direction`` according to ``constraints``.

    Fixed sizes (length, percentage) are placed first, then maximums, and the
    space left over is shared among fill segments by weight.
    """
    constraints = list(constraints)
    total = area.width if direction is Direction.HORIZONTAL else area.height
    sizes = [0] * len(constraints)
    remaining = total

    for index, constraint in enumerate(constraints):
        if constraint.kind in ("length", "percentage"):
            wanted = constraint.value if constraint.kind == "length" else total * constraint.value // 100
            sizes[index] = min(wanted, remaining)
            remaining -= sizes[index]

    for index, constraint in enumerate(constraints):
        if constraint.kind == "max":
            sizes[index] = min(constraint.value, remaining)
            remaining -= sizes[index]

    fills = [(index, c.value) for index, c in enumerate(constraints) if c.kind == "fill"]
    total_weight = sum(weight for _, weight in fills)
    if total_weight:
        left = remaining
        for position, (index, weight) in enumerate(fills):
            share = left if position == len(fills) - 1 else remaining * weight // total_weight
            sizes[index] = share
            left -= share

    rects = []
    offset = 0
    for size in sizes:
        if direction is Direction.HORIZONTAL:
            rects.append(Rect(area.x + offset, area.y, size, area.height))
        else:
            rects.append(Rect(area.x, area.y + offset, area.width, size))
        offset += size
    return rects


class Buffer:
    """A grid of styled character cells covering ``area``."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._symbols = [[" "] * area.width for _ in range(area.height)]
        self._styles = [[Style()] * area.width for _ in range(area.height)]

    def _contains(self, x: int, y: int) -> bool:
        return (
            self.area.x <= x < self.area.x + self.area.width
            and self.area.y <= y < self.area.y + self.area.height
        )

    def __getitem__(self, position: tuple[int, int]) -> tuple[str, Style]:
        x, y = position
        if not self._contains(x, y):
            raise IndexError(f"cell {position} is outside the buffer")
        row, column = y - self.area.y, x - self.area.x
        return self._symbols[row][column], self._styles[row][column]

    def set_string(self, x: int, y: int, text: str, style: Style | None = None) -> None:
        """Write ``text`` starting at (x, y), clipped to the buffer."""
        if not self.area.y <= y < self.area.y + self.area.height:
            return
        style = style or Style()
        row = y - self.area.y
        for offset, char in enumerate(text):
            cx = x + offset
            if cx < self.area.x:
                continue
            if cx >= self.area.x + self.area.width:
                break
            column = cx - self.area.x
            self._symbols[row][column] = char
            self._styles[row][column] = _patched(self._styles[row][column], style)

    def fill(self, area: Rect, style: Style) -> None:
        """Apply ``style`` to every cell of ``area`` that lies inside the buffer."""
        top = max(area.y, self.area.y)
        bottom = min(area.y + area.height, self.area.y + self.area.height)
        left = max(area.x, self.area.x)
        right = min(area.x + area.width, self.area.x + self.area.width)
        for y in range(top, bottom):
            row = self._styles[y - self.area.y]
            for x in range(left, right):
                column = x - self.area.x
                row[column] = _patched(row[column], style)

    def lines(self) -> list[str]:
        return ["".join(row) for row in self._symbols]