"""Events that drive the application loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Union

from .options import OpenOptions


class KeyKind(Enum):
    PRESS = "Press"
    REPEAT = "Repeat"
    RELEASE = "Release"


@dataclass(frozen=True)
class KeyEvent:
    """A key event: ``code`` is a single character or a key name such as ``"PageDown"``."""

    code: str
    kind: KeyKind = KeyKind.PRESS

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise ValueError("key code must be a non-empty string")

    def is_press(self) -> bool:
        return self.kind is KeyKind.PRESS


@dataclass(frozen=True)
class Key:
    event: KeyEvent


@dataclass(frozen=True)
class Open:
    path: Path
    options: OpenOptions = field(default_factory=OpenOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))


@dataclass(frozen=True)
class Exit:
    pass


@dataclass(frozen=True)
class Crash:
    message: str


@dataclass(frozen=True)
class Collect:
    pass


@dataclass(frozen=True)
class Update:
    pass


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


AppEvent = Union[Key, Open, Exit, Crash, Collect, Update, Resize]