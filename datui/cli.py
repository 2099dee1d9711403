"""Command line entry point: parse arguments and run the terminal viewer."""

from __future__ import annotations

import argparse
import queue
import sys
from enum import Enum
from pathlib import Path

from blessed import Terminal
from blessed.keyboard import Keystroke

from .app import App
from .events import AppEvent, Crash, Exit, Key, KeyEvent, Open, Resize
from .options import OpenOptions
from .render import Buffer, Rect, Style

_VERSION = "0.1.0"

_POLL_SECONDS = 0.025

_SEQUENCE_NAMES = {
    "KEY_RIGHT": "Right",
    "KEY_LEFT": "Left",
    "KEY_UP": "Up",
    "KEY_DOWN": "Down",
    "KEY_PGDOWN": "PageDown",
    "KEY_NPAGE": "PageDown",
    "KEY_PGUP": "PageUp",
    "KEY_PPAGE": "PageUp",
    "KEY_HOME": "Home",
    "KEY_END": "End",
    "KEY_TAB": "Tab",
    "KEY_ESCAPE": "Esc",
    "KEY_ENTER": "Enter",
    "KEY_BACKSPACE": "Backspace",
    "KEY_DELETE": "Delete",
    "KEY_INSERT": "Insert",
}

_CONTROL_CHARS = {
    "\t": "Tab",
    "\x1b": "Esc",
    "\r": "Enter",
    "\n": "Enter",
    "\x7f": "Backspace",
}


class AppCrash(RuntimeError):
    """Raised when the application reports a fatal error."""


class _Outcome(Enum):
    IDLE = "idle"
    UPDATED = "updated"
    STOP = "stop"


def _count(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {text!r}")
    return value


def _byte(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid byte value: {text!r}") from None
    if not 0 <= value <= 255:
        raise argparse.ArgumentTypeError(f"byte value must be in 0..255: {text!r}")
    return value


def _boolean(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise argparse.ArgumentTypeError(f"expected 'true' or 'false', got {text!r}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="datui", description="datui")
    parser.add_argument("path", type=Path)
    parser.add_argument(
        "--skip-lines", dest="skip_lines", type=_count, default=None,
        help="Skip this many lines when reading a file",
    )
    parser.add_argument(
        "--skip-rows", dest="skip_rows", type=_count, default=None,
        help="Skip this many rows when reading a file",
    )
    parser.add_argument(
        "--no-header", dest="no_header", type=_boolean, default=None,
        help="Specify that the file has no header",
    )
    parser.add_argument(
        "--delimiter", type=_byte, default=None,
        help="Specify the delimiter to use when reading a file",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Enable debug mode to show operational information",
    )
    parser.add_argument("--version", action="version", version=f"datui {_VERSION}")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments; exits with status 2 on bad input."""
    return _parser().parse_args(argv)


def open_options_from_args(args: argparse.Namespace) -> OpenOptions:
    """Build reader options from parsed arguments, leaving unset ones at their defaults."""
    options = OpenOptions()
    if args.skip_lines is not None:
        options = options.with_skip_lines(args.skip_lines)
    if args.skip_rows is not None:
        options = options.with_skip_rows(args.skip_rows)
    if args.no_header is not None:
        options = options.with_has_header(not args.no_header)
    if args.delimiter is not None:
        options = options.with_delimiter(args.delimiter)
    return options


def _key_event(keystroke: Keystroke) -> KeyEvent | None:
    """Translate a terminal keystroke into a key event, or None for an empty one."""
    if keystroke.is_sequence:
        name = keystroke.name or ""
        code = _SEQUENCE_NAMES.get(name, name.removeprefix("KEY_"))
        return KeyEvent(code) if code else None
    text = str(keystroke)
    if not text:
        return None
    return KeyEvent(_CONTROL_CHARS.get(text, text))


def _pump(app: App, events: queue.Queue[AppEvent]) -> _Outcome:
    """Handle at most one pending event."""
    try:
        event = events.get_nowait()
    except queue.Empty:
        return _Outcome.IDLE
    match event:
        case Key(event=KeyEvent(code="Esc")) | Exit():
            return _Outcome.STOP
        case Crash(message=message):
            raise AppCrash(message)
    follow_up = app.event(event)
    if follow_up is not None:
        events.put(follow_up)
    return _Outcome.UPDATED


def _colour(term: Terminal, name: str, background: bool) -> str:
    if name.startswith("#"):
        return term.on_color_hex(name) if background else term.color_hex(name)
    return str(getattr(term, f"on_{name}" if background else name, ""))


def _style_sequence(term: Terminal, style: Style) -> str:
    parts = [term.normal]
    if style.bold:
        parts.append(term.bold)
    if style.underline:
        parts.append(term.underline)
    if style.fg:
        parts.append(_colour(term, style.fg, background=False))
    if style.bg:
        parts.append(_colour(term, style.bg, background=True))
    return "".join(parts)


def _draw(term: Terminal, app: App) -> None:
    area = Rect(0, 0, term.width, term.height)
    buf = Buffer(area)
    app.render(area, buf)
    output = []
    for y in range(area.height):
        output.append(term.move_xy(0, y))
        current: Style | None = None
        for x in range(area.width):
            symbol, style = buf[x, y]
            if style != current:
                output.append(_style_sequence(term, style))
                current = style
            output.append(symbol)
        output.append(term.normal)
    print("".join(output), end="", flush=True)


def run(args: argparse.Namespace) -> None:
    """Show the file named by ``args`` until the user quits; raises AppCrash on failure."""
    term = Terminal()
    events: queue.Queue[AppEvent] = queue.Queue()
    app = App(events)
    if args.debug:
        app.enable_debug()
    options = open_options_from_args(args)

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        size = (term.width, term.height)
        _draw(term, app)
        events.put(Open(args.path, options))
        while True:
            keystroke = term.inkey(timeout=_POLL_SECONDS)
            key = _key_event(keystroke)
            if key is not None:
                events.put(Key(key))
            current = (term.width, term.height)
            if current != size:
                size = current
                events.put(Resize(*current))

            outcome = _pump(app, events)
            if outcome is _Outcome.STOP:
                break
            if outcome is _Outcome.UPDATED:
                _draw(term, app)


def main(argv: list[str] | None = None) -> int:
    """Run the viewer and return the process exit status."""
    args = parse_args(argv)
    try:
        run(args)
    except (AppCrash, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())