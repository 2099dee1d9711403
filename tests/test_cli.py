import queue
from pathlib import Path

import pytest
from blessed.keyboard import Keystroke

from datui.app import App
from datui.cli import (
    AppCrash,
    _key_event,
    _Outcome,
    _pump,
    main,
    open_options_from_args,
    parse_args,
)
from datui.events import Collect, Exit, Key, KeyEvent, Open
from datui.options import OpenOptions


def test_parse_args_defaults():
    args = parse_args(["data.csv"])
    assert args.path == Path("data.csv")
    assert args.skip_lines is None
    assert args.skip_rows is None
    assert args.no_header is None
    assert args.delimiter is None
    assert args.debug is False


def test_parse_args_all_options():
    args = parse_args(
        ["data.csv", "--skip-lines", "2", "--skip-rows", "1",
         "--no-header", "true", "--delimiter", "59", "--debug"]
    )
    assert (args.skip_lines, args.skip_rows, args.no_header, args.delimiter, args.debug) == (
        2, 1, True, 59, True
    )


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["data.csv", "--no-header", "maybe"],
        ["data.csv", "--delimiter", "300"],
        ["data.csv", "--delimiter", "x"],
        ["data.csv", "--skip-lines", "-1"],
        ["data.csv", "--skip-rows", "many"],
    ],
)
def test_parse_args_rejects_bad_input(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 2


def test_options_default_when_nothing_given():
    assert open_options_from_args(parse_args(["data.csv"])) == OpenOptions()


def test_options_from_all_arguments():
    args = parse_args(
        ["data.csv", "--skip-lines", "3", "--skip-rows", "4", "--no-header", "true", "--delimiter", "59"]
    )
    options = open_options_from_args(args)
    assert options.skip_lines == 3
    assert options.skip_rows == 4
    assert options.has_header is False
    assert options.delimiter == chr(59)


def test_no_header_false_keeps_header():
    options = open_options_from_args(parse_args(["data.csv", "--no-header", "false"]))
    assert options.has_header is True


def test_key_event_plain_character():
    assert _key_event(Keystroke("l")) == KeyEvent("l")


def test_key_event_arrow_sequence():
    assert _key_event(Keystroke("\x1b[C", code=261, name="KEY_RIGHT")) == KeyEvent("Right")


def test_key_event_page_down_sequence():
    assert _key_event(Keystroke("\x1b[6~", code=338, name="KEY_NPAGE")) == KeyEvent("PageDown")


def test_key_event_escape_and_tab_characters():
    assert _key_event(Keystroke("\x1b")) == KeyEvent("Esc")
    assert _key_event(Keystroke("\t")) == KeyEvent("Tab")


def test_key_event_empty_keystroke():
    assert _key_event(Keystroke("")) is None


def test_pump_idle_on_empty_queue():
    events = queue.Queue()
    assert _pump(App(events), events) is _Outcome.IDLE


def test_pump_stops_on_exit_and_escape():
    events = queue.Queue()
    app = App(events)
    events.put(Exit())
    assert _pump(app, events) is _Outcome.STOP
    events.put(Key(KeyEvent("Esc")))
    assert _pump(app, events) is _Outcome.STOP


def test_pump_q_key_queues_exit():
    events = queue.Queue()
    app = App(events)
    events.put(Key(KeyEvent("q")))
    assert _pump(app, events) is _Outcome.UPDATED
    assert events.get_nowait() == Exit()


def test_pump_open_then_collect(tmp_path):
    path = tmp_path / "data.csv"
    path.write_text("a,b\n1,2\n3,4\n", encoding="utf-8")
    events = queue.Queue()
    app = App(events)
    events.put(Open(path, OpenOptions()))
    assert _pump(app, events) is _Outcome.UPDATED
    assert events.get_nowait() == Collect()
    events.put(Collect())
    assert _pump(app, events) is _Outcome.UPDATED
    assert app.data_table_state.num_rows == 2
    assert events.empty()


def test_pump_raises_on_crash(tmp_path):
    events = queue.Queue()
    app = App(events)
    events.put(Open(tmp_path / "data.xyz", OpenOptions()))
    assert _pump(app, events) is _Outcome.UPDATED
    with pytest.raises(AppCrash, match="Unsupported file type"):
        _pump(app, events)


def test_main_bad_arguments_exit_with_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["data.csv", "--delimiter", "999"])
    assert info.value.code == 2