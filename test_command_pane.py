import curses
from types import SimpleNamespace

import pytest

from command_pane import CommandPane


def _pane(text=""):
    state = SimpleNamespace(command=text)
    return CommandPane(state), state


def _feed(pane, keys):
    results = []
    for k in keys:
        results.append(pane.handle_key(ord(k) if isinstance(k, str) else k))
    return results


def test_printable_characters_append():
    pane, state = _pane()
    _feed(pane, ["g", "o", "1"])
    assert state.command == "go1"


def test_space_is_not_appended():
    pane, state = _pane("ab")
    _feed(pane, [" "])
    assert state.command == "ab"


def test_backspace_on_empty_buffer_is_noop():
    pane, state = _pane()
    assert _feed(pane, [curses.KEY_BACKSPACE]) == [None]
    assert state.command == ""


def test_enter_submits_without_clearing():
    pane, state = _pane("quit")
    assert _feed(pane, [13]) == ["submit"]
    assert state.command == "quit"
    assert pane.take_buffer() == "quit"
    assert state.command == ""


def test_escape_cancels_immediately():
    pane, state = _pane("something")
    assert pane.handle_key(27) == "cancel"
    assert state.command == ""


def test_ctrl_w_deletes_last_word():
    pane, state = _pane("foo,bar")
    _feed(pane, [23])
    assert state.command == "foo,"
    _feed(pane, [23])
    assert state.command == "foo"


def test_ctrl_u_clears():
    pane, state = _pane("abc")
    _feed(pane, [21])
    assert state.command == ""


def test_history_navigation():
    pane, state = _pane()
    pane.set_history(["addrow", "undo"])
    _feed(pane, [16])  # Ctrl+P
    assert state.command == "undo"
    _feed(pane, [curses.KEY_UP, curses.KEY_UP])
    assert state.command == "addrow"
    _feed(pane, [14])  # Ctrl+N
    assert state.command == "undo"
    _feed(pane, [curses.KEY_DOWN])
    assert state.command == ""


def test_history_disabled_for_search():
    pane, state = _pane()
    pane.set_history(["addrow"])
    pane.handle_key(curses.KEY_UP, with_history=False)
    assert state.command == ""


@pytest.mark.parametrize("ch", [128, 0xB2, 0xC3, 0xE9, 255])
@pytest.mark.parametrize("with_history", [True, False])
def test_high_bytes_are_not_appended(ch, with_history):
    pane, state = _pane("ab")
    assert pane.handle_key(ch, with_history=with_history) is None
    assert state.command == "ab"
