import curses

ESC = 27
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)

CTRL_N = 14
CTRL_P = 16
CTRL_U = 21
CTRL_W = 23

_NAMED_KEYS = {
    ESC: "Escape",
    9: "Tab",
    10: "Enter",
    13: "Enter",
    127: "Backspace",
    8: "Backspace",
    curses.KEY_BACKSPACE: "Backspace",
    curses.KEY_ENTER: "Enter",
    curses.KEY_UP: "KEY_UP",
    curses.KEY_DOWN: "KEY_DOWN",
    curses.KEY_LEFT: "KEY_LEFT",
    curses.KEY_RIGHT: "KEY_RIGHT",
    curses.KEY_HOME: "KEY_HOME",
    curses.KEY_END: "KEY_END",
    curses.KEY_NPAGE: "KEY_NPAGE",
    curses.KEY_PPAGE: "KEY_PPAGE",
    curses.KEY_DC: "KEY_DC",
    curses.KEY_IC: "KEY_IC",
}


def is_graphic(ch: int) -> bool:
    """True for printable, non-space ASCII characters."""
    # getch() hands over multi-byte input one byte at a time
    return 33 <= ch <= 126


def describe_key(ch: int) -> str:
    if ch in _NAMED_KEYS:
        return _NAMED_KEYS[ch]
    if is_graphic(ch) or ch == 32:
        return repr(chr(ch))
    if 0 < ch < 32:
        return f"Ctrl+{chr(ch + 64)}"
    return f"key {ch}"
