import curses

import keys


class CommandPane:
    """Edits the command/search buffer held in ``state.command``."""

    def __init__(self, state):
        self.state = state
        self.history = []
        self.history_idx = None  # None means not navigating history

    # ---------- state helpers ----------
    def reset(self):
        self.state.command = ""
        self.history_idx = None

    def take_buffer(self):
        text = self.state.command
        self.reset()
        return text

    def set_history(self, entries):
        self.history = list(entries or [])
        self.history_idx = None

    def _apply_history(self):
        if self.history_idx is not None and 0 <= self.history_idx < len(self.history):
            self.state.command = self.history[self.history_idx]
        else:
            self.history_idx = None
            self.state.command = ""

    def _history_back(self):
        if not self.history:
            return
        if self.history_idx is None:
            self.history_idx = len(self.history) - 1
        else:
            self.history_idx = max(0, self.history_idx - 1)
        self._apply_history()

    def _history_forward(self):
        if self.history_idx is None:
            return
        self.history_idx += 1
        self._apply_history()

    # ---------- input handling ----------
    def handle_key(self, ch, with_history=True):
        """Returns "submit", "cancel" or None."""
        if ch in keys.ENTER_KEYS:
            return "submit"

        if ch == keys.ESC:
            self.reset()
            return "cancel"

        if ch in keys.BACKSPACE_KEYS:
            self.state.command = self.state.command[:-1]
            self.history_idx = None
            return None

        if ch == keys.CTRL_U:
            self.state.command = ""
            self.history_idx = None
            return None

        if ch == keys.CTRL_W:
            text = self.state.command.rstrip()
            while text and (text[-1].isalnum() or text[-1] == "_"):
                text = text[:-1]
            if text == self.state.command.rstrip() and text:
                text = text[:-1]
            self.state.command = text
            self.history_idx = None
            return None

        if with_history and ch in (keys.CTRL_P, curses.KEY_UP):
            self._history_back()
            return None

        if with_history and ch in (keys.CTRL_N, curses.KEY_DOWN):
            self._history_forward()
            return None

        if keys.is_graphic(ch):
            self.state.command += chr(ch)
            self.history_idx = None
            return None

        return None
