import curses
import logging

import keys
from command_executor import CommandExecutor
from command_pane import CommandPane
from grid_editor_undo import GridEditorUndo
from matrix import MatrixError
from modes import Mode

logger = logging.getLogger(__name__)

EFFECT_QUIT = "quit"
EFFECT_RESIZE = "resize"

_MOVES = {
    ord("h"): (0, -1),
    ord("j"): (1, 0),
    ord("k"): (-1, 0),
    ord("l"): (0, 1),
}


class GridEditor:
    """Modal key dispatch. Each handler mutates ``state`` and returns effects."""

    def __init__(self, state, history_mgr=None):
        self.state = state
        self.undo = GridEditorUndo(state)
        self.command = CommandPane(state)
        self.exec = CommandExecutor(state, self.undo)
        self.history_mgr = history_mgr
        if history_mgr is not None:
            self.command.set_history(history_mgr.items)

    # ---------- public entrypoint ----------
    def handle_key(self, ch: int) -> list[str]:
        if ch == curses.KEY_RESIZE:
            return [EFFECT_RESIZE]
        if ch == curses.KEY_MOUSE:
            return []

        mode = self.state.mode
        if mode == Mode.VIEW:
            return self._handle_view(ch)
        if mode == Mode.INSERT:
            return self._handle_insert(ch)
        if mode == Mode.COMMAND:
            return self._handle_command(ch)
        if mode == Mode.SEARCH:
            return self._handle_search(ch)
        return self._handle_normal(ch)

    # ---------- shared ----------
    def _enter_command_line(self, mode):
        self.command.reset()
        self.state.mode = mode

    def _enter_mode_from_normal(self, ch) -> bool:
        if ch == ord(":"):
            self._enter_command_line(Mode.COMMAND)
        elif ch == ord("/"):
            self._enter_command_line(Mode.SEARCH)
        else:
            return False
        return True

    # ---------- normal ----------
    def _handle_normal(self, ch):
        self.state.status = ""
        if self._enter_mode_from_normal(ch):
            return []
        if ch == ord("i"):
            self.state.mode = Mode.INSERT
            self.state.insert_snapshot_taken = False
        elif ch == ord("v"):
            self.state.mode = Mode.VIEW
        elif ch in _MOVES:
            self.state.move_cursors(*_MOVES[ch])
        else:
            self.state.status = f"received {keys.describe_key(ch)}"
        return []

    # ---------- view ----------
    def _handle_view(self, ch):
        self.state.status = ""
        if self._enter_mode_from_normal(ch):
            return []
        if ch == keys.ESC:
            self.state.mode = Mode.NORMAL
        elif ch in _MOVES:
            self.state.move_view(*_MOVES[ch])
        return []

    # ---------- insert ----------
    def _handle_insert(self, ch):
        self.state.status = ""
        if ch == keys.ESC:
            self.state.mode = Mode.NORMAL
        elif keys.is_graphic(ch):
            self._write_char(chr(ch))
        return []

    def _write_char(self, char):
        cursor = self.state.primary_cursor
        coord = (cursor.row, cursor.column)
        try:
            text = self.state.matrix.get(coord)
        except MatrixError as exc:
            self.state.status = f"cannot edit cell: {exc}"
            return
        if not self.state.insert_snapshot_taken:
            self.undo.push_undo()
            self.state.insert_snapshot_taken = True
        text = "" if text is None else str(text)
        at = min(cursor.position, len(text))
        self.state.matrix.set(coord, text[:at] + char + text[at:])
        cursor.position = at + 1

    # ---------- command / search ----------
    def _handle_command(self, ch):
        result = self.command.handle_key(ch)
        if result == "cancel":
            self.state.mode = Mode.NORMAL
        elif result == "submit":
            text = self.command.take_buffer()
            self.state.mode = Mode.NORMAL
            quit_requested = self.exec.execute(text)
            if self.exec._last_success and self.history_mgr is not None:
                entry = text.strip()
                self.history_mgr.append(entry)
                self.history_mgr.persist(entry)
                self.command.set_history(self.history_mgr.items)
            if quit_requested:
                return [EFFECT_QUIT]
        return []

    def _handle_search(self, ch):
        result = self.command.handle_key(ch, with_history=False)
        if result == "cancel":
            self.state.mode = Mode.NORMAL
        elif result == "submit":
            self.state.search_term = self.command.take_buffer()
            self.state.mode = Mode.NORMAL
            logger.debug("search term set to %r", self.state.search_term)
        return []
