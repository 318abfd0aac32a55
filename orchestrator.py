import curses
import logging

from grid_editor import EFFECT_QUIT, EFFECT_RESIZE, GridEditor
from grid_layout import layout
from grid_pane import GridPane

logger = logging.getLogger(__name__)


class Orchestrator:
    """Blocking read-dispatch-render loop around one AppState."""

    def __init__(self, stdscr, app_state, history_mgr=None):
        self.stdscr = stdscr
        self.stdscr.keypad(True)
        self.stdscr.nodelay(False)
        try:
            curses.raw()
            curses.noecho()
            curses.mousemask(curses.ALL_MOUSE_EVENTS)
        except curses.error:
            pass

        self.state = app_state
        self.grid = GridPane()
        self.editor = GridEditor(app_state, history_mgr=history_mgr)

    # ---------------- UI ----------------

    def redraw(self):
        h, w = self.stdscr.getmaxyx()
        self.grid.draw(self.stdscr, layout(self.state, h, w))

    def _resize(self):
        try:
            curses.resize_term(0, 0)
        except curses.error:
            pass
        logger.debug("terminal resized to %s", self.stdscr.getmaxyx())

    def _consume_mouse(self):
        try:
            curses.getmouse()
        except curses.error:
            pass

    # ---------------- main loop ----------------

    def step(self, ch):
        """Dispatch one key; returns False once the session should end."""
        if ch == curses.KEY_MOUSE:
            self._consume_mouse()
        for effect in self.editor.handle_key(ch):
            if effect == EFFECT_QUIT:
                return False
            if effect == EFFECT_RESIZE:
                self._resize()
        return True

    def run(self):
        self.stdscr.clear()
        while True:
            self.redraw()
            ch = self.stdscr.getch()
            if ch == -1:
                continue
            if not self.step(ch):
                break
        logger.info("session ended")
