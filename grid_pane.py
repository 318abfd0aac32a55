import curses
import logging

from grid_layout import PlaceCursor, Text, VLine

logger = logging.getLogger(__name__)


class GridPane:
    """Applies layout instructions to a curses window."""

    def __init__(self):
        try:
            curses.use_default_colors()
        except curses.error:
            pass

    @staticmethod
    def _put(win, y, x, text, attr=0):
        h, w = win.getmaxyx()
        if not (0 <= y < h and 0 <= x < w) or not text:
            return
        try:
            win.addnstr(y, x, text, w - x, attr)
        except curses.error:
            # the bottom-right cell raises after a successful write
            logger.debug("curses.error in addnstr at (%d,%d): %r", y, x, text)

    def draw(self, win, instructions):
        win.erase()
        cursor_at = None
        for item in instructions:
            if isinstance(item, Text):
                attr = 0
                if item.bold:
                    attr |= curses.A_BOLD
                if item.reverse:
                    attr |= curses.A_REVERSE
                self._put(win, item.y, item.x, item.text, attr)
            elif isinstance(item, VLine):
                for dy in range(item.length):
                    self._put(win, item.y + dy, item.x, item.glyph)
            elif isinstance(item, PlaceCursor):
                cursor_at = (item.y, item.x)

        try:
            curses.curs_set(1 if cursor_at else 0)
            if cursor_at:
                win.move(*cursor_at)
        except curses.error:
            pass
        win.refresh()
