"""Pure layout of the bordered grid.

``layout`` turns the editor state and the terminal size into a list of draw
instructions. It reads the matrix but never mutates anything, and every
coordinate it indexes is clamped to the matrix shape beforehand.

Each visible data row takes two terminal rows: its content row and the
separator row below it. The last two terminal rows are kept free, one for
the status line and one as a blank gap above it.
"""
from dataclasses import dataclass

from modes import Mode
from status_bar import modeline, status_text

STATUS_RESERVE = 2

VERTICAL = "│"
HEADER_RULE = ("╞", "═", "╪", "╡")
ROW_RULE = ("├", "─", "┼", "┤")
BOTTOM_RULE = ("└", "─", "┴", "┘")


@dataclass(frozen=True)
class Text:
    y: int
    x: int
    text: str
    bold: bool = False
    reverse: bool = False


@dataclass(frozen=True)
class VLine:
    y: int
    x: int
    length: int
    glyph: str = VERTICAL


@dataclass(frozen=True)
class PlaceCursor:
    y: int
    x: int


def _cell_text(value, limit):
    text = "" if value is None else str(value)
    return text[:limit]


def gutter_width(first_row, rows_to_show):
    """Digits needed for the largest row label on screen (at least one)."""
    largest = first_row + rows_to_show - 1
    return len(str(max(largest, 0)))


def crossed_rule(y, start, end, glyphs, crossings):
    left, middle, cross, right = glyphs
    chars = []
    for ix in range(start, end):
        if ix == start:
            chars.append(left)
        elif ix == end - 1:
            chars.append(right)
        elif ix in crossings:
            chars.append(cross)
        else:
            chars.append(middle)
    return Text(y, start, "".join(chars))


def layout(state, terminal_rows, terminal_cols):
    if terminal_rows < 1 or terminal_cols < 1:
        return []

    matrix = state.matrix
    settings = state.settings
    headers = settings.header_row_count
    width_min = settings.column_width_min
    width_max = settings.column_width_max
    total_rows, total_cols = state.data_rows, state.data_cols
    view_row, view_col = state.view

    out = []
    top = 0 if headers == 0 else headers + 1
    usable_rows = max(0, terminal_rows - STATUS_RESERVE)
    rows_to_show = max(0, min(total_rows - view_row, usable_rows // 2 - headers))
    header_rows = min(headers, total_rows)

    # row numbers
    digits = gutter_width(view_row, rows_to_show)
    for i in range(rows_to_show):
        out.append(Text(top + i * 2, 0, str(view_row + i).rjust(digits)))

    cursor_cells = {(c.row, c.column) for c in state.cursors}

    # columns, left to right, until the terminal is full
    x = digits + 2
    vlines = [x - 1]
    column = max(0, view_col)
    while x < terminal_cols and column < total_cols:
        header_texts = [
            _cell_text(matrix.get((i, column)), width_max) for i in range(header_rows)
        ]
        cell_texts = [
            _cell_text(matrix.get((view_row + i, column)), width_max)
            for i in range(rows_to_show)
        ]
        width = max([width_min] + [len(t) for t in header_texts + cell_texts])
        if x + width + 2 > terminal_cols:
            break

        for i, text in enumerate(header_texts):
            out.append(Text(i, x, text, bold=True))
        for i, text in enumerate(cell_texts):
            under_cursor = (view_row + i, column) in cursor_cells
            out.append(Text(top + i * 2, x, text.ljust(width), reverse=under_cursor))

        x += width + 3
        vlines.append(x - 2)
        column += 1

    # grid lines
    last_row = top + rows_to_show * 2 - 1 if rows_to_show else headers
    if last_row > 0:
        for position in vlines:
            out.append(VLine(0, position, last_row))
    rule_end = x - 1
    crossings = set(vlines)
    if rule_end > vlines[0]:
        if headers > 0:
            out.append(crossed_rule(top - 1, vlines[0], rule_end, HEADER_RULE, crossings))
        for i in range(rows_to_show):
            glyphs = BOTTOM_RULE if i == rows_to_show - 1 else ROW_RULE
            out.append(crossed_rule(top + i * 2 + 1, vlines[0], rule_end, glyphs, crossings))

    # status line
    status_y = terminal_rows - 1
    left = status_text(state)[: max(0, terminal_cols - 1)]
    out.append(Text(status_y, 0, left))
    right = modeline(state)
    right_x = terminal_cols - len(right) - 1
    if right_x < 0:
        right = right[-right_x:]
        right_x = 0
    out.append(Text(status_y, right_x, right))

    if state.mode in (Mode.COMMAND, Mode.SEARCH):
        out.append(PlaceCursor(status_y, min(len(left), terminal_cols - 1)))

    return out
