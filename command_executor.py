import logging

from matrix import MatrixError

logger = logging.getLogger(__name__)


class CommandExecutor:
    """Runs committed ``:`` command lines against the editor state.

    Commands may be abbreviated to any unambiguous prefix; a bare number
    jumps to that row.
    """

    COMMANDS = ("quit", "undo", "addrow", "addcol")

    def __init__(self, state, undo):
        self.state = state
        self.undo = undo
        self._last_success = False

    def resolve(self, name):
        if not name:
            return []
        if name in self.COMMANDS:
            return [name]
        return [cmd for cmd in self.COMMANDS if cmd.startswith(name)]

    def execute(self, text):
        """Returns True when the session should terminate."""
        self._last_success = False
        code = text.strip()
        if code.isascii() and code.isdigit():
            self._goto_row(int(code))
            self._last_success = True
            return False

        matches = self.resolve(code)
        if not matches:
            self.state.status = f"unknown command '{code}'"
            logger.info("unknown command %r", code)
            return False
        if len(matches) > 1:
            self.state.status = f"ambiguous command '{code}'"
            return False

        command = matches[0]
        logger.info("command %s", command)
        self._last_success = True
        if command == "quit":
            return True
        if command == "undo":
            self.undo.undo()
        elif command == "addrow":
            self._insert_slice(0, "row")
        elif command == "addcol":
            self._insert_slice(1, "column")
        return False

    def _goto_row(self, row):
        last = max(self.state.headers, self.state.data_rows - 1)
        row = max(self.state.headers, min(last, row))
        self.state.goto_line(row)
        self.state.move_view(row - self.state.view[0], 0)

    def _insert_slice(self, axis, label):
        self.undo.push_undo()
        try:
            self.state.matrix.insert_axis_slice_default(axis)
        except MatrixError as exc:
            self.state.undo_stack.pop()
            self.state.status = f"cannot add {label}: {exc}"
            self._last_success = False
            return
        size = self.state.matrix.dimensions()[axis]
        self.state.status = f"Added {label} {size - 1}"
