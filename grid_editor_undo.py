import logging

logger = logging.getLogger(__name__)


class GridEditorUndo:
    """Full-snapshot undo stack for the matrix held by AppState."""

    def __init__(self, state):
        self.state = state

    def push_undo(self):
        self.state.undo_stack.append(self.state.matrix.copy())
        if len(self.state.undo_stack) > self.state.undo_max_depth:
            self.state.undo_stack.pop(0)
        logger.debug("undo snapshot pushed (%d held)", len(self.state.undo_stack))

    def undo(self):
        stack = self.state.undo_stack
        if not stack:
            self.state.status = "Nothing to undo"
            return False
        self.state.matrix = stack.pop()
        self.state.clamp_positions()
        remaining = len(stack)
        self.state.status = f"Undone ({remaining} more)" if remaining else "Undone"
        logger.info("undo restored shape %s", self.state.matrix.dimensions())
        return True
