from modes import Mode


def status_text(state):
    """Left side of the status line: the command/search prompt or the status message."""
    if state.mode == Mode.COMMAND:
        return f":{state.command}"
    if state.mode == Mode.SEARCH:
        return f"?{state.command}"
    return state.status


def modeline(state):
    cursor = state.primary_cursor
    return (
        f"{state.mode} Mode. "
        f"{cursor.row - state.headers}:{cursor.column}/"
        f"{state.data_rows - state.headers}:{state.data_cols}. "
        f"{len(state.cursors)} cursors."
    )
