from dataclasses import dataclass, field

from matrix import Matrix
from modes import Mode


@dataclass
class Cursor:
    row: int
    column: int
    position: int = 0
    pinned: bool = False


@dataclass(frozen=True)
class Settings:
    column_width_min: int = 3
    column_width_max: int = 20
    header_row_count: int = 0

    def __post_init__(self):
        if self.column_width_min < 1:
            raise ValueError("column width minimum must be at least 1")
        if self.column_width_max < self.column_width_min:
            raise ValueError(
                f"column width maximum ({self.column_width_max}) is below the minimum ({self.column_width_min})"
            )
        if self.header_row_count < 0:
            raise ValueError("header row count cannot be negative")


def _clamp(low, high, value):
    return max(low, min(high, value))


class AppState:
    def __init__(self, matrix: Matrix, settings: Settings | None = None, file_path=None):
        self.matrix = matrix
        self.settings = settings or Settings()
        self.file_path = file_path

        headers = self.settings.header_row_count
        self.view: list[int] = [headers, 0]  # [row, column]
        self.cursors: list[Cursor] = [Cursor(headers, 0)]

        self.mode = Mode.NORMAL
        self.command = ""
        self.status = ""
        self.search_term: str | None = None

        self.undo_stack: list[Matrix] = []
        self.undo_max_depth = 50
        self.insert_snapshot_taken = False

    @property
    def headers(self) -> int:
        return self.settings.header_row_count

    @property
    def data_rows(self) -> int:
        return self.matrix.dimensions()[0]

    @property
    def data_cols(self) -> int:
        return self.matrix.dimensions()[1]

    @property
    def primary_cursor(self) -> Cursor:
        return self.cursors[0]

    # ---------- movement ----------
    def move_view(self, dy: int, dx: int):
        self.view[0] = _clamp(self.headers, self.data_rows - 1, self.view[0] + dy)
        self.view[1] = _clamp(0, self.data_cols - 1, self.view[1] + dx)

    def move_cursors(self, dy: int, dx: int):
        for cursor in self.cursors:
            if cursor.pinned:
                continue
            cell = (cursor.row, cursor.column)
            cursor.row = _clamp(self.headers, self.data_rows - 1, cursor.row + dy)
            cursor.column = _clamp(0, self.data_cols - 1, cursor.column + dx)
            if (cursor.row, cursor.column) != cell:
                cursor.position = 0

    def goto_line(self, line: int):
        self.cursors = [Cursor(line, 0)]

    def clamp_positions(self):
        """Pull view and every cursor back inside the matrix after a shape change."""
        self.move_view(0, 0)
        for cursor in self.cursors:
            cursor.row = _clamp(self.headers, self.data_rows - 1, cursor.row)
            cursor.column = _clamp(0, self.data_cols - 1, cursor.column)
