import csv
import logging
import os
from dataclasses import dataclass

import numpy as np
import pandas as pd

from matrix import Matrix

logger = logging.getLogger(__name__)


class LoadError(Exception):
    pass


@dataclass
class ParseOptions:
    separator: str = ","
    terminator: str | None = None  # None accepts \r, \n and \r\n
    comment: str | None = None
    quote: str = '"'
    ignore_quotes: bool = False
    ignore_double_quote: bool = False
    escape: str | None = None
    trim: str = "none"  # none | headers | fields | all
    headers: int = 0


class FileTypeHandler:
    FRAME_EXTENSIONS = {".xlsx", ".parquet"}

    def __init__(self, path: str, options: ParseOptions | None = None):
        self.path = path
        self.options = options or ParseOptions()
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

    @property
    def default_headers(self) -> int | None:
        """Frame formats carry their column names as one header row."""
        return 1 if self.ext in self.FRAME_EXTENSIONS else None

    def load(self) -> Matrix:
        if not os.path.exists(self.path):
            raise LoadError(f"No such file: {self.path}")
        if self.ext == ".xlsx":
            matrix = self._load_frame(self._read_excel)
        elif self.ext == ".parquet":
            matrix = self._load_frame(self._read_parquet)
        else:
            matrix = Matrix.from_rows(self.read_rows())
        logger.info("loaded %s with shape %s", self.path, matrix.dimensions())
        return matrix

    # ---------- delimited text ----------
    def _records(self, f):
        if self.options.terminator is None:
            records = iter(f)
        else:
            text = f.read()
            records = text.split(self.options.terminator)
            if records and records[-1] == "":
                records.pop()
        comment = self.options.comment
        for record in records:
            if comment is not None and record.startswith(comment):
                continue
            yield record

    def _trim_row(self, row, is_header):
        policy = self.options.trim
        if policy == "all" or (policy == "headers" and is_header) or (
            policy == "fields" and not is_header
        ):
            return [field.strip() for field in row]
        return row

    def read_rows(self) -> list[list[str]]:
        opts = self.options
        reader_kwargs = {
            "delimiter": opts.separator,
            "quotechar": opts.quote,
            "escapechar": opts.escape,
            "doublequote": not opts.ignore_double_quote,
            "quoting": csv.QUOTE_NONE if opts.ignore_quotes else csv.QUOTE_MINIMAL,
        }
        rows = []
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                for row in csv.reader(self._records(f), **reader_kwargs):
                    if not row:
                        continue
                    rows.append(self._trim_row(row, len(rows) < opts.headers))
        except (OSError, UnicodeDecodeError, csv.Error, TypeError) as exc:
            raise LoadError(f"Could not parse {self.path}: {exc}") from exc
        return rows

    # ---------- frames ----------
    def _load_frame(self, reader) -> Matrix:
        frame = reader()
        frame = frame.astype(object).where(frame.notna(), "").astype(str)
        header = np.array([str(c) for c in frame.columns], dtype=object)
        grid = np.vstack([header.reshape(1, -1), frame.to_numpy(dtype=object)])
        return Matrix.from_array(grid)

    def _read_excel(self) -> pd.DataFrame:
        self._ensure_engine("openpyxl", "XLSX")
        try:
            return pd.read_excel(self.path, sheet_name=0)
        except Exception as exc:
            raise LoadError(f"Could not read {self.path}: {exc}") from exc

    def _read_parquet(self) -> pd.DataFrame:
        self._ensure_engine("pyarrow", "Parquet")
        try:
            return pd.read_parquet(self.path)
        except Exception as exc:
            raise LoadError(f"Could not read {self.path}: {exc}") from exc

    @staticmethod
    def _ensure_engine(module, label):
        try:
            __import__(module)
        except ImportError:
            raise LoadError(
                f"{label} support requires {module}. Install via: pip install {module}"
            ) from None
