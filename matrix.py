import math

import numpy as np


class MatrixError(Exception):
    """Base class for matrix contract violations."""


class RankMismatch(MatrixError, ValueError):
    pass


class IndexOutOfRange(MatrixError, IndexError):
    pass


class ShapeMismatch(MatrixError, ValueError):
    pass


class Matrix:
    """Flat-backed N-dimensional storage with row-major addressing.

    ``elements`` always holds exactly ``product(dimensions)`` values. Cells
    introduced by padding or axis insertion are filled with ``default``.
    """

    def __init__(self, elements=None, dimensions=None, default=""):
        self._elements = list(elements or [])
        if dimensions is None:
            dimensions = [len(self._elements)]
        self._dimensions = [int(d) for d in dimensions]
        self.default = default
        if math.prod(self._dimensions) != len(self._elements):
            raise ShapeMismatch(
                f"{len(self._elements)} elements cannot fill shape {self._dimensions}"
            )

    # ---------- construction ----------
    @classmethod
    def from_rows(cls, rows, default=""):
        rows = [list(row) for row in rows]
        max_width = max((len(row) for row in rows), default=1)
        elements = []
        for row in rows:
            elements.extend(row)
            elements.extend([default] * (max_width - len(row)))
        return cls(elements, [len(rows), max_width], default=default)

    @classmethod
    def from_list(cls, elements, default=""):
        return cls(elements, default=default)

    @classmethod
    def from_array(cls, array, default=""):
        array = np.asarray(array, dtype=object)
        return cls(array.ravel(order="C").tolist(), list(array.shape), default=default)

    def to_list(self):
        return list(self._elements)

    def to_array(self):
        return np.array(self._elements, dtype=object).reshape(self._dimensions)

    def copy(self):
        return Matrix(self._elements, self._dimensions, default=self.default)

    # ---------- shape ----------
    def dimensions(self):
        return tuple(self._dimensions)

    @property
    def rank(self):
        return len(self._dimensions)

    def __len__(self):
        return len(self._elements)

    def reshape(self, dimensions):
        dimensions = [int(d) for d in dimensions]
        if math.prod(dimensions) != len(self._elements):
            raise ShapeMismatch(
                f"cannot reshape {len(self._elements)} elements into {dimensions}"
            )
        self._dimensions = dimensions

    def with_shape(self, dimensions):
        self.reshape(dimensions)
        return self

    # ---------- addressing ----------
    def _offset(self, coord):
        coord = tuple(coord) if isinstance(coord, (tuple, list)) else (coord,)
        if len(coord) != len(self._dimensions):
            raise RankMismatch(
                f"coordinate {coord} has rank {len(coord)}, matrix has rank {len(self._dimensions)}"
            )
        offset = 0
        for axis, (length, idx) in enumerate(zip(self._dimensions, coord)):
            if not 0 <= idx < length:
                raise IndexOutOfRange(
                    f"index {idx} out of range for axis {axis} of size {length}"
                )
            offset = offset * length + idx
        return offset

    def get(self, coord):
        return self._elements[self._offset(coord)]

    def set(self, coord, value):
        self._elements[self._offset(coord)] = value

    def __getitem__(self, coord):
        return self.get(coord)

    def __setitem__(self, coord, value):
        self.set(coord, value)

    # ---------- growth ----------
    def insert_axis_slice_default(self, axis):
        """Grow ``axis`` by one, appending a default-filled hyperplane at its end.

        Each combination of the leading axes (those before ``axis``) owns one
        contiguous block of ``dimensions[axis] * extend_size`` elements. The new
        slice lands at the end of every block. Blocks are visited from the last
        to the first, counting the leading coordinates down like a multi-radix
        counter, so a splice never shifts a block that is still to be visited.
        """
        if not 0 <= axis < len(self._dimensions):
            raise IndexOutOfRange(
                f"axis {axis} out of range for matrix of rank {len(self._dimensions)}"
            )
        leading = self._dimensions[:axis]
        run = self._dimensions[axis]
        extend_size = math.prod(self._dimensions[axis + 1 :])

        if extend_size > 0 and all(leading):
            counter = [length - 1 for length in leading]
            while True:
                block = 0
                for length, idx in zip(leading, counter):
                    block = block * length + idx
                end = (block + 1) * run * extend_size
                self._elements[end:end] = [self.default] * extend_size

                digit = len(counter) - 1
                while digit >= 0 and counter[digit] == 0:
                    counter[digit] = leading[digit] - 1
                    digit -= 1
                if digit < 0:
                    break
                counter[digit] -= 1

        self._dimensions[axis] += 1

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._dimensions == other._dimensions and self._elements == other._elements
        )

    def __repr__(self):
        return f"Matrix(dimensions={self._dimensions}, elements={self._elements!r})"
