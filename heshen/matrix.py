"""Small dense vectors and matrices used by the renderer."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Optional, Union

Number = Union[int, float]


class Vector:
    """A fixed-size vector of floats with element-wise arithmetic."""

    __slots__ = ("_data",)

    def __init__(self, *components: Number) -> None:
        self._data = [float(c) for c in components]

    @classmethod
    def zeros(cls, size: int) -> Vector:
        """Return a vector of ``size`` zeros."""
        if size < 0:
            raise ValueError("vector size must not be negative")
        return cls(*([0.0] * size))

    def copy(self) -> Vector:
        return Vector(*self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __getitem__(self, index: int) -> float:
        return self._data[index]

    def __setitem__(self, index: int, value: Number) -> None:
        self._data[index] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({', '.join(repr(c) for c in self._data)})"

    def _checked(self, other: Vector) -> Vector:
        if len(other) != len(self):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )
        return other

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._checked(other)
        return Vector(*(a + b for a, b in zip(self._data, other._data)))

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._checked(other)
        return Vector(*(a - b for a, b in zip(self._data, other._data)))

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(*(a * scalar for a in self._data))

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(*(a / scalar for a in self._data))

    def __neg__(self) -> Vector:
        return Vector(*(-a for a in self._data))

    def __iadd__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._checked(other)
        self._data = [a + b for a, b in zip(self._data, other._data)]
        return self

    def __isub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._checked(other)
        self._data = [a - b for a, b in zip(self._data, other._data)]
        return self

    def __imul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self._data = [a * scalar for a in self._data]
        return self

    def __itruediv__(self, scalar: object) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self._data = [a / scalar for a in self._data]
        return self

    def dot(self, other: Vector) -> float:
        """Return the scalar product with ``other``."""
        self._checked(other)
        return sum(a * b for a, b in zip(self._data, other._data))

    def cross(self, other: Vector) -> Vector:
        """Return the cross product; both vectors must have three components."""
        if len(self) != 3 or len(other) != 3:
            raise ValueError("cross product is only defined for 3D vectors")
        a0, a1, a2 = self._data
        b0, b1, b2 = other._data
        return Vector(a1 * b2 - a2 * b1, a2 * b0 - a0 * b2, a0 * b1 - a1 * b0)

    def normalize(self) -> Vector:
        """Return a unit-length copy; a zero vector comes back unchanged."""
        length = self.length()
        if length > 0:
            return Vector(*(a / length for a in self._data))
        return self.copy()

    def length(self) -> float:
        return math.sqrt(sum(a * a for a in self._data))

    def is_zero(self) -> bool:
        return all(a == 0 for a in self._data)


class Matrix:
    """A dense ``rows`` x ``cols`` matrix of floats, zero-initialised."""

    __slots__ = ("_rows",)

    def __init__(self, rows: int = 4, cols: int = 4) -> None:
        if rows < 1 or cols < 1:
            raise ValueError("matrix dimensions must be positive")
        self._rows = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Number]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(v) for v in row] for row in rows]
        if not data or not data[0]:
            raise ValueError("matrix must have at least one row and column")
        if any(len(row) != len(data[0]) for row in data):
            raise ValueError("matrix rows must have equal length")
        result = cls(len(data), len(data[0]))
        result._rows = data
        return result

    @classmethod
    def identity(cls, rows: int = 4, cols: Optional[int] = None) -> Matrix:
        """Return a matrix with ones on the main diagonal."""
        result = cls(rows, rows if cols is None else cols)
        for i in range(min(result.rows, result.cols)):
            result._rows[i][i] = 1.0
        return result

    @property
    def rows(self) -> int:
        return len(self._rows)

    @property
    def cols(self) -> int:
        return len(self._rows[0])

    def copy(self) -> Matrix:
        return Matrix.from_rows(self._rows)

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._rows[row][col]
        return self._rows[index]

    def __setitem__(self, index: tuple[int, int], value: Number) -> None:
        row, col = index
        self._rows[row][col] = float(value)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return (tuple(row) for row in self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._rows!r})"

    @staticmethod
    def _with_tail(
        values: list[float], size: int, tail: Optional[Number], keep: float
    ) -> list[float]:
        if len(values) == size:
            if tail is not None:
                raise ValueError("tail given for a full-length vector")
            return values
        if len(values) == size - 1:
            return values + [float(tail) if tail is not None else keep]
        raise ValueError(f"expected a vector of {size} or {size - 1} components")

    def set_row(self, row: int, vector: Vector, tail: Optional[Number] = None) -> None:
        """Set a row from a full vector, or one short of it plus an optional tail.

        With a short vector and no tail the last element keeps its value.
        """
        current = self._rows[row]
        self._rows[row] = self._with_tail(list(vector), self.cols, tail, current[-1])

    def set_column(
        self, col: int, vector: Vector, tail: Optional[Number] = None
    ) -> None:
        """Set a column; same rules as :meth:`set_row`."""
        keep = self._rows[-1][col]
        values = self._with_tail(list(vector), self.rows, tail, keep)
        for row, value in zip(self._rows, values):
            row[col] = value

    def _check_shape(self, other: Matrix) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("matrix shapes differ")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other)
        return Matrix.from_rows(
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)
        )

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other)
        return Matrix.from_rows(
            [a - b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)
        )

    def __iadd__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_shape(other)
        self._rows = [
            [a + b for a, b in zip(ra, rb)] for ra, rb in zip(self._rows, other._rows)
        ]
        return self

    def __mul__(self, scalar: object) -> Matrix:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Matrix.from_rows([a * scalar for a in row] for row in self._rows)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> Matrix:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Matrix.from_rows([a / scalar for a in row] for row in self._rows)

    def __neg__(self) -> Matrix:
        return Matrix.from_rows([-a for a in row] for row in self._rows)

    def __matmul__(self, other: object):
        if isinstance(other, Vector):
            if len(other) != self.cols:
                raise ValueError("vector size does not match matrix columns")
            return Vector(*(sum(a * b for a, b in zip(row, other)) for row in self._rows))
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise ValueError("inner matrix dimensions differ")
            columns = list(zip(*other._rows))
            return Matrix.from_rows(
                [sum(a * b for a, b in zip(row, col)) for col in columns]
                for row in self._rows
            )
        return NotImplemented