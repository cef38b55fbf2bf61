"""Dense real matrices of up to ten rows and ten columns."""

from __future__ import annotations

import sys
from itertools import chain, islice
from numbers import Real
from typing import Iterable, Iterator

from matrices.vector3d import Vector3D

MAX_SIZE = 10


class MatrixError(ValueError):
    """Raised when a matrix operation cannot be carried out."""


def _check_size(rows: int, cols: int) -> None:
    if rows > MAX_SIZE or cols > MAX_SIZE:
        raise MatrixError(f"matrix of size {rows}x{cols} is too big; limit is {MAX_SIZE}")
    if rows < 1 or cols < 1:
        raise MatrixError(f"matrix of size {rows}x{cols} is too small; it needs at least one row and column")


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


class Matrix:
    """An immutable matrix of floats."""

    __slots__ = ("rows", "cols", "_data")

    def __init__(self, rows: int, cols: int, values: Iterable[float] | None = None) -> None:
        _check_size(rows, cols)
        flat = [0.0] * (rows * cols) if values is None else [float(v) for v in values]
        if len(flat) != rows * cols:
            raise MatrixError(f"a {rows}x{cols} matrix needs {rows * cols} entries, got {len(flat)}")
        entries = iter(flat)
        self.rows = rows
        self.cols = cols
        self._data = tuple(tuple(islice(entries, cols)) for _ in range(rows))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Return a matrix of the given size filled with zeros."""
        return cls(rows, cols)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        table = [list(row) for row in rows]
        if not table:
            raise MatrixError("a matrix needs at least one row")
        width = len(table[0])
        if any(len(row) != width for row in table):
            raise MatrixError("all rows must have the same length")
        return cls(len(table), width, chain.from_iterable(table))

    @classmethod
    def read(cls, rows: int, cols: int, stream: Iterable[str] | None = None) -> Matrix:
        """Read ``rows * cols`` whitespace-separated numbers, row by row."""
        _check_size(rows, cols)
        source = sys.stdin if stream is None else stream
        wanted = rows * cols
        tokens = list(islice(_tokens(source), wanted))
        if len(tokens) < wanted:
            raise MatrixError(f"expected {wanted} entries, got {len(tokens)}")
        try:
            values = [float(token) for token in tokens]
        except ValueError as exc:
            raise MatrixError(f"invalid matrix entry: {exc}") from exc
        return cls(rows, cols, values)

    def format(self) -> str:
        """Return the printable form: a size header and one line per row."""
        header = f"--- Printing matrix of size [{self.rows} x {self.cols}] ---\n"
        body = "".join("".join(f"{value:g} " for value in row) + "\n" for row in self._data)
        return header + body

    def __getitem__(self, key):
        if isinstance(key, tuple):
            row, col = key
            return self._data[row][col]
        return self._data[key]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Matrix.from_rows({[list(row) for row in self._data]!r})"

    def multiply(self, other):
        """Multiply by another matrix, a scalar or a three-dimensional vector."""
        if isinstance(other, Matrix):
            return self._times_matrix(other)
        if isinstance(other, Vector3D):
            return self._times_vector(other)
        if isinstance(other, Real):
            return self._times_scalar(other)
        raise TypeError(f"cannot multiply a matrix by {type(other).__name__}")

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self._times_matrix(other)
        if isinstance(other, Vector3D):
            return self._times_vector(other)
        return NotImplemented

    def __mul__(self, factor):
        if isinstance(factor, Real):
            return self._times_scalar(factor)
        return NotImplemented

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def _times_matrix(self, other: Matrix) -> Matrix:
        if self.cols != other.rows:
            raise MatrixError(
                f"cannot multiply a {self.rows}x{self.cols} matrix by a {other.rows}x{other.cols} matrix"
            )
        columns = list(zip(*other._data))
        return Matrix.from_rows(
            [sum(a * b for a, b in zip(row, column)) for column in columns] for row in self._data
        )

    def _times_scalar(self, factor: float) -> Matrix:
        return Matrix(self.rows, self.cols, (value * factor for row in self._data for value in row))

    def _times_vector(self, vector: Vector3D) -> Vector3D:
        if self.rows != 3 or self.cols != 3:
            raise MatrixError("only a 3x3 matrix can be multiplied with a three-dimensional vector")
        return Vector3D(*(vector.dot(Vector3D(*row)) for row in self._data))

    def sub_matrix(self, row: int, col: int) -> Matrix:
        """Return the matrix with the given row and column removed."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise MatrixError(f"position ({row}, {col}) is outside the matrix")
        if self.rows == 1 or self.cols == 1:
            raise MatrixError("a matrix with a single row or column has no sub-matrix")
        return Matrix.from_rows(
            [value for j, value in enumerate(line) if j != col]
            for i, line in enumerate(self._data)
            if i != row
        )

    def cofactor(self, row: int, col: int) -> float:
        """Return the signed minor of the entry at ``(row, col)``."""
        sign = -1 if (row + col) % 2 else 1
        return sign * self.sub_matrix(row, col).determinant()

    def adjoint(self) -> Matrix:
        """Return the transposed matrix of cofactors."""
        self._require_square("adjoint")
        if self.rows == 1:
            return Matrix(1, 1, [1.0])
        cofactors = Matrix.from_rows(
            [self.cofactor(i, j) for j in range(self.cols)] for i in range(self.rows)
        )
        return cofactors.transpose()

    def transpose(self) -> Matrix:
        """Return the matrix mirrored across its diagonal."""
        return Matrix.from_rows(zip(*self._data))

    def determinant(self) -> float:
        """Return the determinant, expanding along the first row."""
        self._require_square("determinant")
        if self.rows == 1:
            return self._data[0][0]
        if self.rows == 2:
            (a, b), (c, d) = self._data
            return a * d - b * c
        return sum(value * self.cofactor(0, j) for j, value in enumerate(self._data[0]))

    def inverse(self) -> Matrix:
        """Return the inverse as the adjoint divided by the determinant."""
        self._require_square("inverse")
        det = self.determinant()
        if det == 0:
            raise MatrixError("matrix cannot be inverted: determinant is zero")
        return self.adjoint() * (1 / det)

    def _require_square(self, what: str) -> None:
        if self.rows != self.cols:
            raise MatrixError(f"matrix must be square to find its {what}")