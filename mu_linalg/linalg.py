import math
from numbers import Real
from typing import Iterator, List, Sequence, Tuple

from .determinant import cofactor_matrix, determinant
from .errors import (
    DivisionByZeroError,
    IndexOutOfBoundsError,
    InvalidShapeError,
    NotSquareError,
    ShapeMismatchError,
    TooSmallError,
)
from .fmt import format_plain_matrix, make_latex_matrix
from .log import log


class Matrix:
    """
    Dense matrix of floats stored as a flat row-major list.

    Element ``(i, j)`` lives at ``data[i * cols + j]``. A matrix always has at
    least one row and one column. Arithmetic returns new matrices; only item
    assignment and the compound operators (``+=``, ``-=``, ``*=``, ``/=``)
    change an existing instance, and the compound operators compute their full
    result before replacing the receiver's storage.
    """

    data: List[float]
    rows: int
    cols: int

    def __init__(self, items: Sequence[Sequence[float]]):
        if not items or not items[0]:
            raise InvalidShapeError("Matrix cannot be empty")
        row_len = len(items[0])
        if not all(len(row) == row_len for row in items):
            raise ShapeMismatchError("All matrix rows must have the same length")

        self.rows = len(items)
        self.cols = row_len
        self.data = [float(item) for row in items for item in row]

    @classmethod
    def _from_flat(cls, rows: int, cols: int, data: List[float]) -> "Matrix":
        res = cls.__new__(cls)
        res.rows = rows
        res.cols = cols
        res.data = data
        return res

    @staticmethod
    def _check_shape(rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidShapeError(
                "Can't create an empty matrix (%s x %s)" % (rows, cols)
            )

    @classmethod
    def filled(cls, rows: int, cols: int, value: float) -> "Matrix":
        cls._check_shape(rows, cols)
        return cls._from_flat(rows, cols, [float(value)] * (rows * cols))

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls.filled(rows, cols, 0.0)

    @classmethod
    def ones(cls, rows: int, cols: int) -> "Matrix":
        return cls.filled(rows, cols, 1.0)

    @classmethod
    def square(cls, size: int) -> "Matrix":
        return cls.zeros(size, size)

    @classmethod
    def eye(cls, size: int) -> "Matrix":
        res = cls.square(size)
        for i in range(size):
            res[i, i] = 1.0
        return res

    @classmethod
    def from_sequence(cls, rows: int, cols: int, values: Sequence[float]) -> "Matrix":
        cls._check_shape(rows, cols)
        if len(values) != rows * cols:
            raise ShapeMismatchError(
                "Data length %s must match matrix size %s x %s"
                % (len(values), rows, cols)
            )
        return cls._from_flat(rows, cols, [float(v) for v in values])

    def copy(self) -> "Matrix":
        return Matrix._from_flat(self.rows, self.cols, list(self.data))

    def __copy__(self) -> "Matrix":
        return self.copy()

    # Indexing

    def _offset(self, i: int, j: int) -> int:
        if not (0 <= i < self.rows and 0 <= j < self.cols):
            raise IndexOutOfBoundsError(
                "Index (%s, %s) out of bounds for a %s x %s matrix"
                % (i, j, self.rows, self.cols)
            )
        return i * self.cols + j

    def get(self, i: int, j: int) -> float:
        return self.data[self._offset(i, j)]

    def set(self, i: int, j: int, value: float) -> None:
        self.data[self._offset(i, j)] = float(value)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Matrix indices must be (row, col) tuples")
        return self.get(*index)

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("Matrix indices must be (row, col) tuples")
        self.set(index[0], index[1], value)

    def get_row(self, i: int) -> List[float]:
        self._offset(i, 0)
        return self.data[i * self.cols : (i + 1) * self.cols]

    def get_col(self, j: int) -> List[float]:
        self._offset(0, j)
        return self.data[j :: self.cols]

    def to_rows(self) -> List[List[float]]:
        return [self.get_row(i) for i in range(self.rows)]

    def inorder_slot_iter(self) -> Iterator[Tuple[int, int]]:
        for i in range(self.rows):
            for j in range(self.cols):
                yield (i, j)

    # Structure

    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def is_square(self) -> bool:
        return self.rows == self.cols

    def _require_square(self, what: str) -> None:
        if self.rows != self.cols:
            raise NotSquareError(
                "%s requires a square matrix, got %s x %s" % (what, self.rows, self.cols)
            )

    def transpose(self) -> "Matrix":
        res = Matrix.zeros(self.cols, self.rows)
        for i, j in self.inorder_slot_iter():
            res[j, i] = self[i, j]
        return res

    def trace(self) -> float:
        self._require_square("Trace")
        total = 0.0
        for i in range(self.rows):
            total += self[i, i]
        return total

    def sub_matrix(self, row: int, col: int) -> "Matrix":
        """Return the minor left after deleting ``row`` and ``col``."""
        if not 0 <= row < self.rows:
            raise IndexOutOfBoundsError("Row index %s out of bounds" % row)
        if not 0 <= col < self.cols:
            raise IndexOutOfBoundsError("Column index %s out of bounds" % col)
        if self.rows <= 1 or self.cols <= 1:
            raise TooSmallError("Matrix must be at least 2x2")

        data = [
            self.data[i * self.cols + j]
            for i in range(self.rows)
            if i != row
            for j in range(self.cols)
            if j != col
        ]
        return Matrix._from_flat(self.rows - 1, self.cols - 1, data)

    # Elementwise and scalar arithmetic

    def _require_same_shape(self, other: "Matrix") -> None:
        if self.rows != other.rows or self.cols != other.cols:
            raise ShapeMismatchError(
                "Matrix dimensions must match: %s x %s vs %s x %s"
                % (self.rows, self.cols, other.rows, other.cols)
            )

    def add(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other)
        return Matrix._from_flat(
            self.rows, self.cols, [a + b for a, b in zip(self.data, other.data)]
        )

    def sub(self, other: "Matrix") -> "Matrix":
        self._require_same_shape(other)
        return Matrix._from_flat(
            self.rows, self.cols, [a - b for a, b in zip(self.data, other.data)]
        )

    def negate(self) -> "Matrix":
        return Matrix._from_flat(self.rows, self.cols, [-a for a in self.data])

    def scale(self, scalar: float) -> "Matrix":
        return Matrix._from_flat(self.rows, self.cols, [a * scalar for a in self.data])

    def divide_by_scalar(self, scalar: float) -> "Matrix":
        if scalar == 0.0:
            raise DivisionByZeroError("Can't divide a matrix by 0")
        return Matrix._from_flat(self.rows, self.cols, [a / scalar for a in self.data])

    # Matrix product

    def multiply(self, other: "Matrix") -> "Matrix":
        if self.cols != other.rows:
            raise ShapeMismatchError(
                "Matrix dimensions not compatible: %s x %s times %s x %s"
                % (self.rows, self.cols, other.rows, other.cols)
            )
        res = Matrix.zeros(self.rows, other.cols)
        for i in range(self.rows):
            for j in range(other.cols):
                acc = 0.0
                for k in range(self.cols):
                    acc += self.data[i * self.cols + k] * other.data[k * other.cols + j]
                res.data[i * other.cols + j] = acc
        return res

    def dot(self, other: "Matrix") -> "Matrix":
        return self.multiply(other)

    def pow(self, n: int) -> "Matrix":
        """Raise to a non-negative integer power by repeated squaring."""
        self._require_square("Matrix power")
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError("Exponent must be an integer, got %r" % (n,))
        if n < 0:
            raise ValueError("Exponent must be non-negative")

        if n == 0:
            return Matrix.eye(self.rows)
        if n == 1:
            return self.copy()

        half = self.pow(n // 2)
        sq = half.multiply(half)
        if n % 2 == 1:
            return sq.multiply(self)
        return sq

    # Determinant engine

    def determinant(self, do_log: bool = False) -> float:
        return determinant(self, do_log=do_log)

    def det(self, do_log: bool = False) -> float:
        return self.determinant(do_log=do_log)

    def cofactor(self, do_log: bool = False) -> "Matrix":
        return cofactor_matrix(self, do_log=do_log)

    def adjugate(self, do_log: bool = False) -> "Matrix":
        self._require_square("Adjugate")
        return self.cofactor(do_log=do_log).transpose()

    class NoSolution:
        def __init__(self):
            pass

        def __repr__(self):
            return "NoSolution()"

        def __str__(self):
            return "No solution"

        def __bool__(self):
            return False

        def __eq__(self, other):
            return isinstance(other, Matrix.NoSolution)

        def __hash__(self):
            return hash(Matrix.NoSolution)

        def cformat(self, arg_of=""):
            return r"\text{No solution}"

    def inverse(self, do_log: bool = False) -> "Matrix | Matrix.NoSolution":
        """
        Returns the inverse as ``adjugate / det``, or Matrix.NoSolution() if singular.
        """
        self._require_square("Inverse")
        det = self.determinant(do_log=do_log)
        if det == 0.0:
            if do_log:
                log(r"\[ \boxed{\text{The matrix is singular: no inverse.}} \]")
            return Matrix.NoSolution()

        res = self.adjugate(do_log=do_log).divide_by_scalar(det)
        if do_log:
            log(r"\textbf{Inverse matrix:} \[ %s \]", res)
        return res

    # Comparison

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape() == other.shape() and self.data == other.data

    __hash__ = None

    def is_close(
        self, other: "Matrix", rel_tol: float = 1e-9, abs_tol: float = 1e-9
    ) -> bool:
        if self.shape() != other.shape():
            return False
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self.data, other.data)
        )

    # Operators

    def __neg__(self) -> "Matrix":
        return self.negate()

    def __add__(self, other) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other) -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other) -> "Matrix":
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other) -> "Matrix":
        if isinstance(other, Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other) -> "Matrix":
        if isinstance(other, Real):
            return self.divide_by_scalar(other)
        return NotImplemented

    def __pow__(self, n) -> "Matrix":
        return self.pow(n)

    def _replace(self, other: "Matrix") -> "Matrix":
        self.rows = other.rows
        self.cols = other.cols
        self.data = other.data
        return self

    def __iadd__(self, other) -> "Matrix":
        res = self.__add__(other)
        if res is NotImplemented:
            return NotImplemented
        return self._replace(res)

    def __isub__(self, other) -> "Matrix":
        res = self.__sub__(other)
        if res is NotImplemented:
            return NotImplemented
        return self._replace(res)

    def __imul__(self, other) -> "Matrix":
        res = self.__mul__(other)
        if res is NotImplemented:
            return NotImplemented
        return self._replace(res)

    def __itruediv__(self, other) -> "Matrix":
        res = self.__truediv__(other)
        if res is NotImplemented:
            return NotImplemented
        return self._replace(res)

    # Rendering

    def __str__(self) -> str:
        return format_plain_matrix(self.rows, self.cols, self.data)

    def __repr__(self) -> str:
        return "Matrix(rows=%s, cols=%s)\n%s" % (self.rows, self.cols, self)

    def cformat(self, arg_of=None) -> str:
        return make_latex_matrix(self.to_rows())
