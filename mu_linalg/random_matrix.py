from typing import Any, Callable
import random

from .errors import InvalidShapeError, NotSquareError
from .linalg import Matrix


class RandomMatrixBuilder:
    regular: bool = False
    singular: bool = False
    num_rows: int | None = None
    num_cols: int | None = None
    dist: Callable[[], Any] | None = None

    @classmethod
    def new(cls, **kwargs) -> "RandomMatrixBuilder":
        builder = cls()
        for key, value in kwargs.items():
            setattr(builder, key, value)
        return builder

    def with_size(self, num_rows: int, num_cols: int) -> "RandomMatrixBuilder":
        self.num_rows = num_rows
        self.num_cols = num_cols
        return self

    def with_dist(self, dist: Callable[[], Any]) -> "RandomMatrixBuilder":
        self.dist = dist
        return self

    def with_regular(self) -> "RandomMatrixBuilder":
        self.regular = True
        return self

    def with_singular(self) -> "RandomMatrixBuilder":
        self.singular = True
        return self

    def is_square(self) -> bool:
        return self.num_rows == self.num_cols

    def assert_requirements(self) -> None:
        if not self.num_rows or not self.num_cols:
            raise InvalidShapeError("Random matrix needs a positive size")
        if self.num_rows < 0 or self.num_cols < 0:
            raise InvalidShapeError("Random matrix needs a positive size")
        if self.regular and self.singular:
            raise ValueError("Cannot ask for a matrix both regular and singular.")
        if (self.regular or self.singular) and not self.is_square():
            raise NotSquareError("Regular or singular matrix must be square.")
        if self.singular and self.num_rows < 2:
            raise ValueError("Singular matrix needs at least two rows.")

    def build_sized(self, num_rows: int, num_cols: int | None = None) -> Matrix:
        self.num_rows = num_rows
        self.num_cols = num_cols if num_cols is not None else num_rows
        return self.build()

    def build(self) -> Matrix:
        self.assert_requirements()
        if self.regular:
            return self.build_regular()
        if self.singular:
            return self.build_singular()
        return self.build_random()

    def _dist(self) -> Callable[[], Any]:
        return self.dist or (lambda: random.randint(-5, 5))

    def build_random(self) -> Matrix:
        dist = self._dist()
        return Matrix(
            [[dist() for _ in range(self.num_cols)] for _ in range(self.num_rows)]
        )

    def build_regular(self) -> Matrix:
        while True:
            val = self.build_random()
            if val.determinant() != 0:
                return val

    def build_singular(self) -> Matrix:
        # last row is the sum of the first two, so the rows are dependent
        val = self.build_random()
        last = self.num_rows - 1
        for j in range(self.num_cols):
            val[last, j] = val[0, j] + val[1 % last, j]
        return val


def raw_gen_rand_matrix(
    rows: int, cols: int, dist: Callable[[], Any] | None = None
) -> Matrix:
    return RandomMatrixBuilder.new().with_size(rows, cols).with_dist(dist).build()


def gen_regular_matrix(N: int, dist: Callable[[], Any] | None = None) -> Matrix:
    return (
        RandomMatrixBuilder.new()
        .with_size(N, N)
        .with_dist(dist)
        .with_regular()
        .build()
    )


def gen_singular_matrix(N: int, dist: Callable[[], Any] | None = None) -> Matrix:
    return (
        RandomMatrixBuilder.new()
        .with_size(N, N)
        .with_dist(dist)
        .with_singular()
        .build()
    )
