class LinalgError(ValueError):
    """Base class for every precondition violation raised by mu_linalg."""


class InvalidShapeError(LinalgError):
    """A matrix with zero rows or zero columns was requested."""


class ShapeMismatchError(LinalgError):
    """Operand dimensions are incompatible for the requested operation."""


class NotSquareError(LinalgError):
    """A square-only operation was invoked on a non-square matrix."""


class IndexOutOfBoundsError(LinalgError, IndexError):
    """Row or column index outside of the matrix."""


class TooSmallError(LinalgError):
    """Sub-matrix extraction on a matrix with a single row or column."""


class DivisionByZeroError(LinalgError, ZeroDivisionError):
    """Division by a zero scalar or by the zero complex number."""
