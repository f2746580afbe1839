from .linalg import Matrix
from .complex import Complex
from .determinant import determinant, cofactor_matrix
from .random_matrix import (
    RandomMatrixBuilder,
    raw_gen_rand_matrix,
    gen_regular_matrix,
    gen_singular_matrix,
)

from .errors import (
    LinalgError,
    InvalidShapeError,
    ShapeMismatchError,
    NotSquareError,
    IndexOutOfBoundsError,
    TooSmallError,
    DivisionByZeroError,
)

from .fmt import cformat, pcformat, format_real, make_latex_matrix

from .log import (
    log,
    nest_logger,
    nest_appending_logger,
    ignore_log,
    capture_logs,
    set_auto_print,
)

__all__ = [
    "Matrix",
    "Complex",
    "determinant",
    "cofactor_matrix",
    "RandomMatrixBuilder",
    "raw_gen_rand_matrix",
    "gen_regular_matrix",
    "gen_singular_matrix",
    "LinalgError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "NotSquareError",
    "IndexOutOfBoundsError",
    "TooSmallError",
    "DivisionByZeroError",
    "cformat",
    "pcformat",
    "format_real",
    "make_latex_matrix",
    "log",
    "nest_logger",
    "nest_appending_logger",
    "ignore_log",
    "capture_logs",
    "set_auto_print",
]
