"""
Determinant and cofactor computation by Laplace expansion.

The expansion runs along the first row and recurses into minors until a 2x2
or 1x1 base case is reached. This is O(n!) in the matrix size: there is no
elimination shortcut, which keeps the sign conventions and the numeric result
identical to the textbook definition. Use it for small matrices only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import NotSquareError
from .fmt import cformat
from .log import log

if TYPE_CHECKING:
    from .linalg import Matrix


def _expand(matrix: "Matrix", do_log: bool) -> float:
    """Laplace expansion along row 0 of a matrix already known to be square."""
    n = matrix.rows

    if n == 1:
        # 1x1 determinants are trivial, not worth a log line
        return matrix[0, 0]

    if n == 2:
        a = matrix[0, 0]
        b = matrix[0, 1]
        c = matrix[1, 0]
        d = matrix[1, 1]
        result = a * d - b * c
        if do_log:
            log(
                r"$$ \det%s = %s \cdot %s - %s \cdot %s = %s $$",
                matrix,
                cformat(a, arg_of="*"),
                cformat(d, arg_of="*"),
                cformat(b, arg_of="*"),
                cformat(c, arg_of="*"),
                result,
            )
        return result

    if do_log:
        log(r"Laplace expansion along row 1: $$ \det%s $$", matrix)

    det = 0.0
    term_strs = []
    for i in range(n):
        sign = 1.0 if i % 2 == 0 else -1.0
        element = matrix[0, i]
        minor = matrix.sub_matrix(0, i)
        minor_det = _expand(minor, do_log)
        term = sign * element * minor_det
        det += term

        if do_log:
            log(
                r"$$ (-1)^{1+%s} \cdot a_{1,%s} \cdot M_{1,%s} = %s \cdot %s \cdot %s = %s $$",
                i + 1,
                i + 1,
                i + 1,
                "+" if sign > 0 else "-",
                cformat(element, arg_of="*"),
                cformat(minor_det, arg_of="*"),
                term,
            )
            term_strs.append(cformat(term, arg_of="+"))

    if do_log:
        log(r"$$ \det = %s = %s $$", " + ".join(term_strs), det)

    return det


def determinant(matrix: "Matrix", do_log: bool = False) -> float:
    """
    Compute the determinant of a square matrix by cofactor expansion.

    Args:
        matrix: The matrix to compute the determinant of.
        do_log: Whether to log computation steps.

    Returns:
        The determinant value.

    Raises:
        NotSquareError: If the matrix is not square.
    """
    if matrix.rows != matrix.cols:
        raise NotSquareError("Determinant requires a square matrix")

    return _expand(matrix, do_log)


def cofactor_matrix(matrix: "Matrix", do_log: bool = False) -> "Matrix":
    """
    Build the matrix of signed minors, ``C[i, j] = (-1)^(i+j) * det(M_ij)``.

    Every entry reads only from ``matrix`` and writes only its own cell of the
    result. The cofactor of a 1x1 matrix is ``[[1]]``, the determinant of the
    empty minor.

    Raises:
        NotSquareError: If the matrix is not square.
    """
    from .linalg import Matrix

    if matrix.rows != matrix.cols:
        raise NotSquareError("Cofactor matrix requires a square matrix")

    n = matrix.rows
    res = Matrix.square(n)
    if n == 1:
        res[0, 0] = 1.0
        return res

    for i, j in matrix.inorder_slot_iter():
        sign = 1.0 if (i + j) % 2 == 0 else -1.0
        minor = matrix.sub_matrix(i, j)
        minor_det = _expand(minor, False)
        res[i, j] = sign * minor_det
        if do_log:
            log(
                r"$$ C_{%s,%s} = (-1)^{%s+%s} \det%s = %s $$",
                i + 1,
                j + 1,
                i + 1,
                j + 1,
                minor,
                res[i, j],
            )

    if do_log:
        log(r"Cofactor matrix: $$ C = %s $$", res)
    return res
