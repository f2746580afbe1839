import math
from decimal import Decimal
from typing import List, Any
import sympy


def pcformat(fstr, *vals):
    """
    Format a percent sign string with the given values.
    Example:
    >>> pcformat(r"%s + %s = %s", 1, 2, 3)
    "1 + 2 = 3"
    """
    formatted_vals = tuple(cformat(val) for val in vals)
    return fstr % formatted_vals


def cformat(val, arg_of=None):
    if hasattr(val, "cformat") and callable(val.cformat):
        return val.cformat(arg_of)
    if isinstance(val, str):
        return val
    try:
        res = sympy.latex(val)
    except Exception:  # sympy cannot print every object, fall back to str
        res = str(val)
    if arg_of == "*" and res.startswith("-"):
        return r"\left(%s\right)" % res
    return res


def format_real(value: float) -> str:
    """
    Shortest round-trip text for a float, in positional notation and without
    a fractional part when it is integral. The sign of zero is kept.
    >>> format_real(2.0), format_real(0.25), format_real(1e-7), format_real(-0.0)
    ('2', '0.25', '0.0000001', '-0')
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_plain_matrix(rows: int, cols: int, data: List[float]) -> str:
    lines = []
    for i in range(rows):
        lines.append("".join("%.2f " % data[i * cols + j] for j in range(cols)))
    return "".join(line + "\n" for line in lines)


def make_latex_matrix(items: List[List[Any]]) -> str:
    start = r"\begin{pmatrix}"
    end = r"\end{pmatrix}"
    rows = [r" & ".join([cformat(item) for item in row]) for row in items]
    return start + (r"\\[0.1em]" + "\n").join(rows) + end
