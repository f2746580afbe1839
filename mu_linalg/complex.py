import math
from numbers import Real
from typing import Any

from .errors import DivisionByZeroError
from .fmt import cformat, format_real


class Complex:
    """
    Complex number with real and imaginary parts stored as floats.

    Every operation returns a new value; instances are never mutated after
    construction. Real scalars (``int`` and ``float``) are accepted on either
    side of ``+``, ``-``, ``*`` and ``/``.
    """

    __slots__ = ("re", "im")

    re: float
    im: float

    def __init__(self, re: float = 0.0, im: float = 0.0):
        self.re = float(re)
        self.im = float(im)

    @staticmethod
    def _coerce(other: Any) -> "Complex | None":
        if isinstance(other, Complex):
            return other
        if isinstance(other, Real):
            return Complex(other, 0.0)
        return None

    def norm_sqr(self) -> float:
        return self.re * self.re + self.im * self.im

    def abs(self) -> float:
        return math.sqrt(self.norm_sqr())

    def __abs__(self) -> float:
        return self.abs()

    def arg(self) -> float:
        return math.atan2(self.im, self.re)

    def conj(self) -> "Complex":
        return Complex(self.re, -self.im)

    def exp(self) -> "Complex":
        exp_re = math.exp(self.re)
        return Complex(exp_re * math.cos(self.im), exp_re * math.sin(self.im))

    def ln(self) -> "Complex":
        """Principal natural logarithm, ``ln|z| + i*arg(z)``."""
        if self.norm_sqr() == 0.0:
            raise ValueError("Logarithm of zero is undefined")
        return Complex(math.log(self.abs()), self.arg())

    def pow(self, n: float) -> "Complex":
        """Raise to a real power through the polar form ``|z|^n * e^(i*n*arg(z))``."""
        abs_ = self.abs()
        if abs_ == 0.0 and n < 0:
            raise DivisionByZeroError("Zero cannot be raised to a negative power")
        new_abs = abs_**n
        new_arg = self.arg() * n
        return Complex(new_abs * math.cos(new_arg), new_abs * math.sin(new_arg))

    def __pow__(self, n) -> "Complex":
        if not isinstance(n, Real):
            return NotImplemented
        return self.pow(n)

    def __neg__(self) -> "Complex":
        return Complex(-self.re, -self.im)

    def __add__(self, other) -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __radd__(self, other) -> "Complex":
        return self + other

    def __sub__(self, other) -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __rsub__(self, other) -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other) -> "Complex":
        if isinstance(other, Real):
            return Complex(self.re * other, self.im * other)
        if not isinstance(other, Complex):
            return NotImplemented
        re = self.re * other.re - self.im * other.im
        im = self.re * other.im + self.im * other.re
        return Complex(re, im)

    def __rmul__(self, other) -> "Complex":
        return self * other

    def __truediv__(self, other) -> "Complex":
        if isinstance(other, Real):
            if other == 0:
                raise DivisionByZeroError("Can't divide by 0")
            return Complex(self.re / other, self.im / other)
        if not isinstance(other, Complex):
            return NotImplemented
        denominator = other.norm_sqr()
        if denominator == 0.0:
            raise DivisionByZeroError("Can't divide by the zero complex number")
        re = (self.re * other.re + self.im * other.im) / denominator
        im = (self.im * other.re - self.re * other.im) / denominator
        return Complex(re, im)

    def __rtruediv__(self, other) -> "Complex":
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __eq__(self, other) -> bool:
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self) -> int:
        if self.im == 0.0:
            return hash(self.re)
        return hash((self.re, self.im))

    def __str__(self) -> str:
        if self.im < 0.0:
            return "%s - %si" % (format_real(self.re), format_real(-self.im))
        return "%s + %si" % (format_real(self.re), format_real(self.im))

    def __repr__(self) -> str:
        return "Complex(re=%r, im=%r)" % (self.re, self.im)

    def cformat(self, arg_of=None) -> str:
        if self.im < 0.0:
            res = r"%s - %s i" % (cformat(self.re), cformat(-self.im))
        else:
            res = r"%s + %s i" % (cformat(self.re), cformat(self.im))
        if arg_of in ("*", "^"):
            return r"\left(%s\right)" % res
        return res
