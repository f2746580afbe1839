"""Tests for the Complex scalar."""

import math

import pytest

from mu_linalg import Complex, DivisionByZeroError


class TestComplexBasics:
    """Test construction, equality and rendering."""

    def test_fields_are_floats(self):
        """Test both parts are stored as floats."""
        c = Complex(2, 3)
        assert c.re == 2.0 and isinstance(c.re, float)
        assert c.im == 3.0 and isinstance(c.im, float)

    def test_default_is_zero(self):
        """Test Complex() is 0 + 0i."""
        assert Complex() == Complex(0, 0)

    def test_equality_with_real(self):
        """Test a complex with no imaginary part equals the real number."""
        assert Complex(3, 0) == 3
        assert Complex(3, 1) != 3

    def test_hashable(self):
        """Test equal values hash equally."""
        assert len({Complex(1, 2), Complex(1, 2)}) == 1

    @pytest.mark.parametrize(
        "c, text",
        [
            (Complex(1, 2), "1 + 2i"),
            (Complex(0.5, -1.5), "0.5 - 1.5i"),
            (Complex(-3, 0), "-3 + 0i"),
            (Complex(0, -1), "0 - 1i"),
            (Complex(1e-7, 0), "0.0000001 + 0i"),
            (Complex(1, -0.0), "1 + -0i"),
        ],
    )
    def test_str(self, c, text):
        """Test text rendering uses '+' or '-' depending on the imaginary sign."""
        assert str(c) == text

    def test_repr(self):
        """Test repr shows both float fields."""
        assert repr(Complex(1, -2)) == "Complex(re=1.0, im=-2.0)"

    def test_cformat(self):
        """Test the LaTeX rendering keeps the sign convention."""
        assert Complex(1, -2).cformat().endswith(" i")
        assert " - " in Complex(1, -2).cformat()
        assert Complex(1, 2).cformat("*").startswith(r"\left(")


class TestComplexTranscendental:
    """Test abs, arg, conj, exp, ln and pow."""

    def test_abs(self):
        """Test |3 + 4i| == 5."""
        assert Complex(3, 4).abs() == 5.0
        assert abs(Complex(-3, -4)) == 5.0

    def test_arg(self):
        """Test arg(1 + i) == pi/4."""
        assert Complex(1, 1).arg() == pytest.approx(math.pi / 4)
        assert Complex(-1, 0).arg() == pytest.approx(math.pi)

    def test_conj(self):
        """Test conj negates the imaginary part."""
        assert Complex(1, 1).conj() == Complex(1, -1)

    def test_exp_euler(self):
        """Test e^(i pi) == -1."""
        res = Complex(0, math.pi).exp()
        assert res.re == pytest.approx(-1.0)
        assert res.im == pytest.approx(0.0, abs=1e-12)

    def test_ln(self):
        """Test ln(1 + i) == ln(sqrt 2) + i pi/4."""
        res = Complex(1, 1).ln()
        assert res.re == pytest.approx(math.log(math.sqrt(2)))
        assert res.im == pytest.approx(math.pi / 4)

    def test_ln_inverts_exp(self):
        """Test ln(exp(z)) == z for a small z."""
        z = Complex(0.5, 1.0)
        res = z.exp().ln()
        assert res.re == pytest.approx(z.re)
        assert res.im == pytest.approx(z.im)

    def test_ln_of_zero(self):
        """Test the logarithm of zero is rejected."""
        with pytest.raises(ValueError):
            Complex(0, 0).ln()

    def test_pow(self):
        """Test (1 + i)^2 == 2i through the polar form."""
        res = Complex(1, 1).pow(2.0)
        assert res.re == pytest.approx(0.0, abs=1e-12)
        assert res.im == pytest.approx(2.0)

    def test_pow_operator_fractional(self):
        """Test (-4)^0.5 == 2i."""
        res = Complex(-4, 0) ** 0.5
        assert res.re == pytest.approx(0.0, abs=1e-12)
        assert res.im == pytest.approx(2.0)

    def test_pow_zero_negative_exponent(self):
        """Test 0^-1 is a division by zero."""
        with pytest.raises(DivisionByZeroError):
            Complex(0, 0).pow(-1.0)


class TestComplexArithmetic:
    """Test operators with complex and real operands."""

    def test_add_sub_neg(self):
        """Test addition, subtraction and negation."""
        a = Complex(1, 1)
        assert a + a == Complex(2, 2)
        assert a - a == Complex(0, 0)
        assert -a == Complex(-1, -1)

    def test_real_operands(self):
        """Test real scalars on either side."""
        a = Complex(1, 1)
        assert a + 1 == Complex(2, 1)
        assert 1 + a == Complex(2, 1)
        assert a - 1 == Complex(0, 1)
        assert 1 - a == Complex(0, -1)
        assert a * 2.0 == Complex(2, 2)
        assert 2.0 * a == Complex(2, 2)
        assert a / 2 == Complex(0.5, 0.5)

    def test_mul(self):
        """Test (1 + i)(1 + i) == 2i."""
        assert Complex(1, 1) * Complex(1, 1) == Complex(0, 2)

    def test_div(self):
        """Test z / z == 1 and (1 + 2i) / (3 + 4i)."""
        assert Complex(1, 1) / Complex(1, 1) == Complex(1, 0)
        res = Complex(1, 2) / Complex(3, 4)
        assert res.re == pytest.approx(0.44)
        assert res.im == pytest.approx(0.08)

    def test_real_divided_by_complex(self):
        """Test 2 / i == -2i."""
        assert 2 / Complex(0, 1) == Complex(0, -2)

    def test_division_by_zero_complex(self):
        """Test dividing by 0 + 0i raises."""
        with pytest.raises(DivisionByZeroError):
            Complex(1, 1) / Complex(0, 0)
        with pytest.raises(ZeroDivisionError):
            1.0 / Complex(0, 0)
        with pytest.raises(DivisionByZeroError):
            Complex(1, 1) / 0

    def test_operands_unchanged(self):
        """Test operators never mutate their operands."""
        a = Complex(1, 2)
        b = Complex(3, 4)
        a * b
        a / b
        assert a == Complex(1, 2)
        assert b == Complex(3, 4)

    def test_unsupported_operand(self):
        """Test mixing with a string is a type error."""
        with pytest.raises(TypeError):
            Complex(1, 1) + "x"
