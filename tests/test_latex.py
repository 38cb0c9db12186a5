import sympy

from symbolic.expr import Const, Mul, Pow, Sin, X
from symbolic.latex import integral_latex, to_sympy, x


def test_int_valued_constants_convert():
    assert to_sympy(Mul(Const(3), X)) == 3 * x
    assert to_sympy(Pow(X, Const(2))) == x**2
    assert to_sympy(Const(2.5)) == sympy.Float(2.5)


def test_integral_latex_with_int_constant():
    assert integral_latex(Mul(Const(3), X)) == r"\int 3 x \, dx"


def test_integral_latex_bounds_use_pi():
    from quiz.bounds import TRIG_BOUNDS

    text = integral_latex(Sin(X), TRIG_BOUNDS[1])
    assert text.startswith(r"\int_{0}^{\frac{\pi}{2}}")
