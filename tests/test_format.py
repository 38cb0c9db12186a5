import pytest

from symbolic.expr import Add, Const, Div, Exp, Mul, Pow, Sin, Sub, X
from symbolic.formatter import format_expr, format_number, to_subscript, to_superscript


@pytest.mark.parametrize(
    "expr, text",
    [
        (Pow(X, Const(2)), "x²"),
        (Exp(X), "eˣ"),
        (Mul(Const(1), X), "x"),
        (Mul(Const(-1), X), "-x"),
        (Mul(Const(5), X), "5x"),
        (Mul(Const(2.5), X), "2.5x"),
        (Pow(X, Const(5)), "x⁵"),
        (Pow(X, Const(7)), "x⁷"),
        (Pow(X, Const(-1)), "x⁻¹"),
        (Pow(X, Const(0.5)), "√x"),
        (Pow(X, Const(2.5)), "x^(2.5)"),
        (Pow(X, X), "x^(x)"),
        (Pow(Add(X, Const(1)), Const(2)), "(x + 1)²"),
        (Exp(Mul(Const(3), X)), "e³x"),
        (Exp(Mul(Const(-2), X)), "e⁻²x"),
        (Exp(Sin(X)), "e^(sin(x))"),
        (Div(Sin(X), X), "(sin(x))/(x)"),
        (Add(Mul(Const(3), Pow(X, Const(2))), Mul(Const(2), X)), "3·x² + 2x"),
        (Sub(Pow(X, Const(3)), X), "x³ - x"),
        (Mul(Const(-1), Add(X, Const(1))), "-(x + 1)"),
        (Mul(X, Mul(Sin(X), Sin(X))), "x·sin(x)·sin(x)"),
    ],
)
def test_format_expr(expr, text):
    assert format_expr(expr) == text


def test_format_resimplifies_first():
    assert format_expr(Mul(Add(Const(0), Const(1)), Pow(X, Const(1)))) == "x"


@pytest.mark.parametrize(
    "value, text",
    [
        (4.0, "4"),
        (1 / 3, "0.33"),
        (2.5, "2.5"),
        (-0.001, "0"),
    ],
)
def test_constant_rendering(value, text):
    assert format_expr(Const(value)) == text


@pytest.mark.parametrize(
    "value, text",
    [
        (2.0, "2"),
        (1.9996, "2"),
        (-3.0004, "-3"),
        (2.5, "2.5"),
        (3.14159, "3.14"),
        (-0.0004, "0"),
        (0.25, "0.25"),
    ],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_transliteration():
    assert to_superscript("-12+x") == "⁻¹²⁺x"
    assert to_subscript("-1") == "₋₁"
    assert to_subscript("π/2") == "π/₂"
    assert to_superscript("π") == "π"


def test_exponential_coefficient_keeps_plain_x():
    # the x after the superscript coefficient is not transliterated
    assert format_expr(Exp(Mul(Const(2.0), X))) == "e²x"
    assert format_expr(Exp(Mul(Const(2.5), X))) == "e^(2.5x)"
