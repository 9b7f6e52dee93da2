from fractions import Fraction

import pytest

from game24.expression import BinOp, Num, needs_parens


def test_literal():
    n = Num(3)
    assert n.evaluate() == 3
    assert str(n) == '3'
    assert n.complexity() == 1
    assert n.leaves() == [3]


def test_evaluate_exact():
    expr = BinOp('/', Num(8), BinOp('-', Num(3), BinOp('/', Num(8), Num(3))))
    assert expr.evaluate() == 24
    assert BinOp('/', Num(1), Num(3)).evaluate() == Fraction(1, 3)


def test_division_by_zero_is_none():
    assert BinOp('/', Num(1), Num(0)).evaluate() is None
    zero = BinOp('-', Num(4), Num(4))
    assert BinOp('+', Num(2), BinOp('/', Num(6), zero)).evaluate() is None
    # a zero numerator is fine
    assert BinOp('/', zero, Num(4)).evaluate() == 0


def test_unknown_operator():
    with pytest.raises(ValueError):
        BinOp('^', Num(2), Num(3))


@pytest.mark.parametrize('expr, text', [
    (BinOp('*', BinOp('+', BinOp('+', Num(1), Num(2)), Num(3)), Num(4)), '(1+2+3)*4'),
    (BinOp('/', Num(8), BinOp('-', Num(3), BinOp('/', Num(8), Num(3)))), '8/(3-8/3)'),
    (BinOp('+', BinOp('-', Num(5), Num(3)), Num(2)), '(5-3)+2'),
    (BinOp('-', BinOp('-', Num(9), Num(3)), Num(2)), '(9-3)-2'),
    (BinOp('-', Num(5), BinOp('+', Num(3), Num(2))), '5-(3+2)'),
    (BinOp('-', Num(5), BinOp('-', Num(3), Num(2))), '5-(3-2)'),
    (BinOp('+', Num(5), BinOp('-', Num(3), Num(2))), '5+3-2'),
    (BinOp('/', Num(8), BinOp('*', Num(2), Num(2))), '8/(2*2)'),
    (BinOp('*', BinOp('-', Num(5), Num(1)), BinOp('+', Num(3), Num(3))), '(5-1)*(3+3)'),
])
def test_rendering(expr, text):
    assert str(expr) == text


def test_quotient_times_renders_multiplication_first():
    expr = BinOp('*', BinOp('/', Num(8), Num(2)), Num(6))
    assert str(expr) == '8*6/2'

    nested = BinOp('*', BinOp('/', BinOp('+', Num(1), Num(2)), Num(3)), Num(4))
    assert str(nested) == '(1+2)*4/3'
    assert nested.evaluate() == 4


def test_needs_parens():
    assert needs_parens('*', '+', is_left=True)
    assert needs_parens('/', '*', is_left=False)
    assert needs_parens('-', '-', is_left=True)
    assert not needs_parens('+', '+', is_left=True)
    assert not needs_parens('*', '/', is_left=False)


def test_complexity_and_leaves():
    expr = BinOp('*', BinOp('-', Num(5), Num(1)), BinOp('+', Num(3), Num(3)))
    assert expr.complexity() == 7
    assert expr.leaves() == [5, 1, 3, 3]


def test_copy_is_deep():
    expr = BinOp('*', BinOp('-', Num(5), Num(1)), Num(6))
    dup = expr.copy()
    assert dup is not expr
    assert dup.left is not expr.left
    assert str(dup) == str(expr)
    assert dup.evaluate() == expr.evaluate() == 24
