from fractions import Fraction
from typing import List, Optional, Union

from game24.constants import PRECEDENCE, NON_COMMUTATIVE

# -----------------------------------------------
# Expression trees for the 24 game
# -----------------------------------------------
#
# Two node kinds only: Num (a leaf holding one of the dealt numbers) and
# BinOp (an operator joining two sub-trees).  Nodes are never mutated after
# construction, so sub-trees are shared freely between candidates and the
# evaluated value / rendered text are memoised on the node.
#
# Arithmetic is exact (fractions.Fraction); a zero divisor makes the whole
# tree evaluate to None instead of raising.

op_funcs = {
    '+': lambda a, b: a + b,
    '-': lambda a, b: a - b,
    '*': lambda a, b: a * b,
    '/': lambda a, b: a / b if b != 0 else None,
}


class Num:
    def __init__(self, value):
        self.value = value

    def evaluate(self) -> Fraction:
        return Fraction(self.value)

    def complexity(self) -> int:
        return 1

    def leaves(self) -> List:
        return [self.value]

    def copy(self) -> 'Num':
        return Num(self.value)

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f'Num({self.value!r})'


class BinOp:
    def __init__(self, op: str, left: 'Expr', right: 'Expr'):
        if op not in op_funcs:
            raise ValueError(f'unsupported operator: {op!r}')
        self.op, self.left, self.right = op, left, right
        self._value = self._text = None
        self._evaluated = False

    # ----- evaluation -----
    def evaluate(self) -> Optional[Fraction]:
        """Exact value of the tree, or None when some divisor is zero."""
        if not self._evaluated:
            lv = self.left.evaluate()
            rv = self.right.evaluate() if lv is not None else None
            self._value = None if rv is None else op_funcs[self.op](lv, rv)
            self._evaluated = True
        return self._value

    def complexity(self) -> int:
        return 1 + self.left.complexity() + self.right.complexity()

    def leaves(self) -> List:
        return self.left.leaves() + self.right.leaves()

    def copy(self) -> 'BinOp':
        return BinOp(self.op, self.left.copy(), self.right.copy())

    # ----- pretty printing -----
    def __str__(self):
        if self._text is None:
            self._text = self._render()
        return self._text

    def _render(self) -> str:
        # (x/y)*z is shown as x*z/y: multiplication before division
        if self.op == '*' and is_op(self.left, '/'):
            return str(BinOp('/', BinOp('*', self.left.left, self.right), self.left.right))

        left, right = str(self.left), str(self.right)
        if isinstance(self.left, BinOp) and needs_parens(self.op, self.left.op, is_left=True):
            left = f'({left})'
        if isinstance(self.right, BinOp) and needs_parens(self.op, self.right.op, is_left=False):
            right = f'({right})'
        return f'{left}{self.op}{right}'

    def __repr__(self):
        return f'BinOp({self.op!r}, {self.left!r}, {self.right!r})'


Expr = Union[Num, BinOp]


def needs_parens(parent_op: str, child_op: str, is_left: bool) -> bool:
    """Whether a child sub-expression has to be bracketed under its parent."""
    if PRECEDENCE[parent_op] > PRECEDENCE[child_op]:
        return True
    if PRECEDENCE[parent_op] == PRECEDENCE[child_op]:
        if not is_left and parent_op in NON_COMMUTATIVE:
            return True
        # (a-b)+c and (a-b)-c keep their brackets
        if is_left and child_op == '-' and parent_op in ('+', '-'):
            return True
    return False


def is_op(expr: Expr, *ops: str) -> bool:
    return isinstance(expr, BinOp) and expr.op in ops


def is_num(expr: Expr, value=None) -> bool:
    if not isinstance(expr, Num):
        return False
    return value is None or expr.value == value
