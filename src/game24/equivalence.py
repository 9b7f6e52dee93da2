"""
Algebraic equivalence between expression trees.

Two solutions count as "the same" when one can be turned into the other
with the identities below.  This is a fixed list of rules, not a decision
procedure: distributivity, for instance, is not recognised, so a result set
can still hold two expressions that are equal for deeper reasons.

    1. literals match on value
    2. different values are never equivalent (checked first, it is cheap)
    3. same operator, children equivalent in order
    4. identical rendered text
    5. same multiset of numerator and denominator factors
    6. commutativity of + and *
    7. associativity of + and *
    8. same multiset of signed additive terms
    9. a-(b-c) = (a+c)-b,  x/(y/z) = (x*z)/y,  x/(y*z) = (x/y)/z,
       x*1 = x/1,  a+(b*1) = (a+b)*1
"""
from typing import Dict, List, Tuple

from game24.constants import COMMUTATIVE, TOLERANCE
from game24.expression import BinOp, Expr, Num, is_num, is_op


def additive_terms(expr: Expr) -> List[Tuple[Expr, bool]]:
    """Flatten a +/- chain into (term, positive?) pairs."""
    if is_op(expr, '+'):
        return additive_terms(expr.left) + additive_terms(expr.right)
    if is_op(expr, '-'):
        negated = [(term, not positive) for term, positive in additive_terms(expr.right)]
        return additive_terms(expr.left) + negated
    return [(expr, True)]


def multiplicative_terms(expr: Expr) -> Tuple[List[Expr], List[Expr]]:
    """Flatten a * and / chain into (numerators, denominators)."""
    if is_op(expr, '*'):
        ln, ld = multiplicative_terms(expr.left)
        rn, rd = multiplicative_terms(expr.right)
        return ln + rn, ld + rd
    if is_op(expr, '/'):
        ln, ld = multiplicative_terms(expr.left)
        rn, rd = multiplicative_terms(expr.right)
        return ln + rd, ld + rn
    return [expr], []


def contains_mult_div(expr: Expr) -> bool:
    if not isinstance(expr, BinOp):
        return False
    return expr.op in ('*', '/') or contains_mult_div(expr.left) or contains_mult_div(expr.right)


class Equivalence:
    """
    Equivalence checker with a memo keyed on the rendered text of both sides.

    One instance is meant to live for a single solve; it holds no state other
    than the memo.
    """

    def __init__(self):
        self._memo: Dict[Tuple[str, str], bool] = {}

    def __call__(self, a: Expr, b: Expr) -> bool:
        key = (str(a), str(b))
        if key not in self._memo:
            self._memo[key] = self._equivalent(a, b)
        return self._memo[key]

    # ----- rules -----
    def _equivalent(self, a: Expr, b: Expr) -> bool:
        if isinstance(a, Num) or isinstance(b, Num):
            return isinstance(a, Num) and isinstance(b, Num) and a.value == b.value

        va, vb = a.evaluate(), b.evaluate()
        if va is None or vb is None:
            return str(a) == str(b)
        if abs(va - vb) >= TOLERANCE:
            return False

        if a.op == b.op and self(a.left, b.left) and self(a.right, b.right):
            return True
        if str(a) == str(b):
            return True
        if self._same_factors(a, b):
            return True

        if a.op == b.op and a.op in COMMUTATIVE:
            if self(a.left, b.right) and self(a.right, b.left):
                return True
            if self._associative(a, b):
                return True

        if a.op in ('+', '-') and b.op in ('+', '-'):
            if self._same_terms(additive_terms(a), additive_terms(b)):
                return True

        return self._rewritten(a, b) or self._rewritten(b, a) or self._unit_factor(a, b)

    def _associative(self, a: BinOp, b: BinOp) -> bool:
        op = a.op
        if is_op(a.left, op):
            # (x op y) op z  vs  x op (y op z)  /  y op (x op z)
            x, y, z = a.left.left, a.left.right, a.right
            if self(x, b.left) and self(BinOp(op, y, z), b.right):
                return True
            if self(y, b.left) and self(BinOp(op, x, z), b.right):
                return True
        if is_op(b.left, op):
            x, y, z = b.left.left, b.left.right, b.right
            if self(a.left, x) and self(a.right, BinOp(op, y, z)):
                return True
            if self(a.left, y) and self(a.right, BinOp(op, x, z)):
                return True
        return False

    def _same_factors(self, a: BinOp, b: BinOp) -> bool:
        # only for products and quotients at the top; anything else would
        # collect to [itself] and compare the whole tree with itself again
        if not (is_op(a, '*', '/') and is_op(b, '*', '/')):
            return False
        if not (contains_mult_div(a) and contains_mult_div(b)):
            return False
        a_num, a_den = multiplicative_terms(a)
        b_num, b_den = multiplicative_terms(b)
        return self._match_all(a_num, b_num) and self._match_all(a_den, b_den)

    def _same_terms(self, terms1: List[Tuple[Expr, bool]], terms2: List[Tuple[Expr, bool]]) -> bool:
        if len(terms1) != len(terms2):
            return False
        remaining = list(terms2)
        for term, positive in terms1:
            for i, (other, other_positive) in enumerate(remaining):
                if positive == other_positive and self(term, other):
                    del remaining[i]
                    break
            else:
                return False
        return not remaining

    def _match_all(self, factors1: List[Expr], factors2: List[Expr]) -> bool:
        if len(factors1) != len(factors2):
            return False
        remaining = list(factors2)
        for factor in factors1:
            for i, other in enumerate(remaining):
                if self(factor, other):
                    del remaining[i]
                    break
            else:
                return False
        return True

    def _rewritten(self, a: BinOp, b: BinOp) -> bool:
        """Rewrite ``a`` with one identity and compare the result with ``b``."""
        r = a.right
        if a.op == '-' and is_op(r, '-'):
            # a-(b-c) -> (a+c)-b
            return self(BinOp('-', BinOp('+', a.left, r.right), r.left), b)
        if a.op == '/' and is_op(r, '/'):
            # x/(y/z) -> (x*z)/y
            return self(BinOp('/', BinOp('*', a.left, r.right), r.left), b)
        if a.op == '/' and is_op(r, '*'):
            # x/(y*z) -> (x/y)/z
            return self(BinOp('/', BinOp('/', a.left, r.left), r.right), b)
        if a.op == '+' and is_op(r, '*') and is_num(r.right, 1):
            # a+(b*1) -> (a+b)*1
            return self(BinOp('*', BinOp('+', a.left, r.left), r.right), b)
        return False

    def _unit_factor(self, a: BinOp, b: BinOp) -> bool:
        # x*1 and x/1
        if {a.op, b.op} == {'*', '/'} and is_num(a.right, 1) and is_num(b.right, 1):
            return self(a.left, b.left)
        return False


def is_equivalent(a: Expr, b: Expr) -> bool:
    """One-off equivalence test; use an ``Equivalence`` instance to share a memo."""
    return Equivalence()(a, b)
