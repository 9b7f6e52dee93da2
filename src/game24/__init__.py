from game24.expression import Num, BinOp, Expr
from game24.equivalence import is_equivalent
from game24.canonical import normalize
from game24.solver import Solver, solve

__all__ = ['Num', 'BinOp', 'Expr', 'is_equivalent', 'normalize', 'Solver', 'solve']
