import math
from typing import List, Optional, Sequence

import numpy as np

from game24.constants import OPERATORS, TARGET
from game24.expression import BinOp, Expr, Num
from game24.search import SHAPES, enumerate_solutions, unique_permutations
from game24.solver import Solver

# ---------------------------------------------------------------------------
# Difficulty bands (1 = trivial ... 5 = very hard)
# ---------------------------------------------------------------------------
#
# score = 25th percentile of the solution costs + RARITY_WEIGHT * rarity
#
# where rarity is log10(trees tried / trees reaching the target) over the
# brute-force enumeration.

OP_COST = {'+': 1, '-': 1, '*': 1, '/': 3}
COMPOUND_DIVISOR = 1        # dividing by a bracketed term
FRACTION_STEP = 0.5         # an intermediate value that is not a whole number
RARITY_WEIGHT = 2
BANDS = [(6, 1), (8, 2), (10, 3), (12, 4)]


def operation_cost(expr: Expr) -> float:
    """Cost of one solution tree.  Lower is easier."""
    if isinstance(expr, Num):
        return 0
    cost = OP_COST[expr.op]
    if expr.op == '/' and isinstance(expr.right, BinOp):
        cost += COMPOUND_DIVISOR
    value = expr.evaluate()
    if value is not None and value.denominator != 1:
        cost += FRACTION_STEP
    return cost + operation_cost(expr.left) + operation_cost(expr.right)


def rarity(numbers: Sequence[int], target=TARGET) -> float:
    """log10 of how many enumerated trees there are per tree that hits ``target``."""
    perms = unique_permutations([Num(n) for n in numbers])
    tried = len(perms) * len(SHAPES) * len(OPERATORS) ** 3
    hits = len(enumerate_solutions(numbers, target))
    if not hits:
        return math.log10(tried + 1)
    return math.log10(tried / hits)


def analyse(numbers: Sequence[int], solutions: Optional[List[Expr]] = None, target=TARGET) -> int:
    """
    Difficulty band 1-5; 5 when ``numbers`` cannot make ``target``.

    ``solutions`` are the trees from ``Solver.solve_expressions`` and may be
    passed in when they are already known.
    """
    if solutions is None:
        solutions = Solver(target).solve_expressions(numbers)
    if not solutions:
        return 5

    costs = [operation_cost(s) for s in solutions]
    score = np.percentile(costs, 25) + RARITY_WEIGHT * rarity(numbers, target)
    for limit, band in BANDS:
        if score <= limit:
            return band
    return 5
