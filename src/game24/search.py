import logging
from itertools import product
from typing import Callable, List, Sequence

from game24.constants import OPERATORS, TARGET, TOLERANCE
from game24.expression import BinOp, Expr, Num

logger = logging.getLogger(__name__)

# -----------------------------------------------
# Brute-force enumeration over four operands
# -----------------------------------------------
#
# For every distinct ordering of the operands, try each of the five ways to
# bracket four terms with every choice of three operators:
#
#   1. ((a op1 b) op2 c) op3 d
#   2. (a op1 b) op3 (c op2 d)
#   3. a op3 ((b op1 c) op2 d)
#   4. a op3 (b op2 (c op1 d))
#   5. (a op2 (b op1 c)) op3 d
#
# That is at most 24 * 5 * 64 = 7680 trees; no pruning beyond dropping
# candidates that divide by zero.

Shape = Callable[[Sequence[Expr], str, str, str], Expr]

SHAPES: List[Shape] = [
    lambda n, op1, op2, op3: BinOp(op3, BinOp(op2, BinOp(op1, n[0], n[1]), n[2]), n[3]),
    lambda n, op1, op2, op3: BinOp(op3, BinOp(op1, n[0], n[1]), BinOp(op2, n[2], n[3])),
    lambda n, op1, op2, op3: BinOp(op3, n[0], BinOp(op2, BinOp(op1, n[1], n[2]), n[3])),
    lambda n, op1, op2, op3: BinOp(op3, n[0], BinOp(op2, n[1], BinOp(op1, n[2], n[3]))),
    lambda n, op1, op2, op3: BinOp(op3, BinOp(op2, n[0], BinOp(op1, n[1], n[2])), n[3]),
]


def unique_permutations(items: Sequence[Num]) -> List[List[Num]]:
    """All orderings of ``items``, skipping orderings that repeat by value."""
    if not items:
        return [[]]
    out = []
    seen = set()
    for i, item in enumerate(items):
        if item.value in seen:
            continue
        seen.add(item.value)
        rest = list(items[:i]) + list(items[i + 1:])
        out.extend([item] + tail for tail in unique_permutations(rest))
    return out


def hits_target(expr: Expr, target=TARGET) -> bool:
    value = expr.evaluate()
    return value is not None and abs(value - target) < TOLERANCE


def enumerate_solutions(numbers: Sequence[int], target=TARGET) -> List[Expr]:
    """Every bracketing/operator/ordering of ``numbers`` that reaches ``target``."""
    leaves = [Num(n) for n in numbers]
    found = []
    tried = 0
    for perm in unique_permutations(leaves):
        for shape in SHAPES:
            for op1, op2, op3 in product(OPERATORS, repeat=3):
                tried += 1
                expr = shape(perm, op1, op2, op3)
                if hits_target(expr, target):
                    found.append(expr)
    logger.debug('enumerated %d candidates for %s, %d reach %s', tried, list(numbers), len(found), target)
    return found
