import logging
from typing import List, Optional, Sequence

from game24.canonical import normalize
from game24.equivalence import Equivalence
from game24.expression import BinOp, Expr, Num, is_num, is_op
from game24.special_cases import uses_exactly

logger = logging.getLogger(__name__)


def preference(expr: Expr) -> int:
    """Multiplication is preferred over division: 2 per '*', 1 per '/'."""
    text = str(expr)
    return 2 * text.count('*') + text.count('/')


def rank_key(expr: Expr):
    return -preference(expr), expr.complexity()


def equivalent_forms(expr: Expr) -> List[Expr]:
    """
    Alternate surface forms of ``expr``, used to widen the candidate pool.

    Commuted + and *, a-b as a+(-b) for a literal b, x/1 as x, and (a*b)/c
    as a*(b/c) or b*(a/c); applied at the top and inside every sub-tree.
    """
    if not isinstance(expr, BinOp):
        return []
    op, left, right = expr.op, expr.left, expr.right
    forms = []

    if op in ('+', '*'):
        forms.append(BinOp(op, right, left))
    if op == '-' and isinstance(right, Num):
        forms.append(BinOp('+', left, Num(-right.value)))
    if op == '/' and is_num(right, 1):
        forms.append(left)
    if op == '/' and is_op(left, '*'):
        forms.append(BinOp('*', left.left, BinOp('/', left.right, right)))
        forms.append(BinOp('*', left.right, BinOp('/', left.left, right)))

    forms.extend(BinOp(op, form, right) for form in equivalent_forms(left))
    forms.extend(BinOp(op, left, form) for form in equivalent_forms(right))
    return forms


def rank_solutions(candidates: Sequence[Expr], numbers: Sequence[int],
                   equivalent: Optional[Equivalence] = None) -> List[Expr]:
    """
    Collapse ``candidates`` to one representative per equivalence class.

    Steps: normalise, widen with ``equivalent_forms``, drop exact textual
    duplicates, drop forms that no longer use exactly ``numbers``, then keep
    the best-scoring member of each class.  The result is sorted by
    preference (descending), then complexity (ascending).
    """
    if equivalent is None:
        equivalent = Equivalence()

    expanded = []
    for sol in map(normalize, candidates):
        expanded.append(sol)
        expanded.extend(equivalent_forms(sol))

    by_text = {}
    for sol in expanded:
        by_text.setdefault(str(sol), sol)

    valid = [sol for sol in by_text.values() if uses_exactly(sol, numbers)]
    logger.debug('%d candidates -> %d forms -> %d distinct -> %d using %s',
                 len(candidates), len(expanded), len(by_text), len(valid), list(numbers))

    reps: List[Expr] = []
    for sol in valid:
        for i, existing in enumerate(reps):
            if equivalent(sol, existing):
                if rank_key(sol) < rank_key(existing):
                    reps[i] = sol
                break
        else:
            reps.append(sol)

    reps.sort(key=rank_key)

    # a replacement above can leave two representatives that match; keep the first
    out: List[Expr] = []
    for sol in reps:
        if not any(equivalent(sol, kept) for kept in out):
            out.append(sol)
    return out
