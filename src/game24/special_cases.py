import logging
from collections import Counter
from typing import List, Sequence

from game24.constants import TARGET
from game24.expression import BinOp, Expr, Num
from game24.search import hits_target

logger = logging.getLogger(__name__)


def uses_exactly(expr: Expr, numbers: Sequence[int]) -> bool:
    """True when the leaves of ``expr`` are exactly ``numbers`` (with repeats)."""
    return Counter(expr.leaves()) == Counter(numbers)


def _cancel_pair(a, b, c) -> List[Expr]:
    # a*b + (c-c) and a+b + (c-c)
    zero = BinOp('-', Num(c), Num(c))
    return [
        BinOp('+', BinOp('*', Num(a), Num(b)), zero),
        BinOp('+', BinOp('+', Num(a), Num(b)), zero),
    ]


def special_solutions(numbers: Sequence[int], target=TARGET) -> List[Expr]:
    """
    Extra candidates for inputs with repeated numbers.

    The generic shapes never write a repeated pair as a cancelling ``(c-c)``
    term next to the rest, nor ``(target+x)-x`` when the target itself is
    dealt; these are added here.  Only candidates that reach the target and
    use every dealt number exactly once are returned.
    """
    counts = Counter(numbers)
    candidates = []

    # {a, b, c, c}; {a, b, 1, 1} falls out of the same rule with c = 1
    for c, count in counts.items():
        if count < 2:
            continue
        others = [n for n in numbers if n != c]
        if len(others) == 2:
            candidates.extend(_cancel_pair(others[0], others[1], c))

    if counts[1] >= 2:
        others = [n for n in numbers if n != 1]
        if len(others) == 2:
            candidates.extend(_cancel_pair(others[0], others[1], 1))

    # the target itself plus a pair {x, x}: (target+x)-x
    if counts[target]:
        others = [n for n in numbers if n != target]
        if len(others) == 3:
            for i in range(len(others)):
                for j in range(i + 1, len(others)):
                    if others[i] == others[j]:
                        candidates.append(
                            BinOp('-', BinOp('+', Num(target), Num(others[i])), Num(others[j])))

    out = [e for e in candidates if hits_target(e, target) and uses_exactly(e, numbers)]
    logger.debug('special cases for %s: %d of %d kept', list(numbers), len(out), len(candidates))
    return out
