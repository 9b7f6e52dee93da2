import logging
from typing import List, Sequence

from game24.constants import NUM_OPERANDS, TARGET
from game24.equivalence import Equivalence
from game24.expression import Expr
from game24.ranking import rank_solutions
from game24.search import enumerate_solutions
from game24.special_cases import special_solutions

logger = logging.getLogger(__name__)


class Solver:
    """
    Finds every distinct way to make ``target`` from four numbers.

    Example
    -------
    solutions = Solver().solve([3, 3, 8, 8])
    for s in solutions: print(s)     # 8/(3-8/3)
    """

    def __init__(self, target=TARGET):
        self.target = target

    def solve_expressions(self, numbers: Sequence[int]) -> List[Expr]:
        """Solutions as expression trees, best first."""
        numbers = list(numbers)
        if len(numbers) != NUM_OPERANDS:
            raise ValueError(f'exactly {NUM_OPERANDS} numbers are required, got {len(numbers)}')

        candidates = enumerate_solutions(numbers, self.target)
        candidates += special_solutions(numbers, self.target)
        solutions = rank_solutions(candidates, numbers, Equivalence())
        logger.debug('%s -> %d solution(s)', numbers, len(solutions))
        return solutions

    def solve(self, numbers: Sequence[int]) -> List[str]:
        """Solutions as infix strings, best first; empty when there is none."""
        return [str(expr) for expr in self.solve_expressions(numbers)]


def solve(numbers: Sequence[int], target=TARGET) -> List[str]:
    return Solver(target).solve(numbers)
