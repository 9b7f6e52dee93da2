import asyncio
from typing import List, Optional, Sequence

from game24.solver import Solver


# ---- thin wrappers --------------------------------------------------------
async def solve_async(numbers: Sequence[int], solver: Optional[Solver] = None) -> List[str]:
    """Run the blocking solver in a worker thread so the caller stays responsive."""
    solver = solver or Solver()
    return await asyncio.to_thread(solver.solve, numbers)


async def solve_many(puzzles: Sequence[Sequence[int]], concurrency: int = 4,
                     solver: Optional[Solver] = None) -> List[List[str]]:
    """Solve ``puzzles`` with at most ``concurrency`` running at once; results keep input order."""
    solver = solver or Solver()
    sema = asyncio.Semaphore(concurrency)

    async def bounded(numbers):
        async with sema:
            return await solve_async(numbers, solver)

    return await asyncio.gather(*(bounded(p) for p in puzzles))
