#!/usr/bin/env python3
"""
Command-line front end for the 24 game solver.

Usage examples
--------------
$ game24 4 5 6 10               # every distinct way to make 24
$ game24 2 3 7 11 -t 21         # another target
$ game24 --interactive          # read puzzles line by line
$ game24 --batch puzzles.csv    # solve a CSV of puzzles concurrently
"""
import argparse
import asyncio
import logging
import time
from typing import List, Optional

from game24.challenges import load_puzzles
from game24.constants import NUM_OPERANDS, TARGET
from game24.difficulty import analyse
from game24.equivalence import is_equivalent
from game24.canonical import normalize
from game24.expression import BinOp, Num
from game24.solver import Solver
from game24.worker import solve_many

DEMO_PUZZLES = [[1, 2, 3, 4], [5, 5, 5, 1], [13, 11, 5, 4], [6, 6, 8, 3], [12, 12, 1, 1]]


def parse_numbers(tokens: List[str]) -> List[int]:
    if len(tokens) != NUM_OPERANDS:
        raise ValueError(f'please give exactly {NUM_OPERANDS} integers')
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise ValueError('please give valid integers') from None


def print_solutions(numbers: List[int], solutions: List[str], target=TARGET):
    if not solutions:
        print(f'{" ".join(map(str, numbers))} cannot make {target}')
        return
    print(f'Found {len(solutions)} solution(s) for {" ".join(map(str, numbers))}:')
    for i, s in enumerate(solutions, 1):
        print(f'{i:>3}: {s}')


def interactive(solver: Solver, read=input):
    print(f'Enter {NUM_OPERANDS} numbers separated by spaces, or "exit" to leave.')
    while True:
        try:
            line = read('> ').strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue
        if line.lower() in {'exit', 'quit', 'q'}:
            break
        try:
            numbers = parse_numbers(line.split())
        except ValueError as e:
            print(e)
            continue
        print_solutions(numbers, solver.solve(numbers), solver.target)


def demo(solver: Solver):
    print('24 game solver demo')
    print('=' * 50)
    for numbers in DEMO_PUZZLES:
        print_solutions(numbers, solver.solve(numbers), solver.target)
        print()

    # a few identities the equivalence checker knows about
    pairs = [
        (BinOp('+', Num(3), Num(4)), BinOp('+', Num(4), Num(3))),
        (BinOp('-', Num(5), BinOp('-', Num(3), Num(2))),
         BinOp('-', BinOp('+', Num(5), Num(2)), Num(3))),
        (BinOp('/', Num(8), BinOp('/', Num(3), Num(2))),
         BinOp('/', BinOp('*', Num(8), Num(2)), Num(3))),
    ]
    for a, b in pairs:
        print(f'{a} and {b} equivalent: {is_equivalent(a, b)}')
    expr = BinOp('/', BinOp('+', Num(13), Num(11)), Num(1))
    print(f'{expr} normalises to {normalize(expr)}')


def batch(solver: Solver, path: str, concurrency: int):
    puzzles = load_puzzles(path)
    start = time.time()
    print(f'Solving {len(puzzles)} puzzle(s) with up to {concurrency} workers')
    results = asyncio.run(solve_many(puzzles, concurrency, solver))
    solved = 0
    for numbers, solutions in zip(puzzles, results):
        print(f'{" ".join(map(str, numbers))}: {len(solutions)} solution(s)')
        solved += bool(solutions)
    print(f'{solved} of {len(puzzles)} solvable, spent {time.time() - start:.2f}s')


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Find every distinct way to make 24 from four numbers.')
    parser.add_argument('numbers', nargs='*',
                        help=f'{NUM_OPERANDS} integers to use (each exactly once)')
    parser.add_argument('-t', '--target', type=int, default=TARGET,
                        help=f'target value to reach (default {TARGET})')
    parser.add_argument('-d', '--difficulty', action='store_true',
                        help='also print a difficulty band (1=very easy, 5=very hard)')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='read puzzles from standard input')
    parser.add_argument('--demo', action='store_true',
                        help='solve the built-in sample puzzles')
    parser.add_argument('--batch', metavar='CSV',
                        help='solve every puzzle in a CSV with a "numbers" column')
    parser.add_argument('--concurrency', type=int, default=4,
                        help='how many batch puzzles to solve simultaneously')
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    solver = Solver(args.target)
    if args.interactive:
        interactive(solver)
    elif args.demo:
        demo(solver)
    elif args.batch:
        batch(solver, args.batch, args.concurrency)
    elif args.numbers:
        try:
            numbers = parse_numbers(args.numbers)
        except ValueError as e:
            print(e)
            return 1
        trees = solver.solve_expressions(numbers)
        print_solutions(numbers, [str(t) for t in trees], args.target)
        if args.difficulty:
            band = analyse(numbers, trees, args.target)
            print(f'Difficulty level: {band} (1=very easy, 5=very hard)')
    else:
        parser.print_help()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
