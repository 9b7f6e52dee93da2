import argparse
import json
import logging
import os
import random
import re
from itertools import combinations_with_replacement
from typing import Dict, List, Optional

import pandas as pd

from game24.constants import CARD_RANGE, NUM_OPERANDS
from game24.difficulty import analyse
from game24.solver import Solver

logger = logging.getLogger(__name__)

# an answer starts with a bracket or a number directly followed by an operator
ANSWER_START = re.compile(r'^\d+[+\-*/×÷]')


def _starts_answer(part: str) -> bool:
    return '(' in part or bool(ANSWER_START.match(part))


def parse_line(line: str) -> Dict:
    """
    Parse one challenge line, e.g. ``1     1 1 1 8   (1+1+1)×8``.

    Level, four numbers, then answers.  Answers may contain spaces; a new
    answer begins at a part that looks like the start of one.
    """
    parts = line.split()
    if len(parts) < 1 + NUM_OPERANDS:
        raise ValueError(f'challenge line too short: {line!r}')
    level = int(parts[0])
    numbers = [int(p) for p in parts[1:1 + NUM_OPERANDS]]

    solutions = []
    i = 1 + NUM_OPERANDS
    while i < len(parts):
        if not _starts_answer(parts[i]):
            i += 1
            continue
        j = i + 1
        while j < len(parts) and not _starts_answer(parts[j]):
            j += 1
        solutions.append(' '.join(parts[i:j]))
        i = j
    return {'level': level, 'numbers': numbers, 'solutions': solutions}


def parse_challenges(text: str) -> List[Dict]:
    return [parse_line(line) for line in text.splitlines() if line.strip()]


def to_frame(records: List[Dict]) -> pd.DataFrame:
    df = pd.DataFrame(records, columns=['level', 'numbers', 'solutions'])
    df['numbers'] = df['numbers'].map(lambda ns: ' '.join(map(str, ns)))
    df['solutions'] = df['solutions'].map(' | '.join)
    return df


def write_records(records: List[Dict], path: str):
    """JSON keeps the nested lists; anything else is written as CSV."""
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    if path.endswith('.json'):
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=2, ensure_ascii=False)
    else:
        to_frame(records).to_csv(path, index=False)


def convert(src: str, dst: str) -> List[Dict]:
    with open(src, 'r', encoding='utf-8') as f:
        records = parse_challenges(f.read())
    write_records(records, dst)
    return records


def load_puzzles(path: str) -> List[List[int]]:
    """Read the ``numbers`` column of a puzzle CSV (space-separated values)."""
    df = pd.read_csv(path)
    return [[int(n) for n in str(row).split()] for row in df['numbers']]


# ---------------------------------------------------------------------------
# Puzzle set generation
# ---------------------------------------------------------------------------
def generate(size: int, seed: Optional[int] = 42, solver: Optional[Solver] = None) -> pd.DataFrame:
    """
    ``size`` distinct solvable puzzles with difficulty bands, easiest first.

    Easy (bands 1-2) and medium (band 3) puzzles are each capped at a third
    of the set so the harder bands are represented.  Every distinct set of
    card values is tried at most once; when they run out the set is shorter
    than ``size``.
    """
    rng = random.Random(seed)
    solver = solver or Solver()
    low, high = CARD_RANGE
    pool = list(combinations_with_replacement(range(low, high + 1), NUM_OPERANDS))
    if size > len(pool):
        raise ValueError(f'cannot draw {size} puzzles from {len(pool)} combinations')
    rng.shuffle(pool)

    rows = []
    num_easy = num_med = 0
    for nums in pool:
        if len(rows) >= size:
            break
        solutions = solver.solve_expressions(nums)
        if not solutions:
            continue
        difficulty = analyse(nums, solutions, solver.target)

        if difficulty <= 2 and num_easy >= size // 3:
            continue
        elif difficulty == 3 and num_med >= size // 3:
            continue
        if difficulty <= 2:
            num_easy += 1
        elif difficulty == 3:
            num_med += 1

        rows.append({'numbers': ' '.join(map(str, nums)),
                     'solutions': len(solutions),
                     'difficulty': difficulty,
                     'example': str(solutions[0])})
        logger.debug('puzzle %s: %d solution(s), difficulty %d', nums, len(solutions), difficulty)

    if len(rows) < size:
        logger.warning('only %d of %d requested puzzles fit the difficulty mix', len(rows), size)

    df = pd.DataFrame(rows, columns=['numbers', 'solutions', 'difficulty', 'example'])
    df = df.sort_values('difficulty', kind='stable').reset_index(drop=True)
    df.insert(0, 'rank', range(1, len(df) + 1))
    return df


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='Challenge data tools for the 24 game.')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('convert', help='convert a challenge text file to JSON or CSV')
    p.add_argument('src')
    p.add_argument('dst')

    p = sub.add_parser('generate', help='generate a puzzle set with difficulty bands')
    p.add_argument('size', type=int)
    p.add_argument('dst')
    p.add_argument('--seed', type=int, default=42)
    args = parser.parse_args(argv)

    if args.command == 'convert':
        records = convert(args.src, args.dst)
        print(f'converted {len(records)} level(s) from {args.src} to {args.dst}')
    else:
        df = generate(args.size, seed=args.seed)
        df.to_csv(args.dst, index=False)
        counts = df['difficulty'].value_counts().sort_index()
        print(f'wrote {len(df)} puzzle(s) to {args.dst}')
        for band, n in counts.items():
            print(f'  difficulty {band}: {n}')


if __name__ == '__main__':
    main()
