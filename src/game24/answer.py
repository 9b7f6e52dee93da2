import random
import re
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Sequence

import sympy
from sympy import SympifyError

from game24.constants import ANSWER_DIGITS, CARD_RANGE, CARD_VALUES, NUM_OPERANDS, TARGET

ALLOWED = re.compile(r'^[\d\s()+\-*/×÷AJQKajqk]+$')
CARD = re.compile(r'[AJQKajqk]')
OPERATOR_RUN = re.compile(r'[+\-*/×÷]\s*[+\-*/×÷]')


class AnswerError(ValueError):
    """The typed answer is not a usable arithmetic expression."""


@dataclass
class AnswerResult:
    ok: bool
    value: Optional[float]
    message: str


def deal(rng: Optional[random.Random] = None) -> List[int]:
    """Four random card values."""
    rng = rng or random
    return [rng.randint(*CARD_RANGE) for _ in range(NUM_OPERANDS)]


def to_arithmetic(text: str) -> str:
    """Card faces to numbers, × and ÷ to * and /."""
    text = CARD.sub(lambda m: str(CARD_VALUES[m.group().upper()]), text)
    return text.replace('×', '*').replace('÷', '/')


def numbers_used(text: str) -> List[int]:
    return [int(n) for n in re.findall(r'\d+', to_arithmetic(text))]


def evaluate_answer(text: str) -> float:
    if not text.strip() or not ALLOWED.match(text) or OPERATOR_RUN.search(text):
        raise AnswerError(f'not an arithmetic expression: {text!r}')
    try:
        value = sympy.sympify(to_arithmetic(text))
    except (SympifyError, TypeError, ZeroDivisionError) as e:
        raise AnswerError(f'cannot evaluate {text!r}') from e
    if not value.is_number or not value.is_finite:
        raise AnswerError(f'{text!r} has no finite value')
    return round(float(value), ANSWER_DIGITS)


def check_answer(numbers: Sequence[int], text: str, target=TARGET) -> AnswerResult:
    """
    Check a player's answer for the dealt ``numbers``.

    The answer must use exactly the dealt numbers and evaluate to ``target``
    (after rounding to ANSWER_DIGITS places).  Raises ``AnswerError`` when the
    text cannot be evaluated at all.
    """
    value = evaluate_answer(text)
    if Counter(numbers_used(text)) != Counter(numbers):
        return AnswerResult(False, value, 'use each of the given numbers exactly once')
    if value != target:
        return AnswerResult(False, value, f'{value:g} is not {target}')
    return AnswerResult(True, value, 'correct')
