import random

import pytest

from game24.answer import AnswerError, check_answer, deal, evaluate_answer, numbers_used, to_arithmetic


def test_correct_answers():
    assert check_answer([3, 3, 8, 8], '8/(3-8/3)').ok
    assert check_answer([1, 2, 3, 4], '(1+2+3)×4').ok
    assert check_answer([4, 1, 3, 2], ' 4 * (3 + 2 + 1) ').ok
    assert check_answer([1, 11, 12, 13], 'A*Q*(K-J)').ok


def test_wrong_numbers():
    result = check_answer([1, 2, 3, 4], '6*4')
    assert not result.ok
    assert result.value == 24
    assert 'exactly once' in result.message


def test_wrong_value():
    result = check_answer([1, 2, 3, 4], '1+2+3+4')
    assert not result.ok
    assert result.value == 10
    assert result.message == '10 is not 24'


def test_other_target():
    assert check_answer([1, 2, 3, 4], '1+2+3+4', target=10).ok


def test_rounding():
    assert evaluate_answer('1/3') == 0.333333
    assert evaluate_answer('12÷5') == 2.4


@pytest.mark.parametrize('text', ['', '   ', '1+', '(1+2', '8/0+1+2+3', '__import__("os")', '2**x'])
def test_bad_answers(text):
    with pytest.raises(AnswerError):
        check_answer([1, 2, 3, 8], text)


@pytest.mark.parametrize('text', ['2**3*3*1', '2 ** 3*3*1', '24*3//3', '2*3*+3*1'])
def test_operator_runs_rejected(text):
    with pytest.raises(AnswerError):
        check_answer([2, 3, 3, 1], text)


def test_card_faces():
    assert to_arithmetic('K×Q÷j') == '13*12/11'
    assert numbers_used('A+10+J') == [1, 10, 11]


def test_deal():
    rng = random.Random(7)
    for _ in range(20):
        cards = deal(rng)
        assert len(cards) == 4
        assert all(1 <= c <= 13 for c in cards)
