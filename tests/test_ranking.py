from game24.expression import BinOp, Num
from game24.ranking import equivalent_forms, preference, rank_key, rank_solutions


def test_preference():
    assert preference(BinOp('/', BinOp('*', Num(2), Num(3)), Num(4))) == 3
    assert preference(BinOp('+', Num(2), Num(3))) == 0
    assert preference(Num(24)) == 0


def test_rank_key_prefers_multiplication_then_simplicity():
    mult = BinOp('*', Num(4), Num(6))
    div = BinOp('/', Num(48), Num(2))
    plus = BinOp('+', Num(20), Num(4))
    longer = BinOp('*', BinOp('+', Num(1), Num(3)), Num(6))
    assert sorted([plus, div, longer, mult], key=rank_key) == [mult, longer, div, plus]


def test_forms_commute_and_negate():
    forms = {str(f) for f in equivalent_forms(BinOp('+', Num(1), Num(2)))}
    assert '2+1' in forms
    forms = {str(f) for f in equivalent_forms(BinOp('-', Num(5), Num(3)))}
    assert '5+-3' in forms


def test_forms_redistribute_quotient():
    expr = BinOp('/', BinOp('*', Num(8), Num(6)), Num(2))
    forms = equivalent_forms(expr)
    shapes = {(f.op, f.right.op if isinstance(f.right, BinOp) else None) for f in forms}
    assert ('*', '/') in shapes
    assert '6*8/2' in {str(f) for f in forms}


def test_forms_reach_subtrees():
    expr = BinOp('-', BinOp('+', Num(1), Num(2)), Num(3))
    forms = {str(f) for f in equivalent_forms(expr)}
    assert '2+1-3' in forms
    assert '1+2+-3' in forms


def test_literal_has_no_forms():
    assert equivalent_forms(Num(3)) == []


def test_equivalent_candidates_collapse():
    out = rank_solutions([BinOp('*', Num(4), Num(6)), BinOp('*', Num(6), Num(4))], [4, 6])
    assert len(out) == 1


def test_better_form_replaces_representative():
    worse = BinOp('/', BinOp('/', Num(48), Num(2)), Num(2))
    better = BinOp('/', Num(48), BinOp('*', Num(2), Num(2)))
    out = rank_solutions([worse, better], [48, 2, 2])
    assert [str(e) for e in out] == ['48/(2*2)']


def test_sorted_by_preference():
    out = rank_solutions([BinOp('+', Num(4), Num(6)), BinOp('*', Num(4), Num(6))], [4, 6])
    assert [e.op for e in out] == ['*', '+']


def test_forms_that_lose_a_number_are_dropped():
    # normalising drops the *1, so nothing uses the 1 any more
    assert rank_solutions([BinOp('*', BinOp('*', Num(4), Num(6)), Num(1))], [4, 6, 1]) == []
    assert rank_solutions([], [1, 2, 3, 4]) == []
