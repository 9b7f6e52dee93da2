from game24.expression import BinOp, Expr, Num, is_num, is_op


def normalize(expr: Expr) -> Expr:
    """
    Rewrite an expression toward its preferred display form.

    Children are normalised first, then the top node is simplified until no
    rule applies.  Only a subset of the identities known to ``Equivalence``
    is used here: the goal is one deterministic rendering per candidate,
    deciding equivalence is left to the equivalence checker.

    Example
    -------
    >>> str(normalize(BinOp('-', Num(5), BinOp('-', Num(3), Num(2)))))
    '5+2-3'
    """
    if isinstance(expr, Num):
        return expr
    return _simplify(expr.op, normalize(expr.left), normalize(expr.right))


def _simplify(op: str, left: Expr, right: Expr) -> Expr:
    # both operands are already normalised

    # x*1, x/1, 1*x
    if is_num(right, 1) and op in ('*', '/'):
        return left
    if is_num(left, 1) and op == '*':
        return right

    # zeros; x/0 is left alone so the candidate still fails to evaluate
    if is_num(right, 0):
        if op in ('+', '-'):
            return left
        if op == '*':
            return Num(0)
    if is_num(left, 0):
        if op == '+':
            return right
        if op in ('*', '/'):
            return Num(0)

    # literal multiplicand goes first: x*5 -> 5*x
    if op == '*' and isinstance(right, Num) and not isinstance(left, Num):
        return BinOp('*', right, left)

    # a-(b-c) -> (a+c)-b
    if op == '-' and is_op(right, '-'):
        return _simplify('-', _simplify('+', left, right.right), right.left)

    # x/(y/z) -> (x*z)/y
    if op == '/' and is_op(right, '/'):
        return _simplify('/', _simplify('*', left, right.right), right.left)

    return BinOp(op, left, right)
