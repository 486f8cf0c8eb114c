# encoding: utf-8
"""
Turn a flat list of operands and operators into a nested tree of BinaryExpression

    first, ops, rest = 1, ("+", "*"), (2, 3)
    make_tree(first, ops, rest)  # -> (+ 1 (* 2 3))
"""
from collections import namedtuple

from mo_logs import Log

from expression_experiment.ast import BinaryExpression

LEFT_ASSOC = "left"
RIGHT_ASSOC = "right"

Operator = namedtuple("Operator", ["precedence", "assoc"])

# HIGHER PRECEDENCE BINDS TIGHTER
OPERATORS = {
    "+": Operator(1, LEFT_ASSOC),
    "-": Operator(1, LEFT_ASSOC),
    "*": Operator(2, LEFT_ASSOC),
    "/": Operator(2, LEFT_ASSOC),
    "**": Operator(3, RIGHT_ASSOC),
}


def lookup(op):
    operator = OPERATORS.get(op)
    if operator is None:
        Log.error("Unknown operator {{op|quote}}", op=op)
    return operator


def _check_lengths(ops, rest):
    if len(ops) != len(rest):
        Log.error(
            "Expecting one operand per operator, got {{num_ops}} operators and {{num_rest}} operands",
            num_ops=len(ops),
            num_rest=len(rest),
        )


def make_binary_expression(first, ops, rest):
    """
    FOLD OPERATORS OF THE SAME PRECEDENCE: LEFT TO RIGHT, OR RIGHT TO LEFT
    WHEN THE OPERATORS ARE RIGHT-ASSOCIATIVE

    :param first: THE FIRST OPERAND
    :param ops: THE OPERATORS, IN ORDER
    :param rest: THE OPERAND FOLLOWING EACH OPERATOR
    :return: THE EXPRESSION TREE
    """
    _check_lengths(ops, rest)
    if not ops:
        return first

    associativity = {lookup(op).assoc for op in ops}
    if len(associativity) > 1:
        Log.error("Can not fold operators of mixed associativity: {{ops}}", ops=" ".join(ops))

    if associativity == {LEFT_ASSOC}:
        acc = first
        for op, right in zip(ops, rest):
            acc = BinaryExpression(acc, op, right)
        return acc

    operands = (first,) + tuple(rest)
    acc = operands[-1]
    for i in range(len(ops) - 1, -1, -1):
        acc = BinaryExpression(operands[i], ops[i], acc)
    return acc


def make_tree(first, ops, rights):
    """
    PRECEDENCE CLIMBING OVER OPERATORS OF ANY PRECEDENCE

    :param first: THE FIRST OPERAND
    :param ops: THE OPERATORS, IN ORDER
    :param rights: THE OPERAND FOLLOWING EACH OPERATOR
    :return: THE EXPRESSION TREE
    """
    _check_lengths(ops, rights)
    for op in ops:
        lookup(op)
    tree, _ = _climb(first, ops, rights, 0, 0)
    return tree


def _climb(left, ops, rights, index, floor):
    # CONSUME ops[index:] WHILE THEIR PRECEDENCE IS AT LEAST floor
    # RETURN THE TREE, AND THE INDEX OF THE FIRST OPERATOR NOT CONSUMED
    while index < len(ops) and OPERATORS[ops[index]].precedence >= floor:
        op = ops[index]
        right = rights[index]
        index += 1
        while index < len(ops) and _binds_tighter(ops[index], op):
            right, index = _climb(right, ops, rights, index, OPERATORS[ops[index]].precedence)
        left = BinaryExpression(left, op, right)
    return left, index


def _binds_tighter(next_op, op):
    """
    :return: True IF next_op TAKES THE OPERAND TO ITS LEFT AWAY FROM op
    """
    a, b = OPERATORS[next_op], OPERATORS[op]
    if a.precedence > b.precedence:
        return True
    return a.precedence == b.precedence and b.assoc == RIGHT_ASSOC
