# encoding: utf-8
from expression_experiment import flat, iterative, left_recursive, parameterized
from expression_experiment.ast import BinaryExpression, Identifier, IntegerLiteral, Program
from expression_experiment.variant import Variant

VARIANTS = [
    left_recursive.variant,
    iterative.variant,
    parameterized.variant,
    flat.variant,
]
