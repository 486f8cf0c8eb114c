# encoding: utf-8
"""
PEG style: no left recursion, every level is a first operand followed by
a repetition of (operator operand).  Precedence still comes from the
nesting of the rules; associativity is decided by the operator table when
the lists are folded into a tree.
"""
from mo_grammar import Apply, Grammar, Literal, Semantics, alnum, digit, end, letter

from expression_experiment.ast import Identifier, IntegerLiteral, Program
from expression_experiment.operators import make_binary_expression
from expression_experiment.variant import Variant

Exp, Term, Factor, Primary = map(Apply, ["Exp", "Term", "Factor", "Primary"])
addop, mulop, expop, number, identifier = map(Apply, ["addop", "mulop", "expop", "number", "id"])

grammar = Grammar(
    "Iterative",
    Program=Exp + end,
    Exp=Term + (addop + Term)[...],
    Term=Factor + (mulop + Factor)[...],
    Factor=Primary + (expop + Primary)[...],
    Primary=("(" + Exp + ")").as_case("parens") | number | identifier,
    addop=Literal("+") | "-",
    mulop=Literal("*") + ~Literal("*") | "/",
    expop=Literal("**"),
    id=letter + alnum[...],
    number=digit[1, ...],
)

semantics = Semantics(grammar).add_operation(
    "tree",
    {
        "Program": lambda body, _: Program(body),
        "Exp": make_binary_expression,
        "Term": make_binary_expression,
        "Factor": make_binary_expression,
        "Primary_parens": lambda _open, expression, _close: expression,
        "number": lambda digits: IntegerLiteral.from_digits("".join(digits)),
        "id": lambda first, rest: Identifier(first + "".join(rest)),
    },
)

variant = Variant("iterative", grammar, semantics)
