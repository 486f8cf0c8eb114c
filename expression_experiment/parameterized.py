# encoding: utf-8
"""
Same shape as the iterative grammar, but every level is an application of
the built-in NonemptyListOf<elem, sep>, so one action covers all three.
"""
from mo_grammar import Apply, Grammar, Literal, Semantics, alnum, digit, end, letter

from expression_experiment.ast import Identifier, IntegerLiteral, Program
from expression_experiment.operators import make_binary_expression
from expression_experiment.variant import Variant

Exp, Term, Factor, Primary = map(Apply, ["Exp", "Term", "Factor", "Primary"])
addop, mulop, expop, number, identifier = map(Apply, ["addop", "mulop", "expop", "number", "id"])

grammar = Grammar(
    "Parameterized",
    Program=Exp + end,
    Exp=Apply("NonemptyListOf", Term, addop),
    Term=Apply("NonemptyListOf", Factor, mulop),
    Factor=Apply("NonemptyListOf", Primary, expop),
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
        "NonemptyListOf": make_binary_expression,
        "Primary_parens": lambda _open, expression, _close: expression,
        "number": lambda digits: IntegerLiteral.from_digits("".join(digits)),
        "id": lambda first, rest: Identifier(first + "".join(rest)),
    },
)

variant = Variant("parameterized", grammar, semantics)
