# encoding: utf-8
"""
The lightest grammar: one flat list of operands and operators.  Precedence
and associativity are both left to the semantics, which climb the operator
table to build the tree.
"""
from mo_grammar import Apply, Grammar, Literal, Semantics, alnum, digit, end, letter

from expression_experiment.ast import Identifier, IntegerLiteral, Program
from expression_experiment.operators import make_tree
from expression_experiment.variant import Variant

Exp, Primary = map(Apply, ["Exp", "Primary"])
binop, number, identifier = map(Apply, ["binop", "number", "id"])

grammar = Grammar(
    "Flat",
    Program=Exp + end,
    Exp=Primary + (binop + Primary)[...],
    Primary=("(" + Exp + ")").as_case("parens") | number | identifier,
    # "**" BEFORE "*"
    binop=Literal("**") | "+" | "-" | "*" | "/",
    id=letter + alnum[...],
    number=digit[1, ...],
)

semantics = Semantics(grammar).add_operation(
    "tree",
    {
        "Program": lambda body, _: Program(body),
        "Exp": make_tree,
        "Primary_parens": lambda _open, expression, _close: expression,
        "number": lambda digits: IntegerLiteral.from_digits("".join(digits)),
        "id": lambda first, rest: Identifier(first + "".join(rest)),
    },
)

variant = Variant("flat", grammar, semantics)
