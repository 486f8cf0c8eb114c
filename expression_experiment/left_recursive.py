# encoding: utf-8
"""
The classic left-recursive grammar.  Precedence comes from the nesting of
Exp, Term and Factor; left associativity from the left recursion of Exp and
Term; right associativity of ** from the right recursion of Factor.  Every
binary case builds its BinaryExpression directly.
"""
from mo_grammar import Apply, Grammar, Literal, Semantics, alnum, digit, end, letter

from expression_experiment.ast import BinaryExpression, Identifier, IntegerLiteral, Program
from expression_experiment.variant import Variant

Exp, Term, Factor, Primary = map(Apply, ["Exp", "Term", "Factor", "Primary"])
addop, mulop, expop, number, identifier = map(Apply, ["addop", "mulop", "expop", "number", "id"])

grammar = Grammar(
    "LeftRecursive",
    Program=Exp + end,
    Exp=(Exp + addop + Term).as_case("binary") | Term,
    Term=(Term + mulop + Factor).as_case("binary") | Factor,
    Factor=(Primary + expop + Factor).as_case("binary") | Primary,
    Primary=("(" + Exp + ")").as_case("parens") | number | identifier,
    addop=Literal("+") | "-",
    mulop=Literal("*") + ~Literal("*") | "/",
    expop=Literal("**"),
    id=letter + alnum[...],
    number=digit[1, ...],
)


def binary(left, op, right):
    return BinaryExpression(left, op, right)


semantics = Semantics(grammar).add_operation(
    "tree",
    {
        "Program": lambda body, _: Program(body),
        "Exp_binary": binary,
        "Term_binary": binary,
        "Factor_binary": binary,
        "Primary_parens": lambda _open, expression, _close: expression,
        "number": lambda digits: IntegerLiteral.from_digits("".join(digits)),
        "id": lambda first, rest: Identifier(first + "".join(rest)),
    },
)

variant = Variant("left-recursive", grammar, semantics)
