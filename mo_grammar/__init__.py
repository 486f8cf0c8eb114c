# encoding: utf-8
# IMPORT ORDER MATTERS: EACH MODULE EXPORTS ITS CLASSES INTO THE ONES BEFORE IT
from mo_grammar.engine import Engine
from mo_grammar.core import ParserElement
from mo_grammar.tokens import AnyChar, Char, Empty, Literal, StringEnd, Token
from mo_grammar.expressions import And, MatchFirst, ParseExpression
from mo_grammar.enhancement import (
    Apply,
    Case,
    Many,
    NotAny,
    OneOrMore,
    Optional,
    Param,
    ParseElementEnhance,
    ZeroOrMore,
)
from mo_grammar.grammar import BUILT_IN_RULES, Grammar, MatchResult, Rule
from mo_grammar.semantics import Semantics
from mo_grammar.exceptions import GrammarException, ParseBaseException, ParseException
from mo_grammar.nodes import IterationNode, NonterminalNode, TerminalNode
from mo_grammar.utils import Log

# APPLICATIONS OF THE BUILT-IN RULES
any_char = Apply("any")
end = Apply("end")
letter = Apply("letter")
lower = Apply("lower")
upper = Apply("upper")
digit = Apply("digit")
hex_digit = Apply("hexDigit")
alnum = Apply("alnum")
space = Apply("space")

__all__ = [
    "And",
    "AnyChar",
    "Apply",
    "BUILT_IN_RULES",
    "Case",
    "Char",
    "Empty",
    "Engine",
    "Grammar",
    "GrammarException",
    "IterationNode",
    "Literal",
    "Log",
    "Many",
    "MatchFirst",
    "MatchResult",
    "NonterminalNode",
    "NotAny",
    "OneOrMore",
    "Optional",
    "Param",
    "ParseBaseException",
    "ParseElementEnhance",
    "ParseException",
    "ParseExpression",
    "ParserElement",
    "Rule",
    "Semantics",
    "StringEnd",
    "TerminalNode",
    "Token",
    "ZeroOrMore",
    "alnum",
    "any_char",
    "digit",
    "end",
    "hex_digit",
    "letter",
    "lower",
    "space",
    "upper",
]
