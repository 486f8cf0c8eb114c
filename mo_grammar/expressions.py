# encoding: utf-8
from copy import copy

from mo_grammar import core, engine
from mo_grammar.core import ParserElement
from mo_grammar.exceptions import ParseException, GrammarException


class ParseExpression(ParserElement):
    """Abstract subclass of ParserElement, for combining and
    post-processing parsed tokens.
    """

    def __init__(self, exprs):
        super(ParseExpression, self).__init__()
        self.parser_config.skipWhitespace = False  # SUB-EXPRESSIONS SKIP FOR THEMSELVES

        # collapse nested And's of the form And(And(a, b), c) to And(a, b, c)
        # (likewise for MatchFirst's)
        acc = []
        for e in exprs:
            e = engine.CURRENT.normalize(e)
            if e.__class__ is self.__class__ and not e.parser_name:
                acc.extend(e.exprs)
            else:
                acc.append(e)
        self.exprs = acc

    def elements(self):
        return self.exprs

    def substitute(self, env):
        exprs = [e.substitute(env) for e in self.exprs]
        if all(a is b for a, b in zip(exprs, self.exprs)):
            return self
        output = copy(self)
        output.exprs = exprs
        return output


class And(ParseExpression):
    """
    Requires all given :class:`ParseExpression` s to be found in the given order.
    Expressions may be separated by whitespace, if inside a syntactic rule.
    May be constructed using the ``'+'`` operator.

    Example::

        Exp + addop + Term
    """

    def arity(self):
        return sum(e.arity() for e in self.exprs)

    def parseImpl(self, state, loc):
        acc = []
        for e in self.exprs:
            loc, nodes = e._parse(state, loc)
            acc.extend(nodes)
        return loc, acc

    def __str__(self):
        if self.parser_name:
            return self.parser_name

        return " ".join(str(e) for e in self.exprs)


class MatchFirst(ParseExpression):
    """Requires that at least one :class:`ParseExpression` is found. If
    two expressions match, the first one listed is the one that will
    match. May be constructed using the ``'|'`` operator.

    All alternatives must produce the same number of nodes; this is checked
    when the expression is used in a :class:`Grammar`.

    Example::

        # watch the order of expressions to match
        binop = Literal("**") | "+" | "-" | "*" | "/"
    """

    def arity(self):
        # ALL ALTERNATIVES AGREE, ONCE THE GRAMMAR IS VALIDATED
        return self.exprs[0].arity() if self.exprs else 0

    def check_arity(self, rule_name):
        arities = [e.arity() for e in self.exprs]
        if len(set(arities)) > 1:
            raise GrammarException(
                f"Alternatives of {rule_name} have different arity: "
                + ", ".join(f"{e} ({a})" for e, a in zip(self.exprs, arities))
            )

    def parseImpl(self, state, loc):
        for e in self.exprs:
            try:
                return e._parse(state, loc)
            except ParseException:
                pass

        # THE ALTERNATIVES ALREADY RECORDED WHAT THEY EXPECTED
        raise ParseException(state.string, loc)

    def __str__(self):
        if self.parser_name:
            return self.parser_name

        return " | ".join(str(e) for e in self.exprs)


# export
core.And = And
core.MatchFirst = MatchFirst
