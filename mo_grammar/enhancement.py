# encoding: utf-8
from copy import copy

from mo_grammar import core, engine
from mo_grammar.core import ParserElement
from mo_grammar.exceptions import GrammarException, ParseException
from mo_grammar.nodes import IterationNode, NonterminalNode
from mo_grammar.utils import MAX_INT


class ParseElementEnhance(ParserElement):
    """Abstract subclass of `ParserElement`, for combining and
    post-processing parsed tokens.
    """

    def __init__(self, expr):
        ParserElement.__init__(self)
        self.parser_config.skipWhitespace = False  # expr SKIPS FOR ITSELF
        self.expr = engine.CURRENT.normalize(expr)

    def arity(self):
        return self.expr.arity()

    def elements(self):
        return [self.expr]

    def substitute(self, env):
        expr = self.expr.substitute(env)
        if expr is self.expr:
            return self
        output = copy(self)
        output.expr = expr
        return output

    def parseImpl(self, state, loc):
        return self.expr._parse(state, loc)

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        return f"{self.__class__.__name__}:({self.expr})"


class NotAny(ParseElementEnhance):
    """Lookahead to disallow matching with the given parse expression.
    ``NotAny`` does *not* advance the parsing position within the
    input string, it only verifies that the specified parse expression
    does *not* match at the current position.  ``NotAny`` always returns
    no nodes.  May be constructed using the '~' operator.

    Example::

        # A "*" THAT IS NOT THE START OF "**"
        mulop = Literal("*") + ~Literal("*") | "/"
    """

    def arity(self):
        return 0

    def parseImpl(self, state, start):
        with state.quietly():
            try:
                self.expr._parse(state, start)
            except ParseException:
                return start, []
        raise ParseException(state.string, start)

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        return "~" + str(self.expr)


class Many(ParseElementEnhance):
    def __init__(self, expr, min_match=0, max_match=MAX_INT):
        """
        MATCH expr SOME NUMBER OF TIMES
        :param expr: THE EXPRESSION TO MATCH
        :param min_match: MINIMUM MATCHES REQUIRED FOR SUCCESS
        :param max_match: MAXIMUM MATCHES CONSUMED
        """
        super(Many, self).__init__(expr)
        self.min_match = min_match
        self.max_match = max_match

    def parseImpl(self, state, start):
        # ONE COLUMN PER NODE THE expr PRODUCES
        columns = [[] for _ in range(self.expr.arity())]
        num = 0
        end = start
        while num < self.max_match:
            try:
                next_end, nodes = self.expr._parse(state, end)
            except ParseException:
                break
            for column, node in zip(columns, nodes):
                column.append(node)
            num += 1
            if next_end == end:
                # NO PROGRESS, MATCHING AGAIN WILL NOT CHANGE THAT
                break
            end = next_end

        if num < self.min_match:
            raise ParseException(state.string, start)
        return end, [IterationNode(state.string, start, end, column) for column in columns]


class OneOrMore(Many):
    """Repetition of one or more of the given expression.

    Example::

        number = digit[1, ...]
    """

    def __init__(self, expr):
        Many.__init__(self, expr, min_match=1, max_match=MAX_INT)

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        return "(" + str(self.expr) + ")+"


class ZeroOrMore(Many):
    """Optional repetition of zero or more of the given expression.

    Example::

        Exp = Term + (addop + Term)[...]
    """

    def __init__(self, expr):
        Many.__init__(self, expr, min_match=0, max_match=MAX_INT)

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        return "(" + str(self.expr) + ")*"


class Optional(Many):
    """Optional matching of the given expression; each column holds zero or one node."""

    def __init__(self, expr):
        Many.__init__(self, expr, min_match=0, max_match=1)

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        return "(" + str(self.expr) + ")?"


class Case(ParseElementEnhance):
    """
    A named alternative of a rule.  Matches like expr, but wraps the
    nodes in a single node named ``<rule>_<name>``.  The rule name is
    bound when the :class:`Grammar` is built.
    """

    def __init__(self, name, expr):
        ParseElementEnhance.__init__(self, expr)
        self.case_name = name
        self.node_name = None

    def bind(self, rule_name):
        node_name = rule_name + "_" + self.case_name
        if self.node_name is not None and self.node_name != node_name:
            raise GrammarException(
                f"Case {self.case_name} is already used as {self.node_name}, can not reuse in {rule_name}"
            )
        self.node_name = node_name

    def arity(self):
        return 1

    def parseImpl(self, state, start):
        end, nodes = self.expr._parse(state, start)
        return end, [NonterminalNode(self.node_name, state.string, start, end, nodes)]

    def __str__(self):
        return f"{self.expr}  --{self.case_name}"


class Apply(ParserElement):
    """
    Application of a rule, by name.  Parameterized rules are given their
    arguments here.

    Example::

        Exp, Term = map(Apply, ["Exp", "Term"])
        Apply("NonemptyListOf", Term, Apply("addop"))
    """

    def __init__(self, rule_name, *args):
        ParserElement.__init__(self)
        self.rule_name = rule_name
        self.args = tuple(engine.CURRENT.normalize(a) for a in args)

    def elements(self):
        return list(self.args)

    def substitute(self, env):
        args = tuple(a.substitute(env) for a in self.args)
        if all(a is b for a, b in zip(args, self.args)):
            return self
        return Apply(self.rule_name, *args)

    def parseImpl(self, state, loc):
        rule = state.grammar.get_rule(self.rule_name)
        debug = state.grammar.debug_actions
        args = tuple(a.substitute(state.env) for a in self.args)

        debug.TRY(state.string, loc, self)
        try:
            if state.syntactic and not rule.syntactic:
                # REPORT A FAILED LEXICAL RULE BY ITS NAME, NOT BY ITS CHARACTERS
                with state.quietly():
                    try:
                        end, node = state.apply(rule, args, loc)
                    except ParseException as cause:
                        failure = cause
                    else:
                        failure = None
                if failure is not None:
                    state.expect(loc, rule.description)
                    raise failure
            else:
                end, node = state.apply(rule, args, loc)
        except ParseException as cause:
            debug.FAIL(state.string, loc, self, cause)
            raise
        debug.MATCH(state.string, loc, end, self, node)
        return end, [node]

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        if self.args:
            return self.rule_name + "<" + ", ".join(str(a) for a in self.args) + ">"
        return self.rule_name


class Param(ParserElement):
    """
    Reference to a parameter of the enclosing (parameterized) rule

    Example::

        Rule("NonemptyListOf", Param("elem") + (Param("sep") + Param("elem"))[...], params=["elem", "sep"])
    """

    def __init__(self, name):
        ParserElement.__init__(self)
        self.parser_config.skipWhitespace = False  # THE ARGUMENT SKIPS FOR ITSELF
        self.param_name = name

    def substitute(self, env):
        return env.get(self.param_name, self)

    def parseImpl(self, state, loc):
        return state.env[self.param_name]._parse(state, loc)

    def __str__(self):
        return self.param_name


# export
core.NotAny = NotAny
core.ZeroOrMore = ZeroOrMore
core.OneOrMore = OneOrMore
core.Optional = Optional
core.Case = Case
