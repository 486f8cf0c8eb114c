# encoding: utf-8
from mo_grammar import engine
from mo_grammar.core import ParserElement
from mo_grammar.nodes import TerminalNode
from mo_grammar.utils import Log, quote


class Token(ParserElement):
    pass


class Empty(Token):
    """An empty token, will always match, and produces no nodes."""

    def __init__(self):
        Token.__init__(self)
        self.parser_name = "Empty"
        self.parser_config.skipWhitespace = False

    def arity(self):
        return 0

    def parseImpl(self, state, loc):
        return loc, []


class AnyChar(Token):
    """
    Match any single character
    """

    def __init__(self):
        Token.__init__(self)
        self.parser_name = "any character"

    def parseImpl(self, state, loc):
        string = state.string
        if loc >= len(string):
            state.fail(loc, self)
        return loc + 1, [TerminalNode(string, loc, loc + 1)]


class Literal(Token):
    """Token to exactly match a specified string."""

    def __init__(self, matchString):
        Token.__init__(self)
        if len(matchString) == 0:
            Log.error("Literal must be at least one character")
        self.parser_config.match = matchString

    def parseImpl(self, state, start):
        match = self.parser_config.match
        string = state.string
        if string.startswith(match, start):
            end = start + len(match)
            return end, [TerminalNode(string, start, end)]
        state.fail(start, self)

    def __str__(self):
        return self.parser_name or quote(self.parser_config.match)


class Char(Token):
    """
    Represent one character, either from the given charset, or accepted by test

    Example::

        digit = Char("0123456789")
        letter = Char(test=str.isalpha).set_parser_name("a letter")
    """

    def __init__(self, charset=None, test=None):
        Token.__init__(self)
        if charset is None and test is None:
            Log.error("expecting a charset, or a test")
        if charset is not None:
            self.parser_config.charset = "".join(sorted(set(charset)))
        self.parser_config.test = test

    def accepts(self, char):
        charset = self.parser_config.charset
        if charset and char not in charset:
            return False
        test = self.parser_config.test
        if test and not test(char):
            return False
        return True

    def parseImpl(self, state, start):
        string = state.string
        if start < len(string) and self.accepts(string[start]):
            return start + 1, [TerminalNode(string, start, start + 1)]
        state.fail(start, self)

    def __str__(self):
        if self.parser_name:
            return self.parser_name
        if self.parser_config.charset:
            return "[" + self.parser_config.charset + "]"
        return self.parser_config.test.__name__


class StringEnd(Token):
    """
    Matches if current position is at the end of the parse string
    """

    def __init__(self):
        Token.__init__(self)
        self.parser_name = "end of text"

    def parseImpl(self, state, start):
        end = len(state.string)
        if start >= end:
            return end, [TerminalNode(state.string, end, end)]
        state.fail(start, self)


# export
engine.Literal = Literal
