# encoding: utf-8
from mo_grammar.utils import col, line, lineno, quote


class ParseBaseException(Exception):
    """
    base exception class for all parsing runtime exceptions

    :param string: THE TEXT BEING MATCHED
    :param loc: POSITION OF THE FAILURE
    :param expected: DESCRIPTIONS OF WHAT WOULD HAVE MATCHED AT loc
    :param msg: OPTIONAL MESSAGE, USED INSTEAD OF THE expected LIST
    """

    def __init__(self, string, loc=0, expected=None, msg=None):
        Exception.__init__(self, string, loc, expected, msg)
        self.string = string
        self.loc = loc
        self.expected = list(expected or [])
        self.msg = msg

    @property
    def lineno(self):
        return lineno(self.loc, self.string)

    @property
    def col(self):
        return col(self.loc, self.string)

    @property
    def line(self):
        return line(self.loc, self.string)

    @property
    def found(self):
        if self.loc >= len(self.string):
            return "end of text"
        return quote(self.string[self.loc])

    @property
    def message(self):
        if self.msg:
            head = self.msg
        elif self.expected:
            head = "Expecting " + " or ".join(self.expected)
        else:
            head = "Not expected"
        return f"{head}, found {self.found} (at char {self.loc}), (line:{self.lineno}, col:{self.col})"

    def __str__(self):
        return self.message

    def __repr__(self):
        return f"{self.__class__.__name__}({self.message!r})"


class ParseException(ParseBaseException):
    """
    Exception thrown when the text does not match the grammar

    Example::

        result = grammar.match("x +")
        print(result.exception)
        # -> Expecting "(" or number or id, found end of text (at char 3), (line:1, col:4)
    """

    pass


class GrammarException(Exception):
    """
    Raised while building a Grammar, when the rules do not fit together
    """

    pass
