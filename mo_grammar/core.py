# encoding: utf-8
from mo_dots import Data
from mo_logs import Log

from mo_grammar import engine

# import later
(
    And,
    MatchFirst,
    NotAny,
    ZeroOrMore,
    OneOrMore,
    Optional,
    Case,
) = [None] * 7


class ParserElement(object):
    """Abstract base level parser element class.

    Every element matches at a location and returns ``(end, nodes)``, where
    ``nodes`` is the list of concrete syntax tree nodes it produced.  The
    length of that list is the element's ``arity()``, and it does not depend
    on the input.
    """

    def __init__(self):
        self.parser_name = ""
        self.parser_config = Data()
        self.parser_config.skipWhitespace = True  # ONLY WHILE INSIDE A SYNTACTIC RULE

    def set_parser_name(self, name):
        """
        Define name for this expression, makes debugging and exception messages clearer.
        """
        self.parser_name = name
        return self

    def arity(self):
        return 1

    def elements(self):
        """
        :return: THE DIRECT SUB-ELEMENTS, FOR WALKING THE GRAMMAR
        """
        return []

    def substitute(self, env):
        """
        :param env: MAP FROM PARAMETER NAME TO THE ELEMENT IT IS BOUND TO
        :return: THIS ELEMENT, WITH ALL Param REPLACED
        """
        return self

    def parseImpl(self, state, loc):
        Log.error("{{type}} does not implement parseImpl()", type=self.__class__.__name__)

    def _parse(self, state, loc):
        if state.syntactic and self.parser_config.skipWhitespace:
            loc = state.skip(loc)
        return self.parseImpl(state, loc)

    def as_case(self, name):
        """
        Mark this alternative as a named case of the rule it is defined in.
        The case gets its own node, and its own semantic action,
        named ``<rule>_<name>``

        Example::

            Exp=(Exp + addop + Term).as_case("binary") | Term
        """
        return Case(name, self)

    def __add__(self, other):
        """
        Implementation of + operator - returns :class:`And`
        """
        return And([self, engine.CURRENT.normalize(other)])

    def __radd__(self, other):
        return engine.CURRENT.normalize(other) + self

    def __or__(self, other):
        """
        Implementation of | operator - returns :class:`MatchFirst`
        """
        return MatchFirst([self, engine.CURRENT.normalize(other)])

    def __ror__(self, other):
        return engine.CURRENT.normalize(other) | self

    def __invert__(self):
        """
        Implementation of ~ operator - returns :class:`NotAny`
        """
        return NotAny(self)

    def __getitem__(self, key):
        """
        use ``[]`` indexing notation as a short form for expression repetition:
         - ``expr[...]`` and ``expr[0, ...]`` are equivalent to ``ZeroOrMore(expr)``
         - ``expr[1, ...]`` is equivalent to ``OneOrMore(expr)``
         - ``expr[0, 1]`` is equivalent to ``Optional(expr)``
        """
        if key is Ellipsis or key == (0, Ellipsis):
            return ZeroOrMore(self)
        if key == (1, Ellipsis):
            return OneOrMore(self)
        if key == (0, 1):
            return Optional(self)
        Log.error("Can not repeat by {{key}}, use [...], [1, ...] or [0, 1]", key=repr(key))

    def __iter__(self):
        # must implement __iter__ to override legacy use of sequential access to __getitem__ to
        # iterate over a sequence
        raise TypeError("%r object is not iterable" % self.__class__.__name__)

    def __str__(self):
        return self.parser_name

    def __repr__(self):
        return str(self)

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return id(self)


# export
engine.ParserElement = ParserElement
