# encoding: utf-8
from collections import namedtuple


class Variant(namedtuple("Variant", ["name", "grammar", "semantics"])):
    """
    One way of writing the expression language: a grammar, and the
    semantics that turn its matches into a Program
    """

    __slots__ = []

    def match(self, source):
        return self.grammar.match(source)

    def parse(self, source):
        """
        :return: THE Program, RAISE ParseException IF source DOES NOT MATCH
        """
        return self.semantics(self.grammar.match(source)).tree()
