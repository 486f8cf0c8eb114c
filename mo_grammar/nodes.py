# encoding: utf-8


class Node(object):
    """
    A node of the concrete syntax tree.  Nodes refer to the matched string
    by position, so the tree is cheap to build even when the match backtracks.
    """

    __slots__ = ["string", "start", "end", "children"]

    def __init__(self, string, start, end, children=()):
        self.string = string
        self.start = start
        self.end = end
        self.children = tuple(children)

    @property
    def source(self):
        return self.string[self.start : self.end]

    def arity(self):
        return len(self.children)

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, item):
        return self.children[item]


class TerminalNode(Node):
    __slots__ = []

    name = "_terminal"

    def __repr__(self):
        return f"Terminal({self.source!r})"


class NonterminalNode(Node):
    """
    ONE PER RULE APPLICATION, OR PER CASE; name IS THE RULE NAME, OR <RULE>_<CASE>
    """

    __slots__ = ["name"]

    def __init__(self, name, string, start, end, children):
        Node.__init__(self, string, start, end, children)
        self.name = name

    def __repr__(self):
        return f"{self.name}({', '.join(repr(c) for c in self.children)})"


class IterationNode(Node):
    """
    ONE COLUMN OF A REPETITION: (addop Term)* PRODUCES ONE IterationNode
    FOR ALL THE addop, AND ONE FOR ALL THE Term
    """

    __slots__ = []

    name = "_iter"

    def __repr__(self):
        return f"[{', '.join(repr(c) for c in self.children)}]"
