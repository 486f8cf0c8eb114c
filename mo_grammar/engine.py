# encoding: utf-8
from collections import namedtuple

from mo_logs import Log

from mo_grammar.utils import col, lineno

ParserElement, Literal = [None] * 2

CURRENT = None

# PYTHON FRAMES A MATCH MAY NEED FOR EACH CHARACTER OF INPUT
FRAMES_PER_CHAR = 64
MAX_RECURSION = 100_000


class Engine:
    """
    HOLDS THE WHITESPACE, DEBUG AND RECURSION SETTINGS FOR THE GRAMMARS BUILT
    WHILE IT IS CURRENT.  A GRAMMAR COPIES THE SETTINGS WHEN IT IS BUILT, SO
    CONFIGURE THE ENGINE FIRST; LATER CHANGES DO NOT REACH EXISTING GRAMMARS

    Example::

        with Engine(white=" \t"):
            grammar = Grammar("NoNewlines", ...)
    """

    def __init__(self, white=" \n\r\t"):
        global CURRENT
        self.debugActions = DebugActions(noop, noop, noop)
        self.recursion_limit = MAX_RECURSION
        self.set_whitespace(white)
        self.previous = CURRENT  # WE MAINTAIN A STACK OF ENGINES
        CURRENT = self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        global CURRENT
        CURRENT = self.previous
        self.previous = None

    def release(self):
        """
        ENSURE self IS NOT CURRENT
        """
        global CURRENT
        if not self.previous:
            Log.error("expecting engine to be released just once")

        CURRENT = self.previous
        self.previous = None

    def normalize(self, expr):
        if isinstance(expr, str):
            return Literal(expr)
        if not isinstance(expr, ParserElement):
            Log.error(
                "expecting string, or ParserElement, not {{type}}",
                type=expr.__class__.__name__,
            )
        return expr

    def set_debug_actions(self, startAction=None, successAction=None, exceptionAction=None):
        """
        Log every rule application while matching, for grammars built after this call.
        Setup only: grammars that already exist keep the actions they were built with.
        """
        self.debugActions = DebugActions(
            startAction or _defaultStartDebugAction,
            successAction or _defaultSuccessDebugAction,
            exceptionAction or _defaultExceptionDebugAction,
        )
        return self

    def set_recursion_limit(self, limit):
        """
        The most Python frames a match, or its semantic actions, may ask for.
        Each match raises the interpreter limit to what its input needs, up to
        this, and puts it back when done.
        """
        self.recursion_limit = limit
        return self

    def set_whitespace(self, chars):
        self.white_chars = "".join(sorted(set(chars)))
        return self


def _defaultStartDebugAction(string, loc, expr):
    Log.note(
        "Match {{expr}} at loc {{loc}} (line:{{line}}, col:{{col}})",
        expr=str(expr),
        loc=loc,
        line=lineno(loc, string),
        col=col(loc, string),
    )


def _defaultSuccessDebugAction(string, start, end, expr, node):
    Log.note("Matched {{expr}} -> {{text|quote}}", expr=str(expr), text=string[start:end])


def _defaultExceptionDebugAction(string, loc, expr, exc):
    Log.note("Failed {{expr}} at loc {{loc}}", expr=str(expr), loc=loc)


def noop(*args):
    return


DebugActions = namedtuple("DebugActions", ["TRY", "MATCH", "FAIL"])

Engine()
