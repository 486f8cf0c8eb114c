# encoding: utf-8
import inspect
import sys
from contextlib import contextmanager

from mo_logs import Log

MAX_INT = sys.maxsize

digits = "0123456789"
hexdigits = digits + "abcdefABCDEF"


def col(loc, strg):
    """Returns current column within a string, counting newlines as line separators.
    The first column is number 1.
    """
    s = strg
    return 1 if 0 < loc < len(s) and s[loc - 1] == "\n" else loc - s.rfind("\n", 0, loc)


def lineno(loc, strg):
    """Returns current line number within a string, counting newlines as line separators.
    The first line is number 1.
    """
    return strg.count("\n", 0, loc) + 1


def line(loc, strg):
    """Returns the line of text containing loc within a string, counting newlines as line separators.
    """
    lastCR = strg.rfind("\n", 0, loc)
    nextCR = strg.find("\n", loc)
    if nextCR >= 0:
        return strg[lastCR + 1 : nextCR]
    else:
        return strg[lastCR + 1 :]


def quote(value):
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def is_syntactic(rule_name):
    """
    RULES STARTING WITH AN UPPERCASE LETTER SKIP WHITESPACE BETWEEN THEIR PARTS
    """
    return rule_name[:1].isupper()


def positional_range(func):
    """
    :return: (min, max) NUMBER OF POSITIONAL ARGUMENTS func ACCEPTS, max IS MAX_INT FOR *args
    """
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return 0, MAX_INT

    required, total = 0, 0
    for p in params:
        if p.kind == p.VAR_POSITIONAL:
            return required, MAX_INT
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            total += 1
            if p.default is p.empty:
                required += 1
    return required, total


@contextmanager
def recursion_limit(limit):
    """
    RAISE THE INTERPRETER RECURSION LIMIT TO limit, IF IT IS LOWER, UNTIL THE BLOCK IS DONE
    """
    previous = sys.getrecursionlimit()
    if limit <= previous:
        yield
        return
    sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


__all__ = [
    "Log",
    "MAX_INT",
    "col",
    "digits",
    "hexdigits",
    "is_syntactic",
    "line",
    "lineno",
    "positional_range",
    "quote",
    "recursion_limit",
]
