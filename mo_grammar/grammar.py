# encoding: utf-8
import sys
from contextlib import contextmanager

from mo_grammar import engine
from mo_grammar.enhancement import Apply, Case, Param
from mo_grammar.exceptions import GrammarException, ParseException
from mo_grammar.expressions import MatchFirst
from mo_grammar.nodes import NonterminalNode
from mo_grammar.tokens import AnyChar, Char, Empty, StringEnd
from mo_grammar.utils import Log, digits, hexdigits, is_syntactic, recursion_limit

BUILT_IN_RULES = None


class Rule(object):
    """
    A named rule: an ordered choice of alternatives, with optional
    parameters.  Names starting with an uppercase letter are syntactic
    (whitespace is skipped before every part), the others are lexical.
    """

    def __init__(self, name, body, params=(), description=None):
        self.name = name
        self.body = engine.CURRENT.normalize(body)
        self.params = tuple(params)
        self.description = description or name
        self.syntactic = is_syntactic(name)

    def arity(self):
        return self.body.arity()

    def alternatives(self):
        if isinstance(self.body, MatchFirst):
            return self.body.exprs
        return [self.body]

    def __str__(self):
        if self.params:
            return f"{self.name}<{', '.join(self.params)}> = {self.body}"
        return f"{self.name} = {self.body}"


class Grammar(object):
    """
    An ordered set of rules; the first rule is the default start rule.
    Rules not defined here are looked up in the super grammar (the
    built-in rules, by default).  The grammar is validated on construction
    and never changes after.  Rules given as keyword arguments can not be
    named ``name``, ``start`` or ``super_grammar``; pass a :class:`Rule` for those.

    Example::

        Exp, Term = map(Apply, ["Exp", "Term"])
        grammar = Grammar(
            "Sums",
            Exp=Term + (Literal("+") + Term)[...],
            Term=digit[1, ...],
        )
        grammar.match("1 + 22").succeeded()  # -> True
    """

    def __init__(self, name, *rules, super_grammar=None, start=None, **bodies):
        self.name = name
        # SETTINGS OF THE CURRENT ENGINE, FIXED FROM NOW ON
        current = engine.CURRENT
        self.white_chars = current.white_chars
        self.debug_actions = current.debugActions
        self.recursion_limit = current.recursion_limit
        self.super_grammar = super_grammar or BUILT_IN_RULES
        self.rules = {}
        for rule in list(rules) + [Rule(k, v) for k, v in bodies.items()]:
            if rule.name in self.rules:
                raise GrammarException(f"Duplicate declaration of rule {rule.name} in grammar {name}")
            self.rules[rule.name] = rule
        if not self.rules:
            raise GrammarException(f"Grammar {name} has no rules")
        self.start = start or next(iter(self.rules))

        self._bind_cases()
        self._validate()

    def get_rule(self, name):
        grammar = self
        while grammar:
            rule = grammar.rules.get(name)
            if rule is not None:
                return rule
            grammar = grammar.super_grammar
        raise GrammarException(f"Rule {name} is not declared in grammar {self.name}")

    def all_rules(self):
        if self.super_grammar:
            output = self.super_grammar.all_rules()
        else:
            output = {}
        output.update(self.rules)
        return output

    def _bind_cases(self):
        names = set()
        for rule in self.rules.values():
            for alternative in rule.alternatives():
                if isinstance(alternative, Case):
                    alternative.bind(rule.name)
                    if alternative.node_name in names:
                        raise GrammarException(f"Duplicate case {alternative.node_name} in grammar {self.name}")
                    names.add(alternative.node_name)

    def _validate(self):
        for rule in self.rules.values():
            for e in _walk(rule.body):
                if isinstance(e, Apply):
                    target = self.get_rule(e.rule_name)
                    if len(e.args) != len(target.params):
                        raise GrammarException(
                            f"Wrong number of arguments for {target.name} in {rule.name}:"
                            f" expecting {len(target.params)}, got {len(e.args)}"
                        )
                    for a in e.args:
                        if a.arity() != 1:
                            raise GrammarException(f"Argument {a} of {e} in {rule.name} must have arity 1")
                elif isinstance(e, Param):
                    if e.param_name not in rule.params:
                        raise GrammarException(f"Unknown parameter {e.param_name} in {rule.name}")
                elif isinstance(e, Case):
                    if e.node_name is None:
                        raise GrammarException(f"Case {e.case_name} in {rule.name} must be a top-level alternative")
                elif isinstance(e, MatchFirst):
                    e.check_arity(rule.name)

    def node_arities(self):
        """
        :return: MAP FROM EVERY NODE NAME (RULES AND CASES) TO THE NUMBER OF CHILDREN IT HAS
        """
        output = {}
        for rule in self.all_rules().values():
            output[rule.name] = rule.arity()
            for alternative in rule.alternatives():
                if isinstance(alternative, Case):
                    output[alternative.node_name] = alternative.expr.arity()
        return output

    def reachable_nodes(self, start=None):
        """
        :return: NAMES OF THE NODES A MATCH FROM start CAN PRODUCE
        """
        todo = [start or self.start]
        rules = set()
        while todo:
            name = todo.pop()
            if name in rules:
                continue
            rules.add(name)
            for e in _walk(self.get_rule(name).body):
                if isinstance(e, Apply):
                    todo.append(e.rule_name)

        output = set(rules)
        for name in rules:
            for alternative in self.get_rule(name).alternatives():
                if isinstance(alternative, Case):
                    output.add(alternative.node_name)
        return output

    def frames_needed(self, string):
        """
        :return: RECURSION LIMIT FOR MATCHING string, OR FOR EVALUATING ITS TREE
        """
        current = sys.getrecursionlimit()
        return max(current, min(self.recursion_limit, current + engine.FRAMES_PER_CHAR * len(string)))

    def match(self, string, start=None):
        """
        Match the whole string, starting with the given rule (default is the first rule)

        :return: MatchResult, WITH THE CONCRETE SYNTAX TREE, OR THE FAILURE
        """
        rule = self.get_rule(start or self.start)
        if rule.params:
            Log.error("Can not start with parameterized rule {{name}}", name=rule.name)

        state = MatchState(self, string, rule.syntactic)
        try:
            with recursion_limit(self.frames_needed(string)):
                end, nodes = Apply(rule.name)._parse(state, 0)
            if rule.syntactic:
                end = state.skip(end)
            if end < len(string):
                state.fail(end, "end of input")
        except ParseException:
            return MatchResult(self, string, None, state.exception())
        except RecursionError:
            return MatchResult(
                self, string, None, ParseException(string, max(state.failure_loc, 0), msg="Input is nested too deeply")
            )
        return MatchResult(self, string, nodes[0], None)

    def __str__(self):
        return self.name + " {\n" + "\n".join("  " + str(r) for r in self.rules.values()) + "\n}"


def _walk(element):
    # THE GRAMMAR IS A DAG OF ELEMENTS; RULES BREAK THE CYCLES
    todo = [element]
    seen = set()
    while todo:
        e = todo.pop()
        if e in seen:
            continue
        seen.add(e)
        yield e
        todo.extend(e.elements())


class MemoEntry(object):
    __slots__ = ["end", "node", "in_progress", "left_recursive"]

    def __init__(self):
        self.end = None
        self.node = None
        self.in_progress = True
        self.left_recursive = False


class MatchState(object):
    """
    EVERYTHING THAT CHANGES WHILE MATCHING ONE STRING; ONE PER CALL TO match()
    """

    def __init__(self, grammar, string, syntactic):
        self.grammar = grammar
        self.string = string
        self.syntactic = syntactic
        self.env = {}
        self.memo = {}
        self.skips = {}
        self.quiet = 0
        self.failure_loc = -1
        self.expected = []

    def skip(self, loc):
        end = self.skips.get(loc)
        if end is None:
            end, string, white = loc, self.string, self.grammar.white_chars
            while end < len(string) and string[end] in white:
                end += 1
            self.skips[loc] = end
        return end

    @contextmanager
    def quietly(self):
        """
        FAILURES INSIDE ARE NOT REPORTED
        """
        self.quiet += 1
        try:
            yield
        finally:
            self.quiet -= 1

    def expect(self, loc, description):
        if self.quiet:
            return
        if loc > self.failure_loc:
            self.failure_loc = loc
            self.expected = [description]
        elif loc == self.failure_loc and description not in self.expected:
            self.expected.append(description)

    def fail(self, loc, expr):
        self.expect(loc, str(expr))
        raise ParseException(self.string, loc)

    def exception(self):
        """
        :return: ParseException FOR THE RIGHTMOST FAILURE
        """
        if self.failure_loc < 0:
            return ParseException(self.string, 0)
        return ParseException(self.string, self.failure_loc, list(self.expected))

    def apply(self, rule, args, loc):
        """
        MEMOIZED APPLICATION OF rule AT loc, GROWING THE SEED OF A LEFT-RECURSIVE RULE
        """
        key = (rule.name, args, loc)
        memo = self.memo.get(key)
        if memo is not None:
            if memo.in_progress:
                memo.left_recursive = True
            if memo.node is None:
                raise ParseException(self.string, loc)
            return memo.end, memo.node

        memo = self.memo[key] = MemoEntry()
        try:
            end, node = self._evaluate(rule, args, loc)
        except ParseException:
            memo.in_progress = False
            raise

        if memo.left_recursive:
            # THE BODY REFERRED TO ITSELF, AND FAILED THERE.  NOW LET THAT
            # REFERENCE SUCCEED WITH THE PREVIOUS RESULT UNTIL NO LONGER MATCH IS FOUND
            while True:
                memo.end, memo.node = end, node
                try:
                    next_end, next_node = self._evaluate(rule, args, loc)
                except ParseException:
                    break
                if next_end <= end:
                    break
                end, node = next_end, next_node

        memo.end, memo.node = end, node
        memo.in_progress = False
        return end, node

    def _evaluate(self, rule, args, loc):
        env, syntactic = self.env, self.syntactic
        self.env = dict(zip(rule.params, args))
        self.syntactic = rule.syntactic
        try:
            end, nodes = rule.body._parse(self, loc)
        finally:
            self.env, self.syntactic = env, syntactic
        return end, NonterminalNode(rule.name, self.string, loc, end, nodes)


class MatchResult(object):
    """
    The outcome of :meth:`Grammar.match`: either the root of the concrete
    syntax tree, or the exception describing why the string does not match
    """

    def __init__(self, grammar, string, node, exception):
        self.grammar = grammar
        self.string = string
        self.node = node
        self.exception = exception

    def succeeded(self):
        return self.exception is None

    def failed(self):
        return self.exception is not None

    @property
    def message(self):
        if self.exception is None:
            return ""
        return self.exception.message

    def __repr__(self):
        if self.failed():
            return f"MatchResult(failed: {self.message})"
        return f"MatchResult({self.node!r})"


_elem, _sep = Param("elem"), Param("sep")

BUILT_IN_RULES = Grammar(
    "BuiltInRules",
    Rule("any", AnyChar(), description="any character"),
    Rule("end", StringEnd(), description="end of input"),
    Rule("letter", Char(test=str.isalpha).set_parser_name("a letter"), description="a letter"),
    Rule("lower", Char(test=str.islower).set_parser_name("a lowercase letter"), description="a lowercase letter"),
    Rule("upper", Char(test=str.isupper).set_parser_name("an uppercase letter"), description="an uppercase letter"),
    Rule("digit", Char(digits).set_parser_name("a digit"), description="a digit"),
    Rule("hexDigit", Char(hexdigits).set_parser_name("a hexadecimal digit"), description="a hexadecimal digit"),
    Rule("alnum", Apply("letter") | Apply("digit"), description="an alpha-numeric character"),
    Rule("space", Char(" \t\n\r").set_parser_name("a space"), description="a space"),
    Rule("ListOf", Apply("NonemptyListOf", _elem, _sep) | Apply("EmptyListOf", _elem, _sep), params=["elem", "sep"]),
    Rule("NonemptyListOf", _elem + (_sep + _elem)[...], params=["elem", "sep"]),
    Rule("EmptyListOf", Empty(), params=["elem", "sep"]),
)
