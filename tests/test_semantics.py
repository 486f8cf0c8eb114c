# encoding: utf-8
from unittest import TestCase

from mo_testing.fuzzytestcase import FuzzyTestCase

from mo_grammar import *

Sum, Num = Apply("Sum"), Apply("Num")


def sum_grammar():
    return Grammar(
        "Sums",
        Sum=(Sum + "+" + Num).as_case("plus") | Num,
        Num=digit[1, ...],
    )


def add(left, _, right):
    return left + right


def to_int(digits):
    return int("".join(digits))


class TestSemantics(FuzzyTestCase):
    def test_evaluate(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation("value", {"Sum_plus": add, "Num": to_int})
        self.assertEqual(semantics(grammar.match("1 + 20 + 300")).value(), 321)

    def test_passthrough(self):
        # Sum HAS ARITY 1, SO IT NEEDS NO ACTION
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation("value", {"Sum_plus": add, "Num": to_int})
        self.assertEqual(semantics(grammar.match("42")).value(), 42)

    def test_default_terminal_and_iteration(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation("digits", {"Sum_plus": lambda l, o, r: (l, o, r)})
        self.assertEqual(semantics(grammar.match("12")).digits(), ("1", "2"))
        self.assertEqual(semantics(grammar.match("1+2")).digits(), (("1",), "+", ("2",)))

    def test_many_operations(self):
        grammar = sum_grammar()
        semantics = (
            Semantics(grammar)
            .add_operation("value", {"Sum_plus": add, "Num": to_int})
            .add_operation("count", {"Sum_plus": lambda l, _, r: l + r, "Num": lambda _: 1})
        )
        evaluation = semantics(grammar.match("7+8+9"))
        self.assertEqual(evaluation.value(), 24)
        self.assertEqual(evaluation.count(), 3)

    def test_special_actions(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation(
            "text",
            {
                "_nonterminal": lambda *children: "".join(children),
                "_iter": lambda *children: "".join(children),
                "_terminal": lambda text: text.strip(),
            },
        )
        self.assertEqual(semantics(grammar.match("1 + 23")).text(), "1+23")

    def test_missing_action(self):
        grammar = sum_grammar()
        with self.assertRaises("Missing semantic action for Sum_plus"):
            Semantics(grammar).add_operation("value", {"Num": to_int})

    def test_action_for_unknown_rule(self):
        grammar = sum_grammar()
        with self.assertRaises("which is not a rule in grammar"):
            Semantics(grammar).add_operation("value", {"Sum_plus": add, "Product": add})

    def test_action_with_wrong_arity(self):
        grammar = sum_grammar()
        with self.assertRaises("has the wrong number of parameters"):
            Semantics(grammar).add_operation("value", {"Sum_plus": lambda left, right: left})

    def test_action_with_defaults(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation(
            "value", {"Sum_plus": lambda left, op, right, extra=0: left + right + extra, "Num": to_int}
        )
        self.assertEqual(semantics(grammar.match("1+2")).value(), 3)

    def test_action_must_be_callable(self):
        grammar = sum_grammar()
        with self.assertRaises("is not callable"):
            Semantics(grammar).add_operation("value", {"Sum_plus": add, "Num": 3})

    def test_unreachable_action_is_allowed(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation(
            "value", {"Sum_plus": add, "Num": to_int, "letter": lambda c: c}
        )
        self.assertEqual(semantics(grammar.match("2+2")).value(), 4)

    def test_duplicate_operation(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation("value", {"Sum_plus": add})
        with self.assertRaises("already defined"):
            semantics.add_operation("value", {"Sum_plus": add})

    def test_unknown_operation(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation("value", {"Sum_plus": add})
        with self.assertRaises("No operation size"):
            semantics(grammar.match("1")).size()

    def test_failed_match(self):
        grammar = sum_grammar()
        calls = []
        semantics = Semantics(grammar).add_operation(
            "value", {"Sum_plus": lambda *args: calls.append(args), "Num": lambda d: calls.append(d)}
        )
        with TestCase.assertRaises(self, ParseException):
            semantics(grammar.match("1 + "))
        self.assertEqual(len(calls), 0)

    def test_match_from_other_grammar(self):
        semantics = Semantics(sum_grammar()).add_operation("value", {"Sum_plus": add})
        with self.assertRaises("Expecting a match from grammar"):
            semantics(sum_grammar().match("1"))

    def test_parameterized_rule_action(self):
        grammar = Grammar("Lists", List=Apply("NonemptyListOf", Num, ","), Num=digit[1, ...])
        semantics = Semantics(grammar).add_operation(
            "value",
            {
                "NonemptyListOf": lambda first, _, rest: [first] + list(rest),
                "Num": to_int,
            },
        )
        self.assertEqual(semantics(grammar.match("1, 22, 333")).value(), [1, 22, 333])

    def test_deep_tree(self):
        grammar = sum_grammar()
        semantics = Semantics(grammar).add_operation("value", {"Sum_plus": add, "Num": to_int})
        self.assertEqual(semantics(grammar.match("+".join(["1"] * 3000))).value(), 3000)
