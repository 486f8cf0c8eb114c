# encoding: utf-8
from unittest import TestCase

from mo_testing.fuzzytestcase import FuzzyTestCase

from expression_experiment import VARIANTS, flat, iterative, left_recursive, parameterized
from mo_grammar import ParseException


class ExpressionLanguageTests(object):
    """
    EVERY VARIANT MUST PASS THESE
    """

    variant = None

    def assertTree(self, source, expected):
        self.assertEqual(str(self.variant.parse(source)), expected)

    def test_integer_literal(self):
        self.assertTree("20", "20")

    def test_identifier(self):
        self.assertTree("dog2358", "dog2358")

    def test_parenthesized(self):
        self.assertTree("(((hello * 3)))", "(* hello 3)")

    def test_precedence_levels(self):
        self.assertTree("x + 2 * 3", "(+ x (* 2 3))")
        self.assertTree("x * 2 + 3", "(+ (* x 2) 3)")

    def test_parentheses_override_precedence(self):
        self.assertTree("(x + 2) * 3", "(* (+ x 2) 3)")
        self.assertTree("x * (2 + 3)", "(* x (+ 2 3))")

    def test_long_string(self):
        self.assertTree(
            "10 + 3 * 8 - 2 * 50 + 1 + x / 10",
            "(+ (+ (- (+ 10 (* 3 8)) (* 2 50)) 1) (/ x 10))",
        )

    def test_crazy_string(self):
        self.assertTree(
            "5*(3/1-(7*(6-x-1))+8/9*0-2)",
            "(* 5 (- (+ (- (/ 3 1) (* 7 (- (- 6 x) 1))) (* (/ 8 9) 0)) 2))",
        )

    def test_left_associative(self):
        self.assertTree("a - b - c", "(- (- a b) c)")
        self.assertTree("a / b / c", "(/ (/ a b) c)")
        self.assertTree("a - b + c", "(+ (- a b) c)")

    def test_right_associative_power(self):
        self.assertTree("2 ** 3 ** 2", "(** 2 (** 3 2))")
        self.assertTree("(2 ** 3) ** 2", "(** (** 2 3) 2)")

    def test_power_binds_tightest(self):
        self.assertTree("2 * 3 ** 2", "(* 2 (** 3 2))")
        self.assertTree("2 ** 3 * 4", "(* (** 2 3) 4)")
        self.assertTree("a + b ** c ** d * e", "(+ a (* (** b (** c d)) e))")

    def test_whitespace_is_insignificant(self):
        self.assertTree("  x\t+\n2*3  ", "(+ x (* 2 3))")
        self.assertTree("x+2*3", "(+ x (* 2 3))")

    def test_leading_zeros(self):
        self.assertTree("007", "7")

    def test_long_integer_literal(self):
        digits = "9" * 5000
        program = self.variant.parse(digits)
        self.assertTrue(program.body.value == 10 ** 5000 - 1)
        self.assertTree(digits, digits)
        self.assertTree("000" + digits + " + 1", "(+ " + digits + " 1)")

    def test_deeply_nested_parentheses(self):
        self.assertTree("(" * 100 + "x" + ")" * 100, "x")
        self.assertTree("(" * 100 + "x + 2" + ")" * 100 + " * 3", "(* (+ x 2) 3)")

    def test_long_left_associative_chain(self):
        n = 1000
        self.assertTree(" + ".join(["x"] * n), "(+ " * (n - 1) + "x" + " x)" * (n - 1))
        program = self.variant.parse(" * ".join(["y"] * n))
        self.assertTrue(program.to_infix() == "(" * (n - 1) + "y" + " * y)" * (n - 1))

    def test_long_right_associative_chain(self):
        n = 1000
        self.assertTree(" ** ".join(["x"] * n), "(** x " * (n - 1) + "x" + ")" * (n - 1))


    def test_tree_structure(self):
        program = self.variant.parse("x + 2")
        self.assertEqual(program.body.op, "+")
        self.assertEqual(program.body.left.name, "x")
        self.assertEqual(program.body.right.value, 2)

    def test_round_trip(self):
        for source in [
            "x",
            "x + 2 * 3",
            "(x + 2) * 3",
            "10 + 3 * 8 - 2 * 50 + 1 + x / 10",
            "5*(3/1-(7*(6-x-1))+8/9*0-2)",
            "2 ** 3 ** 2",
            "(2 ** 3) ** 2",
        ]:
            program = self.variant.parse(source)
            expected = str(program)
            for other in VARIANTS:
                self.assertEqual(str(other.parse(program.to_infix())), expected)

    def test_rejects_bad_syntax(self):
        for source in ["", "(x + 2", "x + 2)", "x +", "2 * * 3", "x $ 2", "2 3", "2x", "()", "+ 2"]:
            result = self.variant.match(source)
            self.assertTrue(result.failed(), source)
            with TestCase.assertRaises(self, ParseException):
                self.variant.parse(source)

    def test_failure_message(self):
        result = self.variant.match("x +")
        self.assertEqual(result.exception.loc, 3)
        self.assertIn("found end of text (at char 3), (line:1, col:4)", result.message)
        self.assertIn("number", result.message)
        self.assertIn("id", result.message)

    def test_failure_position_on_later_line(self):
        result = self.variant.match("x +\n  (2 *\n  $)")
        self.assertEqual(result.exception.lineno, 3)
        self.assertEqual(result.exception.col, 3)
        self.assertEqual(result.exception.line, "  $)")


class TestLeftRecursive(ExpressionLanguageTests, FuzzyTestCase):
    variant = left_recursive.variant


class TestIterative(ExpressionLanguageTests, FuzzyTestCase):
    variant = iterative.variant


class TestParameterized(ExpressionLanguageTests, FuzzyTestCase):
    variant = parameterized.variant


class TestFlat(ExpressionLanguageTests, FuzzyTestCase):
    variant = flat.variant


class TestAllVariants(FuzzyTestCase):
    def test_names(self):
        self.assertEqual(
            [v.name for v in VARIANTS],
            ["left-recursive", "iterative", "parameterized", "flat"],
        )

    def test_same_trees(self):
        for source in [
            "1",
            "a+b+c",
            "a*b-c/d",
            "a - (b - c) * d ** e ** f / g",
            "((a))+((b)*(c))",
            "x1 ** y2 - 3 * 4 + z",
        ]:
            trees = [v.parse(source) for v in VARIANTS]
            for tree in trees[1:]:
                self.assertTrue(tree == trees[0], source)
                self.assertEqual(str(tree), str(trees[0]))

    def test_same_rejections(self):
        for source in ["(", "1 +", "* 2", "a b"]:
            self.assertEqual([v.match(source).failed() for v in VARIANTS], [True, True, True, True])

    def test_parse_is_semantics_of_match(self):
        for v in VARIANTS:
            program = v.semantics(v.grammar.match("a * (b + 1)")).tree()
            self.assertEqual(str(program), "(* a (+ b 1))")
