# encoding: utf-8
from dataclasses import FrozenInstanceError
from unittest import TestCase

from mo_testing.fuzzytestcase import FuzzyTestCase

from expression_experiment.ast import BinaryExpression, Identifier, IntegerLiteral, Program


class TestAst(FuzzyTestCase):
    def test_leaves(self):
        self.assertEqual(str(IntegerLiteral(20)), "20")
        self.assertEqual(str(Identifier("dog2358")), "dog2358")

    def test_prefix(self):
        tree = Program(
            BinaryExpression(
                Identifier("x"),
                "+",
                BinaryExpression(IntegerLiteral(2), "*", IntegerLiteral(3)),
            )
        )
        self.assertEqual(str(tree), "(+ x (* 2 3))")

    def test_infix(self):
        tree = Program(
            BinaryExpression(
                BinaryExpression(Identifier("x"), "+", IntegerLiteral(2)),
                "*",
                IntegerLiteral(3),
            )
        )
        self.assertEqual(tree.to_infix(), "((x + 2) * 3)")
        self.assertEqual(Program(Identifier("y")).to_infix(), "y")

    def test_structural_equality(self):
        a = BinaryExpression(Identifier("a"), "**", IntegerLiteral(2))
        b = BinaryExpression(Identifier("a"), "**", IntegerLiteral(2))
        self.assertTrue(a == b)
        self.assertTrue(hash(a) == hash(b))
        self.assertFalse(a == BinaryExpression(IntegerLiteral(2), "**", Identifier("a")))

    def test_immutable(self):
        literal = IntegerLiteral(1)
        with TestCase.assertRaises(self, FrozenInstanceError):
            literal.value = 2
        program = Program(literal)
        with TestCase.assertRaises(self, FrozenInstanceError):
            program.body = Identifier("z")

    def test_long_integer(self):
        digits = "1234567890" * 600
        literal = IntegerLiteral.from_digits("00" + digits)
        self.assertTrue(literal.value == int(digits[:3000]) * 10 ** 3000 + int(digits[3000:]))
        self.assertTrue(str(literal) == digits)
        self.assertTrue(literal.to_infix() == digits)
        self.assertEqual(str(IntegerLiteral.from_digits("000")), "0")
        self.assertEqual(str(IntegerLiteral(10 ** 1200)), "1" + "0" * 1200)

    def test_deep_tree(self):
        tree = Identifier("x")
        for _ in range(5000):
            tree = BinaryExpression(Identifier("y"), "**", tree)
        self.assertTrue(str(Program(tree)) == "(** y " * 5000 + "x" + ")" * 5000)
        self.assertTrue(tree.to_infix() == "(y ** " * 5000 + "x" + ")" * 5000)
