import unittest

from lcterm.grammar.lexical import tokenize
from lcterm.grammar.parser import Parser, evaluate, parse
from lcterm.lang.error import EvalError, ParsingError, TokenizationError
from lcterm.pure.term import Abstraction, Application, Variable


class ParserTestCase(unittest.TestCase):

    def test_should_pass(self):
        cases = {
            "x": "x",
            "(x)": "x",
            "((x))": "x",
            "x y z": "(x y) z",
            "x (y z)": "x (y z)",
            "λx.x y": "λx.(x y)",
            "(λx.x) y": "(λx.x) y",
            "x λy.y z": "x (λy.(y z))",
            "λx, y.x": "λx.λy.x",
            "λx,y,z.x z (y z)": "λx.λy.λz.((x z) (y z))",
            "\\x -> x": "λx.x",
            "$x.x": "λx.x",
            "a (λx. x)k (y)": "((a (λx.x)) k) y",
            "$f -> ($x -> f(x x)) ($y -> f(y y))": "λf.((λx.(f (x x))) (λy.(f (y y))))",
            "  λx .  x  ": "λx.x",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, evaluate(case).expr, case)

    def test_structure(self):
        term = evaluate("(λx.x) y z")

        self.assertIsInstance(term, Application)
        self.assertIsInstance(term.function, Application)
        self.assertIsInstance(term.function.function, Abstraction)
        self.assertEqual(Variable("z"), term.argument)

    def test_should_fail(self):
        cases = {
            "": "empty",
            "   ": "empty",
            "(": "unexpectedly",
            "()": "empty parentheses",
            "x)": "mismatched",
            "(x": "mismatched",
            "((x) y": "mismatched",
            "λ.x": "expected",
            "λx x": "expected",
            "λx,.x": "expected",
            "λx.": "unexpectedly",
            "x ,y": "unexpected token",
        }
        for case, fragment in cases.items():
            with self.assertRaises(ParsingError, msg=case) as context:
                evaluate(case)
            self.assertIn(fragment, context.exception.msg, case)
            self.assertEqual(case, context.exception.expr, case)

    def test_error_position(self):
        cases = {
            "x)": (1, 2),
            "λx x": (3, 4),
            "λx.": (3, 4),
            "(x": (0, 1),
        }
        for case, (start, end) in cases.items():
            with self.assertRaises(ParsingError, msg=case) as context:
                evaluate(case)
            self.assertEqual(start, context.exception.start, case)
            self.assertEqual(end, context.exception.end, case)

    def test_eval_errors(self):
        should_raise = ["x # y", "λx.x)", "(λx.x", "λ"]
        for case in should_raise:
            self.assertRaises(EvalError, evaluate, case)

        self.assertRaises(TokenizationError, evaluate, "x # y")

    def test_parse_tokens(self):
        self.assertEqual(evaluate("x y"), parse(tokenize("x y")))
        self.assertEqual(evaluate("λx.x"), Parser("λx.x").parse())


if __name__ == '__main__':
    unittest.main()
