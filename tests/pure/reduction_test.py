import unittest
from unittest.mock import Mock, call

from lcterm.grammar.parser import evaluate
from lcterm.lang.error import ErrorHandler, GenericException, StepLimitExceeded
from lcterm.pure.reduction import Memo, Order, Reducer, reduce

OMEGA = "(λx.x x) (λx.x x)"


class ReductionTestCase(unittest.TestCase):

    def test_all_orders(self):
        cases = {
            "x": "x",
            "λx.x": "λx.x",
            "(λx.x) y": "y",
            "(λx.λy.x) a b": "a",
            "(λx.λy.y) a b": "b",
            "λz.((λx.x) z)": "λz.z",
            "(λn.λf.λx.f (n f x)) (λf.λx.f x)": "λf.λx.f (f x)",
            "(λx.x x) ((λy.y) z)": "z z",
            "(λx.λy.x y) y": "λa.y a",
            "(λm.λn.λf.λx.m f (n f x)) (λf.λx.f x) (λf.λx.f (f x))": "λf.λx.f (f (f x))",
        }
        for order in Order:
            for case, expected in cases.items():
                self.assertEqual(evaluate(expected), reduce(evaluate(case), order, max_steps=100), (order, case))

    def test_normal_form_untouched(self):
        for case in ["x", "λx.x", "x (λy.y z)"]:
            term = evaluate(case)
            for order in Order:
                self.assertIs(term, reduce(term, order), (order, case))

    def test_normal_order_skips_diverging_argument(self):
        term = evaluate(f"(λx.λy.x) (λz.z) ({OMEGA})")
        expected = evaluate("λy.y")

        self.assertEqual(expected, reduce(term, Order.NORMAL, max_steps=50))
        self.assertEqual(expected, reduce(term, Order.LAZY, max_steps=50))
        self.assertRaises(StepLimitExceeded, reduce, term, Order.APPLICATIVE, max_steps=50)

    def test_step_limit(self):
        for order in [Order.NORMAL, Order.APPLICATIVE]:
            with self.assertRaises(StepLimitExceeded) as context:
                reduce(evaluate(OMEGA), order, max_steps=50)
            self.assertEqual(50, context.exception.steps)
            self.assertEqual(evaluate(OMEGA), context.exception.term)

        with self.assertRaises(StepLimitExceeded) as context:
            reduce(evaluate("(λx.x) y"), max_steps=0)
        self.assertEqual(0, context.exception.steps)

        self.assertEqual(evaluate("y"), reduce(evaluate("(λx.x) y"), max_steps=1))
        self.assertEqual(evaluate("y"), reduce(evaluate("y"), max_steps=0))
        self.assertRaises(ValueError, Reducer, Order.NORMAL, -1)

    def test_lazy_detects_repetition(self):
        error_handler = Mock()
        result = reduce(evaluate(OMEGA), Order.LAZY, error_handler=error_handler)

        self.assertEqual(evaluate(OMEGA), result)
        error_handler.warn.assert_called_once()
        self.assertEqual(1, error_handler.register_step.call_count)

    def test_lazy_reaches_normal_form(self):
        should_pass = {
            "(λz.λt.z) ((λx.x) a) ((λx.x) a)": "a",
            "(λz.z) ((λx.x) a) ((λx.x) b)": "a b",
            "(λf.f (f a)) (λx.x)": "a",
        }
        for case, expected in should_pass.items():
            error_handler = Mock()
            result = reduce(evaluate(case), Order.LAZY, max_steps=50, error_handler=error_handler)

            self.assertFalse(result.is_reducible, case)
            self.assertEqual(evaluate(expected), result, case)
            error_handler.warn.assert_not_called()

    def test_lazy_memo(self):
        reducer = Reducer(Order.LAZY)
        result = reducer.beta_reduce(evaluate("(λx.x x) ((λy.y) z)"))

        self.assertEqual(evaluate("z z"), result)
        self.assertEqual(2, reducer.steps)
        self.assertIn(evaluate("(λy.y) z"), reducer.memo)
        self.assertEqual(evaluate("z"), reducer.memo.get(evaluate("(λw.w) z")))

    def test_steps_registered(self):
        term = evaluate("(λx.x x) ((λy.y) z)")
        cases = {
            Order.NORMAL: ["((λy.y) z) ((λy.y) z)", "z z"],
            Order.APPLICATIVE: ["z", "z z"],
            Order.LAZY: ["((λy.y) z) ((λy.y) z)", "z z"],
        }
        for order, expected in cases.items():
            error_handler = Mock()
            reduce(term, order, error_handler=error_handler)

            calls = [call("β", evaluate(expr)) for expr in expected]
            self.assertEqual(calls, error_handler.register_step.call_args_list, order)

    def test_trace(self):
        error_handler = ErrorHandler(fatal=False)
        reduce(evaluate("(λx.x x) ((λy.y) z)"), error_handler=error_handler)

        self.assertEqual([("β", "((λy.y) z) ((λy.y) z)"), ("β", "z z")], error_handler.clear_steps())
        self.assertEqual([], error_handler.steps)

    def test_order_parse(self):
        cases = {"normal": Order.NORMAL, "APPLICATIVE": Order.APPLICATIVE, " lazy ": Order.LAZY}
        for case, expected in cases.items():
            self.assertEqual(expected, Order.parse(case), case)

        self.assertRaises(GenericException, Order.parse, "eager")
        self.assertEqual(evaluate("y"), reduce(evaluate("(λx.x) y"), "applicative"))
        self.assertRaises(GenericException, reduce, evaluate("x"), "eager")


class MemoTestCase(unittest.TestCase):

    def test_memo(self):
        memo = Memo()
        redex, result = evaluate("(λx.x) y"), evaluate("y")
        memo.record(redex, result)

        self.assertTrue(memo.contains(evaluate("(λz.z) y")))
        self.assertNotIn(evaluate("(λz.z) w"), memo)
        self.assertIs(result, memo.get(evaluate("(λz.z) y")))

        other = evaluate("w")
        self.assertIs(other, memo.get(other))
        self.assertEqual(1, len(memo))
        self.assertEqual([redex], list(memo))
        self.assertEqual([(redex, result)], list(memo.items()))


if __name__ == '__main__':
    unittest.main()
