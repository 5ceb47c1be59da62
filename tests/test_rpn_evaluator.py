import math
import unittest

from core.errors import ErrorKind, Failure
from core.operators import Operators
from core.rpn_evaluator import RPNEvaluator


class TestRPNEvaluator(unittest.TestCase):
    def test_arithmetic(self):
        self.assertEqual(RPNEvaluator.evaluate("3 4 2 * +"), 11.0)
        self.assertEqual(RPNEvaluator.evaluate(["10", "4", "-"]), 6.0)
        self.assertEqual(RPNEvaluator.evaluate("2 3 ^ 2 ^"), 64.0)
        self.assertEqual(RPNEvaluator.evaluate("10 3 %"), 1.0)
        self.assertEqual(RPNEvaluator.evaluate("-7 3 %"), -1.0)
        self.assertEqual(RPNEvaluator.evaluate("5 -3 -"), 8.0)

    def test_ieee_division(self):
        self.assertEqual(RPNEvaluator.evaluate("1 0 /"), math.inf)
        self.assertEqual(RPNEvaluator.evaluate("-1 0 /"), -math.inf)
        self.assertTrue(math.isnan(RPNEvaluator.evaluate("0 0 /")))
        self.assertTrue(math.isnan(RPNEvaluator.evaluate("1 0 %")))

    def test_functions(self):
        self.assertEqual(RPNEvaluator.evaluate("16 sqrt"), 4.0)
        self.assertEqual(RPNEvaluator.evaluate("0 sin"), 0.0)
        self.assertEqual(RPNEvaluator.evaluate("0 COS"), 1.0)
        self.assertEqual(RPNEvaluator.evaluate("-2.5 abs"), 2.5)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 log"), 0.0)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1000 log10"), 3.0)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 exp"), math.e)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 cot"), 1 / math.tan(1))
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 acot"), math.pi / 4)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 asin"), math.pi / 2)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 acos"), 0.0)
        self.assertAlmostEqual(RPNEvaluator.evaluate("1 atan"), math.pi / 4)
        self.assertAlmostEqual(RPNEvaluator.evaluate("3.141592653589793 deg"), 180.0)
        self.assertAlmostEqual(RPNEvaluator.evaluate("180 rad"), math.pi)

    def test_domain_errors_give_nan(self):
        self.assertTrue(math.isnan(RPNEvaluator.evaluate("-1 sqrt")))
        self.assertEqual(RPNEvaluator.evaluate("0 log"), -math.inf)

    def test_empty_sequence(self):
        self.assertEqual(RPNEvaluator.evaluate([]), Failure(ErrorKind.BAD_RPN))
        self.assertEqual(RPNEvaluator.evaluate(""), Failure(ErrorKind.BAD_RPN))

    def test_insufficient_operands(self):
        self.assertEqual(RPNEvaluator.evaluate("+").kind, ErrorKind.SYNTAX_ERROR)
        self.assertEqual(RPNEvaluator.evaluate("1 *").kind, ErrorKind.SYNTAX_ERROR)
        self.assertEqual(RPNEvaluator.evaluate("sqrt").kind, ErrorKind.SYNTAX_ERROR)

    def test_unknown_token(self):
        self.assertEqual(RPNEvaluator.evaluate("2 foo"), Failure(ErrorKind.SYNTAX_ERROR, "foo"))
        self.assertEqual(RPNEvaluator.evaluate("1.2.3").kind, ErrorKind.SYNTAX_ERROR)

    def test_atan2_fails_fast(self):
        self.assertEqual(RPNEvaluator.evaluate("1 2 atan2"),
                         Failure(ErrorKind.UNSUPPORTED_FUNCTION, "atan2"))

    def test_trailing_stack_values(self):
        self.assertEqual(RPNEvaluator.evaluate("2 3", allow_partial=False).kind,
                         ErrorKind.SYNTAX_ERROR)
        with self.assertLogs("core.rpn_evaluator", level="WARNING"):
            self.assertEqual(RPNEvaluator.evaluate("2 3", allow_partial=True), 3.0)

    def test_result_is_builtin_float(self):
        self.assertIs(type(RPNEvaluator.evaluate("1 2 +")), float)


class TestOperators(unittest.TestCase):
    def test_fmod_sign_follows_dividend(self):
        self.assertEqual(Operators.mod(-7.0, 3.0), -1.0)
        self.assertEqual(Operators.mod(7.0, -3.0), 1.0)

    def test_deg_rad_inverse(self):
        self.assertAlmostEqual(Operators.rad(Operators.deg(1.25)), 1.25)


if __name__ == "__main__":
    unittest.main()
