import unittest

from infix_calc.engine.calculator import calculate
from infix_calc.engine.errors import ExpressionTooLongError, UnexpectedCharacterError
from infix_calc.engine.utils import normalize_math_unicode, prepare_expression


class EngineUtilsTestCase(unittest.TestCase):
    def test_prepare_strips_whitespace(self) -> None:
        self.assertEqual(prepare_expression("  2 + 2 \n"), "2 + 2")

    def test_prepare_enforces_max_length(self) -> None:
        with self.assertRaises(ExpressionTooLongError) as ctx:
            prepare_expression("1 + 2 + 3", max_length=5)
        self.assertEqual(ctx.exception.code, "expression_too_long")
        self.assertEqual(prepare_expression("1" * 50, max_length=None), "1" * 50)

    def test_prepare_handles_none(self) -> None:
        self.assertEqual(prepare_expression(None), "")  # type: ignore[arg-type]

    def test_normalize_unicode_math(self) -> None:
        self.assertEqual(normalize_math_unicode("2³ × 4 − 1"), "2^3 * 4 - 1")
        self.assertEqual(normalize_math_unicode("10⁻² ÷ 5"), "10^-2 / 5")

    def test_normalized_text_evaluates(self) -> None:
        self.assertEqual(calculate(prepare_expression("2³ × 4 − 1", normalize_unicode=True)), 31.0)
        self.assertAlmostEqual(calculate(prepare_expression("10⁻²", normalize_unicode=True)), 0.01)

    def test_unicode_is_rejected_without_normalization(self) -> None:
        with self.assertRaises(UnexpectedCharacterError):
            calculate(prepare_expression("2 × 3"))


if __name__ == "__main__":
    unittest.main()
