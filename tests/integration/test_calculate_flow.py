import io
import unittest

from fastapi.testclient import TestClient

from infix_calc.api.server import create_app
from infix_calc.engine import calculate
from infix_calc.main import run_cli
from infix_calc.utils.config_loader import CalculatorConfig

VALID_CASES = [
    ("Addition", "2 + 3", 5.0),
    ("Subtraction", "5 - 2", 3.0),
    ("Multiplication", "4 * 3", 12.0),
    ("Division", "10 / 2", 5.0),
    ("Decimals", "2.5 + 3.5", 6.0),
    ("Precedence 1", "2 + 3 * 4", 14.0),
    ("Precedence 2", "(2 + 3) * 4", 20.0),
    ("Precedence 3", "2 + 3 * 4 ^ 2", 50.0),
    ("Sqrt", "sqrt(16)", 4.0),
    ("Sin", "sin(0)", 0.0),
    ("Cos", "cos(0)", 1.0),
    ("Complex 1", "2 * (3 + 4) - 5", 9.0),
    ("Complex 2", "sqrt(9) + 2^3", 11.0),
    ("Negative start", "-5 + 3", -2.0),
    ("Negative middle", "5 + -3", 2.0),
    ("Negative parenthesis", "5 * (-3 + 2)", -5.0),
    ("Negative power", "-2 ^ 2", 4.0),
    ("Negative function", "sqrt(4) * -1", -2.0),
    ("Double negative", "5 - -3", 8.0),
]

ERROR_CASES = [
    ("Empty", "", "invalid_expression"),
    ("Double operator", "2 + + 3", "unexpected_token"),
    ("Double number", "2 3", "unexpected_token"),
    ("Starts with operator", "* 3", "leading_token"),
    ("Ends with operator", "3 +", "trailing_token"),
    ("Empty parens", "()", "unexpected_token"),
    ("Mismatched parens 1", "(2 + 3", "mismatched_parentheses"),
    ("Mismatched parens 2", "2 + 3)", "mismatched_parentheses"),
    ("Unknown function", "foo(5)", "unknown_function"),
    ("Division by zero", "5 / 0", "division_by_zero"),
    ("Implicit multiplication 1", "2(3)", "unexpected_token"),
    ("Implicit multiplication 2", "(2)(3)", "unexpected_token"),
    ("Invalid decimal", "2.3.4", "invalid_number_format"),
]


class CalculateFlowTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.client = TestClient(create_app())

    def test_valid_expressions_agree_across_interfaces(self) -> None:
        for name, expression, expected in VALID_CASES:
            with self.subTest(name=name):
                self.assertAlmostEqual(calculate(expression), expected, places=9)

                response = self.client.post("/calculate", json={"expression": expression})
                self.assertEqual(response.status_code, 200)
                self.assertAlmostEqual(response.json()["result"], expected, places=9)

                output = io.StringIO()
                self.assertEqual(run_cli(expression, CalculatorConfig(), output=output), 0)
                self.assertAlmostEqual(float(output.getvalue()), expected, places=9)

    def test_invalid_expressions_report_errors_everywhere(self) -> None:
        for name, expression, code in ERROR_CASES:
            with self.subTest(name=name):
                response = self.client.post("/calculate", json={"expression": expression})
                self.assertEqual(response.status_code, 400)
                body = response.json()
                self.assertIsNone(body["result"])
                self.assertEqual(body["code"], code)

                output = io.StringIO()
                if expression:
                    self.assertEqual(run_cli(expression, CalculatorConfig(), output=output), 1)
                    self.assertTrue(output.getvalue().startswith("Error: "))


if __name__ == "__main__":
    unittest.main()
